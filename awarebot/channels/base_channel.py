"""
Base Channel Module
==================

Interface for presentation channels that feed user input to the
response router and display its replies.
"""

from abc import ABC, abstractmethod

from ..chatbot import ResponseRouter, SessionMemory


class BaseChannel(ABC):
    """
    Abstract base class for presentation channels.

    A channel owns one session: it creates the SessionMemory, reads
    input, passes it to the router and renders the reply.
    """

    def __init__(self, router: ResponseRouter):
        self.router = router
        self.memory = SessionMemory()
        self.is_running = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Channel name identifier."""
        pass

    @abstractmethod
    def run(self) -> int:
        """
        Run the session until the user leaves.

        Returns:
            int: Process exit status
        """
        pass

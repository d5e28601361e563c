"""
Session Memory
==============

Per-session memory for the conversation: the interest the user stated
and the last topic a tip was given for.
"""

from dataclasses import dataclass
from typing import Optional


def _require_topic(topic: str) -> str:
    if not topic or not topic.strip():
        raise ValueError("Topic must be a non-empty string")
    return topic


@dataclass
class SessionMemory:
    """Mutable memory for a single conversation session."""
    interest: Optional[str] = None
    last_topic: Optional[str] = None

    def set_interest(self, topic: str):
        """Remember the user's stated interest, replacing any earlier one."""
        self.interest = _require_topic(topic)

    def get_interest(self) -> Optional[str]:
        return self.interest

    def set_last_topic(self, topic: str):
        """Remember the topic of the last tip given."""
        self.last_topic = _require_topic(topic)

    def get_last_topic(self) -> Optional[str]:
        return self.last_topic

    def clear(self):
        """Forget everything, as at session start."""
        self.interest = None
        self.last_topic = None

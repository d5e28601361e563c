"""
Channels module

Presentation channels that connect a user to the response router.
"""

from .base_channel import BaseChannel
from .console import ConsoleChannel
from .voice import VoiceGreeting

__all__ = [
    "BaseChannel",
    "ConsoleChannel",
    "VoiceGreeting"
]

"""
Error Handling
==============

Exception hierarchy for the awareness bot.

- ``KnowledgeBaseError``: malformed static tables, raised at construction
- ``UnknownTopicError``: tip/follow-up lookup for a topic that does not exist
- ``ConfigurationError``: unreadable or invalid settings
- ``AssetError``: optional asset (greeting audio) missing or unplayable
"""

from typing import Optional


class AwareBotError(Exception):
    """Base exception for awareness bot errors."""

    def __init__(self, message: str, original_error: Optional[Exception] = None, **kwargs):
        super().__init__(message)
        self.original_error = original_error
        self.metadata = kwargs


class KnowledgeBaseError(AwareBotError):
    """Exception raised when the static knowledge tables are malformed."""
    pass


class UnknownTopicError(KnowledgeBaseError):
    """Exception raised when a topic lookup misses the topic tables."""

    def __init__(self, topic: str):
        super().__init__(f"Unknown topic: {topic!r}", topic=topic)
        self.topic = topic


class ConfigurationError(AwareBotError):
    """Exception raised for configuration issues."""
    pass


class AssetError(AwareBotError):
    """Exception raised when an optional asset cannot be loaded or played."""

    def __init__(self, message: str, path: str = "", original_error: Optional[Exception] = None):
        super().__init__(message, original_error=original_error, path=path)
        self.path = path


__all__ = [
    "AwareBotError",
    "KnowledgeBaseError",
    "UnknownTopicError",
    "ConfigurationError",
    "AssetError",
]

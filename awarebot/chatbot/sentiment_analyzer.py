"""
Sentiment Detection
===================

Keyword-based sentiment detection with canned, supportive replies.
A keyword anywhere in the text counts as a match; the first keyword in
table order wins.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


SENTIMENT_REPLIES: Tuple[Tuple[str, str], ...] = (
    ("worried", "It's okay to feel worried. Let's go step by step."),
    ("curious", "Great! Curiosity helps you learn—ask me anything!"),
    ("frustrated", "I understand it can be tricky. How can I clarify things?"),
)


@dataclass(frozen=True)
class SentimentMatch:
    """Sentiment keyword found in the text and the reply it maps to."""
    keyword: str
    reply: str


class SentimentDetector:
    """Matches sentiment keywords against user input."""

    def __init__(self, replies: Sequence[Tuple[str, str]] = SENTIMENT_REPLIES):
        self.replies: Tuple[Tuple[str, str], ...] = tuple(
            (keyword.lower(), reply) for keyword, reply in replies
        )

    def detect(self, text: str) -> Optional[SentimentMatch]:
        """
        Detect a sentiment keyword in text.

        Args:
            text: Text to analyze

        Returns:
            The first matching keyword with its reply, or None
        """
        text_lower = text.lower()
        for keyword, reply in self.replies:
            if keyword in text_lower:
                logger.debug("Sentiment keyword detected: %s", keyword)
                return SentimentMatch(keyword=keyword, reply=reply)
        return None

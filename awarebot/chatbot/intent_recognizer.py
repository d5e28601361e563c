"""
Phrase-Based Intent Recognition
===============================

Fixed phrase tables for the conversational intents the router checks:
interest capture, recommendation requests, follow-ups and small talk.
All checks are plain substring or prefix tests on normalized text.
"""

from typing import Optional, Sequence, Tuple


INTEREST_PREFIXES: Tuple[str, ...] = ("i'm interested in ", "i am interested in ")
RECOMMEND_PHRASES: Tuple[str, ...] = ("recommend", "suggest")
FOLLOW_UP_PHRASES: Tuple[str, ...] = ("tell me more", "more info")

SMALL_TALK: Tuple[Tuple[str, str], ...] = (
    ("how are you", "I'm just a bot, but I'm running smoothly! How can I help you?"),
    ("purpose", "I help you learn cybersecurity basics—just ask me anything!"),
    ("what can i ask", "You can ask about phishing, passwords, privacy, or other security topics."),
)


def normalize(text: str) -> str:
    """Trim and lower-case raw input."""
    return text.strip().lower()


def contains_any(text: str, phrases: Sequence[str]) -> bool:
    return any(phrase in text for phrase in phrases)


def extract_interest(text: str) -> Optional[str]:
    """
    Extract the topic from an "I'm interested in X" statement.

    The topic is the last whitespace-delimited word of the text, so
    "i'm interested in online privacy" yields "privacy".

    Returns:
        The topic, or None if the text is not an interest statement
    """
    if not text.startswith(INTEREST_PREFIXES):
        return None
    return text.split()[-1]


def is_recommendation_request(text: str) -> bool:
    return contains_any(text, RECOMMEND_PHRASES)


def is_follow_up_request(text: str) -> bool:
    return contains_any(text, FOLLOW_UP_PHRASES)


def match_small_talk(text: str, table: Sequence[Tuple[str, str]] = SMALL_TALK) -> Optional[str]:
    """Return the canned reply for the first small-talk phrase in text."""
    for phrase, reply in table:
        if phrase in text:
            return reply
    return None

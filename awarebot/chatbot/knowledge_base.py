"""
Knowledge Base
==============

Static cybersecurity-awareness content: the question bank, randomized
topic tips and "tell me more" follow-ups.

Every table is an ordered tuple of pairs. Iteration order is matching
priority, so the first trigger or topic found in the input wins.
"""

import logging
import random
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

from ..error_handling import KnowledgeBaseError, UnknownTopicError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QAEntry:
    """A trigger phrase and its fixed answer."""
    trigger: str
    answer: str

    def matches(self, text: str) -> bool:
        """Check whether the trigger occurs anywhere in the text."""
        return self.trigger in text.lower()


QUESTION_BANK: Tuple[QAEntry, ...] = (
    QAEntry("what is phishing", "Phishing is a social engineering attack where attackers impersonate legitimate institutions to steal sensitive data."),
    QAEntry("how to spot fake emails", "Check for poor grammar, mismatched URLs, sender addresses, and unexpected attachments."),
    QAEntry("what is a strong password", "A strong password is at least 12 characters long and includes uppercase, lowercase, numbers, and symbols."),
    QAEntry("how to manage passwords", "Use a reputable password manager to generate and store unique passwords."),
    QAEntry("what is two factor authentication", "2FA adds a second verification step, such as a text code or app notification."),
    QAEntry("why update software", "Software updates often include security patches that fix vulnerabilities."),
    QAEntry("what is malware", "Malware is malicious software designed to damage or gain unauthorized access to systems."),
    QAEntry("how to avoid malware", "Avoid downloading attachments from unknown senders and keep antivirus enabled."),
    QAEntry("what is secure browsing", "Secure browsing means using HTTPS connections and avoiding suspicious websites."),
    QAEntry("how to recognize secure websites", "Look for HTTPS and a padlock icon in the address bar."),
    QAEntry("what is vpn", "A VPN encrypts your internet traffic and hides your IP address."),
    QAEntry("why use vpn", "VPNs protect your data on public networks and maintain privacy."),
    QAEntry("what is encryption", "Encryption converts data into a coded form to prevent unauthorized access."),
    QAEntry("what is social engineering", "Social engineering uses psychological manipulation to trick users into revealing information."),
    QAEntry("how to prevent social engineering", "Be cautious of unsolicited requests and verify identities before sharing info."),
    QAEntry("what is ransomware", "Ransomware encrypts your files and demands payment to restore access."),
    QAEntry("how to protect against ransomware", "Maintain regular backups and update your security software."),
    QAEntry("how to report phishing", "Forward phishing emails to your IT department or the service provider."),
    QAEntry("what is antivirus", "Antivirus software detects and removes malware."),
    QAEntry("how to choose antivirus", "Select reputable software with regular update support."),
    QAEntry("what is adware", "Adware displays unwanted ads and may track browsing habits."),
    QAEntry("how to remove adware", "Use antivirus or anti-adware tools to scan and remove it."),
    QAEntry("what is spam", "Spam is unsolicited bulk messages, often used for phishing or advertising."),
    QAEntry("how to block spam", "Use email filters and never subscribe to unknown mailing lists."),
    QAEntry("what is firewall", "A firewall monitors and controls incoming and outgoing network traffic."),
    QAEntry("why use firewall", "Firewalls protect networks from unauthorized access."),
    QAEntry("what is public wi-fi risk", "Public Wi-Fi can be insecure, allowing attackers to intercept your traffic."),
    QAEntry("how to secure wi-fi", "Use WPA2/WPA3 encryption and a strong password for your network."),
    QAEntry("what is shoulder surfing", "Shoulder surfing is observing someone’s screen without permission."),
    QAEntry("how to prevent shoulder surfing", "Position your screen away from others and use privacy filters."),
)

TOPIC_TIPS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("phishing", (
        "Be cautious of emails asking for personal information.",
        "Verify sender addresses before clicking any link.",
        "Never enter credentials on sites linked from email.",
    )),
    ("password", (
        "Use a passphrase of 4+ words you can remember.",
        "Enable 2FA for all critical accounts.",
        "Never reuse passwords across sites.",
    )),
    ("privacy", (
        "Review app permissions on your phone regularly.",
        "Use a VPN on public Wi-Fi.",
        "Check privacy settings on social media.",
    )),
)

FOLLOW_UPS: Tuple[Tuple[str, str], ...] = (
    ("phishing", "More on phishing: attackers often use social pressure—always pause and verify."),
    ("password", "On passwords: update them periodically and consider a password manager."),
    ("privacy", "For privacy: limit what you share publicly and review app data settings."),
)


class KnowledgeBase:
    """
    Read-only store of Q&A entries, topic tips and follow-ups.

    Safe to share between sessions: nothing here mutates after
    construction. Randomness for tip selection is supplied by the caller.
    """

    def __init__(self,
                 entries: Iterable[QAEntry],
                 topic_tips: Sequence[Tuple[str, Sequence[str]]],
                 follow_ups: Sequence[Tuple[str, str]],
                 rng: Optional[random.Random] = None):
        """
        Build and validate the knowledge base.

        Args:
            entries: Q&A entries in matching priority order
            topic_tips: (topic, tips) pairs in matching priority order
            follow_ups: (topic, elaboration) pairs
            rng: Default random source for ``tip_for``

        Raises:
            KnowledgeBaseError: If any table is malformed
        """
        self._entries: Tuple[QAEntry, ...] = tuple(entries)
        self._topic_tips: Tuple[Tuple[str, Tuple[str, ...]], ...] = tuple(
            (topic, tuple(tips)) for topic, tips in topic_tips
        )
        self._tips_by_topic: Dict[str, Tuple[str, ...]] = dict(self._topic_tips)
        self._follow_ups: Dict[str, str] = dict(follow_ups)
        self._rng = rng or random.Random()

        self._validate(follow_ups)

        logger.info(
            "Knowledge base loaded: %d entries, %d topics",
            len(self._entries), len(self._topic_tips)
        )

    @classmethod
    def default(cls, rng: Optional[random.Random] = None) -> "KnowledgeBase":
        """Build the knowledge base from the built-in tables."""
        return cls(QUESTION_BANK, TOPIC_TIPS, FOLLOW_UPS, rng=rng)

    def _validate(self, follow_ups: Sequence[Tuple[str, str]]):
        seen = set()
        for entry in self._entries:
            if not entry.trigger or entry.trigger != entry.trigger.lower():
                raise KnowledgeBaseError(f"Trigger must be non-empty lowercase text: {entry.trigger!r}")
            if not entry.answer:
                raise KnowledgeBaseError(f"Empty answer for trigger {entry.trigger!r}")
            if entry.trigger in seen:
                raise KnowledgeBaseError(f"Duplicate trigger: {entry.trigger!r}")
            seen.add(entry.trigger)

        if len(self._tips_by_topic) != len(self._topic_tips):
            raise KnowledgeBaseError("Duplicate topic in topic tips")
        if len(self._follow_ups) != len(follow_ups):
            raise KnowledgeBaseError("Duplicate topic in follow-ups")

        for topic, tips in self._topic_tips:
            if not topic or topic != topic.lower():
                raise KnowledgeBaseError(f"Topic must be non-empty lowercase text: {topic!r}")
            if not tips:
                raise KnowledgeBaseError(f"Topic {topic!r} has no tips")
            if topic not in self._follow_ups:
                raise KnowledgeBaseError(f"Topic {topic!r} has no follow-up")

    @property
    def entries(self) -> Tuple[QAEntry, ...]:
        return self._entries

    @property
    def topics(self) -> Tuple[str, ...]:
        """Topic names in matching priority order."""
        return tuple(topic for topic, _ in self._topic_tips)

    def find_answer(self, text: str) -> Optional[str]:
        """
        Look up a fixed answer for the text.

        Args:
            text: User input

        Returns:
            Answer of the first entry whose trigger occurs in the text, or None
        """
        for entry in self._entries:
            if entry.matches(text):
                return entry.answer
        return None

    def match_topic(self, text: str) -> Optional[str]:
        """Return the first topic whose name occurs in the text."""
        text_lower = text.lower()
        for topic, _ in self._topic_tips:
            if topic in text_lower:
                return topic
        return None

    def tips(self, topic: str) -> Tuple[str, ...]:
        """Get every tip configured for a topic."""
        try:
            return self._tips_by_topic[topic]
        except KeyError:
            raise UnknownTopicError(topic) from None

    def tip_for(self, topic: str, rng: Optional[random.Random] = None) -> str:
        """
        Pick one tip for the topic uniformly at random.

        Args:
            topic: A known topic name
            rng: Random source; the knowledge base default is used if omitted

        Raises:
            UnknownTopicError: If the topic is not in the tip table
        """
        return (rng or self._rng).choice(self.tips(topic))

    def has_follow_up(self, topic: str) -> bool:
        return topic in self._follow_ups

    def follow_up_for(self, topic: str) -> str:
        """Get the elaboration for a topic, raising UnknownTopicError if absent."""
        try:
            return self._follow_ups[topic]
        except KeyError:
            raise UnknownTopicError(topic) from None

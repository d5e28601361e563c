"""
Response Router
===============

Ordered matching pipeline that turns one line of user input into one
reply. Strategies are tried in a fixed priority order and the first
one that matches wins:

1. sentiment keyword
2. interest capture ("i'm interested in X")
3. interest recall ("recommend" / "suggest", only with a stored interest)
4. topic tip
5. follow-up on the last topic ("tell me more" / "more info")
6. small talk
7. question bank lookup
8. fallback

All conversation state lives in the SessionMemory passed to each call.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from . import intent_recognizer
from .fallback_handler import FallbackHandler
from .knowledge_base import KnowledgeBase
from .memory import SessionMemory
from .sentiment_analyzer import SentimentDetector

logger = logging.getLogger(__name__)


RECOMMENDATION_TEMPLATE = "As someone interested in {interest}, you might also explore secure backups."
INTEREST_ACK_TEMPLATE = "Great! I'll remember you're interested in {topic}."


class Strategy(Enum):
    """Matching strategies, in priority order."""
    SENTIMENT = "sentiment"
    INTEREST_CAPTURE = "interest_capture"
    INTEREST_RECALL = "interest_recall"
    TOPIC_TIP = "topic_tip"
    FOLLOW_UP = "follow_up"
    SMALL_TALK = "small_talk"
    QUESTION_BANK = "question_bank"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class RouteResult:
    """Reply text and the strategy that produced it."""
    strategy: Strategy
    text: str
    topic: Optional[str] = None


class ResponseRouter:
    """
    Dispatches user input to the first matching response strategy.

    The router holds no conversation state of its own; the knowledge base
    and sentiment table are read-only and the random source only feeds
    tip selection.
    """

    def __init__(self,
                 knowledge_base: Optional[KnowledgeBase] = None,
                 sentiment: Optional[SentimentDetector] = None,
                 fallback: Optional[FallbackHandler] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize the router.

        Args:
            knowledge_base: Question bank and topic tables; defaults to the built-in tables
            sentiment: Sentiment detector; defaults to the built-in replies
            fallback: Fallback reply generator
            rng: Random source for tip selection, one per session
        """
        self.knowledge_base = knowledge_base or KnowledgeBase.default()
        self.sentiment = sentiment or SentimentDetector()
        self.fallback = fallback or FallbackHandler()
        self.rng = rng or random.Random()

    def respond(self, raw_input: str, memory: SessionMemory, name: str) -> str:
        """
        Produce the reply for one line of input.

        Args:
            raw_input: Line as typed by the user
            memory: Session memory, updated in place
            name: User display name, used by the fallback reply

        Returns:
            Non-empty reply text
        """
        return self.route(raw_input, memory, name).text

    def route(self, raw_input: str, memory: SessionMemory, name: str) -> RouteResult:
        """
        Route one line of input and report which strategy answered.

        Raises:
            ValueError: If the input is empty or whitespace only
        """
        text = intent_recognizer.normalize(raw_input)
        if not text:
            raise ValueError("Cannot route empty input")

        result = (
            self._match_sentiment(text)
            or self._capture_interest(text, memory)
            or self._recall_interest(text, memory)
            or self._match_topic(text, memory)
            or self._follow_up(text, memory)
            or self._small_talk(text)
            or self._lookup_question(text)
            or RouteResult(Strategy.FALLBACK, self.fallback.handle(text, name))
        )

        logger.debug("Routed input via %s", result.strategy.value)
        return result

    def _match_sentiment(self, text: str) -> Optional[RouteResult]:
        match = self.sentiment.detect(text)
        if match is None:
            return None
        return RouteResult(Strategy.SENTIMENT, match.reply)

    def _capture_interest(self, text: str, memory: SessionMemory) -> Optional[RouteResult]:
        topic = intent_recognizer.extract_interest(text)
        if topic is None:
            return None
        memory.set_interest(topic)
        logger.info("Stored user interest: %s", topic)
        return RouteResult(Strategy.INTEREST_CAPTURE, INTEREST_ACK_TEMPLATE.format(topic=topic), topic)

    def _recall_interest(self, text: str, memory: SessionMemory) -> Optional[RouteResult]:
        interest = memory.get_interest()
        if interest is None or not intent_recognizer.is_recommendation_request(text):
            return None
        return RouteResult(Strategy.INTEREST_RECALL, RECOMMENDATION_TEMPLATE.format(interest=interest), interest)

    def _match_topic(self, text: str, memory: SessionMemory) -> Optional[RouteResult]:
        topic = self.knowledge_base.match_topic(text)
        if topic is None:
            return None
        tip = self.knowledge_base.tip_for(topic, self.rng)
        memory.set_last_topic(topic)
        return RouteResult(Strategy.TOPIC_TIP, tip, topic)

    def _follow_up(self, text: str, memory: SessionMemory) -> Optional[RouteResult]:
        if not intent_recognizer.is_follow_up_request(text):
            return None
        topic = memory.get_last_topic()
        # Falls through to small talk when there is nothing to elaborate on
        if topic is None or not self.knowledge_base.has_follow_up(topic):
            return None
        return RouteResult(Strategy.FOLLOW_UP, self.knowledge_base.follow_up_for(topic), topic)

    def _small_talk(self, text: str) -> Optional[RouteResult]:
        reply = intent_recognizer.match_small_talk(text)
        if reply is None:
            return None
        return RouteResult(Strategy.SMALL_TALK, reply)

    def _lookup_question(self, text: str) -> Optional[RouteResult]:
        answer = self.knowledge_base.find_answer(text)
        if answer is None:
            return None
        return RouteResult(Strategy.QUESTION_BANK, answer)

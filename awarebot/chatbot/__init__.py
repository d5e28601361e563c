"""
Chatbot Core Module
==================

Response-selection engine: static knowledge tables, session memory and
the ordered strategy router.
"""

from .knowledge_base import KnowledgeBase, QAEntry, QUESTION_BANK, TOPIC_TIPS, FOLLOW_UPS
from .memory import SessionMemory
from .sentiment_analyzer import SentimentDetector, SentimentMatch, SENTIMENT_REPLIES
from .fallback_handler import FallbackHandler
from .response_router import ResponseRouter, RouteResult, Strategy

__version__ = "1.0.0"

__all__ = [
    'KnowledgeBase',
    'QAEntry',
    'QUESTION_BANK',
    'TOPIC_TIPS',
    'FOLLOW_UPS',
    'SessionMemory',
    'SentimentDetector',
    'SentimentMatch',
    'SENTIMENT_REPLIES',
    'FallbackHandler',
    'ResponseRouter',
    'RouteResult',
    'Strategy'
]

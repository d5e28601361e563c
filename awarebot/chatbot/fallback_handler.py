"""
Fallback Handler
================

Personalized reply for input that no other strategy understood.
"""

import logging

logger = logging.getLogger(__name__)


DEFAULT_TEMPLATE = "Sorry {name}, I didn’t understand that. Could you rephrase?"


class FallbackHandler:
    """Generates the "didn't understand" reply."""

    def __init__(self, template: str = DEFAULT_TEMPLATE):
        self.template = template
        self.fallback_count = 0

    def handle(self, text: str, name: str) -> str:
        """
        Build the fallback reply for unrecognized input.

        Args:
            text: Normalized user input
            name: User display name

        Returns:
            Reply addressing the user by name
        """
        self.fallback_count += 1
        logger.debug("Fallback for input: %r", text)
        logger.info("No strategy matched input (%d fallbacks so far)", self.fallback_count)
        return self.template.format(name=name)

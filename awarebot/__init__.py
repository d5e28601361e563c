"""
AwareBot
========

Terminal chatbot that teaches cybersecurity-awareness basics using
static lookup tables, keyword matching and per-session memory.
"""

__version__ = "1.0.0"

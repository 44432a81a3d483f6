"""Hypothesis strategies for icumessage property-based testing.

Usage:
    from tests.strategies import message_trees, whitespace_text
"""

from .messages import (
    BRANCH_KEYS,
    category_keys,
    literal_text,
    message_trees,
    non_whitespace_text,
    text_only_messages,
    whitespace_text,
)

__all__ = [
    "BRANCH_KEYS",
    "category_keys",
    "literal_text",
    "message_trees",
    "non_whitespace_text",
    "text_only_messages",
    "whitespace_text",
]

"""Hypothesis strategies for diagmarkup property-based testing.

Usage:
    from tests.strategies import documents, plain_texts
"""

from .markup import (
    MARKUP_CHARACTERS,
    diagnostic_ids,
    documents,
    markup_soup,
    marked_spans,
    plain_texts,
)

__all__ = [
    "MARKUP_CHARACTERS",
    "diagnostic_ids",
    "documents",
    "marked_spans",
    "markup_soup",
    "plain_texts",
]

"""Markup dialects: token descriptors, built-ins and registry.

Python 3.13+.
"""

from .builtin import ARROW, BRACKET
from .descriptor import (
    BoundIndicator,
    BoundIndicatorParser,
    DialectDescriptor,
    MarkupRemover,
)
from .registry import available_dialects, get_dialect, register_dialect

__all__ = [
    "ARROW",
    "BRACKET",
    "BoundIndicator",
    "BoundIndicatorParser",
    "DialectDescriptor",
    "MarkupRemover",
    "available_dialects",
    "get_dialect",
    "register_dialect",
]

"""Diagnostic markup engine.

Scanner, remover, emitter and converter over DialectDescriptor, plus the
span value types they exchange.

Data flow:
    marked text -> scan() -> ParseResult(unmarked_text, spans)
                          -> emit(..., other dialect) -> re-marked text

Python 3.13+.
"""

from .converter import convert
from .cursor import IndicatorCursor
from .emitter import emit, markup_span
from .model import MarkedSpan, ParseResult, TextSpan
from .position import SourceLocation, line_column, span_location
from .remover import remove_markup
from .scanner import scan

__all__ = [
    "IndicatorCursor",
    "MarkedSpan",
    "ParseResult",
    "SourceLocation",
    "TextSpan",
    "convert",
    "emit",
    "line_column",
    "markup_span",
    "remove_markup",
    "scan",
]

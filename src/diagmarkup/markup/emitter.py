"""Span emitter: write diagnostic markup into unmarked text.

Inverse of the scanner. Given unmarked text and the spans to mark, inserts
the dialect's tokens around each span.

Degradation:
    A span with an identifier is written in the unbound form when the
    dialect cannot express identifiers; the identifier is dropped. A range
    written in a point dialect keeps only its start marker.

Preconditions:
    Spans must be ascending and non-overlapping, as produced by scan().
    Overlapping or out-of-order spans produce unspecified (but memory-safe)
    output.

Python 3.13+.
"""

import logging
from collections.abc import Iterable

from diagmarkup.dialects import DialectDescriptor

from .model import MarkedSpan

__all__ = ["emit", "markup_span"]

logger = logging.getLogger(__name__)


def markup_span(text: str, dialect: DialectDescriptor, diagnostic_id: str | None = None) -> str:
    """Mark up a whole piece of text as one expected diagnostic.

    Args:
        text: Text to surround with markup
        dialect: Target dialect
        diagnostic_id: Identifier to embed, if the dialect supports bound
            indicators; None writes the unbound form

    Example:
        >>> from diagmarkup.dialects import ARROW, BRACKET
        >>> markup_span("Int32", BRACKET)
        '[|Int32|]'
        >>> markup_span("var", BRACKET, "CS0101")
        '{|CS0101:var|}'
        >>> markup_span("var", ARROW, "CS0101")
        '↓var'
    """
    if diagnostic_id is not None and dialect.is_bound_capable:
        return (
            f"{dialect.bound_start}{diagnostic_id}{dialect.bound_terminator}"
            f"{text}{dialect.bound_end}"
        )
    return f"{dialect.unbound_start}{text}{dialect.unbound_end or ''}"


def emit(unmarked_text: str, spans: Iterable[MarkedSpan], dialect: DialectDescriptor) -> str:
    """Mark up unmarked text at the given spans.

    Args:
        unmarked_text: Text without markup. Existing markup is treated as
            plain text.
        spans: Ascending, non-overlapping spans to mark
        dialect: Target dialect

    Returns:
        Marked up text; unmarked_text itself when spans is empty
    """
    parts: list[str] = []
    last_end = 0

    for marked in spans:
        if marked.diagnostic_id is not None and not dialect.is_bound_capable:
            logger.debug(
                "Dropping diagnostic id %s at %d: dialect '%s' has no bound indicators",
                marked.diagnostic_id,
                marked.start,
                dialect.name,
            )
        parts.append(unmarked_text[last_end : marked.start])
        parts.append(markup_span(marked.text_in(unmarked_text), dialect, marked.diagnostic_id))
        last_end = marked.end

    if not parts:
        return unmarked_text

    parts.append(unmarked_text[last_end:])
    return "".join(parts)

"""Span scanner: locate marked spans in diagnostic markup.

Walks the marked up text once with two independent cursors, one for the
unbound start token and one for the bound start token. Independent cursors
do not require the two tokens to be disjoint; when both cursors sit on the
same position the bound form is attempted first and unbound is the fallback.

Coordinates:
    Every span is reported in unmarked-text coordinates. A running count of
    markup characters consumed so far ("eaten") is subtracted from each raw
    content position. Tokens enclosed in a span's content are stripped from
    its length and eaten too. The unmarked text itself is produced separately by
    the dialect's remover, never rebuilt from the spans.

Leniency:
    Scanning never fails. A bound start token that is not followed by a
    well-formed opener (token + identifier + terminator) is reclassified as
    unbound. A missing closing token leaves a zero-length span at the content
    start, and scanning continues right after the opener. Spans never
    extend past the unmarked text.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from diagmarkup.dialects import DialectDescriptor
from diagmarkup.enums import OccurrenceKind

from .cursor import IndicatorCursor
from .model import MarkedSpan, ParseResult, TextSpan
from .remover import remove_markup

__all__ = ["scan"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Occurrence:
    """One indicator occurrence in the raw text.

    Attributes:
        cursor: Which cursor found it (that cursor advances afterwards)
        position: Raw index of the start token
        opener_length: Raw characters eaten before the marked content
        closing: Token that ends the marked content, None for points
        diagnostic_id: Extracted identifier, None unless well-formed bound
    """

    cursor: OccurrenceKind
    position: int
    opener_length: int
    closing: str | None
    diagnostic_id: str | None = None

    @property
    def content_start(self) -> int:
        return self.position + self.opener_length


def _bound_occurrence(
    text: str, dialect: DialectDescriptor, bound: IndicatorCursor
) -> _Occurrence:
    indicator = dialect.parse_bound_indicator(text, bound.pos)
    if indicator is None:
        # The bare token survives markup removal, so nothing is eaten for it
        # and it stays part of the marked content.
        return _Occurrence(OccurrenceKind.BOUND, bound.pos, 0, dialect.bound_end)
    return _Occurrence(
        OccurrenceKind.BOUND,
        bound.pos,
        indicator.length,
        dialect.bound_end,
        indicator.diagnostic_id,
    )


def _unbound_occurrence(dialect: DialectDescriptor, unbound: IndicatorCursor) -> _Occurrence:
    return _Occurrence(
        OccurrenceKind.UNBOUND,
        unbound.pos,
        len(dialect.unbound_start),
        dialect.unbound_end,
    )


def _next_occurrence(
    text: str,
    dialect: DialectDescriptor,
    unbound: IndicatorCursor,
    bound: IndicatorCursor,
) -> _Occurrence | None:
    """Pick the occurrence that comes first in the raw text."""
    match (unbound.is_exhausted, bound.is_exhausted):
        case (True, True):
            return None
        case (True, False):
            return _bound_occurrence(text, dialect, bound)
        case (False, True):
            return _unbound_occurrence(dialect, unbound)

    if bound.pos < unbound.pos:
        return _bound_occurrence(text, dialect, bound)
    if unbound.pos < bound.pos:
        return _unbound_occurrence(dialect, unbound)

    # Both start tokens begin here: the dialect shares a leading token
    # between its forms and only what follows tells them apart.
    occurrence = _bound_occurrence(text, dialect, bound)
    if occurrence.diagnostic_id is not None:
        return occurrence
    return _unbound_occurrence(dialect, unbound)


def _content_length(text: str, content_start: int, closing: str | None) -> tuple[int, bool]:
    """Raw distance from content_start to the closing token.

    Returns:
        (length, closing_found). Without a closing token, or when the
        closing token never appears, the length is 0.
    """
    if closing is None:
        return 0, False
    end = text.find(closing, content_start)
    if end == -1:
        return 0, False
    return end - content_start, True


def scan(text: str, dialect: DialectDescriptor) -> ParseResult:
    """Strip diagnostic markup and collect the marked spans.

    Args:
        text: Marked up text
        dialect: Markup dialect used in text

    Returns:
        ParseResult with the unmarked text and spans in unmarked coordinates

    Example:
        >>> from diagmarkup.dialects import BRACKET
        >>> result = scan("int {|CS0101:value|} = [|5|];", BRACKET)
        >>> result.unmarked_text
        'int value = 5;'
        >>> result.marked_texts(), result.diagnostic_ids()
        (('value', '5'), ('CS0101', None))
    """
    unmarked_text = remove_markup(text, dialect)
    limit = len(unmarked_text)

    unbound = IndicatorCursor.first(text, dialect.unbound_start)
    bound = IndicatorCursor.first(text, dialect.bound_start)

    spans: list[MarkedSpan] = []
    eaten = 0

    while (occurrence := _next_occurrence(text, dialect, unbound, bound)) is not None:
        content_start = occurrence.content_start
        raw_length, closed = _content_length(text, content_start, occurrence.closing)
        content_end = content_start + raw_length
        # Tokens enclosed in the content are stripped from it too.
        length = len(dialect.remove_markup(text[content_start:content_end]))

        eaten += occurrence.opener_length
        # Stray end tokens are stripped but never eaten; stay inside the text.
        start = min(content_start - eaten, limit)
        span = TextSpan(start, min(length, limit - start))
        spans.append(MarkedSpan(span, occurrence.diagnostic_id))
        eaten += raw_length - length

        occurrence_end = content_end
        if closed:
            assert occurrence.closing is not None
            eaten += len(occurrence.closing)
            occurrence_end += len(occurrence.closing)

        # Start tokens inside an occurrence are content; always move forward.
        resume = max(occurrence_end, occurrence.position + 1)
        if occurrence.cursor is OccurrenceKind.BOUND:
            bound = bound.seek(resume)
            unbound = unbound.skip_before(resume)
        else:
            unbound = unbound.seek(resume)
            bound = bound.skip_before(resume)

    logger.debug("Scanned %d marked spans (dialect: %s)", len(spans), dialect.name)
    return ParseResult(unmarked_text, tuple(spans))

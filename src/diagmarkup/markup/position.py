"""Position utilities for marked spans.

Converts character offsets in unmarked text to 1-based line/column pairs,
the form test frameworks use when describing an expected diagnostic.

Line endings: \\n is the line delimiter. CRLF works because the \\n is
still present; CR-only text is treated as a single line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import TextSpan

__all__ = ["SourceLocation", "line_column", "span_location"]


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Line/column location of a span.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line of start (1-indexed)
        column: Column of start (1-indexed)
        end_line: Line of end (1-indexed)
        end_column: Column of end (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int
    end_line: int
    end_column: int


def line_column(text: str, offset: int) -> tuple[int, int]:
    """Get 1-based (line, column) of a character offset.

    Args:
        text: Unmarked text
        offset: Character offset; offsets past the end are clamped

    Returns:
        (line, column), both 1-based

    Raises:
        ValueError: If offset is negative

    Example:
        >>> line_column("ab\\ncd", 0)
        (1, 1)
        >>> line_column("ab\\ncd", 4)
        (2, 2)
    """
    if offset < 0:
        msg = f"Offset must be >= 0, got {offset}"
        raise ValueError(msg)
    offset = min(offset, len(text))

    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


def span_location(text: str, span: TextSpan) -> SourceLocation:
    """Locate a span of the unmarked text by line and column."""
    line, column = line_column(text, span.start)
    end_line, end_column = line_column(text, span.end)
    return SourceLocation(
        start=span.start,
        end=span.end,
        line=line,
        column=column,
        end_line=end_line,
        end_column=end_column,
    )

"""Value types produced and consumed by the markup engine.

All positions are measured in characters (Unicode code points) of the
unmarked text, never of the raw markup.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from .position import SourceLocation, span_location

__all__ = ["MarkedSpan", "ParseResult", "TextSpan"]


@dataclass(frozen=True, slots=True)
class TextSpan:
    """Half-open character range [start, start + length).

    Example:
        >>> span = TextSpan(6, 1)
        >>> span.end
        7
        >>> span.slice("class C {}")
        'C'
    """

    start: int
    length: int

    def __post_init__(self) -> None:
        """Validate TextSpan invariants.

        Raises:
            ValueError: If start or length is negative
        """
        if self.start < 0:
            msg = f"TextSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.length < 0:
            msg = f"TextSpan.length must be >= 0, got {self.length}"
            raise ValueError(msg)

    @property
    def end(self) -> int:
        """Exclusive end offset."""
        return self.start + self.length

    def slice(self, text: str) -> str:
        """Return the substring of text covered by this span."""
        return text[self.start : self.end]


@dataclass(frozen=True, slots=True)
class MarkedSpan:
    """A span of unmarked text where a diagnostic is expected.

    Attributes:
        span: Location in the unmarked text
        diagnostic_id: Expected diagnostic identifier, present only for bound
            indicators whose identifier was successfully extracted
    """

    span: TextSpan
    diagnostic_id: str | None = None

    @classmethod
    def at(cls, start: int, length: int, diagnostic_id: str | None = None) -> MarkedSpan:
        """Shorthand for MarkedSpan(TextSpan(start, length), diagnostic_id)."""
        return cls(TextSpan(start, length), diagnostic_id)

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def length(self) -> int:
        return self.span.length

    @property
    def end(self) -> int:
        return self.span.end

    @property
    def is_bound(self) -> bool:
        """True if this span carries a diagnostic identifier."""
        return self.diagnostic_id is not None

    def text_in(self, unmarked_text: str) -> str:
        """Return the marked substring of the unmarked text."""
        return self.span.slice(unmarked_text)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Unmarked text together with the spans marked in it.

    Produced by a single scan. Spans are in discovery (left-to-right) order.
    """

    unmarked_text: str
    spans: tuple[MarkedSpan, ...]

    def marked_texts(self) -> tuple[str, ...]:
        """Substrings of the unmarked text covered by each span."""
        return tuple(marked.text_in(self.unmarked_text) for marked in self.spans)

    def diagnostic_ids(self) -> tuple[str | None, ...]:
        """Expected diagnostic identifier of each span (None if unbound)."""
        return tuple(marked.diagnostic_id for marked in self.spans)

    def locations(self) -> tuple[SourceLocation, ...]:
        """Line/column location of each span in the unmarked text."""
        return tuple(span_location(self.unmarked_text, marked.span) for marked in self.spans)

"""Immutable forward-search cursor over marked up text.

An IndicatorCursor tracks the next occurrence of one literal token. The
scanner keeps one cursor for the unbound start token and one for the
bound start token, and compares their positions to decide which
occurrence comes next.

Design:
    - Frozen dataclass: every move returns a NEW cursor
    - Exhaustion is a state (is_exhausted), not a sentinel callers compare
    - A cursor over an absent token is exhausted from the start

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["IndicatorCursor"]

_EXHAUSTED = -1


@dataclass(frozen=True, slots=True)
class IndicatorCursor:
    """Position of the next occurrence of a token.

    Example:
        >>> cursor = IndicatorCursor.first("a [|b|] [|c|]", "[|")
        >>> cursor.pos, cursor.after
        (2, 4)
        >>> cursor.seek(cursor.after).pos
        8
        >>> cursor.seek(9).is_exhausted
        True
        >>> IndicatorCursor.first("text", None).is_exhausted
        True
    """

    source: str
    token: str | None
    pos: int = _EXHAUSTED

    @classmethod
    def first(cls, source: str, token: str | None) -> IndicatorCursor:
        """Cursor at the first occurrence of token in source."""
        return cls(source, token).seek(0)

    @property
    def is_exhausted(self) -> bool:
        """True if no further occurrence exists."""
        return self.pos == _EXHAUSTED

    @property
    def after(self) -> int:
        """Index of the first character after the token.

        Raises:
            ValueError: If the cursor is exhausted
        """
        if self.is_exhausted or self.token is None:
            msg = "Exhausted cursor has no current occurrence"
            raise ValueError(msg)
        return self.pos + len(self.token)

    def seek(self, index: int) -> IndicatorCursor:
        """Return a cursor at the first occurrence at or after index."""
        if self.token is None:
            return IndicatorCursor(self.source, self.token)
        return IndicatorCursor(self.source, self.token, self.source.find(self.token, index))

    def skip_before(self, index: int) -> IndicatorCursor:
        """Move past an occurrence that starts before index.

        Used after the other cursor consumed an occurrence containing this
        cursor's token. A cursor already at or beyond index is returned
        unchanged.
        """
        if self.is_exhausted or self.pos >= index:
            return self
        return self.seek(index)

"""Dialect descriptors for diagnostic markup.

A dialect is a convention of literal tokens used to mark expected-diagnostic
spans in text. A DialectDescriptor holds the four tokens plus two pluggable
functions: one that parses a full bound opener (token + identifier +
terminator) and one that strips every markup token from text.

Capabilities:
    - Range capable: the dialect has an unbound end token. Without one, a
      marker denotes a single point immediately preceding the text.
    - Bound capable: the dialect has bound start/end tokens and can carry a
      diagnostic identifier.

Thread Safety:
    Descriptors are frozen; the pluggable functions must be pure.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeAlias

from diagmarkup.constants import DIAGNOSTIC_ID_CHARS
from diagmarkup.diagnostics import ErrorTemplate, InvalidDialectError

__all__ = [
    "BoundIndicator",
    "BoundIndicatorParser",
    "DialectDescriptor",
    "MarkupRemover",
    "compile_bound_pattern",
    "make_bound_indicator_parser",
    "make_markup_remover",
]


@dataclass(frozen=True, slots=True)
class BoundIndicator:
    """Parsed opening indicator of a bound diagnostic.

    Attributes:
        length: Full literal length of the opener, identifier included
        diagnostic_id: Identifier embedded in the opener (may be empty)
    """

    length: int
    diagnostic_id: str


BoundIndicatorParser: TypeAlias = Callable[[str, int], BoundIndicator | None]
MarkupRemover: TypeAlias = Callable[[str], str]


def compile_bound_pattern(bound_start: str, terminator: str) -> re.Pattern[str]:
    """Compile the regex matching a full bound opener.

    Args:
        bound_start: Literal bound start token, e.g. "{|"
        terminator: Literal separator after the identifier, e.g. ":"

    Returns:
        Pattern with a ``diagnostic_id`` group

    Example:
        >>> compile_bound_pattern("{|", ":").match("{|CS0101:x|}")["diagnostic_id"]
        'CS0101'
    """
    return re.compile(
        rf"{re.escape(bound_start)}(?P<diagnostic_id>{DIAGNOSTIC_ID_CHARS}){re.escape(terminator)}"
    )


def make_bound_indicator_parser(pattern: re.Pattern[str]) -> BoundIndicatorParser:
    """Build a bound indicator parser from an opener pattern.

    The returned function only accepts an opener starting exactly at the
    given index; a match further along the text is a failure.
    """

    def parse_bound_indicator(text: str, index: int) -> BoundIndicator | None:
        match = pattern.match(text, index)
        if match is None:
            return None
        return BoundIndicator(length=match.end() - index, diagnostic_id=match["diagnostic_id"])

    return parse_bound_indicator


def make_markup_remover(
    bound_pattern: re.Pattern[str] | None,
    *tokens: str | None,
) -> MarkupRemover:
    """Build a markup remover.

    Bound openers are deleted first (so the identifier goes with them),
    then every literal token in the given order. Deletion repeats until
    the text stops changing: removing a token may join the halves of
    another one, and the remover has to be idempotent.

    Args:
        bound_pattern: Pattern of the full bound opener, or None
        tokens: Literal tokens to delete; None entries are ignored
    """
    literals = tuple(token for token in tokens if token)

    def remove_markup(text: str) -> str:
        while True:
            stripped = text
            if bound_pattern is not None:
                stripped = bound_pattern.sub("", stripped)
            for token in literals:
                stripped = stripped.replace(token, "")
            if stripped == text:
                return stripped
            text = stripped

    return remove_markup


@dataclass(frozen=True, slots=True)
class DialectDescriptor:
    """Immutable description of a diagnostic markup dialect.

    Empty strings for optional tokens are treated as absent. When no
    parser/remover is supplied, defaults are derived from the tokens.

    Attributes:
        unbound_start: Token marking where an unbound diagnostic starts
        unbound_end: Token marking where it ends (None for point dialects)
        bound_start: Token opening a bound diagnostic (None if unsupported)
        bound_end: Token closing a bound diagnostic (None if unsupported)
        bound_terminator: Separator between identifier and marked content
        name: Human-readable dialect name
        bound_indicator_parser: Parses a full bound opener at an index
        markup_remover: Deletes every markup token from text

    Raises:
        InvalidDialectError: unbound_start is empty, or only one of the
            bound tokens is given

    Example:
        >>> d = DialectDescriptor.unbound("<<", ">>", name="angles")
        >>> d.is_range_capable, d.is_bound_capable
        (True, False)
    """

    unbound_start: str
    unbound_end: str | None = None
    bound_start: str | None = None
    bound_end: str | None = None
    bound_terminator: str = ":"
    name: str = "custom"
    bound_indicator_parser: BoundIndicatorParser | None = field(
        default=None, compare=False, repr=False
    )
    markup_remover: MarkupRemover | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Normalize absent tokens, validate, and derive default functions."""
        for attr in ("unbound_end", "bound_start", "bound_end"):
            if getattr(self, attr) == "":
                object.__setattr__(self, attr, None)

        if not self.unbound_start:
            raise InvalidDialectError(ErrorTemplate.empty_unbound_start(self.name))
        if (self.bound_start is None) != (self.bound_end is None):
            raise InvalidDialectError(ErrorTemplate.incomplete_bound_indicators(self.name))

        bound_pattern = None
        if self.bound_start is not None:
            bound_pattern = compile_bound_pattern(self.bound_start, self.bound_terminator)
            if self.bound_indicator_parser is None:
                object.__setattr__(
                    self, "bound_indicator_parser", make_bound_indicator_parser(bound_pattern)
                )
        if self.markup_remover is None:
            object.__setattr__(
                self,
                "markup_remover",
                make_markup_remover(
                    bound_pattern, self.bound_end, self.unbound_start, self.unbound_end
                ),
            )

    @classmethod
    def point(cls, start: str, *, name: str = "custom") -> DialectDescriptor:
        """Dialect with a start token only (zero-width point markers)."""
        return cls(start, name=name)

    @classmethod
    def unbound(cls, start: str, end: str, *, name: str = "custom") -> DialectDescriptor:
        """Dialect with start/end tokens but no identifier support."""
        return cls(start, end, name=name)

    @classmethod
    def any(
        cls,
        start: str,
        end: str,
        bound_start: str,
        bound_end: str,
        *,
        bound_terminator: str = ":",
        name: str = "custom",
    ) -> DialectDescriptor:
        """Dialect supporting both unbound and bound diagnostics."""
        return cls(start, end, bound_start, bound_end, bound_terminator, name)

    @property
    def is_range_capable(self) -> bool:
        """True if markers carry an end position."""
        return self.unbound_end is not None

    @property
    def is_bound_capable(self) -> bool:
        """True if markers can carry a diagnostic identifier."""
        return self.bound_start is not None

    def parse_bound_indicator(self, text: str, index: int) -> BoundIndicator | None:
        """Parse the full bound opener starting at index.

        Args:
            text: Marked up text
            index: Position of the first character of the bound start token

        Returns:
            The parsed opener, or None if the dialect has no bound indicators
            or the text at index is not a well-formed opener
        """
        if self.bound_indicator_parser is None:
            return None
        return self.bound_indicator_parser(text, index)

    def remove_markup(self, text: str) -> str:
        """Delete every markup token of this dialect from text."""
        assert self.markup_remover is not None  # set in __post_init__
        return self.markup_remover(text)

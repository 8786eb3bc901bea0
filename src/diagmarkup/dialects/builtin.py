"""Built-in dialects.

BRACKET: Microsoft.CodeAnalysis.Testing markup.
    [|text|]            unbound range
    {|CS0101:text|}     bound range with identifier CS0101

ARROW: Gu.Roslyn.Asserts markup.
    ↓text               point marker before the text of interest

Python 3.13+.
"""

from diagmarkup.constants import (
    ARROW_NAME,
    ARROW_UNBOUND_START,
    BRACKET_BOUND_END,
    BRACKET_BOUND_PATTERN,
    BRACKET_BOUND_START,
    BRACKET_BOUND_TERMINATOR,
    BRACKET_NAME,
    BRACKET_UNBOUND_END,
    BRACKET_UNBOUND_START,
)

from .descriptor import DialectDescriptor, make_bound_indicator_parser, make_markup_remover

__all__ = ["ARROW", "BRACKET"]


def _remove_arrow_markup(text: str) -> str:
    # Deleting a single-character token can never form a new one.
    return text.replace(ARROW_UNBOUND_START, "")


BRACKET: DialectDescriptor = DialectDescriptor(
    unbound_start=BRACKET_UNBOUND_START,
    unbound_end=BRACKET_UNBOUND_END,
    bound_start=BRACKET_BOUND_START,
    bound_end=BRACKET_BOUND_END,
    bound_terminator=BRACKET_BOUND_TERMINATOR,
    name=BRACKET_NAME,
    bound_indicator_parser=make_bound_indicator_parser(BRACKET_BOUND_PATTERN),
    # Order matters: "{|id:" goes before "|}" so the identifier is not left behind.
    markup_remover=make_markup_remover(
        BRACKET_BOUND_PATTERN,
        BRACKET_BOUND_END,
        BRACKET_UNBOUND_START,
        BRACKET_UNBOUND_END,
    ),
)

ARROW: DialectDescriptor = DialectDescriptor(
    unbound_start=ARROW_UNBOUND_START,
    name=ARROW_NAME,
    markup_remover=_remove_arrow_markup,
)

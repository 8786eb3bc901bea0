"""Markup removal.

Deletes every markup token of a dialect from text. Independent of the
scanner: it never looks at span information, so it can be applied to any
text on its own.

Python 3.13+.
"""

from diagmarkup.dialects import DialectDescriptor

__all__ = ["remove_markup"]


def remove_markup(text: str, dialect: DialectDescriptor) -> str:
    """Remove all diagnostic markup of dialect from text.

    Idempotent: applying it to already unmarked text changes nothing.

    Example:
        >>> from diagmarkup.dialects import ARROW, BRACKET
        >>> remove_markup("int {|CS0101:value|} = {|CS0202:5|};", BRACKET)
        'int value = 5;'
        >>> remove_markup("int ↓value = ↓5;", ARROW)
        'int value = 5;'
    """
    return dialect.remove_markup(text)

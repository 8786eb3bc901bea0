"""Dialect converter: translate markup between dialects.

Range-capable sources are scanned and re-emitted in the target dialect.
Point-only sources can only be translated to other point-only dialects,
by plain token replacement: a point carries no end position, so a range
cannot be synthesized from it.

Python 3.13+.
"""

import logging

from diagmarkup.diagnostics import ErrorTemplate, UnsupportedConversionError
from diagmarkup.dialects import DialectDescriptor

from .emitter import emit
from .scanner import scan

__all__ = ["convert"]

logger = logging.getLogger(__name__)


def convert(text: str, source: DialectDescriptor, target: DialectDescriptor) -> str:
    """Convert diagnostic markup from one dialect to another.

    Args:
        text: Text marked up in the source dialect
        source: Dialect text is written in
        target: Dialect to convert to

    Returns:
        Text marked up in the target dialect

    Raises:
        UnsupportedConversionError: source marks only points while target
            requires ranges

    Example:
        >>> from diagmarkup.dialects import ARROW, BRACKET
        >>> convert("[|Int32|] {|CS0101:var|} = 3;", BRACKET, ARROW)
        '↓Int32 ↓var = 3;'
    """
    if not source.is_range_capable:
        if target.is_range_capable:
            raise UnsupportedConversionError(
                ErrorTemplate.range_information_unavailable(source.name, target.name)
            )
        logger.debug("Converting point markup '%s' -> '%s' by replacement", source.name, target.name)
        return text.replace(source.unbound_start, target.unbound_start)

    logger.debug("Converting range markup '%s' -> '%s' by rescanning", source.name, target.name)
    result = scan(text, source)
    return emit(result.unmarked_text, result.spans, target)

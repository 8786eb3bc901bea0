"""diagmarkup exception hierarchy with structured diagnostics.

All exceptions may carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class MarkupError(Exception):
    """Base exception for all diagmarkup errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MarkupError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnsupportedConversionError(MarkupError):
    """Markup cannot be converted between the requested dialects.

    Raised when the source dialect marks only points while the target
    dialect requires ranges: a point marker carries no end position, so
    a range cannot be synthesized.
    """


class InvalidDialectError(MarkupError, ValueError):
    """Dialect tokens are inconsistent.

    Examples:
    - Empty unbound start token
    - Bound start token without bound end token (or vice versa)
    """


class UnknownDialectError(MarkupError, LookupError):
    """No dialect is registered under the requested name."""

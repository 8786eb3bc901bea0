"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Conversion errors (dialect translation failures)
        2000-2999: Dialect errors (definition and lookup)
    """

    # Conversion errors (1000-1999)
    RANGE_INFORMATION_UNAVAILABLE = 1001

    # Dialect errors (2000-2999)
    INVALID_DIALECT = 2001
    UNKNOWN_DIALECT = 2002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[RANGE_INFORMATION_UNAVAILABLE]: Cannot convert markup from 'arrow' to 'bracket'
              = help: Mark the source with a dialect that has end indicators

        Control characters in the message are escaped so that markup
        snippets cannot inject extra lines into log output.

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape(self.message)}"]
        if self.hint:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    """Escape line breaks and other control characters."""
    return "".join(ch if ch.isprintable() else repr(ch)[1:-1] for ch in text)

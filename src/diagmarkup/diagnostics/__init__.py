"""Diagnostic system for markup errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    InvalidDialectError,
    MarkupError,
    UnknownDialectError,
    UnsupportedConversionError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "InvalidDialectError",
    "MarkupError",
    "UnknownDialectError",
    "UnsupportedConversionError",
]

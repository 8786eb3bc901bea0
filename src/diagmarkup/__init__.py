"""diagmarkup - expected-diagnostic markup for analyzer test sources.

Test authors mark where diagnostics are expected directly inside source
snippets. Frameworks disagree on the notation; diagmarkup reads, strips,
writes and converts between them.

Public API:
    scan - Strip markup and collect marked spans
    remove_markup - Strip markup only
    emit - Write markup for given spans into unmarked text
    markup_span - Mark up one piece of text
    convert - Translate markup between dialects
    BRACKET, ARROW - Built-in dialects
    DialectDescriptor - Describe a custom dialect
    get_dialect, register_dialect - Dialect registry

Exceptions:
    MarkupError - Base exception class
    UnsupportedConversionError - Point markup cannot become range markup
    InvalidDialectError - Inconsistent dialect tokens
    UnknownDialectError - Unregistered dialect name

Submodules:
    diagmarkup.markup - Engine and span value types
    diagmarkup.dialects - Dialect descriptors and registry
    diagmarkup.diagnostics - Error codes, templates, exceptions
    diagmarkup.usings - Source header helper for test fixtures
"""

from .diagnostics import (
    InvalidDialectError,
    MarkupError,
    UnknownDialectError,
    UnsupportedConversionError,
)
from .dialects import ARROW, BRACKET, DialectDescriptor, get_dialect, register_dialect
from .markup import (
    MarkedSpan,
    ParseResult,
    TextSpan,
    convert,
    emit,
    markup_span,
    remove_markup,
    scan,
)
from .usings import UsingsProvider

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("diagmarkup")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ARROW",
    "BRACKET",
    "DialectDescriptor",
    "InvalidDialectError",
    "MarkedSpan",
    "MarkupError",
    "ParseResult",
    "TextSpan",
    "UnknownDialectError",
    "UnsupportedConversionError",
    "UsingsProvider",
    "__version__",
    "convert",
    "emit",
    "get_dialect",
    "markup_span",
    "register_dialect",
    "remove_markup",
    "scan",
]

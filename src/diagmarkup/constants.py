"""Shared constants for diagmarkup.

Literal tokens of the built-in dialects live here so that dialect
definitions, the registry and the command line share a single source
of truth. The tokens are bit-exact: existing marked-up test fixtures
depend on them.

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Bracket dialect
    "BRACKET_UNBOUND_START",
    "BRACKET_UNBOUND_END",
    "BRACKET_BOUND_START",
    "BRACKET_BOUND_END",
    "BRACKET_BOUND_TERMINATOR",
    "BRACKET_BOUND_PATTERN",
    # Arrow dialect
    "ARROW_UNBOUND_START",
    # Identifiers
    "DIAGNOSTIC_ID_CHARS",
    # Registry names
    "BRACKET_NAME",
    "ARROW_NAME",
]

# ============================================================================
# BRACKET DIALECT (Microsoft.CodeAnalysis.Testing)
# ============================================================================
#
#   class [|C|] {}              unbound range
#   {|CS1001:class C|} {}       bound range, identifier CS1001
#

BRACKET_UNBOUND_START: str = "[|"
BRACKET_UNBOUND_END: str = "|]"
BRACKET_BOUND_START: str = "{|"
BRACKET_BOUND_END: str = "|}"

# Separates the identifier from the marked content in a bound opener.
BRACKET_BOUND_TERMINATOR: str = ":"

# Character class of a diagnostic identifier embedded in a bound opener.
# May match the empty string: "{|:x|}" is a bound span with id "".
DIAGNOSTIC_ID_CHARS: str = r"[\w\d]*"

# Full bound opener: "{|" + identifier + ":".
BRACKET_BOUND_PATTERN: re.Pattern[str] = re.compile(
    rf"{re.escape(BRACKET_BOUND_START)}(?P<diagnostic_id>{DIAGNOSTIC_ID_CHARS})"
    rf"{re.escape(BRACKET_BOUND_TERMINATOR)}"
)

# ============================================================================
# ARROW DIALECT (Gu.Roslyn.Asserts)
# ============================================================================
#
#   ↓class C {}                 point marker, no end, no identifier
#

ARROW_UNBOUND_START: str = "↓"

# ============================================================================
# REGISTRY NAMES
# ============================================================================

BRACKET_NAME: str = "bracket"
ARROW_NAME: str = "arrow"

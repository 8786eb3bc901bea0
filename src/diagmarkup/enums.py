"""Enumerations for diagmarkup type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class OccurrenceKind(StrEnum):
    """Kind of indicator occurrence found while scanning markup.

    StrEnum provides automatic string conversion: str(OccurrenceKind.BOUND) == "bound"
    """

    BOUND = "bound"
    """Indicator carrying a diagnostic identifier: {|CS1001:text|}"""

    UNBOUND = "unbound"
    """Indicator without identifier: [|text|] or ↓text"""


__all__ = [
    "OccurrenceKind",
]

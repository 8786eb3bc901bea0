"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def range_information_unavailable(source_dialect: str, target_dialect: str) -> Diagnostic:
        """Point-only markup cannot become range markup.

        Args:
            source_dialect: Name of the point-only dialect being converted from
            target_dialect: Name of the range-capable dialect being converted to

        Returns:
            Diagnostic for RANGE_INFORMATION_UNAVAILABLE
        """
        msg = (
            f"Cannot convert markup from '{source_dialect}' to '{target_dialect}': "
            f"'{source_dialect}' does not support end indicators, "
            f"while '{target_dialect}' requires them"
        )
        return Diagnostic(
            code=DiagnosticCode.RANGE_INFORMATION_UNAVAILABLE,
            message=msg,
            hint="Mark the source with a dialect that has end indicators",
        )

    @staticmethod
    def empty_unbound_start(dialect_name: str) -> Diagnostic:
        """Dialect defined without a start token.

        Args:
            dialect_name: Name of the offending dialect

        Returns:
            Diagnostic for INVALID_DIALECT
        """
        msg = f"Dialect '{dialect_name}' has an empty unbound start indicator"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DIALECT,
            message=msg,
            hint="Every dialect needs a non-empty token marking where a diagnostic starts",
        )

    @staticmethod
    def incomplete_bound_indicators(dialect_name: str) -> Diagnostic:
        """Dialect defines only one of the bound tokens.

        Args:
            dialect_name: Name of the offending dialect

        Returns:
            Diagnostic for INVALID_DIALECT
        """
        msg = (
            f"Dialect '{dialect_name}' must define both bound start and bound end "
            "indicators, or neither"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_DIALECT,
            message=msg,
        )

    @staticmethod
    def unknown_dialect(name: str, known: Iterable[str]) -> Diagnostic:
        """Dialect name not found in the registry.

        Args:
            name: The requested name
            known: Names currently registered

        Returns:
            Diagnostic for UNKNOWN_DIALECT
        """
        msg = f"Unknown markup dialect '{name}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_DIALECT,
            message=msg,
            hint=f"Known dialects: {', '.join(sorted(known))}",
        )

"""Name-based lookup of markup dialects.

The built-in dialects are registered under their short names and under
the names of the test frameworks that use them:

    bracket, microsoft-codeanalysis  -> BRACKET
    arrow, gu-roslyn-asserts         -> ARROW

Lookups are case-insensitive. Registration is guarded by a lock so that
custom dialects may be registered from any thread.

Python 3.13+.
"""

import logging
import threading

from diagmarkup.diagnostics import ErrorTemplate, UnknownDialectError

from .builtin import ARROW, BRACKET
from .descriptor import DialectDescriptor

__all__ = ["available_dialects", "get_dialect", "register_dialect"]

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_dialects: dict[str, DialectDescriptor] = {}


def _key(name: str) -> str:
    return name.strip().lower()


def register_dialect(dialect: DialectDescriptor, *aliases: str) -> None:
    """Register a dialect under its name and any extra aliases.

    Re-registering a name replaces the previous dialect.

    Args:
        dialect: Dialect to register
        aliases: Additional names resolving to the same dialect
    """
    names = [_key(dialect.name), *(_key(alias) for alias in aliases)]
    with _lock:
        for name in names:
            previous = _dialects.get(name)
            if previous is not None and previous != dialect:
                logger.info("Replacing markup dialect registered as '%s'", name)
            _dialects[name] = dialect
    logger.debug("Registered markup dialect '%s' (aliases: %s)", dialect.name, aliases)


def get_dialect(name: str) -> DialectDescriptor:
    """Resolve a dialect by name or alias.

    Raises:
        UnknownDialectError: If nothing is registered under name
    """
    with _lock:
        dialect = _dialects.get(_key(name))
        if dialect is None:
            raise UnknownDialectError(ErrorTemplate.unknown_dialect(name, _dialects))
    return dialect


def available_dialects() -> tuple[str, ...]:
    """Sorted names (aliases included) of all registered dialects."""
    with _lock:
        return tuple(sorted(_dialects))


register_dialect(BRACKET, "microsoft-codeanalysis")
register_dialect(ARROW, "gu-roslyn-asserts")

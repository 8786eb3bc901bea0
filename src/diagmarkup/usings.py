"""Prefix test sources with a fixed header.

Test sources often need the same using directives (or imports, or
pragmas) in front of every snippet. A UsingsProvider holds that header
and prepends it, so snippets in a test suite stay short.

Markup is unaffected: prepend first, then scan, and spans are reported
relative to the full source.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

__all__ = ["UsingsProvider"]

_DIRECTIVE = re.compile(
    r"^\s*(?P<global>global\s+)?using\s+(?P<static>static\s+)?"
    r"(?:(?P<alias>\w+)\s*=\s*)?(?P<name>[^;\s]+)\s*;?\s*$"
)


def _directive_sort_key(line: str) -> tuple[bool, bool, bool, bool, str, str]:
    """Order of using directives as the IDE sorts them.

    Global before local, namespace imports before aliases, non-static before
    static, then by qualified name (or alias name) ascending. Lines that are
    not using directives go last, in ordinal order.
    """
    match = _DIRECTIVE.match(line)
    if match is None:
        return (True, True, True, True, line, line)
    is_alias = match["alias"] is not None
    identifier = match["alias"] if is_alias else match["name"]
    is_static = match["static"] is not None
    return (False, match["global"] is None, is_alias, is_static, identifier, line)


@dataclass(slots=True)
class UsingsProvider:
    """Header prepended to test sources.

    Attributes:
        default_usings: Header used by with_usings(); may be changed per case

    Example:
        >>> provider = UsingsProvider.for_usings(["using System;"])
        >>> provider.with_usings("class C {}")
        'using System;\\n\\nclass C {}'
    """

    DEFAULT: ClassVar[UsingsProvider]

    default_usings: str = ""

    def with_usings(self, source: str) -> str:
        """Prepend the default header to source."""
        return self.prepend_usings(source, self.default_usings)

    @staticmethod
    def prepend_usings(source: str, usings: str) -> str:
        """Prepend an explicit header to source, separated by a newline."""
        return f"{usings}\n{source}"

    @classmethod
    def for_usings(cls, directives: Iterable[str], *, sort: bool = False) -> UsingsProvider:
        """Provider whose header lists each directive on its own line.

        Args:
            directives: Directive lines, without trailing newlines
            sort: Sort directives the way the IDE does, duplicates removed
        """
        lines = sorted(set(directives), key=_directive_sort_key) if sort else list(directives)
        return cls("".join(f"{line}\n" for line in lines))


UsingsProvider.DEFAULT = UsingsProvider()

"""diagmarkup command line.

Usage:
    diagmarkup scan FILE [--dialect NAME]
    diagmarkup strip FILE [--dialect NAME]
    diagmarkup convert FILE --from NAME --to NAME

FILE may be "-" to read standard input.

Exit Codes:
    0   Success
    1   Markup error (e.g. unsupported conversion) or unreadable file
    2   Usage error (argparse) or unknown dialect

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from diagmarkup.constants import BRACKET_NAME
from diagmarkup.diagnostics import MarkupError, UnknownDialectError
from diagmarkup.dialects import available_dialects, get_dialect
from diagmarkup.markup import convert, remove_markup, scan

__all__ = ["main"]

logger = logging.getLogger(__name__)


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="diagmarkup",
        description="Inspect and convert expected-diagnostic markup in test sources.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"Dialects: {', '.join(available_dialects())}",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    scan_cmd = commands.add_parser("scan", help="Print unmarked text and the marked spans")
    scan_cmd.add_argument("file", help="Marked up source file, or - for stdin")
    scan_cmd.add_argument("--dialect", default=BRACKET_NAME, help="Markup dialect of FILE")

    strip_cmd = commands.add_parser("strip", help="Print the text with all markup removed")
    strip_cmd.add_argument("file", help="Marked up source file, or - for stdin")
    strip_cmd.add_argument("--dialect", default=BRACKET_NAME, help="Markup dialect of FILE")

    convert_cmd = commands.add_parser("convert", help="Convert markup to another dialect")
    convert_cmd.add_argument("file", help="Marked up source file, or - for stdin")
    convert_cmd.add_argument("--from", dest="source", required=True, help="Dialect of FILE")
    convert_cmd.add_argument("--to", dest="target", required=True, help="Dialect to write")

    return parser


def _run(args: argparse.Namespace) -> str:
    text = _read_source(args.file)
    match args.command:
        case "scan":
            result = scan(text, get_dialect(args.dialect))
            lines = [result.unmarked_text, "---"]
            lines.extend(
                f"{marked.start} {marked.length} {marked.diagnostic_id or '-'}"
                for marked in result.spans
            )
            return "\n".join(lines) + "\n"
        case "strip":
            return remove_markup(text, get_dialect(args.dialect))
        case _:
            return convert(text, get_dialect(args.source), get_dialect(args.target))


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        output = _run(args)
    except UnknownDialectError as e:
        print(e, file=sys.stderr)
        return 2
    except MarkupError as e:
        print(e, file=sys.stderr)
        return 1
    except OSError as e:
        logger.error("Cannot read %s: %s", args.file, e)
        return 1

    sys.stdout.write(output)
    return 0

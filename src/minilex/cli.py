"""Command line front end: print the token stream of a program."""

from __future__ import annotations

import argparse
import logging
import sys

from minilex import SAMPLE_PROGRAM, __version__, scan
from minilex.errors import LexError
from minilex.render import format_token


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minilex",
        description="Tokenize a program and print one line per token.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="source file to scan ('-' for stdin; default: built-in sample)",
    )
    parser.add_argument("-c", "--command", metavar="TEXT", help="scan TEXT instead")
    parser.add_argument(
        "--strict", action="store_true", help="stop at the first lexical error"
    )
    parser.add_argument(
        "--locations", action="store_true", help="prefix lines with line:col"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def read_source(args: argparse.Namespace) -> tuple[str, str | None]:
    if args.command is not None:
        return args.command, None
    if args.file == "-":
        return sys.stdin.read(), "<stdin>"
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            return f.read(), args.file
    return SAMPLE_PROGRAM, None


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        0 when the scan produced no errors, 1 otherwise.
        Unreadable input exits with status 2.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source, source_file = read_source(args)
    except (OSError, UnicodeDecodeError) as exc:
        parser.error(f"cannot read {args.file}: {exc}")

    errors = 0
    for token in scan(source, source_file=source_file):
        if token.is_error:
            errors += 1
            if args.strict and token.diagnostic is not None:
                print(f"Error: {LexError(token.diagnostic)}", file=sys.stderr)
                return 1
        print(format_token(token, with_location=args.locations))
    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())

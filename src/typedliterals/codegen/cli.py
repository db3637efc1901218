"""Command-line interface for the accessor module generator.

Usage:
    typedliterals generate -f literals.json [--modulename NAME] > literals.py

Exit Codes:
    0: Generated source written to stdout
    1: Specification file does not exist
    2: Formatter failed (unformatted source and error written to stderr)

Without --formatter, a missing default formatter only logs a warning and the
unformatted source is written to stdout.

Malformed specification JSON is not caught: the decode error propagates.

Python 3.12+.
"""

from __future__ import annotations

import argparse
import logging
import shlex
import sys
from collections.abc import Sequence
from pathlib import Path

from typedliterals import __version__
from typedliterals.codegen.config import GeneratorConfig
from typedliterals.codegen.generator import generate
from typedliterals.codegen.specification import load_specification
from typedliterals.constants import DEFAULT_FORMATTER_COMMAND, DEFAULT_MODULE_NAME
from typedliterals.errors import FormatterError

__all__ = ["build_parser", "main", "run"]

EXIT_OK = 0
EXIT_MISSING_SPECIFICATION = 1
EXIT_FORMATTER_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with its ``generate`` subcommand."""
    parser = argparse.ArgumentParser(
        prog="typedliterals",
        description="Generate typed literal accessors from a specification.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a literals module from the specification",
    )
    generate_parser.add_argument(
        "-f",
        "--file",
        dest="file",
        required=True,
        help="The specification file to use",
    )
    generate_parser.add_argument(
        "--modulename",
        default=DEFAULT_MODULE_NAME,
        help="The name of the module that will be generated (default: %(default)s)",
    )
    generate_parser.add_argument(
        "--formatter",
        default=None,
        help=(
            "Formatter command reading stdin and writing stdout "
            f"(default: {shlex.join(DEFAULT_FORMATTER_COMMAND)}, skipped with a warning "
            "when not installed)"
        ),
    )
    generate_parser.add_argument(
        "--no-format",
        dest="format_output",
        action="store_false",
        help="Write the generated source without running the formatter",
    )
    return parser


def _generate(args: argparse.Namespace) -> int:
    spec_path = Path(args.file)
    if not spec_path.exists():
        print(f"The specification file {args.file} doesn't exist.", file=sys.stderr)
        return EXIT_MISSING_SPECIFICATION

    specification = load_specification(spec_path)
    if args.formatter is None:
        formatter_command = DEFAULT_FORMATTER_COMMAND
    else:
        formatter_command = tuple(shlex.split(args.formatter))
    config = GeneratorConfig(
        module_name=args.modulename,
        format_output=args.format_output,
        formatter_command=formatter_command,
        # Only a formatter the user asked for must exist.
        require_formatter=args.formatter is not None,
    )

    try:
        source = generate(specification, config)
    except FormatterError as e:
        print(e.detail, file=sys.stderr)
        print("---", file=sys.stderr)
        print(e.source, file=sys.stderr)
        return EXIT_FORMATTER_FAILED

    sys.stdout.write(source)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run the selected subcommand.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    match args.command:
        case "generate":
            return _generate(args)
        case _:
            msg = f"Unknown command: {args.command}"
            raise AssertionError(msg)


def run() -> None:
    """Console script entry point."""
    sys.exit(main())

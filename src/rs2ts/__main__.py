"""Command line interface for rs2ts.

Usage:
    rs2ts lexemize path/to/file.rs
    rs2ts lexemize -e "let x = 1;" --json
    rs2ts transpile -e "const ROUGHLY_PI: f32 = 3.14;"
    rs2ts transpile four.rs --ts-major ts3
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from rs2ts.config import RsEdition, Strategy, TranspileConfig, TsMajor
from rs2ts.errors import Rs2tsError
from rs2ts.lexer import lexemize
from rs2ts.serialization import to_json
from rs2ts.transpile import transpile
from rs2ts.utils.logger import configure_cli_logging

EXIT_ERROR = 1
EXIT_READ_ERROR = 2


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("file", nargs="?", help="Rust source file to read")
    group.add_argument("-e", "--code", help="Rust source code given inline")


def _choices(enum_type: type) -> list[str]:
    return [member.name.lower() for member in enum_type]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``rs2ts`` command."""
    parser = argparse.ArgumentParser(
        prog="rs2ts", description="Lexemize or transpile Rust 2018 source code"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lex = subparsers.add_parser("lexemize", help="Print the lexemes found in the source")
    _add_input_arguments(lex)
    lex.add_argument("--json", action="store_true", help="Print lexemes as JSON")

    trans = subparsers.add_parser("transpile", help="Transpile the source to TypeScript")
    _add_input_arguments(trans)
    trans.add_argument("--rs-edition", choices=_choices(RsEdition), default="latest")
    trans.add_argument("--ts-major", choices=_choices(TsMajor), default="latest")
    trans.add_argument("--strategy", choices=_choices(Strategy), default="gungho")
    return parser


def _read_source(args: argparse.Namespace) -> str:
    if args.code is not None:
        return args.code
    return Path(args.file).read_text(encoding="utf-8")


def _print_source_text(text: str) -> None:
    """Print text that may carry lone surrogates from undecodable input.

    Arguments that are not valid UTF-8 reach ``-e`` as surrogate escapes,
    which no strict encoder accepts. They are printed as ``\\udcXX``
    escapes instead, which JSON readers turn back into the same code point.
    """
    print(text.encode("utf-8", "backslashreplace").decode("utf-8"))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface.

    Returns:
        Process exit status.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_cli_logging(args.verbose)

    try:
        source = _read_source(args)
    except (OSError, UnicodeDecodeError) as e:
        print(f"ERROR: Problem reading the file: {e}", file=sys.stderr)
        return EXIT_READ_ERROR

    if args.command == "lexemize":
        result = lexemize(source)
        _print_source_text(to_json(result, indent=2) if args.json else str(result))
        return 0

    try:
        config = TranspileConfig.from_dict(
            {
                "rs_edition": args.rs_edition,
                "ts_major": args.ts_major,
                "strategy": args.strategy,
            }
        )
        result = transpile(source, config)
    except Rs2tsError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR

    if result.errors:
        for error in result.errors:
            print(f"ERROR: {error}", file=sys.stderr)
        return EXIT_ERROR
    _print_source_text(str(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())

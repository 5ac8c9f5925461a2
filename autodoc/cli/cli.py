#!/usr/bin/env python3
"""
autodoc CLI - generate input/output tables for a GitHub action.

Usage:
    autodoc
    autodoc --action path/to/action.yml --output README.md
    autodoc --colMaxWidth 60 --colMaxWords 8 --inputColumns Input,Description
    autodoc --help
"""

import argparse
import sys
from collections.abc import Sequence

import autodoc
from autodoc.config import Settings
from autodoc.constants import DEFAULT_INPUT_COLUMNS, DEFAULT_OUTPUT_COLUMNS
from autodoc.exceptions import AutoDocError
from autodoc.generator import DocGenerator
from autodoc.log import create_logger
from autodoc.ui import Console


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; every option defaults to None so unset
    flags fall through to the environment and built-in defaults."""
    parser = argparse.ArgumentParser(
        prog="autodoc",
        description="Generate input/output documentation tables for a GitHub action",
    )
    parser.add_argument(
        "-a", "--action", help="path to the action definition (default: action.yml)"
    )
    parser.add_argument(
        "-o", "--output", help="path to the document to update (default: README.md)"
    )
    parser.add_argument(
        "--colMaxWidth",
        "--col-max-width",
        dest="col_max_width",
        metavar="N",
        help="maximum cell width before wrapping (default: 1000)",
    )
    parser.add_argument(
        "--colMaxWords",
        "--col-max-words",
        dest="col_max_words",
        metavar="N",
        help="maximum words per description line (default: 6)",
    )
    parser.add_argument(
        "--inputColumns",
        "--input-columns",
        dest="input_columns",
        action="append",
        metavar="COLS",
        help=f"input table columns (default: {','.join(DEFAULT_INPUT_COLUMNS)})",
    )
    parser.add_argument(
        "--outputColumns",
        "--output-columns",
        dest="output_columns",
        action="append",
        metavar="COLS",
        help=f"output table columns (default: {','.join(DEFAULT_OUTPUT_COLUMNS)})",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        help="debug, info, warning, error, critical or false (default: warning)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="do not print the success line"
    )
    parser.add_argument(
        "--version", action="version", version=f"autodoc {autodoc.__version__}"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the autodoc CLI."""
    args = build_parser().parse_args(argv)
    console = Console(quiet=args.quiet)
    errors = Console(file=sys.stderr)

    try:
        settings = Settings.from_env().merge(
            action=args.action,
            output=args.output,
            col_max_width=args.col_max_width,
            col_max_words=args.col_max_words,
            input_columns=args.input_columns,
            output_columns=args.output_columns,
            log_level=args.log_level,
        )
        lg = create_logger("autodoc", settings.log_level)
        result = DocGenerator(settings, lg=lg).run()
    except AutoDocError as e:
        errors.print_error(str(e))
        return 1

    if result.written:
        console.print_success(f"Updated {settings.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

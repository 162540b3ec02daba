"""Argument parsing for the clipfrag CLI."""

import argparse
from collections.abc import Sequence
from pathlib import Path

from clipfrag import __version__
from clipfrag.config.schema import Config
from clipfrag.core.constants import DEFAULT_MAX_UNITS
from clipfrag.document.types import UnitKind


def positive_int(value: str) -> int:
    """argparse type for budgets: an integer greater than zero."""
    try:
        number = int(value.replace("_", ""))
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Create the clipfrag argument parser."""
    parser = argparse.ArgumentParser(
        prog="clipfrag",
        description=(
            "Copy a text document to the clipboard in line-aligned fragments, "
            "one confirmation at a time"
        ),
    )

    # -c and -b pick both the unit and the budget
    budget = parser.add_mutually_exclusive_group()
    budget.add_argument(
        "-c", "--chars",
        type=positive_int,
        metavar="N",
        help=f"Maximum characters per fragment (default: {DEFAULT_MAX_UNITS:_d})",
    )
    budget.add_argument(
        "-b", "--bytes",
        type=positive_int,
        metavar="N",
        help="Maximum bytes per fragment, counted as UTF-16 (the clipboard's encoding)",
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        type=Path,
        metavar="FILE",
        help="Input file, UTF-8 or Shift_JIS (default: read standard input)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        metavar="PATH",
        help="Config file to use instead of ~/.clipfrag and ./.clipfrag layers",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def resolve_budget(args: argparse.Namespace, config: Config) -> tuple[UnitKind, int]:
    """Unit and budget: -c / -b when given, otherwise the config values."""
    if args.chars is not None:
        return UnitKind.CHARS, args.chars
    if args.bytes is not None:
        return UnitKind.BYTES, args.bytes
    return config.unit_kind, config.max_units

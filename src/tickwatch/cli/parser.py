"""Argument parser construction for tickwatch CLI."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from tickwatch.models.parser import SubEntryPolicy


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="tickwatch",
        description="tickwatch - live completion percentage for a checklist file",
    )
    parser.add_argument(
        "path",
        type=Path,
        help="Checklist file to watch",
    )
    parser.add_argument(
        "--interval",
        "-i",
        type=_positive_float,
        help="Seconds between modification checks (default: from settings, 1.0)",
    )
    parser.add_argument(
        "--sub-policy",
        choices=[policy.value for policy in SubEntryPolicy],
        help="Repeated sub-entry lines: replace the earlier one or reject the file",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Process the file a single time and exit",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal between updates",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments from argv (or sys.argv when omitted)."""
    parser = build_parser()
    if argv is None:
        return parser.parse_args()
    return parser.parse_args(list(argv))

"""Command-line argument parsing for shell-ps1."""

import argparse
from typing import List, Optional


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    The shell calls the program with no arguments for PS1. Any argument at
    all, option-like or not, selects the continuation prompt (PS2), so
    nothing is ever rejected.
    """
    parser = argparse.ArgumentParser(
        prog="shell-ps1",
        description="Git-aware shell prompt",
        add_help=False,
    )
    parser.add_argument(
        "extra",
        nargs="*",
        help="Any argument renders the continuation prompt (PS2)",
    )

    args, unknown = parser.parse_known_args(argv)
    args.extra = list(args.extra) + unknown
    args.continuation = bool(args.extra)
    return args

"""Command-line entry point of the dining philosophers simulation."""

from __future__ import annotations

import sys

from .dinner import Dinner
from .output import RED, RESET
from .parsing import InputError, parse_args
from .table import Table


def main(argv: list[str] | None = None) -> int:
    """Parse the arguments, run the dinner and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        settings = parse_args(args)
    except InputError as exc:
        sys.stdout.write(f"{RED}ERROR: {exc}\n{RESET}\n")
        sys.stdout.flush()
        return 1
    Dinner(Table(settings)).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
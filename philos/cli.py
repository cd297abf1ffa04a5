"""Command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, UsageError, parse_arguments
from .simulation import run_simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from command-line arguments; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_arguments(args)
    except (UsageError, InputError) as exc:
        print(exc)
        return 1
    try:
        run_simulation(settings, sys.stdout)
    except RuntimeError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
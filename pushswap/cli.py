"""Command that prints the moves sorting its arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parser import ParseError, count_total_numbers, parse_args
from .sorting import sort_stack
from .stacks import Stacks


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the numbers, sort them and print one move per line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        if count_total_numbers(args) <= 0:
            raise ParseError("no numbers given")
        values = parse_args(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    stacks = Stacks(values)
    if not stacks.is_sorted_a():
        sort_stack(stacks)
    sys.stdout.write("".join(f"{move}\n" for move in stacks.moves))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Command-line entry: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, is_sorted, parse_numbers
from pushswap.sorting import sort_stacks
from pushswap.stacks import Stacks


def solve(args: Sequence[str]) -> list[str]:
    """Return the operations that sort the numbers given as ``args``.

    Raises :class:`InputError` for invalid input.
    """
    numbers = parse_numbers(args)
    if is_sorted(numbers):
        return []
    stacks = Stacks(numbers)
    sort_stacks(stacks, len(numbers))
    return stacks.operations


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program; returns the exit status, which is 1 on every path."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        operations = solve(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for name in operations:
        sys.stdout.write(name + "\n")
    return 1


if __name__ == "__main__":
    sys.exit(main())
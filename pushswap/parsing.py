"""Reading the command-line numbers: validation, conversion and ranking."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import takewhile

from pushswap.libft.chars import is_digit

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\v\f\r"


class InputError(ValueError):
    """Raised when the program's arguments are not a valid list of numbers."""


def validate_args(args: Iterable[str]) -> None:
    """Check that every argument is an optional sign followed by digits.

    An empty argument passes; a lone sign does not.
    """
    for arg in args:
        signed = arg[:1] in ("+", "-")
        rest = arg[1:] if signed else arg
        if signed and not rest:
            raise InputError(f"sign without digits: {arg!r}")
        if not all(is_digit(c) for c in rest):
            raise InputError(f"not an integer: {arg!r}")


def atoi(text: str) -> int:
    """Convert the leading integer of ``text``.

    Leading whitespace is skipped. More than one sign of a kind, or both
    signs, give 0. Conversion stops at the first non-digit.
    """
    stripped = text.lstrip(_WHITESPACE)
    rest = stripped.lstrip("+-")
    signs = stripped[: len(stripped) - len(rest)]
    minus = signs.count("-")
    plus = signs.count("+")
    digits = "".join(takewhile(is_digit, rest))
    value = int(digits) if digits else 0
    if minus > 1 or plus > 1 or (minus and plus):
        return 0
    return -value if minus else value


def check_duplicates(numbers: Iterable[int]) -> None:
    """Raise :class:`InputError` if any number appears more than once."""
    seen: set[int] = set()
    for number in numbers:
        if number in seen:
            raise InputError(f"duplicate number: {number}")
        seen.add(number)


def parse_numbers(args: Sequence[str]) -> list[int]:
    """Turn the arguments into a list of distinct 32-bit integers."""
    validate_args(args)
    numbers = []
    for arg in args:
        number = atoi(arg)
        if not INT_MIN <= number <= INT_MAX:
            raise InputError(f"out of range: {arg!r}")
        numbers.append(number)
    check_duplicates(numbers)
    return numbers


def is_sorted(numbers: Iterable[int]) -> bool:
    """True if no number is greater than one that follows it."""
    values = list(numbers)
    return all(earlier <= later for earlier, later in zip(values, values[1:]))


def rank(numbers: Iterable[int]) -> list[int]:
    """For each number, how many numbers in the collection are smaller."""
    values = list(numbers)
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]
"""Strategies that sort stack ``a`` using the stack operations."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.parsing import is_sorted, rank
from pushswap.stacks import Stacks


def _require_size(stacks: Stacks, size: int) -> None:
    if len(stacks.a) != size:
        raise ValueError(f"stack a must hold {size} values, it holds {len(stacks.a)}")


def get_max_bits(values: Iterable[int]) -> int:
    """Number of bits needed for the largest non-negative value."""
    return max(0, *values).bit_length() if values else 0


def sort_two(stacks: Stacks) -> None:
    """Sort two values."""
    _require_size(stacks, 2)
    if rank(stacks.a)[0] == 1:
        stacks.swap_a()


def sort_three(stacks: Stacks) -> None:
    """Sort three values with at most two operations."""
    _require_size(stacks, 3)
    top, middle, bottom = rank(stacks.a)
    if top == 1 and bottom == 0:
        stacks.rotate_a()
        stacks.rotate_a()
    elif top == 1 and middle == 0:
        stacks.swap_a()
    elif top == 2 and middle == 1:
        stacks.rotate_a()
        stacks.swap_a()
    elif top == 2 and bottom == 1:
        stacks.rotate_a()
    elif top == 0 and bottom == 1:
        stacks.swap_a()
        stacks.rotate_a()


def sort_four(stacks: Stacks) -> None:
    """Park the smallest value on ``b``, sort the other three, bring it back."""
    _require_size(stacks, 4)
    smallest = min(stacks.a)
    distance = list(stacks.a).index(smallest)
    for _ in range(distance + 1):
        if stacks.a[0] == smallest:
            stacks.push_b()
        else:
            stacks.rotate_a()
    sort_three(stacks)
    stacks.push_a()


def sort_five(stacks: Stacks) -> None:
    """Park the two smallest values on ``b``, sort the rest, bring them back."""
    _require_size(stacks, 5)
    two_smallest = set(sorted(stacks.a)[:2])
    pushed = 0
    while pushed < 2:
        if stacks.a[0] in two_smallest:
            stacks.push_b()
            pushed += 1
        else:
            stacks.rotate_a()
    if is_sorted(stacks.b):
        stacks.swap_b()
    sort_three(stacks)
    stacks.push_a()
    stacks.push_a()


def radix_sort(stacks: Stacks) -> None:
    """Binary radix sort on the ranks of the values, least significant bit first."""
    values = list(stacks.a)
    ranks = dict(zip(values, rank(values)))
    max_bits = get_max_bits(ranks.values())
    size = len(values)
    for bit in range(max_bits):
        for _ in range(size):
            if (ranks[stacks.a[0]] >> bit) & 1:
                stacks.rotate_a()
            else:
                stacks.push_b()
        while stacks.b:
            stacks.push_a()


def sort_stacks(stacks: Stacks, count: int) -> None:
    """Choose the strategy for ``count`` values and apply it."""
    if count == 2:
        sort_two(stacks)
    elif count == 3:
        sort_three(stacks)
    elif count == 4:
        sort_four(stacks)
    elif count == 5:
        sort_five(stacks)
    elif count > 5:
        radix_sort(stacks)
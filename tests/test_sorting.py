import random
from itertools import permutations

import pytest

from pushswap.sorting import (
    get_max_bits,
    radix_sort,
    sort_five,
    sort_four,
    sort_stacks,
    sort_three,
    sort_two,
)
from pushswap.stacks import Stacks

_OPERATIONS = {
    "pa": Stacks.push_a,
    "pb": Stacks.push_b,
    "ra": Stacks.rotate_a,
    "sa": Stacks.swap_a,
    "sb": Stacks.swap_b,
}


def _replay(values, operations):
    stacks = Stacks(values)
    for name in operations:
        _OPERATIONS[name](stacks)
    return stacks


def _check_sorted(values, stacks):
    assert list(stacks.a) == sorted(values)
    assert list(stacks.b) == []
    replayed = _replay(values, stacks.operations)
    assert list(replayed.a) == sorted(values)


@pytest.mark.parametrize("n", range(1, 70))
def test_get_max_bits_covers_largest(n):
    bits = get_max_bits(list(range(n)))
    assert (n - 1) >> bits == 0
    if n > 1:
        assert (n - 1) >> (bits - 1) == 1


def test_get_max_bits_of_zero_only():
    assert get_max_bits([0]) == 0


def test_sort_two_swaps():
    stacks = Stacks([2, 1])
    sort_two(stacks)
    assert list(stacks.a) == [1, 2]
    assert stacks.operations == ["sa"]


def test_sort_two_already_sorted():
    stacks = Stacks([1, 2])
    sort_two(stacks)
    assert stacks.operations == []


@pytest.mark.parametrize("values", list(permutations([10, -3, 7])))
def test_sort_three_all_orders(values):
    stacks = Stacks(values)
    sort_three(stacks)
    _check_sorted(values, stacks)
    assert len(stacks.operations) <= 2


def test_sort_three_double_rotate():
    stacks = Stacks([2, 3, 1])
    sort_three(stacks)
    assert stacks.operations == ["ra", "ra"]


def test_sort_three_wrong_size():
    with pytest.raises(ValueError):
        sort_three(Stacks([1, 2]))


@pytest.mark.parametrize("values", list(permutations([4, 1, 3, 2])))
def test_sort_four_all_orders(values):
    stacks = Stacks(values)
    sort_four(stacks)
    _check_sorted(values, stacks)


@pytest.mark.parametrize("values", list(permutations([50, -1, 8, 22, 0])))
def test_sort_five_all_orders(values):
    stacks = Stacks(values)
    sort_five(stacks)
    _check_sorted(values, stacks)


@pytest.mark.parametrize("size", [6, 7, 16, 100])
def test_radix_sort(size):
    rng = random.Random(size)
    values = rng.sample(range(-1000, 1000), size)
    stacks = Stacks(values)
    radix_sort(stacks)
    _check_sorted(values, stacks)


def test_radix_sort_pass_length():
    values = [5, 3, 0, 1, 4, 2]
    stacks = Stacks(values)
    radix_sort(stacks)
    bits = get_max_bits(range(len(values)))
    moves = [op for op in stacks.operations if op in ("ra", "pb")]
    assert len(moves) == bits * len(values)


@pytest.mark.parametrize(
    "values, direct",
    [
        ([2, 1], sort_two),
        ([3, 1, 2], sort_three),
        ([3, 4, 1, 2], sort_four),
        ([5, 1, 4, 2, 3], sort_five),
        ([6, 1, 5, 2, 4, 3], radix_sort),
    ],
)
def test_sort_stacks_dispatch(values, direct):
    dispatched = Stacks(values)
    sort_stacks(dispatched, len(values))
    expected = Stacks(values)
    direct(expected)
    assert dispatched.operations == expected.operations
    assert list(dispatched.a) == sorted(values)
import random

import pytest

from pushswap.cli import main, solve
from pushswap.parsing import InputError
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


def test_solve_two():
    assert solve(["2", "1"]) == ["sa"]


def test_solve_sorted_input_needs_nothing():
    assert solve(["1", "2", "3"]) == []


@pytest.mark.parametrize("count", [3, 4, 5, 6, 12, 50])
def test_solve_sorts(count):
    rng = random.Random(count)
    values = rng.sample(range(-500, 500), count)
    operations = solve([str(v) for v in values])
    stacks = _replay(values, operations)
    assert list(stacks.a) == sorted(values)
    assert list(stacks.b) == []


@pytest.mark.parametrize("args", [["1", "x"], ["1", "1"], ["2147483648"], ["-"]])
def test_solve_invalid(args):
    with pytest.raises(InputError):
        solve(args)


def test_main_prints_operations(capsys):
    status = main(["2", "1"])
    captured = capsys.readouterr()
    assert status == 1
    assert captured.out == "sa\n"
    assert captured.err == ""


def test_main_error(capsys):
    status = main(["3", "abc"])
    captured = capsys.readouterr()
    assert status == 1
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_no_arguments(capsys):
    status = main([])
    captured = capsys.readouterr()
    assert status == 1
    assert captured.out + captured.err == ""


def test_main_output_sorts(capsys):
    values = [9, -3, 14, 0, 7, 2, -8]
    main([str(v) for v in values])
    lines = capsys.readouterr().out.splitlines()
    stacks = _replay(values, lines)
    assert list(stacks.a) == sorted(values)


def test_main_sorted_input_prints_nothing(capsys):
    main(["-1", "0", "1"])
    assert capsys.readouterr().out == ""
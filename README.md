# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small set of operations, and prints each operation it performs.

## Operations

| Move | Effect                                          |
|------|-------------------------------------------------|
| `sa` | swap the top two elements of stack `a`          |
| `sb` | swap the top two elements of stack `b`          |
| `pa` | move the top of stack `b` onto stack `a`        |
| `pb` | move the top of stack `a` onto stack `b`        |
| `ra` | rotate stack `a` so its top goes to the bottom  |

Two to five numbers are handled by dedicated short sequences; six or more
are sorted with a binary radix sort over each number's rank (how many of
the other numbers are smaller).

## Command line

```
pip install .
push-swap 3 2 1
```

Each number is its own argument: an optional leading `+` or `-` followed
by digits, in the 32-bit signed range. Anything else (letters, spaces
inside an argument, a lone sign), an out-of-range value or a duplicate
prints `Error` on standard error. Input that is already sorted prints
nothing. With no arguments nothing is printed.

The command exits with status 1 in every case, including a successful run.

## Library use

```python
from pushswap.cli import solve

moves = solve(["3", "2", "1"])   # ['ra', 'sa']
```

`solve(args)` returns the list of moves for the given arguments and raises
`pushswap.parsing.InputError` (a `ValueError`) for invalid input.
`pushswap.cli.main(argv=None)` is the command itself and returns its exit
status.

The pieces it is built from:

- `pushswap.parsing`: `validate_args`, `atoi`, `parse_numbers`,
  `check_duplicates`, `is_sorted`, `rank`, the `InputError` exception and
  the `INT_MIN` / `INT_MAX` bounds.
- `pushswap.stacks`: the `Stacks` class holding deques `a` and `b` (tops
  at the left) with the methods `push_a`, `push_b`, `rotate_a`, `swap_a`
  and `swap_b`. Every applied move is appended to `Stacks.operations` and,
  when an `output` text stream is given, written to it as one line.
  `swap_a` and `swap_b` do nothing and record nothing with fewer than two
  elements; the push and rotate moves are always recorded.
- `pushswap.sorting`: `sort_two`, `sort_three`, `sort_four` and
  `sort_five` (each raises `ValueError` unless stack `a` holds exactly
  that many values), `radix_sort`, `get_max_bits`, and `sort_stacks`,
  which picks the strategy for a given count.

## Helpers

The `pushswap.libft` sub-package holds small helpers with C-library style
behaviour on Python values:

- `pushswap.libft.chars`: `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`,
  `is_print`, `to_lower`, `to_upper` on a one-character string or an
  integer code.
- `pushswap.libft.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`,
  `strnstr`, `strlcpy`, `strlcat`, `strdup`, `substr`, `strjoin`,
  `strtrim`, `split`, `strmapi`, `striteri`, `itoa`. Positions come back
  as indexes and `None` stands for "not found".
- `pushswap.libft.memory`: `memset`, `bzero`, `calloc`, `memchr`,
  `memcmp`, `memcpy`, `memmove` on `bytearray`s and other buffers.
- `pushswap.libft.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`,
  `putnbr_fd`, writing to a text stream.
- `pushswap.libft.linkedlist`: the `LinkedList` class, a singly linked
  list with `push_front`, `append`, `last`, `pop_front`, `clear`,
  `for_each`, `len()` and iteration.

## What it does not do

There is no checker: the package produces moves but has no command that
reads a list of moves and verifies that they sort a given input. Only the
five moves above exist; `sb` is the only move on stack `b` besides the
pushes.

## Tests

```
pip install .[test]
pytest
```
"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO

from pushswap.libft.strings import itoa


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write the single character ``c`` to ``stream``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def putstr_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` to ``stream``."""
    stream.write(s)


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    stream.write(s)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal text of the 32-bit signed integer ``n`` to ``stream``.

    Raises ``OverflowError`` when ``n`` lies outside the 32-bit range.
    """
    stream.write(itoa(n))
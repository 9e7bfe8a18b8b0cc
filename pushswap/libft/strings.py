"""String helpers with the classic C string-library semantics, on Python strings.

Positions are returned as indexes. None stands where C returns a null
pointer. The terminating null character of a C string is modelled as the
position ``len(s)``.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest
from typing import Optional, Union

from pushswap.parsing import INT_MAX, INT_MIN

Char = Union[str, int]

_NUL = "\0"


def _char(c: Char) -> str:
    """Return ``c`` as a one-character string; integer codes keep their low byte."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _non_negative(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the null character finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the null character finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first pair of codes that differ, a
    shorter string counting as if padded with null characters, or 0.
    """
    _non_negative(n, "length")
    pairs = zip_longest(first, second, fillvalue=_NUL)
    for left, right in islice(pairs, n):
        if left != right:
            return ord(left) - ord(right)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` within the first ``length`` characters of ``big``, or None.

    An empty ``little`` is found at index 0.
    """
    _non_negative(length, "length")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text, at most ``size - 1`` characters, and the length
    of ``src``, which is the length the copy would have had without truncation.
    """
    _non_negative(size, "size")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When
    ``dst`` already fills the buffer nothing is appended and the length
    reported is ``len(src) + size``.
    """
    _non_negative(size, "size")
    if len(dst) >= size:
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(src) + len(dst)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: Char) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` on every character of ``s`` in place.

    A value returned by ``func`` replaces the character; None leaves it.
    """
    for index, ch in enumerate(s):
        replacement = func(index, ch)
        if replacement is not None:
            s[index] = replacement


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)
"""Character classification and case conversion on single ASCII characters."""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    """Return the integer code of ``c``, given as a code or a one-character string."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def is_digit(c: Char) -> bool:
    """True for the characters '0' to '9'."""
    return ord("0") <= _code(c) <= ord("9")


def is_alpha(c: Char) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space to tilde."""
    return 32 <= _code(c) <= 126


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII capital; anything else comes back unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII small letter; anything else comes back unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c
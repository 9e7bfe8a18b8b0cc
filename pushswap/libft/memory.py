"""Byte-buffer primitives: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: ReadableBuffer) -> None:
    """Raise ``ValueError`` unless ``n`` bytes fit in every buffer."""
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buffer)}")


def _check_span(buffer: ReadableBuffer, offset: int, n: int, what: str) -> None:
    if offset < 0 or offset + n > len(buffer):
        raise ValueError(
            f"{what} range {offset}..{offset + n} lies outside a buffer of {len(buffer)} bytes"
        )


def memset(buffer: Buffer, c: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buffer`` to the low byte of ``c``; return ``buffer``."""
    _check_count(n, buffer)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def bzero(buffer: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError(f"count and size must not be negative, got {count} and {size}")
    return bytearray(count * size)


def memchr(data: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of ``c`` among the first ``n``, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(first: ReadableBuffer, second: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_count(n, first, second)
    for left, right in zip(bytes(first[:n]), bytes(second[:n])):
        if left != right:
            return left - right
    return 0


def memcpy(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``; return ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy ``n`` bytes within ``buffer`` from offset ``src`` to offset ``dest``.

    The ranges may overlap; the result is as if the source were copied out first.
    Returns ``buffer``.
    """
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    _check_span(buffer, src, n, "source")
    _check_span(buffer, dest, n, "destination")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer
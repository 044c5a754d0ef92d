"""Byte-buffer operations on bytearray objects."""

from __future__ import annotations

INT_MAX = 2**31 - 1


def _check_span(buffer: bytes | bytearray, start: int, n: int) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if start < 0 or start + n > len(buffer):
        raise IndexError("range exceeds buffer size")


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of the buffer to zero in place."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes (at least one byte).

    Raises OverflowError when the total would exceed INT_MAX.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size and count > INT_MAX // size:
        raise OverflowError("allocation size too large")
    return bytearray(max(count * size, 1))


def memchr(buffer: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to c within the first n bytes."""
    _check_span(buffer, 0, n)
    index = buffer.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, n: int) -> int:
    """Compare the first n bytes; return the difference of the first mismatch or 0."""
    _check_span(first, 0, n)
    _check_span(second, 0, n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy n bytes from src to the start of dst and return dst."""
    _check_span(src, 0, n)
    _check_span(dst, 0, n)
    dst[:n] = src[:n]
    return dst


def memmove(buffer: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside one buffer from offset src to offset dst; overlap is safe."""
    _check_span(buffer, src, n)
    _check_span(buffer, dst, n)
    buffer[dst:dst + n] = bytes(buffer[src:src + n])
    return buffer


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes with the low byte of c and return the buffer."""
    _check_span(buffer, 0, n)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer
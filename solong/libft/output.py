"""Formatted output: a small printf and put-style writers."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

_UINT_MASK = 0xFFFFFFFF
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"


def _to_uint32(n: int) -> int:
    return n & _UINT_MASK


def _to_int32(n: int) -> int:
    n &= _UINT_MASK
    return n - (1 << 32) if n & 0x80000000 else n


def _hex_digits(n: int, digits: str) -> str:
    if n == 0:
        return digits[0]
    out = []
    while n:
        n, rem = divmod(n, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def format_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal form of n taken as a 32-bit unsigned integer, no prefix."""
    return _hex_digits(_to_uint32(n), _HEX_UPPER if upper else _HEX_LOWER)


def format_unsigned(n: int) -> str:
    """Decimal form of n taken as a 32-bit unsigned integer."""
    return str(_to_uint32(n))


def format_pointer(address: int | None) -> str:
    """Address as "0x" plus lower-case hex digits; a null address is "(nil)"."""
    if not address:
        return "(nil)"
    if address < 0:
        raise ValueError("address must not be negative")
    return "0x" + _hex_digits(address, _HEX_LOWER)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "scdiuxXp":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects a single character, got {value!r}")
            return value
        return chr(value & 0xFF)
    if spec in "di":
        return str(_to_int32(value))
    if spec == "u":
        return format_unsigned(value)
    if spec in "xX":
        return format_hex(value, upper=spec == "X")
    return format_pointer(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Format fmt with the conversions %s %c %d %i %u %x %X %p and %%.

    Unknown conversions produce nothing; a lone trailing "%" is kept.
    Raises TypeError when fewer arguments are given than conversions need.
    """
    values = iter(args)
    pieces: list[str] = []
    pos = 0
    length = len(fmt)
    while pos < length:
        char = fmt[pos]
        if char == "%" and pos + 1 < length:
            pieces.append(_convert(fmt[pos + 1], values))
            pos += 2
        else:
            pieces.append(char)
            pos += 1
    return "".join(pieces)


def _target(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write sprintf(fmt, *args) to file (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    _target(file).write(text)
    return len(text)


def put_char(c: str, file: TextIO | None = None) -> int:
    """Write one character and return 1."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(file).write(c)
    return 1


def put_str(text: str | None, file: TextIO | None = None) -> int:
    """Write text ("(null)" for None) and return the number of characters."""
    if text is None:
        text = "(null)"
    _target(file).write(text)
    return len(text)


def put_endl(text: str | None, file: TextIO | None = None) -> int:
    """Write text followed by a newline; None writes nothing.

    Returns the number of characters written.
    """
    if text is None:
        return 0
    _target(file).write(text + "\n")
    return len(text) + 1


def put_nbr(n: int, file: TextIO | None = None) -> int:
    """Write the decimal form of n and return the number of characters."""
    text = str(n)
    _target(file).write(text)
    return len(text)
"""String helpers: splitting, searching, bounded copies and comparisons."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _single_char(c: str, name: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{name} must be a single character, got {c!r}")
    return c


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def split(text: str, sep: str) -> list[str]:
    """Split on runs of the separator character, dropping empty pieces."""
    _single_char(sep, "sep")
    return [word for word in text.split(sep) if word]


def strchr(text: str, c: str) -> int | None:
    """Index of the first occurrence of c, len(text) for "\\0", or None."""
    _single_char(c, "c")
    if c == "\0":
        index = text.find(c)
        return len(text) if index < 0 else index
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> int | None:
    """Index of the last occurrence of c, len(text) for "\\0", or None."""
    _single_char(c, "c")
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strjoin(prefix: str, suffix: str) -> str:
    """Return prefix followed by suffix."""
    return prefix + suffix


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy at most size - 1 characters of src.

    Returns the resulting destination text and the full length of src. With a
    size of zero the destination is left as it was.
    """
    _non_negative(size, "size")
    if size == 0:
        return dst, len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst so the result holds at most size - 1 characters.

    Returns the resulting text and the length the full concatenation would
    have had. When size does not exceed the length of dst, dst is unchanged
    and size + len(src) is returned.
    """
    _non_negative(size, "size")
    dest_len = min(len(dst), size)
    if size <= dest_len:
        return dst, size + len(src)
    room = size - 1 - dest_len
    return dst + src[:room], dest_len + len(src)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; the end of a string counts as code 0.

    Returns the code difference at the first mismatch, or 0.
    """
    _non_negative(n, "n")
    for pos in range(n):
        a = ord(first[pos]) if pos < len(first) else 0
        b = ord(second[pos]) if pos < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Index of needle inside the first n characters of haystack, or None.

    An empty needle is found at index 0.
    """
    _non_negative(n, "n")
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove leading and trailing characters that appear in charset."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(text):
        return ""
    return text[start : start + length]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(buffer: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace every character of buffer in place with func(index, char)."""
    for index, char in enumerate(buffer):
        buffer[index] = func(index, char)
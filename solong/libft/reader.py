"""Line-by-line reading through a fixed-size read buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 15


class LineReader(Generic[AnyStr]):
    """Read lines from a stream, BUFFER_SIZE units at a time.

    Works with text and binary streams alike. Each line keeps its trailing
    newline; the final line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._stash: AnyStr | None = None

    def _fill(self) -> None:
        while True:
            if self._stash is not None and self._newline(self._stash) in self._stash:
                return
            try:
                chunk = self.stream.read(self.buffer_size)
            except BaseException:
                self._stash = None
                raise
            if not chunk:
                return
            self._stash = chunk if self._stash is None else self._stash + chunk

    @staticmethod
    def _newline(sample: AnyStr) -> AnyStr:
        return "\n" if isinstance(sample, str) else b"\n"  # type: ignore[return-value]

    def readline(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        stash = self._stash
        if not stash:
            self._stash = None
            return None
        end = stash.find(self._newline(stash))
        if end < 0:
            self._stash = None
            return stash
        self._stash = stash[end + 1:]
        return stash[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read every line of a file, one character per byte, newlines kept."""
    with open(path, encoding="latin-1", newline="") as handle:
        return list(LineReader(handle))
"""Buffered line reading from a stream, with a guard against binary data."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

__all__ = ["is_binary", "LineReader"]

DEFAULT_BUFFER_SIZE = 42


def _code(item: str | int) -> int:
    return item if isinstance(item, int) else ord(item)


def is_binary(stash: str | bytes) -> bool:
    """Tell whether the text before the first newline holds unprintable data.

    Only characters in the printable ASCII range 32..126 are accepted.
    """
    newline = b"\n" if isinstance(stash, bytes) else "\n"
    head = stash.split(newline, 1)[0]
    return any(not 32 <= _code(item) <= 126 for item in head)


class LineReader(Generic[AnyStr]):
    """Read a stream line by line in chunks of ``buffer_size``.

    Works with streams returning either bytes or str; lines have the same
    type. Data following a NUL within a chunk is dropped.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._stash: AnyStr | None = None

    def _fill(self, stash: AnyStr) -> AnyStr:
        newline = b"\n" if isinstance(stash, bytes) else "\n"
        nul = b"\0" if isinstance(stash, bytes) else "\0"
        while newline not in stash:
            try:
                chunk = self.stream.read(self.buffer_size)
            except OSError:
                self._stash = None
                raise
            if not chunk:
                break
            stash = stash + chunk.split(nul, 1)[0]
        return stash

    def _empty(self) -> AnyStr:
        probe = self.stream.read(0)
        return probe[:0]

    def read_line(self) -> AnyStr | None:
        """Return the next line with its newline, or None at end or on binary data."""
        stash = self._stash if self._stash is not None else self._empty()
        stash = self._fill(stash)
        self._stash = stash
        if is_binary(stash):
            return None
        if not stash:
            self._stash = None
            return None
        newline = b"\n" if isinstance(stash, bytes) else "\n"
        head, found, rest = stash.partition(newline)
        self._stash = rest if found else None
        return head + found

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line
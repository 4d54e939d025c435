"""Read-only seekable stream over an in-memory byte buffer."""

from __future__ import annotations

import io
from enum import Enum


class SeekOrigin(Enum):
    """Reference point for a seek."""

    SET = "set"
    CURRENT = "current"
    END = "end"


class RawInputStream:
    """A read-only cursor over bytes that are held in memory."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._position = 0

    def opened(self) -> bool:
        """The stream is always open once constructed."""
        return True

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes; fewer are returned at the end of data."""
        if size < 0:
            raise ValueError("size must not be negative")
        chunk = self._data[self._position:self._position + size]
        self._position += len(chunk)
        return chunk

    def write(self, data: bytes) -> int:
        """Writing is refused: the stream is read-only."""
        raise io.UnsupportedOperation(
            f"cannot write {len(data)} bytes to a read-only stream"
        )

    def seek(self, offset: int, origin: SeekOrigin = SeekOrigin.SET) -> int:
        """Move the cursor and return its new position.

        Raises ValueError when the target lies outside the data.
        """
        if origin is SeekOrigin.SET:
            target = offset
        elif origin is SeekOrigin.CURRENT:
            target = self._position + offset
        elif origin is SeekOrigin.END:
            target = len(self._data) + offset
        else:
            raise ValueError(f"unknown seek origin: {origin!r}")
        if not 0 <= target <= len(self._data):
            raise ValueError(f"seek position {target} outside 0..{len(self._data)}")
        self._position = target
        return target

    def tell(self) -> int:
        return self._position

    def size(self) -> int:
        return len(self._data)
"""A bounds checked read position over a TZif buffer."""

from __future__ import annotations

from .exceptions import TruncatedDataError

__all__ = [
    "ByteCursor",
]


class ByteCursor:
    """Reads consecutive sections from a byte buffer.

    Every read is checked against the end of the buffer before the
    position moves, so a short buffer results in a `TruncatedDataError`
    naming the section that could not be read.
    """

    def __init__(self, buffer: bytes | bytearray | memoryview, position: int = 0) -> None:
        """Initialize ByteCursor with a private copy of the buffer."""
        self._buffer = bytes(buffer)
        if position < 0 or position > len(self._buffer):
            raise TruncatedDataError("start position", position, len(self._buffer))
        self._position = position

    @property
    def position(self) -> int:
        """Return the offset of the next byte to read."""
        return self._position

    @property
    def remaining(self) -> int:
        """Return the number of bytes left after the current position."""
        return len(self._buffer) - self._position

    def _advance(self, size: int, section: str) -> int:
        if size < 0:
            raise ValueError(f"Negative read size for {section}: {size}")
        end = self._position + size
        if end > len(self._buffer):
            raise TruncatedDataError(section, end, len(self._buffer))
        start = self._position
        self._position = end
        return start

    def peek(self, size: int) -> bytes:
        """Return up to `size` bytes at the current position without advancing."""
        return self._buffer[self._position : self._position + size]

    def take(self, size: int, section: str) -> bytes:
        """Return the next `size` bytes and advance past them."""
        start = self._advance(size, section)
        return self._buffer[start : start + size]

    def skip(self, size: int, section: str) -> None:
        """Advance past the next `size` bytes without reading them."""
        self._advance(size, section)

    def __repr__(self) -> str:
        return f"ByteCursor(position={self._position}, size={len(self._buffer)})"

"""In-memory byte source and sink."""

from __future__ import annotations

from typing import Optional, Union

from .base import ByteSink, ByteSource

BytesLike = Union[bytes, bytearray, memoryview]


class BufferSource(ByteSource):
    """Serves bytes from a buffer held in memory."""

    def __init__(self, data: BytesLike) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def remaining(self) -> int:
        return len(self._data) - self._pos

    def read_byte(self) -> Optional[int]:
        if self._pos >= len(self._data):
            return None
        value = self._data[self._pos]
        self._pos += 1
        return value


class BufferSink(ByteSink):
    """Collects written bytes in a growable buffer."""

    def __init__(self) -> None:
        self._out = bytearray()

    def __len__(self) -> int:
        return len(self._out)

    def write_byte(self, value: int) -> None:
        self._out.append(value & 0xFF)

    def write(self, data: bytes) -> None:
        self._out.extend(data)

    def getvalue(self) -> bytes:
        return bytes(self._out)


__all__ = ["BufferSource", "BufferSink", "BytesLike"]

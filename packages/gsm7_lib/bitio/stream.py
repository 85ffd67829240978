"""Byte source and sink backed by binary file-like objects."""

from __future__ import annotations

from typing import BinaryIO, Optional

from .base import ByteSink, ByteSource


class StreamSource(ByteSource):
    """Reads bytes from a binary stream in chunks.

    The wrapped stream is never closed here; its owner stays responsible for
    it. I/O errors raised by the stream propagate unchanged.
    """

    def __init__(self, stream: BinaryIO, *, chunk_size: int = 4096) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._stream = stream
        self._chunk_size = chunk_size
        self._chunk = b""
        self._pos = 0
        self._eof = False

    @property
    def stream(self) -> BinaryIO:
        return self._stream

    def read_byte(self) -> Optional[int]:
        if self._pos >= len(self._chunk):
            if self._eof:
                return None
            chunk = self._stream.read(self._chunk_size)
            if not chunk:
                self._eof = True
                return None
            self._chunk = bytes(chunk)
            self._pos = 0
        value = self._chunk[self._pos]
        self._pos += 1
        return value


class StreamSink(ByteSink):
    """Writes bytes to a binary stream, buffering up to ``buffer_size`` bytes."""

    def __init__(self, stream: BinaryIO, *, buffer_size: int = 4096) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = bytearray()

    @property
    def stream(self) -> BinaryIO:
        return self._stream

    def write_byte(self, value: int) -> None:
        self._pending.append(value & 0xFF)
        if len(self._pending) >= self._buffer_size:
            self._drain()

    def write(self, data: bytes) -> None:
        self._pending.extend(data)
        if len(self._pending) >= self._buffer_size:
            self._drain()

    def flush(self) -> None:
        self._drain()
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()

    def _drain(self) -> None:
        if self._pending:
            self._stream.write(bytes(self._pending))
            self._pending.clear()


__all__ = ["StreamSource", "StreamSink"]

"""Bit-granular I/O over byte sources and sinks."""

from __future__ import annotations

from .base import ByteSink, ByteSource
from .cursor import BitInput, BitOutput
from .memory import BufferSink, BufferSource, BytesLike
from .stream import StreamSink, StreamSource

__all__ = [
    "ByteSource",
    "ByteSink",
    "BitInput",
    "BitOutput",
    "BufferSource",
    "BufferSink",
    "BytesLike",
    "StreamSource",
    "StreamSink",
]

"""Byte source and sink primitives the bit cursors are built on."""

from __future__ import annotations

import abc
from typing import Optional


class ByteSource(abc.ABC):
    """Abstract ordered source of bytes consumed by :class:`BitInput`."""

    @abc.abstractmethod
    def read_byte(self) -> Optional[int]:
        """Return the next byte, or ``None`` once the source is exhausted."""


class ByteSink(abc.ABC):
    """Abstract ordered sink of bytes fed by :class:`BitOutput`."""

    @abc.abstractmethod
    def write_byte(self, value: int) -> None:
        """Append a single byte to the sink."""

    def write(self, data: bytes) -> None:
        for value in data:
            self.write_byte(value)

    def flush(self) -> None:
        """Push buffered bytes to their destination; no-op by default."""


__all__ = ["ByteSource", "ByteSink"]

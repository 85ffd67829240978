"""Least-significant-bit-first bit cursors over byte sources and sinks."""

from __future__ import annotations

from typing import Optional

from .base import ByteSink, ByteSource


class BitInput:
    """Reads bit fields from a :class:`ByteSource`, LSB of each byte first."""

    def __init__(self, source: ByteSource) -> None:
        self._source = source
        self._acc = 0
        self._nbits = 0
        self._bits_read = 0

    @property
    def source(self) -> ByteSource:
        return self._source

    @property
    def bits_read(self) -> int:
        return self._bits_read

    @property
    def byte_aligned(self) -> bool:
        return self._nbits == 0

    def _fill(self) -> bool:
        value = self._source.read_byte()
        if value is None:
            return False
        self._acc = value & 0xFF
        self._nbits = 8
        return True

    def read_bits(self, count: int) -> Optional[int]:
        """Return the next *count* bits as an integer.

        ``None`` means the source ran dry first; whatever bits were left have
        been consumed regardless.
        """
        if count < 0:
            raise ValueError("Bit count must not be negative")
        value = 0
        got = 0
        while got < count:
            if self._nbits == 0 and not self._fill():
                return None
            take = min(count - got, self._nbits)
            value |= (self._acc & ((1 << take) - 1)) << got
            self._acc >>= take
            self._nbits -= take
            self._bits_read += take
            got += take
        return value

    def read_bit(self) -> Optional[int]:
        return self.read_bits(1)

    def at_end(self) -> bool:
        """True when no bits remain at all, partial or whole."""
        return self._nbits == 0 and not self._fill()


class BitOutput:
    """Packs bit fields into a :class:`ByteSink`, LSB of each byte first."""

    def __init__(self, sink: ByteSink) -> None:
        self._sink = sink
        self._acc = 0
        self._nbits = 0
        self._bit_count = 0

    @property
    def sink(self) -> ByteSink:
        return self._sink

    @property
    def bit_count(self) -> int:
        return self._bit_count

    @property
    def pending_bits(self) -> int:
        return self._nbits

    def write_bits(self, value: int, count: int) -> None:
        if count < 0:
            raise ValueError("Bit count must not be negative")
        if not 0 <= value < (1 << count):
            raise ValueError(f"Value {value} does not fit in {count} bits")
        self._bit_count += count
        while count:
            take = min(8 - self._nbits, count)
            self._acc |= (value & ((1 << take) - 1)) << self._nbits
            value >>= take
            count -= take
            self._nbits += take
            if self._nbits == 8:
                self._sink.write_byte(self._acc)
                self._acc = 0
                self._nbits = 0

    def write_bit(self, bit: int) -> None:
        self.write_bits(1 if bit else 0, 1)

    def write_bytes(self, data: bytes) -> None:
        if self._nbits == 0:
            self._sink.write(bytes(data))
            self._bit_count += len(data) * 8
            return
        for value in data:
            self.write_bits(value, 8)

    def align(self, pad_bit: int = 0) -> int:
        """Pad the pending byte up to the boundary and return the pad width."""
        if self._nbits == 0:
            return 0
        width = 8 - self._nbits
        self.write_bits(((1 << width) - 1) if pad_bit else 0, width)
        return width

    def flush(self) -> None:
        self._sink.flush()


__all__ = ["BitInput", "BitOutput"]

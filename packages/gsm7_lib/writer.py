"""Push-based encoder producing packed GSM 7-bit streams."""

from __future__ import annotations

import logging
from typing import BinaryIO, List, Tuple, Union

from .bitio import BitOutput, BufferSink, ByteSink, StreamSink
from .charset import (
    ESCAPE,
    GSM7_BASIC_MAP,
    GSM7_EXTENDED_REVERSE,
    PAD_FILLER,
    SEPTET_BITS,
)
from .errors import NotEncodableError, WriterClosedError

SinkInput = Union[ByteSink, BinaryIO, None]


def _coerce_to_sink(sink: SinkInput) -> ByteSink:
    if sink is None:
        return BufferSink()
    if isinstance(sink, ByteSink):
        return sink
    if hasattr(sink, "write"):
        return StreamSink(sink)
    raise TypeError(f"Cannot write GSM 7-bit data to {type(sink).__name__}")


def _units_for(char: str) -> Tuple[int, ...]:
    if char in GSM7_EXTENDED_REVERSE:
        return ESCAPE, GSM7_EXTENDED_REVERSE[char]
    if char in GSM7_BASIC_MAP:
        return (GSM7_BASIC_MAP[char],)
    raise NotEncodableError(char)


class Gsm7Writer:
    """Packs characters into septets on top of a byte sink.

    Every write advances one running bit count, including the raw
    ``write_bit``/``write_bits``/``write_bytes`` passthroughs used to put
    header fields in front of the text. :meth:`finalize` uses that count to
    pad the last byte:

    * one septet short of a byte boundary (``bit_count % 8 == 1``): a ``CR``
      septet is written as filler so the 7 spare bits cannot read as ``@``;
    * any other partial byte is padded with zero bits.
    """

    def __init__(
        self,
        sink: SinkInput = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._output = BitOutput(_coerce_to_sink(sink))
        self._logger = logger or logging.getLogger(__name__)
        self._closed = False

    @property
    def bit_count(self) -> int:
        return self._output.bit_count

    @property
    def closed(self) -> bool:
        return self._closed

    def write_char(self, char: str) -> None:
        """Encode one character; unsupported characters leave no bits behind."""
        self._ensure_open()
        for unit in _units_for(char):
            self._output.write_bits(unit, SEPTET_BITS)

    def write(self, text: str) -> int:
        """Encode *text*, all or nothing, and return the septets written."""
        self._ensure_open()
        units: List[int] = []
        for char in text:
            units.extend(_units_for(char))
        for unit in units:
            self._output.write_bits(unit, SEPTET_BITS)
        return len(units)

    def write_bit(self, bit: int) -> None:
        self._ensure_open()
        self._output.write_bit(bit)

    def write_bits(self, value: int, count: int) -> None:
        self._ensure_open()
        self._output.write_bits(value, count)

    def write_bytes(self, data: bytes) -> None:
        self._ensure_open()
        self._output.write_bytes(data)

    def finalize(self) -> ByteSink:
        """Apply the padding rule, flush, and hand back the underlying sink."""
        self._ensure_open()
        remainder = self._output.bit_count % 8
        if remainder == 1:
            self._logger.debug(
                "Padding %d bits with CR filler septet", self._output.bit_count
            )
            self._output.write_bits(PAD_FILLER, SEPTET_BITS)
        elif remainder:
            pad = self._output.align()
            self._logger.debug("Padding final byte with %d zero bits", pad)
        self._output.flush()
        self._closed = True
        return self._output.sink

    def getvalue(self) -> bytes:
        """Finalize an in-memory writer and return the packed bytes."""
        if not isinstance(self._output.sink, BufferSink):
            raise TypeError("getvalue() needs a writer backed by a BufferSink")
        sink = self.finalize()
        return sink.getvalue()

    def _ensure_open(self) -> None:
        if self._closed:
            raise WriterClosedError("Writer has already been finalized")


__all__ = ["Gsm7Writer", "SinkInput"]

"""Pull-based decoder for packed GSM 7-bit streams."""

from __future__ import annotations

import logging
from typing import BinaryIO, Iterator, List, Optional, Union

from .bitio import BitInput, BufferSource, ByteSource, StreamSource
from .charset import ESCAPE, PAD_FILLER, SEPTET_BITS, decode_base, decode_escape
from .errors import DecodeError, TruncatedDataError, TruncatedEscapeError

SourceInput = Union[ByteSource, bytes, bytearray, memoryview, BinaryIO]


def _coerce_to_source(source: SourceInput) -> ByteSource:
    if isinstance(source, ByteSource):
        return source
    if isinstance(source, (bytes, bytearray, memoryview)):
        return BufferSource(source)
    if hasattr(source, "read"):
        return StreamSource(source)
    raise TypeError(f"Cannot read GSM 7-bit data from {type(source).__name__}")


class Gsm7Reader:
    """Decodes characters one septet at a time from a packed byte source.

    Trailing bits that do not make up a whole septet are treated as padding
    and dropped. With ``strip_filler`` enabled, a final ``CR`` septet that ends
    exactly on the last byte boundary is taken to be the filler written by
    :meth:`Gsm7Writer.finalize` and is not returned.

    The reader is a one-shot iterator. Once a :class:`DecodeError` has been
    raised the reader refuses to continue and raises that same error again;
    it never tries to resynchronize.
    """

    def __init__(
        self,
        source: SourceInput,
        *,
        strip_filler: bool = True,
        logger: logging.Logger | None = None,
    ) -> None:
        self._input = BitInput(_coerce_to_source(source))
        self._strip_filler = strip_filler
        self._logger = logger or logging.getLogger(__name__)
        self._error: Optional[DecodeError] = None
        self._exhausted = False

    @property
    def bits_read(self) -> int:
        return self._input.bits_read

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def read_char(self) -> Optional[str]:
        """Return the next character, or ``None`` at the end of the stream."""
        if self._error is not None:
            raise self._error
        if self._exhausted:
            return None
        try:
            return self._decode_next()
        except DecodeError as exc:
            self._error = exc
            self._logger.debug(
                "GSM 7-bit decode failed after %d bits: %s", self.bits_read, exc
            )
            raise

    def read_all(self) -> str:
        chars: List[str] = []
        while True:
            char = self.read_char()
            if char is None:
                return "".join(chars)
            chars.append(char)

    def read_bits(self, count: int) -> int:
        """Read *count* raw bits, e.g. header fields framing the text."""
        if self._error is not None:
            raise self._error
        value = self._input.read_bits(count)
        if value is None:
            self._exhausted = True
            raise TruncatedDataError(f"Stream ended before {count} raw bits")
        return value

    def skip_bits(self, count: int) -> None:
        self.read_bits(count)

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        char = self.read_char()
        if char is None:
            raise StopIteration
        return char

    def _decode_next(self) -> Optional[str]:
        septet = self._input.read_bits(SEPTET_BITS)
        if septet is None:
            self._finish()
            return None
        if septet == ESCAPE:
            code = self._input.read_bits(SEPTET_BITS)
            if code is None:
                self._exhausted = True
                raise TruncatedEscapeError(
                    "Escape marker is not followed by a complete septet"
                )
            return decode_escape(code)
        if (
            septet == PAD_FILLER
            and self._strip_filler
            and self._input.at_end()
        ):
            self._logger.debug("Dropping trailing CR filler septet")
            self._finish()
            return None
        return decode_base(septet)

    def _finish(self) -> None:
        self._exhausted = True
        self._logger.debug("GSM 7-bit stream ended after %d bits", self.bits_read)


__all__ = ["Gsm7Reader", "SourceInput"]

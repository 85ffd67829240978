"""Expose the packed GSM 7-bit codec through the :mod:`codecs` machinery.

After :func:`register` has run, ``"Hello".encode("gsm7-packed")`` and
``data.decode("gsm7-packed")`` go through :class:`Gsm7Writer` and
:class:`Gsm7Reader`. Only ``errors="strict"`` is supported since a packed
stream cannot skip or replace a character without shifting every septet
after it.
"""

from __future__ import annotations

import codecs
from typing import Optional, Tuple

from .bitio import BytesLike
from .errors import DecodeError, NotEncodableError
from .reader import Gsm7Reader
from .writer import Gsm7Writer

CODEC_NAME = "gsm7-packed"
_ALIASES = frozenset({"gsm7_packed", "gsm_7_packed"})

_registered = False


def _check_errors(errors: str) -> None:
    if errors != "strict":
        raise ValueError(f"{CODEC_NAME} only supports errors='strict', not {errors!r}")


class Codec(codecs.Codec):
    def encode(self, input: str, errors: str = "strict") -> Tuple[bytes, int]:
        _check_errors(errors)
        writer = Gsm7Writer()
        for index, char in enumerate(input):
            try:
                writer.write_char(char)
            except NotEncodableError as exc:
                raise UnicodeEncodeError(
                    CODEC_NAME, input, index, index + 1, str(exc)
                ) from exc
        return writer.getvalue(), len(input)

    def decode(self, input: BytesLike, errors: str = "strict") -> Tuple[str, int]:
        _check_errors(errors)
        data = bytes(input)
        reader = Gsm7Reader(data)
        chars = []
        while True:
            start_bit = reader.bits_read
            try:
                char = reader.read_char()
            except DecodeError as exc:
                start = start_bit // 8
                end = max(start + 1, min(len(data), (reader.bits_read + 7) // 8))
                raise UnicodeDecodeError(CODEC_NAME, data, start, end, str(exc)) from exc
            if char is None:
                break
            chars.append(char)
        return "".join(chars), len(data)


def _search(name: str) -> Optional[codecs.CodecInfo]:
    if name.lower().replace("-", "_").replace(" ", "_") not in _ALIASES:
        return None
    codec = Codec()
    return codecs.CodecInfo(
        name=CODEC_NAME,
        encode=codec.encode,
        decode=codec.decode,
    )


def register() -> None:
    """Install the search function once; later calls are no-ops."""
    global _registered
    if not _registered:
        codecs.register(_search)
        _registered = True


__all__ = ["CODEC_NAME", "Codec", "register"]

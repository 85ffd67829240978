"""One-shot helpers for packed GSM 7-bit text."""

from __future__ import annotations

from typing import Iterator, Union
import binascii

from .bitio import BytesLike
from .reader import Gsm7Reader
from .writer import Gsm7Writer


def encode(text: str) -> bytes:
    writer = Gsm7Writer()
    writer.write(text)
    return writer.getvalue()


def encode_hex(text: str) -> str:
    return binascii.hexlify(encode(text)).decode("ascii").upper()


def decode(data: Union[BytesLike, str], *, strip_filler: bool = True) -> str:
    """Decode packed septets; a ``str`` argument is taken as hex."""
    raw = binascii.unhexlify(data) if isinstance(data, str) else bytes(data)
    return Gsm7Reader(raw, strip_filler=strip_filler).read_all()


def decode_hex(text: str) -> str:
    return decode(binascii.unhexlify(text))


def iter_decode(data: BytesLike, *, strip_filler: bool = True) -> Iterator[str]:
    """Lazily yield decoded characters, stopping at the first decode error."""
    return iter(Gsm7Reader(data, strip_filler=strip_filler))


__all__ = ["encode", "encode_hex", "decode", "decode_hex", "iter_decode"]

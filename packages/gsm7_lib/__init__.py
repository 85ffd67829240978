"""Packed GSM 03.38 7-bit alphabet codec."""

from __future__ import annotations

from .charset import (
    ESCAPE,
    GSM7_BASIC_MAP,
    GSM7_BASIC_TABLE,
    GSM7_EXTENDED_REVERSE,
    GSM7_EXTENDED_TABLE,
    PAD_FILLER,
    decode_base,
    decode_escape,
    decode_septets,
    encode_base,
    encode_escape,
    encode_septets,
    is_encodable,
    septet_length,
)
from .codec import decode, decode_hex, encode, encode_hex, iter_decode
from .errors import (
    DecodeError,
    Gsm7Error,
    InvalidCodeError,
    NotEncodableError,
    TruncatedDataError,
    TruncatedEscapeError,
    WriterClosedError,
)
from .reader import Gsm7Reader
from .registry import register
from .writer import Gsm7Writer

__all__ = [
    "ESCAPE",
    "PAD_FILLER",
    "GSM7_BASIC_TABLE",
    "GSM7_EXTENDED_TABLE",
    "GSM7_BASIC_MAP",
    "GSM7_EXTENDED_REVERSE",
    "decode_base",
    "encode_base",
    "decode_escape",
    "encode_escape",
    "is_encodable",
    "septet_length",
    "encode_septets",
    "decode_septets",
    "Gsm7Reader",
    "Gsm7Writer",
    "encode",
    "encode_hex",
    "decode",
    "decode_hex",
    "iter_decode",
    "register",
    "Gsm7Error",
    "DecodeError",
    "InvalidCodeError",
    "TruncatedDataError",
    "TruncatedEscapeError",
    "NotEncodableError",
    "WriterClosedError",
]

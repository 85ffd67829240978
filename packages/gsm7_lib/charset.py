"""GSM 03.38 default alphabet and extension table lookups."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping

from .errors import InvalidCodeError, NotEncodableError, TruncatedEscapeError

ESCAPE = 0x1B
PAD_FILLER = 0x0D
SEPTET_BITS = 7

GSM7_BASIC_TABLE = (
    "@£$¥èéùìòÇ\nØø\rÅåΔ_ΦΓΛΩΠΨΣΘΞ"
    "\x1bÆæßÉ !\"#¤%&'()*+,-./0123456789:;<=>?¡"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÑÜ§¿abcdefghijklmnopqrstuvwxyzäöñüà"
)

GSM7_EXTENDED_TABLE: Mapping[int, str] = MappingProxyType(
    {
        0x0A: "\u000c",
        0x14: "^",
        0x28: "{",
        0x29: "}",
        0x2F: "\\",
        0x3C: "[",
        0x3D: "~",
        0x3E: "]",
        0x40: "|",
        0x65: "€",
    }
)

# The escape marker occupies slot 0x1B but is not a character of its own.
GSM7_BASIC_MAP: Mapping[str, int] = MappingProxyType(
    {ch: idx for idx, ch in enumerate(GSM7_BASIC_TABLE) if idx != ESCAPE}
)
GSM7_EXTENDED_REVERSE: Mapping[str, int] = MappingProxyType(
    {v: k for k, v in GSM7_EXTENDED_TABLE.items()}
)


def decode_base(septet: int) -> str:
    """Return the basic-table character for *septet*."""

    if not 0 <= septet < len(GSM7_BASIC_TABLE):
        raise InvalidCodeError(septet)
    return GSM7_BASIC_TABLE[septet]


def encode_base(char: str) -> int:
    try:
        return GSM7_BASIC_MAP[char]
    except KeyError:
        raise NotEncodableError(char) from None


def decode_escape(code: int) -> str:
    """Return the extension character selected by the septet after ``ESC``."""

    try:
        return GSM7_EXTENDED_TABLE[code]
    except KeyError:
        raise InvalidCodeError(code, escaped=True) from None


def encode_escape(char: str) -> int:
    try:
        return GSM7_EXTENDED_REVERSE[char]
    except KeyError:
        raise NotEncodableError(char) from None


def is_encodable(text: str) -> bool:
    return all(ch in GSM7_BASIC_MAP or ch in GSM7_EXTENDED_REVERSE for ch in text)


def septet_length(text: str) -> int:
    """Return how many septets *text* occupies once encoded."""

    length = 0
    for char in text:
        if char in GSM7_EXTENDED_REVERSE:
            length += 2
        else:
            encode_base(char)
            length += 1
    return length


def encode_septets(text: str) -> List[int]:
    """Return a list of septet values representing *text* in GSM 7-bit alphabet."""

    septets: List[int] = []
    for char in text:
        if char in GSM7_EXTENDED_REVERSE:
            septets.append(ESCAPE)
            septets.append(GSM7_EXTENDED_REVERSE[char])
        else:
            septets.append(encode_base(char))
    return septets


def decode_septets(septets: Iterable[int]) -> str:
    """Decode a sequence of septets into text using the GSM 7-bit alphabet."""

    chars: List[str] = []
    iterator = iter(septets)
    for value in iterator:
        if value == ESCAPE:
            ext_val = next(iterator, None)
            if ext_val is None:
                raise TruncatedEscapeError("Escape marker at end of septet sequence")
            chars.append(decode_escape(ext_val))
        else:
            chars.append(decode_base(value))
    return "".join(chars)


__all__ = [
    "ESCAPE",
    "PAD_FILLER",
    "SEPTET_BITS",
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
]

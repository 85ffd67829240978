"""Exceptions raised by the GSM 7-bit codec."""

from __future__ import annotations


class Gsm7Error(ValueError):
    """Base class for every codec failure."""


class DecodeError(Gsm7Error):
    """Raised when a packed stream cannot be turned back into text."""


class InvalidCodeError(DecodeError):
    """A septet (or extension code) does not resolve to any character."""

    def __init__(self, code: int, *, escaped: bool = False) -> None:
        table = "extension" if escaped else "basic"
        super().__init__(f"Code 0x{code:02X} is not in the GSM 7-bit {table} table")
        self.code = code
        self.escaped = escaped


class TruncatedDataError(DecodeError, EOFError):
    """The stream ended before a required unit could be read in full."""


class TruncatedEscapeError(TruncatedDataError):
    """An escape marker was read but no complete extension septet follows."""


class NotEncodableError(Gsm7Error):
    """A character has no representation in the GSM 7-bit alphabet."""

    def __init__(self, char: str) -> None:
        super().__init__(f"Character {char!r} not supported in GSM 7-bit alphabet")
        self.char = char


class WriterClosedError(Gsm7Error):
    """Raised when a finalized writer is used again."""


__all__ = [
    "Gsm7Error",
    "DecodeError",
    "InvalidCodeError",
    "TruncatedDataError",
    "TruncatedEscapeError",
    "NotEncodableError",
    "WriterClosedError",
]

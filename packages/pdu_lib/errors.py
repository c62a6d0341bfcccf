"""Exceptions raised while encoding or decoding SMS-SUBMIT PDUs."""

from __future__ import annotations


class CodecError(ValueError):
    """Base class for every PDU encoding/decoding failure."""


class InvalidDigitError(CodecError):
    """Raised when an address contains something other than ``0``-``9``."""


class InvalidCharacterError(CodecError):
    """Raised when text contains a code point outside the 7-bit range."""


class MessageTooLongError(CodecError):
    """Raised when text does not fit in a single SMS segment."""


class BufferTooSmallError(CodecError):
    """Raised when an output buffer cannot hold the encoded data."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            f"Output buffer too small: need {required} byte(s), have {available}"
        )
        self.required = required
        self.available = available


class PduDecodeError(CodecError):
    """Raised when a PDU cannot be parsed."""


__all__ = [
    "CodecError",
    "InvalidDigitError",
    "InvalidCharacterError",
    "MessageTooLongError",
    "BufferTooSmallError",
    "PduDecodeError",
]

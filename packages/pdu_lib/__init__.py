"""Public API for the SMS-SUBMIT PDU encoder."""

from __future__ import annotations

from .errors import (
    BufferTooSmallError,
    CodecError,
    InvalidCharacterError,
    InvalidDigitError,
    MessageTooLongError,
    PduDecodeError,
)
from .gsm import pack_septets, packed_length, unpack_septets, unpack_text
from .sms import (
    PduAssembler,
    PduResult,
    SubmitFields,
    SubmitPdu,
    assemble,
    build_submit_pdu,
    decode_submit,
    render_hex,
    required_length,
)
from .utils import OutputBuffer, decode_bcd_digits, encode_bcd_digits, normalize_number

__version__ = "0.1.0"

__all__ = [
    "CodecError",
    "InvalidDigitError",
    "InvalidCharacterError",
    "MessageTooLongError",
    "BufferTooSmallError",
    "PduDecodeError",
    "OutputBuffer",
    "encode_bcd_digits",
    "decode_bcd_digits",
    "normalize_number",
    "pack_septets",
    "packed_length",
    "unpack_septets",
    "unpack_text",
    "PduAssembler",
    "PduResult",
    "SubmitPdu",
    "SubmitFields",
    "assemble",
    "required_length",
    "build_submit_pdu",
    "decode_submit",
    "render_hex",
]

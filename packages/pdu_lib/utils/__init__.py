"""Utility helpers shared by the PDU encoders."""

from __future__ import annotations

from .address import (
    BCD_PAD,
    MAX_ADDRESS_DIGITS,
    bcd_length,
    decode_bcd_digits,
    encode_bcd_digits,
    normalize_number,
    validate_digits,
)
from .buffer import OutputBuffer, WritableBuffer, as_output
from .validity import TEN_DAYS, decode_relative_validity, encode_relative_validity

__all__ = [
    "BCD_PAD",
    "MAX_ADDRESS_DIGITS",
    "bcd_length",
    "decode_bcd_digits",
    "encode_bcd_digits",
    "normalize_number",
    "validate_digits",
    "OutputBuffer",
    "WritableBuffer",
    "as_output",
    "TEN_DAYS",
    "encode_relative_validity",
    "decode_relative_validity",
]

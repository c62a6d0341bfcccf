"""GSM 7-bit text packing helpers."""

from __future__ import annotations

from .gsm7 import (
    TextInput,
    bits_to_bytes,
    bits_to_septets,
    bytes_to_bits_lsb,
    pack_septets,
    packed_length,
    septets_to_bits,
    to_septets,
    unpack_septets,
    unpack_text,
)

__all__ = [
    "TextInput",
    "to_septets",
    "packed_length",
    "pack_septets",
    "unpack_septets",
    "unpack_text",
    "septets_to_bits",
    "bits_to_septets",
    "bytes_to_bits_lsb",
    "bits_to_bytes",
]

"""Semi-octet address handling for SMS PDUs."""

from __future__ import annotations

from typing import List, Union

from ..errors import BufferTooSmallError, InvalidDigitError
from .buffer import OutputBuffer, WritableBuffer, as_output

MAX_ADDRESS_DIGITS = 20
BCD_PAD = 0x0F

_BCD_DIGITS = "0123456789"


def normalize_number(number: str) -> str:
    """Strip a single leading ``+`` from a dialled number."""
    return number[1:] if number.startswith("+") else number


def validate_digits(
    digits: str,
    *,
    allow_empty: bool = False,
    max_digits: int = MAX_ADDRESS_DIGITS,
    label: str = "address",
) -> None:
    if not digits and not allow_empty:
        raise InvalidDigitError(f"Empty {label}")
    if len(digits) > max_digits:
        raise InvalidDigitError(
            f"{label.capitalize()} has {len(digits)} digits, limit is {max_digits}"
        )
    for position, ch in enumerate(digits):
        if ch not in _BCD_DIGITS:
            raise InvalidDigitError(
                f"Unsupported digit {ch!r} at position {position} in {label}"
            )


def bcd_length(digits: str) -> int:
    return (len(digits) + 1) // 2


def encode_bcd_digits(
    digits: str, out: Union[OutputBuffer, WritableBuffer]
) -> int:
    """Pack *digits* into *out* as nibble-swapped BCD.

    Returns the number of bytes written. An odd digit count leaves ``0xF``
    in the high nibble of the last byte.
    """

    values: List[int] = []
    for position, ch in enumerate(digits):
        if ch not in _BCD_DIGITS:
            raise InvalidDigitError(f"Unsupported digit {ch!r} at position {position}")
        values.append(ord(ch) - ord("0"))
    if len(values) % 2:
        values.append(BCD_PAD)
    length = len(values) // 2
    writer = as_output(out)
    if length > writer.remaining:
        raise BufferTooSmallError(writer.position + length, writer.capacity)
    for i in range(0, len(values), 2):
        low = values[i]
        high = values[i + 1]
        writer.push((low & 0x0F) | ((high & 0x0F) << 4))
    return length


def decode_bcd_digits(data: bytes, digits_len: int) -> str:
    chars: List[str] = []
    for byte in data:
        for nibble in (byte & 0x0F, (byte >> 4) & 0x0F):
            if nibble == BCD_PAD:
                continue
            if nibble > 9:
                raise InvalidDigitError(f"Nibble 0x{nibble:X} is not a decimal digit")
            chars.append(_BCD_DIGITS[nibble])
    return "".join(chars)[:digits_len]


__all__ = [
    "MAX_ADDRESS_DIGITS",
    "BCD_PAD",
    "normalize_number",
    "validate_digits",
    "bcd_length",
    "encode_bcd_digits",
    "decode_bcd_digits",
]

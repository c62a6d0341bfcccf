"""GSM 7-bit default alphabet packing.

Text is taken as raw 7-bit code points: the ASCII value of every character
is used as its septet without translating through the GSM 03.38 table.
"""

from __future__ import annotations

from typing import Iterable, List, Union

from ..errors import BufferTooSmallError, InvalidCharacterError
from ..utils.buffer import OutputBuffer, WritableBuffer, as_output

TextInput = Union[str, bytes, bytearray, memoryview]


def to_septets(text: TextInput) -> List[int]:
    """Return the code points of *text*, rejecting anything above 127."""

    if isinstance(text, str):
        values = [ord(ch) for ch in text]
    else:
        values = list(bytes(text))
    for position, value in enumerate(values):
        if value > 0x7F:
            raise InvalidCharacterError(
                f"Code point 0x{value:X} at position {position} is not 7-bit"
            )
    return values


def packed_length(septet_count: int) -> int:
    return (septet_count * 7 + 7) // 8


def pack_septets(text: TextInput, out: Union[OutputBuffer, WritableBuffer]) -> int:
    """Pack *text* into *out* eight septets per seven octets.

    Each output octet takes the remaining high bits of one septet and the
    low bits of the next. After seven octets the shift wraps and the second
    septet of the last pair has been fully consumed, so the input skips it.
    Returns the number of octets written.
    """

    septets = to_septets(text)
    count = len(septets)
    length = packed_length(count)
    writer = as_output(out)
    if length > writer.remaining:
        raise BufferTooSmallError(writer.position + length, writer.capacity)

    shift = 1
    i = 0
    while i + 1 < count:
        writer.push((septets[i] >> (shift - 1)) | (septets[i + 1] << (8 - shift)))
        shift += 1
        if shift == 8:
            shift = 1
            i += 1
        i += 1
    if i < count:
        writer.push(septets[i] >> (shift - 1))
    return length


def septets_to_bits(septets: Iterable[int]) -> List[int]:
    """Convert septets to a least-significant-bit-first bit stream."""

    bits: List[int] = []
    for septet in septets:
        for bit in range(7):
            bits.append((septet >> bit) & 0x01)
    return bits


def bits_to_septets(bits: List[int]) -> List[int]:
    """Convert a bit stream back into septet values."""

    septets: List[int] = []
    for i in range(0, len(bits), 7):
        value = 0
        for idx, bit in enumerate(bits[i : i + 7]):
            value |= (bit & 0x01) << idx
        septets.append(value)
    return septets


def bytes_to_bits_lsb(data: bytes) -> List[int]:
    bits: List[int] = []
    for byte in data:
        for bit in range(8):
            bits.append((byte >> bit) & 0x01)
    return bits


def bits_to_bytes(bits: List[int]) -> bytes:
    """Pack a bit stream (lsb-first) into bytes, zero-filling the last one."""

    out = bytearray()
    for i in range(0, len(bits), 8):
        byte = 0
        for idx, bit in enumerate(bits[i : i + 8]):
            byte |= (bit & 0x01) << idx
        out.append(byte)
    return bytes(out)


def unpack_septets(data: bytes, septet_count: int) -> List[int]:
    """Recover *septet_count* septets from packed user data."""

    needed = packed_length(septet_count)
    if len(data) < needed:
        raise ValueError(
            f"{septet_count} septets need {needed} octets, got {len(data)}"
        )
    bits = bytes_to_bits_lsb(data[:needed])
    return bits_to_septets(bits[: septet_count * 7])


def unpack_text(data: bytes, septet_count: int) -> str:
    return "".join(chr(value) for value in unpack_septets(data, septet_count))


__all__ = [
    "TextInput",
    "to_septets",
    "packed_length",
    "pack_septets",
    "septets_to_bits",
    "bits_to_septets",
    "bytes_to_bits_lsb",
    "bits_to_bytes",
    "unpack_septets",
    "unpack_text",
]

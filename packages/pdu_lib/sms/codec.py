"""High level encode/decode helpers for SMS-SUBMIT PDUs."""

from __future__ import annotations

import binascii
from datetime import timedelta
from typing import Optional, Tuple, Union

from ..errors import InvalidDigitError, PduDecodeError
from ..gsm import TextInput, packed_length, unpack_text
from ..utils import decode_bcd_digits, decode_relative_validity, normalize_number
from .messages import SubmitFields, SubmitPdu
from .submit import assemble, required_length


def build_submit_pdu(smsc: str, dest: str, text: TextInput) -> SubmitPdu:
    """Encode *text* for *dest* and return the PDU with its TP length.

    Both numbers may carry a leading ``+``.
    """

    smsc_digits = normalize_number(smsc)
    dest_digits = normalize_number(dest)
    out = bytearray(required_length(smsc_digits, dest_digits, text))
    result = assemble(smsc_digits, dest_digits, text, out)
    return SubmitPdu(data=bytes(out[: result.total_len]), tp_len=result.tp_len)


def _take(data: bytes, offset: int, count: int, what: str) -> Tuple[bytes, int]:
    end = offset + count
    if end > len(data):
        raise PduDecodeError(f"PDU truncated while reading {what}")
    return data[offset:end], end


def _digits(data: bytes, count: int, what: str) -> str:
    try:
        return decode_bcd_digits(data, count)
    except InvalidDigitError as exc:
        raise PduDecodeError(f"Invalid {what}: {exc}") from exc


def decode_submit(data: Union[bytes, str]) -> SubmitFields:
    """Parse an SMS-SUBMIT PDU that starts with its SMSC field.

    Only the 7-bit default alphabet without a user data header is
    understood, which covers every PDU :func:`assemble` produces.
    """

    try:
        raw = binascii.unhexlify(data) if isinstance(data, str) else bytes(data)
    except (binascii.Error, ValueError) as exc:
        raise PduDecodeError(f"PDU is not valid hex: {exc}") from exc
    header, idx = _take(raw, 0, 1, "SMSC length")
    smsc: Optional[str] = None
    if header[0]:
        body, idx = _take(raw, idx, header[0], "SMSC address")
        smsc = _digits(body[1:], (len(body) - 1) * 2, "SMSC address")

    fixed, idx = _take(raw, idx, 4, "SMS-SUBMIT header")
    first_octet, mr, dest_len, dest_type = fixed
    if first_octet & 0x03 != 0x01:
        raise PduDecodeError(f"Not an SMS-SUBMIT (first octet 0x{first_octet:02X})")
    if first_octet & 0x40:
        raise PduDecodeError("User data headers are not supported")
    addr, idx = _take(raw, idx, (dest_len + 1) // 2, "destination address")
    destination = _digits(addr, dest_len, "destination address")

    (pid, dcs), idx = _take(raw, idx, 2, "protocol identifier and coding scheme")
    if dcs != 0x00:
        raise PduDecodeError(f"Unsupported data coding scheme 0x{dcs:02X}")

    vpf = (first_octet >> 3) & 0x03
    validity: Optional[timedelta] = None
    if vpf == 2:
        vp, idx = _take(raw, idx, 1, "validity period")
        validity = decode_relative_validity(vp[0])
    elif vpf != 0:
        raise PduDecodeError(f"Unsupported validity period format {vpf}")

    udl_octet, idx = _take(raw, idx, 1, "user data length")
    udl = udl_octet[0]
    user_data, idx = _take(raw, idx, packed_length(udl), "user data")
    if idx != len(raw):
        raise PduDecodeError("Extra trailing data detected in PDU")
    return SubmitFields(
        smsc=smsc,
        first_octet=first_octet,
        message_reference=mr,
        destination=destination,
        destination_type=dest_type,
        pid=pid,
        dcs=dcs,
        validity_period=validity,
        user_data_length=udl,
        text=unpack_text(user_data, udl),
    )


__all__ = ["build_submit_pdu", "decode_submit"]

"""SMS-SUBMIT PDU assembly and inspection."""

from __future__ import annotations

from .codec import build_submit_pdu, decode_submit
from .messages import FieldSpan, PduResult, SubmitFields, SubmitPdu, render_hex
from .submit import (
    DATA_CODING_SCHEME,
    MAX_SEPTETS,
    PROTOCOL_ID,
    SUBMIT_FIRST_OCTET,
    TOA_INTERNATIONAL,
    VALIDITY_PERIOD,
    PduAssembler,
    PduBuilder,
    assemble,
    required_length,
)

__all__ = [
    "MAX_SEPTETS",
    "TOA_INTERNATIONAL",
    "SUBMIT_FIRST_OCTET",
    "PROTOCOL_ID",
    "DATA_CODING_SCHEME",
    "VALIDITY_PERIOD",
    "FieldSpan",
    "PduResult",
    "SubmitPdu",
    "SubmitFields",
    "PduBuilder",
    "PduAssembler",
    "assemble",
    "required_length",
    "build_submit_pdu",
    "decode_submit",
    "render_hex",
]

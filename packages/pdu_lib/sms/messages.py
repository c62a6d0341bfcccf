"""Dataclasses describing assembled and decoded SMS-SUBMIT PDUs."""

from __future__ import annotations

import binascii
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional, Tuple


@dataclass(frozen=True)
class FieldSpan:
    name: str
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length


@dataclass(frozen=True)
class PduResult:
    """Lengths reported after assembling a PDU into a caller buffer.

    ``tp_len`` is the value for ``AT+CMGS=<len>``: the PDU length without
    the SMSC field (its length octet plus the octets that octet counts).
    """

    total_len: int
    tp_len: int
    fields: Tuple[FieldSpan, ...] = field(default=(), compare=False)

    def span(self, name: str) -> FieldSpan:
        for item in self.fields:
            if item.name == name:
                return item
        raise KeyError(name)


@dataclass(frozen=True)
class SubmitPdu:
    data: bytes
    tp_len: int

    @property
    def total_len(self) -> int:
        return len(self.data)

    @property
    def hex(self) -> str:
        return render_hex(self.data)


@dataclass
class SubmitFields:
    smsc: Optional[str]
    first_octet: int
    message_reference: int
    destination: str
    destination_type: int
    pid: int
    dcs: int
    validity_period: Optional[timedelta]
    user_data_length: int
    text: str


def render_hex(data: bytes) -> str:
    """Render *data* as uppercase hex, two characters per octet."""
    return binascii.hexlify(bytes(data)).decode("ascii").upper()


__all__ = ["FieldSpan", "PduResult", "SubmitPdu", "SubmitFields", "render_hex"]

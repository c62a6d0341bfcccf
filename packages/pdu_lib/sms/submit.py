"""SMS-SUBMIT PDU assembly into caller-owned buffers."""

from __future__ import annotations

import contextlib
import logging
from typing import Iterator, List, Union

from ..errors import BufferTooSmallError, CodecError, MessageTooLongError
from ..gsm import TextInput, pack_septets, packed_length, to_septets
from ..utils import (
    MAX_ADDRESS_DIGITS,
    TEN_DAYS,
    OutputBuffer,
    WritableBuffer,
    as_output,
    bcd_length,
    encode_bcd_digits,
    validate_digits,
)
from .messages import FieldSpan, PduResult

MAX_SEPTETS = 160

TOA_INTERNATIONAL = 0x91
# SMS-SUBMIT, TP-VPF relative.
SUBMIT_FIRST_OCTET = 0x11
MESSAGE_REFERENCE = 0x00
PROTOCOL_ID = 0x00
DATA_CODING_SCHEME = 0x00
VALIDITY_PERIOD = TEN_DAYS

SMSC_FIELDS = ("smsc_length", "smsc_address")

# pdu type, message reference, address length, type of address, pid, dcs,
# validity period, user data length
_SUBMIT_FIXED_OCTETS = 8


class PduBuilder:
    """Writes named PDU fields and records the span each one occupies."""

    def __init__(self, out: Union[OutputBuffer, WritableBuffer]) -> None:
        self._writer = as_output(out)
        self._start = self._writer.position
        self._fields: List[FieldSpan] = []

    @contextlib.contextmanager
    def field(self, name: str) -> Iterator[OutputBuffer]:
        begin = self._writer.position
        yield self._writer
        self._fields.append(
            FieldSpan(name, begin - self._start, self._writer.position - begin)
        )

    def octet(self, name: str, value: int) -> None:
        with self.field(name) as writer:
            writer.push(value)

    @property
    def total(self) -> int:
        return self._writer.position - self._start

    def span_length(self, *names: str) -> int:
        return sum(item.length for item in self._fields if item.name in names)

    def result(self) -> PduResult:
        total = self.total
        tp_len = total - self.span_length(*SMSC_FIELDS)
        return PduResult(total_len=total, tp_len=tp_len, fields=tuple(self._fields))


class PduAssembler:
    """Builds single-segment 7-bit SMS-SUBMIT PDUs."""

    def __init__(
        self,
        *,
        max_address_digits: int = MAX_ADDRESS_DIGITS,
        logger: logging.Logger | None = None,
    ) -> None:
        if max_address_digits < 1:
            raise ValueError("max_address_digits must be positive")
        self._max_digits = max_address_digits
        self._logger = logger or logging.getLogger(__name__)

    @property
    def max_address_digits(self) -> int:
        return self._max_digits

    def required_length(self, smsc: str, dest: str, text: TextInput) -> int:
        """Return the exact number of octets :meth:`assemble` will write."""
        septets = self._validate(smsc, dest, text)
        return _layout_length(smsc, dest, len(septets))

    def assemble(
        self,
        smsc: str,
        dest: str,
        text: TextInput,
        out: Union[OutputBuffer, WritableBuffer],
    ) -> PduResult:
        """Write the PDU for *text* to *dest* into *out*.

        *smsc* may be empty, in which case the modem's stored SMSC is used
        and the SMSC field is a single zero octet. On any error the
        contents of *out* must be discarded.
        """

        try:
            septets = self._validate(smsc, dest, text)
            required = _layout_length(smsc, dest, len(septets))
            writer = as_output(out)
            if required > writer.remaining:
                raise BufferTooSmallError(writer.position + required, writer.capacity)
            builder = PduBuilder(writer)
            self._write(builder, smsc, dest, septets)
        except CodecError as exc:
            self._logger.debug("Rejected SMS-SUBMIT to %r: %s", dest, exc)
            raise
        result = builder.result()
        self._logger.debug(
            "Assembled SMS-SUBMIT PDU: %d octets, TP length %d, %d septets",
            result.total_len,
            result.tp_len,
            len(septets),
        )
        return result

    def _validate(self, smsc: str, dest: str, text: TextInput) -> List[int]:
        length = len(text)
        if length > MAX_SEPTETS:
            raise MessageTooLongError(
                f"Text has {length} characters, single segment limit is {MAX_SEPTETS}"
            )
        validate_digits(
            smsc, allow_empty=True, max_digits=self._max_digits, label="SMSC address"
        )
        validate_digits(dest, max_digits=self._max_digits, label="destination address")
        return to_septets(text)

    @staticmethod
    def _write(builder: PduBuilder, smsc: str, dest: str, septets: List[int]) -> None:
        if smsc:
            # Octet count of type-of-address plus encoded digits.
            builder.octet("smsc_length", 1 + bcd_length(smsc))
            with builder.field("smsc_address") as writer:
                writer.push(TOA_INTERNATIONAL)
                encode_bcd_digits(smsc, writer)
        else:
            builder.octet("smsc_length", 0)
        builder.octet("pdu_type", SUBMIT_FIRST_OCTET)
        builder.octet("message_reference", MESSAGE_REFERENCE)
        # Digit count, not octet count.
        builder.octet("destination_length", len(dest))
        builder.octet("destination_type", TOA_INTERNATIONAL)
        with builder.field("destination_address") as writer:
            encode_bcd_digits(dest, writer)
        builder.octet("protocol_id", PROTOCOL_ID)
        builder.octet("data_coding_scheme", DATA_CODING_SCHEME)
        builder.octet("validity_period", VALIDITY_PERIOD)
        # Septet count, not octet count.
        builder.octet("user_data_length", len(septets))
        with builder.field("user_data") as writer:
            pack_septets(bytes(septets), writer)


def _layout_length(smsc: str, dest: str, septet_count: int) -> int:
    smsc_octets = 1 + (1 + bcd_length(smsc) if smsc else 0)
    return (
        smsc_octets
        + _SUBMIT_FIXED_OCTETS
        + bcd_length(dest)
        + packed_length(septet_count)
    )


_DEFAULT_ASSEMBLER = PduAssembler()


def assemble(
    smsc: str,
    dest: str,
    text: TextInput,
    out: Union[OutputBuffer, WritableBuffer],
) -> PduResult:
    return _DEFAULT_ASSEMBLER.assemble(smsc, dest, text, out)


def required_length(smsc: str, dest: str, text: TextInput) -> int:
    return _DEFAULT_ASSEMBLER.required_length(smsc, dest, text)


__all__ = [
    "MAX_SEPTETS",
    "TOA_INTERNATIONAL",
    "SUBMIT_FIRST_OCTET",
    "MESSAGE_REFERENCE",
    "PROTOCOL_ID",
    "DATA_CODING_SCHEME",
    "VALIDITY_PERIOD",
    "PduBuilder",
    "PduAssembler",
    "assemble",
    "required_length",
]

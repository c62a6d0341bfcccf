"""
Unit Tests for the High Level Codec
===================================
build_submit_pdu, decode_submit and relative validity helpers.
"""

from datetime import timedelta

import pytest

from pdu_lib import build_submit_pdu, decode_submit
from pdu_lib.errors import InvalidDigitError, MessageTooLongError, PduDecodeError
from pdu_lib.utils import TEN_DAYS, decode_relative_validity, encode_relative_validity


class TestBuildSubmitPdu:
    """Tests for the allocate-and-encode convenience API."""

    def test_accepts_plus_prefixed_numbers(self):
        pdu = build_submit_pdu("+381610401", "+381659999999", "Hi")

        assert pdu.hex == "069183610104F111000C918361959999990000B002C834"
        assert pdu.tp_len == 16
        assert pdu.total_len == 23

    def test_without_smsc(self):
        pdu = build_submit_pdu("", "1234567890", "Hi")

        assert pdu.data == bytes.fromhex("0011000A9121436587090000B002C834")
        assert pdu.tp_len == 15

    def test_hex_is_uppercase_two_chars_per_octet(self):
        pdu = build_submit_pdu("", "1234567890", "hellohello")

        assert len(pdu.hex) == 2 * pdu.total_len
        assert pdu.hex == pdu.hex.upper()

    def test_propagates_errors(self):
        with pytest.raises(MessageTooLongError):
            build_submit_pdu("", "+1234567890", "x" * 161)
        with pytest.raises(InvalidDigitError):
            build_submit_pdu("", "+12-34", "Hi")


class TestDecodeSubmit:
    """Tests for parsing assembled PDUs."""

    def test_decodes_assembled_pdu(self):
        pdu = build_submit_pdu("381610401", "381659999999", "LTE Cat.4 Click board - demo example.")

        fields = decode_submit(pdu.data)

        assert fields.smsc == "381610401"
        assert fields.first_octet == 0x11
        assert fields.message_reference == 0
        assert fields.destination == "381659999999"
        assert fields.destination_type == 0x91
        assert fields.pid == 0
        assert fields.dcs == 0
        assert fields.validity_period == timedelta(days=10)
        assert fields.user_data_length == 37
        assert fields.text == "LTE Cat.4 Click board - demo example."

    def test_accepts_hex_string(self):
        fields = decode_submit("0011000A9121436587090000B002C834")

        assert fields.smsc is None
        assert fields.destination == "1234567890"
        assert fields.text == "Hi"

    def test_odd_destination(self):
        fields = decode_submit(build_submit_pdu("", "12345", "Hi").data)

        assert fields.destination == "12345"

    def test_truncated(self):
        data = bytes.fromhex("0011000A9121436587090000B002C834")
        for cut in (0, 1, 4, 8, 12, 14, 15):
            with pytest.raises(PduDecodeError):
                decode_submit(data[:cut])

    def test_trailing_data(self):
        with pytest.raises(PduDecodeError, match="trailing"):
            decode_submit(bytes.fromhex("0011000A9121436587090000B002C83400"))

    def test_not_a_submit(self):
        with pytest.raises(PduDecodeError, match="SMS-SUBMIT"):
            decode_submit(bytes.fromhex("0004000A9121436587090000B002C834"))

    def test_unsupported_coding_scheme(self):
        with pytest.raises(PduDecodeError, match="coding scheme"):
            decode_submit(bytes.fromhex("0011000A9121436587090008B002C834"))

    def test_invalid_hex(self):
        with pytest.raises(PduDecodeError):
            decode_submit("00ZZ")

    def test_non_decimal_address(self):
        with pytest.raises(PduDecodeError):
            decode_submit(bytes.fromhex("0011000A91214365870A0000B002C834"))


class TestRelativeValidity:
    """Tests for the TP-VP relative format."""

    def test_submit_policy_is_ten_days(self):
        assert TEN_DAYS == 0xB0
        assert decode_relative_validity(0xB0) == timedelta(days=10)

    def test_range_boundaries(self):
        assert decode_relative_validity(0) == timedelta(minutes=5)
        assert decode_relative_validity(143) == timedelta(hours=12)
        assert decode_relative_validity(167) == timedelta(hours=24)
        assert decode_relative_validity(168) == timedelta(days=2)
        assert decode_relative_validity(197) == timedelta(weeks=5)
        assert decode_relative_validity(255) == timedelta(weeks=63)

    def test_encode_rounds_up(self):
        assert encode_relative_validity(timedelta(hours=1)) == 11
        assert encode_relative_validity(timedelta(minutes=61)) == 12
        assert encode_relative_validity(timedelta(hours=13)) == 145
        assert encode_relative_validity(timedelta(days=10)) == 176
        assert encode_relative_validity(timedelta(weeks=100)) == 255

    def test_decode_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            decode_relative_validity(256)

"""TP-Validity-Period (relative format) helpers.

The relative format packs a duration into one octet with four ranges:

======= =========================================
octet   duration
======= =========================================
0-143   (octet + 1) x 5 minutes, up to 12 hours
144-167 12 hours + (octet - 143) x 30 minutes
168-196 (octet - 166) days
197-255 (octet - 192) weeks
======= =========================================
"""

from __future__ import annotations

from datetime import timedelta

_HOUR = 60
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY


def encode_relative_validity(delta: timedelta) -> int:
    """Return the smallest octet whose duration covers *delta*."""

    minutes = int(max(delta.total_seconds(), 0) // 60)
    if minutes <= 12 * _HOUR:
        five_minutes = max(1, -(-minutes // 5))
        return min(five_minutes, 144) - 1
    if minutes <= _DAY:
        half_hours = max(1, -(-(minutes - 12 * _HOUR) // 30))
        return min(half_hours, 24) + 143
    if minutes <= 30 * _DAY:
        days = -(-minutes // _DAY)
        return max(2, min(days, 30)) + 166
    weeks = -(-minutes // _WEEK)
    return max(5, min(weeks, 63)) + 192


def decode_relative_validity(value: int) -> timedelta:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"Validity period octet out of range: {value}")
    if value <= 143:
        return timedelta(minutes=(value + 1) * 5)
    if value <= 167:
        return timedelta(minutes=12 * _HOUR + (value - 143) * 30)
    if value <= 196:
        return timedelta(days=value - 166)
    return timedelta(weeks=value - 192)


# Submit policy: ten days relative (0xB0).
TEN_DAYS = encode_relative_validity(timedelta(days=10))


__all__ = ["encode_relative_validity", "decode_relative_validity", "TEN_DAYS"]

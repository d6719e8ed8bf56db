"""Numeric and time conversions: human byte sizes and epoch ticks."""

from __future__ import annotations

import datetime as dt

SIZE_SUFFIXES: tuple[str, ...] = ("bytes", "KB", "MB", "GB", "TB", "PB", "EB")

EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.UTC)
TICKS_PER_MICROSECOND = 10


def to_size_suffix(value: int | float, decimal_places: int = 1) -> str:
    """Format a byte count with a binary unit suffix.

    >>> to_size_suffix(1024)
    '1.0 KB'
    >>> to_size_suffix(-2048, 2)
    '-2.00 KB'

    Raises:
        ValueError: If *decimal_places* is negative.
    """
    if decimal_places < 0:
        raise ValueError("decimal_places cannot be negative")
    if value < 0:
        return "-" + to_size_suffix(-value, decimal_places)
    if value == 0:
        return f"{0:.{decimal_places}f} bytes"

    # mag is floor(log1024(value)), computed on integer bits to avoid float drift.
    mag = 0 if value < 1 else (int(value).bit_length() - 1) // 10
    mag = min(mag, len(SIZE_SUFFIXES) - 1)
    adjusted = value / (1 << (mag * 10))

    if round(adjusted, decimal_places) >= 1000 and mag < len(SIZE_SUFFIXES) - 1:
        mag += 1
        adjusted /= 1024

    return f"{adjusted:,.{decimal_places}f} {SIZE_SUFFIXES[mag]}"


def to_epoch_ticks(value: dt.datetime) -> int:
    """Return 100-nanosecond ticks elapsed since the Unix epoch.

    Naive datetimes are interpreted as local time.
    """
    if value.tzinfo is None:
        value = value.astimezone()
    delta = value - EPOCH
    return (delta // dt.timedelta(microseconds=1)) * TICKS_PER_MICROSECOND


def from_epoch_ticks(ticks: int) -> dt.datetime:
    """Inverse of :func:`to_epoch_ticks`; returns an aware UTC datetime."""
    return EPOCH + dt.timedelta(microseconds=ticks // TICKS_PER_MICROSECOND)

"""
Display Formatting

Turns the raw numbers on a Meeting into strings for people.
Nothing here feeds back into a calculation; every function is a pure
view over a value it is handed.

All amounts are USD. Timestamps are epoch milliseconds, shown in local time.
"""

import math
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class DurationBreakdown(BaseModel):
    """A duration split into parts, plus two readable renderings."""

    model_config = ConfigDict(frozen=True)

    hours: int
    minutes: int
    seconds: int
    total_seconds: int
    readable: str   # "1 hour, 1 minute, 5 seconds"
    detail: str     # "1h 1m 5s"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def _local(timestamp_ms: int) -> datetime:
    return datetime.fromtimestamp(timestamp_ms / 1000)


def format_currency(amount: float) -> str:
    """$1,234.50"""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_hourly_rate(rate: float) -> str:
    return f"{format_currency(rate)}/hr"


def format_duration(seconds: float) -> DurationBreakdown:
    """
    Split a duration into hours, minutes and seconds.

    Fractional seconds are floored; negative durations count as zero.
    """
    total = max(0, math.floor(seconds))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)

    parts = []
    if hours:
        parts.append(_plural(hours, "hour"))
    if minutes:
        parts.append(_plural(minutes, "minute"))
    if secs or not parts:
        parts.append(_plural(secs, "second"))

    if hours:
        detail = f"{hours}h {minutes}m {secs}s"
    elif minutes:
        detail = f"{minutes}m {secs}s"
    else:
        detail = f"{secs} sec"

    return DurationBreakdown(
        hours=hours,
        minutes=minutes,
        seconds=secs,
        total_seconds=total,
        readable=", ".join(parts),
        detail=detail,
    )


def format_elapsed_time(seconds: float) -> str:
    """Timer display: M:SS under an hour, H:MM:SS from an hour on."""
    total = max(0, math.floor(seconds))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_date(timestamp_ms: int) -> str:
    """January 15, 2026"""
    dt = _local(timestamp_ms)
    return f"{dt:%B} {dt.day}, {dt.year}"


def format_time(timestamp_ms: int) -> str:
    """2:30 PM"""
    dt = _local(timestamp_ms)
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt:%M} {'AM' if dt.hour < 12 else 'PM'}"


def format_date_iso(timestamp_ms: int) -> str:
    return _local(timestamp_ms).strftime("%Y-%m-%d")


def format_time_24(timestamp_ms: int) -> str:
    return _local(timestamp_ms).strftime("%H:%M")

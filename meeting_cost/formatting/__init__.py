"""Display formatting package."""

from meeting_cost.formatting.display import (
    DurationBreakdown,
    format_currency,
    format_date,
    format_date_iso,
    format_duration,
    format_elapsed_time,
    format_hourly_rate,
    format_time,
    format_time_24,
)

__all__ = [
    "DurationBreakdown",
    "format_currency",
    "format_date",
    "format_date_iso",
    "format_duration",
    "format_elapsed_time",
    "format_hourly_rate",
    "format_time",
    "format_time_24",
]

"""Cost calculation package."""

from meeting_cost.calculations.costs import (
    SECONDS_PER_HOUR,
    calculate_meeting_cost,
    get_active_participants,
    get_average_hourly_rate,
    get_cost_per_second,
    get_total_active_rate,
)
from meeting_cost.calculations.in_person import (
    InPersonCostBreakdown,
    calculate_in_person_breakdown,
    calculate_in_person_cost,
)

__all__ = [
    "SECONDS_PER_HOUR",
    "InPersonCostBreakdown",
    "calculate_in_person_breakdown",
    "calculate_in_person_cost",
    "calculate_meeting_cost",
    "get_active_participants",
    "get_average_hourly_rate",
    "get_cost_per_second",
    "get_total_active_rate",
]

"""
In-Person Overhead

Meeting in a room costs more than the meeting itself:
- Commute: everyone's time getting there, at their own rate
- Extras: a flat amount per head (snacks, room, travel)

An empty or all-inactive list is a valid zero, not an error.
"""

from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field

from meeting_cost.calculations.costs import get_active_participants, get_total_active_rate
from meeting_cost.models.participant import Participant


MINUTES_PER_HOUR = 60


class InPersonCostBreakdown(BaseModel):
    """The two parts of in-person overhead, kept apart."""

    model_config = ConfigDict(frozen=True)

    commute_cost: float = Field(..., description="total active rate x commute hours")
    extras_cost: float = Field(..., description="active count x extras per person")

    @property
    def total(self) -> float:
        return self.commute_cost + self.extras_cost


def calculate_in_person_breakdown(
    participants: Sequence[Participant],
    commute_minutes: float,
    extras_per_person: float,
) -> InPersonCostBreakdown:
    active = get_active_participants(participants)
    if not active:
        return InPersonCostBreakdown(commute_cost=0.0, extras_cost=0.0)

    return InPersonCostBreakdown(
        commute_cost=get_total_active_rate(active) * (commute_minutes / MINUTES_PER_HOUR),
        extras_cost=len(active) * extras_per_person,
    )


def calculate_in_person_cost(
    participants: Sequence[Participant],
    commute_minutes: float,
    extras_per_person: float,
) -> float:
    """
    Total in-person overhead for active participants.

    Returns:
        commute cost + extras cost, or 0 when nobody is active
    """
    return calculate_in_person_breakdown(
        participants, commute_minutes, extras_per_person
    ).total

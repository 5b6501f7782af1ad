"""
Meeting Cost Calculation

DESIGN DECISION: Only active participants are counted. Inactive ones
stay in the list (they were invited, they may come back) but never
contribute to a rate, an average or a cost.

The aggregate helpers return sentinels for "nothing to compute":
0 for a total rate, None for an average. calculate_meeting_cost is
stricter and reports an error alongside its zero.
"""

from typing import Optional, Sequence

from meeting_cost.models.meeting import CostError, CostErrorCode, CostResult
from meeting_cost.models.participant import Participant
from meeting_cost.rates import InvalidParticipantError


SECONDS_PER_HOUR = 3600


def get_active_participants(participants: Sequence[Participant]) -> list[Participant]:
    """Active participants, in their original order."""
    return [p for p in participants if p.is_active]


def get_total_active_rate(participants: Sequence[Participant]) -> float:
    """Sum of effective hourly rates over active participants (0 if none)."""
    return sum(
        (p.effective_hourly_rate for p in get_active_participants(participants)),
        0.0,
    )


def get_cost_per_second(participants: Sequence[Participant]) -> float:
    return get_total_active_rate(participants) / SECONDS_PER_HOUR


def get_average_hourly_rate(participants: Sequence[Participant]) -> Optional[float]:
    """
    Mean effective hourly rate of active participants.

    Returns None when nobody is active: there is no average of nothing,
    and 0 would look like a meeting of unpaid people.
    """
    active = get_active_participants(participants)
    if not active:
        return None
    return get_total_active_rate(active) / len(active)


def _failed(code: CostErrorCode, message: str) -> CostResult:
    return CostResult(cost=0.0, error=CostError(code=code, message=message))


def calculate_meeting_cost(
    participants: Sequence[Participant],
    duration_seconds: float,
) -> CostResult:
    """
    Calculate the remote cost of a meeting.

    Validation order (first failure wins):
    1. At least one participant
    2. Non-negative duration
    3. At least one active participant

    Returns:
        CostResult with cost = cost_per_second x duration, or cost 0
        and an error describing the first failed rule
    """
    if not participants:
        return _failed(
            CostErrorCode.NO_PARTICIPANTS,
            "Add at least one participant to calculate a cost",
        )

    if duration_seconds < 0:
        return _failed(
            CostErrorCode.INVALID_DURATION,
            f"Duration cannot be negative (got {duration_seconds})",
        )

    if not get_active_participants(participants):
        return _failed(
            CostErrorCode.NO_ACTIVE_PARTICIPANTS,
            "All participants are inactive",
        )

    try:
        cost_per_second = get_cost_per_second(participants)
    except InvalidParticipantError as e:
        return _failed(CostErrorCode.INVALID_PARTICIPANT, str(e))

    return CostResult(cost=cost_per_second * duration_seconds)

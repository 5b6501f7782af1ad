"""
Rate Normalization

Every participant is billed per hour, whatever their employment terms:
- Full-time staff: annual salary spread over a standard working year
- Contractors: their hourly rate, unchanged

This module has no model imports so the participant models can
derive their effective rate from it.
"""

from typing import Any


WORKING_HOURS_PER_YEAR = 2080  # 52 weeks x 40 hours


class InvalidParticipantError(ValueError):
    """Participant rate terms are missing, negative or of an unknown type."""

    def __init__(self, message: str, participant_id: Any = None):
        self.participant_id = participant_id
        super().__init__(message)


def _non_negative(value: Any, field: str, participant_id: Any) -> float:
    if value is None:
        raise InvalidParticipantError(
            f"Participant {participant_id!r} is missing {field}",
            participant_id,
        )
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParticipantError(
            f"Participant {participant_id!r} has non-numeric {field}: {value!r}",
            participant_id,
        )
    if value < 0:
        raise InvalidParticipantError(
            f"Participant {participant_id!r} has negative {field}: {value}",
            participant_id,
        )
    return float(value)


def calculate_effective_hourly_rate(participant: Any) -> float:
    """
    Derive a participant's effective hourly rate from their terms.

    Args:
        participant: Any object exposing employment_type and the
                     matching annual_salary / hourly_rate attribute

    Returns:
        The hourly rate as a float

    Raises:
        InvalidParticipantError: If the required field is missing or
                                 negative, or the employment type is unknown
    """
    participant_id = getattr(participant, "id", None)
    employment_type = getattr(participant, "employment_type", None)

    if employment_type == "fulltime":
        salary = _non_negative(
            getattr(participant, "annual_salary", None),
            "annual_salary",
            participant_id,
        )
        return salary / WORKING_HOURS_PER_YEAR

    if employment_type == "contractor":
        return _non_negative(
            getattr(participant, "hourly_rate", None),
            "hourly_rate",
            participant_id,
        )

    raise InvalidParticipantError(
        f"Participant {participant_id!r} has unknown employment type: {employment_type!r}",
        participant_id,
    )

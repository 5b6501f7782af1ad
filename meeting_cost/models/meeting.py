"""
Meeting Models

A Meeting is the finished, immutable record of one meeting: who was in
it, how long it ran, and what it cost.

DESIGN DECISION: Optional overhead fields use None for "not applicable".
An in-person meeting without overhead has in_person_cost=None, which is
different from an in-person meeting whose overhead came to 0.
"""

import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from meeting_cost.models.participant import Participant


# =============================================================================
# ENUMS
# =============================================================================

class MeetingFormat(str, Enum):
    """Where the meeting happened."""
    REMOTE = "remote"
    IN_PERSON = "in-person"


class MeetingStatus(str, Enum):
    """
    Meeting lifecycle status.

    Only completed meetings are ever built here. A meeting in progress
    belongs to whatever is running the timer.
    """
    COMPLETED = "completed"


class CostErrorCode(str, Enum):
    """Reasons a meeting cost cannot be computed."""
    NO_PARTICIPANTS = "no_participants"
    INVALID_DURATION = "invalid_duration"
    NO_ACTIVE_PARTICIPANTS = "no_active_participants"
    INVALID_PARTICIPANT = "invalid_participant"
    INVALID_IN_PERSON_INPUTS = "invalid_in_person_inputs"
    INVALID_MEETING_FIELDS = "invalid_meeting_fields"


# =============================================================================
# COST RESULT
# =============================================================================

class CostError(BaseModel):
    """Why a cost came back as zero."""

    model_config = ConfigDict(frozen=True)

    code: CostErrorCode
    message: str


class CostResult(BaseModel):
    """
    Result of a meeting cost calculation.

    Validation problems are carried here instead of being raised:
    cost is 0 and error says why.
    """

    model_config = ConfigDict(frozen=True)

    cost: float = Field(
        ...,
        ge=0,
        description="Remote-portion cost in USD"
    )
    error: Optional[CostError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# =============================================================================
# MEETING
# =============================================================================

class Meeting(BaseModel):
    """
    A completed meeting.

    Built once by MeetingBuilder, never modified afterwards. Any change
    means building a new Meeting.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    # Identity
    id: str = Field(
        ...,
        min_length=1,
        description="Meeting identifier (generated as mtg_<integer>)"
    )
    timestamp: int = Field(
        ...,
        ge=0,
        description="Meeting start time (epoch milliseconds)"
    )
    duration: float = Field(
        ...,
        ge=0,
        description="Elapsed seconds"
    )

    # Snapshot of who was there, in the order they were added
    participants: tuple[Participant, ...] = Field(default_factory=tuple)

    # Rates
    cost_per_second: float = Field(..., ge=0)
    cost_per_minute: float = Field(..., ge=0)
    average_rate: Optional[float] = Field(
        default=None,
        ge=0,
        description="Mean effective hourly rate of active participants"
    )

    # Costs
    meeting_cost: float = Field(
        ...,
        ge=0,
        description="Remote portion: cost_per_second x duration"
    )
    meeting_format: MeetingFormat = Field(
        default=MeetingFormat.REMOTE,
        alias="format"
    )
    in_person_cost: Optional[float] = Field(default=None, ge=0)
    commute_minutes_per_person: Optional[float] = Field(default=None, ge=0)
    in_person_extras_per_person: Optional[float] = Field(default=None, ge=0)
    total_cost: float = Field(..., ge=0)

    # Classification
    status: MeetingStatus = MeetingStatus.COMPLETED
    sector_type: str = Field(default="private", min_length=1)
    meeting_description: str = Field(default="", max_length=5000)

    @model_validator(mode='after')
    def validate_costs(self) -> 'Meeting':
        """Check the derived cost fields agree with each other."""
        if not math.isclose(self.cost_per_minute, self.cost_per_second * 60, rel_tol=1e-12, abs_tol=1e-12):
            raise ValueError("cost_per_minute must equal cost_per_second * 60")

        overhead = (
            self.in_person_cost,
            self.commute_minutes_per_person,
            self.in_person_extras_per_person,
        )
        has_overhead = self.in_person_cost is not None
        if has_overhead and any(value is None for value in overhead):
            raise ValueError("In-person overhead requires commute and extras inputs")
        if not has_overhead and any(value is not None for value in overhead):
            raise ValueError("Commute and extras inputs are only recorded with in-person overhead")
        if has_overhead and self.meeting_format != MeetingFormat.IN_PERSON:
            raise ValueError("In-person overhead only applies to in-person meetings")

        expected_total = self.meeting_cost + (self.in_person_cost or 0.0)
        if not math.isclose(self.total_cost, expected_total, rel_tol=1e-9, abs_tol=1e-9):
            raise ValueError("total_cost must equal meeting_cost plus in-person overhead")

        return self

    @property
    def active_participant_count(self) -> int:
        return sum(1 for p in self.participants if p.is_active)

    def to_record(self) -> dict:
        """
        Convert to a plain dictionary with camelCase keys.

        Optional fields that do not apply are left out entirely.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

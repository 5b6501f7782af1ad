"""
Meeting Builder

This module ties together all the components and defines the two
flows the calculator offers:
1. Finish a meeting (participants + elapsed time -> immutable Meeting)
2. Quick mode (a head count + one salary or rate -> participants)

DESIGN DECISION: A meeting whose cost cannot be computed is NOT built.
calculate_meeting_cost reports its errors as data; the builder turns
them into a MeetingBuildError carrying the same code. A zero-cost
placeholder meeting would be indistinguishable from a real free one.
"""

import random
import time
from typing import Optional, Sequence, Union
from uuid import UUID, uuid4

from pydantic import ValidationError

from meeting_cost.audit import AuditLogger, create_correlation_id
from meeting_cost.calculations import (
    calculate_in_person_cost,
    calculate_meeting_cost,
    get_active_participants,
    get_average_hourly_rate,
    get_cost_per_second,
)
from meeting_cost.comparisons import generate_comparison_list
from meeting_cost.config import CalculatorSettings, get_settings
from meeting_cost.models.meeting import (
    CostErrorCode,
    CostResult,
    Meeting,
    MeetingFormat,
    MeetingStatus,
)
from meeting_cost.models.participant import (
    EmploymentType,
    Participant,
    QuickModeType,
    parse_participant,
)
from meeting_cost.validation import sanitize_string


class MeetingBuildError(Exception):
    """A meeting could not be built from the given inputs."""

    def __init__(
        self,
        code: CostErrorCode,
        message: str,
        cost_result: Optional[CostResult] = None,
    ):
        self.code = code
        self.cost_result = cost_result
        super().__init__(message)


_last_meeting_ns = 0


def generate_meeting_id() -> str:
    """mtg_<nanosecond timestamp>, strictly increasing within a process."""
    global _last_meeting_ns
    _last_meeting_ns = max(time.time_ns(), _last_meeting_ns + 1)
    return f"mtg_{_last_meeting_ns}"


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class MeetingBuilder:
    """
    Assembles completed meetings.

    Flow:
    1. Snapshot participants
    2. Sanitize the description
    3. Validate and cost the remote portion
    4. Add in-person overhead (only when asked for)
    5. Freeze everything into a Meeting

    Every build is audited, whether it succeeds or not.
    """

    def __init__(
        self,
        audit_logger: Optional[AuditLogger] = None,
        settings: Optional[CalculatorSettings] = None,
    ):
        self._audit_logger = audit_logger
        self._settings = settings or get_settings().calculator

    def build_meeting(
        self,
        participants: Sequence[Participant],
        duration: float,
        timestamp: Optional[float] = None,
        sector_type: Optional[str] = None,
        description: Optional[str] = None,
        meeting_id: Optional[str] = None,
        meeting_format: Union[MeetingFormat, str] = MeetingFormat.REMOTE,
        apply_in_person_tax: bool = False,
        commute_minutes: Optional[float] = None,
        extras_per_person: Optional[float] = None,
        correlation_id: Optional[UUID] = None,
    ) -> Meeting:
        """
        Build a completed meeting.

        Args:
            participants: Final participant list (inactive ones included)
            duration: Elapsed seconds
            timestamp: Start time in epoch ms, truncated to an int
                       (defaults to now)
            sector_type: Sector tag (defaults to the configured value)
            description: Free text, sanitized before storing
            meeting_id: Use this id instead of generating one
            meeting_format: remote or in-person
            apply_in_person_tax: Add commute and extras overhead
                                 (in-person meetings only)
            commute_minutes: Per-person commute, default 0
            extras_per_person: Per-person extras in USD, default 0

        Returns:
            The frozen Meeting

        Raises:
            MeetingBuildError: If the cost cannot be computed, the
                               in-person inputs are negative, or the
                               finished record fails validation
        """
        correlation_id = correlation_id or create_correlation_id()
        meeting_id = meeting_id or generate_meeting_id()
        meeting_format = MeetingFormat(meeting_format)
        snapshot = tuple(participants)

        result = calculate_meeting_cost(snapshot, duration)
        if result.error is not None:
            if self._audit_logger:
                self._audit_logger.log_cost_validation_failed(
                    error_code=result.error.code.value,
                    error_message=result.error.message,
                    participant_count=len(snapshot),
                    duration=duration,
                    correlation_id=correlation_id,
                )
            self._fail(meeting_id, result.error.code, result.error.message, correlation_id, result)

        in_person_cost = None
        commute = None
        extras = None
        if meeting_format == MeetingFormat.IN_PERSON and apply_in_person_tax:
            commute = commute_minutes or 0
            extras = extras_per_person or 0
            if commute < 0 or extras < 0:
                self._fail(
                    meeting_id,
                    CostErrorCode.INVALID_IN_PERSON_INPUTS,
                    f"Commute minutes and extras cannot be negative "
                    f"(got {commute} minutes, ${extras} per person)",
                    correlation_id,
                )
            in_person_cost = calculate_in_person_cost(snapshot, commute, extras)

        clean_description = self._sanitize_description(description, meeting_id, correlation_id)

        cost_per_second = get_cost_per_second(snapshot)
        total_cost = result.cost + in_person_cost if in_person_cost is not None else result.cost

        try:
            meeting = Meeting(
                id=meeting_id,
                timestamp=int(timestamp) if timestamp is not None else _now_ms(),
                duration=duration,
                participants=snapshot,
                cost_per_second=cost_per_second,
                cost_per_minute=cost_per_second * 60,
                average_rate=get_average_hourly_rate(snapshot),
                meeting_cost=result.cost,
                meeting_format=meeting_format,
                in_person_cost=in_person_cost,
                commute_minutes_per_person=commute,
                in_person_extras_per_person=extras,
                total_cost=total_cost,
                status=MeetingStatus.COMPLETED,
                sector_type=sector_type or self._settings.default_sector_type,
                meeting_description=clean_description,
            )
        except ValidationError as e:
            self._fail(
                meeting_id,
                CostErrorCode.INVALID_MEETING_FIELDS,
                f"Meeting record rejected: {e.error_count()} error(s): "
                + "; ".join(err["msg"] for err in e.errors()),
                correlation_id,
            )

        if self._audit_logger:
            self._audit_logger.log_meeting_built(
                meeting_id=meeting.id,
                total_cost=meeting.total_cost,
                duration=meeting.duration,
                active_count=len(get_active_participants(snapshot)),
                meeting_format=meeting.meeting_format.value,
                correlation_id=correlation_id,
            )

        return meeting

    def create_participants_from_quick_mode(
        self,
        count: int,
        mode: Union[QuickModeType, str],
        value: float,
        correlation_id: Optional[UUID] = None,
    ) -> list[Participant]:
        """
        Create `count` identical, active participants.

        salary mode -> full-time participants with annual_salary=value
        hourly mode -> contractors with hourly_rate=value

        Raises:
            ValueError: If count is negative or mode is unknown
            InvalidParticipantError: If value is negative
        """
        if count < 0:
            raise ValueError(f"Participant count cannot be negative (got {count})")

        mode = QuickModeType(mode)
        if mode == QuickModeType.SALARY:
            terms = {"employment_type": EmploymentType.FULLTIME.value, "annual_salary": value}
        else:
            terms = {"employment_type": EmploymentType.CONTRACTOR.value, "hourly_rate": value}

        participants = [
            parse_participant({"id": str(uuid4()), "is_active": True, **terms})
            for _ in range(count)
        ]

        if self._audit_logger:
            self._audit_logger.log_participants_created(
                count=count,
                mode=mode.value,
                value=value,
                correlation_id=correlation_id,
            )

        return participants

    def generate_comparisons(
        self,
        meeting: Meeting,
        count: Optional[int] = None,
        rng: Optional[random.Random] = None,
        correlation_id: Optional[UUID] = None,
    ) -> list[str]:
        """Relatable comparisons for a meeting's total cost."""
        comparisons = generate_comparison_list(
            meeting.total_cost,
            count=count if count is not None else self._settings.default_comparison_count,
            rng=rng,
        )

        if self._audit_logger:
            self._audit_logger.log_comparison_generated(
                cost=meeting.total_cost,
                comparisons=comparisons,
                correlation_id=correlation_id,
            )

        return comparisons

    def _sanitize_description(
        self,
        description: Optional[str],
        meeting_id: str,
        correlation_id: UUID,
    ) -> str:
        clean = sanitize_string(description, self._settings.description_max_length)

        if self._audit_logger and isinstance(description, str) and clean != description.strip():
            self._audit_logger.log_description_sanitized(
                meeting_id=meeting_id,
                original_length=len(description),
                sanitized_length=len(clean),
                correlation_id=correlation_id,
            )

        return clean

    def _fail(
        self,
        meeting_id: str,
        code: CostErrorCode,
        message: str,
        correlation_id: UUID,
        cost_result: Optional[CostResult] = None,
    ) -> None:
        if self._audit_logger:
            self._audit_logger.log_meeting_build_failed(
                meeting_id=meeting_id,
                error_code=code.value,
                error_message=message,
                correlation_id=correlation_id,
            )
        raise MeetingBuildError(code, message, cost_result)


def create_meeting_builder(with_audit: bool = True) -> MeetingBuilder:
    """
    Factory function to create a ready-to-use builder.

    Args:
        with_audit: Whether to log build events.
                    Set to False for silent use (e.g., bulk recalculation).
    """
    return MeetingBuilder(audit_logger=AuditLogger() if with_audit else None)

"""
Data Models Package

This package contains all Pydantic models used in the Meeting Cost system.
All data flowing through the system must conform to these schemas.
"""

from meeting_cost.models.participant import (
    ContractorParticipant,
    EmploymentType,
    FullTimeParticipant,
    Participant,
    QuickModeType,
    parse_participant,
    with_active,
)
from meeting_cost.models.meeting import (
    CostError,
    CostErrorCode,
    CostResult,
    Meeting,
    MeetingFormat,
    MeetingStatus,
)
from meeting_cost.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Participant models
    "ContractorParticipant",
    "EmploymentType",
    "FullTimeParticipant",
    "Participant",
    "QuickModeType",
    "parse_participant",
    "with_active",
    # Meeting models
    "CostError",
    "CostErrorCode",
    "CostResult",
    "Meeting",
    "MeetingFormat",
    "MeetingStatus",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]

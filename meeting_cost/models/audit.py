"""
Audit Models for Meeting Cost

Every meeting build, successful or not, leaves an audit event behind.
This provides:
1. Traceability of how a meeting total was reached
2. Debugging information when a build is rejected
3. A record of when free text had to be cleaned

DESIGN DECISION: Audit events are logged locally only. Nothing here
is persisted; that belongs to whoever stores meetings.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """
    Types of events we audit.
    """
    # Meeting assembly
    MEETING_BUILT = "meeting_built"
    MEETING_BUILD_FAILED = "meeting_build_failed"
    COST_VALIDATION_FAILED = "cost_validation_failed"

    # Inputs
    PARTICIPANTS_CREATED = "participants_created"
    DESCRIPTION_SANITIZED = "description_sanitized"

    # Presentation
    COMPARISON_GENERATED = "comparison_generated"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'meeting', 'participant')"
    )
    entity_id: Optional[str] = Field(
        default=None,
        description="ID of the entity this event relates to"
    )

    # Correlation - for tracking related events
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., all events in one build)"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )

    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_code": self.error_code,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.meeting_built(meeting_id, total, ...)
        event = AuditEventBuilder.meeting_build_failed(code, message, ...)
    """

    @staticmethod
    def meeting_built(
        meeting_id: str,
        total_cost: float,
        duration: float,
        active_count: int,
        meeting_format: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.MEETING_BUILT,
            entity_type="meeting",
            entity_id=meeting_id,
            correlation_id=correlation_id,
            description=f"Meeting built: {active_count} active participants, ${total_cost:.2f}",
            details={
                "total_cost": total_cost,
                "duration_seconds": duration,
                "active_participants": active_count,
                "format": meeting_format,
            },
        )

    @staticmethod
    def meeting_build_failed(
        meeting_id: str,
        error_code: str,
        error_message: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.MEETING_BUILD_FAILED,
            severity=AuditSeverity.WARNING,
            entity_type="meeting",
            entity_id=meeting_id,
            correlation_id=correlation_id,
            description=f"Meeting build rejected: {error_code}",
            error_code=error_code,
            error_message=error_message,
        )

    @staticmethod
    def cost_validation_failed(
        error_code: str,
        error_message: str,
        participant_count: int,
        duration: float,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.COST_VALIDATION_FAILED,
            severity=AuditSeverity.WARNING,
            entity_type="meeting",
            correlation_id=correlation_id,
            description=f"Cost validation failed: {error_code}",
            details={
                "participant_count": participant_count,
                "duration_seconds": duration,
            },
            error_code=error_code,
            error_message=error_message,
        )

    @staticmethod
    def participants_created(
        count: int,
        mode: str,
        value: float,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.PARTICIPANTS_CREATED,
            entity_type="participant",
            correlation_id=correlation_id,
            description=f"Quick mode created {count} participants ({mode})",
            details={
                "count": count,
                "mode": mode,
                "value": value,
            },
        )

    @staticmethod
    def description_sanitized(
        meeting_id: str,
        original_length: int,
        sanitized_length: int,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DESCRIPTION_SANITIZED,
            severity=AuditSeverity.WARNING,
            entity_type="meeting",
            entity_id=meeting_id,
            correlation_id=correlation_id,
            description="Meeting description was altered by sanitization",
            details={
                "original_length": original_length,
                "sanitized_length": sanitized_length,
            },
        )

    @staticmethod
    def comparison_generated(
        cost: float,
        comparisons: list[str],
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.COMPARISON_GENERATED,
            severity=AuditSeverity.DEBUG,
            entity_type="comparison",
            correlation_id=correlation_id,
            description=f"Generated {len(comparisons)} comparisons for ${cost:.2f}",
            details={
                "cost": cost,
                "comparisons": comparisons,
            },
        )


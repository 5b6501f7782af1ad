"""
Audit Logger

DESIGN DECISION: Every meeting build is logged.
This provides:
1. Traceability of every total we hand out
2. Visibility into rejected builds and cleaned descriptions

The audit logger:
- Is synchronous (the whole engine is in-memory and synchronous)
- Supports correlation IDs to trace related events
"""

import logging
import sys
from typing import Optional
from uuid import UUID, uuid4

import structlog

from meeting_cost.config import LoggingSettings, get_settings
from meeting_cost.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


PACKAGE_LOGGER_NAME = "meeting_cost"


def _configure_structlog(json_output: bool) -> None:
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Route meeting_cost log output to stdout at the configured level.

    Only the package logger is touched; the root logger and any
    handlers the host application installed are left alone.
    """
    settings = settings or get_settings().logging

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(getattr(logging, settings.level))
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)

    _configure_structlog(settings.json_output)


# Configure structlog for local logging
_configure_structlog(get_settings().logging.json_output)


class AuditLogger:
    """
    Central audit logging service.

    Logs events to the structured local log. Events are returned to
    the caller so they can be inspected or forwarded.
    """

    def __init__(self, logger_name: str = "meeting_cost.audit"):
        self._logger = structlog.get_logger(logger_name)

    def log(self, event: AuditEvent) -> AuditEvent:
        """
        Log an audit event at the level matching its severity.
        """
        log_dict = event.to_log_dict()

        if event.severity in (AuditSeverity.ERROR, AuditSeverity.CRITICAL):
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        return event

    def log_meeting_built(
        self,
        meeting_id: str,
        total_cost: float,
        duration: float,
        active_count: int,
        meeting_format: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a successful meeting build."""
        event = AuditEventBuilder.meeting_built(
            meeting_id=meeting_id,
            total_cost=total_cost,
            duration=duration,
            active_count=active_count,
            meeting_format=meeting_format,
            correlation_id=correlation_id,
        )
        self.log(event)

    def log_meeting_build_failed(
        self,
        meeting_id: str,
        error_code: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a rejected meeting build."""
        event = AuditEventBuilder.meeting_build_failed(
            meeting_id=meeting_id,
            error_code=error_code,
            error_message=error_message,
            correlation_id=correlation_id,
        )
        self.log(event)

    def log_cost_validation_failed(
        self,
        error_code: str,
        error_message: str,
        participant_count: int,
        duration: float,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a cost calculation that came back with an error."""
        event = AuditEventBuilder.cost_validation_failed(
            error_code=error_code,
            error_message=error_message,
            participant_count=participant_count,
            duration=duration,
            correlation_id=correlation_id,
        )
        self.log(event)

    def log_participants_created(
        self,
        count: int,
        mode: str,
        value: float,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a quick-mode participant batch."""
        event = AuditEventBuilder.participants_created(
            count=count,
            mode=mode,
            value=value,
            correlation_id=correlation_id,
        )
        self.log(event)

    def log_description_sanitized(
        self,
        meeting_id: str,
        original_length: int,
        sanitized_length: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log that a meeting description had content removed."""
        event = AuditEventBuilder.description_sanitized(
            meeting_id=meeting_id,
            original_length=original_length,
            sanitized_length=sanitized_length,
            correlation_id=correlation_id,
        )
        self.log(event)

    def log_comparison_generated(
        self,
        cost: float,
        comparisons: list[str],
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log the comparisons shown for a cost."""
        event = AuditEventBuilder.comparison_generated(
            cost=cost,
            comparisons=comparisons,
            correlation_id=correlation_id,
        )
        self.log(event)


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a new user action (e.g., finishing a meeting).
    Pass it through all subsequent operations.
    """
    return uuid4()

"""
Tests for meeting assembly and quick mode.
"""

import random
import re
import time

import pytest

from meeting_cost.audit import AuditLogger
from meeting_cost.builder import MeetingBuildError, MeetingBuilder, create_meeting_builder
from meeting_cost.calculations import calculate_in_person_cost
from meeting_cost.config import CalculatorSettings
from meeting_cost.models.audit import AuditEventType
from meeting_cost.models.meeting import CostErrorCode, MeetingFormat, MeetingStatus
from meeting_cost.models.participant import ContractorParticipant, FullTimeParticipant
from meeting_cost.rates import InvalidParticipantError


def fulltime(id: str, annual_salary: float, is_active: bool = True) -> FullTimeParticipant:
    return FullTimeParticipant(id=id, annual_salary=annual_salary, is_active=is_active)


def contractor(id: str, hourly_rate: float, is_active: bool = True) -> ContractorParticipant:
    return ContractorParticipant(id=id, hourly_rate=hourly_rate, is_active=is_active)


class RecordingAuditLogger(AuditLogger):
    """Audit logger that also keeps events in memory."""

    def __init__(self):
        super().__init__()
        self.events = []

    def log(self, event):
        self.events.append(event)
        return super().log(event)

    @property
    def event_types(self):
        return [event.event_type for event in self.events]


@pytest.fixture
def audit_logger():
    return RecordingAuditLogger()


@pytest.fixture
def builder(audit_logger):
    return MeetingBuilder(audit_logger=audit_logger, settings=CalculatorSettings())


@pytest.fixture
def pair():
    return [fulltime("1", 90000), contractor("2", 60)]


class TestBuildMeeting:
    """Tests for MeetingBuilder.build_meeting."""

    def test_meeting_structure(self, builder, pair):
        """Test a built meeting carries every derived field."""
        timestamp = int(time.time() * 1000) - 3_600_000
        meeting = builder.build_meeting(pair, 3600, timestamp, "private", "Stand Up")

        assert re.match(r"^mtg_\d+$", meeting.id)
        assert meeting.timestamp == timestamp
        assert meeting.duration == 3600
        assert len(meeting.participants) == 2
        assert meeting.total_cost > 0
        assert meeting.cost_per_second > 0
        assert meeting.cost_per_minute == meeting.cost_per_second * 60
        assert meeting.average_rate > 0
        assert meeting.status == MeetingStatus.COMPLETED
        assert meeting.sector_type == "private"
        assert meeting.meeting_description == "Stand Up"

    def test_total_cost_from_participants_and_duration(self, builder, pair):
        """Test total cost = combined hourly rate / 3600 x duration."""
        meeting = builder.build_meeting(pair, 1800, int(time.time() * 1000))
        expected = (90000 / 2080 + 60) / 3600 * 1800
        assert meeting.total_cost == pytest.approx(expected)

    def test_doubling_duration_doubles_cost(self, builder, pair):
        """Test the remote cost is linear in duration."""
        short = builder.build_meeting(pair, 900)
        long = builder.build_meeting(pair, 1800)
        assert long.meeting_cost == pytest.approx(2 * short.meeting_cost)

    def test_defaults(self, builder, pair):
        """Test timestamp, sector and description defaults."""
        before = int(time.time() * 1000)
        meeting = builder.build_meeting(pair, 60)
        assert meeting.timestamp >= before
        assert meeting.sector_type == "private"
        assert meeting.meeting_description == ""
        assert meeting.meeting_format == MeetingFormat.REMOTE

    def test_id_override(self, builder, pair):
        """Test a caller-supplied id replaces the generated one."""
        meeting = builder.build_meeting(pair, 60, meeting_id="mtg_42")
        assert meeting.id == "mtg_42"

    def test_long_id_override_is_kept(self, builder, pair):
        """Test a long caller-supplied id is stored as given."""
        meeting_id = "mtg_" + "1" * 120
        assert builder.build_meeting(pair, 60, meeting_id=meeting_id).id == meeting_id

    def test_long_sector_type_is_kept(self, builder):
        """Test the sector tag is free text with no length cap."""
        meeting = builder.build_meeting([contractor("1", 60)], 60, sector_type="x" * 51)
        assert meeting.sector_type == "x" * 51

    def test_float_timestamp_is_truncated(self, builder, pair):
        """Test a float epoch-ms timestamp is stored as whole milliseconds."""
        meeting = builder.build_meeting(pair, 60, timestamp=1700000000000.5)
        assert meeting.timestamp == 1700000000000
        assert isinstance(meeting.timestamp, int)

    def test_generated_ids_are_distinct(self, builder, pair):
        """Test back-to-back builds never share an id."""
        ids = {builder.build_meeting(pair, 60).id for _ in range(5)}
        assert len(ids) == 5

    def test_participants_are_snapshotted(self, builder, pair):
        """Test later changes to the caller's list do not reach the meeting."""
        meeting = builder.build_meeting(pair, 60)
        pair.append(contractor("3", 500))
        assert len(meeting.participants) == 2

    def test_inactive_participants_are_kept_but_not_costed(self, builder):
        """Test inactive participants stay in the snapshot at zero cost."""
        participants = [contractor("1", 36), contractor("2", 360, is_active=False)]
        meeting = builder.build_meeting(participants, 100)
        assert len(meeting.participants) == 2
        assert meeting.active_participant_count == 1
        assert meeting.cost_per_second == pytest.approx(0.01)
        assert meeting.average_rate == 36

    def test_sanitizes_description(self, builder, audit_logger):
        """Test markup is removed and the cleanup is audited."""
        meeting = builder.build_meeting(
            [fulltime("1", 90000)], 60, description="<script>xss</script>"
        )
        assert "<" not in meeting.meeting_description
        assert "xss" in meeting.meeting_description
        assert AuditEventType.DESCRIPTION_SANITIZED in audit_logger.event_types

    def test_clean_description_is_not_audited(self, builder, audit_logger):
        """Test trimming whitespace alone is not reported as sanitizing."""
        builder.build_meeting([fulltime("1", 90000)], 60, description="  Retro  ")
        assert AuditEventType.DESCRIPTION_SANITIZED not in audit_logger.event_types

    def test_successful_build_is_audited(self, builder, audit_logger, pair):
        """Test one meeting_built event is logged for the new meeting."""
        meeting = builder.build_meeting(pair, 60)
        built = [e for e in audit_logger.events if e.event_type == AuditEventType.MEETING_BUILT]
        assert len(built) == 1
        assert built[0].entity_id == meeting.id


class TestInPersonMeetings:
    """Tests for in-person overhead on built meetings."""

    def test_remote_meeting_has_no_in_person_cost(self, builder, pair):
        """Test remote meetings never carry in-person overhead."""
        meeting = builder.build_meeting(
            pair, 3600, description="Stand Up", meeting_format="remote"
        )
        assert meeting.in_person_cost is None
        assert meeting.total_cost == meeting.meeting_cost
        assert meeting.meeting_format == MeetingFormat.REMOTE
        assert "inPersonCost" not in meeting.to_record()

    def test_in_person_with_tax_adds_overhead(self, builder):
        """Test total = meeting cost + in-person cost, inputs echoed."""
        participants = [fulltime("1", 90000), fulltime("2", 90000)]
        meeting = builder.build_meeting(
            participants,
            3600,
            description="Kickoff",
            meeting_format="in-person",
            apply_in_person_tax=True,
            commute_minutes=30,
            extras_per_person=20,
        )
        assert meeting.meeting_format == MeetingFormat.IN_PERSON
        assert meeting.in_person_cost == pytest.approx(
            calculate_in_person_cost(participants, 30, 20)
        )
        assert meeting.in_person_cost > 0
        assert meeting.total_cost == meeting.meeting_cost + meeting.in_person_cost
        assert meeting.commute_minutes_per_person == 30
        assert meeting.in_person_extras_per_person == 20

    def test_in_person_without_tax_has_no_overhead(self, builder):
        """Test overhead is only added when the tax flag is set."""
        meeting = builder.build_meeting(
            [fulltime("1", 90000)],
            3600,
            meeting_format=MeetingFormat.IN_PERSON,
            apply_in_person_tax=False,
            commute_minutes=30,
        )
        assert meeting.in_person_cost is None
        assert meeting.commute_minutes_per_person is None
        assert meeting.total_cost == meeting.meeting_cost

    def test_remote_ignores_tax_flag(self, builder):
        """Test the tax flag has no effect on remote meetings."""
        meeting = builder.build_meeting(
            [fulltime("1", 90000)], 3600, apply_in_person_tax=True, commute_minutes=30
        )
        assert meeting.in_person_cost is None
        assert meeting.total_cost == meeting.meeting_cost

    def test_applied_but_zero_overhead_is_present(self, builder):
        """Test 'applied, came to zero' is distinct from 'not applied'."""
        meeting = builder.build_meeting(
            [fulltime("1", 90000)],
            3600,
            meeting_format="in-person",
            apply_in_person_tax=True,
        )
        assert meeting.in_person_cost == 0
        assert meeting.commute_minutes_per_person == 0
        assert meeting.in_person_extras_per_person == 0
        assert meeting.to_record()["inPersonCost"] == 0

    def test_inactive_participants_add_no_overhead(self, builder):
        """Test inactive participants add neither commute nor extras."""
        active = fulltime("1", 90000)
        with_inactive = builder.build_meeting(
            [active, fulltime("2", 90000, is_active=False)],
            600,
            meeting_format="in-person",
            apply_in_person_tax=True,
            commute_minutes=20,
            extras_per_person=12,
        )
        alone = builder.build_meeting(
            [active],
            600,
            meeting_format="in-person",
            apply_in_person_tax=True,
            commute_minutes=20,
            extras_per_person=12,
        )
        assert with_inactive.in_person_cost == alone.in_person_cost

    def test_negative_in_person_inputs_fail(self, builder):
        """Test negative commute minutes abort the build."""
        with pytest.raises(MeetingBuildError) as exc:
            builder.build_meeting(
                [fulltime("1", 90000)],
                60,
                meeting_format="in-person",
                apply_in_person_tax=True,
                commute_minutes=-5,
            )
        assert exc.value.code == CostErrorCode.INVALID_IN_PERSON_INPUTS


class TestBuildFailures:
    """Cost errors abort the build instead of producing a zero meeting."""

    def test_no_participants(self, builder, audit_logger):
        """Test an empty list aborts with both failure events audited."""
        with pytest.raises(MeetingBuildError) as exc:
            builder.build_meeting([], 60)
        assert exc.value.code == CostErrorCode.NO_PARTICIPANTS
        assert exc.value.cost_result.cost == 0
        assert audit_logger.event_types == [
            AuditEventType.COST_VALIDATION_FAILED,
            AuditEventType.MEETING_BUILD_FAILED,
        ]

    def test_negative_duration(self, builder):
        """Test a negative duration aborts with invalid_duration."""
        with pytest.raises(MeetingBuildError) as exc:
            builder.build_meeting([fulltime("1", 90000)], -1)
        assert exc.value.code == CostErrorCode.INVALID_DURATION

    def test_all_inactive(self, builder):
        """Test an all-inactive list aborts with no_active_participants."""
        with pytest.raises(MeetingBuildError) as exc:
            builder.build_meeting([fulltime("1", 90000, is_active=False)], 60)
        assert exc.value.code == CostErrorCode.NO_ACTIVE_PARTICIPANTS

    def test_rejected_record_raises_build_error(self, builder, audit_logger, pair):
        """Test a field the Meeting model rejects surfaces as MeetingBuildError."""
        with pytest.raises(MeetingBuildError) as exc:
            builder.build_meeting(pair, 60, timestamp=-1)
        assert exc.value.code == CostErrorCode.INVALID_MEETING_FIELDS
        assert audit_logger.event_types[-1] == AuditEventType.MEETING_BUILD_FAILED

    def test_unknown_format(self, builder, pair):
        """Test an unknown meeting format is rejected."""
        with pytest.raises(ValueError):
            builder.build_meeting(pair, 60, meeting_format="hybrid")


class TestQuickMode:
    """Tests for create_participants_from_quick_mode."""

    def test_salary_mode(self, builder):
        """Test salary mode creates full-time participants."""
        participants = builder.create_participants_from_quick_mode(3, "salary", 90000)
        assert len(participants) == 3
        for p in participants:
            assert p.employment_type == "fulltime"
            assert p.annual_salary == 90000
            assert p.effective_hourly_rate == pytest.approx(90000 / 2080)
            assert p.is_active is True

    def test_hourly_mode(self, builder):
        """Test hourly mode creates contractors."""
        participants = builder.create_participants_from_quick_mode(2, "hourly", 75)
        assert len(participants) == 2
        for p in participants:
            assert p.employment_type == "contractor"
            assert p.hourly_rate == 75
            assert p.effective_hourly_rate == 75
            assert p.is_active is True

    def test_ids_are_distinct(self, builder):
        """Test every generated participant gets its own id."""
        participants = builder.create_participants_from_quick_mode(10, "hourly", 50)
        assert len({p.id for p in participants}) == 10

    def test_zero_count(self, builder):
        """Test a zero count yields an empty list."""
        assert builder.create_participants_from_quick_mode(0, "salary", 90000) == []

    def test_negative_count(self, builder):
        """Test a negative count is rejected."""
        with pytest.raises(ValueError):
            builder.create_participants_from_quick_mode(-1, "salary", 90000)

    def test_negative_value(self, builder):
        """Test a negative salary or rate is rejected."""
        with pytest.raises(InvalidParticipantError):
            builder.create_participants_from_quick_mode(2, "hourly", -10)

    def test_unknown_mode(self, builder):
        """Test an unknown quick mode is rejected."""
        with pytest.raises(ValueError):
            builder.create_participants_from_quick_mode(2, "weekly", 10)

    def test_quick_mode_is_audited(self, builder, audit_logger):
        """Test the batch is logged with its size."""
        builder.create_participants_from_quick_mode(4, "salary", 90000)
        assert audit_logger.events[-1].event_type == AuditEventType.PARTICIPANTS_CREATED
        assert audit_logger.events[-1].details["count"] == 4

    def test_quick_mode_meeting_matches_default_scenario(self, builder):
        """Test 4 x $90k + 1 x $60/hr through quick mode."""
        people = builder.create_participants_from_quick_mode(4, "salary", 90000)
        people += builder.create_participants_from_quick_mode(1, "hourly", 60)
        meeting = builder.build_meeting(people, 3600)
        assert meeting.cost_per_second * 100 == pytest.approx(6.5, abs=0.05)
        assert meeting.average_rate == pytest.approx(46.62, abs=5e-3)


class TestSettingsAndComparisons:
    """Configured defaults and comparisons through the builder."""

    def test_configured_defaults(self, audit_logger):
        """Test the sector and description length come from settings."""
        builder = MeetingBuilder(
            audit_logger=audit_logger,
            settings=CalculatorSettings(default_sector_type="public", description_max_length=5),
        )
        meeting = builder.build_meeting([contractor("1", 60)], 60, description="Quarterly review")
        assert meeting.sector_type == "public"
        assert meeting.meeting_description == "Quart"

    def test_explicit_sector_wins(self, builder, pair):
        """Test an explicit sector overrides the configured default."""
        assert builder.build_meeting(pair, 60, sector_type="public").sector_type == "public"

    def test_generate_comparisons(self, builder, audit_logger, pair):
        """Test the configured number of distinct comparisons is audited."""
        meeting = builder.build_meeting(pair, 3600)
        comparisons = builder.generate_comparisons(meeting, rng=random.Random(1))
        assert len(comparisons) == 3
        assert len(set(comparisons)) == 3
        assert audit_logger.events[-1].event_type == AuditEventType.COMPARISON_GENERATED

    def test_generate_comparisons_custom_count(self, builder, pair):
        """Test an explicit count overrides the configured default."""
        meeting = builder.build_meeting(pair, 3600)
        assert len(builder.generate_comparisons(meeting, count=1)) == 1

    def test_factory_without_audit(self, pair):
        """Test the factory can build a silent builder."""
        builder = create_meeting_builder(with_audit=False)
        assert builder.build_meeting(pair, 60).total_cost > 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

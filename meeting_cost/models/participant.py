"""
Participant Models

A participant is billed either as a full-time employee (annual salary)
or as a contractor (hourly rate), never both.

DESIGN DECISION: Participant is a discriminated union, not one flat
record with two optional fields. A contractor carrying a salary cannot
be constructed, so no downstream code has to check for it.

The effective hourly rate is NOT stored. It is derived from the terms
every time it is read, so it can never drift from them.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    ValidationError,
    computed_field,
    model_validator,
)
from pydantic.alias_generators import to_camel

from meeting_cost.rates import InvalidParticipantError, calculate_effective_hourly_rate


class EmploymentType(str, Enum):
    """How a participant is paid."""
    FULLTIME = "fulltime"
    CONTRACTOR = "contractor"


class QuickModeType(str, Enum):
    """Which uniform value quick mode was given."""
    SALARY = "salary"   # annual salary -> full-time participants
    HOURLY = "hourly"   # hourly rate -> contractor participants


class _ParticipantBase(BaseModel):
    """Fields shared by every participant."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(
        ...,
        min_length=1,
        description="Caller-supplied unique identifier, kept verbatim"
    )
    is_active: bool = Field(
        default=True,
        description="Inactive participants stay listed but cost nothing"
    )

    @model_validator(mode='before')
    @classmethod
    def drop_supplied_rate(cls, data: Any) -> Any:
        """Ignore a precomputed rate; it is always derived from the terms."""
        if isinstance(data, Mapping):
            return {
                key: value
                for key, value in data.items()
                if key not in ("effective_hourly_rate", "effectiveHourlyRate")
            }
        return data

    @computed_field
    @property
    def effective_hourly_rate(self) -> float:
        return calculate_effective_hourly_rate(self)


class FullTimeParticipant(_ParticipantBase):
    """A salaried employee."""

    employment_type: Literal["fulltime"] = "fulltime"
    annual_salary: float = Field(
        ...,
        ge=0,
        description="Annual salary in USD"
    )


class ContractorParticipant(_ParticipantBase):
    """A contractor billed by the hour."""

    employment_type: Literal["contractor"] = "contractor"
    hourly_rate: float = Field(
        ...,
        ge=0,
        description="Hourly rate in USD"
    )


def _employment_type_of(value: Any) -> Any:
    if isinstance(value, Mapping):
        return value.get("employment_type", value.get("employmentType"))
    return getattr(value, "employment_type", None)


Participant = Annotated[
    Union[
        Annotated[FullTimeParticipant, Tag(EmploymentType.FULLTIME.value)],
        Annotated[ContractorParticipant, Tag(EmploymentType.CONTRACTOR.value)],
    ],
    Discriminator(_employment_type_of),
]

_participant_adapter = TypeAdapter(Participant)


def parse_participant(data: Mapping[str, Any]) -> Union[FullTimeParticipant, ContractorParticipant]:
    """
    Validate a raw participant record.

    Accepts camelCase (employmentType, annualSalary, ...) or snake_case keys.

    Raises:
        InvalidParticipantError: If the record does not describe a valid
                                 full-time or contractor participant
    """
    try:
        return _participant_adapter.validate_python(data)
    except ValidationError as e:
        participant_id = data.get("id") if isinstance(data, Mapping) else None
        raise InvalidParticipantError(
            f"Invalid participant {participant_id!r}: {e.error_count()} error(s): "
            + "; ".join(err["msg"] for err in e.errors()),
            participant_id,
        ) from e


def with_active(participant: Union[FullTimeParticipant, ContractorParticipant], is_active: bool):
    """Return a copy of the participant with its active flag changed."""
    return participant.model_copy(update={"is_active": is_active})

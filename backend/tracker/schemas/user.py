"""User Schemas — Pydantic models for form bodies and JSON responses.

Invariants:
    - Text fields: stripped, non-empty, no U+FFFD from undecodable form bytes
    - ExerciseCreate.duration: integer minutes, never negative, coerced from the form string
    - ExerciseCreate.date: empty string means "not given"; anything else must parse
    - Responses expose the identifier as "_id"

Design Decisions:
    - Form bodies parsed straight into these models (FastAPI Form models), so a
      missing field fails before the handler runs and surfaces as a 400
    - field_validator for side-effect-free transforms (strip, date parse)
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tracker.core.calendar_dates import parse_calendar_date


# Form decoding replaces undecodable bytes with U+FFFD; storing that would
# silently change what the client sent.
_REPLACEMENT_CHAR = "\ufffd"


def _clean_text(v: str, field: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError(f"{field} cannot be empty or whitespace")
    if _REPLACEMENT_CHAR in v:
        raise ValueError(f"{field} must be valid UTF-8 text")
    return v


class UserCreate(BaseModel):
    """User creation form."""
    username: str = Field(min_length=1)

    @field_validator("username")
    @classmethod
    def clean_username(cls, v: str) -> str:
        return _clean_text(v, "username")


class ExerciseCreate(BaseModel):
    """Exercise form — date defaults to today when absent."""
    description: str = Field(min_length=1)
    duration: int = Field(ge=0)
    date: datetime.date | None = None

    @field_validator("description")
    @classmethod
    def clean_description(cls, v: str) -> str:
        return _clean_text(v, "description")

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        if isinstance(v, str):
            return parse_calendar_date(v)
        return v


class _IdentifiedModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")


class UserCreated(_IdentifiedModel):
    username: str


class ExerciseEntry(BaseModel):
    """One exercise as returned to clients."""
    description: str
    duration: int
    date: str


class UserResponse(_IdentifiedModel):
    username: str
    exercises: list[ExerciseEntry]


class ExerciseAdded(_IdentifiedModel):
    """The new exercise merged with its owner's identity fields."""
    username: str
    description: str
    duration: int
    date: str


class ExerciseLog(_IdentifiedModel):
    username: str
    count: int
    log: list[ExerciseEntry]

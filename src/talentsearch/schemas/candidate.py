"""Candidate record schema shared by search, gateways and export."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

CandidateStatus = Literal[
    "Active", "Shortlisted", "Interview", "Hired", "Rejected", "On Hold"
]

UserRole = Literal["applicant", "admin", "client"]


class EducationDetail(BaseModel):
    """Highest qualification summary."""

    highest: str = ""
    degree: str = ""
    university: str = ""
    year_of_passing: int | None = None
    percentage: float | None = None

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )


class Candidate(BaseModel):
    """Applicant record as seen by the admin resume search.

    Accepts snake_case names as well as the portal's camelCase keys.
    Naive timestamps are read as UTC.
    """

    id: int | str
    name: str = ""
    email: str = ""
    phone: str = ""
    designation: str = ""
    current_company: str = ""
    past_companies: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    primary_skill: str = ""
    current_city: str = ""
    preferred_city: str = ""
    experience: float = 0.0
    current_ctc: float = Field(default=0.0, alias="currentCTC")
    expected_ctc: float = Field(default=0.0, alias="expectedCTC")
    notice_period: str = ""
    education: EducationDetail = Field(default_factory=EducationDetail)
    gender: str = ""
    age: int | None = None
    communication_skill: str | None = None
    status: str = "Active"
    is_favorite: bool = False
    last_active: datetime
    registered_date: datetime
    resume_updated: datetime | None = None

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    @field_validator("last_active", "registered_date", "resume_updated")
    @classmethod
    def assume_utc(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class UserProfile(BaseModel):
    """Portal account profile for the signed-in user."""

    id: str
    email: str | None = None
    full_name: str | None = None
    role: UserRole = "applicant"

    model_config = ConfigDict(frozen=True, extra="ignore")

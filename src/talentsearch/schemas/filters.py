"""Resume search filter criteria."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NumericRange = tuple[float, float]

MULTI_SELECT_FIELDS: tuple[str, ...] = (
    "current_city",
    "preferred_city",
    "skills",
    "notice_period",
    "education",
    "current_company",
    "past_companies",
    "gender",
)

RANGE_FIELDS: tuple[str, ...] = ("experience_range", "salary_range", "year_of_passing")

DAY_WINDOW_FIELDS: tuple[str, ...] = (
    "registered_days",
    "active_days",
    "resume_updated_days",
)


class SearchFilters(BaseModel):
    """Filter criteria set for the resume search.

    ``None`` ranges and day windows, and empty lists, are unrestricted.
    Ranges are inclusive ``(min, max)`` pairs and are not checked for
    ``min <= max``.
    """

    experience_range: NumericRange | None = None
    salary_range: NumericRange | None = None
    year_of_passing: NumericRange | None = None

    current_city: list[str] = Field(default_factory=list)
    preferred_city: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    notice_period: list[str] = Field(default_factory=list)
    education: list[str] = Field(default_factory=list)
    current_company: list[str] = Field(default_factory=list)
    past_companies: list[str] = Field(default_factory=list)
    gender: list[str] = Field(default_factory=list)

    registered_days: int | None = None
    active_days: int | None = None
    resume_updated_days: int | None = None

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        extra="forbid",
    )

    @classmethod
    def reset(cls) -> "SearchFilters":
        """Return an all-unrestricted criteria set."""
        return cls()

    def active_count(self) -> int:
        """Number of criteria currently restricting the result set."""
        count = sum(1 for name in MULTI_SELECT_FIELDS if getattr(self, name))
        count += sum(1 for name in RANGE_FIELDS if getattr(self, name) is not None)
        count += sum(1 for name in DAY_WINDOW_FIELDS if getattr(self, name) is not None)
        return count

    def is_unrestricted(self) -> bool:
        return self.active_count() == 0

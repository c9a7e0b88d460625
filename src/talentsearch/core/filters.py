"""Multi-criteria filter combinator for the resume search."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable

import pendulum

from ..schemas import Candidate, SearchFilters

MILLISECONDS_PER_DAY = 86_400_000


def epoch_millis(value: datetime) -> int:
    """Integer milliseconds since the Unix epoch; naive values are UTC."""
    instant = pendulum.instance(value, tz="UTC")
    return instant.int_timestamp * 1000 + instant.microsecond // 1000


def days_since(timestamp: datetime, now: datetime) -> int:
    """Whole days elapsed between ``timestamp`` and ``now`` (floored)."""
    return (epoch_millis(now) - epoch_millis(timestamp)) // MILLISECONDS_PER_DAY


class FilterCombinator:
    """Decide whether a candidate satisfies every active filter criterion.

    Criteria are ANDed together; a multi-select criterion passes when the
    candidate's value is one of the selected values (for skills and past
    companies, when any of the candidate's entries is selected). Unrestricted
    criteria are skipped.
    """

    def __init__(self, *, now_provider: Callable[[], datetime] | None = None) -> None:
        self._now_provider = now_provider or (lambda: pendulum.now("UTC"))

    def now(self) -> datetime:
        return self._now_provider()

    def check(
        self,
        candidate: Candidate,
        filters: SearchFilters,
        *,
        now: datetime | None = None,
    ) -> dict[str, bool]:
        """Per-criterion outcome for every active criterion, in evaluation order."""
        results: dict[str, bool] = {}

        if filters.experience_range is not None:
            results["experience"] = _within(candidate.experience, filters.experience_range)
        if filters.salary_range is not None:
            results["salary"] = _within(candidate.current_ctc, filters.salary_range)

        single_valued = (
            ("current_city", candidate.current_city, filters.current_city),
            ("preferred_city", candidate.preferred_city, filters.preferred_city),
        )
        for name, value, selected in single_valued:
            if selected:
                results[name] = value in selected

        if filters.skills:
            results["skills"] = _intersects(candidate.skills, filters.skills)

        for name, value, selected in (
            ("notice_period", candidate.notice_period, filters.notice_period),
            ("education", candidate.education.highest, filters.education),
            ("current_company", candidate.current_company, filters.current_company),
        ):
            if selected:
                results[name] = value in selected

        if filters.past_companies:
            results["past_companies"] = _intersects(
                candidate.past_companies, filters.past_companies
            )
        if filters.gender:
            results["gender"] = candidate.gender in filters.gender

        if filters.year_of_passing is not None:
            year = candidate.education.year_of_passing
            results["year_of_passing"] = year is not None and _within(
                year, filters.year_of_passing
            )

        windows = (
            ("registered_days", candidate.registered_date, filters.registered_days),
            ("active_days", candidate.last_active, filters.active_days),
            ("resume_updated_days", candidate.resume_updated, filters.resume_updated_days),
        )
        if any(limit is not None for _, _, limit in windows):
            reference = now or self.now()
            for name, timestamp, limit in windows:
                if limit is None:
                    continue
                results[name] = (
                    timestamp is not None and days_since(timestamp, reference) <= limit
                )

        return results

    def matches(
        self,
        candidate: Candidate,
        filters: SearchFilters,
        *,
        now: datetime | None = None,
    ) -> bool:
        return all(self.check(candidate, filters, now=now).values())


def _within(value: Any, bounds: tuple[float, float]) -> bool:
    minimum, maximum = bounds
    return minimum <= value <= maximum


def _intersects(values: list[str], selected: list[str]) -> bool:
    return any(item in values for item in selected)

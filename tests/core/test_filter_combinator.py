from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import pendulum
import pytest

from talentsearch.core import FilterCombinator, days_since, epoch_millis
from talentsearch.schemas import Candidate, SearchFilters

NOW = datetime(2025, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


def build_candidate(**kwargs: Any) -> Candidate:
    defaults: dict[str, Any] = {
        "id": "A-1",
        "name": "Rahul Kumar",
        "skills": ["Java", "SQL"],
        "current_city": "Mumbai",
        "preferred_city": "Pune",
        "experience": 5,
        "current_ctc": 12,
        "notice_period": "30 Days",
        "current_company": "TCS",
        "past_companies": ["Wipro", "HCL"],
        "gender": "Male",
        "education": {"highest": "B.Tech", "degree": "B.Tech IT", "year_of_passing": 2018},
        "last_active": NOW - timedelta(days=2),
        "registered_date": NOW - timedelta(days=30),
    }
    defaults.update(kwargs)
    return Candidate(**defaults)


@pytest.fixture
def combinator() -> FilterCombinator:
    return FilterCombinator(now_provider=lambda: NOW)


def test_default_filters_pass_everything(combinator: FilterCombinator):
    candidate = build_candidate(experience=40, current_ctc=0)

    assert combinator.check(candidate, SearchFilters()) == {}
    assert combinator.matches(candidate, SearchFilters()) is True


@pytest.mark.parametrize(
    ("experience", "expected"),
    [(2, True), (6, True), (4, True), (1.9, False), (6.1, False)],
)
def test_experience_range_is_inclusive(combinator: FilterCombinator, experience, expected):
    filters = SearchFilters(experience_range=(2, 6))

    assert combinator.matches(build_candidate(experience=experience), filters) is expected


def test_zero_experience_matches_range_starting_at_zero(combinator: FilterCombinator):
    filters = SearchFilters(experience_range=(0, 20))

    assert combinator.matches(build_candidate(experience=0), filters) is True


def test_salary_range_is_inclusive(combinator: FilterCombinator):
    filters = SearchFilters(salary_range=(10, 12))

    assert combinator.matches(build_candidate(current_ctc=12), filters) is True
    assert combinator.matches(build_candidate(current_ctc=13), filters) is False


def test_inverted_range_matches_nothing(combinator: FilterCombinator):
    filters = SearchFilters(experience_range=(10, 2))

    assert combinator.matches(build_candidate(experience=5), filters) is False


def test_multi_select_is_or_within_and_across(combinator: FilterCombinator):
    candidate = build_candidate()

    assert combinator.matches(candidate, SearchFilters(current_city=["Delhi", "Mumbai"]))
    assert not combinator.matches(candidate, SearchFilters(current_city=["Delhi"]))
    assert not combinator.matches(
        candidate,
        SearchFilters(current_city=["Mumbai"], notice_period=["Immediate"]),
    )


def test_empty_skill_selection_is_unrestricted(combinator: FilterCombinator):
    filters = SearchFilters(skills=[])

    assert combinator.matches(build_candidate(skills=[]), filters) is True
    assert combinator.matches(build_candidate(skills=["Rust"]), filters) is True


def test_skills_need_one_shared_entry(combinator: FilterCombinator):
    candidate = build_candidate(skills=["Java", "SQL"])

    assert combinator.matches(candidate, SearchFilters(skills=["SQL", "Go"])) is True
    assert combinator.matches(candidate, SearchFilters(skills=["Go", "Rust"])) is False


def test_past_companies_need_one_shared_entry(combinator: FilterCombinator):
    candidate = build_candidate()

    assert combinator.matches(candidate, SearchFilters(past_companies=["HCL"])) is True
    assert combinator.matches(candidate, SearchFilters(past_companies=["TCS"])) is False


def test_categorical_criteria(combinator: FilterCombinator):
    candidate = build_candidate()

    assert combinator.matches(candidate, SearchFilters(preferred_city=["Pune"]))
    assert combinator.matches(candidate, SearchFilters(education=["B.Tech", "MCA"]))
    assert not combinator.matches(candidate, SearchFilters(education=["MBA"]))
    assert combinator.matches(candidate, SearchFilters(current_company=["TCS"]))
    assert not combinator.matches(candidate, SearchFilters(gender=["Female"]))


def test_year_of_passing_range(combinator: FilterCombinator):
    filters = SearchFilters(year_of_passing=(2018, 2020))

    assert combinator.matches(build_candidate(), filters) is True
    missing = build_candidate(education={"highest": "B.Tech"})
    assert combinator.matches(missing, filters) is False


def test_check_reports_each_active_criterion(combinator: FilterCombinator):
    filters = SearchFilters(
        experience_range=(0, 3),
        skills=["SQL"],
        gender=["Male"],
        active_days=7,
    )

    result = combinator.check(build_candidate(), filters)

    assert result == {
        "experience": False,
        "skills": True,
        "gender": True,
        "active_days": True,
    }


def test_registered_window_boundaries(combinator: FilterCombinator):
    filters = SearchFilters(registered_days=7)

    six_days = build_candidate(registered_date=NOW - timedelta(days=6))
    exactly_seven = build_candidate(registered_date=NOW - timedelta(days=7))
    eight_days = build_candidate(registered_date=NOW - timedelta(days=8))

    assert combinator.matches(six_days, filters) is True
    assert combinator.matches(exactly_seven, filters) is True
    assert combinator.matches(eight_days, filters) is False


def test_partial_days_are_floored(combinator: FilterCombinator):
    filters = SearchFilters(active_days=7)

    almost_eight = build_candidate(last_active=NOW - timedelta(days=8, milliseconds=-1))
    eight = build_candidate(last_active=NOW - timedelta(days=8))

    assert combinator.matches(almost_eight, filters) is True
    assert combinator.matches(eight, filters) is False


def test_resume_updated_window_requires_timestamp(combinator: FilterCombinator):
    filters = SearchFilters(resume_updated_days=15)

    assert combinator.matches(build_candidate(), filters) is False
    updated = build_candidate(resume_updated=NOW - timedelta(days=3))
    assert combinator.matches(updated, filters) is True


def test_explicit_now_overrides_provider(combinator: FilterCombinator):
    filters = SearchFilters(active_days=1)
    candidate = build_candidate(last_active=NOW - timedelta(days=2))

    assert combinator.matches(candidate, filters) is False
    assert combinator.matches(candidate, filters, now=NOW - timedelta(days=1)) is True


def test_days_since_accepts_pendulum_and_naive_values():
    now = pendulum.datetime(2025, 1, 10, tz="UTC")

    assert days_since(datetime(2025, 1, 3), now) == 7
    assert days_since(pendulum.datetime(2025, 1, 11, tz="UTC"), now) == -1


def test_epoch_millis_treats_naive_values_as_utc():
    offset = timezone(timedelta(hours=5, minutes=30))

    assert epoch_millis(datetime(1970, 1, 2)) == 86_400_000
    assert epoch_millis(datetime(1970, 1, 2, tzinfo=timezone.utc)) == 86_400_000
    assert epoch_millis(datetime(1970, 1, 2, 5, 30, tzinfo=offset)) == 86_400_000
    assert epoch_millis(pendulum.datetime(1970, 1, 2, 0, 0, 0, 1500, tz="UTC")) == 86_400_001

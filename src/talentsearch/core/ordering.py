"""Sorting and pagination of search results."""

from __future__ import annotations

import math
from typing import Any, Callable, Sequence, TypeVar

from ..schemas import Candidate, SortDirection
from .filters import epoch_millis

T = TypeVar("T")

SORT_KEYS: dict[str, Callable[[Candidate], Any]] = {
    "name": lambda candidate: candidate.name,
    "experience": lambda candidate: candidate.experience,
    "current_ctc": lambda candidate: candidate.current_ctc,
    "current_city": lambda candidate: candidate.current_city,
    "last_active": lambda candidate: epoch_millis(candidate.last_active),
    "status": lambda candidate: candidate.status,
}

SORT_FIELD_ALIASES: dict[str, str] = {
    "compensation": "current_ctc",
    "currentCTC": "current_ctc",
    "city": "current_city",
    "currentCity": "current_city",
    "lastActive": "last_active",
}


def resolve_sort_field(field: str) -> str | None:
    """Canonical sort field name, or None when the field is not sortable."""
    field = SORT_FIELD_ALIASES.get(field, field)
    return field if field in SORT_KEYS else None


def sort_candidates(
    candidates: Sequence[Candidate],
    field: str,
    direction: SortDirection = "asc",
) -> list[Candidate]:
    """Stable sort by ``field``; unknown fields keep the input order."""
    resolved = resolve_sort_field(field)
    if resolved is None:
        return list(candidates)
    # sorted(reverse=True) keeps ties in input order, same as a negated comparator.
    return sorted(candidates, key=SORT_KEYS[resolved], reverse=direction == "desc")


def _check_page_size(page_size: int) -> None:
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")


def paginate(items: Sequence[T], page: int, page_size: int) -> list[T]:
    """Return the 1-based ``page``; out-of-range pages are empty."""
    _check_page_size(page_size)
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(items[start : start + page_size])


def total_pages(total: int, page_size: int) -> int:
    _check_page_size(page_size)
    return math.ceil(total / page_size)

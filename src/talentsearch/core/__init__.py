"""Resume search core: Boolean query, filters, ordering."""

from __future__ import annotations

from .filters import FilterCombinator, days_since, epoch_millis
from .ordering import paginate, resolve_sort_field, sort_candidates, total_pages
from .query import (
    BooleanQueryMatcher,
    ParsedQuery,
    matches_query,
    parse_query,
    searchable_text,
)
from .search import ResumeSearch, SearchPage

__all__ = [
    "BooleanQueryMatcher",
    "FilterCombinator",
    "ParsedQuery",
    "ResumeSearch",
    "SearchPage",
    "days_since",
    "epoch_millis",
    "matches_query",
    "paginate",
    "parse_query",
    "resolve_sort_field",
    "searchable_text",
    "sort_candidates",
    "total_pages",
]

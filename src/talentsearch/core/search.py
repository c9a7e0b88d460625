"""Resume search orchestration: query, filters, sort, paginate."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable

import structlog

from ..schemas import Candidate, SearchFilters, SortDirection
from .filters import FilterCombinator
from .ordering import paginate, resolve_sort_field, sort_candidates, total_pages
from .query import BooleanQueryMatcher


@dataclass(slots=True)
class SearchPage:
    """One page of search results plus the totals needed to page through them."""

    items: list[Candidate]
    page: int
    page_size: int
    total: int
    total_pages: int
    sort_field: str
    sort_direction: SortDirection
    query: str = ""
    active_filters: int = 0
    ordered: list[Candidate] = field(default_factory=list, repr=False)


class ResumeSearch:
    """Runs the admin resume search pipeline over a candidate snapshot."""

    DEFAULT_PAGE_SIZE = 25
    DEFAULT_SORT_FIELD = "last_active"
    DEFAULT_SORT_DIRECTION: SortDirection = "desc"

    def __init__(
        self,
        matcher: BooleanQueryMatcher | None = None,
        combinator: FilterCombinator | None = None,
        *,
        page_size: int | None = None,
        sort_field: str | None = None,
        sort_direction: SortDirection | None = None,
    ) -> None:
        self._matcher = matcher or BooleanQueryMatcher()
        self._combinator = combinator or FilterCombinator()
        self._page_size = self.DEFAULT_PAGE_SIZE if page_size is None else page_size
        self._sort_field = sort_field or self.DEFAULT_SORT_FIELD
        self._sort_direction = sort_direction or self.DEFAULT_SORT_DIRECTION
        self._logger = structlog.get_logger(__name__)

    def filter(
        self,
        candidates: Iterable[Candidate],
        *,
        query: str = "",
        filters: SearchFilters | None = None,
        now: datetime | None = None,
    ) -> list[Candidate]:
        """Candidates matching both the query and the filters, in input order."""
        filters = filters or SearchFilters()
        parsed = self._matcher.parse(query)
        if not filters.is_unrestricted() and now is None:
            now = self._combinator.now()
        return [
            candidate
            for candidate in candidates
            if self._matcher.matches(parsed, candidate)
            and self._combinator.matches(candidate, filters, now=now)
        ]

    def search(
        self,
        candidates: Iterable[Candidate],
        *,
        query: str = "",
        filters: SearchFilters | None = None,
        sort_field: str | None = None,
        sort_direction: SortDirection | None = None,
        page: int = 1,
        page_size: int | None = None,
        now: datetime | None = None,
    ) -> SearchPage:
        filters = filters or SearchFilters()
        sort_field = sort_field or self._sort_field
        sort_direction = sort_direction or self._sort_direction
        page_size = self._page_size if page_size is None else page_size

        matched = self.filter(candidates, query=query, filters=filters, now=now)
        ordered = sort_candidates(matched, sort_field, sort_direction)
        items = paginate(ordered, page, page_size)
        pages = total_pages(len(ordered), page_size)

        self._logger.info(
            "search.completed",
            query=query,
            query_operator=self._matcher.parse(query).operator,
            active_filters=filters.active_count(),
            sort_field=sort_field,
            sort_known=resolve_sort_field(sort_field) is not None,
            sort_direction=sort_direction,
            matched=len(ordered),
            page=page,
            page_items=len(items),
        )

        return SearchPage(
            items=items,
            page=page,
            page_size=page_size,
            total=len(ordered),
            total_pages=pages,
            sort_field=sort_field,
            sort_direction=sort_direction,
            query=query,
            active_filters=filters.active_count(),
            ordered=ordered,
        )

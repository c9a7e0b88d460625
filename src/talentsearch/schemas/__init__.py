"""Pydantic schema definitions for candidates, filters and requests."""

from __future__ import annotations

from .candidate import (
    Candidate,
    CandidateStatus,
    EducationDetail,
    UserProfile,
    UserRole,
)
from .filters import SearchFilters
from .request import AppConfig, SearchRequest, SortDirection, load_config

__all__ = [
    "AppConfig",
    "Candidate",
    "CandidateStatus",
    "EducationDetail",
    "SearchFilters",
    "SearchRequest",
    "SortDirection",
    "UserProfile",
    "UserRole",
    "load_config",
]

"""Candidate sources for the resume search."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..schemas import Candidate
from .hosted import HostedCandidateGateway
from .jsonl import JsonlCandidateGateway
from .memory import InMemoryCandidateGateway
from .session import SessionContext


@runtime_checkable
class CandidateGateway(Protocol):
    """Candidate source contract.

    Implementations return an immutable snapshot; callers never write back
    through a gateway.
    """

    def get_candidates(self, session: SessionContext | None = None) -> list[Candidate]:
        """Return every candidate visible to ``session``."""


__all__ = [
    "CandidateGateway",
    "HostedCandidateGateway",
    "InMemoryCandidateGateway",
    "JsonlCandidateGateway",
    "SessionContext",
]

"""In-memory candidate gateway."""

from __future__ import annotations

from typing import Iterable

from ..schemas import Candidate
from .session import SessionContext


class InMemoryCandidateGateway:
    """Serve a fixed candidate snapshot."""

    def __init__(self, candidates: Iterable[Candidate] = ()) -> None:
        self._candidates = tuple(candidates)

    def get_candidates(self, session: SessionContext | None = None) -> list[Candidate]:
        return list(self._candidates)

"""JSON Lines candidate gateway."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from ..errors import CandidateLoadError
from ..schemas import Candidate
from .session import SessionContext


class JsonlCandidateGateway:
    """Load candidates from a file with one JSON object per line."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def get_candidates(self, session: SessionContext | None = None) -> list[Candidate]:
        candidates: list[Candidate] = []
        errors: list[str] = []
        with self._path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                if not isinstance(record, dict):
                    errors.append(f"line {idx}: expected a JSON object")
                    continue
                try:
                    candidates.append(Candidate.model_validate(record))
                except ValidationError as exc:
                    errors.append(f"line {idx}: {exc.error_count()} validation error(s): {exc}")
        if errors:
            raise CandidateLoadError(errors, candidates)
        return candidates

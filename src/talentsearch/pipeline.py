"""Batch resume search: load, search, write results."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

import pendulum
import structlog

from . import __version__
from .config import load_yaml_file
from .core import ResumeSearch, SearchPage
from .errors import CandidateLoadError
from .export import DEFAULT_EXPORT_FIELDS, export_candidates
from .gateways import CandidateGateway, SessionContext
from .schemas import Candidate, SearchRequest


class RequestLoader:
    """Load search requests from JSON or YAML documents."""

    def load(self, path: Path) -> SearchRequest:
        if path.suffix.lower() == ".json":
            with path.open("r", encoding="utf-8") as handle:
                try:
                    data = json.load(handle)
                except json.JSONDecodeError as exc:
                    raise ValueError(f"Invalid request JSON: {exc}") from exc
        else:
            data = load_yaml_file(path)
        return SearchRequest.model_validate(data)


class OutputWriter:
    """Persist search results."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False))
            handle.write("\n")


class SearchPipeline:
    """End-to-end admin resume search."""

    def __init__(
        self,
        *,
        search: ResumeSearch,
        gateway: CandidateGateway,
        writer: OutputWriter | None = None,
        export_fields: Iterable[str] | None = None,
    ) -> None:
        self._search = search
        self._gateway = gateway
        self._writer = writer or OutputWriter()
        self._export_fields = tuple(export_fields or DEFAULT_EXPORT_FIELDS)
        self._logger = structlog.get_logger(__name__)

    def run(
        self,
        *,
        session: SessionContext,
        request: SearchRequest,
        output_path: Path,
        audit_logger: AuditLogger | None = None,
        export_path: Path | None = None,
        export_fields: Iterable[str] | None = None,
    ) -> SearchPage:
        user = session.require_role("admin")

        load_errors: list[str] = []
        try:
            candidates = self._gateway.get_candidates(session)
        except CandidateLoadError as exc:
            candidates = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("candidates.partial_load", errors=exc.errors)

        page = self._search.search(
            candidates,
            query=request.query,
            filters=request.filters,
            sort_field=request.sort_field,
            sort_direction=request.sort_direction,
            page=request.page,
            page_size=request.page_size,
        )

        exported: str | None = None
        if export_path is not None:
            fields = tuple(export_fields or self._export_fields)
            exported = str(export_candidates(page.ordered, fields, export_path))
            self._logger.info("export.written", path=exported, rows=len(page.ordered))

        metadata = {
            "candidate_count": len(candidates),
            "errors": load_errors,
            "requested_by": user.id,
            "export_path": exported,
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        payload = {
            "metadata": metadata,
            "page": _page_summary(page),
            "results": [_serialize_candidate(candidate) for candidate in page.items],
        }
        self._writer.write(output_path, payload)

        if audit_logger:
            audit_logger.append(
                {
                    "requested_by": user.id,
                    "role": user.role,
                    "query": request.query,
                    "filters": request.filters.model_dump(mode="json", exclude_defaults=True),
                    "matched": page.total,
                    "page": page.page,
                    "returned_ids": [candidate.id for candidate in page.items],
                    "timestamp": metadata["timestamp"],
                }
            )

        return page


def _page_summary(page: SearchPage) -> dict[str, Any]:
    return {
        "page": page.page,
        "page_size": page.page_size,
        "total": page.total,
        "total_pages": page.total_pages,
        "sort_field": page.sort_field,
        "sort_direction": page.sort_direction,
        "query": page.query,
        "active_filters": page.active_filters,
    }


def _serialize_candidate(candidate: Candidate) -> dict[str, Any]:
    return candidate.model_dump(mode="json")

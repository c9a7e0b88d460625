"""Candidate gateway for the portal's hosted database REST endpoint."""

from __future__ import annotations

import json
from typing import Any
from urllib import error, parse, request

import structlog
from pydantic import ValidationError

from ..errors import GatewayError
from ..schemas import Candidate
from .session import SessionContext


class HostedCandidateGateway:
    """Page through a hosted table over HTTP and validate each row.

    Rows are requested with ``limit``/``offset`` until a short page comes
    back. Rows that fail validation are logged and skipped.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        table: str = "applicants",
        batch_size: int = 1000,
        timeout: float = 10.0,
    ) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be positive")
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._table = table
        self._batch_size = batch_size
        self._timeout = timeout
        self._logger = structlog.get_logger(__name__)

    def get_candidates(self, session: SessionContext | None = None) -> list[Candidate]:
        token = session.access_token if session and session.access_token else self._api_key
        candidates: list[Candidate] = []
        offset = 0
        while True:
            rows = self._fetch_batch(offset, token)
            for row in rows:
                try:
                    candidates.append(Candidate.model_validate(row))
                except ValidationError as exc:
                    self._logger.warning(
                        "gateway.row_invalid",
                        table=self._table,
                        row_id=row.get("id") if isinstance(row, dict) else None,
                        errors=exc.error_count(),
                    )
            if len(rows) < self._batch_size:
                break
            offset += self._batch_size

        self._logger.info("gateway.loaded", table=self._table, candidates=len(candidates))
        return candidates

    def _fetch_batch(self, offset: int, token: str) -> list[Any]:
        query = parse.urlencode(
            {"select": "*", "limit": self._batch_size, "offset": offset}
        )
        url = f"{self._base_url}/rest/v1/{self._table}?{query}"
        headers = {
            "apikey": self._api_key,
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }
        req = request.Request(url, headers=headers, method="GET")
        try:
            with request.urlopen(req, timeout=self._timeout) as resp:
                body = resp.read().decode("utf-8")
        except (error.URLError, TimeoutError) as exc:
            raise GatewayError(f"request to {self._table} failed: {exc}") from exc

        try:
            payload = json.loads(body) if body else []
        except json.JSONDecodeError as exc:
            raise GatewayError(f"invalid JSON from {self._table}: {exc}") from exc
        if not isinstance(payload, list):
            raise GatewayError(f"expected a list of rows from {self._table}")
        return payload

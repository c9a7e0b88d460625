from __future__ import annotations

import json
from pathlib import Path

import pytest

from talentsearch.errors import AccessDeniedError, AuthenticationRequiredError, CandidateLoadError
from talentsearch.gateways import (
    CandidateGateway,
    InMemoryCandidateGateway,
    JsonlCandidateGateway,
    SessionContext,
)
from talentsearch.schemas import Candidate, UserProfile

RECORD = {
    "id": 1,
    "name": "Priya Sharma",
    "skills": ["Java"],
    "lastActive": "2025-05-01T00:00:00Z",
    "registeredDate": "2025-01-01T00:00:00Z",
}


def test_in_memory_gateway_returns_copy():
    candidate = Candidate.model_validate(RECORD)
    gateway = InMemoryCandidateGateway([candidate])

    loaded = gateway.get_candidates()
    loaded.clear()

    assert isinstance(gateway, CandidateGateway)
    assert gateway.get_candidates() == [candidate]


def test_jsonl_gateway_loads_records(tmp_path: Path):
    path = tmp_path / "candidates.jsonl"
    second = {**RECORD, "id": 2, "name": "Rahul Kumar"}
    path.write_text(
        json.dumps(RECORD) + "\n\n" + json.dumps(second) + "\n",
        encoding="utf-8",
    )

    candidates = JsonlCandidateGateway(path).get_candidates()

    assert [candidate.name for candidate in candidates] == ["Priya Sharma", "Rahul Kumar"]


def test_jsonl_gateway_reports_invalid_lines_with_partial(tmp_path: Path):
    path = tmp_path / "candidates.jsonl"
    path.write_text(
        "\n".join([json.dumps(RECORD), "{invalid", json.dumps({"id": 3}), "[1, 2]"]),
        encoding="utf-8",
    )

    with pytest.raises(CandidateLoadError) as exc:
        JsonlCandidateGateway(path).get_candidates()

    error = exc.value
    assert len(error.partial) == 1
    assert "line 2: invalid JSON" in error.errors[0]
    assert error.errors[1].startswith("line 3:")
    assert "expected a JSON object" in error.errors[2]


def test_session_require_role():
    admin = SessionContext(user=UserProfile(id="u1", role="admin"))
    client = SessionContext(user=UserProfile(id="u2", role="client"))

    assert admin.require_role("admin").id == "u1"
    with pytest.raises(AccessDeniedError) as exc:
        client.require_role("admin")
    assert exc.value.role == "client"
    with pytest.raises(AuthenticationRequiredError):
        SessionContext.anonymous().require_role("admin")


def test_operator_session_is_admin():
    session = SessionContext.operator(access_token="token")

    assert session.is_authenticated
    assert session.require_role("admin").role == "admin"
    assert session.access_token == "token"

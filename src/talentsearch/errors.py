"""Exception types raised outside the pure search core."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .schemas import Candidate


class TalentSearchError(Exception):
    """Base class for talentsearch errors."""


class GatewayError(TalentSearchError):
    """Raised when a candidate source cannot be read."""


class CandidateLoadError(TalentSearchError, ValueError):
    """Raised when candidate loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list["Candidate"]):
        super().__init__("Candidate loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Candidate loading failed: {self.errors}"


class AuthenticationRequiredError(TalentSearchError):
    """Raised when an operation needs a signed-in user and there is none."""


class AccessDeniedError(TalentSearchError):
    """Raised when the signed-in user's role is not allowed."""

    def __init__(self, role: str, allowed: tuple[str, ...]):
        super().__init__(
            f"role {role!r} is not allowed; required role: {' or '.join(allowed)}"
        )
        self.role = role
        self.allowed = allowed


__all__ = [
    "TalentSearchError",
    "GatewayError",
    "CandidateLoadError",
    "AuthenticationRequiredError",
    "AccessDeniedError",
]

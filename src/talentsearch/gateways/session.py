"""Explicit session context for the signed-in portal user."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import AccessDeniedError, AuthenticationRequiredError
from ..schemas import UserProfile


@dataclass(frozen=True, slots=True)
class SessionContext:
    """Current user and the access token used against the hosted backend."""

    user: UserProfile | None = None
    access_token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def require_role(self, *roles: str) -> UserProfile:
        if self.user is None:
            raise AuthenticationRequiredError("a signed-in user is required")
        if roles and self.user.role not in roles:
            raise AccessDeniedError(self.user.role, tuple(roles))
        return self.user

    @classmethod
    def anonymous(cls) -> "SessionContext":
        return cls()

    @classmethod
    def operator(cls, access_token: str | None = None) -> "SessionContext":
        """Admin session for batch jobs run by an operator."""
        return cls(
            user=UserProfile(id="operator", full_name="Batch operator", role="admin"),
            access_token=access_token,
        )

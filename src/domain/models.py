"""
Domain models - User record and signup request/result values.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .ports import SignupFailure

SUCCESS_MESSAGE = "User registered successfully"


@dataclass(frozen=True)
class User:
    """Persisted user record."""

    id: int
    email: str
    password_hash: str
    created_at: datetime


@dataclass(frozen=True)
class UserSummary:
    """Public view of a user; never carries the password hash."""

    id: int
    email: str


@dataclass(frozen=True)
class SignupRequest:
    """Signup input, validated and discarded after processing."""

    email: str
    password: str
    confirm_password: str

    def __repr__(self) -> str:
        return f"SignupRequest(email={self.email!r})"


@dataclass(frozen=True)
class SignupResult:
    """
    Outcome of a registration attempt.

    Business-rule rejections (validation, duplicate email) are returned
    as results with ``success=False`` and a ``failure`` kind; ``user`` is
    only present on success.
    """

    success: bool
    message: str
    user: UserSummary | None = None
    failure: SignupFailure | None = None

    @classmethod
    def registered(cls, user: User) -> "SignupResult":
        return cls(
            success=True,
            message=SUCCESS_MESSAGE,
            user=UserSummary(id=user.id, email=user.email),
        )

    @classmethod
    def rejected(cls, failure: SignupFailure) -> "SignupResult":
        return cls(success=False, message=failure.message, failure=failure)

    def as_dict(self) -> dict[str, Any]:
        """Serialize to the ``{success, message, user?}`` response shape."""
        body: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.user is not None:
            body["user"] = {"id": self.user.id, "email": self.user.email}
        return body

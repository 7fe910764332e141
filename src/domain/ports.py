"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import User


class SignupFailure(str, Enum):
    """
    Closed set of reasons a signup is rejected.

    Validation kinds (checked in this priority order):
    - INVALID_EMAIL: email is not local-part@domain with a dotted domain
    - PASSWORD_TOO_SHORT: password shorter than 6 characters
    - PASSWORD_MISMATCH: password and confirmation differ

    Business rule:
    - EMAIL_EXISTS: a user with exactly this email is already registered
    """

    INVALID_EMAIL = "invalid_email"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_MISMATCH = "password_mismatch"
    EMAIL_EXISTS = "email_exists"

    @property
    def message(self) -> str:
        return FAILURE_MESSAGES[self]

    @property
    def is_validation(self) -> bool:
        return self is not SignupFailure.EMAIL_EXISTS


FAILURE_MESSAGES: dict[SignupFailure, str] = {
    SignupFailure.INVALID_EMAIL: "Please enter a valid email address",
    SignupFailure.PASSWORD_TOO_SHORT: "Password must be at least 6 characters long",
    SignupFailure.PASSWORD_MISMATCH: "Passwords don't match",
    SignupFailure.EMAIL_EXISTS: "Email already exists",
}


class UserStore(Protocol):
    """Port interface for user persistence."""

    def exists(self, email: str) -> bool:
        """
        Check whether a user with exactly this email is persisted.

        Comparison is case-sensitive; no trimming or lowercasing is applied.

        Raises:
            StoreUnavailable: On I/O failure or timeout
        """
        ...

    def insert(self, email: str, password_hash: str) -> "User":
        """
        Persist a new user and return the stored record.

        The store is the authority on email uniqueness: a concurrent insert
        for the same email must surface as EmailAlreadyExists, never as a
        raw storage error.

        Args:
            email: Email exactly as submitted
            password_hash: Output of PasswordHasher.hash

        Returns:
            Persisted User with assigned id and created_at

        Raises:
            EmailAlreadyExists: Uniqueness violation
            StoreUnavailable: On I/O failure or timeout
        """
        ...


class PasswordHasher(Protocol):
    """Port interface for one-way salted password hashing."""

    def hash(self, plaintext: str) -> str:
        """
        Hash a password with a fresh random salt.

        Raises:
            HashingFailed: If the digest cannot be produced
        """
        ...

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return True iff hashed was produced by hash(plaintext)."""
        ...

"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations and infrastructure failures without leaking
driver details to callers.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class EmailAlreadyExists(RegistrationError):
    """A user with exactly this email is already persisted."""

    pass


class StoreUnavailable(RegistrationError):
    """User store could not complete the operation (I/O failure or timeout)."""

    pass


class HashingFailed(RegistrationError):
    """Password hasher could not produce a digest."""

    pass

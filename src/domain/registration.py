"""
Registration domain service - Signup orchestration.

This module contains the core business logic for account registration.

Registration Flow (single pass, no retries)
===========================================

    Received -> Validated -> DuplicateChecked -> Hashed -> Persisted -> Responded

Any failure short-circuits straight to Responded:
- Validation failure: rejected before the store or hasher is touched
- Email already present: rejected after the existence pre-check
- Uniqueness violation on insert: a concurrent signup won the race,
  reported exactly like the pre-check rejection

The existence check is only a fast path for a friendly message. Uniqueness
is enforced by the store (UNIQUE constraint), which is why a lost race on
insert is still a normal rejection and not an error.

Store and hasher failures (StoreUnavailable, HashingFailed) are not
results: they propagate to the caller.
"""

import logging
from dataclasses import dataclass

from .exceptions import EmailAlreadyExists
from .models import SignupRequest, SignupResult
from .ports import PasswordHasher, SignupFailure, UserStore
from .validation import validate_signup

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Stateless apart from its injected ports; safe to call concurrently.
    """

    store: UserStore
    hasher: PasswordHasher

    def register(self, request: SignupRequest) -> SignupResult:
        """
        Register a new user from a signup request.

        Args:
            request: Email, password and password confirmation

        Returns:
            SignupResult with the new user's id and email on success,
            or the failure kind and message on rejection

        Raises:
            StoreUnavailable: If the user store cannot be reached
            HashingFailed: If the password cannot be hashed
        """
        failure = validate_signup(request)
        if failure is not None:
            logger.debug("Signup rejected: %s", failure.value)
            return SignupResult.rejected(failure)

        if self.store.exists(request.email):
            return SignupResult.rejected(SignupFailure.EMAIL_EXISTS)

        password_hash = self.hasher.hash(request.password)

        try:
            user = self.store.insert(request.email, password_hash)
        except EmailAlreadyExists:
            logger.info("Concurrent signup already claimed %s", request.email)
            return SignupResult.rejected(SignupFailure.EMAIL_EXISTS)

        logger.info("Registered user id=%s", user.id)
        return SignupResult.registered(user)

    def email_exists(self, email: str) -> bool:
        """Exact, case-sensitive check for an already registered email."""
        return self.store.exists(email)

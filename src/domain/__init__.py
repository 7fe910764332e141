"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for account signup:
input validation, duplicate rejection and orchestration of the user
store and password hasher ports it defines.
"""

from .exceptions import EmailAlreadyExists, HashingFailed, RegistrationError, StoreUnavailable
from .models import SignupRequest, SignupResult, User, UserSummary
from .ports import PasswordHasher, SignupFailure, UserStore
from .registration import RegistrationService
from .validation import validate_signup

__all__ = [
    "EmailAlreadyExists",
    "HashingFailed",
    "PasswordHasher",
    "RegistrationError",
    "RegistrationService",
    "SignupFailure",
    "SignupRequest",
    "SignupResult",
    "StoreUnavailable",
    "User",
    "UserStore",
    "UserSummary",
    "validate_signup",
]

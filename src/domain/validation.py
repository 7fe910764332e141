"""
Signup input validation.

Pure checks with no side effects. Rules run in priority order and the
first failure wins.
"""

from email_validator import EmailNotValidError, validate_email

from .models import SignupRequest
from .ports import SignupFailure

MIN_PASSWORD_LENGTH = 6
MIN_TLD_LENGTH = 2

# Request field each validation failure refers to, as named on the wire.
FAILURE_FIELDS: dict[SignupFailure, str] = {
    SignupFailure.INVALID_EMAIL: "email",
    SignupFailure.PASSWORD_TOO_SHORT: "password",
    SignupFailure.PASSWORD_MISMATCH: "confirmPassword",
}


def is_valid_email(email: str) -> bool:
    """
    Check email syntax with email-validator (no DNS lookups).

    The normalized address email-validator returns is discarded: the
    email is stored and compared exactly as submitted.
    """
    try:
        validated = validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return len(validated.ascii_domain.rpartition(".")[2]) >= MIN_TLD_LENGTH


def validate_signup(request: SignupRequest) -> SignupFailure | None:
    """
    Check structural well-formedness of a signup request.

    Returns:
        None if the request is valid, otherwise the first failing rule
    """
    if not is_valid_email(request.email):
        return SignupFailure.INVALID_EMAIL
    if len(request.password) < MIN_PASSWORD_LENGTH:
        return SignupFailure.PASSWORD_TOO_SHORT
    if request.password != request.confirm_password:
        return SignupFailure.PASSWORD_MISMATCH
    return None

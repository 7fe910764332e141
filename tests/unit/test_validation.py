"""
Unit tests for signup input validation.

Tests verify each rule and the priority order between rules.
"""

import pytest

from src.domain.models import SignupRequest
from src.domain.ports import SignupFailure
from src.domain.validation import FAILURE_FIELDS, is_valid_email, validate_signup


def make_request(
    email: str = "user@example.com",
    password: str = "password123",
    confirm_password: str | None = None,
) -> SignupRequest:
    if confirm_password is None:
        confirm_password = password
    return SignupRequest(email=email, password=password, confirm_password=confirm_password)


class TestEmailSyntax:
    """Tests for email syntax rule."""

    @pytest.mark.parametrize(
        "email",
        ["user@example.com", "a@b.co", "first.last+tag@sub.example.org", "A@B.COM"],
    )
    def test_valid_emails_accepted(self, email: str) -> None:
        assert is_valid_email(email)

    @pytest.mark.parametrize(
        "email",
        [
            "",
            "plainaddress",
            "user@example",
            "@example.com",
            "user@",
            "user@.com",
            "user@example.",
            "user@exa..mple.com",
            "us er@example.com",
            "user@@example.com",
            ".a@example.com",
            "a..b@example.com",
            "a.@example.com",
            "user@example.c",
            "user@-bad.com",
            "a<b>@example.com",
            "user@exa_mple.com",
            "user@example.com,",
            "Name <user@example.com>",
        ],
    )
    def test_invalid_emails_rejected(self, email: str) -> None:
        assert not is_valid_email(email)
        assert validate_signup(make_request(email=email)) == SignupFailure.INVALID_EMAIL

    def test_mixed_case_email_accepted_as_submitted(self) -> None:
        """Validation does not rewrite the email; the request keeps its casing."""
        request = make_request(email="User@EXAMPLE.com")

        assert validate_signup(request) is None
        assert request.email == "User@EXAMPLE.com"


class TestPasswordLength:
    """Tests for minimum password length rule."""

    def test_five_characters_too_short(self) -> None:
        assert validate_signup(make_request(password="12345")) == SignupFailure.PASSWORD_TOO_SHORT

    def test_empty_password_too_short(self) -> None:
        assert validate_signup(make_request(password="")) == SignupFailure.PASSWORD_TOO_SHORT

    def test_exactly_six_characters_accepted(self) -> None:
        assert validate_signup(make_request(password="123456")) is None

    def test_length_counts_characters_not_bytes(self) -> None:
        """Six non-ASCII characters satisfy the minimum."""
        assert validate_signup(make_request(password="pässwö")) is None


class TestPasswordConfirmation:
    """Tests for password/confirmation match rule."""

    def test_mismatch_rejected(self) -> None:
        request = make_request(password="password123", confirm_password="password124")
        assert validate_signup(request) == SignupFailure.PASSWORD_MISMATCH

    def test_match_is_case_sensitive(self) -> None:
        request = make_request(password="Password123", confirm_password="password123")
        assert validate_signup(request) == SignupFailure.PASSWORD_MISMATCH

    def test_trailing_whitespace_is_significant(self) -> None:
        request = make_request(password="password123", confirm_password="password123 ")
        assert validate_signup(request) == SignupFailure.PASSWORD_MISMATCH


class TestRulePriority:
    """First failing rule wins."""

    def test_invalid_email_beats_short_password(self) -> None:
        request = make_request(email="bad", password="123", confirm_password="456")
        assert validate_signup(request) == SignupFailure.INVALID_EMAIL

    def test_short_password_beats_mismatch(self) -> None:
        request = make_request(password="123", confirm_password="456")
        assert validate_signup(request) == SignupFailure.PASSWORD_TOO_SHORT

    def test_valid_request_returns_none(self) -> None:
        assert validate_signup(make_request()) is None


class TestFailureFields:
    """Each validation failure names the request field it refers to."""

    def test_fields_use_wire_names(self) -> None:
        assert FAILURE_FIELDS == {
            SignupFailure.INVALID_EMAIL: "email",
            SignupFailure.PASSWORD_TOO_SHORT: "password",
            SignupFailure.PASSWORD_MISMATCH: "confirmPassword",
        }

    def test_email_exists_is_not_a_validation_failure(self) -> None:
        assert SignupFailure.EMAIL_EXISTS not in FAILURE_FIELDS
        assert not SignupFailure.EMAIL_EXISTS.is_validation

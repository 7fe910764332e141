"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models import SignupRequest, SignupResult


class SignupRequestBody(BaseModel):
    """
    Request model for account signup.

    Fields are only required to be strings here; email syntax, password
    length and confirmation are checked by the domain validator so the
    rules and their priority live in one place.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(..., description="Email address (case-sensitive)")
    password: str = Field(..., description="Password (min 6 characters)")
    confirm_password: str = Field(
        ..., alias="confirmPassword", description="Must equal password exactly"
    )

    def to_domain(self) -> SignupRequest:
        return SignupRequest(
            email=self.email,
            password=self.password,
            confirm_password=self.confirm_password,
        )


class UserSummaryModel(BaseModel):
    """Public user fields returned after signup."""

    id: int
    email: str


class SignupResponse(BaseModel):
    """Response model for signup outcomes (success and duplicate email)."""

    success: bool
    message: str
    user: UserSummaryModel | None = None

    @classmethod
    def from_result(cls, result: SignupResult) -> "SignupResponse":
        return cls.model_validate(result.as_dict())


class EmailExistsResponse(BaseModel):
    """Response model for the email existence check."""

    exists: bool


class ValidationErrorItem(BaseModel):
    """One failing field, shaped like FastAPI's own validation errors."""

    loc: list[str | int]
    msg: str
    type: str


class ValidationErrorResponse(BaseModel):
    """Validation error response model."""

    detail: list[ValidationErrorItem]


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str


def validation_detail(field: str, message: str, kind: str) -> list[dict[str, Any]]:
    """Build a single-field ``detail`` list for a 422 response."""
    return [{"loc": ["body", field], "msg": message, "type": kind}]

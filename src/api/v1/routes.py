"""
API v1 routes.

Defines REST endpoints for the signup service.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_registration_service
from src.api.models import (
    EmailExistsResponse,
    ErrorResponse,
    SignupRequestBody,
    SignupResponse,
    ValidationErrorResponse,
    validation_detail,
)
from src.domain.registration import RegistrationService
from src.domain.validation import FAILURE_FIELDS

router = APIRouter(tags=["v1"])


@router.post(
    "/signup",
    response_model=SignupResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": SignupResponse, "description": "Email already exists"},
        422: {"model": ValidationErrorResponse, "description": "Validation error"},
        503: {"model": ErrorResponse, "description": "User store unavailable"},
    },
    summary="Register a new account",
    description="Submit email, password and password confirmation to create an account.",
)
def signup(
    request_data: SignupRequestBody,
    service: RegistrationService = Depends(get_registration_service),
) -> SignupResponse | JSONResponse:
    """
    Register a new account.

    - **email**: Email address (stored exactly as given)
    - **password**: Password (minimum 6 characters)
    - **confirmPassword**: Must match password

    Returns the new user's id and email on success.
    """
    result = service.register(request_data.to_domain())

    if result.success:
        return SignupResponse.from_result(result)

    if result.failure is not None and result.failure.is_validation:
        raise HTTPException(
            status_code=422,
            detail=validation_detail(
                FAILURE_FIELDS[result.failure], result.message, result.failure.value
            ),
        )

    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=result.as_dict())


@router.get(
    "/users/exists",
    response_model=EmailExistsResponse,
    responses={503: {"model": ErrorResponse, "description": "User store unavailable"}},
    summary="Check whether an email is registered",
)
def email_exists(
    email: str = Query(..., description="Email to look up (exact, case-sensitive)"),
    service: RegistrationService = Depends(get_registration_service),
) -> EmailExistsResponse:
    return EmailExistsResponse(exists=service.email_exists(email))

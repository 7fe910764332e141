"""
Exception handlers for infrastructure failures.

Business rejections never reach these handlers; they are returned by the
domain as SignupResult values. Only store and hasher failures propagate
here and are mapped to generic server-error responses.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.domain.exceptions import HashingFailed, StoreUnavailable

logger = logging.getLogger(__name__)


async def store_unavailable_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Store unavailable during %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service temporarily unavailable"},
    )


async def hashing_failed_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Password hashing failed during %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install infrastructure error handlers on the application."""
    app.add_exception_handler(StoreUnavailable, store_unavailable_handler)
    app.add_exception_handler(HashingFailed, hashing_failed_handler)

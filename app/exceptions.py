# =============================================================================
# app/exceptions.py - Error Responses & Exception Handlers
# =============================================================================
# Centralized error rendering for the API.
# Every error leaves the service as {"error": "<short message>"}; the full
# detail is only written to the server log.
# =============================================================================

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lib.result import INTERNAL_ERROR_MESSAGE, Failure

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body"


def error_body(message: str) -> dict[str, str]:
    """The single error body shape."""
    return {"error": message}


def failure_response(failure: Failure) -> JSONResponse:
    """
    Convert a tagged Failure into a JSON error response.

    5xx failures are logged as errors, 4xx as warnings.
    """
    log = logger.error if failure.status_code >= 500 else logger.warning
    log(f"Request failed ({failure.kind.value}, {failure.status_code}): {failure.detail or failure.message}")

    return JSONResponse(
        status_code=failure.status_code,
        content=error_body(failure.message),
    )


# =============================================================================
# Exception Handlers
# =============================================================================

async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle malformed JSON and body/parameter type errors.

    Answered with 400 before the route handler runs.
    """
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content=error_body(INVALID_BODY_MESSAGE),
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """Render framework HTTP errors (unknown route, wrong method) as {error}."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content=error_body(INTERNAL_ERROR_MESSAGE),
    )

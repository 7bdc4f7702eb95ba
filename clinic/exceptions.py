import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ClinicException(Exception):
    """Base class for business errors surfaced to API clients."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DataNotFoundException(ClinicException):
    """A referenced doctor, investigation, vacation or appointment does not exist or is inactive."""

    status_code = 404


class ConcurrencyException(ClinicException):
    """The referenced entities exist but the request conflicts with their state in time:
    past-dated operations, double-booked slots, overlapping vacations."""

    status_code = 409


class DataMismatchException(ClinicException):
    """Malformed or inconsistent input."""

    status_code = 400


def create_error_response(error_message: str) -> dict:
    """Create a standardized error response"""
    return {
        "success": False,
        "data": None,
        "error": error_message
    }


async def clinic_exception_handler(request: Request, exc: ClinicException) -> JSONResponse:
    logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.message)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    )
    message = f"Validation failed: {details}" if details else "Validation failed: Unknown validation error."
    logger.error(message)
    return JSONResponse(
        status_code=DataMismatchException.status_code,
        content=create_error_response(message)
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors (unknown routes, wrong methods) in the same envelope"""
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(str(exc.detail))
    )

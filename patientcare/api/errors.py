"""
Translation of domain errors into HTTP responses.

Every failure leaves the API through one of these handlers, so clients always
get a JSON body: a field-to-message map for validation failures and
``{"error": ...}`` for everything else.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from patientcare.errors import (
    ConcurrentModificationError,
    DuplicateInsuranceError,
    PatientNotFoundError,
    PatientValidationError,
)

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location}: {err['msg']}" if location else err["msg"])
    return "; ".join(parts) or "Malformed request"


async def handle_validation(request: Request, exc: PatientValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.errors)


async def handle_duplicate(request: Request, exc: DuplicateInsuranceError):
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_not_found(request: Request, exc: PatientNotFoundError):
    return _error(status.HTTP_404_NOT_FOUND, str(exc))


async def handle_conflict(request: Request, exc: ConcurrentModificationError):
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"code": exc.code, "error": str(exc)},
    )


async def handle_malformed(request: Request, exc: RequestValidationError):
    message = _describe_request_errors(exc)
    logger.info("Malformed request to %s: %s", request.url.path, message)
    return _error(status.HTTP_400_BAD_REQUEST, message)


async def handle_http(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PatientValidationError, handle_validation)
    app.add_exception_handler(DuplicateInsuranceError, handle_duplicate)
    app.add_exception_handler(PatientNotFoundError, handle_not_found)
    app.add_exception_handler(ConcurrentModificationError, handle_conflict)
    app.add_exception_handler(RequestValidationError, handle_malformed)
    app.add_exception_handler(StarletteHTTPException, handle_http)
    app.add_exception_handler(Exception, handle_unexpected)

from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.status import HTTP_409_CONFLICT, HTTP_500_INTERNAL_SERVER_ERROR
from sqlalchemy.exc import IntegrityError
from app.errors.exceptions import DuplicateInterviewError

def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )

def generic_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred."},
    )

def database_integrity_handler(request: Request, exc: IntegrityError):
    """
    Handle SQLAlchemy integrity constraint violations.

    Duplicate interview keys are reported as a 409 conflict, anything else
    as a generic constraint violation.

    Args:
        request: FastAPI request instance
        exc: IntegrityError from SQLAlchemy

    Returns:
        JSONResponse with 409 status and user-friendly error message
    """
    error_msg = str(exc.orig).lower()
    logger.error(f"Integrity error on {request.url.path}: {error_msg}")

    if "duplicate key" in error_msg or "unique constraint" in error_msg:
        if "interviews" in error_msg:
            duplicate = DuplicateInterviewError()
            return http_exception_handler(request, duplicate)

    return JSONResponse(
        status_code=HTTP_409_CONFLICT,
        content={
            "error": "Database error",
            "message": "Data constraint violation",
            "hint": "Please check your data and try again"
        }
    )

"""Exception handlers giving every error response the same JSON shape."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse

from material_ai.exceptions import DataImportError, MaterialAIError, UnsupportedFileError
from material_ai.models.errors import ErrorResponse

logger = logging.getLogger(__name__)

# Map HTTP status codes to machine-readable error codes for consistent API responses.
STATUS_ERROR_CODES = {
    400: "bad_request",
    404: "not_found",
    405: "method_not_allowed",
    413: "payload_too_large",
    415: "unsupported_media_type",
    422: "validation_error",
    429: "rate_limited",
    500: "internal_error",
    503: "service_unavailable",
}


def error_response(
    status_code: int,
    detail,
    error_code: str,
    errors: Optional[list[dict]] = None,
    headers: Optional[dict] = None,
) -> JSONResponse:
    body = ErrorResponse(detail=detail, error_code=error_code, errors=errors)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    """Enrich all HTTPException responses with a consistent error_code field."""
    error_code = STATUS_ERROR_CODES.get(exc.status_code, "internal_error")
    return error_response(exc.status_code, exc.detail, error_code, headers=getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed or mistyped request bodies: 422 with the field errors."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return error_response(422, "Invalid request", "validation_error", errors=errors)


async def unsupported_file_handler(request: Request, exc: UnsupportedFileError):
    return error_response(415, str(exc), "unsupported_media_type")


async def data_import_handler(request: Request, exc: DataImportError):
    logger.warning("Data import rejected: %s", exc)
    return error_response(422, str(exc), "import_failed", errors=exc.errors)


async def material_ai_error_handler(request: Request, exc: MaterialAIError):
    logger.error("Application error: %s", exc)
    return error_response(500, "Internal server error", "internal_error")


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    return error_response(500, "Internal server error", "internal_error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(UnsupportedFileError, unsupported_file_handler)
    app.add_exception_handler(DataImportError, data_import_handler)
    app.add_exception_handler(MaterialAIError, material_ai_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

"""Error envelope for every failure the API returns.

Domain errors, framework HTTP errors, request validation failures and
unexpected exceptions all leave as ``{"type": ..., "message": ...}`` so
clients branch on ``type`` alone.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from winning.core.exceptions import AppException
from winning.core.request_logging import session_account_id

logger = logging.getLogger("winning.exception")

# Error types for HTTP errors raised by the framework itself (unknown
# route, wrong method, ...). Anything unlisted is reported as http_error.
HTTP_ERROR_TYPES: dict[int, str] = {
    401: "not_authenticated",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
}

# Location prefixes that say where a field came from, not which field it is.
_LOCATION_SOURCES = frozenset({"body", "query", "path"})


def error_response(status_code: int, error_type: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"type": error_type, "message": message}
    )


def _log_failure(
    request: Request, status_code: int, error_type: str, message: str, **kwargs
) -> None:
    level = logging.ERROR if status_code >= 500 else logging.INFO
    logger.log(
        level,
        "%s %s failed with %s: %s",
        request.method,
        request.url.path,
        error_type,
        message,
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "error_type": error_type,
            "account_id": session_account_id(request),
        },
        **kwargs,
    )


def _format_location(loc: tuple) -> str:
    return ".".join(str(part) for part in loc if part not in _LOCATION_SOURCES)


def validation_message(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into ``field: reason`` pairs joined by "; "."""
    messages = []
    for error in exc.errors():
        field = _format_location(error["loc"])
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return "; ".join(messages)


def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    _log_failure(request, exc.status_code, exc.error_type, exc.message)
    return error_response(exc.status_code, exc.error_type, exc.message)


def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    error_type = HTTP_ERROR_TYPES.get(exc.status_code, "http_error")
    return error_response(exc.status_code, error_type, str(exc.detail))


def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = validation_message(exc)
    _log_failure(request, 422, "validation_error", message)
    return error_response(422, "validation_error", message)


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    _log_failure(request, 500, "internal_error", repr(exc), exc_info=exc)
    return error_response(500, "internal_error", "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

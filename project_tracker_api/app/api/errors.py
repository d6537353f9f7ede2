"""
HTTP mapping for application errors.

This is the only place that decides transport status codes.  Every
error response uses the envelope ``{"error": {"code", "message"}}``.
Expected failures are logged as warnings; anything unanticipated is
logged with its traceback and answered with a generic 500.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from project_tracker_api.app.core.errors import (
    INTERNAL_SERVER_ERROR,
    INVALID_STATUS_TRANSITION,
    PROJECT_NOT_FOUND,
    VALIDATION_ERROR,
    AppError,
)

LOGGER = logging.getLogger(__name__)

STATUS_BY_CODE = {
    VALIDATION_ERROR: 400,
    INVALID_STATUS_TRANSITION: 400,
    PROJECT_NOT_FOUND: 404,
}


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": code, "message": message}},
    )


def _describe_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(item) for item in err.get("loc", ()) if item != "body")
        message = err.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def _app_error_handler(request: Request, exc: AppError):
        status_code = STATUS_BY_CODE.get(exc.code, 400)
        LOGGER.warning(
            "Request failed. code=%s status=%s method=%s path=%s message=%s",
            exc.code,
            status_code,
            request.method,
            request.url.path,
            exc.message,
        )
        return error_response(status_code, exc.code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def _request_validation_error_handler(request: Request, exc: RequestValidationError):
        message = _describe_request_errors(exc)
        LOGGER.warning(
            "Malformed request. method=%s path=%s message=%s",
            request.method,
            request.url.path,
            message,
        )
        return error_response(400, VALIDATION_ERROR, message)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error_handler(request: Request, exc: StarletteHTTPException):
        # Unknown path and unsupported method on a known path look the same.
        if exc.status_code in (404, 405):
            return error_response(
                404,
                "ROUTE_NOT_FOUND",
                f"Cannot {request.method} {request.url.path}",
            )
        return error_response(exc.status_code, "HTTP_ERROR", str(exc.detail))

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        LOGGER.exception(
            "Unhandled error. method=%s path=%s",
            request.method,
            request.url.path,
        )
        return error_response(500, INTERNAL_SERVER_ERROR, "An unexpected error occurred")

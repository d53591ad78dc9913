from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


class AppError(Exception):
    """A known failure that carries its own status, code and message."""

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        code: str = "APP_ERROR",
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details


class NotFoundError(AppError):
    def __init__(self, message: str = "Not found") -> None:
        super().__init__(message, status_code=404, code="NOT_FOUND")


class ValidationFailed(AppError):
    def __init__(self, details: list[dict[str, str]]) -> None:
        super().__init__(
            "Validation failed",
            status_code=400,
            code="VALIDATION_ERROR",
            details=details,
        )


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    error: dict[str, Any] = {"code": code, "message": message}
    if details:
        error["details"] = details
    return JSONResponse(
        {"ok": False, "error": error}, status_code=status_code, headers=headers
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc
        )
    return error_response(exc.status_code, exc.code, exc.message, exc.details)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = HTTP_ERROR_CODES.get(exc.status_code, "ERROR")
    return error_response(exc.status_code, code, str(exc.detail), headers=exc.headers)


def unhandled_error_response(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    settings = request.app.state.settings
    if settings.is_production:
        message = "Internal server error"
    else:
        message = str(exc) or exc.__class__.__name__
    return error_response(500, "INTERNAL_SERVER_ERROR", message)


async def catch_unhandled_errors(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    try:
        return await call_next(request)
    except Exception as exc:
        return unhandled_error_response(request, exc)


def install_error_handlers(app: FastAPI) -> None:
    """Register the error formatters.

    Must run before CORSMiddleware is added, so that CORS wraps the catch-all
    middleware and 500 responses carry the CORS headers too.
    """
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.middleware("http")(catch_unhandled_errors)

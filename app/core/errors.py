"""
Typed API errors and the JSON error envelope.

Every error response has the shape::

    {"error": {"code": "NOT_FOUND", "message": "Team not found", "status": 404}}
"""

from __future__ import annotations

from typing import Any, Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

log = structlog.get_logger()


class APIError(Exception):
    """Base class for failures surfaced by stores and the authorizer."""

    status_code = 500
    code = "INTERNAL_ERROR"
    message = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        code: Optional[str] = None,
        details: Optional[Any] = None,
    ):
        self.message = message or self.message
        self.code = code or self.code
        self.details = details
        super().__init__(self.message)


class ValidationFailed(APIError):
    status_code = 400
    code = "VALIDATION_ERROR"
    message = "Invalid request"


class Conflict(APIError):
    status_code = 400
    code = "CONFLICT"
    message = "Resource already exists"


class Unauthorized(APIError):
    status_code = 401
    code = "UNAUTHORIZED"
    message = "Authentication required"


class NotFound(APIError):
    status_code = 404
    code = "NOT_FOUND"
    message = "Resource not found"


class InternalError(APIError):
    pass


_HTTP_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    503: "SERVICE_UNAVAILABLE",
}


def error_body(status: int, code: str, message: str, details: Any = None) -> dict:
    body = {"code": code, "message": message, "status": status}
    if details is not None:
        body["details"] = details
    return {"error": body}


def _request_scope(request: Request) -> dict:
    auth = getattr(request.state, "auth", None)
    return {
        "method": request.method,
        "path": request.url.path,
        "org_id": getattr(auth, "org_id", None),
        "user_id": getattr(auth, "user_id", None),
    }


async def _api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    if exc.status_code >= 500:
        log.error("request.failed", code=exc.code, **_request_scope(request))
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, exc.code, exc.message, exc.details),
        headers=headers,
    )


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content=error_body(400, ValidationFailed.code, ValidationFailed.message, details),
    )


async def _http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    code = _HTTP_CODES.get(exc.status_code, "HTTP_ERROR")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, code, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception("request.unhandled_error", **_request_scope(request))
    return JSONResponse(
        status_code=500,
        content=error_body(500, InternalError.code, InternalError.message),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers that render every failure as the JSON envelope."""
    app.add_exception_handler(APIError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

"""
Error taxonomy and the single conversion path from exceptions to JSON responses.

Every error leaves the API as {"error": <message>, ...} with a status code:

- ValidationFailed      400  missing/malformed input
- Conflict              400  duplicate unique key
- AuthenticationFailed  401  bad credentials (intentionally vague)
- NotFound              404  well-formed id, no record
- UpstreamFailure       500  store or provider call failed
- ServiceUnavailable    503  optional integration not configured/reachable
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, **extra: Any):
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_dict(self) -> Dict[str, Any]:
        body = {"error": self.message}
        body.update({k: v for k, v in self.extra.items() if v is not None})
        return body


class ValidationFailed(APIError):
    status_code = status.HTTP_400_BAD_REQUEST


class Conflict(APIError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationFailed(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Invalid credentials", **extra: Any):
        super().__init__(message, **extra)


class NotFound(APIError):
    status_code = status.HTTP_404_NOT_FOUND


class UpstreamFailure(APIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class ServiceUnavailable(APIError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


def _field_name(loc) -> str:
    # Drop the "body"/"query"/"path" source marker
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "form")]
    return ".".join(parts) or "request"


def format_validation_errors(errors) -> str:
    messages = []
    for err in errors:
        field = _field_name(err.get("loc", ()))
        if err.get("type") == "missing":
            messages.append(f"{field} is required")
        else:
            messages.append(f"{field}: {err.get('msg')}")
    return "; ".join(messages)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_dict()))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    details = [
        {"field": _field_name(err.get("loc", ())), "message": err.get("msg")}
        for err in errors
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": format_validation_errors(errors), "details": details},
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Database error", "details": str(exc.__class__.__name__)},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

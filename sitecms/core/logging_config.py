"""
Logging setup for the API.

JSON lines (python-json-logger) when JSON_LOGS is on, a plain one-line
format otherwise. Every record emitted while a request is being handled
carries that request's id, and each request produces one access line.
"""

import logging
import sys
import time
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Iterable

from pythonjsonlogger import jsonlogger
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

QUIET_LOGGERS = ("urllib3", "boto3", "botocore", "s3transfer", "passlib", "multipart")

access_logger = logging.getLogger("sitecms.access")


class RequestIdFilter(logging.Filter):
    """Copies the current request id onto every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace('+00:00', 'Z')
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['request_id'] = getattr(record, 'request_id', '-')

        # Source location only matters when something went wrong
        if record.levelno >= logging.WARNING:
            log_record['location'] = f"{record.module}.{record.funcName}:{record.lineno}"


def setup_logging(log_level: str = "INFO", json_logs: bool = True, quiet: Iterable[str] = QUIET_LOGGERS) -> None:
    """
    Replace the root handlers with a single stdout handler.

    Args:
        log_level: Level name; unknown names fall back to INFO
        json_logs: JSON lines for production, readable lines for development
        quiet: Third-party loggers capped at WARNING
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())

    if json_logs:
        handler.setFormatter(CustomJsonFormatter('%(message)s'))
    else:
        handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)-7s [%(request_id)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root_logger.addHandler(handler)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an id and log one access line when it finishes.

    An incoming X-Request-ID header is reused so ids can be correlated with
    the frontend or a proxy; otherwise a fresh one is generated. The id is
    echoed back in the response header.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        token = request_id_var.set(request_id)
        started = time.perf_counter()

        try:
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            access_logger.info(
                f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms"
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            request_id_var.reset(token)

"""
Notes Backend - Access Log Middleware
=====================================

What:  One access-log line per HTTP request on the `notes.access` logger.
How:   create_app() passes the paths to skip (settings.access_log_skip_paths);
       every other request is timed and logged at a level chosen by
       `level_for_status`. Request bodies are never logged.
"""

import logging
import time
from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from notesapi.middleware.request_id import request_id_var

logger = logging.getLogger("notes.access")


def level_for_status(status: int) -> int:
    """ERROR for 5xx, WARNING for 4xx, INFO otherwise."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Logs `METHOD path status duration [request id]` for each request."""

    def __init__(self, app: ASGIApp, skip_paths: Iterable[str] = ()):
        super().__init__(app)
        self.skip_paths = frozenset(skip_paths)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.skip_paths:
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - start) * 1000, 2)

        logger.log(
            level_for_status(response.status_code),
            "%s %s %d %.1fms [%s]",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id_var.get(""),
            extra={"status": response.status_code, "duration_ms": elapsed_ms},
        )
        return response

"""Access log for the API.

One line per request, attributed to the session account when there is one.
Health checks log at DEBUG; requests slower than ``LOG_SLOW_REQUEST_MS``
log at WARNING, and server errors at ERROR.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Any

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from winning.core.constants import Routes
from winning.core.logging import env_bool

logger = logging.getLogger("winning.request")

DEFAULT_SLOW_REQUEST_MS = 2000.0
QUIET_PATHS = frozenset({Routes.HEALTH.prefix})


def session_account_id(request: Request) -> str | None:
    """Account id carried by the signed session cookie, if any.

    Reads the raw scope so the middleware also works on apps without
    SessionMiddleware.
    """
    session = request.scope.get("session")
    if not session:
        return None
    return session.get("account_id")


def access_level(
    path: str, status_code: int | None, duration_ms: float, slow_ms: float
) -> int:
    if status_code is None or status_code >= 500:
        return logging.ERROR
    if duration_ms >= slow_ms:
        return logging.WARNING
    if path in QUIET_PATHS:
        return logging.DEBUG
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: FastAPI, slow_ms: float = DEFAULT_SLOW_REQUEST_MS) -> None:
        super().__init__(app)
        self.slow_ms = slow_ms

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        status_code: int | None = None
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            self._log(request, status_code, (time.perf_counter() - started) * 1000.0)

    def _log(
        self, request: Request, status_code: int | None, duration_ms: float
    ) -> None:
        path = request.url.path
        extra: dict[str, Any] = {
            "method": request.method,
            "path": path,
            "query": request.url.query,
            "status_code": status_code,
            "duration_ms": round(duration_ms, 2),
            "client_ip": request.client.host if request.client else None,
            "user_agent": request.headers.get("user-agent"),
            "account_id": session_account_id(request),
        }
        logger.log(
            access_level(path, status_code, duration_ms, self.slow_ms),
            "%s %s -> %s (%.2fms)",
            request.method,
            path,
            status_code if status_code is not None else "no response",
            duration_ms,
            extra=extra,
        )


def add_request_logging_middleware(app: FastAPI) -> None:
    """Attach the access log unless LOG_REQUESTS is off.

    Must be added before the session middleware so the session is decoded
    by the time a request reaches it.
    """
    if not env_bool("LOG_REQUESTS", default=True):
        return
    slow_ms = float(os.getenv("LOG_SLOW_REQUEST_MS", DEFAULT_SLOW_REQUEST_MS))
    app.add_middleware(RequestLoggingMiddleware, slow_ms=slow_ms)

"""Request tracing for the detection service.

Callers (the import pipeline, the paste dialog) may send their own
X-Request-ID so a detection can be correlated with the entry it ends up
creating; otherwise one is generated. The health and metrics endpoints log
at DEBUG so liveness polling does not bury detection traffic.
"""

import re
import time
import uuid
from typing import Awaitable, Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
QUIET_PATHS = frozenset({"/health", "/metrics"})

_REQUEST_ID_RE = re.compile(r"[A-Za-z0-9._\-]{1,64}")


def resolve_request_id(incoming: str | None) -> str:
    """Reuse a caller's request ID if it is a safe token, else mint a UUID4."""
    if incoming and _REQUEST_ID_RE.fullmatch(incoming):
        return incoming
    return str(uuid.uuid4())


def content_length(request: Request) -> int | None:
    """Declared body size in bytes, or None when absent or malformed."""
    header = request.headers.get("content-length")
    if header is None or not header.isdigit():
        return None
    return int(header)


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """Bind a request ID and body size into the log context of each request.

    Requests slower than ``slow_request_ms`` are logged at WARNING, which is
    how oversized or pathological detection inputs show up in the logs.
    """

    def __init__(self, app: ASGIApp, slow_request_ms: float = 1000.0):
        super().__init__(app)
        self.slow_request_ms = slow_request_ms

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        path = request.url.path
        log = logger.debug if path in QUIET_PATHS else logger.info

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=path,
            content_length=content_length(request),
        )

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Request failed",
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise
        else:
            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
            if duration_ms > self.slow_request_ms:
                log = logger.warning
            log("Request served", status_code=response.status_code, duration_ms=duration_ms)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            structlog.contextvars.clear_contextvars()

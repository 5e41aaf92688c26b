"""
FastAPI middleware for observability.

Correlation ID and request logging middleware.

Dependencies: fastapi, starlette, lexoffice.observability
System role: Request/response observability injection
"""

import logging
import time
from collections.abc import Sequence

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from lexoffice.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per finished request.

    Health-check paths are skipped. Requests slower than slow_request_ms are logged
    at WARNING. Drafting responses carry the model that generated them; the
    streamed body may still be in flight when the line is written.
    """

    def __init__(
        self,
        app,
        slow_request_ms: float = 2000.0,
        unlogged_paths: Sequence[str] = (),
    ) -> None:
        super().__init__(app)
        self.slow_request_ms = slow_request_ms
        self.unlogged_paths = tuple(unlogged_paths)

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if path.startswith(self.unlogged_paths):
            return await call_next(request)

        method = request.method
        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} - unhandled {type(e).__name__}",
                extra={
                    "method": method,
                    "path": path,
                    "process_time_ms": round((time.perf_counter() - started) * 1000, 2),
                    "error_type": type(e).__name__,
                },
            )
            raise

        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        extra = {
            "method": method,
            "path": path,
            "status_code": response.status_code,
            "process_time_ms": elapsed_ms,
        }
        if "X-AI-Model" in response.headers:
            extra["ai_model"] = response.headers["X-AI-Model"]

        level = logging.WARNING if elapsed_ms >= self.slow_request_ms else logging.INFO
        logger.log(level, f"{method} {path} - {response.status_code} ({elapsed_ms} ms)", extra=extra)
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Read or create the correlation ID and echo it on the response."""

    def __init__(self, app, header_name: str = "X-Correlation-ID") -> None:
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get(self.header_name))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[self.header_name] = correlation_id
        return response

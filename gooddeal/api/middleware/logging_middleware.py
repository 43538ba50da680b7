"""
Request logging middleware.

One line per request on the way in and one on the way out, tagged with a
correlation id that is echoed back in the X-Correlation-ID header.
"""

import logging
import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
RESPONSE_TIME_HEADER = "X-Response-Time-Ms"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log method, path, status, duration and caller of every API request.

    Responses with status >= 400 are logged at WARNING.
    """

    EXCLUDE_PATHS: tuple[str, ...] = (
        "/health",
        "/static",
        "/favicon.ico",
    )

    def _should_log(self, path: str) -> bool:
        return not path.startswith(self.EXCLUDE_PATHS)

    @staticmethod
    def _correlation_id(request: Request) -> str:
        return request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex[:8]

    @staticmethod
    def _caller(request: Request) -> str:
        user_id = getattr(request.state, "user_id", None)
        if user_id is not None:
            return f"user {user_id}"
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[0].strip()
        return request.client.host if request.client else "unknown"

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        correlation_id = self._correlation_id(request)
        request.state.correlation_id = correlation_id

        if not self._should_log(request.url.path):
            response = await call_next(request)
            response.headers[CORRELATION_HEADER] = correlation_id
            return response

        start = time.perf_counter()
        logger.info(f"[{correlation_id}] --> {request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.error(
                f"[{correlation_id}] <-- {request.method} {request.url.path} ERROR in {duration_ms:.2f}ms: {e}"
            )
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            level,
            f"[{correlation_id}] <-- {request.method} {request.url.path} "
            f"{response.status_code} in {duration_ms:.2f}ms ({self._caller(request)})",
        )

        response.headers[CORRELATION_HEADER] = correlation_id
        response.headers[RESPONSE_TIME_HEADER] = f"{duration_ms:.2f}"
        return response

"""
Request Logging Middleware

Binds the request method and path to every log line emitted while the
request is handled, then logs one line with status and duration.
"""

import time
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from socialstream.shared.core.logging import clear_log_context, log_context, logger


def setup_request_logging(app: FastAPI) -> None:
    """Register the request logging middleware on app."""

    @app.middleware("http")
    async def log_requests(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        started = time.perf_counter()
        log_context(method=request.method, path=request.url.path)
        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            clear_log_context()

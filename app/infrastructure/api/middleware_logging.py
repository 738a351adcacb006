"""Request logging middleware: one line per request with status and duration.

Area-search routes store the job handle on ``request.state.job_handle``;
when present it is appended to the line so a search can be followed from
its 202 through every poll.
"""

import logging
import time
from typing import Callable

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

LINE_FORMAT = "client=%s method=%s path=%s status=%s duration_ms=%.2f"


def _context(request: Request) -> tuple[str, str, str]:
    client = request.client.host if request.client else "-"
    return client, request.method, request.url.path


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable):
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000.0
            logger.exception(LINE_FORMAT + " UNHANDLED", *_context(request), 500, duration_ms)
            raise

        duration_ms = (time.perf_counter() - start) * 1000.0
        handle = getattr(request.state, "job_handle", None)
        if handle is None:
            logger.info(LINE_FORMAT, *_context(request), response.status_code, duration_ms)
        else:
            logger.info(
                LINE_FORMAT + " job=%s",
                *_context(request), response.status_code, duration_ms, handle,
            )
        return response


def register_request_logging(app: FastAPI) -> None:
    app.add_middleware(RequestLogMiddleware)

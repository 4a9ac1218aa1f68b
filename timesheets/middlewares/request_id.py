from __future__ import annotations

import logging
import time
from contextvars import ContextVar
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

request_id_ctx_var: ContextVar[str | None] = ContextVar("request_id", default=None)
principal_ctx_var: ContextVar[str | None] = ContextVar("principal", default=None)
logger = logging.getLogger("timesheets.request")


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag every request with a correlation id and log how it went."""

    def __init__(self, app, header_name: str = "X-Request-ID") -> None:  # type: ignore[override]
        super().__init__(app)
        self.header_name = header_name

    def _log_completed(self, request: Request, status_code: int, duration_ms: float) -> None:
        # The auth dependency runs in another context, so it reports the
        # caller through request.state rather than the context var.
        principal_token = principal_ctx_var.set(getattr(request.state, "principal", None))
        try:
            logger.log(
                logging.ERROR if status_code >= 500 else logging.INFO,
                "request.completed",
                extra={
                    "extra_data": {
                        "method": request.method,
                        "path": request.url.path,
                        "status": status_code,
                        "duration_ms": round(duration_ms, 2),
                    }
                },
            )
        finally:
            principal_ctx_var.reset(principal_token)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(self.header_name) or uuid4().hex
        token = request_id_ctx_var.set(request_id)
        request.state.request_id = request_id
        request.state.principal = None
        start = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception:
                # The 500 body is rendered further out by Starlette; record the
                # failure here while the request id is still bound.
                self._log_completed(request, 500, (time.perf_counter() - start) * 1000)
                raise
            duration_ms = (time.perf_counter() - start) * 1000
            response.headers[self.header_name] = request_id
            response.headers.setdefault("X-Response-Time", f"{duration_ms:.2f}ms")
            self._log_completed(request, response.status_code, duration_ms)
            return response
        finally:
            request_id_ctx_var.reset(token)

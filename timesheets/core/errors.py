"""Domain exceptions and the handlers that turn them into ``{"error": ...}`` bodies."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("timesheets.errors")

INTERNAL_ERROR_MESSAGE = "Internal server error"


class TimesheetError(Exception):
    """Base class for failures the API reports to clients as-is."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(TimesheetError):
    status_code = status.HTTP_404_NOT_FOUND


class EntryValidationError(TimesheetError):
    """One or more entry fields failed validation.

    ``errors`` maps the camelCase field name to its message, the same shape
    the entry form shows inline. ``message`` is the first of them.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        first = next(iter(errors.values()), "Invalid entry")
        super().__init__(first)
        self.errors = dict(errors)


class ErrorEnvelope(JSONResponse):
    def __init__(
        self,
        *,
        status_code: int,
        message: str,
        details: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        payload: dict[str, Any] = {"error": message}
        if details is not None:
            payload["details"] = details
        super().__init__(payload, status_code=status_code, headers=headers)


async def timesheet_error_handler(request: Request, exc: TimesheetError):
    details = getattr(exc, "errors", None)
    return ErrorEnvelope(status_code=exc.status_code, message=exc.message, details=details)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    message = detail if isinstance(detail, str) and detail else "Error"
    return ErrorEnvelope(status_code=exc.status_code, message=message, headers=getattr(exc, "headers", None))


def _describe(error: dict[str, Any]) -> str:
    location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    message = str(error.get("msg") or "Invalid request")
    return f"{'.'.join(location)}: {message}" if location else message


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = _describe(errors[0]) if errors else "Invalid request"
    return ErrorEnvelope(status_code=status.HTTP_400_BAD_REQUEST, message=message)


async def unexpected_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "request.failed",
        extra={"extra_data": {"method": request.method, "path": request.url.path}},
    )
    request_id = getattr(request.state, "request_id", None)
    headers = {"X-Request-ID": request_id} if request_id else None
    return ErrorEnvelope(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message=INTERNAL_ERROR_MESSAGE,
        headers=headers,
    )

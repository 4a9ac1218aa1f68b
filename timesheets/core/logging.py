from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Mapping

from ..middlewares import principal_ctx_var, request_id_ctx_var

# Keys owned by the formatter; ``extra_data`` may not overwrite them.
RESERVED_KEYS = frozenset({"timestamp", "level", "logger", "message", "request_id", "principal", "exception"})


class JsonLogFormatter(logging.Formatter):
    """One JSON object per line, tagged with the request in flight.

    ``static_fields`` (service name, environment) are stamped on every line.
    """

    def __init__(self, static_fields: Mapping[str, Any] | None = None) -> None:
        super().__init__()
        self.static_fields = dict(static_fields or {})

    @staticmethod
    def _timestamp(record: logging.LogRecord) -> str:
        moment = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = dict(self.static_fields)
        payload.update(
            timestamp=self._timestamp(record),
            level=record.levelname,
            logger=record.name,
            message=record.getMessage(),
        )
        for key, value in (("request_id", request_id_ctx_var.get()), ("principal", principal_ctx_var.get())):
            if value:
                payload[key] = value
        extra = getattr(record, "extra_data", None)
        if isinstance(extra, Mapping):
            payload.update({key: value for key, value in extra.items() if key not in RESERVED_KEYS})
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, separators=(",", ":"), default=str)


def configure_logging(level: str | int = logging.INFO, *, service: str | None = None, env: str | None = None) -> None:
    static_fields = {key: value for key, value in (("service", service), ("env", env)) if value}
    handler = logging.StreamHandler()
    handler.setFormatter(JsonLogFormatter(static_fields))
    logging.root.handlers = [handler]
    logging.root.setLevel(level)
    # uvicorn installs its own handlers; route its access/error logs through ours.
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = []
        uvicorn_logger.propagate = True

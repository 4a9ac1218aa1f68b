"""Production entrypoint: ``uvicorn timesheets.main:app``."""

from __future__ import annotations

import uvicorn
from prometheus_fastapi_instrumentator import Instrumentator

from timesheets import create_app
from timesheets.core.config import settings
from timesheets.core.logging import configure_logging

configure_logging(settings.LOG_LEVEL, service=settings.APP_NAME, env=settings.APP_ENV)
app = create_app(settings)
instrumentator = Instrumentator(excluded_handlers=["/health", "/metrics"])
instrumentator.instrument(app).expose(app, include_in_schema=False)


def run() -> None:
    uvicorn.run("timesheets.main:app", host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()

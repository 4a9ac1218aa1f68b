"""Application factory and top-level wiring for the Timesheets API.

``create_app`` assembles configuration, the in-memory store, the credential
verifier, middleware, routers and error handlers. Each call builds an
independent application, so tests can run side by side with their own data.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from .core.config import AppSettings, get_settings
from .core.errors import (
    TimesheetError,
    http_exception_handler,
    timesheet_error_handler,
    unexpected_exception_handler,
    validation_exception_handler,
)
from .core.security import CredentialVerifier, DirectoryVerifier
from .data.seed import SEED_USERS
from .db.store import EntryStore
from .middlewares import RequestIdMiddleware, SecurityHeadersMiddleware
from .routers import api_auth, api_catalog, api_timesheets


def build_verifier(settings: AppSettings) -> DirectoryVerifier:
    return DirectoryVerifier(
        SEED_USERS,
        shared_password=settings.SHARED_PASSWORD,
        password_hash=settings.SHARED_PASSWORD_HASH,
    )


def create_app(
    settings: AppSettings | None = None,
    *,
    store: EntryStore | None = None,
    verifier: CredentialVerifier | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=settings.APP_NAME)

    app.state.settings = settings
    app.state.store = store if store is not None else EntryStore()
    app.state.verifier = verifier if verifier is not None else build_verifier(settings)

    # Middleware added last runs first: request ids wrap everything else.
    if settings.SECURITY_HEADERS:
        app.add_middleware(SecurityHeadersMiddleware, hsts=settings.SESSION_HTTPS_ONLY)
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.APP_SECRET,
        session_cookie=settings.SESSION_COOKIE_NAME,
        max_age=settings.SESSION_MAX_AGE,
        same_site="lax",
        https_only=settings.SESSION_HTTPS_ONLY,
    )
    if settings.ALLOWED_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.ALLOWED_ORIGINS,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE"],
            allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        )
    app.add_middleware(RequestIdMiddleware)

    app.include_router(api_auth.router)
    app.include_router(api_catalog.router)
    app.include_router(api_timesheets.router)

    app.add_exception_handler(TimesheetError, timesheet_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)

    @app.get("/health", tags=["meta"])
    async def health() -> dict[str, bool]:
        return {"ok": True}

    return app


__all__ = ["create_app", "build_verifier"]

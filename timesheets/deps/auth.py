from __future__ import annotations

from fastapi import Header, HTTPException, Request, status
from fastapi.security.utils import get_authorization_scheme_param

from ..core.config import AppSettings
from ..core.security import CredentialVerifier, decode_access_token
from ..middlewares import principal_ctx_var
from ..models.user import User

SESSION_USER_KEY = "user_id"


def get_settings_dep(request: Request) -> AppSettings:
    return request.app.state.settings


def get_verifier(request: Request) -> CredentialVerifier:
    return request.app.state.verifier


def _unauthorized(detail: str = "Unauthorized") -> None:
    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


def _set_principal(request: Request, user: User) -> None:
    principal_ctx_var.set(user.email)
    request.state.principal = user.email
    request.state.user = user


def session_user(request: Request) -> User | None:
    """User remembered in the signed session cookie, if any."""

    user_id = request.session.get(SESSION_USER_KEY)
    if not user_id:
        return None
    return get_verifier(request).get_user(str(user_id))


async def require_user(
    request: Request,
    authorization: str | None = Header(default=None, alias="Authorization"),
) -> User:
    """Session gate: a cookie session or a bearer token, otherwise 401."""

    user = session_user(request)
    if user is not None:
        _set_principal(request, user)
        return user

    if authorization:
        scheme, credentials = get_authorization_scheme_param(authorization)
        if scheme.lower() == "bearer" and credentials:
            settings = get_settings_dep(request)
            try:
                payload = decode_access_token(credentials, secret=settings.JWT_SECRET)
            except ValueError as exc:
                raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc
            user = get_verifier(request).get_user(payload.sub)
            if user is not None:
                _set_principal(request, user)
                return user

    _unauthorized()

from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status

from ..core.config import AppSettings
from ..core.security import CredentialVerifier, issue_access_token
from ..deps.auth import SESSION_USER_KEY, get_settings_dep, get_verifier, require_user
from ..models.user import User
from ..schemas.auth import LoginData, LoginRequest, LoginResponse, SessionData, SessionResponse
from ..schemas.entry import MessageResponse

router = APIRouter(prefix="/api", tags=["auth"])
logger = logging.getLogger("timesheets.auth")


@router.post("/login", response_model=LoginResponse, summary="Sign in with email and password")
def api_login(
    request: Request,
    payload: LoginRequest | None = Body(default=None),
    verifier: CredentialVerifier = Depends(get_verifier),
    settings: AppSettings = Depends(get_settings_dep),
):
    payload = payload or LoginRequest()
    if not payload.email or not payload.password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email and password are required")
    user = verifier.verify(payload.email, payload.password)
    if user is None:
        logger.warning("login.failed", extra={"extra_data": {"email": payload.email}})
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")
    request.session[SESSION_USER_KEY] = user.id
    request.state.principal = user.email
    token, expires_in = issue_access_token(
        user,
        secret=settings.JWT_SECRET,
        ttl_minutes=settings.JWT_ACCESS_TTL_MIN,
    )
    logger.info("login.succeeded", extra={"extra_data": {"user_id": user.id}})
    return LoginResponse(data=LoginData(user=user, token=token, expires_in=expires_in))


@router.post("/logout", response_model=MessageResponse)
def api_logout(request: Request):
    request.session.clear()
    return MessageResponse(message="Logged out")


@router.get("/session", response_model=SessionResponse)
def api_session(user: User = Depends(require_user)):
    return SessionResponse(data=SessionData(user=user))

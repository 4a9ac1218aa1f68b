"""Credential checks and access tokens for the session gate."""

from __future__ import annotations

import hmac
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, Mapping, Protocol

import bcrypt
from jose import JWTError, jwt
from pydantic import BaseModel, ValidationError

from ..models.user import User

ALGORITHM = "HS256"
AUDIENCE = "timesheets-clients"
ISSUER = "timesheets"

logger = logging.getLogger("timesheets.security")


class CredentialVerifier(Protocol):
    """Anything that can turn an email/password pair into a user."""

    def verify(self, email: str, password: str) -> User | None: ...

    def get_user(self, user_id: str) -> User | None: ...


class DirectoryVerifier:
    """Checks logins against a fixed user directory sharing one password.

    When ``password_hash`` (bcrypt) is set it wins over the plain password.
    """

    def __init__(
        self,
        users: Iterable[Mapping[str, Any] | User],
        *,
        shared_password: str = "",
        password_hash: str = "",
    ) -> None:
        directory = [User.model_validate(user) for user in users]
        self._by_email = {user.email: user for user in directory}
        self._by_id = {user.id: user for user in directory}
        self._shared_password = shared_password
        self._password_hash = (password_hash or "").strip()

    def _password_matches(self, password: str) -> bool:
        if self._password_hash:
            try:
                return bcrypt.checkpw(password.encode("utf-8"), self._password_hash.encode("utf-8"))
            except ValueError:
                logger.error("security.bad_password_hash")
                return False
        if not self._shared_password:
            return False
        return hmac.compare_digest(password.encode("utf-8"), self._shared_password.encode("utf-8"))

    def verify(self, email: str, password: str) -> User | None:
        user = self._by_email.get(email or "")
        # Always run the password check so unknown emails cost the same time.
        password_ok = self._password_matches(password or "")
        if user is None or not password_ok:
            return None
        return user

    def get_user(self, user_id: str) -> User | None:
        return self._by_id.get(user_id)


class TokenPayload(BaseModel):
    sub: str
    exp: datetime
    iat: datetime
    aud: str
    iss: str
    email: str | None = None


def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


def issue_access_token(user: User, *, secret: str, ttl_minutes: int) -> tuple[str, int]:
    """Sign a bearer token for ``user``. Returns ``(token, expires_in_seconds)``."""

    now = _now()
    expires_delta = timedelta(minutes=ttl_minutes)
    payload: dict[str, Any] = {
        "sub": user.id,
        "email": user.email,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
        "aud": AUDIENCE,
        "iss": ISSUER,
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM), int(expires_delta.total_seconds())


def decode_access_token(token: str, *, secret: str) -> TokenPayload:
    try:
        decoded = jwt.decode(token, secret, algorithms=[ALGORITHM], audience=AUDIENCE, issuer=ISSUER)
    except JWTError as exc:
        raise ValueError("Invalid token") from exc
    try:
        return TokenPayload.model_validate(decoded)
    except ValidationError as exc:
        raise ValueError("Invalid token payload") from exc

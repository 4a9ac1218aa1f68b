from __future__ import annotations

from typing import Optional

from ..models.base import CamelModel
from ..models.user import User


class LoginRequest(CamelModel):
    # Optional (and the body itself may be absent) so a missing field gets the
    # login-specific 400 message.
    email: Optional[str] = None
    password: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "example": {"email": "saqib@example.com", "password": "password123"}
        }
    }


class LoginData(CamelModel):
    user: User
    token: str
    token_type: str = "bearer"
    expires_in: int


class LoginResponse(CamelModel):
    data: LoginData


class SessionData(CamelModel):
    user: User


class SessionResponse(CamelModel):
    data: SessionData

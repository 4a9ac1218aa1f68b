"""Directory users. Read-only at runtime: login only looks them up."""

from __future__ import annotations

from pydantic import ConfigDict

from .base import CamelModel


class User(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    name: str


__all__ = ["User"]

"""Shared pydantic configuration for the domain records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Python attributes in snake_case, JSON keys in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

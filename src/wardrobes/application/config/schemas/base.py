"""Shared base model for wardrobe configuration schemas.

Configuration documents come from a browser configurator and use
camelCase keys. Every schema accepts both the camelCase alias and the
snake_case field name, and rejects unknown keys.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ConfigModel(BaseModel):
    """Base for all configuration schemas."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


def coerce_optional_id(value: Any) -> Any:
    """Accept numeric identifiers where a string identifier is expected."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    return value

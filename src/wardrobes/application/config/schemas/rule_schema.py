"""Pricing rule schema.

Condition fields are checked against the rule field registry when a rule
is loaded, so a misspelled field is rejected up front. Operators and
action types are stored as given; the engine ignores ones it does not
know, with a warning.
"""

from datetime import datetime
from typing import Any

from pydantic import Field, FiniteFloat, field_validator

from wardrobes.domain.rules import ApplyTo, LogicOperator, validate_field

from .base import ConfigModel, coerce_optional_id


class RuleConditionSchema(ConfigModel):
    id: str | None = None
    field: str = Field(..., description="Field identifier, e.g. wardrobe.height")
    operator: str = Field(..., min_length=1)
    value: Any = None
    logic_operator: LogicOperator = LogicOperator.AND

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> object:
        return coerce_optional_id(v)

    @field_validator("field")
    @classmethod
    def validate_known_field(cls, v: str) -> str:
        validate_field(v)
        return v


class RuleActionConfigSchema(ConfigModel):
    item_name: str | None = None
    item_sku: str | None = None
    item_price: FiniteFloat | None = Field(default=None, ge=0)
    quantity: FiniteFloat | str | None = None
    visible_to_customer: bool | None = None
    value: FiniteFloat | None = None
    apply_to: ApplyTo | None = None
    reason: str | None = None


class RuleActionSchema(ConfigModel):
    id: str | None = None
    type: str = Field(..., min_length=1)
    config: RuleActionConfigSchema = Field(default_factory=RuleActionConfigSchema)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> object:
        return coerce_optional_id(v)


class RuleSchema(ConfigModel):
    """One pricing rule; lower priority runs first."""

    id: str
    name: str = Field(..., min_length=1)
    description: str | None = None
    enabled: bool = True
    priority: int = 0
    conditions: list[RuleConditionSchema] = Field(default_factory=list)
    actions: list[RuleActionSchema] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> object:
        return coerce_optional_id(v)


class RuleSetSchema(ConfigModel):
    rules: list[RuleSchema] = Field(default_factory=list)

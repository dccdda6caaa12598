"""Pydantic schemas for wardrobe, catalog and rule documents."""

from .base import ConfigModel
from .catalog_schema import (
    CatalogSchema,
    HandleFinishSchema,
    HandleSchema,
    MaterialSchema,
)
from .rule_schema import (
    RuleActionConfigSchema,
    RuleActionSchema,
    RuleConditionSchema,
    RuleSchema,
    RuleSetSchema,
)
from .wardrobe_schema import (
    CompartmentExtrasSchema,
    DoorGroupSchema,
    WardrobeConfigSchema,
)

__all__ = [
    "CatalogSchema",
    "CompartmentExtrasSchema",
    "ConfigModel",
    "DoorGroupSchema",
    "HandleFinishSchema",
    "HandleSchema",
    "MaterialSchema",
    "RuleActionConfigSchema",
    "RuleActionSchema",
    "RuleConditionSchema",
    "RuleSchema",
    "RuleSetSchema",
    "WardrobeConfigSchema",
]

"""Configuration schema and loading for wardrobe pricing inputs.

This package provides JSON-based loading and validation of the three
documents the engine works from, and adapters that turn them into domain
objects.

Public API:
    - WardrobeConfigSchema: Root wardrobe configuration model
    - CatalogSchema: Material and handle catalog model
    - RuleSetSchema: Pricing rule set model
    - load_wardrobe / load_catalog / load_rules: Load from JSON files
    - load_*_from_dict: Validate already-parsed data
    - ConfigError: Exception for configuration errors
    - validate_rules: Advisory checks for loaded rule sets
    - config_to_wardrobe / config_to_catalog / config_to_rules: Schema to domain

Example:
    >>> from pathlib import Path
    >>> from wardrobes.application.config import load_wardrobe, ConfigError
    >>>
    >>> try:
    ...     config = load_wardrobe(Path("wardrobe.json"))
    ...     print(f"Wardrobe: {config.width}x{config.height}x{config.depth} cm")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from wardrobes.application.config.adapter import (
    config_to_catalog,
    config_to_rules,
    config_to_wardrobe,
    rule_to_domain,
)
from wardrobes.application.config.loader import (
    ConfigError,
    load_catalog,
    load_catalog_from_dict,
    load_rules,
    load_rules_from_dict,
    load_wardrobe,
    load_wardrobe_from_dict,
)
from wardrobes.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_rules,
)
from wardrobes.application.config.schemas import (
    CatalogSchema,
    CompartmentExtrasSchema,
    DoorGroupSchema,
    HandleFinishSchema,
    HandleSchema,
    MaterialSchema,
    RuleActionConfigSchema,
    RuleActionSchema,
    RuleConditionSchema,
    RuleSchema,
    RuleSetSchema,
    WardrobeConfigSchema,
)

__all__ = [
    "CatalogSchema",
    "CompartmentExtrasSchema",
    "ConfigError",
    "DoorGroupSchema",
    "HandleFinishSchema",
    "HandleSchema",
    "MaterialSchema",
    "RuleActionConfigSchema",
    "RuleActionSchema",
    "RuleConditionSchema",
    "RuleSchema",
    "RuleSetSchema",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "WardrobeConfigSchema",
    "config_to_catalog",
    "config_to_rules",
    "config_to_wardrobe",
    "load_catalog",
    "load_catalog_from_dict",
    "load_rules",
    "load_rules_from_dict",
    "load_wardrobe",
    "load_wardrobe_from_dict",
    "rule_to_domain",
    "validate_rules",
]

"""Configuration file loader with comprehensive error handling.

This module loads the three JSON documents the engine works from: a
wardrobe configuration, a material/handle catalog, and a pricing rule set.
File system errors, JSON parsing errors, and Pydantic validation errors are
all reported as ConfigError with clear, actionable messages.
"""

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from wardrobes.application.config.schemas import (
    CatalogSchema,
    RuleSetSchema,
    WardrobeConfigSchema,
)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message for display."""
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("doorGroups", 0, "compartments"))
        'doorGroups[0].compartments'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """List path, message, value and error_type for each validation problem."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(
    details: list[dict[str, Any]], what: str = "Configuration"
) -> str:
    lines = [f"{what} validation failed:"]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def _read_json(path: Path) -> Any:
    """Read and parse a JSON file, raising ConfigError on any failure."""
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )


def _validate(
    schema: type[SchemaT], data: Any, what: str, path: Path | None = None
) -> SchemaT:
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details, what),
            error_type="validation",
            path=path,
            details=details,
        )


def _as_rule_set(data: Any) -> Any:
    """Rule files may hold a bare list of rules."""
    if isinstance(data, list):
        return {"rules": data}
    return data


def load_wardrobe(path: Path) -> WardrobeConfigSchema:
    """Load and validate a wardrobe configuration from a JSON file.

    Raises:
        ConfigError: If the file cannot be loaded or validated. The
            error_type attribute indicates the specific error category.
    """
    return _validate(WardrobeConfigSchema, _read_json(path), "Wardrobe", path)


def load_wardrobe_from_dict(data: dict[str, Any]) -> WardrobeConfigSchema:
    """Validate a wardrobe configuration given as a dictionary."""
    return _validate(WardrobeConfigSchema, data, "Wardrobe")


def load_catalog(path: Path) -> CatalogSchema:
    """Load and validate a material/handle catalog from a JSON file."""
    return _validate(CatalogSchema, _read_json(path), "Catalog", path)


def load_catalog_from_dict(data: dict[str, Any]) -> CatalogSchema:
    return _validate(CatalogSchema, data, "Catalog")


def load_rules(path: Path) -> RuleSetSchema:
    """Load and validate pricing rules from a JSON file.

    The file may contain ``{"rules": [...]}`` or a bare list of rules.
    """
    return _validate(RuleSetSchema, _as_rule_set(_read_json(path)), "Rules", path)


def load_rules_from_dict(data: dict[str, Any] | list[Any]) -> RuleSetSchema:
    return _validate(RuleSetSchema, _as_rule_set(data), "Rules")

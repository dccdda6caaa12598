"""Validate command for checking pricing rule files.

This module provides the `validate-rules` command that checks a JSON rule
file for errors and warns about rules the engine will skip.
"""

from pathlib import Path
from typing import Annotated

import typer

from wardrobes.application.config import (
    ConfigError,
    ValidationResult,
    load_rules,
    validate_rules,
)


def validate_rules_command(
    rules_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON rule file to validate"),
    ],
) -> None:
    """Validate a pricing rule file.

    Checks the rule file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, unknown condition fields)
    - Rules that load but will be skipped (unknown operators or actions)

    Exit codes:
        0 - Rules are valid with no warnings
        1 - Rules have errors (cannot be used)
        2 - Rules are valid but have warnings

    Example:
        wardrobes validate-rules pricing-rules.json
    """
    typer.echo(f"Validating {rules_file}...")
    typer.echo()

    try:
        rule_set = load_rules(rules_file)
    except ConfigError as e:
        display_load_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    result = validate_rules(rule_set)
    _display_validation_result(result, len(rule_set.rules))
    raise typer.Exit(code=result.exit_code)


def display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo(f"  Invalid JSON syntax in {error.path}", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def _display_validation_result(result: ValidationResult, rule_count: int) -> None:
    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo(f"Validation passed. {rule_count} rule(s) are valid.")

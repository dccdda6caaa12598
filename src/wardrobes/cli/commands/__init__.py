"""CLI command implementations for the wardrobes application.

This package contains subcommands for the wardrobes CLI, including:
- validate-rules: Validate a pricing rule file
"""

from wardrobes.cli.commands.validate import display_load_error, validate_rules_command

__all__ = ["display_load_error", "validate_rules_command"]

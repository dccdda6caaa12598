"""Validation structures and advisory checks for pricing rule sets.

Schema validation (unknown condition fields, malformed values) happens in
the loader. The checks here cover rules that load fine but will not
behave as their author probably expects.
"""

from dataclasses import dataclass, field
from typing import Any

from wardrobes.application.config.schemas import RuleSetSchema
from wardrobes.domain.rules import ActionType, Operator

_KNOWN_OPERATORS = frozenset(op.value for op in Operator)
_KNOWN_ACTIONS = frozenset(action.value for action in ActionType)
_PERCENTAGE_ACTIONS = frozenset(
    {ActionType.DISCOUNT_PERCENTAGE.value, ActionType.SURCHARGE_PERCENTAGE.value}
)


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "rules[0].conditions[1]")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def validate_rules(rule_set: RuleSetSchema) -> ValidationResult:
    """Check a loaded rule set for rules that will be skipped or misfire.

    Warnings:
    - Operators the engine does not know (the condition never matches)
    - Action types the engine does not know (the action is skipped)
    - Rules without actions
    - Non-positive discount/surcharge values (the action is skipped)
    - Percentage discounts above 100%
    - Duplicate rule ids
    """
    result = ValidationResult()

    seen: set[str] = set()
    for i, rule in enumerate(rule_set.rules):
        rule_path = f"rules[{i}]"
        if rule.id in seen:
            result.add_warning(rule_path, f"Duplicate rule id {rule.id!r}")
        seen.add(rule.id)

        for j, condition in enumerate(rule.conditions):
            if condition.operator not in _KNOWN_OPERATORS:
                result.add_warning(
                    f"{rule_path}.conditions[{j}].operator",
                    f"Unknown operator {condition.operator!r}; condition never matches",
                    suggestion=f"Use one of: {', '.join(sorted(_KNOWN_OPERATORS))}",
                )

        if not rule.actions:
            result.add_warning(rule_path, f"Rule {rule.name!r} has no actions")

        for j, action in enumerate(rule.actions):
            action_path = f"{rule_path}.actions[{j}]"
            if action.type not in _KNOWN_ACTIONS:
                result.add_warning(
                    f"{action_path}.type",
                    f"Unknown action type {action.type!r}; action is skipped",
                )
                continue
            if action.type == ActionType.ADD_ITEM.value:
                continue
            value = action.config.value
            if value is None or value <= 0:
                result.add_warning(
                    f"{action_path}.config.value",
                    f"Value {value!r} is not positive; action is skipped",
                )
            elif (
                action.type == ActionType.DISCOUNT_PERCENTAGE.value and value > 100
            ):
                result.add_warning(
                    f"{action_path}.config.value",
                    f"Discount of {value}% exceeds 100%; the price is floored at zero",
                )
            if action.type in _PERCENTAGE_ACTIONS and action.config.apply_to not in (
                None,
                "total",
            ):
                result.add_warning(
                    f"{action_path}.config.applyTo",
                    "applyTo is recorded but percentages always use the running total",
                )

    return result

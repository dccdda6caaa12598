"""Pricing rule definitions and the adjustments they produce."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .fields import FieldId

__all__ = [
    "ActionType",
    "ApplyTo",
    "LogicOperator",
    "Operator",
    "Rule",
    "RuleAction",
    "RuleActionConfig",
    "RuleAdjustment",
    "RuleCondition",
]


class Operator(str, Enum):
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    CONTAINS = "contains"
    NOT_CONTAINS = "not_contains"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    GREATER_EQUAL = "greater_equal"
    LESS_EQUAL = "less_equal"
    IN = "in"
    NOT_IN = "not_in"
    IS_EMPTY = "is_empty"
    IS_NOT_EMPTY = "is_not_empty"


class LogicOperator(str, Enum):
    AND = "AND"
    OR = "OR"


class ActionType(str, Enum):
    ADD_ITEM = "add_item"
    DISCOUNT_PERCENTAGE = "discount_percentage"
    DISCOUNT_FIXED = "discount_fixed"
    SURCHARGE_PERCENTAGE = "surcharge_percentage"
    SURCHARGE_FIXED = "surcharge_fixed"


class ApplyTo(str, Enum):
    """Price component an action targets.

    Stored with the rule but not used for calculation: percentage actions
    always work on the running total.
    """

    TOTAL = "total"
    KORPUS = "korpus"
    FRONT = "front"
    BACK = "back"
    HANDLES = "handles"


@dataclass(frozen=True)
class RuleCondition:
    """One predicate of a rule.

    ``operator`` is kept as given so that rules stored with an operator this
    version does not know still load; such a condition never matches.
    ``logic_operator`` combines this condition with the next one.
    """

    field: FieldId
    operator: str
    value: Any = None
    logic_operator: LogicOperator = LogicOperator.AND
    id: str | None = None


@dataclass(frozen=True)
class RuleActionConfig:
    """Parameters of an action.

    ``item_*``, ``quantity`` and ``visible_to_customer`` apply to added
    items; ``value``, ``apply_to`` and ``reason`` to discounts and
    surcharges. ``visible_to_customer`` may also hide a discount or
    surcharge from the customer receipt.
    """

    item_name: str | None = None
    item_sku: str | None = None
    item_price: float | None = None
    quantity: float | str | None = None
    visible_to_customer: bool | None = None
    value: float | None = None
    apply_to: ApplyTo | None = None
    reason: str | None = None


@dataclass(frozen=True)
class RuleAction:
    type: str
    config: RuleActionConfig = field(default_factory=RuleActionConfig)
    id: str | None = None


@dataclass(frozen=True)
class Rule:
    """A prioritized pricing policy; lower priority runs first."""

    id: str
    name: str
    enabled: bool = True
    priority: int = 0
    conditions: tuple[RuleCondition, ...] = ()
    actions: tuple[RuleAction, ...] = ()
    created_at: datetime | None = None
    description: str | None = None


@dataclass(frozen=True)
class RuleAdjustment:
    """A signed price delta; negative amounts are discounts."""

    rule_id: str
    rule_name: str
    action_type: ActionType
    description: str
    amount: float
    visible: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "ruleId": self.rule_id,
            "ruleName": self.rule_name,
            "actionType": self.action_type.value,
            "description": self.description,
            "amount": self.amount,
            "visible": self.visible,
        }

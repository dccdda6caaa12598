"""Rule engine: evaluates pricing rules and produces price adjustments.

Rules run in priority order over a single running total. Every produced
adjustment is added to the running total before the next action runs, so
a percentage action always works on the price as already adjusted by the
rules before it.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from ..constants import CURRENCY
from ..numbers import round_half_up
from .context import RuleContext
from .fields import evaluate_formula, resolve_field
from .models import (
    ActionType,
    LogicOperator,
    Operator,
    Rule,
    RuleAction,
    RuleAdjustment,
    RuleCondition,
)
from .operators import evaluate_operator

logger = logging.getLogger(__name__)

_PERCENTAGE_ACTIONS = (
    ActionType.DISCOUNT_PERCENTAGE,
    ActionType.SURCHARGE_PERCENTAGE,
)

__all__ = [
    "PriceAdjustmentResult",
    "apply_rules",
    "calculate_final_price",
    "evaluate_conditions",
    "evaluate_pricing",
    "execute_action",
    "get_hidden_adjustments",
    "get_visible_adjustments",
    "order_rules",
]


def _fmt(amount: float) -> str:
    if float(amount).is_integer():
        return f"{int(amount):,}"
    return f"{amount:,.2f}"


def order_rules(rules: Iterable[Rule]) -> list[Rule]:
    """Enabled rules by ascending priority, ties by creation time then input order."""

    def key(rule: Rule) -> tuple[int, bool, float]:
        created = rule.created_at.timestamp() if rule.created_at else 0.0
        return (rule.priority, rule.created_at is None, created)

    return sorted((r for r in rules if r.enabled), key=key)


_KNOWN_OPERATORS = frozenset(op.value for op in Operator)


def _evaluate_condition(condition: RuleCondition, context: RuleContext) -> bool:
    value = resolve_field(context, condition.field)
    if (
        value is None
        and condition.operator in _KNOWN_OPERATORS
        and condition.operator != Operator.IS_EMPTY.value
    ):
        return False
    return evaluate_operator(value, condition.operator, condition.value)


def evaluate_conditions(
    conditions: Sequence[RuleCondition], context: RuleContext
) -> bool:
    """Fold conditions left to right.

    The logic operator of each condition joins it with the next one. An
    empty list always matches.
    """
    if not conditions:
        return True

    result = _evaluate_condition(conditions[0], context)
    for previous, current in zip(conditions, conditions[1:]):
        current_result = _evaluate_condition(current, context)
        if previous.logic_operator is LogicOperator.OR:
            result = result or current_result
        else:
            result = result and current_result
    return result


def execute_action(
    action: RuleAction, rule: Rule, context: RuleContext, running_total: float
) -> RuleAdjustment | None:
    """Turn one action into an adjustment, or None if it contributes nothing."""
    try:
        action_type = ActionType(action.type)
    except ValueError:
        logger.warning(f"Unknown action type {action.type!r} in rule {rule.id}")
        return None

    config = action.config

    def adjustment(description: str, amount: float, visible: bool) -> RuleAdjustment:
        return RuleAdjustment(
            rule_id=rule.id,
            rule_name=rule.name,
            action_type=action_type,
            description=description,
            amount=amount,
            visible=visible,
        )

    if action_type is ActionType.ADD_ITEM:
        quantity = evaluate_formula(
            config.quantity if config.quantity is not None else 1, context.wardrobe
        )
        if quantity is None or quantity <= 0:
            logger.debug(f"Rule {rule.id}: add_item skipped, quantity {quantity}")
            return None
        total = quantity * (config.item_price or 0)
        if not math.isfinite(total):
            logger.warning(
                f"Rule {rule.id}: add_item skipped, amount {total} is not finite"
            )
            return None
        name = config.item_name or "Item"
        return adjustment(
            f"{name} × {_fmt(quantity)} ({_fmt(total)} {CURRENCY})",
            total,
            bool(config.visible_to_customer),
        )

    value = config.value or 0
    if not math.isfinite(value):
        logger.warning(
            f"Rule {rule.id}: {action_type.value} skipped, value {value} is not finite"
        )
        return None
    if value <= 0:
        return None
    visible = config.visible_to_customer is not False

    if action_type in _PERCENTAGE_ACTIONS:
        raw = running_total * value / 100
        if not math.isfinite(raw):
            logger.warning(
                f"Rule {rule.id}: {action_type.value} of {value}% overflows, skipped"
            )
            return None
        amount = round_half_up(raw)

    if action_type is ActionType.DISCOUNT_PERCENTAGE:
        return adjustment(
            config.reason or f"Discount {_fmt(value)}% (-{_fmt(amount)} {CURRENCY})",
            -amount,
            visible,
        )
    if action_type is ActionType.SURCHARGE_PERCENTAGE:
        return adjustment(
            config.reason or f"Surcharge {_fmt(value)}% (+{_fmt(amount)} {CURRENCY})",
            amount,
            visible,
        )
    if action_type is ActionType.DISCOUNT_FIXED:
        return adjustment(
            config.reason or f"Discount (-{_fmt(value)} {CURRENCY})", -value, visible
        )
    return adjustment(
        config.reason or f"Surcharge (+{_fmt(value)} {CURRENCY})", value, visible
    )


def apply_rules(
    rules: Sequence[Rule], context: RuleContext, base_total: float
) -> list[RuleAdjustment]:
    """Apply rules in the given order and collect their adjustments.

    Disabled rules are skipped. Callers pass rules already ordered with
    ``order_rules``.
    """
    adjustments: list[RuleAdjustment] = []
    running_total = base_total

    for rule in rules:
        if not rule.enabled:
            continue
        if not evaluate_conditions(rule.conditions, context):
            continue
        logger.debug(f"Rule {rule.id} ({rule.name}) matched")
        for action in rule.actions:
            result = execute_action(action, rule, context, running_total)
            if result is not None:
                adjustments.append(result)
                running_total += result.amount

    return adjustments


def calculate_final_price(
    base_total: float, adjustments: Iterable[RuleAdjustment]
) -> float:
    """Base total plus all adjustments, never below zero."""
    return max(0.0, base_total + sum(a.amount for a in adjustments))


def get_visible_adjustments(adjustments: Iterable[RuleAdjustment]) -> list[RuleAdjustment]:
    """Adjustments shown on the customer receipt."""
    return [a for a in adjustments if a.visible]


def get_hidden_adjustments(adjustments: Iterable[RuleAdjustment]) -> list[RuleAdjustment]:
    """Internal-only adjustments."""
    return [a for a in adjustments if not a.visible]


@dataclass(frozen=True)
class PriceAdjustmentResult:
    """Adjustments and the adjusted total, which is None when no rule applied."""

    adjustments: tuple[RuleAdjustment, ...]
    adjusted_total: float | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "adjustments": [a.to_dict() for a in self.adjustments],
            "adjustedTotal": self.adjusted_total,
        }


def evaluate_pricing(
    rules: Iterable[Rule], context: RuleContext, base_total: float
) -> PriceAdjustmentResult:
    """Order the rules, apply them, and compute the adjusted total."""
    adjustments = apply_rules(order_rules(rules), context, base_total)
    if not adjustments:
        return PriceAdjustmentResult(adjustments=(), adjusted_total=None)
    logger.debug(f"{len(adjustments)} price adjustments applied")
    return PriceAdjustmentResult(
        adjustments=tuple(adjustments),
        adjusted_total=calculate_final_price(base_total, adjustments),
    )

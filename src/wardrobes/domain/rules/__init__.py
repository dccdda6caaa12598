"""Pricing rule engine.

Rules are evaluated against a RuleContext of wardrobe, customer and order
facts and produce ordered, signed price adjustments.
"""

from .context import (
    CustomerFacts,
    MaterialFacts,
    OrderFacts,
    RuleContext,
    WardrobeFacts,
)
from .engine import (
    PriceAdjustmentResult,
    apply_rules,
    calculate_final_price,
    evaluate_conditions,
    evaluate_pricing,
    execute_action,
    get_hidden_adjustments,
    get_visible_adjustments,
    order_rules,
)
from .fields import (
    FIELD_DEFINITIONS,
    FORMULA_FIELDS,
    FieldCategory,
    FieldDefinition,
    FieldId,
    FieldType,
    RuleDefinitionError,
    evaluate_formula,
    resolve_field,
    validate_field,
)
from .models import (
    ActionType,
    ApplyTo,
    LogicOperator,
    Operator,
    Rule,
    RuleAction,
    RuleActionConfig,
    RuleAdjustment,
    RuleCondition,
)
from .operators import evaluate_operator, is_empty

__all__ = [
    "FIELD_DEFINITIONS",
    "FORMULA_FIELDS",
    "ActionType",
    "ApplyTo",
    "CustomerFacts",
    "FieldCategory",
    "FieldDefinition",
    "FieldId",
    "FieldType",
    "LogicOperator",
    "MaterialFacts",
    "Operator",
    "OrderFacts",
    "PriceAdjustmentResult",
    "Rule",
    "RuleAction",
    "RuleActionConfig",
    "RuleAdjustment",
    "RuleCondition",
    "RuleContext",
    "RuleDefinitionError",
    "WardrobeFacts",
    "apply_rules",
    "calculate_final_price",
    "evaluate_conditions",
    "evaluate_formula",
    "evaluate_operator",
    "evaluate_pricing",
    "execute_action",
    "get_hidden_adjustments",
    "get_visible_adjustments",
    "is_empty",
    "order_rules",
    "resolve_field",
    "validate_field",
]

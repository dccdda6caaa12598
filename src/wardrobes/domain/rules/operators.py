"""Comparison operators for rule conditions."""

from __future__ import annotations

import logging
from typing import Any

from ..numbers import to_number
from .models import Operator

logger = logging.getLogger(__name__)

__all__ = ["evaluate_operator", "is_empty"]


def _equals(a: Any, b: Any) -> bool:
    """Equality with case-insensitive strings; booleans never equal numbers."""
    if isinstance(a, str) and isinstance(b, str):
        return a.lower() == b.lower()
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    return a == b


def _contains(field_value: Any, search: Any) -> bool:
    """Membership for lists, case-insensitive substring for strings."""
    if isinstance(field_value, (list, tuple)):
        if isinstance(search, str):
            return any(
                isinstance(item, str) and item.lower() == search.lower()
                for item in field_value
            )
        return any(_equals(item, search) for item in field_value)
    if isinstance(field_value, str) and isinstance(search, str):
        return search.lower() in field_value.lower()
    return False


def _is_in(field_value: Any, candidates: Any) -> bool:
    if not isinstance(candidates, (list, tuple)):
        return False
    if isinstance(field_value, str):
        return any(
            isinstance(item, str) and item.lower() == field_value.lower()
            for item in candidates
        )
    return any(_equals(field_value, item) for item in candidates)


def is_empty(value: Any) -> bool:
    """None, blank strings and empty lists are empty; zero is not."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def _compare(a: Any, b: Any, op: Operator) -> bool:
    left, right = to_number(a), to_number(b)
    if left is None or right is None:
        return False
    if op is Operator.GREATER_THAN:
        return left > right
    if op is Operator.LESS_THAN:
        return left < right
    if op is Operator.GREATER_EQUAL:
        return left >= right
    return left <= right


def evaluate_operator(field_value: Any, operator: Operator | str, condition_value: Any) -> bool:
    """Apply ``operator`` to a fact and the condition's comparison value.

    Unknown operators evaluate to False and log a warning.
    """
    try:
        op = Operator(operator)
    except ValueError:
        logger.warning(f"Unknown operator: {operator}")
        return False

    if op is Operator.EQUALS:
        return _equals(field_value, condition_value)
    if op is Operator.NOT_EQUALS:
        return not _equals(field_value, condition_value)
    if op is Operator.CONTAINS:
        return _contains(field_value, condition_value)
    if op is Operator.NOT_CONTAINS:
        return not _contains(field_value, condition_value)
    if op is Operator.IN:
        return _is_in(field_value, condition_value)
    if op is Operator.NOT_IN:
        return not _is_in(field_value, condition_value)
    if op is Operator.IS_EMPTY:
        return is_empty(field_value)
    if op is Operator.IS_NOT_EMPTY:
        return not is_empty(field_value)
    return _compare(field_value, condition_value, op)

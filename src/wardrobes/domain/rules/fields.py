"""Field registry and quantity formulas for pricing rules.

Rule conditions refer to facts by a fixed set of dotted identifiers such
as ``wardrobe.height``. Every identifier is a member of ``FieldId`` and is
mapped to an accessor function, so an unknown identifier is rejected when
a rule is defined instead of silently resolving to nothing at checkout.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from ..numbers import round_half_up, to_number
from .context import MaterialFacts, RuleContext, WardrobeFacts

logger = logging.getLogger(__name__)

__all__ = [
    "FIELD_DEFINITIONS",
    "FORMULA_FIELDS",
    "FieldCategory",
    "FieldDefinition",
    "FieldId",
    "FieldType",
    "RuleDefinitionError",
    "evaluate_formula",
    "resolve_field",
    "validate_field",
]


class RuleDefinitionError(ValueError):
    """Raised when a rule refers to a field that does not exist."""

    def __init__(self, field_path: str) -> None:
        self.field_path = field_path
        super().__init__(f"Unknown rule field: {field_path!r}")


class FieldCategory(str, Enum):
    WARDROBE = "wardrobe"
    CUSTOMER = "customer"
    ORDER = "order"


class FieldType(str, Enum):
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    ARRAY = "array"


class FieldId(str, Enum):
    """Every fact a rule condition may test."""

    WIDTH = "wardrobe.width"
    HEIGHT = "wardrobe.height"
    DEPTH = "wardrobe.depth"
    AREA = "wardrobe.area"
    COLUMN_COUNT = "wardrobe.columnCount"
    SHELF_COUNT = "wardrobe.shelfCount"
    DOOR_COUNT = "wardrobe.doorCount"
    DRAWER_COUNT = "wardrobe.drawerCount"
    HAS_BASE = "wardrobe.hasBase"
    HAS_DOORS = "wardrobe.hasDoors"
    HAS_DRAWERS = "wardrobe.hasDrawers"
    HAS_MIRROR = "wardrobe.hasMirror"
    MATERIAL_ID = "wardrobe.material.id"
    MATERIAL_NAME = "wardrobe.material.name"
    FRONT_MATERIAL_ID = "wardrobe.frontMaterial.id"
    FRONT_MATERIAL_NAME = "wardrobe.frontMaterial.name"
    BACK_MATERIAL_ID = "wardrobe.backMaterial.id"
    BACK_MATERIAL_NAME = "wardrobe.backMaterial.name"
    ROD_COUNT = "wardrobe.rodCount"
    HAS_ROD = "wardrobe.hasRod"
    LED_COUNT = "wardrobe.ledCount"
    HAS_LED = "wardrobe.hasLed"
    VERTICAL_DIVIDER_COUNT = "wardrobe.verticalDividerCount"
    HAS_VERTICAL_DIVIDER = "wardrobe.hasVerticalDivider"
    BASE_HEIGHT = "wardrobe.baseHeight"
    DOUBLE_DOOR_COUNT = "wardrobe.doubleDoorCount"
    SINGLE_DOOR_COUNT = "wardrobe.singleDoorCount"
    MIRROR_DOOR_COUNT = "wardrobe.mirrorDoorCount"
    DRAWER_STYLE_DOOR_COUNT = "wardrobe.drawerStyleDoorCount"
    MAX_DOOR_HEIGHT = "wardrobe.maxDoorHeight"
    MIN_DOOR_HEIGHT = "wardrobe.minDoorHeight"
    HANDLE_COUNT = "wardrobe.handleCount"
    HANDLE_NAME = "wardrobe.handleName"
    HANDLE_FINISH_NAME = "wardrobe.handleFinishName"
    CUSTOMER_TAGS = "customer.tags"
    CUSTOMER_EMAIL = "customer.email"
    CUSTOMER_ORDER_COUNT = "customer.orderCount"
    ORDER_TOTAL = "order.total"
    ORDER_CITY = "order.city"


@dataclass(frozen=True)
class FieldDefinition:
    """Display metadata and accessor for one rule field."""

    id: FieldId
    label: str
    type: FieldType
    accessor: Callable[[RuleContext], Any]
    unit: str | None = None

    @property
    def key(self) -> str:
        return self.id.value

    @property
    def category(self) -> FieldCategory:
        return FieldCategory(self.id.value.split(".", 1)[0])


def _material_attr(
    pick: Callable[[WardrobeFacts], MaterialFacts | None], attr: str
) -> Callable[[RuleContext], Any]:
    def accessor(ctx: RuleContext) -> Any:
        material = pick(ctx.wardrobe)
        return getattr(material, attr) if material is not None else None

    return accessor


_NUMBER = FieldType.NUMBER
_STRING = FieldType.STRING
_BOOLEAN = FieldType.BOOLEAN

FIELD_DEFINITIONS: dict[FieldId, FieldDefinition] = {
    d.id: d
    for d in (
        FieldDefinition(FieldId.WIDTH, "Width", _NUMBER, lambda c: c.wardrobe.width, "cm"),
        FieldDefinition(FieldId.HEIGHT, "Height", _NUMBER, lambda c: c.wardrobe.height, "cm"),
        FieldDefinition(FieldId.DEPTH, "Depth", _NUMBER, lambda c: c.wardrobe.depth, "cm"),
        FieldDefinition(FieldId.AREA, "Area", _NUMBER, lambda c: c.wardrobe.area, "m²"),
        FieldDefinition(
            FieldId.COLUMN_COUNT, "Column count", _NUMBER, lambda c: c.wardrobe.column_count
        ),
        FieldDefinition(
            FieldId.SHELF_COUNT, "Shelf count", _NUMBER, lambda c: c.wardrobe.shelf_count
        ),
        FieldDefinition(
            FieldId.DOOR_COUNT, "Door count", _NUMBER, lambda c: c.wardrobe.door_count
        ),
        FieldDefinition(
            FieldId.DRAWER_COUNT, "Drawer count", _NUMBER, lambda c: c.wardrobe.drawer_count
        ),
        FieldDefinition(FieldId.HAS_BASE, "Has base", _BOOLEAN, lambda c: c.wardrobe.has_base),
        FieldDefinition(
            FieldId.HAS_DOORS, "Has doors", _BOOLEAN, lambda c: c.wardrobe.has_doors
        ),
        FieldDefinition(
            FieldId.HAS_DRAWERS, "Has drawers", _BOOLEAN, lambda c: c.wardrobe.has_drawers
        ),
        FieldDefinition(
            FieldId.HAS_MIRROR, "Has mirror", _BOOLEAN, lambda c: c.wardrobe.has_mirror
        ),
        FieldDefinition(
            FieldId.MATERIAL_ID,
            "Body material (ID)",
            _NUMBER,
            _material_attr(lambda w: w.material, "id"),
        ),
        FieldDefinition(
            FieldId.MATERIAL_NAME,
            "Body material (name)",
            _STRING,
            _material_attr(lambda w: w.material, "name"),
        ),
        FieldDefinition(
            FieldId.FRONT_MATERIAL_ID,
            "Front material (ID)",
            _NUMBER,
            _material_attr(lambda w: w.front_material, "id"),
        ),
        FieldDefinition(
            FieldId.FRONT_MATERIAL_NAME,
            "Front material (name)",
            _STRING,
            _material_attr(lambda w: w.front_material, "name"),
        ),
        FieldDefinition(
            FieldId.BACK_MATERIAL_ID,
            "Back material (ID)",
            _NUMBER,
            _material_attr(lambda w: w.back_material, "id"),
        ),
        FieldDefinition(
            FieldId.BACK_MATERIAL_NAME,
            "Back material (name)",
            _STRING,
            _material_attr(lambda w: w.back_material, "name"),
        ),
        FieldDefinition(FieldId.ROD_COUNT, "Rod count", _NUMBER, lambda c: c.wardrobe.rod_count),
        FieldDefinition(FieldId.HAS_ROD, "Has rod", _BOOLEAN, lambda c: c.wardrobe.has_rod),
        FieldDefinition(FieldId.LED_COUNT, "LED count", _NUMBER, lambda c: c.wardrobe.led_count),
        FieldDefinition(FieldId.HAS_LED, "Has LED", _BOOLEAN, lambda c: c.wardrobe.has_led),
        FieldDefinition(
            FieldId.VERTICAL_DIVIDER_COUNT,
            "Vertical divider count",
            _NUMBER,
            lambda c: c.wardrobe.vertical_divider_count,
        ),
        FieldDefinition(
            FieldId.HAS_VERTICAL_DIVIDER,
            "Has vertical divider",
            _BOOLEAN,
            lambda c: c.wardrobe.has_vertical_divider,
        ),
        FieldDefinition(
            FieldId.BASE_HEIGHT, "Base height", _NUMBER, lambda c: c.wardrobe.base_height, "cm"
        ),
        FieldDefinition(
            FieldId.DOUBLE_DOOR_COUNT,
            "Double door count",
            _NUMBER,
            lambda c: c.wardrobe.doors.double_door_count,
        ),
        FieldDefinition(
            FieldId.SINGLE_DOOR_COUNT,
            "Single door count",
            _NUMBER,
            lambda c: c.wardrobe.doors.single_door_count,
        ),
        FieldDefinition(
            FieldId.MIRROR_DOOR_COUNT,
            "Mirror door count",
            _NUMBER,
            lambda c: c.wardrobe.doors.mirror_door_count,
        ),
        FieldDefinition(
            FieldId.DRAWER_STYLE_DOOR_COUNT,
            "Drawer-style door count",
            _NUMBER,
            lambda c: c.wardrobe.doors.drawer_style_door_count,
        ),
        FieldDefinition(
            FieldId.MAX_DOOR_HEIGHT,
            "Tallest door",
            _NUMBER,
            lambda c: c.wardrobe.doors.max_door_height,
            "cm",
        ),
        FieldDefinition(
            FieldId.MIN_DOOR_HEIGHT,
            "Shortest door",
            _NUMBER,
            lambda c: c.wardrobe.doors.min_door_height,
            "cm",
        ),
        FieldDefinition(
            FieldId.HANDLE_COUNT,
            "Handle count",
            _NUMBER,
            lambda c: c.wardrobe.doors.handle_count,
        ),
        FieldDefinition(
            FieldId.HANDLE_NAME, "Handle", _STRING, lambda c: c.wardrobe.doors.handle_name
        ),
        FieldDefinition(
            FieldId.HANDLE_FINISH_NAME,
            "Handle finish",
            _STRING,
            lambda c: c.wardrobe.doors.handle_finish_name,
        ),
        FieldDefinition(
            FieldId.CUSTOMER_TAGS,
            "Customer tags",
            FieldType.ARRAY,
            lambda c: list(c.customer.tags),
        ),
        FieldDefinition(
            FieldId.CUSTOMER_EMAIL, "Customer email", _STRING, lambda c: c.customer.email
        ),
        FieldDefinition(
            FieldId.CUSTOMER_ORDER_COUNT,
            "Previous orders",
            _NUMBER,
            lambda c: c.customer.order_count,
        ),
        FieldDefinition(FieldId.ORDER_TOTAL, "Order total", _NUMBER, lambda c: c.order.total, "RSD"),
        FieldDefinition(FieldId.ORDER_CITY, "Delivery city", _STRING, lambda c: c.order.city),
    )
}


def validate_field(path: str) -> FieldId:
    """Return the FieldId for ``path``.

    Raises:
        RuleDefinitionError: If ``path`` is not a known field.
    """
    try:
        return FieldId(path)
    except ValueError:
        raise RuleDefinitionError(path) from None


def resolve_field(context: RuleContext, field: FieldId | str) -> Any:
    """Read one fact from the context; None when the field or fact is absent."""
    if not isinstance(field, FieldId):
        try:
            field = FieldId(field)
        except ValueError:
            return None
    return FIELD_DEFINITIONS[field].accessor(context)


# Wardrobe metrics a quantity formula may reference
FORMULA_FIELDS: dict[str, Callable[[WardrobeFacts], float]] = {
    "doorCount": lambda w: w.door_count,
    "drawerCount": lambda w: w.drawer_count,
    "shelfCount": lambda w: w.shelf_count,
    "columnCount": lambda w: w.column_count,
    "rodCount": lambda w: w.rod_count,
    "ledCount": lambda w: w.led_count,
    "verticalDividerCount": lambda w: w.vertical_divider_count,
    "area": lambda w: w.area,
    "width": lambda w: w.width,
    "height": lambda w: w.height,
    "depth": lambda w: w.depth,
}

_MULTIPLY = re.compile(r"^(\w+)\s*\*\s*(\d+(?:\.\d+)?)$")


def evaluate_formula(formula: str | float | int, wardrobe: WardrobeFacts) -> float | None:
    """Evaluate an item quantity formula.

    Supported forms are ``field * number`` (rounded half up to a whole
    quantity), a bare number, and a bare field name, where ``field`` is one
    of ``FORMULA_FIELDS``.

    Returns:
        The quantity, or None if the formula is not in a supported form.

    Examples:
        ``"doorCount * 3"`` with four doors gives 12.
        ``"2"`` gives 2.
        ``"shelfCount"`` gives the shelf count.
    """
    if isinstance(formula, (int, float)) and not isinstance(formula, bool):
        return to_number(formula)
    if not isinstance(formula, str):
        logger.warning(f"Invalid formula: {formula!r}")
        return None

    text = formula.strip()
    match = _MULTIPLY.match(text)
    if match:
        name, multiplier = match.groups()
        accessor = FORMULA_FIELDS.get(name)
        if accessor is not None:
            product = to_number(accessor(wardrobe) * float(multiplier))
            if product is None:
                logger.warning(f"Formula {formula!r} does not give a finite quantity")
                return None
            return round_half_up(product)

    number = to_number(text)
    if number is not None:
        return number

    accessor = FORMULA_FIELDS.get(text)
    if accessor is not None:
        return float(accessor(wardrobe))

    logger.warning(f"Invalid formula: {formula!r}")
    return None

"""Value objects for the wardrobe domain."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .numbers import round_half_up

__all__ = [
    "CategoryTotal",
    "ColumnBlock",
    "Compartment",
    "CutList",
    "CutListItem",
    "DoorType",
    "HandleTotal",
    "MaterialCategory",
    "PanelType",
    "ParsedCompartmentKey",
    "PriceBreakdown",
    "column_letter",
    "parse_compartment_key",
]


class MaterialCategory(str, Enum):
    """Pricing category a panel is billed under."""

    KORPUS = "korpus"
    FRONT = "front"
    BACK = "back"


class PanelType(Enum):
    """Types of panels in a wardrobe carcass."""

    SIDE = "side"
    SEAM_SIDE = "seam_side"
    BOTTOM = "bottom"
    TOP = "top"
    MODULE_BOUNDARY = "module_boundary"
    SHELF = "shelf"
    AUTO_SHELF = "auto_shelf"
    DIVIDER = "divider"
    BACK = "back"
    DRAWER_FRONT = "drawer_front"
    DOOR = "door"


class DoorType(str, Enum):
    """Door leaf configurations offered by the configurator."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    DOUBLE = "double"
    LEFT_MIRROR = "leftMirror"
    RIGHT_MIRROR = "rightMirror"
    DOUBLE_MIRROR = "doubleMirror"
    DRAWER_STYLE = "drawerStyle"

    @property
    def is_double(self) -> bool:
        return self in (DoorType.DOUBLE, DoorType.DOUBLE_MIRROR)

    @property
    def is_drawer_style(self) -> bool:
        return self is DoorType.DRAWER_STYLE

    @property
    def is_single(self) -> bool:
        return self in (
            DoorType.LEFT,
            DoorType.RIGHT,
            DoorType.LEFT_MIRROR,
            DoorType.RIGHT_MIRROR,
        )

    @property
    def is_mirror(self) -> bool:
        return "mirror" in self.value.lower()

    @property
    def handle_count(self) -> int:
        """Handles mounted on one door group of this type."""
        if self is DoorType.NONE or self.is_drawer_style:
            return 0
        return 2 if self.is_double else 1


def column_letter(index: int) -> str:
    """Convert a zero-based column index to its spreadsheet-style letter.

    Examples:
        >>> column_letter(0)
        'A'
        >>> column_letter(25)
        'Z'
        >>> column_letter(26)
        'AA'
    """
    if index < 0:
        raise ValueError("Column index cannot be negative")
    n = index + 1
    letters = ""
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


@dataclass(frozen=True)
class ColumnBlock:
    """A vertical slice of the wardrobe width, in centimeters from the left edge."""

    index: int
    start: float
    end: float

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError("Column end must be greater than its start")

    @property
    def width(self) -> float:
        return self.end - self.start

    @property
    def letter(self) -> str:
        return column_letter(self.index)


@dataclass(frozen=True)
class Compartment:
    """A vertical cell inside one column.

    Attributes:
        key: Stable label such as "A1", numbered bottom to top.
        column_index: Zero-based index of the owning column.
        bottom_y: Floor-relative bottom of the cell in cm.
        top_y: Floor-relative top of the cell in cm.
        module: 0 for the bottom module, 1 for the top module of a split column.
    """

    key: str
    column_index: int
    bottom_y: float
    top_y: float
    module: int = 0

    @property
    def span(self) -> float:
        """Exact clear height in cm."""
        return self.top_y - self.bottom_y

    @property
    def height_cm(self) -> int:
        """Clear height rounded to whole centimeters for display."""
        return int(round_half_up(self.span))


_COMPARTMENT_KEY = re.compile(r"^([A-Z]+)(\d+)((?:\.\d+)*)$")


@dataclass(frozen=True)
class ParsedCompartmentKey:
    """Components of a compartment key like "A1" or "B2.0.1"."""

    base_key: str
    column: str
    index: int
    section_index: int = 0
    space_index: int = 0

    @property
    def is_sub_compartment(self) -> bool:
        return self.section_index > 0 or self.space_index > 0


def parse_compartment_key(key: str) -> ParsedCompartmentKey | None:
    """Parse a compartment or sub-compartment key.

    Sub-compartment keys append ".section.space" to the base key. Only the
    part before the first dot identifies the physical compartment.

    Returns:
        The parsed key, or None if the key is malformed.

    Examples:
        >>> parse_compartment_key("A1.0.2").base_key
        'A1'
        >>> parse_compartment_key("1A") is None
        True
    """
    match = _COMPARTMENT_KEY.match(key.strip())
    if match is None:
        return None
    column, index, rest = match.groups()
    subs = [int(part) for part in rest.split(".") if part]
    return ParsedCompartmentKey(
        base_key=f"{column}{index}",
        column=column,
        index=int(index),
        section_index=subs[0] if len(subs) > 0 else 0,
        space_index=subs[1] if len(subs) > 1 else 0,
    )


@dataclass(frozen=True)
class CutListItem:
    """One physical panel to cut.

    Dimensions are in centimeters, thickness in millimeters and area in
    square meters. Cost is the area times the owning material's price per
    square meter, frozen at build time.
    """

    code: str
    description: str
    width_cm: float
    height_cm: float
    thickness_mm: float
    area_m2: float
    cost: float
    element: str
    material_type: MaterialCategory
    panel_type: PanelType

    def __post_init__(self) -> None:
        if self.area_m2 < 0:
            raise ValueError("Panel area cannot be negative")
        if self.cost < 0:
            raise ValueError("Panel cost cannot be negative")

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "desc": self.description,
            "widthCm": self.width_cm,
            "heightCm": self.height_cm,
            "thicknessMm": self.thickness_mm,
            "areaM2": self.area_m2,
            "cost": self.cost,
            "element": self.element,
            "materialType": self.material_type.value,
        }


@dataclass(frozen=True)
class CategoryTotal:
    """Area and price billed under one material category."""

    area_m2: float = 0.0
    price: float = 0.0


@dataclass(frozen=True)
class HandleTotal:
    """Handle count and price; handles are not sheet panels."""

    count: int = 0
    price: float = 0.0


@dataclass(frozen=True)
class PriceBreakdown:
    korpus: CategoryTotal = field(default_factory=CategoryTotal)
    front: CategoryTotal = field(default_factory=CategoryTotal)
    back: CategoryTotal = field(default_factory=CategoryTotal)
    handles: HandleTotal = field(default_factory=HandleTotal)

    def for_category(self, category: MaterialCategory) -> CategoryTotal:
        return getattr(self, category.value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "korpus": {"areaM2": self.korpus.area_m2, "price": self.korpus.price},
            "front": {"areaM2": self.front.area_m2, "price": self.front.price},
            "back": {"areaM2": self.back.area_m2, "price": self.back.price},
            "handles": {"count": self.handles.count, "price": self.handles.price},
        }


@dataclass(frozen=True)
class CutList:
    """Priced cut list for one configured wardrobe.

    Attributes:
        items: Panels in build order.
        total_area: Sum of all panel areas (m²).
        total_cost: Sum of all panel costs plus handle cost.
        price_per_m2: Body material price per square meter.
        front_price_per_m2: Front material price per square meter.
        back_price_per_m2: Back material price per square meter.
        price_breakdown: Per-category area and price.
    """

    items: tuple[CutListItem, ...]
    total_area: float
    total_cost: float
    price_per_m2: float
    front_price_per_m2: float
    back_price_per_m2: float
    price_breakdown: PriceBreakdown

    @property
    def grouped(self) -> dict[str, list[CutListItem]]:
        """Items grouped by owning element, in first-seen order."""
        groups: dict[str, list[CutListItem]] = {}
        for item in self.items:
            groups.setdefault(item.element, []).append(item)
        return groups

    def items_of_type(self, panel_type: PanelType) -> list[CutListItem]:
        return [item for item in self.items if item.panel_type is panel_type]

    def to_dict(self) -> dict[str, Any]:
        """Snapshot shape persisted with an order."""
        return {
            "items": [item.to_dict() for item in self.items],
            "pricePerM2": self.price_per_m2,
            "frontPricePerM2": self.front_price_per_m2,
            "backPricePerM2": self.back_price_per_m2,
            "totalArea": self.total_area,
            "totalCost": self.total_cost,
            "priceBreakdown": self.price_breakdown.to_dict(),
        }

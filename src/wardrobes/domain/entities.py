"""Domain entities for the wardrobe configurator.

The configuration snapshot and the catalog rows it references. Every
entity is immutable; the engine reads them and never writes back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .constants import BACK_CATEGORY_TAGS
from .value_objects import DoorType

__all__ = [
    "Catalog",
    "CompartmentExtras",
    "DoorGroup",
    "Handle",
    "HandleFinish",
    "Material",
    "WardrobeConfig",
]

_MAPPING_FIELDS = (
    "column_heights",
    "column_horizontal_boundaries",
    "column_module_boundaries",
    "column_top_module_shelves",
    "compartment_extras",
)


@dataclass(frozen=True)
class Material:
    """A purchasable sheet good.

    Attributes:
        id: Catalog identifier.
        name: Display name.
        price: Price per square meter.
        thickness: Sheet thickness in millimeters, if known.
        categories: Free-form category tags such as "iverica" or "leđa".
    """

    id: int
    name: str
    price: float
    thickness: float | None = None
    categories: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError("Material price cannot be negative")
        if self.thickness is not None and self.thickness <= 0:
            raise ValueError("Material thickness must be positive")

    @property
    def is_back_material(self) -> bool:
        tags = [c.lower() for c in self.categories]
        return any(tag in category for category in tags for tag in BACK_CATEGORY_TAGS)


@dataclass(frozen=True)
class HandleFinish:
    id: int
    name: str
    price: float = 0.0
    legacy_id: str | None = None

    def matches(self, key: str) -> bool:
        return key == self.legacy_id or key == str(self.id)


@dataclass(frozen=True)
class Handle:
    """A door handle model and the finishes it is sold in."""

    id: int
    name: str
    legacy_id: str | None = None
    finishes: tuple[HandleFinish, ...] = ()

    def matches(self, key: str) -> bool:
        return key == self.legacy_id or key == str(self.id)

    def find_finish(self, key: str | None) -> HandleFinish | None:
        if key is None:
            return None
        return next((f for f in self.finishes if f.matches(key)), None)


@dataclass(frozen=True)
class Catalog:
    """Read-only snapshot of the material and handle catalog."""

    materials: tuple[Material, ...] = ()
    handles: tuple[Handle, ...] = ()

    def find_material(self, material_id: int | None) -> Material | None:
        if material_id is None:
            return None
        return next((m for m in self.materials if m.id == material_id), None)

    def first_back_material(self) -> Material | None:
        return next((m for m in self.materials if m.is_back_material), None)

    def find_handle(self, key: str | None) -> Handle | None:
        if key is None:
            return None
        return next((h for h in self.handles if h.matches(key)), None)


@dataclass(frozen=True)
class CompartmentExtras:
    """Optional fittings inside one compartment."""

    vertical_divider: bool = False
    drawers: bool = False
    drawers_count: int = 0
    rod: bool = False
    led: bool = False

    def __post_init__(self) -> None:
        if self.drawers_count < 0:
            raise ValueError("Drawer count cannot be negative")


@dataclass(frozen=True)
class DoorGroup:
    """One door spanning one or more compartments of a single column.

    Attributes:
        id: Unique identifier, e.g. "door-A1-A3".
        type: Leaf configuration.
        column: Column letter the door belongs to.
        compartments: Compartment or sub-compartment keys, bottom to top.
        material_id: Per-door front material (used in per-door mode).
        handle_id: Per-door handle (used in per-door mode).
        handle_finish: Per-door handle finish (used in per-door mode).
    """

    id: str
    type: DoorType
    column: str
    compartments: tuple[str, ...]
    material_id: int | None = None
    handle_id: str | None = None
    handle_finish: str | None = None


@dataclass(frozen=True)
class WardrobeConfig:
    """Immutable snapshot of one configured wardrobe.

    Outer dimensions are in centimeters and panel thickness in millimeters.
    Vertical boundaries are meters measured from the horizontal center of
    the wardrobe. Shelf and module boundaries are meters above the floor.
    Per-column mappings are keyed by zero-based column index. Mapping
    fields are copied into read-only views, so the snapshot cannot be
    changed after construction; it is not hashable.
    """

    width: float
    height: float
    depth: float
    selected_material_id: int
    panel_thickness: float = 18.0
    has_base: bool = False
    base_height: float = 0.0
    vertical_boundaries: tuple[float, ...] = ()
    column_heights: Mapping[int, float] = field(default_factory=dict)
    column_horizontal_boundaries: Mapping[int, tuple[float, ...]] = field(
        default_factory=dict
    )
    column_module_boundaries: Mapping[int, float | None] = field(default_factory=dict)
    column_top_module_shelves: Mapping[int, tuple[float, ...]] = field(
        default_factory=dict
    )
    selected_front_material_id: int | None = None
    selected_back_material_id: int | None = None
    door_groups: tuple[DoorGroup, ...] = ()
    compartment_extras: Mapping[str, CompartmentExtras] = field(default_factory=dict)
    global_handle_id: str | None = None
    global_handle_finish: str | None = None
    door_settings_mode: str = "global"

    def __post_init__(self) -> None:
        """Validate dimensions and freeze the per-column mappings."""
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("Wardrobe dimensions must be positive")
        if self.panel_thickness <= 0:
            raise ValueError("Panel thickness must be positive")
        if self.base_height < 0:
            raise ValueError("Base height cannot be negative")
        for name in _MAPPING_FIELDS:
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    @property
    def thickness_cm(self) -> float:
        return self.panel_thickness / 10

    @property
    def base_offset(self) -> float:
        """Height of the plinth in cm, 0 when the wardrobe has no base."""
        return self.base_height if self.has_base else 0.0

    @property
    def is_per_door(self) -> bool:
        return self.door_settings_mode == "per-door"

    def column_height(self, index: int) -> float:
        override = self.column_heights.get(index)
        return override if override is not None and override > 0 else self.height

    def extras_for(self, key: str) -> CompartmentExtras:
        return self.compartment_extras.get(key) or CompartmentExtras()

"""Facts a pricing rule can see during one evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..services.door_metrics import DoorMetrics

__all__ = [
    "CustomerFacts",
    "MaterialFacts",
    "OrderFacts",
    "RuleContext",
    "WardrobeFacts",
]


@dataclass(frozen=True)
class MaterialFacts:
    id: int
    name: str


@dataclass(frozen=True)
class WardrobeFacts:
    """Computed wardrobe metrics.

    Dimensions are centimeters and ``area`` is the total panel area in
    square meters.
    """

    width: float
    height: float
    depth: float
    area: float
    column_count: int
    shelf_count: int
    door_count: int
    drawer_count: int
    material: MaterialFacts
    front_material: MaterialFacts
    back_material: MaterialFacts | None = None
    has_base: bool = False
    base_height: float = 0.0
    rod_count: int = 0
    led_count: int = 0
    vertical_divider_count: int = 0
    doors: DoorMetrics = field(default_factory=DoorMetrics)

    @property
    def has_doors(self) -> bool:
        return self.door_count > 0

    @property
    def has_drawers(self) -> bool:
        return self.drawer_count > 0

    @property
    def has_mirror(self) -> bool:
        return self.doors.mirror_door_count > 0

    @property
    def has_rod(self) -> bool:
        return self.rod_count > 0

    @property
    def has_led(self) -> bool:
        return self.led_count > 0

    @property
    def has_vertical_divider(self) -> bool:
        return self.vertical_divider_count > 0


@dataclass(frozen=True)
class CustomerFacts:
    tags: tuple[str, ...] = ()
    email: str | None = None
    order_count: int = 0


@dataclass(frozen=True)
class OrderFacts:
    """Order-level facts; ``total`` is the unadjusted base price."""

    total: float = 0.0
    city: str | None = None


@dataclass(frozen=True)
class RuleContext:
    wardrobe: WardrobeFacts
    customer: CustomerFacts = field(default_factory=CustomerFacts)
    order: OrderFacts = field(default_factory=OrderFacts)

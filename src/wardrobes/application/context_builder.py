"""Assembles the rule context from computed wardrobe results."""

from __future__ import annotations

from dataclasses import dataclass

from wardrobes.domain.entities import Catalog, WardrobeConfig
from wardrobes.domain.geometry import build_columns
from wardrobes.domain.numbers import round_half_up
from wardrobes.domain.rules import (
    CustomerFacts,
    MaterialFacts,
    OrderFacts,
    RuleContext,
    WardrobeFacts,
)
from wardrobes.domain.services import CutListBuilder, DoorMetrics
from wardrobes.domain.value_objects import CutList, PanelType

__all__ = ["CustomerInput", "RuleContextBuilder"]


@dataclass(frozen=True)
class CustomerInput:
    """Customer facts supplied by the account system."""

    tags: tuple[str, ...] = ()
    email: str | None = None
    order_count: int = 0


class RuleContextBuilder:
    """Builds a RuleContext from a cut list, door metrics and customer data.

    Counts are taken from what was actually built: shelves and drawers are
    counted from the cut list, so a shelf dropped by the geometry or a
    drawer that did not fit is not counted.
    """

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog

    def build(
        self,
        config: WardrobeConfig,
        cut_list: CutList,
        door_metrics: DoorMetrics,
        customer: CustomerInput | None = None,
        order_city: str | None = None,
        base_total: float | None = None,
    ) -> RuleContext:
        customer = customer or CustomerInput()
        materials = CutListBuilder(self.catalog).resolve_materials(config)
        columns = build_columns(config.width, config.vertical_boundaries)
        extras = list(config.compartment_extras.values())

        wardrobe = WardrobeFacts(
            width=config.width,
            height=config.height,
            depth=config.depth,
            area=cut_list.total_area,
            column_count=len(columns),
            shelf_count=len(cut_list.items_of_type(PanelType.SHELF)),
            door_count=door_metrics.door_count,
            drawer_count=len(cut_list.items_of_type(PanelType.DRAWER_FRONT)),
            material=MaterialFacts(id=materials.body.id, name=materials.body.name),
            front_material=MaterialFacts(
                id=materials.front.id, name=materials.front.name
            ),
            back_material=MaterialFacts(id=materials.back.id, name=materials.back.name),
            has_base=config.has_base,
            base_height=config.base_offset,
            rod_count=sum(1 for e in extras if e.rod),
            led_count=sum(1 for e in extras if e.led),
            vertical_divider_count=len(cut_list.items_of_type(PanelType.DIVIDER)),
            doors=door_metrics,
        )
        if base_total is None:
            base_total = round_half_up(cut_list.total_cost)
        return RuleContext(
            wardrobe=wardrobe,
            customer=CustomerFacts(
                tags=tuple(customer.tags),
                email=customer.email,
                order_count=customer.order_count,
            ),
            order=OrderFacts(total=base_total, city=order_city),
        )

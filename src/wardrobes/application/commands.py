"""Application commands (use cases) for wardrobe pricing."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable

from wardrobes.domain.entities import Catalog, WardrobeConfig
from wardrobes.domain.numbers import round_half_up
from wardrobes.domain.rules import (
    PriceAdjustmentResult,
    Rule,
    RuleAdjustment,
    RuleContext,
    evaluate_pricing,
    get_hidden_adjustments,
    get_visible_adjustments,
)
from wardrobes.domain.services import (
    CutListBuilder,
    CutListError,
    DoorMetrics,
    compute_door_metrics,
)
from wardrobes.domain.value_objects import CutList

from .context_builder import CustomerInput, RuleContextBuilder

logger = logging.getLogger(__name__)

__all__ = ["PricingError", "Quote", "QuoteCommand"]


class PricingError(Exception):
    """Raised when a quote cannot be priced; nothing may be persisted."""

    USER_MESSAGE = "price calculation failed, try again"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"{self.USER_MESSAGE}: {reason}")


@dataclass(frozen=True)
class Quote:
    """Authoritative price for one wardrobe, ready to freeze into an order."""

    cut_list: CutList
    door_metrics: DoorMetrics
    context: RuleContext
    base_total: float
    pricing: PriceAdjustmentResult

    @property
    def adjustments(self) -> tuple[RuleAdjustment, ...]:
        return self.pricing.adjustments

    @property
    def final_total(self) -> float:
        """Adjusted total, or the base total when no rule applied."""
        if self.pricing.adjusted_total is None:
            return self.base_total
        return self.pricing.adjusted_total

    @property
    def visible_adjustments(self) -> list[RuleAdjustment]:
        return get_visible_adjustments(self.adjustments)

    @property
    def hidden_adjustments(self) -> list[RuleAdjustment]:
        return get_hidden_adjustments(self.adjustments)

    def to_dict(self) -> dict[str, Any]:
        """Snapshot persisted with the order."""
        return {
            "cutList": self.cut_list.to_dict(),
            "doorMetrics": self.door_metrics.to_dict(),
            "baseTotal": self.base_total,
            "adjustments": [a.to_dict() for a in self.adjustments],
            "adjustedTotal": self.pricing.adjusted_total,
            "finalTotal": self.final_total,
            "visibleAdjustments": [a.to_dict() for a in self.visible_adjustments],
        }


class QuoteCommand:
    """Recomputes a wardrobe's price from its stored configuration.

    Only the configuration, the catalog snapshot and the rule snapshot are
    used. A price computed by a client is never an input.
    """

    def __init__(
        self,
        catalog: Catalog,
        cut_list_builder: CutListBuilder | None = None,
        context_builder: RuleContextBuilder | None = None,
    ) -> None:
        self.catalog = catalog
        self.cut_list_builder = cut_list_builder or CutListBuilder(catalog)
        self.context_builder = context_builder or RuleContextBuilder(catalog)

    def execute(
        self,
        config: WardrobeConfig,
        rules: Iterable[Rule] = (),
        customer: CustomerInput | None = None,
        order_city: str | None = None,
    ) -> Quote:
        """Price one wardrobe.

        Raises:
            CatalogError: If a selected material is not in the catalog.
            PricingError: If the cut list, base total or adjusted total is
                unusable.
        """
        try:
            cut_list = self.cut_list_builder.build(config)
        except CutListError as e:
            raise PricingError(str(e)) from e

        base_total = round_half_up(cut_list.total_cost)
        if not math.isfinite(base_total) or base_total <= 0:
            raise PricingError(f"base total {base_total} is not a positive number")
        if cut_list.total_area <= 0:
            raise PricingError(f"total area {cut_list.total_area} is not positive")

        door_metrics = compute_door_metrics(config, self.catalog.handles)
        context = self.context_builder.build(
            config,
            cut_list,
            door_metrics,
            customer=customer,
            order_city=order_city,
            base_total=base_total,
        )
        pricing = evaluate_pricing(rules, context, base_total)
        amounts = [a.amount for a in pricing.adjustments]
        if not all(math.isfinite(a) for a in amounts):
            raise PricingError(f"adjustment amounts {amounts} are not all finite")
        if not math.isfinite(base_total + sum(amounts)):
            raise PricingError("adjusted total is not finite")
        logger.debug(
            f"Quote: base {base_total}, {len(pricing.adjustments)} adjustments, "
            f"adjusted {pricing.adjusted_total}"
        )
        return Quote(
            cut_list=cut_list,
            door_metrics=door_metrics,
            context=context,
            base_total=base_total,
            pricing=pricing,
        )

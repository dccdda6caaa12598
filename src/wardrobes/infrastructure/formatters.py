"""Output formatters and exporters for wardrobe quotes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Iterable

from wardrobes.domain.constants import CURRENCY
from wardrobes.domain.rules import RuleAdjustment
from wardrobes.domain.services import DoorMetrics
from wardrobes.domain.value_objects import CutList, PriceBreakdown

if TYPE_CHECKING:
    from wardrobes.application.commands import Quote


def _money(amount: float) -> str:
    return f"{amount:,.2f} {CURRENCY}"


class CutListFormatter:
    """Formats cut lists for display.

    Items are grouped by the element that owns them (sides, seams, one
    group per column, doors) in build order.
    """

    def __init__(self, group_by_element: bool = True) -> None:
        self._group_by_element = group_by_element

    def format(self, cut_list: CutList) -> str:
        """Format cut list as a table."""
        if not cut_list.items:
            return "No pieces in cut list."

        lines = [
            "CUT LIST",
            "=" * 70,
            f"{'Code':<10} {'Description':<24} {'W (cm)':>8} {'H (cm)':>8} "
            f"{'mm':>4} {'m²':>7}",
            "-" * 70,
        ]

        if self._group_by_element:
            for element, items in cut_list.grouped.items():
                lines.append(f"[{element}]")
                lines.extend(self._row(item) for item in items)
        else:
            lines.extend(self._row(item) for item in cut_list.items)

        lines.append("-" * 70)
        lines.append(f"{'TOTAL':<10} {'':<24} {'':>8} {'':>8} {'':>4} {cut_list.total_area:>7.3f}")
        lines.append(f"{'':>46} {_money(cut_list.total_cost)}")
        return "\n".join(lines)

    def _row(self, item) -> str:
        return (
            f"{item.code:<10} {item.description[:24]:<24} {item.width_cm:>8.1f} "
            f"{item.height_cm:>8.1f} {item.thickness_mm:>4.0f} {item.area_m2:>7.3f}"
        )


class PriceBreakdownFormatter:
    """Formats the per-category price breakdown of a cut list."""

    def format(self, breakdown: PriceBreakdown) -> str:
        lines = [
            "PRICE BREAKDOWN",
            "=" * 50,
            f"{'Category':<12} {'Area (m²)':>12} {'Price':>22}",
            "-" * 50,
        ]
        for label, total in (
            ("Korpus", breakdown.korpus),
            ("Front", breakdown.front),
            ("Back", breakdown.back),
        ):
            lines.append(f"{label:<12} {total.area_m2:>12.3f} {_money(total.price):>22}")
        handles = breakdown.handles
        lines.append(f"{'Handles':<12} {handles.count:>12} {_money(handles.price):>22}")
        return "\n".join(lines)


class AdjustmentFormatter:
    """Formats rule adjustments and the resulting totals."""

    def __init__(self, include_hidden: bool = False) -> None:
        self._include_hidden = include_hidden

    def format(
        self,
        adjustments: Iterable[RuleAdjustment],
        base_total: float,
        final_total: float,
    ) -> str:
        shown = [a for a in adjustments if a.visible or self._include_hidden]
        lines = ["PRICE", "=" * 50, f"{'Base total':<30} {_money(base_total):>19}"]
        if shown:
            lines.append("-" * 50)
            for adjustment in shown:
                marker = "" if adjustment.visible else " (internal)"
                lines.append(f"{adjustment.rule_name}{marker}")
                lines.append(f"  {adjustment.description:<28} {adjustment.amount:>+19,.2f}")
        lines.append("-" * 50)
        lines.append(f"{'Total':<30} {_money(final_total):>19}")
        return "\n".join(lines)


class DoorMetricsFormatter:
    """Formats door metrics as a short report."""

    def format(self, metrics: DoorMetrics) -> str:
        if metrics.door_count == 0:
            return "No doors configured."

        lines = [
            "DOORS",
            "=" * 40,
            f"Double doors:       {metrics.double_door_count}",
            f"Single doors:       {metrics.single_door_count}",
            f"Mirror doors:       {metrics.mirror_door_count}",
            f"Drawer-style doors: {metrics.drawer_style_door_count}",
            f"Tallest door:       {metrics.max_door_height:.1f} cm",
            f"Shortest door:      {metrics.min_door_height:.1f} cm",
            f"Handles:            {metrics.handle_count}",
        ]
        if metrics.handle_name:
            handle = metrics.handle_name
            if metrics.handle_finish_name:
                handle = f"{handle} ({metrics.handle_finish_name})"
            lines.append(f"Handle model:       {handle}")
        return "\n".join(lines)


class JsonExporter:
    """Exports cut lists, door metrics and quotes as JSON."""

    def export_cut_list(self, cut_list: CutList) -> str:
        return self._dump(cut_list.to_dict())

    def export_door_metrics(self, metrics: DoorMetrics) -> str:
        return self._dump(metrics.to_dict())

    def export_quote(self, quote: Quote, include_hidden: bool = False) -> str:
        """Export a quote snapshot.

        Hidden adjustments are internal; they are only included when
        ``include_hidden`` is set.
        """
        data = quote.to_dict()
        if not include_hidden:
            data["adjustments"] = data["visibleAdjustments"]
        return self._dump(data)

    def _dump(self, data: dict[str, Any]) -> str:
        return json.dumps(data, indent=2, ensure_ascii=False)

"""Door metrics for pricing rules.

Summarizes the door groups of a wardrobe into counts, height extremes and
handle names that rule conditions can test against.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Sequence

from ..entities import Handle, WardrobeConfig
from ..geometry import build_columns, compartment_map, door_group_height
from ..numbers import round_half_up
from ..value_objects import DoorType

__all__ = ["DoorMetrics", "compute_door_metrics", "resolve_handle_names"]


@dataclass(frozen=True)
class DoorMetrics:
    """Door facts for one wardrobe. Heights are cm rounded to 0.1, 0 without doors."""

    double_door_count: int = 0
    single_door_count: int = 0
    mirror_door_count: int = 0
    drawer_style_door_count: int = 0
    max_door_height: float = 0.0
    min_door_height: float = 0.0
    handle_count: int = 0
    handle_name: str = ""
    handle_finish_name: str = ""

    @property
    def door_count(self) -> int:
        return (
            self.double_door_count
            + self.single_door_count
            + self.drawer_style_door_count
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["door_count"] = self.door_count
        return data


def resolve_handle_names(
    config: WardrobeConfig, handles: Sequence[Handle] | None
) -> tuple[str, str]:
    """Display names of the globally selected handle and finish."""
    if not handles or config.global_handle_id is None:
        return "", ""
    handle = next((h for h in handles if h.matches(config.global_handle_id)), None)
    if handle is None:
        return "", ""
    finish = handle.find_finish(config.global_handle_finish)
    return handle.name, finish.name if finish else ""


def compute_door_metrics(
    config: WardrobeConfig, handles: Sequence[Handle] | None = None
) -> DoorMetrics:
    """Count door groups by type and measure their heights.

    Door heights come from the same compartment geometry the cut list
    uses, so a door's metric height always equals its leaf height in the
    cut list. Groups of type "none" are ignored and groups whose height
    cannot be resolved do not affect the min/max.
    """
    handle_name, finish_name = resolve_handle_names(config, handles)

    groups = [g for g in config.door_groups if g.type is not DoorType.NONE]
    if not groups:
        return DoorMetrics(handle_name=handle_name, handle_finish_name=finish_name)

    columns = build_columns(config.width, config.vertical_boundaries)
    compartments = compartment_map(config, columns)

    double = single = mirror = drawer_style = handle_count = 0
    heights: list[float] = []
    for group in groups:
        if group.type.is_double:
            double += 1
        elif group.type.is_drawer_style:
            drawer_style += 1
        else:
            single += 1
        if group.type.is_mirror:
            mirror += 1
        handle_count += group.type.handle_count

        height = door_group_height(group, compartments, len(columns))
        if height > 0:
            heights.append(height)

    return DoorMetrics(
        double_door_count=double,
        single_door_count=single,
        mirror_door_count=mirror,
        drawer_style_door_count=drawer_style,
        max_door_height=round_half_up(max(heights), 1) if heights else 0.0,
        min_door_height=round_half_up(min(heights), 1) if heights else 0.0,
        handle_count=handle_count,
        handle_name=handle_name,
        handle_finish_name=finish_name,
    )

"""Column and compartment geometry for wardrobes.

All three consumers of wardrobe geometry (the cut list, door metrics and
the blueprint preview) go through this module so they agree on where
columns start and end, whether a tall column is split into two modules,
and which shelves actually bound a compartment.

Units:
- Horizontal positions are centimeters from the left edge.
- Vertical positions are centimeters above the floor.
- Input boundaries are meters: vertical boundaries from the horizontal
  center, shelf and module boundaries from the floor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .constants import SPLIT_THRESHOLD_CM
from .entities import DoorGroup, WardrobeConfig
from .value_objects import ColumnBlock, Compartment, column_letter, parse_compartment_key

__all__ = [
    "ColumnSpans",
    "CoordinateMapper",
    "ModuleSpans",
    "build_columns",
    "column_index",
    "compartment_map",
    "door_group_height",
    "resolve_column_spans",
    "resolve_compartments",
]


def column_index(letter: str) -> int | None:
    """Inverse of ``column_letter``; None for anything that is not A-Z letters."""
    letter = letter.strip().upper()
    if not letter or not letter.isalpha() or not letter.isascii():
        return None
    index = 0
    for char in letter:
        index = index * 26 + (ord(char) - ord("A") + 1)
    return index - 1


def build_columns(
    width_cm: float, boundaries_m: Sequence[float] | None = None
) -> list[ColumnBlock]:
    """Split the wardrobe width into contiguous column blocks.

    Each boundary is converted from center-relative meters to an offset in
    cm from the left edge. Boundaries are processed in ascending order and
    a boundary only becomes a cut if it lies strictly between the previous
    cut and the total width. Boundaries on or beyond an edge, and
    duplicates, are dropped instead of producing empty columns.

    Args:
        width_cm: Total wardrobe width in centimeters.
        boundaries_m: Optional boundary positions in meters from the center.

    Returns:
        Columns tiling [0, width_cm], left to right. Empty only if the
        width itself is not positive.
    """
    if width_cm <= 0:
        return []

    half_width_m = width_cm / 100 / 2
    offsets = sorted((b + half_width_m) * 100 for b in (boundaries_m or ()))

    columns: list[ColumnBlock] = []
    prev = 0.0
    for offset in offsets:
        if prev < offset < width_cm:
            columns.append(ColumnBlock(index=len(columns), start=prev, end=offset))
            prev = offset
    columns.append(ColumnBlock(index=len(columns), start=prev, end=width_cm))
    return columns


@dataclass(frozen=True)
class ModuleSpans:
    """Walk result for one module (bottom or top) of a column.

    Attributes:
        bottom: Lowest usable Y of the module.
        top: Highest usable Y of the module.
        shelves: Shelf center lines that were accepted, ascending.
        spans: (bottom_y, top_y) of each compartment, ascending.
    """

    bottom: float
    top: float
    shelves: tuple[float, ...] = ()
    spans: tuple[tuple[float, float], ...] = ()


@dataclass(frozen=True)
class ColumnSpans:
    """Resolved vertical layout of one column.

    ``module_boundary`` is the center line of the module split in cm, or
    None when the column is not split. ``top_module`` is only set for split
    columns.
    """

    column_index: int
    height: float
    thickness: float
    inner_bottom: float
    inner_top: float
    bottom_module: ModuleSpans
    module_boundary: float | None = None
    top_module: ModuleSpans | None = None

    @property
    def is_split(self) -> bool:
        return self.module_boundary is not None

    @property
    def modules(self) -> list[ModuleSpans]:
        if self.top_module is None:
            return [self.bottom_module]
        return [self.bottom_module, self.top_module]

    @property
    def shelves(self) -> list[float]:
        """All accepted shelf center lines, bottom module first."""
        return [y for module in self.modules for y in module.shelves]


def _walk_module(
    shelves_cm: Iterable[float],
    lower: float,
    upper_filter: float,
    module_top: float,
    thickness: float,
) -> ModuleSpans:
    """Walk the shelves of one module from bottom to top.

    A shelf is kept only when it sits more than one panel thickness above
    the previous compartment floor. Each kept shelf closes a compartment at
    its lower face and opens the next one at its upper face.
    """
    candidates = sorted(y for y in shelves_cm if lower < y < upper_filter)

    accepted: list[float] = []
    spans: list[tuple[float, float]] = []
    prev = lower
    for shelf_y in candidates:
        if shelf_y > prev + thickness:
            spans.append((prev, shelf_y - thickness / 2))
            accepted.append(shelf_y)
            prev = shelf_y + thickness / 2

    if prev < module_top:
        spans.append((prev, module_top))

    return ModuleSpans(
        bottom=lower, top=module_top, shelves=tuple(accepted), spans=tuple(spans)
    )


def resolve_column_spans(config: WardrobeConfig, index: int) -> ColumnSpans:
    """Resolve the module split and shelf walk for one column.

    The module boundary takes effect only when the column is taller than
    the split threshold and the boundary leaves more than one panel
    thickness of clearance above the inner floor and below the inner
    ceiling. Anything else is treated as an unsplit column.
    """
    t = config.thickness_cm
    height = config.column_height(index)
    inner_bottom = config.base_offset + t
    inner_top = height - t

    raw_boundary = config.column_module_boundaries.get(index)
    boundary_cm = raw_boundary * 100 if raw_boundary is not None else None
    split = (
        boundary_cm is not None
        and height > SPLIT_THRESHOLD_CM
        and inner_bottom + t < boundary_cm < inner_top - t
    )
    module_boundary = boundary_cm if split else None

    bottom_shelves = [y * 100 for y in config.column_horizontal_boundaries.get(index, ())]
    if module_boundary is None:
        bottom = _walk_module(bottom_shelves, inner_bottom, inner_top, inner_top, t)
        return ColumnSpans(
            column_index=index,
            height=height,
            thickness=t,
            inner_bottom=inner_bottom,
            inner_top=inner_top,
            bottom_module=bottom,
        )

    bottom = _walk_module(
        bottom_shelves, inner_bottom, module_boundary, module_boundary - t, t
    )
    top_shelves = [y * 100 for y in config.column_top_module_shelves.get(index, ())]
    top = _walk_module(top_shelves, module_boundary + t, inner_top, inner_top, t)
    return ColumnSpans(
        column_index=index,
        height=height,
        thickness=t,
        inner_bottom=inner_bottom,
        inner_top=inner_top,
        bottom_module=bottom,
        module_boundary=module_boundary,
        top_module=top,
    )


def resolve_compartments(
    config: WardrobeConfig,
    index: int,
    spans: ColumnSpans | None = None,
) -> list[Compartment]:
    """List the compartments of one column, bottom to top.

    Keys are the column letter followed by a sequence number that keeps
    counting across the module split, so a split column with two bottom
    compartments and one top compartment yields A1, A2, A3. If the walk
    yields nothing the whole inner height becomes one compartment.
    """
    spans = spans or resolve_column_spans(config, index)
    letter = column_letter(index)

    compartments: list[Compartment] = []
    for module_no, module in enumerate(spans.modules):
        for bottom_y, top_y in module.spans:
            compartments.append(
                Compartment(
                    key=f"{letter}{len(compartments) + 1}",
                    column_index=index,
                    bottom_y=bottom_y,
                    top_y=top_y,
                    module=module_no,
                )
            )

    if not compartments:
        compartments.append(
            Compartment(
                key=f"{letter}1",
                column_index=index,
                bottom_y=spans.inner_bottom,
                top_y=spans.inner_top,
            )
        )
    return compartments


def compartment_map(
    config: WardrobeConfig, columns: Sequence[ColumnBlock] | None = None
) -> dict[str, Compartment]:
    """All compartments of the wardrobe keyed by compartment key."""
    if columns is None:
        columns = build_columns(config.width, config.vertical_boundaries)
    result: dict[str, Compartment] = {}
    for column in columns:
        for compartment in resolve_compartments(config, column.index):
            result[compartment.key] = compartment
    return result


def door_group_height(
    group: DoorGroup,
    compartments: dict[str, Compartment],
    column_count: int,
) -> float:
    """Height in cm covered by one door group.

    A door over one compartment, or over several sub-compartments of the
    same compartment, takes that compartment's clear height. A door over
    several different compartments takes the sum of their clear heights,
    each compartment counted once. Unknown columns or keys contribute 0.
    """
    index = column_index(group.column)
    if index is None or index >= column_count:
        return 0.0

    base_keys: list[str] = []
    for key in group.compartments:
        parsed = parse_compartment_key(key)
        base_key = parsed.base_key if parsed else key
        if base_key not in base_keys:
            base_keys.append(base_key)

    total = 0.0
    for base_key in base_keys:
        compartment = compartments.get(base_key)
        if compartment is None or compartment.column_index != index:
            continue
        total += max(compartment.span, 0.0)
    return total


@dataclass(frozen=True)
class CoordinateMapper:
    """Maps floor-relative heights (cm) onto screen Y coordinates.

    Screen Y grows downwards, so the floor maps to
    ``front_view_y + scaled_height`` and higher points map upwards. Inputs
    are clamped to [0, height] before mapping so nothing is drawn outside
    the wardrobe outline.
    """

    front_view_y: float
    scaled_height: float
    scale: float
    height: float
    column_heights: dict[int, float] = field(default_factory=dict)

    def map_y(self, y_cm: float) -> float:
        clamped = max(0.0, min(self.height, y_cm))
        return self.front_view_y + self.scaled_height - clamped * self.scale

    def map_y_for_column(self, y_cm: float, index: int) -> float:
        column_height = self.column_heights.get(index, self.height)
        clamped = max(0.0, min(column_height, y_cm))
        return self.front_view_y + self.scaled_height - clamped * self.scale

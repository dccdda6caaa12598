"""Front-elevation blueprint rendering.

This module renders an SVG front view of a configured wardrobe showing the
column layout, shelves, module splits, compartment labels and door groups.
All vertical positions go through CoordinateMapper so the drawing uses the
same geometry as the cut list.
"""

from __future__ import annotations

from wardrobes.domain.entities import WardrobeConfig
from wardrobes.domain.geometry import (
    CoordinateMapper,
    build_columns,
    compartment_map,
    resolve_column_spans,
    resolve_compartments,
)
from wardrobes.domain.value_objects import ColumnBlock, DoorType

BLUEPRINT_COLORS: dict[str, str] = {
    "carcass": "#C8A882",  # Light oak
    "compartment": "#F5F0E6",  # Cream
    "shelf": "#A0785A",  # Walnut
    "module_boundary": "#8B4513",  # Saddle brown
    "base": "#6B6B6B",  # Gray
    "door": "#87CEEB",  # Sky blue
    "mirror": "#E0F0FF",  # Pale blue
    "drawer": "#FFA07A",  # Light salmon
    "text": "#000000",
}


class BlueprintRenderer:
    """Renders a wardrobe front elevation as SVG.

    Attributes:
        scale: Pixels per centimeter.
        margin: Blank space around the drawing in pixels.
        show_labels: Whether to print compartment keys and heights.
        show_doors: Whether to overlay door groups.
    """

    def __init__(
        self,
        scale: float = 2.0,
        margin: float = 20.0,
        show_labels: bool = True,
        show_doors: bool = True,
    ) -> None:
        self.scale = scale
        self.margin = margin
        self.show_labels = show_labels
        self.show_doors = show_doors

    def create_mapper(self, config: WardrobeConfig) -> CoordinateMapper:
        columns = build_columns(config.width, config.vertical_boundaries)
        return CoordinateMapper(
            front_view_y=self.margin,
            scaled_height=config.height * self.scale,
            scale=self.scale,
            height=config.height,
            column_heights={c.index: config.column_height(c.index) for c in columns},
        )

    def render_svg(self, config: WardrobeConfig) -> str:
        columns = build_columns(config.width, config.vertical_boundaries)
        mapper = self.create_mapper(config)
        svg_width = config.width * self.scale + 2 * self.margin
        svg_height = config.height * self.scale + 2 * self.margin

        parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{svg_width:.1f}" '
            f'height="{svg_height:.1f}" viewBox="0 0 {svg_width:.1f} {svg_height:.1f}">',
            f"<title>Wardrobe {config.width:g} x {config.height:g} x {config.depth:g} cm</title>",
        ]
        for column in columns:
            parts.append(self._render_column(config, column, mapper))
        if self.show_doors:
            parts.append(self._render_doors(config, columns, mapper))
        parts.append("</svg>")
        return "\n".join(p for p in parts if p)

    def _x(self, x_cm: float) -> float:
        return self.margin + x_cm * self.scale

    def _rect(
        self, x: float, y: float, w: float, h: float, fill: str, **extra: str
    ) -> str:
        attrs = "".join(f' {k.replace("_", "-")}="{v}"' for k, v in extra.items())
        return (
            f'<rect x="{x:.1f}" y="{y:.1f}" width="{max(w, 0):.1f}" '
            f'height="{max(h, 0):.1f}" fill="{fill}" stroke="#000000" '
            f'stroke-width="0.5"{attrs}/>'
        )

    def _render_column(
        self, config: WardrobeConfig, column: ColumnBlock, mapper: CoordinateMapper
    ) -> str:
        spans = resolve_column_spans(config, column.index)
        t = spans.thickness
        x0 = self._x(column.start)
        width = column.width * self.scale
        top = mapper.map_y_for_column(spans.height, column.index)
        floor = mapper.map_y(0)

        parts = [
            f'<g id="column-{column.letter}">',
            self._rect(x0, top, width, floor - top, BLUEPRINT_COLORS["carcass"]),
        ]
        if config.base_offset > 0:
            base_top = mapper.map_y(config.base_offset)
            parts.append(
                self._rect(x0, base_top, width, floor - base_top, BLUEPRINT_COLORS["base"])
            )

        inner_x = x0 + t * self.scale
        inner_w = (column.width - 2 * t) * self.scale
        for compartment in resolve_compartments(config, column.index, spans):
            y_top = mapper.map_y_for_column(compartment.top_y, column.index)
            y_bottom = mapper.map_y_for_column(compartment.bottom_y, column.index)
            parts.append(
                self._rect(
                    inner_x,
                    y_top,
                    inner_w,
                    y_bottom - y_top,
                    BLUEPRINT_COLORS["compartment"],
                    data_key=compartment.key,
                )
            )
            if self.show_labels:
                cx = inner_x + inner_w / 2
                cy = (y_top + y_bottom) / 2
                parts.append(
                    f'<text x="{cx:.1f}" y="{cy:.1f}" font-size="10" '
                    f'text-anchor="middle" fill="{BLUEPRINT_COLORS["text"]}">'
                    f"{compartment.key} ({compartment.height_cm} cm)</text>"
                )

        if spans.module_boundary is not None:
            y = mapper.map_y_for_column(spans.module_boundary + t, column.index)
            parts.append(
                self._rect(
                    inner_x, y, inner_w, 2 * t * self.scale, BLUEPRINT_COLORS["module_boundary"]
                )
            )
        for shelf in spans.shelves:
            y = mapper.map_y_for_column(shelf + t / 2, column.index)
            parts.append(
                self._rect(inner_x, y, inner_w, t * self.scale, BLUEPRINT_COLORS["shelf"])
            )
        parts.append("</g>")
        return "\n".join(parts)

    def _render_doors(
        self, config: WardrobeConfig, columns: list[ColumnBlock], mapper: CoordinateMapper
    ) -> str:
        compartments = compartment_map(config, columns)
        by_letter = {c.letter: c for c in columns}
        parts = ['<g id="doors" fill-opacity="0.35">']
        for group in config.door_groups:
            column = by_letter.get(group.column)
            if column is None or group.type is DoorType.NONE:
                continue
            cells = [
                compartments[key]
                for key in {k.split(".")[0] for k in group.compartments}
                if key in compartments and compartments[key].column_index == column.index
            ]
            if not cells:
                continue
            y_top = mapper.map_y_for_column(max(c.top_y for c in cells), column.index)
            y_bottom = mapper.map_y_for_column(min(c.bottom_y for c in cells), column.index)
            if group.type.is_drawer_style:
                fill = BLUEPRINT_COLORS["drawer"]
            elif group.type.is_mirror:
                fill = BLUEPRINT_COLORS["mirror"]
            else:
                fill = BLUEPRINT_COLORS["door"]
            x0 = self._x(column.start)
            leaf_w = column.width * self.scale
            leaves = 2 if group.type.is_double else 1
            for leaf in range(leaves):
                parts.append(
                    self._rect(
                        x0 + leaf * leaf_w / leaves,
                        y_top,
                        leaf_w / leaves,
                        y_bottom - y_top,
                        fill,
                        data_door=group.id,
                    )
                )
        parts.append("</g>")
        return "\n".join(parts)

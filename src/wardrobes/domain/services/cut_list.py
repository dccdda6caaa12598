"""Cut list and pricing service.

Walks every column, compartment and door group of a wardrobe and emits the
physical panels needed to build it, each priced with the material it is
cut from. Handles are priced alongside but are not part of the panel list.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..constants import (
    BACK_CLEARANCE_CM,
    DEFAULT_BACK_THICKNESS_MM,
    DEFAULT_PANEL_THICKNESS_MM,
    DOOR_CLEARANCE_CM,
    DOUBLE_DOOR_GAP_CM,
    DRAWER_GAP_CM,
    DRAWER_HEIGHT_CM,
    KORPUS_ELEMENT,
)
from ..entities import Catalog, DoorGroup, Material, WardrobeConfig
from ..geometry import (
    ColumnSpans,
    build_columns,
    column_index,
    door_group_height,
    resolve_column_spans,
    resolve_compartments,
)
from ..value_objects import (
    CategoryTotal,
    ColumnBlock,
    Compartment,
    CutList,
    CutListItem,
    DoorType,
    HandleTotal,
    MaterialCategory,
    PanelType,
    PriceBreakdown,
    parse_compartment_key,
)

logger = logging.getLogger(__name__)

__all__ = [
    "CatalogError",
    "CutListBuilder",
    "CutListError",
    "DrawerLayout",
    "ResolvedMaterials",
    "calculate_cut_list",
    "layout_drawers",
]


class CatalogError(Exception):
    """Raised when a referenced material cannot be found in the catalog."""

    def __init__(self, message: str, material_id: int | None = None) -> None:
        self.material_id = material_id
        super().__init__(message)


class CutListError(Exception):
    """Raised when a built cut list has unusable totals."""

    pass


@dataclass(frozen=True)
class ResolvedMaterials:
    """Body, front and back materials selected for one wardrobe."""

    body: Material
    front: Material
    back: Material


@dataclass(frozen=True)
class DrawerLayout:
    """Drawer stack at the bottom of one compartment.

    Attributes:
        count: Drawer fronts actually fitted.
        capacity: Drawer fronts that would fit in the whole compartment.
        top_y: Upper edge of the top drawer front, or the compartment floor.
        auto_shelf: Whether a shelf closes off the space above the drawers.
    """

    count: int
    capacity: int
    top_y: float
    auto_shelf: bool


def layout_drawers(
    compartment: Compartment, requested: int, thickness: float
) -> DrawerLayout:
    """Fit drawer fronts into a compartment from the floor up.

    A positive ``requested`` count is capped at capacity; zero fills the
    compartment. When the drawers leave room for at least one panel
    thickness above them, an automatic shelf is placed on top.
    """
    per_drawer = DRAWER_HEIGHT_CM + DRAWER_GAP_CM
    capacity = max(0, math.floor((compartment.span + DRAWER_GAP_CM) / per_drawer))
    count = min(requested, capacity) if requested > 0 else capacity
    if count == 0:
        return DrawerLayout(
            count=0, capacity=capacity, top_y=compartment.bottom_y, auto_shelf=False
        )

    top_y = compartment.bottom_y + DRAWER_HEIGHT_CM + (count - 1) * per_drawer
    auto_shelf = (
        count < capacity and compartment.top_y - (top_y + DRAWER_GAP_CM) >= thickness
    )
    return DrawerLayout(count=count, capacity=capacity, top_y=top_y, auto_shelf=auto_shelf)


class CutListBuilder:
    """Builds a priced cut list for a wardrobe from a catalog snapshot.

    Panel codes:
        SL / SD            outer left / right side
        VS{n}L / VS{n}D    sides either side of the n-th column seam
        {C}-DON / {C}-GOR  column bottom / top
        {C}-MB1 / {C}-MB2  panels either side of a module split
        {C}-P{n}           shelves, numbered across both modules
        {K}-Z              back panel of compartment K
        {K}-F{n}           drawer fronts
        {K}-PA             shelf above drawers
        {K}-VD             centre vertical divider
        {K}-V.L / .D / -V  door leaves, keyed by the first door compartment
    """

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog

    def resolve_materials(self, config: WardrobeConfig) -> ResolvedMaterials:
        """Look up the body, front and back materials.

        The body material is mandatory. A missing front selection falls
        back to the body material and a missing back selection to the first
        catalog material tagged as a back panel. A selection that is present
        but not in the catalog is always an error.

        Raises:
            CatalogError: If a selected material is not in the catalog.
        """
        body = self._require(config.selected_material_id, "body")

        if config.selected_front_material_id is None:
            front = body
        else:
            front = self._require(config.selected_front_material_id, "front")

        if config.selected_back_material_id is None:
            back = self.catalog.first_back_material()
            if back is None:
                raise CatalogError("No back panel material available in catalog")
        else:
            back = self._require(config.selected_back_material_id, "back")

        return ResolvedMaterials(body=body, front=front, back=back)

    def _require(self, material_id: int, role: str) -> Material:
        material = self.catalog.find_material(material_id)
        if material is None:
            raise CatalogError(
                f"Unknown {role} material id: {material_id}", material_id=material_id
            )
        return material

    def build(self, config: WardrobeConfig) -> CutList:
        """Build the cut list for one wardrobe.

        Raises:
            CatalogError: If a selected or per-door material is unknown.
            CutListError: If the resulting cost or area is not finite or the
                total area is not positive.
        """
        materials = self.resolve_materials(config)
        columns = build_columns(config.width, config.vertical_boundaries)

        items: list[CutListItem] = []
        items.extend(self._side_panels(config, columns, materials))

        compartments_by_key: dict[str, Compartment] = {}
        per_column: list[list[Compartment]] = []
        for column in columns:
            spans = resolve_column_spans(config, column.index)
            compartments = resolve_compartments(config, column.index, spans)
            per_column.append(compartments)
            compartments_by_key.update((c.key, c) for c in compartments)

            items.extend(self._carcass_panels(config, column, spans, materials))
            for compartment in compartments:
                items.extend(
                    self._compartment_panels(config, column, compartment, materials)
                )

        for group in config.door_groups:
            items.extend(
                self._door_panels(config, group, columns, compartments_by_key, materials)
            )

        handles = self._handle_total(config)
        cut_list = self._summarize(items, handles, materials)
        logger.debug(
            f"Built cut list with {len(cut_list.items)} panels, "
            f"{cut_list.total_area:.3f} m2, total {cut_list.total_cost:.2f}"
        )
        return cut_list

    # -- panel factories -------------------------------------------------

    def _panel(
        self,
        code: str,
        description: str,
        width: float,
        height: float,
        element: str,
        category: MaterialCategory,
        panel_type: PanelType,
        material: Material,
    ) -> CutListItem | None:
        """Create a priced panel, or None when either side is not positive."""
        if width <= 0 or height <= 0:
            logger.debug(f"Skipping degenerate panel {code} ({width} x {height})")
            return None
        area = width * height / 10_000
        if category is MaterialCategory.BACK:
            default_thickness = DEFAULT_BACK_THICKNESS_MM
        else:
            default_thickness = DEFAULT_PANEL_THICKNESS_MM
        return CutListItem(
            code=code,
            description=description,
            width_cm=width,
            height_cm=height,
            thickness_mm=material.thickness or default_thickness,
            area_m2=area,
            cost=area * material.price,
            element=element,
            material_type=category,
            panel_type=panel_type,
        )

    def _korpus(
        self,
        materials: ResolvedMaterials,
        code: str,
        description: str,
        width: float,
        height: float,
        element: str,
        panel_type: PanelType,
    ) -> CutListItem | None:
        return self._panel(
            code,
            description,
            width,
            height,
            element,
            MaterialCategory.KORPUS,
            panel_type,
            materials.body,
        )

    def _side_panels(
        self,
        config: WardrobeConfig,
        columns: list[ColumnBlock],
        materials: ResolvedMaterials,
    ) -> list[CutListItem]:
        depth = config.depth
        first, last = columns[0], columns[-1]
        panels = [
            self._korpus(
                materials,
                "SL",
                "Left side",
                depth,
                config.column_height(first.index),
                KORPUS_ELEMENT,
                PanelType.SIDE,
            ),
            self._korpus(
                materials,
                "SD",
                "Right side",
                depth,
                config.column_height(last.index),
                KORPUS_ELEMENT,
                PanelType.SIDE,
            ),
        ]
        for seam, (left, right) in enumerate(zip(columns, columns[1:]), start=1):
            panels.append(
                self._korpus(
                    materials,
                    f"VS{seam}L",
                    f"Seam {seam} side of column {left.letter}",
                    depth,
                    config.column_height(left.index),
                    KORPUS_ELEMENT,
                    PanelType.SEAM_SIDE,
                )
            )
            panels.append(
                self._korpus(
                    materials,
                    f"VS{seam}D",
                    f"Seam {seam} side of column {right.letter}",
                    depth,
                    config.column_height(right.index),
                    KORPUS_ELEMENT,
                    PanelType.SEAM_SIDE,
                )
            )
        return [p for p in panels if p is not None]

    def _carcass_panels(
        self,
        config: WardrobeConfig,
        column: ColumnBlock,
        spans: ColumnSpans,
        materials: ResolvedMaterials,
    ) -> list[CutListItem]:
        letter = column.letter
        inner_width = column.width - 2 * spans.thickness
        depth = config.depth

        panels = [
            self._korpus(
                materials,
                f"{letter}-DON",
                f"Bottom panel {letter}",
                inner_width,
                depth,
                letter,
                PanelType.BOTTOM,
            ),
            self._korpus(
                materials,
                f"{letter}-GOR",
                f"Top panel {letter}",
                inner_width,
                depth,
                letter,
                PanelType.TOP,
            ),
        ]
        if spans.is_split:
            for n, where in ((1, "lower"), (2, "upper")):
                panels.append(
                    self._korpus(
                        materials,
                        f"{letter}-MB{n}",
                        f"Module boundary {letter} ({where})",
                        inner_width,
                        depth,
                        letter,
                        PanelType.MODULE_BOUNDARY,
                    )
                )
        for n, _shelf_y in enumerate(spans.shelves, start=1):
            panels.append(
                self._korpus(
                    materials,
                    f"{letter}-P{n}",
                    f"Shelf {letter} {n}",
                    inner_width,
                    depth,
                    letter,
                    PanelType.SHELF,
                )
            )
        return [p for p in panels if p is not None]

    def _compartment_panels(
        self,
        config: WardrobeConfig,
        column: ColumnBlock,
        compartment: Compartment,
        materials: ResolvedMaterials,
    ) -> list[CutListItem]:
        key = compartment.key
        t = config.thickness_cm
        inner_width = column.width - 2 * t
        extras = config.extras_for(key)

        panels: list[CutListItem | None] = [
            self._panel(
                f"{key}-Z",
                f"Back panel {key}",
                column.width - BACK_CLEARANCE_CM,
                compartment.span,
                key,
                MaterialCategory.BACK,
                PanelType.BACK,
                materials.back,
            )
        ]

        drawers = None
        if extras.drawers:
            drawers = layout_drawers(compartment, extras.drawers_count, t)
            for n in range(1, drawers.count + 1):
                panels.append(
                    self._panel(
                        f"{key}-F{n}",
                        f"Drawer front {key} {n}",
                        inner_width,
                        DRAWER_HEIGHT_CM,
                        key,
                        MaterialCategory.FRONT,
                        PanelType.DRAWER_FRONT,
                        materials.front,
                    )
                )
            if drawers.auto_shelf:
                panels.append(
                    self._korpus(
                        materials,
                        f"{key}-PA",
                        f"Shelf above drawers {key}",
                        inner_width,
                        config.depth,
                        key,
                        PanelType.AUTO_SHELF,
                    )
                )

        if extras.vertical_divider:
            divider_from = compartment.bottom_y
            if drawers is not None and drawers.count > 0:
                above = drawers.top_y + DRAWER_GAP_CM + (t if drawers.auto_shelf else 0)
                divider_from = min(max(above, compartment.bottom_y), compartment.top_y)
            panels.append(
                self._korpus(
                    materials,
                    f"{key}-VD",
                    f"Vertical divider {key}",
                    config.depth,
                    compartment.top_y - divider_from,
                    key,
                    PanelType.DIVIDER,
                )
            )
        return [p for p in panels if p is not None]

    def _door_panels(
        self,
        config: WardrobeConfig,
        group: DoorGroup,
        columns: list[ColumnBlock],
        compartments: dict[str, Compartment],
        materials: ResolvedMaterials,
    ) -> list[CutListItem]:
        if group.type is DoorType.NONE or not group.compartments:
            return []
        index = column_index(group.column)
        if index is None or index >= len(columns):
            logger.warning(f"Door group {group.id} targets unknown column {group.column}")
            return []

        height = door_group_height(group, compartments, len(columns))
        parsed = parse_compartment_key(group.compartments[0])
        element = parsed.base_key if parsed else group.compartments[0]

        material = materials.front
        if config.is_per_door and group.material_id is not None:
            material = self._require(group.material_id, "door")

        available = columns[index].width - DOOR_CLEARANCE_CM
        if group.type.is_double:
            leaf_width = (available - DOUBLE_DOOR_GAP_CM) / 2
            leaves = [
                (f"{element}-V.L", f"Door left leaf {element}"),
                (f"{element}-V.D", f"Door right leaf {element}"),
            ]
        elif group.type in (DoorType.LEFT, DoorType.LEFT_MIRROR):
            leaf_width = available
            leaves = [(f"{element}-V.L", f"Door left {element}")]
        elif group.type in (DoorType.RIGHT, DoorType.RIGHT_MIRROR):
            leaf_width = available
            leaves = [(f"{element}-V.D", f"Door right {element}")]
        else:
            leaf_width = available
            leaves = [(f"{element}-V", f"Drawer-style front {element}")]

        panels = [
            self._panel(
                code,
                description,
                leaf_width,
                height,
                element,
                MaterialCategory.FRONT,
                PanelType.DOOR,
                material,
            )
            for code, description in leaves
        ]
        return [p for p in panels if p is not None]

    # -- totals ----------------------------------------------------------

    def _handle_total(self, config: WardrobeConfig) -> HandleTotal:
        """Count handles over all door groups and price them by finish."""
        count = 0
        price = 0.0
        for group in config.door_groups:
            per_group = group.type.handle_count
            if per_group == 0:
                continue
            handle_id = config.global_handle_id
            finish_id = config.global_handle_finish
            if config.is_per_door:
                handle_id = group.handle_id or handle_id
                finish_id = group.handle_finish or finish_id

            unit_price = 0.0
            handle = self.catalog.find_handle(handle_id)
            finish = handle.find_finish(finish_id) if handle else None
            if finish is not None:
                unit_price = finish.price
            elif handle_id is not None:
                logger.warning(
                    f"Handle {handle_id} / finish {finish_id} not in catalog, "
                    f"pricing door group {group.id} handles at 0"
                )
            count += per_group
            price += per_group * unit_price
        return HandleTotal(count=count, price=price)

    def _summarize(
        self,
        items: list[CutListItem],
        handles: HandleTotal,
        materials: ResolvedMaterials,
    ) -> CutList:
        totals: dict[MaterialCategory, CategoryTotal] = {}
        for category in MaterialCategory:
            in_category = [i for i in items if i.material_type is category]
            totals[category] = CategoryTotal(
                area_m2=sum(i.area_m2 for i in in_category),
                price=sum(i.cost for i in in_category),
            )

        total_area = sum(i.area_m2 for i in items)
        total_cost = sum(i.cost for i in items) + handles.price
        if not math.isfinite(total_area) or not math.isfinite(total_cost):
            raise CutListError("Cut list totals are not finite")
        if total_area <= 0:
            raise CutListError(f"Cut list total area must be positive, got {total_area}")

        return CutList(
            items=tuple(items),
            total_area=total_area,
            total_cost=total_cost,
            price_per_m2=materials.body.price,
            front_price_per_m2=materials.front.price,
            back_price_per_m2=materials.back.price,
            price_breakdown=PriceBreakdown(
                korpus=totals[MaterialCategory.KORPUS],
                front=totals[MaterialCategory.FRONT],
                back=totals[MaterialCategory.BACK],
                handles=handles,
            ),
        )


def calculate_cut_list(config: WardrobeConfig, catalog: Catalog) -> CutList:
    """Build the cut list for ``config`` using ``catalog`` prices."""
    return CutListBuilder(catalog).build(config)

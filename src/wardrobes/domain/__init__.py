"""Domain layer - wardrobe geometry, cut lists and pricing rules."""

from .entities import (
    Catalog,
    CompartmentExtras,
    DoorGroup,
    Handle,
    HandleFinish,
    Material,
    WardrobeConfig,
)
from .geometry import (
    ColumnSpans,
    CoordinateMapper,
    ModuleSpans,
    build_columns,
    column_index,
    compartment_map,
    door_group_height,
    resolve_column_spans,
    resolve_compartments,
)
from .services import (
    CatalogError,
    CutListBuilder,
    CutListError,
    DoorMetrics,
    calculate_cut_list,
    compute_door_metrics,
)
from .value_objects import (
    CategoryTotal,
    ColumnBlock,
    Compartment,
    CutList,
    CutListItem,
    DoorType,
    HandleTotal,
    MaterialCategory,
    PanelType,
    ParsedCompartmentKey,
    PriceBreakdown,
    column_letter,
    parse_compartment_key,
)

__all__ = [
    "Catalog",
    "CatalogError",
    "CategoryTotal",
    "ColumnBlock",
    "ColumnSpans",
    "Compartment",
    "CompartmentExtras",
    "CoordinateMapper",
    "CutList",
    "CutListBuilder",
    "CutListError",
    "CutListItem",
    "DoorGroup",
    "DoorMetrics",
    "DoorType",
    "Handle",
    "HandleFinish",
    "HandleTotal",
    "Material",
    "MaterialCategory",
    "ModuleSpans",
    "PanelType",
    "ParsedCompartmentKey",
    "PriceBreakdown",
    "WardrobeConfig",
    "build_columns",
    "calculate_cut_list",
    "column_index",
    "column_letter",
    "compartment_map",
    "compute_door_metrics",
    "door_group_height",
    "parse_compartment_key",
    "resolve_column_spans",
    "resolve_compartments",
]

"""Domain services for wardrobe pricing.

This package provides:
- Cut list generation and material pricing
- Door metrics for pricing rules
"""

from .cut_list import (
    CatalogError,
    CutListBuilder,
    CutListError,
    DrawerLayout,
    ResolvedMaterials,
    calculate_cut_list,
    layout_drawers,
)
from .door_metrics import DoorMetrics, compute_door_metrics, resolve_handle_names

__all__ = [
    "CatalogError",
    "CutListBuilder",
    "CutListError",
    "DoorMetrics",
    "DrawerLayout",
    "ResolvedMaterials",
    "calculate_cut_list",
    "compute_door_metrics",
    "layout_drawers",
    "resolve_handle_names",
]

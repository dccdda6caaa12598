"""Wardrobe construction constants.

This module provides:
- The module split threshold for tall columns
- Drawer front sizing
- Door and back panel clearances
- Fallback panel thicknesses when a catalog row has none
"""

from __future__ import annotations


# Columns taller than this (cm) may be split into a bottom and a top module
SPLIT_THRESHOLD_CM: float = 200.0

# Drawer fronts (cm)
DRAWER_HEIGHT_CM: float = 10.0
DRAWER_GAP_CM: float = 1.0

# Door leaves (cm)
DOOR_CLEARANCE_CM: float = 0.1
DOUBLE_DOOR_GAP_CM: float = 0.3

# Total clearance subtracted from the width of a back panel (cm)
BACK_CLEARANCE_CM: float = 0.2

# Fallback thicknesses in millimeters
DEFAULT_PANEL_THICKNESS_MM: float = 18.0
DEFAULT_BACK_THICKNESS_MM: float = 5.0

# Catalog category tags that identify back-panel sheet goods
BACK_CATEGORY_TAGS: tuple[str, ...] = ("leđa", "ledja", "leda", "back")

# Element label for panels shared across the whole carcass
KORPUS_ELEMENT: str = "KORPUS"

CURRENCY: str = "RSD"

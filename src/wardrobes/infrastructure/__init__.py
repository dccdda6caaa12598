"""Infrastructure layer - formatters, exporters and rendering."""

from .blueprint import BLUEPRINT_COLORS, BlueprintRenderer
from .formatters import (
    AdjustmentFormatter,
    CutListFormatter,
    DoorMetricsFormatter,
    JsonExporter,
    PriceBreakdownFormatter,
)

__all__ = [
    "AdjustmentFormatter",
    "BLUEPRINT_COLORS",
    "BlueprintRenderer",
    "CutListFormatter",
    "DoorMetricsFormatter",
    "JsonExporter",
    "PriceBreakdownFormatter",
]

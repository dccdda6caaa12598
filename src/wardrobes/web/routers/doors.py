"""Door metrics endpoints."""

from fastapi import APIRouter

from wardrobes.application.config import (
    config_to_catalog,
    config_to_wardrobe,
    load_catalog_from_dict,
    load_wardrobe_from_dict,
)
from wardrobes.domain.services import DoorMetrics, compute_door_metrics
from wardrobes.web.dependencies import DefaultCatalogDep
from wardrobes.web.schemas.requests import DoorMetricsRequest
from wardrobes.web.schemas.responses import DoorMetricsSchema

router = APIRouter(prefix="/door-metrics", tags=["doors"])


def door_metrics_to_schema(metrics: DoorMetrics) -> DoorMetricsSchema:
    return DoorMetricsSchema(**metrics.to_dict())


@router.post("", response_model=DoorMetricsSchema)
async def compute_metrics(
    request: DoorMetricsRequest,
    default_catalog: DefaultCatalogDep,
) -> DoorMetricsSchema:
    """Compute door counts and heights.

    The catalog is optional here; without one, handle names are empty.
    """
    config = config_to_wardrobe(load_wardrobe_from_dict(request.wardrobe))
    if request.catalog is not None:
        handles = config_to_catalog(load_catalog_from_dict(request.catalog)).handles
    elif default_catalog is not None:
        handles = default_catalog.handles
    else:
        handles = ()
    return door_metrics_to_schema(compute_door_metrics(config, handles))

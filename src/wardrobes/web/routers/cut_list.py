"""Cut list endpoints."""

from fastapi import APIRouter

from wardrobes.application.config import config_to_wardrobe, load_wardrobe_from_dict
from wardrobes.application.factory import get_factory
from wardrobes.domain.value_objects import CutList
from wardrobes.web.dependencies import DefaultCatalogDep, resolve_catalog
from wardrobes.web.schemas.requests import CutListRequest
from wardrobes.web.schemas.responses import (
    CategoryTotalSchema,
    CutListItemSchema,
    CutListResponse,
    HandleTotalSchema,
    PriceBreakdownSchema,
)

router = APIRouter(prefix="/cut-list", tags=["cut-list"])


def cut_list_to_schema(cut_list: CutList) -> CutListResponse:
    """Convert a CutList to its response schema."""
    breakdown = cut_list.price_breakdown
    return CutListResponse(
        items=[
            CutListItemSchema(
                code=item.code,
                description=item.description,
                width_cm=item.width_cm,
                height_cm=item.height_cm,
                thickness_mm=item.thickness_mm,
                area_m2=item.area_m2,
                cost=item.cost,
                element=item.element,
                material_type=item.material_type.value,
            )
            for item in cut_list.items
        ],
        total_area=cut_list.total_area,
        total_cost=cut_list.total_cost,
        price_per_m2=cut_list.price_per_m2,
        front_price_per_m2=cut_list.front_price_per_m2,
        back_price_per_m2=cut_list.back_price_per_m2,
        price_breakdown=PriceBreakdownSchema(
            korpus=CategoryTotalSchema(
                area_m2=breakdown.korpus.area_m2, price=breakdown.korpus.price
            ),
            front=CategoryTotalSchema(
                area_m2=breakdown.front.area_m2, price=breakdown.front.price
            ),
            back=CategoryTotalSchema(
                area_m2=breakdown.back.area_m2, price=breakdown.back.price
            ),
            handles=HandleTotalSchema(
                count=breakdown.handles.count, price=breakdown.handles.price
            ),
        ),
    )


@router.post("", response_model=CutListResponse)
async def compute_cut_list(
    request: CutListRequest,
    default_catalog: DefaultCatalogDep,
) -> CutListResponse:
    """Compute the priced cut list for a wardrobe.

    Raises:
        ConfigError: If the wardrobe or catalog is invalid (422).
        CatalogError: If a selected material is missing (422).
    """
    catalog = resolve_catalog(request.catalog, default_catalog)
    config = config_to_wardrobe(load_wardrobe_from_dict(request.wardrobe))
    cut_list = get_factory(catalog).create_cut_list_builder().build(config)
    return cut_list_to_schema(cut_list)

"""Quote endpoints.

The price is always recomputed here from the stored configuration; any
price a client computed for display is never accepted as input.
"""

from fastapi import APIRouter

from wardrobes.application import CustomerInput, get_factory
from wardrobes.application.config import (
    config_to_rules,
    config_to_wardrobe,
    load_rules_from_dict,
    load_wardrobe_from_dict,
)
from wardrobes.web.dependencies import DefaultCatalogDep, resolve_catalog
from wardrobes.web.routers.cut_list import cut_list_to_schema
from wardrobes.web.routers.doors import door_metrics_to_schema
from wardrobes.web.schemas.requests import QuoteRequest
from wardrobes.web.schemas.responses import AdjustmentSchema, QuoteResponse

router = APIRouter(prefix="/quote", tags=["quote"])


@router.post("", response_model=QuoteResponse)
async def create_quote(
    request: QuoteRequest,
    default_catalog: DefaultCatalogDep,
) -> QuoteResponse:
    """Price a wardrobe and apply the pricing rules.

    Raises:
        ConfigError: If any document is invalid (422).
        PricingError: If the price cannot be computed (422).
    """
    catalog = resolve_catalog(request.catalog, default_catalog)
    config = config_to_wardrobe(load_wardrobe_from_dict(request.wardrobe))
    rules = config_to_rules(load_rules_from_dict(request.rules))
    customer = CustomerInput(
        tags=tuple(request.customer.tags),
        email=request.customer.email,
        order_count=request.customer.order_count,
    )

    quote = get_factory(catalog).create_quote_command().execute(
        config, rules, customer=customer, order_city=request.order_city
    )

    shown = quote.adjustments if request.include_hidden else quote.visible_adjustments
    return QuoteResponse(
        cut_list=cut_list_to_schema(quote.cut_list),
        door_metrics=door_metrics_to_schema(quote.door_metrics),
        base_total=quote.base_total,
        adjustments=[
            AdjustmentSchema(
                rule_id=a.rule_id,
                rule_name=a.rule_name,
                action_type=a.action_type.value,
                description=a.description,
                amount=a.amount,
                visible=a.visible,
            )
            for a in shown
        ],
        adjusted_total=quote.pricing.adjusted_total,
        final_total=quote.final_total,
        snapshot=quote.to_dict(),
    )

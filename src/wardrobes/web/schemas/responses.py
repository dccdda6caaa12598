"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class CutListItemSchema(BaseModel):
    """One panel in the cut list."""

    code: str = Field(..., description="Panel code, e.g. SL or A-P1")
    description: str = Field(..., description="Human readable panel name")
    width_cm: float = Field(..., description="Width in cm")
    height_cm: float = Field(..., description="Height in cm")
    thickness_mm: float = Field(..., description="Thickness in mm")
    area_m2: float = Field(..., description="Area in square meters")
    cost: float = Field(..., description="Area times material price")
    element: str = Field(..., description="Owning element (column letter, sides, doors)")
    material_type: str = Field(..., description="korpus, front or back")


class CategoryTotalSchema(BaseModel):
    area_m2: float
    price: float


class HandleTotalSchema(BaseModel):
    count: int
    price: float


class PriceBreakdownSchema(BaseModel):
    """Area and price per material category."""

    korpus: CategoryTotalSchema
    front: CategoryTotalSchema
    back: CategoryTotalSchema
    handles: HandleTotalSchema


class CutListResponse(BaseModel):
    """Response for cut list computation."""

    items: list[CutListItemSchema] = Field(default_factory=list)
    total_area: float = Field(..., description="Total panel area in m²")
    total_cost: float = Field(..., description="Total cost including handles")
    price_per_m2: float
    front_price_per_m2: float
    back_price_per_m2: float
    price_breakdown: PriceBreakdownSchema


class DoorMetricsSchema(BaseModel):
    """Door counts, height extremes and handle totals."""

    door_count: int
    double_door_count: int
    single_door_count: int
    mirror_door_count: int
    drawer_style_door_count: int
    max_door_height: float = Field(..., description="Tallest door in cm")
    min_door_height: float = Field(..., description="Shortest door in cm")
    handle_count: int
    handle_name: str
    handle_finish_name: str


class AdjustmentSchema(BaseModel):
    """One signed price adjustment produced by a rule."""

    rule_id: str
    rule_name: str
    action_type: str
    description: str
    amount: float
    visible: bool


class QuoteResponse(BaseModel):
    """Response for a priced quote."""

    cut_list: CutListResponse
    door_metrics: DoorMetricsSchema
    base_total: float = Field(..., description="Rounded cut list cost")
    adjustments: list[AdjustmentSchema] = Field(default_factory=list)
    adjusted_total: float | None = Field(
        default=None, description="Total after adjustments; null when no rule applied"
    )
    final_total: float = Field(..., description="Price to charge")
    snapshot: dict[str, Any] = Field(
        default_factory=dict, description="Order snapshot to persist"
    )


class RuleIssueSchema(BaseModel):
    path: str
    message: str


class RuleValidationResponse(BaseModel):
    """Response for rule set validation."""

    is_valid: bool = Field(..., description="Whether the rule set can be loaded")
    rule_count: int = Field(default=0, description="Number of rules loaded")
    errors: list[RuleIssueSchema] = Field(default_factory=list)
    warnings: list[RuleIssueSchema] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    """Error response body."""

    error: str
    error_type: str
    details: Any = None

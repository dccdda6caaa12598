"""Pydantic schemas for the REST API."""

from wardrobes.web.schemas.requests import (
    CustomerRequest,
    CutListRequest,
    DoorMetricsRequest,
    QuoteRequest,
    RulesValidateRequest,
)
from wardrobes.web.schemas.responses import (
    AdjustmentSchema,
    CategoryTotalSchema,
    CutListItemSchema,
    CutListResponse,
    DoorMetricsSchema,
    ErrorResponseSchema,
    HandleTotalSchema,
    PriceBreakdownSchema,
    QuoteResponse,
    RuleIssueSchema,
    RuleValidationResponse,
)

__all__ = [
    # Requests
    "CustomerRequest",
    "CutListRequest",
    "DoorMetricsRequest",
    "QuoteRequest",
    "RulesValidateRequest",
    # Responses
    "AdjustmentSchema",
    "CategoryTotalSchema",
    "CutListItemSchema",
    "CutListResponse",
    "DoorMetricsSchema",
    "ErrorResponseSchema",
    "HandleTotalSchema",
    "PriceBreakdownSchema",
    "QuoteResponse",
    "RuleIssueSchema",
    "RuleValidationResponse",
]

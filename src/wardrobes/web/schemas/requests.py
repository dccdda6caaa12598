"""Pydantic request schemas for the REST API.

Documents are accepted as raw JSON and validated with the same loaders the
CLI uses, so the API and the CLI report identical validation errors.
"""

from typing import Any

from pydantic import BaseModel, Field


class CustomerRequest(BaseModel):
    """Customer facts available to pricing rules."""

    tags: list[str] = Field(default_factory=list, description="Customer tags")
    email: str | None = Field(default=None, description="Customer email")
    order_count: int = Field(default=0, ge=0, description="Previous order count")


class CutListRequest(BaseModel):
    """Request for computing a cut list."""

    wardrobe: dict[str, Any] = Field(..., description="Wardrobe configuration JSON")
    catalog: dict[str, Any] | None = Field(
        default=None, description="Catalog JSON; defaults to the server catalog"
    )


class DoorMetricsRequest(BaseModel):
    """Request for computing door metrics."""

    wardrobe: dict[str, Any] = Field(..., description="Wardrobe configuration JSON")
    catalog: dict[str, Any] | None = Field(
        default=None, description="Catalog JSON, used for handle names"
    )


class QuoteRequest(BaseModel):
    """Request for an authoritative, rule-adjusted price."""

    wardrobe: dict[str, Any] = Field(..., description="Wardrobe configuration JSON")
    catalog: dict[str, Any] | None = Field(
        default=None, description="Catalog JSON; defaults to the server catalog"
    )
    rules: list[dict[str, Any]] | dict[str, Any] = Field(
        default_factory=list, description="Pricing rules, as a list or {'rules': [...]}"
    )
    customer: CustomerRequest = Field(default_factory=CustomerRequest)
    order_city: str | None = Field(default=None, description="Delivery city")
    include_hidden: bool = Field(
        default=False, description="Include internal-only adjustments"
    )


class RulesValidateRequest(BaseModel):
    """Request for validating a rule set."""

    rules: list[dict[str, Any]] | dict[str, Any] = Field(
        ..., description="Pricing rules, as a list or {'rules': [...]}"
    )

"""Wardrobe configuration schema.

Mirrors the snapshot saved by the configurator: outer dimensions in cm,
panel thickness in mm, boundaries in meters, per-column overrides keyed by
column index, door groups and compartment extras.
"""

from typing import Literal

from pydantic import Field, field_validator, model_validator

from wardrobes.domain.value_objects import DoorType, parse_compartment_key

from .base import ConfigModel, coerce_optional_id


class CompartmentExtrasSchema(ConfigModel):
    """Optional fittings inside one compartment.

    Attributes:
        vertical_divider: Centre divider splitting the compartment.
        drawers: Whether the compartment has a drawer stack.
        drawers_count: Requested drawers; 0 fills the compartment.
        rod: Hanging rod.
        led: LED strip.
    """

    vertical_divider: bool = False
    drawers: bool = False
    drawers_count: int = Field(default=0, ge=0, le=50)
    rod: bool = False
    led: bool = False


class DoorGroupSchema(ConfigModel):
    """One door over one or more compartments of a single column."""

    id: str = Field(..., min_length=1)
    type: DoorType
    column: str = Field(..., pattern=r"^[A-Z]+$", description="Column letter")
    compartments: list[str] = Field(..., min_length=1)
    material_id: int | None = None
    handle_id: str | None = None
    handle_finish: str | None = None

    @field_validator("handle_id", "handle_finish", mode="before")
    @classmethod
    def coerce_ids(cls, v: object) -> object:
        return coerce_optional_id(v)

    @model_validator(mode="after")
    def validate_compartment_keys(self) -> "DoorGroupSchema":
        """Every key must be a compartment of the door's own column."""
        for key in self.compartments:
            parsed = parse_compartment_key(key)
            if parsed is None:
                raise ValueError(f"Invalid compartment key: {key!r}")
            if parsed.column != self.column:
                raise ValueError(
                    f"Compartment {key!r} is not in door column {self.column!r}"
                )
        return self


class WardrobeConfigSchema(ConfigModel):
    """Root schema for one configured wardrobe."""

    width: float = Field(..., gt=0, le=1000, description="Width in cm")
    height: float = Field(..., gt=0, le=400, description="Height in cm")
    depth: float = Field(..., gt=0, le=200, description="Depth in cm")
    panel_thickness: float = Field(
        default=18.0, gt=0, le=50, description="Panel thickness in mm"
    )
    has_base: bool = False
    base_height: float = Field(default=0.0, ge=0, le=50, description="Base in cm")
    vertical_boundaries: list[float] = Field(
        default_factory=list, description="Column seams in meters from the center"
    )
    column_heights: dict[int, float] = Field(default_factory=dict)
    column_horizontal_boundaries: dict[int, list[float]] = Field(
        default_factory=dict, description="Shelf positions in meters from the floor"
    )
    column_module_boundaries: dict[int, float | None] = Field(
        default_factory=dict, description="Module split in meters from the floor"
    )
    column_top_module_shelves: dict[int, list[float]] = Field(default_factory=dict)
    selected_material_id: int
    selected_front_material_id: int | None = None
    selected_back_material_id: int | None = None
    door_groups: list[DoorGroupSchema] = Field(default_factory=list)
    compartment_extras: dict[str, CompartmentExtrasSchema] = Field(
        default_factory=dict
    )
    global_handle_id: str | None = None
    global_handle_finish: str | None = None
    door_settings_mode: Literal["global", "per-door"] = "global"

    @field_validator("global_handle_id", "global_handle_finish", mode="before")
    @classmethod
    def coerce_handle_ids(cls, v: object) -> object:
        return coerce_optional_id(v)

    @field_validator("column_heights")
    @classmethod
    def validate_column_heights(cls, v: dict[int, float]) -> dict[int, float]:
        for index, height in v.items():
            if height <= 0:
                raise ValueError(f"column {index} height must be positive")
        return v

    @field_validator("compartment_extras")
    @classmethod
    def validate_extras_keys(
        cls, v: dict[str, CompartmentExtrasSchema]
    ) -> dict[str, CompartmentExtrasSchema]:
        for key in v:
            if parse_compartment_key(key) is None:
                raise ValueError(f"Invalid compartment key: {key!r}")
        return v

    @model_validator(mode="after")
    def validate_door_group_ids(self) -> "WardrobeConfigSchema":
        """Door group ids must be unique."""
        ids = [group.id for group in self.door_groups]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate door group ids: {', '.join(duplicates)}")
        return self

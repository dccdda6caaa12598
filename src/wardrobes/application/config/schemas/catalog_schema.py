"""Material and handle catalog schema."""

from pydantic import Field, field_validator, model_validator

from .base import ConfigModel, coerce_optional_id


class MaterialSchema(ConfigModel):
    id: int
    name: str = Field(..., min_length=1)
    price: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Price per square meter"
    )
    thickness: float | None = Field(default=None, gt=0, description="Thickness in mm")
    categories: list[str] = Field(default_factory=list)


class HandleFinishSchema(ConfigModel):
    id: int
    name: str = Field(..., min_length=1)
    price: float = Field(
        default=0.0, ge=0, allow_inf_nan=False, description="Price per handle"
    )
    legacy_id: str | None = None

    @field_validator("legacy_id", mode="before")
    @classmethod
    def coerce_legacy_id(cls, v: object) -> object:
        return coerce_optional_id(v)


class HandleSchema(ConfigModel):
    id: int
    name: str = Field(..., min_length=1)
    legacy_id: str | None = None
    finishes: list[HandleFinishSchema] = Field(default_factory=list)

    @field_validator("legacy_id", mode="before")
    @classmethod
    def coerce_legacy_id(cls, v: object) -> object:
        return coerce_optional_id(v)


class CatalogSchema(ConfigModel):
    """Materials and handles available for pricing."""

    materials: list[MaterialSchema] = Field(default_factory=list)
    handles: list[HandleSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_material_ids(self) -> "CatalogSchema":
        ids = [m.id for m in self.materials]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(
                f"Duplicate material ids: {', '.join(str(i) for i in duplicates)}"
            )
        return self

"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class LightPositionSchema(BaseModel):
    """A single fixture position."""

    x: float = Field(..., description="Distance from the left wall in feet")
    y: float = Field(..., description="Distance from the top wall in feet")
    radius: float = Field(..., description="Drawn fixture radius in feet")
    type: str = Field(default="regular", description="Light type")


class LightingLayerSchema(BaseModel):
    """Fixtures contributed by one ceiling layer."""

    ceiling_type: str = Field(..., description="Ceiling type of the layer")
    count: int = Field(..., description="Number of fixtures in the layer")
    positions: list[LightPositionSchema] = Field(default_factory=list)


class LayerSummarySchema(BaseModel):
    """Fixture counts for one layer."""

    ceiling_type: str
    count: int
    requested: int | None = Field(default=None, description="Explicit count, if any")
    recommended: int | None = Field(
        default=None, description="Count derived when none is requested"
    )


class LightingSummarySchema(BaseModel):
    """Fixture totals for a plan."""

    total_fixtures: int
    room_area: float = Field(..., description="Room floor area in square feet")
    area_per_fixture: float | None = None
    layers: list[LayerSummarySchema] = Field(default_factory=list)


class LightingOutputSchema(BaseModel):
    """Response for a generated lighting plan."""

    is_valid: bool = Field(..., description="Whether generation was successful")
    ceiling_type: str | None = None
    positions: list[LightPositionSchema] = Field(
        default_factory=list, description="All fixtures in layer order"
    )
    layers: list[LightingLayerSchema] = Field(default_factory=list)
    summary: LightingSummarySchema | None = None
    warnings: list[str] = Field(default_factory=list, description="Warning messages")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class TemplateListItemSchema(BaseModel):
    """Template list item."""

    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")


class TemplateListSchema(BaseModel):
    """Response for template listing."""

    templates: list[TemplateListItemSchema] = Field(
        default_factory=list, description="Available templates"
    )


class TemplateContentSchema(BaseModel):
    """Response for a template sized to a room."""

    name: str = Field(..., description="Template name")
    description: str = Field(..., description="Template description")
    content: dict[str, Any] = Field(..., description="Template configuration content")


class ExportFormatsSchema(BaseModel):
    """Response for listing export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional error details")

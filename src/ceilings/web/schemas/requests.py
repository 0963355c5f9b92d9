"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class LightingRequest(BaseModel):
    """Request for generating a lighting plan from a configuration."""

    config: dict[str, Any] = Field(..., description="Full lighting configuration JSON")
    skip_validation: bool = Field(
        default=False, description="Compute fixtures even if validation fails"
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Lighting configuration JSON")


class ExportRequest(BaseModel):
    """Request for exporting a lighting plan to a specific format."""

    config: dict[str, Any] = Field(..., description="Full lighting configuration JSON")
    scale: float = Field(
        default=30.0, gt=0, le=500, description="SVG scale in pixels per foot"
    )

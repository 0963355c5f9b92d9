"""Pydantic schemas for the REST API."""

from ceilings.web.schemas.requests import (
    ConfigValidateRequest,
    ExportRequest,
    LightingRequest,
)
from ceilings.web.schemas.responses import (
    ErrorResponseSchema,
    ExportFormatsSchema,
    LayerSummarySchema,
    LightingLayerSchema,
    LightingOutputSchema,
    LightingSummarySchema,
    LightPositionSchema,
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "ExportRequest",
    "LightingRequest",
    # Responses
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "LayerSummarySchema",
    "LightPositionSchema",
    "LightingLayerSchema",
    "LightingOutputSchema",
    "LightingSummarySchema",
    "TemplateContentSchema",
    "TemplateListItemSchema",
    "TemplateListSchema",
    "ValidationResultSchema",
]

"""Lighting plan generation endpoints."""

from fastapi import APIRouter

from ceilings.application.config import load_config_from_dict
from ceilings.application.dtos import LightingOutput
from ceilings.web.dependencies import GenerateCommandDep
from ceilings.web.exceptions import LightingGenerationError
from ceilings.web.schemas.requests import LightingRequest
from ceilings.web.schemas.responses import (
    LayerSummarySchema,
    LightingLayerSchema,
    LightingOutputSchema,
    LightingSummarySchema,
    LightPositionSchema,
)

router = APIRouter(prefix="/lighting", tags=["lighting"])


def _lighting_output_to_schema(output: LightingOutput) -> LightingOutputSchema:
    """Convert LightingOutput to response schema."""
    layers = [
        LightingLayerSchema(
            ceiling_type=layer.ceiling_type.value,
            count=layer.count,
            positions=[LightPositionSchema(**p.to_dict()) for p in layer.positions],
        )
        for layer in output.layers
    ]

    summary = None
    if output.summary is not None:
        summary = LightingSummarySchema(
            total_fixtures=output.summary.total_fixtures,
            room_area=output.summary.room_area,
            area_per_fixture=output.summary.area_per_fixture,
            layers=[LayerSummarySchema(**s.to_dict()) for s in output.summary.layers],
        )

    ceiling_type = output.config.ceiling_type if output.config else None
    return LightingOutputSchema(
        is_valid=output.is_valid,
        ceiling_type=ceiling_type.value if ceiling_type else None,
        positions=[LightPositionSchema(**p.to_dict()) for p in output.positions],
        layers=layers,
        summary=summary,
        warnings=output.warnings,
    )


@router.post("", response_model=LightingOutputSchema)
async def generate_lighting(
    request: LightingRequest,
    command: GenerateCommandDep,
) -> LightingOutputSchema:
    """Generate fixture positions from a full configuration.

    Raises:
        ConfigError: If the configuration cannot be parsed (handled as 422).
        LightingGenerationError: If validation fails (handled as 422).
    """
    config = load_config_from_dict(request.config)
    output = command.execute(config, skip_validation=request.skip_validation)

    if not output.is_valid:
        raise LightingGenerationError(output.errors)

    return _lighting_output_to_schema(output)

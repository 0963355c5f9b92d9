"""Configuration validation endpoints."""

from fastapi import APIRouter

from ceilings.application.config import load_config_from_dict, validate_config
from ceilings.web.schemas.requests import ConfigValidateRequest
from ceilings.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a lighting configuration without generating.

    A configuration that cannot be parsed raises ConfigError, which the
    exception handler turns into a 422 response.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[{"message": w.message, "path": w.path} for w in result.warnings],
    )

"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from ceilings.application.config import load_config_from_dict
from ceilings.infrastructure.exporters import ExporterRegistry, SvgExporter
from ceilings.web.dependencies import GenerateCommandDep
from ceilings.web.exceptions import LightingGenerationError, UnsupportedFormatError
from ceilings.web.schemas.requests import ExportRequest
from ceilings.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
async def export_plan(
    format_name: str,
    request: ExportRequest,
    command: GenerateCommandDep,
) -> Response:
    """Export a lighting plan in the requested format.

    Raises:
        UnsupportedFormatError: If the format is not registered (handled as 400).
        ConfigError: If the configuration cannot be parsed (handled as 422).
        LightingGenerationError: If validation fails (handled as 422).
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    config = load_config_from_dict(request.config)
    output = command.execute(config)
    if not output.is_valid:
        raise LightingGenerationError(output.errors)

    exporter_class = ExporterRegistry.get(format_name)
    if exporter_class is SvgExporter:
        exporter = SvgExporter(scale=request.scale)
    else:
        exporter = exporter_class()

    return Response(
        content=exporter.export_string(output),
        media_type=exporter.media_type,
        headers={
            "Content-Disposition": (
                f'attachment; filename="ceiling_plan.{exporter.file_extension}"'
            )
        },
    )

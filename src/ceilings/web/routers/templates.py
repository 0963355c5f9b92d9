"""Template endpoints."""

import json

from fastapi import APIRouter, Query

from ceilings.application.templates.manager import TEMPLATE_METADATA
from ceilings.web.dependencies import TemplateManagerDep
from ceilings.web.schemas.responses import (
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=TemplateListSchema)
async def list_templates(
    manager: TemplateManagerDep,
) -> TemplateListSchema:
    """List all available templates."""
    templates = [
        TemplateListItemSchema(name=name, description=desc)
        for name, desc in manager.list_templates()
    ]
    return TemplateListSchema(templates=templates)


@router.get("/{name}", response_model=TemplateContentSchema)
async def get_template(
    name: str,
    manager: TemplateManagerDep,
    width: float = Query(..., gt=0, le=500, description="Room width in feet"),
    length: float = Query(..., gt=0, le=500, description="Room length in feet"),
    height: float = Query(default=9.0, ge=0, le=100, description="Room height in feet"),
) -> TemplateContentSchema:
    """Get a starter configuration sized to a room.

    Raises:
        TemplateNotFoundError: If template does not exist (handled as 404).
    """
    content = json.loads(manager.get_template(name, width, length, height))
    return TemplateContentSchema(
        name=name,
        description=TEMPLATE_METADATA.get(name, ""),
        content=content,
    )

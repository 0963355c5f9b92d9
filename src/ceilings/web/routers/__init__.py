"""API routers for the REST API."""

from ceilings.web.routers.export import router as export_router
from ceilings.web.routers.lighting import router as lighting_router
from ceilings.web.routers.templates import router as templates_router
from ceilings.web.routers.validate import router as validate_router

__all__ = [
    "export_router",
    "lighting_router",
    "templates_router",
    "validate_router",
]

"""Starter ceiling configurations sized to a room."""

from ceilings.application.templates.manager import (
    TEMPLATE_METADATA,
    TemplateManager,
    TemplateNotFoundError,
)

__all__ = [
    "TemplateManager",
    "TemplateNotFoundError",
    "TEMPLATE_METADATA",
]

"""FastAPI dependency injection for lighting services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from ceilings.application.commands import GenerateLightingCommand
from ceilings.application.templates.manager import TemplateManager


@lru_cache(maxsize=1)
def get_generate_command() -> GenerateLightingCommand:
    """Shared GenerateLightingCommand; the calculator holds no state."""
    return GenerateLightingCommand()


def get_template_manager() -> TemplateManager:
    """Dependency for TemplateManager."""
    return TemplateManager()


# Type aliases for cleaner endpoint signatures
GenerateCommandDep = Annotated[GenerateLightingCommand, Depends(get_generate_command)]
TemplateManagerDep = Annotated[TemplateManager, Depends(get_template_manager)]

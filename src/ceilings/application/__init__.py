"""Application layer - use cases, configuration and DTOs."""

from .commands import GenerateLightingCommand
from .dtos import LayerSummary, LightingOutput, LightingSummary

__all__ = [
    "GenerateLightingCommand",
    "LayerSummary",
    "LightingOutput",
    "LightingSummary",
]

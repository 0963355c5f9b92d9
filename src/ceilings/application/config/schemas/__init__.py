"""Pydantic schemas for ceiling lighting configuration files."""

from ceilings.application.config.schemas.base import (
    SUPPORTED_VERSIONS,
    CamelModel,
    CeilingTypeConfig,
    CoveLightPositionConfig,
    IslandShapeConfig,
    RoomDimensionsConfig,
    SidesConfig,
)
from ceilings.application.config.schemas.ceiling_schema import (
    CombinedConfigSchema,
    IslandConfigSchema,
    PeripheralConfigSchema,
    PlainConfigSchema,
)
from ceilings.application.config.schemas.root import LightingConfiguration

__all__ = [
    "SUPPORTED_VERSIONS",
    "CamelModel",
    "CeilingTypeConfig",
    "CombinedConfigSchema",
    "CoveLightPositionConfig",
    "IslandConfigSchema",
    "IslandShapeConfig",
    "LightingConfiguration",
    "PeripheralConfigSchema",
    "PlainConfigSchema",
    "RoomDimensionsConfig",
    "SidesConfig",
]

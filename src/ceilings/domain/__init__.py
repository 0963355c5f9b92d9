"""Domain layer - ceiling geometry and fixture placement."""

from .services import (
    IslandCeilingPlanner,
    LightingCalculator,
    PeripheralCeilingPlanner,
    PlainCeilingPlanner,
    calculate_lighting_layers,
    calculate_lighting_positions,
)
from .value_objects import (
    Ceiling,
    CeilingConfig,
    CeilingType,
    CircularIsland,
    CombinedCeiling,
    CoveLightPosition,
    IslandCeiling,
    IslandShape,
    LightingLayer,
    LightPosition,
    LightType,
    OvalIsland,
    PeripheralCeiling,
    PeripheralSides,
    PlainCeiling,
    RectangularIsland,
    RoomDimensions,
)

__all__ = [
    "Ceiling",
    "CeilingConfig",
    "CeilingType",
    "CircularIsland",
    "CombinedCeiling",
    "CoveLightPosition",
    "IslandCeiling",
    "IslandCeilingPlanner",
    "IslandShape",
    "LightPosition",
    "LightType",
    "LightingCalculator",
    "LightingLayer",
    "OvalIsland",
    "PeripheralCeiling",
    "PeripheralCeilingPlanner",
    "PeripheralSides",
    "PlainCeiling",
    "PlainCeilingPlanner",
    "RectangularIsland",
    "RoomDimensions",
    "calculate_lighting_layers",
    "calculate_lighting_positions",
]

"""Lighting calculator: dispatches a ceiling configuration to its planners."""

from __future__ import annotations

import logging

from ..value_objects import (
    CeilingConfig,
    CeilingType,
    CircularIsland,
    CombinedCeiling,
    LightingLayer,
    LightPosition,
    OvalIsland,
    PeripheralCeiling,
    PlainCeiling,
    RectangularIsland,
)
from .island_planner import IslandCeilingPlanner
from .peripheral_planner import PeripheralCeilingPlanner
from .plain_planner import PlainCeilingPlanner

logger = logging.getLogger(__name__)

__all__ = [
    "LightingCalculator",
    "calculate_lighting_layers",
    "calculate_lighting_positions",
]


class LightingCalculator:
    """Computes fixture positions for any ceiling configuration.

    A combined ceiling contributes one layer per enabled sub-ceiling, in
    the fixed order plain, peripheral, island. Layers whose flag is off or
    whose sub-ceiling is missing contribute nothing. The calculator never
    raises for such gaps; it simply returns fewer fixtures.

    Example:
        >>> calculator = LightingCalculator()
        >>> config = CeilingConfig(
        ...     room=RoomDimensions(width=10, length=10),
        ...     ceiling=PeripheralCeiling(width=1.5, light_count=8),
        ... )
        >>> len(calculator.calculate(config))
        8
    """

    def __init__(
        self,
        plain_planner: PlainCeilingPlanner | None = None,
        peripheral_planner: PeripheralCeilingPlanner | None = None,
        island_planner: IslandCeilingPlanner | None = None,
    ) -> None:
        self.plain_planner = plain_planner or PlainCeilingPlanner()
        self.peripheral_planner = peripheral_planner or PeripheralCeilingPlanner()
        self.island_planner = island_planner or IslandCeilingPlanner()

    def calculate_layers(self, config: CeilingConfig) -> list[LightingLayer]:
        """Compute fixtures grouped by the ceiling layer that produced them."""
        ceiling = config.ceiling
        layers: list[LightingLayer] = []

        match ceiling:
            case None:
                logger.debug(
                    f"No sub-configuration for ceiling type {config.ceiling_type}; "
                    "no fixtures"
                )
            case CombinedCeiling():
                if ceiling.use_plain and ceiling.plain is not None:
                    layers.append(self._plain_layer(ceiling.plain))
                if ceiling.use_peripheral and ceiling.peripheral is not None:
                    layers.append(self._peripheral_layer(ceiling.peripheral, config))
                if ceiling.use_island and ceiling.island is not None:
                    layers.append(self._island_layer(ceiling.island))
            case PlainCeiling():
                layers.append(self._plain_layer(ceiling))
            case PeripheralCeiling():
                layers.append(self._peripheral_layer(ceiling, config))
            case RectangularIsland() | CircularIsland() | OvalIsland():
                layers.append(self._island_layer(ceiling))

        total = sum(layer.count for layer in layers)
        logger.debug(f"Calculated {total} fixtures across {len(layers)} layer(s)")
        return layers

    def calculate(self, config: CeilingConfig) -> list[LightPosition]:
        """Compute all fixture positions, concatenated in dispatch order."""
        return [
            position
            for layer in self.calculate_layers(config)
            for position in layer.positions
        ]

    def _plain_layer(self, ceiling: PlainCeiling) -> LightingLayer:
        return LightingLayer(
            ceiling_type=CeilingType.PLAIN,
            positions=tuple(self.plain_planner.calculate(ceiling)),
        )

    def _peripheral_layer(
        self, ceiling: PeripheralCeiling, config: CeilingConfig
    ) -> LightingLayer:
        return LightingLayer(
            ceiling_type=CeilingType.PERIPHERAL,
            positions=tuple(self.peripheral_planner.calculate(ceiling, config.room)),
        )

    def _island_layer(self, island) -> LightingLayer:
        return LightingLayer(
            ceiling_type=CeilingType.ISLAND,
            positions=tuple(self.island_planner.calculate(island)),
        )


def calculate_lighting_layers(config: CeilingConfig) -> list[LightingLayer]:
    """Convenience wrapper around LightingCalculator.calculate_layers()."""
    return LightingCalculator().calculate_layers(config)


def calculate_lighting_positions(config: CeilingConfig) -> list[LightPosition]:
    """Compute fixture positions for a ceiling configuration.

    Args:
        config: Room dimensions and ceiling layout.

    Returns:
        Fixture positions in room-local feet. Empty when the configuration
        carries no usable ceiling.
    """
    return LightingCalculator().calculate(config)

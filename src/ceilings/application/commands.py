"""Application commands (use cases) for lighting plan generation."""

from __future__ import annotations

import dataclasses
import logging

from ceilings.application.config import (
    LightingConfiguration,
    config_to_domain,
    validate_config,
)
from ceilings.domain import (
    CeilingConfig,
    CeilingType,
    CombinedCeiling,
    LightingCalculator,
    LightingLayer,
    PeripheralCeiling,
    PlainCeiling,
)

from .dtos import LayerSummary, LightingOutput, LightingSummary

logger = logging.getLogger(__name__)


class GenerateLightingCommand:
    """Command to generate a lighting plan from a configuration.

    Validation runs first; a configuration with blocking errors produces
    an output carrying those errors and no fixtures.
    """

    def __init__(self, calculator: LightingCalculator | None = None) -> None:
        self.calculator = calculator or LightingCalculator()

    def execute(
        self,
        config: LightingConfiguration,
        skip_validation: bool = False,
    ) -> LightingOutput:
        """Execute the lighting generation command.

        Args:
            config: A loaded LightingConfiguration.
            skip_validation: Run the planners even if validation fails.

        Returns:
            LightingOutput with the fixtures, per-layer groups and summary.
        """
        warnings: list[str] = []
        if not skip_validation:
            result = validate_config(config)
            warnings = [f"{w.path}: {w.message}" for w in result.warnings]
            if not result.is_valid:
                return LightingOutput(
                    config=None,
                    errors=[f"{e.path}: {e.message}" for e in result.errors],
                    warnings=warnings,
                )

        try:
            domain_config = config_to_domain(config)
        except ValueError as e:
            return LightingOutput(config=None, errors=[str(e)], warnings=warnings)

        return self.execute_domain(domain_config, warnings=warnings)

    def execute_domain(
        self, config: CeilingConfig, warnings: list[str] | None = None
    ) -> LightingOutput:
        """Generate a plan directly from a domain configuration."""
        layers = self.calculator.calculate_layers(config)
        summary = LightingSummary(
            total_fixtures=sum(layer.count for layer in layers),
            room_area=config.room.area,
            layers=[self._summarize(layer, config) for layer in layers],
        )
        logger.info(
            f"Generated {summary.total_fixtures} fixtures for a "
            f"{config.room.width:g} x {config.room.length:g} ft room"
        )
        return LightingOutput(
            config=config,
            layers=layers,
            summary=summary,
            warnings=list(warnings or []),
        )

    def _summarize(self, layer: LightingLayer, config: CeilingConfig) -> LayerSummary:
        ceiling = self._layer_ceiling(layer.ceiling_type, config)
        if ceiling is None:
            return LayerSummary(ceiling_type=layer.ceiling_type, count=layer.count)

        automatic = dataclasses.replace(ceiling, light_count=None)
        match automatic:
            case PlainCeiling():
                grid = self.calculator.plain_planner.plan_grid(automatic)
                recommended = grid.slots if grid else 1
            case PeripheralCeiling():
                recommended = self.calculator.peripheral_planner.total_light_count(
                    automatic, config.room
                )
            case _:
                recommended = self.calculator.island_planner.default_light_count(automatic)

        return LayerSummary(
            ceiling_type=layer.ceiling_type,
            count=layer.count,
            requested=ceiling.light_count,
            recommended=recommended,
        )

    @staticmethod
    def _layer_ceiling(ceiling_type: CeilingType, config: CeilingConfig):
        ceiling = config.ceiling
        if isinstance(ceiling, CombinedCeiling):
            return {
                CeilingType.PLAIN: ceiling.plain,
                CeilingType.PERIPHERAL: ceiling.peripheral,
                CeilingType.ISLAND: ceiling.island,
            }[ceiling_type]
        return ceiling

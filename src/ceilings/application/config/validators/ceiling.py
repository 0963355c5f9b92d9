"""Ceiling layout validation.

These validators port the designer form checks: a plan generated from a
configuration that fails them would place ceilings outside the room or
run the planners on meaningless geometry.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ceilings.application.config.adapter import island_to_domain
from ceilings.domain.constants import MIN_LIGHT_SPACING, MIN_WALL_DISTANCE
from ceilings.domain.value_objects import CeilingType, IslandShape

from .base import ValidationResult
from .helpers import active_sections, check_cove_positions, is_positive

if TYPE_CHECKING:
    from ceilings.application.config.schemas import (
        IslandConfigSchema,
        LightingConfiguration,
    )


class PlainCeilingValidator:
    """Validator for plain ceiling rules.

    - Width and length must be positive
    - The ceiling must fit inside the room at its offsets
    - Cove lighting needs at least one position
    - An explicit light count above what 3 ft spacing allows is flagged
    """

    @property
    def name(self) -> str:
        return "plain"

    def validate(self, config: LightingConfiguration) -> ValidationResult:
        result = ValidationResult()
        room = config.room_dimensions

        for path, plain in active_sections(config, CeilingType.PLAIN):
            if not (is_positive(plain.width) and is_positive(plain.length)):
                result.add_error(
                    path=path,
                    message="Dimensions must be positive numbers",
                    value={"width": plain.width, "length": plain.length},
                )
                continue

            if plain.width + plain.left_offset > room.width:
                result.add_error(
                    path=f"{path}.width",
                    message="Ceiling width plus left offset exceeds room width",
                    value=plain.width + plain.left_offset,
                )
            if plain.length + plain.top_offset > room.length:
                result.add_error(
                    path=f"{path}.length",
                    message="Ceiling length plus top offset exceeds room length",
                    value=plain.length + plain.top_offset,
                )

            check_cove_positions(plain, path, result)

            if plain.light_count:
                capacity = _spacing_capacity(plain.width, plain.length)
                if plain.light_count > capacity:
                    result.add_warning(
                        path=f"{path}.lightCount",
                        message=(
                            f"{plain.light_count} lights cannot keep "
                            f"{MIN_LIGHT_SPACING:g} ft spacing in a "
                            f"{plain.width:g} x {plain.length:g} ft ceiling "
                            f"(at most {capacity})"
                        ),
                        suggestion=f"Use {capacity} lights or fewer",
                    )

        return result


def _spacing_capacity(width: float, length: float) -> int:
    """Largest grid that keeps the wall clearance and minimum spacing."""
    eff_width = width - 2 * MIN_WALL_DISTANCE
    eff_length = length - 2 * MIN_WALL_DISTANCE
    if eff_width <= 0 or eff_length <= 0:
        return 1
    cols = math.floor(eff_width / MIN_LIGHT_SPACING) + 1
    rows = math.floor(eff_length / MIN_LIGHT_SPACING) + 1
    return rows * cols


class PeripheralCeilingValidator:
    """Validator for peripheral band rules."""

    @property
    def name(self) -> str:
        return "peripheral"

    def validate(self, config: LightingConfiguration) -> ValidationResult:
        result = ValidationResult()
        room = config.room_dimensions

        for path, peripheral in active_sections(config, CeilingType.PERIPHERAL):
            if not is_positive(peripheral.width):
                result.add_error(
                    path=f"{path}.width",
                    message="Width must be a positive number",
                    value=peripheral.width,
                )
            elif peripheral.width > min(room.width, room.length) / 2:
                result.add_error(
                    path=f"{path}.width",
                    message=(
                        "Band width exceeds half the smaller room dimension "
                        f"({min(room.width, room.length) / 2:g} ft)"
                    ),
                    value=peripheral.width,
                )

            sides = peripheral.sides
            if not (sides.top or sides.right or sides.bottom or sides.left):
                result.add_error(
                    path=f"{path}.sides",
                    message="At least one side must be selected",
                )

            check_cove_positions(peripheral, path, result)

        return result


class IslandCeilingValidator:
    """Validator for island rules.

    Required dimensions depend on the shape. Once the dimensions are
    usable, the island's bounding box must fit inside the room and a
    cutout ring must leave an opening.
    """

    @property
    def name(self) -> str:
        return "island"

    def validate(self, config: LightingConfiguration) -> ValidationResult:
        result = ValidationResult()
        room = config.room_dimensions

        for path, island in active_sections(config, CeilingType.ISLAND):
            before = len(result.errors)
            self._check_dimensions(island, path, result)
            check_cove_positions(island, path, result)
            if len(result.errors) > before:
                continue

            domain_island = island_to_domain(island)
            left, top, width, height = domain_island.bounding_box()
            if left + width > room.width:
                result.add_error(
                    path=path,
                    message="Island exceeds room width",
                    value=left + width,
                )
            if top + height > room.length:
                result.add_error(
                    path=path,
                    message="Island exceeds room length",
                    value=top + height,
                )

            if island.shape.is_cutout and 2 * domain_island.ring_thickness >= min(width, height):
                result.add_error(
                    path=f"{path}.cutoutWidth",
                    message="Cutout width leaves no opening in the island",
                    value=island.cutout_width,
                )

        return result

    def _check_dimensions(
        self, island: IslandConfigSchema, path: str, result: ValidationResult
    ) -> None:
        shape = island.shape
        if shape in (IslandShape.RECTANGLE, IslandShape.RECTANGULAR_CUTOUT):
            if not is_positive(island.width):
                result.add_error(
                    path=f"{path}.width",
                    message="Width must be a positive number",
                    value=island.width,
                )
            if not is_positive(island.length):
                result.add_error(
                    path=f"{path}.length",
                    message="Length must be a positive number for this shape",
                    value=island.length,
                )
        elif shape in (IslandShape.CIRCLE, IslandShape.CIRCULAR_CUTOUT):
            if not is_positive(island.radius):
                result.add_error(
                    path=f"{path}.radius",
                    message="Radius must be a positive number for circular shapes",
                    value=island.radius,
                )
        else:
            if island.radius_x is None and not is_positive(island.width):
                result.add_error(
                    path=f"{path}.radiusX",
                    message="Oval shapes need radiusX or a positive width",
                )
            elif island.radius_x is not None and island.radius_x <= 0:
                result.add_error(
                    path=f"{path}.radiusX",
                    message="Radius must be a positive number",
                    value=island.radius_x,
                )
            if island.radius_y is not None and island.radius_y <= 0:
                result.add_error(
                    path=f"{path}.radiusY",
                    message="Radius must be a positive number",
                    value=island.radius_y,
                )
            elif island.radius_y is None and not (
                is_positive(island.length) or is_positive(island.width)
            ):
                result.add_error(
                    path=f"{path}.radiusY",
                    message="Oval shapes need radiusY or a positive length",
                )

        cutout_width = island.cutout_width
        if shape.is_cutout and cutout_width is not None and cutout_width <= 0:
            result.add_error(
                path=f"{path}.cutoutWidth",
                message="Cutout width must be a positive number",
                value=island.cutout_width,
            )


class LayoutValidator:
    """Validator for the overall layout selection.

    - A combined ceiling needs at least one enabled layer, and every
      enabled layer needs its sub-configuration
    - A selected type without a sub-configuration produces no fixtures
    """

    @property
    def name(self) -> str:
        return "layout"

    def validate(self, config: LightingConfiguration) -> ValidationResult:
        result = ValidationResult()
        selected = config.ceiling_type

        if selected == CeilingType.COMBINED:
            combined = config.combined_config
            if combined is None:
                result.add_warning(
                    path="combinedConfig",
                    message="Ceiling type 'combined' has no combinedConfig; no lights will be placed",
                    suggestion="Add a combinedConfig section",
                )
                return result

            if not (combined.use_plain or combined.use_peripheral or combined.use_island):
                result.add_error(
                    path="combinedConfig",
                    message="At least one ceiling type must be selected",
                )

            layers = (
                ("usePlain", combined.use_plain, "plainConfig", combined.plain_config),
                ("usePeripheral", combined.use_peripheral, "peripheralConfig", combined.peripheral_config),
                ("useIsland", combined.use_island, "islandConfig", combined.island_config),
            )
            for flag, enabled, alias, section in layers:
                if enabled and section is None:
                    result.add_error(
                        path=f"combinedConfig.{alias}",
                        message=f"{flag} is set but {alias} is missing",
                    )
            return result

        alias = f"{selected.value}Config"
        if getattr(config, f"{selected.value}_config") is None:
            result.add_warning(
                path=alias,
                message=f"Ceiling type '{selected.value}' has no {alias}; no lights will be placed",
                suggestion=f"Add a {alias} section",
            )
        return result

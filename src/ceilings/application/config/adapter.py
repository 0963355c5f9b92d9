"""Adapter functions from configuration schemas to domain value objects.

This module converts the Pydantic configuration models into the frozen
dataclasses the lighting calculator consumes. It applies the same field
fallbacks the designer applies (oval radii from width/length, a missing
rectangle length treated as square).
"""

from ceilings.application.config.schemas import (
    CombinedConfigSchema,
    IslandConfigSchema,
    LightingConfiguration,
    PeripheralConfigSchema,
    PlainConfigSchema,
    SidesConfig,
)
from ceilings.domain.value_objects import (
    CeilingConfig,
    CeilingType,
    CircularIsland,
    CombinedCeiling,
    IslandCeiling,
    IslandShape,
    OvalIsland,
    PeripheralCeiling,
    PeripheralSides,
    PlainCeiling,
    RectangularIsland,
    RoomDimensions,
)


def _sides_to_domain(sides: SidesConfig | None) -> PeripheralSides:
    if sides is None:
        return PeripheralSides()
    return PeripheralSides(
        top=sides.top, right=sides.right, bottom=sides.bottom, left=sides.left
    )


def plain_to_domain(plain: PlainConfigSchema) -> PlainCeiling:
    """Convert a plain ceiling section. A light count of 0 means automatic."""
    return PlainCeiling(
        width=plain.width,
        length=plain.length,
        left_offset=plain.left_offset,
        top_offset=plain.top_offset,
        light_count=plain.light_count or None,
        cove_light=plain.cove_light,
        cove_light_positions=tuple(plain.cove_light_positions),
    )


def peripheral_to_domain(peripheral: PeripheralConfigSchema) -> PeripheralCeiling:
    """Convert a peripheral band section."""
    return PeripheralCeiling(
        width=peripheral.width,
        sides=_sides_to_domain(peripheral.sides),
        light_count=peripheral.light_count or None,
        cove_light=peripheral.cove_light,
        cove_light_positions=tuple(peripheral.cove_light_positions),
    )


def island_to_domain(island: IslandConfigSchema) -> IslandCeiling:
    """Convert an island section to the variant matching its shape.

    Oval radii fall back to half the width and half the length (or half
    the width when no length is given). Missing dimensions become 0, which
    the planner treats as an island without fixtures.

    Args:
        island: A validated island configuration section

    Returns:
        RectangularIsland, CircularIsland or OvalIsland
    """
    common = {
        "left_offset": island.left_offset,
        "top_offset": island.top_offset,
        "cutout": island.shape.is_cutout,
        "cutout_width": island.cutout_width,
        "light_count": island.light_count or None,
        "cove_light": island.cove_light,
        "cove_light_positions": tuple(island.cove_light_positions),
    }
    width = island.width or 0.0

    match island.shape:
        case IslandShape.RECTANGLE | IslandShape.RECTANGULAR_CUTOUT:
            return RectangularIsland(
                width=width,
                length=island.length or width,
                sides=_sides_to_domain(island.sides),
                **common,
            )
        case IslandShape.CIRCLE | IslandShape.CIRCULAR_CUTOUT:
            return CircularIsland(radius=island.radius or 0.0, **common)
        case _:
            radius_x = island.radius_x or width / 2
            if island.radius_y:
                radius_y = island.radius_y
            elif island.length:
                radius_y = island.length / 2
            else:
                radius_y = width / 2
            return OvalIsland(radius_x=radius_x, radius_y=radius_y, **common)


def combined_to_domain(combined: CombinedConfigSchema) -> CombinedCeiling:
    """Convert a combined section; absent layers stay None."""
    return CombinedCeiling(
        use_plain=combined.use_plain,
        use_peripheral=combined.use_peripheral,
        use_island=combined.use_island,
        plain=plain_to_domain(combined.plain_config) if combined.plain_config else None,
        peripheral=(
            peripheral_to_domain(combined.peripheral_config)
            if combined.peripheral_config
            else None
        ),
        island=island_to_domain(combined.island_config) if combined.island_config else None,
    )


def config_to_domain(config: LightingConfiguration) -> CeilingConfig:
    """Convert a root configuration to the calculator's input.

    Only the section matching ``ceiling_type`` is converted. When that
    section is missing the result carries no ceiling and yields no
    fixtures.

    Args:
        config: A validated LightingConfiguration instance

    Returns:
        A CeilingConfig domain value object

    Raises:
        ValueError: If the room dimensions are not positive.

    Example:
        >>> config = load_config(Path("living-room.json"))
        >>> positions = calculate_lighting_positions(config_to_domain(config))
    """
    room = RoomDimensions(
        width=config.room_dimensions.width,
        length=config.room_dimensions.length,
        height=config.room_dimensions.height,
    )

    ceiling = None
    match config.ceiling_type:
        case CeilingType.PLAIN if config.plain_config:
            ceiling = plain_to_domain(config.plain_config)
        case CeilingType.PERIPHERAL if config.peripheral_config:
            ceiling = peripheral_to_domain(config.peripheral_config)
        case CeilingType.ISLAND if config.island_config:
            ceiling = island_to_domain(config.island_config)
        case CeilingType.COMBINED if config.combined_config:
            ceiling = combined_to_domain(config.combined_config)

    return CeilingConfig(room=room, ceiling=ceiling, selected_type=config.ceiling_type)

"""Ceiling layout schemas.

Dimension fields carry no bounds here. Positivity and room containment
are reported by ``validate_config`` rather than as schema errors.
A light count of 0 or null means "derive the count automatically".
"""

from pydantic import Field

from ceilings.application.config.schemas.base import (
    CamelModel,
    CoveLightFields,
    IslandShapeConfig,
    SidesConfig,
)


class PlainConfigSchema(CoveLightFields):
    """A flat rectangular false ceiling placed inside the room.

    Attributes:
        width: Ceiling extent along the room width
        length: Ceiling extent along the room length
        left_offset: Distance from the left wall
        top_offset: Distance from the top wall
        light_count: Explicit fixture count (optional)
    """

    width: float
    length: float
    left_offset: float = Field(default=0.0, ge=0)
    top_offset: float = Field(default=0.0, ge=0)
    light_count: int | None = Field(default=None, ge=0, le=500)


class PeripheralConfigSchema(CoveLightFields):
    """A border band along the room walls."""

    width: float
    sides: SidesConfig = Field(default_factory=SidesConfig)
    light_count: int | None = Field(default=None, ge=0, le=500)


class IslandConfigSchema(CoveLightFields):
    """A free-standing island ceiling.

    Which dimension fields matter depends on ``shape``:
    - rectangle, rectangular-cutout: width, length
    - circle, circular-cutout: radius
    - oval, oval-cutout: radius_x, radius_y (falling back to width/2 and
      length/2)

    Offsets locate the top-left corner of the island's bounding box.
    ``sides`` only applies to a rectangular cutout ring.
    """

    shape: IslandShapeConfig
    width: float | None = None
    length: float | None = None
    radius: float | None = None
    radius_x: float | None = None
    radius_y: float | None = None
    left_offset: float = Field(default=0.0, ge=0)
    top_offset: float = Field(default=0.0, ge=0)
    cutout_width: float | None = None
    sides: SidesConfig | None = None
    light_count: int | None = Field(default=None, ge=0, le=500)


class CombinedConfigSchema(CamelModel):
    """Layered plain + peripheral + island composition."""

    use_plain: bool = False
    use_peripheral: bool = False
    use_island: bool = False
    plain_config: PlainConfigSchema | None = None
    peripheral_config: PeripheralConfigSchema | None = None
    island_config: IslandConfigSchema | None = None

"""Base models shared by the ceiling configuration schemas.

Configuration files use the camelCase keys the browser designer produces
(``leftOffset``, ``coveLightPositions``). Every model also accepts the
snake_case field names so hand-written files and Python callers can use
either style.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Import domain enums directly - they are (str, Enum) and serialize as-is
from ceilings.domain.value_objects import CeilingType, CoveLightPosition, IslandShape

# Supported schema versions for configuration files
# Version 1.0: Plain, peripheral, island and combined ceilings
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

CeilingTypeConfig = CeilingType
IslandShapeConfig = IslandShape
CoveLightPositionConfig = CoveLightPosition


class CamelModel(BaseModel):
    """Base model: camelCase aliases, snake_case accepted, unknown keys rejected."""

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class RoomDimensionsConfig(CamelModel):
    """Room dimensions in feet.

    Attributes:
        width: Room width (left wall to right wall)
        length: Room length (top wall to bottom wall)
        height: Ceiling height; informational only
    """

    width: float = Field(..., gt=0, le=500)
    length: float = Field(..., gt=0, le=500)
    height: float = Field(default=0.0, ge=0, le=100)


class SidesConfig(CamelModel):
    """Enable flags for the four sides of a band or cutout ring."""

    top: bool = True
    right: bool = True
    bottom: bool = True
    left: bool = True


class CoveLightFields(CamelModel):
    """Cove light fields shared by every ceiling schema.

    Cove lights are drawn on the diagram only; they never change the
    fixture count.
    """

    cove_light: bool = False
    cove_light_positions: list[CoveLightPositionConfig] = Field(default_factory=list)

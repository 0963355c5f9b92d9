"""Value objects for the ceiling lighting domain.

All geometry is expressed in feet, in room-local coordinates with the
origin at the room's top-left corner (x grows to the right, y grows
toward the far wall).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .constants import DEFAULT_CUTOUT_WIDTH, MIN_CUTOUT_WIDTH, SQUARE_TOLERANCE


class CeilingType(str, Enum):
    """False-ceiling archetypes."""

    PLAIN = "plain"
    PERIPHERAL = "peripheral"
    ISLAND = "island"
    COMBINED = "combined"


class IslandShape(str, Enum):
    """Island shapes, each available solid or with a central cutout."""

    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    OVAL = "oval"
    RECTANGULAR_CUTOUT = "rectangular-cutout"
    CIRCULAR_CUTOUT = "circular-cutout"
    OVAL_CUTOUT = "oval-cutout"

    @property
    def is_cutout(self) -> bool:
        """True for the ring-shaped variants."""
        return self.value.endswith("-cutout")


class CoveLightPosition(str, Enum):
    """Edge of a ceiling that carries a cove light channel."""

    INNER = "inner"
    OUTER = "outer"


class LightType(str, Enum):
    """Kind of light drawn on the diagram.

    The calculator only emits REGULAR fixtures. COVE exists for the
    rendering layer, which synthesizes cove bands on its own.
    """

    REGULAR = "regular"
    COVE = "cove"


@dataclass(frozen=True)
class RoomDimensions:
    """Immutable room dimensions in feet."""

    width: float
    length: float
    height: float = 0.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.length <= 0:
            raise ValueError("Room width and length must be positive")
        if self.height < 0:
            raise ValueError("Room height cannot be negative")

    @property
    def area(self) -> float:
        """Floor area in square feet."""
        return self.width * self.length

    @property
    def is_square(self) -> bool:
        """Whether width and length are within 10% of each other."""
        return is_nearly_square(self.width, self.length)


def is_nearly_square(a: float, b: float, tolerance: float = SQUARE_TOLERANCE) -> bool:
    """Check whether two extents differ by less than ``tolerance`` of the smaller."""
    return abs(a - b) < min(a, b) * tolerance


@dataclass(frozen=True)
class LightPosition:
    """A single fixture position produced by the lighting calculator."""

    x: float
    y: float
    radius: float
    type: LightType = LightType.REGULAR

    def to_dict(self) -> dict[str, float | str]:
        """Serialize to a plain dictionary."""
        return {"x": self.x, "y": self.y, "radius": self.radius, "type": self.type.value}


@dataclass(frozen=True)
class PeripheralSides:
    """Enable flags for the four sides of a border band."""

    top: bool = True
    right: bool = True
    bottom: bool = True
    left: bool = True

    def enabled_sides(self) -> list[str]:
        """Enabled side names in distribution order (top, bottom, left, right)."""
        return [
            name
            for name in ("top", "bottom", "left", "right")
            if getattr(self, name)
        ]

    @property
    def count(self) -> int:
        """Number of enabled sides."""
        return len(self.enabled_sides())

    @property
    def any_enabled(self) -> bool:
        return self.count > 0


@dataclass(frozen=True)
class PlainCeiling:
    """A flat false-ceiling rectangle inset from the room walls.

    Attributes:
        width: Ceiling extent along the room width.
        length: Ceiling extent along the room length.
        left_offset: Distance from the room's left wall.
        top_offset: Distance from the room's top wall.
        light_count: Explicit fixture count, or None for automatic sizing.
        cove_light: Whether cove light channels are drawn.
        cove_light_positions: Edges that carry cove lights.
    """

    width: float
    length: float
    left_offset: float = 0.0
    top_offset: float = 0.0
    light_count: int | None = None
    cove_light: bool = False
    cove_light_positions: tuple[CoveLightPosition, ...] = ()

    @property
    def ceiling_type(self) -> CeilingType:
        return CeilingType.PLAIN


@dataclass(frozen=True)
class PeripheralCeiling:
    """A constant-width border band along some or all room walls.

    Attributes:
        width: Band width measured in from the wall.
        sides: Which walls carry the band.
        light_count: Explicit fixture count, or None for automatic sizing.
        cove_light: Whether cove light channels are drawn.
        cove_light_positions: Edges that carry cove lights.
    """

    width: float
    sides: PeripheralSides = field(default_factory=PeripheralSides)
    light_count: int | None = None
    cove_light: bool = False
    cove_light_positions: tuple[CoveLightPosition, ...] = ()

    @property
    def ceiling_type(self) -> CeilingType:
        return CeilingType.PERIPHERAL


def _ring_thickness(cutout_width: float | None) -> float:
    return max(MIN_CUTOUT_WIDTH, cutout_width or DEFAULT_CUTOUT_WIDTH)


@dataclass(frozen=True)
class RectangularIsland:
    """Rectangular island, optionally with a rectangular cutout.

    ``sides`` selects which inner-ring sides of a cutout island
    receive fixtures; it has no effect on a solid island.
    """

    width: float
    length: float
    left_offset: float = 0.0
    top_offset: float = 0.0
    cutout: bool = False
    cutout_width: float | None = None
    sides: PeripheralSides = field(default_factory=PeripheralSides)
    light_count: int | None = None
    cove_light: bool = False
    cove_light_positions: tuple[CoveLightPosition, ...] = ()

    @property
    def shape(self) -> IslandShape:
        return IslandShape.RECTANGULAR_CUTOUT if self.cutout else IslandShape.RECTANGLE

    @property
    def ring_thickness(self) -> float:
        return _ring_thickness(self.cutout_width)

    @property
    def ceiling_type(self) -> CeilingType:
        return CeilingType.ISLAND

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Return (left, top, width, height) of the island footprint."""
        return (self.left_offset, self.top_offset, self.width, self.length)


@dataclass(frozen=True)
class CircularIsland:
    """Circular island; offsets locate the bounding box's top-left corner."""

    radius: float
    left_offset: float = 0.0
    top_offset: float = 0.0
    cutout: bool = False
    cutout_width: float | None = None
    light_count: int | None = None
    cove_light: bool = False
    cove_light_positions: tuple[CoveLightPosition, ...] = ()

    @property
    def shape(self) -> IslandShape:
        return IslandShape.CIRCULAR_CUTOUT if self.cutout else IslandShape.CIRCLE

    @property
    def ring_thickness(self) -> float:
        return _ring_thickness(self.cutout_width)

    @property
    def center(self) -> tuple[float, float]:
        return (self.left_offset + self.radius, self.top_offset + self.radius)

    @property
    def ceiling_type(self) -> CeilingType:
        return CeilingType.ISLAND

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Return (left, top, width, height) of the island footprint."""
        diameter = 2 * self.radius
        return (self.left_offset, self.top_offset, diameter, diameter)


@dataclass(frozen=True)
class OvalIsland:
    """Elliptical island with independent x/y radii."""

    radius_x: float
    radius_y: float
    left_offset: float = 0.0
    top_offset: float = 0.0
    cutout: bool = False
    cutout_width: float | None = None
    light_count: int | None = None
    cove_light: bool = False
    cove_light_positions: tuple[CoveLightPosition, ...] = ()

    @property
    def shape(self) -> IslandShape:
        return IslandShape.OVAL_CUTOUT if self.cutout else IslandShape.OVAL

    @property
    def ring_thickness(self) -> float:
        return _ring_thickness(self.cutout_width)

    @property
    def center(self) -> tuple[float, float]:
        return (self.left_offset + self.radius_x, self.top_offset + self.radius_y)

    @property
    def is_nearly_circular(self) -> bool:
        return is_nearly_square(self.radius_x, self.radius_y)

    @property
    def ceiling_type(self) -> CeilingType:
        return CeilingType.ISLAND

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Return (left, top, width, height) of the island footprint."""
        return (
            self.left_offset,
            self.top_offset,
            2 * self.radius_x,
            2 * self.radius_y,
        )


IslandCeiling = Union[RectangularIsland, CircularIsland, OvalIsland]


@dataclass(frozen=True)
class CombinedCeiling:
    """Layered composition of plain, peripheral and island ceilings.

    Each layer contributes only when its flag is set and its
    sub-ceiling is present.
    """

    use_plain: bool = False
    use_peripheral: bool = False
    use_island: bool = False
    plain: PlainCeiling | None = None
    peripheral: PeripheralCeiling | None = None
    island: IslandCeiling | None = None

    @property
    def ceiling_type(self) -> CeilingType:
        return CeilingType.COMBINED

    @property
    def any_enabled(self) -> bool:
        return self.use_plain or self.use_peripheral or self.use_island


Ceiling = Union[PlainCeiling, PeripheralCeiling, IslandCeiling, CombinedCeiling]


@dataclass(frozen=True)
class CeilingConfig:
    """Complete input to the lighting calculator.

    ``ceiling`` is None when the selected ceiling type carried no
    sub-configuration; such a config yields no fixtures.
    ``selected_type`` records the type the user picked, so a missing
    sub-configuration can still be reported by type.
    """

    room: RoomDimensions
    ceiling: Ceiling | None = None
    selected_type: CeilingType | None = None

    @property
    def ceiling_type(self) -> CeilingType | None:
        if self.ceiling is not None:
            return self.ceiling.ceiling_type
        return self.selected_type


@dataclass(frozen=True)
class LightingLayer:
    """Fixtures contributed by one ceiling layer."""

    ceiling_type: CeilingType
    positions: tuple[LightPosition, ...]

    @property
    def count(self) -> int:
        return len(self.positions)

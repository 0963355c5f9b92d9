"""Island ceiling light planner.

Handles the three island shape families (rectangle, circle, oval), each
either solid or with a central cutout. Solid islands get a grid (rectangle)
or a center fixture plus one ring (circle, oval). Cutout islands only get
fixtures on the ring between the outer edge and the cutout.
"""

from __future__ import annotations

import logging
import math

from ..constants import (
    CIRCLE_AREA_PER_LIGHT,
    CUTOUT_MIN_SPACING,
    ISLAND_LIGHT_RADIUS,
    LONG_SIDE_BIAS,
    MAX_RING_LIGHTS,
    MIN_CIRCULAR_CUTOUT_LIGHTS,
    MIN_OVAL_CUTOUT_LIGHTS,
    MIN_RECTANGULAR_CUTOUT_LIGHTS,
    MIN_RING_LIGHTS,
    OVAL_AREA_PER_LIGHT,
    OVERSHOOT_TOLERANCE,
    RECTANGLE_AREA_PER_LIGHT,
    RING_RADIUS_FACTOR,
    SHORT_SIDE_BIAS,
)
from ..value_objects import (
    CircularIsland,
    IslandCeiling,
    LightPosition,
    OvalIsland,
    RectangularIsland,
    is_nearly_square,
)
from .grid_fitting import GridPlan, round_half_up
from .peripheral_planner import SIDE_ORDER, distribute_across_sides

logger = logging.getLogger(__name__)

__all__ = ["IslandCeilingPlanner"]


def _snap_to_multiple_of_four(count: int) -> int:
    """Ring size for solid round islands: a multiple of 4 in [4, 8]."""
    return min(MAX_RING_LIGHTS, max(MIN_RING_LIGHTS, (count // 4) * 4))


def _snap_to_even(circumference: float) -> int:
    """Ring size for cutout rings: an even number in [4, 8]."""
    return min(MAX_RING_LIGHTS, max(MIN_RING_LIGHTS, (round_half_up(circumference) // 2) * 2))


class IslandCeilingPlanner:
    """Computes fixture positions for a free-standing island ceiling."""

    def __init__(self, light_radius: float = ISLAND_LIGHT_RADIUS) -> None:
        self.light_radius = light_radius

    # --- Counts ---

    def default_light_count(self, island: IslandCeiling) -> int:
        """Area-based fixture count used when no explicit count is given.

        Cutout islands only count the visible ring area and have a floor
        (4 rectangular, 5 circular, 4 oval).
        """
        c = island.ring_thickness
        match island:
            case RectangularIsland():
                area = island.width * island.length
                if island.cutout:
                    visible = area - (island.width - 2 * c) * (island.length - 2 * c)
                    return max(
                        MIN_RECTANGULAR_CUTOUT_LIGHTS,
                        round_half_up(visible / RECTANGLE_AREA_PER_LIGHT),
                    )
                return max(1, round_half_up(area / RECTANGLE_AREA_PER_LIGHT))
            case CircularIsland():
                area = math.pi * island.radius**2
                if island.cutout:
                    inner = max(0.0, island.radius - c)
                    visible = area - math.pi * inner**2
                    return max(
                        MIN_CIRCULAR_CUTOUT_LIGHTS,
                        round_half_up(visible / CIRCLE_AREA_PER_LIGHT),
                    )
                return max(1, round_half_up(area / CIRCLE_AREA_PER_LIGHT))
            case OvalIsland():
                rx, ry = island.radius_x, island.radius_y
                area = math.pi * rx * ry
                if island.cutout:
                    cutout_area = math.pi * max(0.0, rx - c) * max(0.0, ry - c)
                    return max(
                        MIN_OVAL_CUTOUT_LIGHTS,
                        round_half_up((area - cutout_area) / OVAL_AREA_PER_LIGHT),
                    )
                return max(1, round_half_up(area / OVAL_AREA_PER_LIGHT))
        raise TypeError(f"Unsupported island type: {type(island).__name__}")

    def _light_count(self, island: IslandCeiling) -> int:
        return island.light_count or self.default_light_count(island)

    # --- Dispatch ---

    def calculate(self, island: IslandCeiling) -> list[LightPosition]:
        """Compute fixture positions for an island of any shape."""
        match island:
            case RectangularIsland() if island.width <= 0 or island.length <= 0:
                positions = []
            case RectangularIsland(cutout=True):
                positions = self._rectangular_ring(island)
            case RectangularIsland():
                positions = self._rectangular_grid(island)
            case CircularIsland():
                positions = self._circle(island)
            case OvalIsland():
                positions = self._oval(island)
            case _:
                raise TypeError(f"Unsupported island type: {type(island).__name__}")

        logger.debug(f"Island {island.shape.value}: {len(positions)} fixtures")
        return positions

    # --- Rectangles ---

    def solid_grid(self, island: RectangularIsland) -> GridPlan:
        """Grid for a solid rectangular island; may hold more slots than fixtures."""
        count = self._light_count(island)

        if is_nearly_square(island.width, island.length):
            side = math.ceil(math.sqrt(count))
            if side * side > count * OVERSHOOT_TOLERANCE and side > 1:
                side -= 1
            return GridPlan(side, side)

        rows = max(1, round_half_up(math.sqrt(count * island.length / island.width)))
        cols = math.ceil(count / rows)
        while rows * cols > count and rows > 1:
            rows -= 1
            cols = math.ceil(count / rows)
        return GridPlan(rows, cols)

    def _rectangular_grid(self, island: RectangularIsland) -> list[LightPosition]:
        count = self._light_count(island)
        grid = self.solid_grid(island)
        x_step = island.width / (grid.cols + 1)
        y_step = island.length / (grid.rows + 1)

        positions = []
        for row in range(1, grid.rows + 1):
            for col in range(1, grid.cols + 1):
                if (row - 1) * grid.cols + col > count:
                    continue
                positions.append(
                    LightPosition(
                        x=island.left_offset + col * x_step,
                        y=island.top_offset + row * y_step,
                        radius=self.light_radius,
                    )
                )
        return positions

    def ring_side_counts(self, island: RectangularIsland) -> dict[str, int]:
        """Fixture count per side of a rectangular cutout ring."""
        count = self._light_count(island)
        c = island.ring_thickness
        enabled = island.sides.enabled_sides()
        inner_width = island.width - 2 * c
        inner_length = island.length - 2 * c
        perimeter = 2 * (inner_width + inner_length)

        if is_nearly_square(island.width, island.length) or perimeter <= 0:
            lengths = {side: 1.0 for side in enabled}
            return distribute_across_sides(count, lengths, equal_split=True)

        long_inner = max(inner_width, inner_length)
        short_inner = min(inner_width, inner_length)
        long_lights = max(
            1,
            min(
                math.floor(long_inner / CUTOUT_MIN_SPACING),
                math.floor(count * long_inner / perimeter * LONG_SIDE_BIAS),
            ),
        )
        short_lights = max(
            1,
            min(
                math.floor(short_inner / CUTOUT_MIN_SPACING),
                math.floor(count * short_inner / perimeter * SHORT_SIDE_BIAS),
            ),
        )

        initial_total = 2 * long_lights + 2 * short_lights
        if initial_total > count:
            factor = count / initial_total
            long_lights = max(1, round_half_up(long_lights * factor))
            short_lights = max(1, round_half_up(short_lights * factor))

        if inner_width > inner_length:
            counts = {"top": long_lights, "bottom": long_lights,
                      "left": short_lights, "right": short_lights}
        else:
            counts = {"top": short_lights, "bottom": short_lights,
                      "left": long_lights, "right": long_lights}
        return {side: counts[side] for side in enabled}

    def _rectangular_ring(self, island: RectangularIsland) -> list[LightPosition]:
        counts = self.ring_side_counts(island)
        c = island.ring_thickness
        left, top = island.left_offset, island.top_offset
        w, l = island.width, island.length

        positions: list[LightPosition] = []
        for side in SIDE_ORDER:
            n = counts.get(side, 0)
            if n <= 0:
                continue
            if side in ("top", "bottom"):
                y = top + c / 2 if side == "top" else top + l - c / 2
                xs = self._spread(n, left, w, c)
                positions.extend(
                    LightPosition(x=x, y=y, radius=self.light_radius) for x in xs
                )
            else:
                x = left + c / 2 if side == "left" else left + w - c / 2
                ys = self._spread(n, top, l, c)
                positions.extend(
                    LightPosition(x=x, y=y, radius=self.light_radius) for y in ys
                )
        return positions

    @staticmethod
    def _spread(n: int, offset: float, extent: float, inset: float) -> list[float]:
        """Evenly spread n points along one edge of a ring, inset at both ends."""
        if n == 1:
            return [offset + extent / 2]
        start = offset + inset
        step = (extent - 2 * inset) / (n - 1)
        return [start + i * step for i in range(n)]

    # --- Circles and ovals ---

    def _ring(
        self, cx: float, cy: float, rx: float, ry: float, n: int
    ) -> list[LightPosition]:
        """n fixtures evenly spaced by angle on an ellipse, starting at angle 0."""
        if n <= 0:
            return []
        step = 2 * math.pi / n
        return [
            LightPosition(
                x=cx + math.cos(i * step) * rx,
                y=cy + math.sin(i * step) * ry,
                radius=self.light_radius,
            )
            for i in range(n)
        ]

    def _circle(self, island: CircularIsland) -> list[LightPosition]:
        if island.radius <= 0:
            return []
        cx, cy = island.center
        r = island.radius

        if island.cutout:
            middle = r - island.ring_thickness / 2
            n = island.light_count or _snap_to_even(2 * math.pi * middle)
            return self._ring(cx, cy, middle, middle, n)

        count = self._light_count(island)
        center = LightPosition(x=cx, y=cy, radius=self.light_radius)
        if count == 1:
            return [center]
        if island.light_count:
            n = min(count - 1, MAX_RING_LIGHTS)
        else:
            n = _snap_to_multiple_of_four(count - 1)
        ring_radius = r * RING_RADIUS_FACTOR
        return [center, *self._ring(cx, cy, ring_radius, ring_radius, n)]

    def _oval(self, island: OvalIsland) -> list[LightPosition]:
        if island.radius_x <= 0 or island.radius_y <= 0:
            return []
        cx, cy = island.center
        rx, ry = island.radius_x, island.radius_y
        nearly_circular = island.is_nearly_circular

        if island.cutout:
            c = island.ring_thickness
            mrx, mry = rx - c / 2, ry - c / 2
            circumference = 2 * math.pi * math.sqrt(max(0.0, mrx * mry))
            if island.light_count:
                n = island.light_count
            elif nearly_circular:
                n = _snap_to_even(circumference)
            else:
                n = min(MAX_RING_LIGHTS, max(MIN_RING_LIGHTS, round_half_up(circumference / 2)))
            return self._ring(cx, cy, mrx, mry, n)

        count = self._light_count(island)
        center = LightPosition(x=cx, y=cy, radius=self.light_radius)
        if count == 1:
            return [center]
        if nearly_circular and not island.light_count:
            n = _snap_to_multiple_of_four(count - 1)
        else:
            n = min(count - 1, MAX_RING_LIGHTS)
        return [
            center,
            *self._ring(cx, cy, rx * RING_RADIUS_FACTOR, ry * RING_RADIUS_FACTOR, n),
        ]

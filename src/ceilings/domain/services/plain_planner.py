"""Plain ceiling light planner.

Places fixtures on a rows x columns grid inside a rectangular false
ceiling, keeping a clearance band along the ceiling's edges and aiming
for 3-4 ft between neighbouring fixtures.
"""

from __future__ import annotations

import logging
import math

from ..constants import (
    ELONGATION_THRESHOLD,
    MAX_LIGHT_SPACING,
    MIN_LIGHT_SPACING,
    MIN_WALL_DISTANCE,
    OVERSHOOT_TOLERANCE,
    PLAIN_LIGHT_RADIUS,
)
from ..value_objects import LightPosition, PlainCeiling, is_nearly_square
from .grid_fitting import (
    GridPlan,
    remove_excess_slots,
    round_half_up,
    search_grid_neighborhood,
)

logger = logging.getLogger(__name__)

__all__ = ["PlainCeilingPlanner"]


class PlainCeilingPlanner:
    """Computes fixture positions for a plain (flat rectangular) ceiling.

    The grid is chosen in three steps:
    1. Shrink the rectangle by MIN_WALL_DISTANCE on every side. If nothing
       is left, a single fixture goes at the rectangle's center.
    2. Pick rows and columns. Square rectangles get a symmetric grid;
       elongated ones get more lines along their longer side.
    3. When an explicit count is smaller than the grid, thin the grid with
       remove_excess_slots() so exactly that many fixtures remain.

    Example:
        >>> planner = PlainCeilingPlanner()
        >>> ceiling = PlainCeiling(width=9.6, length=12, left_offset=1.2, top_offset=1.5)
        >>> planner.plan_grid(ceiling)
        GridPlan(rows=3, cols=2)
    """

    def __init__(self, light_radius: float = PLAIN_LIGHT_RADIUS) -> None:
        self.light_radius = light_radius

    def plan_grid(self, ceiling: PlainCeiling) -> GridPlan | None:
        """Choose the fixture grid for a ceiling.

        Returns:
            The chosen GridPlan, or None when the clearance band leaves no
            usable interior and a single centered fixture is used instead.
        """
        eff_width = max(0.0, ceiling.width - 2 * MIN_WALL_DISTANCE)
        eff_length = max(0.0, ceiling.length - 2 * MIN_WALL_DISTANCE)
        if eff_width <= 0 or eff_length <= 0:
            return None

        square = is_nearly_square(ceiling.width, ceiling.length)
        if ceiling.light_count:
            if square:
                return self._square_grid_for_count(ceiling.light_count)
            return self._rectangular_grid_for_count(
                ceiling.light_count, ceiling.width, ceiling.length
            )
        return self._auto_grid(ceiling.width, ceiling.length, eff_width, eff_length, square)

    def calculate(self, ceiling: PlainCeiling) -> list[LightPosition]:
        """Compute fixture positions for a plain ceiling.

        Args:
            ceiling: The plain ceiling, positioned in room coordinates.

        Returns:
            Fixture positions in row-major order.
        """
        grid = self.plan_grid(ceiling)
        if grid is None:
            logger.debug(
                f"Plain ceiling {ceiling.width}x{ceiling.length} is inside the "
                "clearance band; using a single centered fixture"
            )
            return [
                LightPosition(
                    x=ceiling.left_offset + ceiling.width / 2,
                    y=ceiling.top_offset + ceiling.length / 2,
                    radius=self.light_radius,
                )
            ]

        target = ceiling.light_count or grid.slots
        keep = remove_excess_slots(grid.rows, grid.cols, target)

        xs = self._axis_positions(grid.cols, ceiling.left_offset, ceiling.width)
        ys = self._axis_positions(grid.rows, ceiling.top_offset, ceiling.length)

        positions = [
            LightPosition(x=xs[c], y=ys[r], radius=self.light_radius)
            for r in range(grid.rows)
            for c in range(grid.cols)
            if keep[r][c]
        ]
        logger.debug(
            f"Plain ceiling {ceiling.width}x{ceiling.length}: "
            f"{grid.rows}x{grid.cols} grid, {len(positions)} fixtures"
        )
        return positions

    def _axis_positions(self, count: int, offset: float, extent: float) -> list[float]:
        """Evenly spaced coordinates along one axis of the effective interior."""
        if count == 1:
            return [offset + extent / 2]
        effective = extent - 2 * MIN_WALL_DISTANCE
        step = effective / (count - 1)
        start = offset + MIN_WALL_DISTANCE
        return [start + i * step for i in range(count)]

    def _auto_grid(
        self,
        width: float,
        length: float,
        eff_width: float,
        eff_length: float,
        square: bool,
    ) -> GridPlan:
        """Size the grid from the spacing envelope alone."""
        max_cols = math.floor(eff_width / MIN_LIGHT_SPACING) + 1
        max_rows = math.floor(eff_length / MIN_LIGHT_SPACING) + 1
        min_cols = math.ceil(eff_width / MAX_LIGHT_SPACING) + 1
        min_rows = math.ceil(eff_length / MAX_LIGHT_SPACING) + 1

        if square:
            rows = max(2, min(max_rows, min_rows))
            return GridPlan(rows, rows)

        aspect = length / width
        if length > width:
            rows = max(2, min_rows)
            cols = max(1, min(max_cols, round_half_up(rows / aspect)))
        else:
            cols = max(2, min_cols)
            rows = max(1, min(max_rows, round_half_up(cols * aspect)))

        grid = GridPlan(rows, cols)
        if (length > width and cols > rows) or (length <= width and rows > cols):
            grid = grid.transposed()
        return grid

    def _square_grid_for_count(self, count: int) -> GridPlan:
        """Smallest symmetric grid covering ``count``, trimmed if far too large."""
        side = math.ceil(math.sqrt(count))
        rows = cols = side
        if rows * cols > count * OVERSHOOT_TOLERANCE:
            if rows > 1:
                rows -= 1
            elif cols > 1:
                cols -= 1
        return GridPlan(rows, cols)

    def _rectangular_grid_for_count(
        self, count: int, width: float, length: float
    ) -> GridPlan:
        """Grid near ``count`` slots whose long side carries more lines."""
        aspect = length / width

        if length > width:
            rows = math.ceil(math.sqrt(count * aspect))
            cols = math.ceil(count / rows)
            if cols > rows and length > width * ELONGATION_THRESHOLD:
                rows, cols = cols, rows
        else:
            cols = math.ceil(math.sqrt(count / aspect))
            rows = math.ceil(count / cols)
            if rows > cols and width > length * ELONGATION_THRESHOLD:
                rows, cols = cols, rows

        while rows * cols > count + 1:
            if length > width and rows > cols and cols > 1:
                cols -= 1
            elif width > length and cols > rows and rows > 1:
                rows -= 1
            elif rows > 1:
                rows -= 1
            elif cols > 1:
                cols -= 1
            else:
                break

        grid = search_grid_neighborhood(rows, cols, count, width, length)

        if (length > width and grid.rows < grid.cols) or (
            width > length and grid.cols < grid.rows
        ):
            grid = grid.transposed()

        # Never hand back fewer slots than requested.
        rows, cols = grid.rows, grid.cols
        while rows * cols < count:
            if length >= width:
                rows += 1
            else:
                cols += 1
        return GridPlan(rows, cols)

"""Grid fitting helpers shared by the ceiling light planners.

This module holds the small constrained-search routines used to turn a
requested fixture count into a rows x columns grid:
- search_grid_neighborhood(): pick the closest grid around a seed
- remove_excess_slots(): thin an oversized grid down to an exact count
- round_half_up(): the rounding rule every planner uses
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..constants import ORIENTATION_SLACK

__all__ = [
    "GridPlan",
    "follows_orientation",
    "remove_excess_slots",
    "round_half_up",
    "search_grid_neighborhood",
]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounding up.

    Python's built-in round() uses banker's rounding (round(2.5) == 2),
    which would shift fixture counts on exact halves.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(2.4999)
        2
    """
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class GridPlan:
    """A rows x columns fixture grid."""

    rows: int
    cols: int

    @property
    def slots(self) -> int:
        return self.rows * self.cols

    def transposed(self) -> "GridPlan":
        return GridPlan(rows=self.cols, cols=self.rows)


def follows_orientation(rows: int, cols: int, width: float, length: float) -> bool:
    """Check that the longer side of the area has at least as many grid lines.

    Rows run along the length axis and columns along the width axis, so a
    longer-than-wide area should have rows >= cols and vice versa. Nearly
    equal sides accept any orientation.
    """
    return (
        (length > width and rows >= cols)
        or (width > length and cols >= rows)
        or abs(width - length) < ORIENTATION_SLACK
    )


def search_grid_neighborhood(
    rows: int,
    cols: int,
    target: int,
    width: float,
    length: float,
) -> GridPlan:
    """Find the grid around (rows, cols) whose slot count is closest to target.

    Candidates are every (r, c) with r in [rows-1, rows+1] and c in
    [cols-1, cols+1] (never below 1), enumerated rows-outer. A candidate
    must follow the area's orientation to be chosen. It replaces the
    incumbent when it is strictly closer to the target, or equally close
    while the incumbent does not follow the orientation.

    Args:
        rows: Seed row count.
        cols: Seed column count.
        target: Requested fixture count.
        width: Extent along the column axis.
        length: Extent along the row axis.

    Returns:
        The best GridPlan found; the seed itself when nothing beats it.
    """
    best = GridPlan(rows, cols)
    best_diff = abs(best.slots - target)

    for r in range(max(1, rows - 1), rows + 2):
        for c in range(max(1, cols - 1), cols + 2):
            if not follows_orientation(r, c, width, length):
                continue
            diff = abs(r * c - target)
            incumbent_ok = follows_orientation(best.rows, best.cols, width, length)
            if diff < best_diff or (diff == best_diff and not incumbent_ok):
                best = GridPlan(r, c)
                best_diff = diff

    return best


def remove_excess_slots(rows: int, cols: int, target: int) -> list[list[bool]]:
    """Build a keep-mask that leaves exactly ``target`` slots of the grid.

    When at most four slots must go, the corners are dropped first in the
    order top-left, top-right, bottom-left, bottom-right. Anything still
    in excess is removed in a checkerboard sweep: row r starts at column
    r % 2 and steps by two, rows in order.

    Args:
        rows: Grid rows.
        cols: Grid columns.
        target: Number of slots to keep.

    Returns:
        rows x cols list of booleans, True where a fixture is kept.
    """
    keep = [[True] * cols for _ in range(rows)]
    to_remove = max(0, rows * cols - max(0, target))
    removed = 0

    if 0 < to_remove <= 4:
        corners = [(0, 0), (0, cols - 1), (rows - 1, 0), (rows - 1, cols - 1)]
        for r, c in corners:
            if removed >= to_remove:
                break
            if keep[r][c]:
                keep[r][c] = False
                removed += 1

    if removed < to_remove:
        for r in range(rows):
            for c in range(r % 2, cols, 2):
                if removed >= to_remove:
                    break
                if keep[r][c]:
                    keep[r][c] = False
                    removed += 1

    # A narrow grid can exhaust the checkerboard before the target is met.
    if removed < to_remove:
        for r in range(rows):
            for c in range(cols):
                if removed >= to_remove:
                    break
                if keep[r][c]:
                    keep[r][c] = False
                    removed += 1

    return keep

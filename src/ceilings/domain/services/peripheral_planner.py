"""Peripheral ceiling light planner.

A peripheral ceiling is a band of constant width running along the room
walls. Fixtures sit on the band's center line, spread evenly along each
enabled side.
"""

from __future__ import annotations

import logging
import math

from ..constants import MAX_LIGHT_SPACING, MIN_LIGHT_SPACING, PERIPHERAL_LIGHT_RADIUS
from ..value_objects import LightPosition, PeripheralCeiling, RoomDimensions
from .grid_fitting import round_half_up

logger = logging.getLogger(__name__)

__all__ = ["PeripheralCeilingPlanner", "distribute_across_sides"]

SIDE_ORDER = ("top", "bottom", "left", "right")


def _side_length(side: str, room: RoomDimensions) -> float:
    return room.width if side in ("top", "bottom") else room.length


def distribute_across_sides(
    total: int,
    side_lengths: dict[str, float],
    equal_split: bool,
) -> dict[str, int]:
    """Split ``total`` fixtures across sides.

    With ``equal_split`` each side gets the same share and the remainder
    goes one at a time to sides in insertion order. Otherwise each side
    gets a share proportional to its length; any shortfall is handed to
    sides from longest to shortest, and any surplus is taken from
    whichever side currently holds the most.

    Args:
        total: Number of fixtures to distribute.
        side_lengths: Length of each enabled side, in distribution order.
        equal_split: Ignore lengths and split evenly.

    Returns:
        Fixture count per side. The counts always sum to ``total``.
    """
    sides = list(side_lengths)
    if not sides or total <= 0:
        return {side: 0 for side in sides}

    if equal_split:
        share, remainder = divmod(total, len(sides))
        counts = {side: share for side in sides}
        for side in sides[:remainder]:
            counts[side] += 1
        return counts

    perimeter = sum(side_lengths.values())
    counts = {
        side: round_half_up(total * length / perimeter)
        for side, length in side_lengths.items()
    }

    assigned = sum(counts.values())
    by_length = sorted(sides, key=lambda s: side_lengths[s], reverse=True)
    i = 0
    while assigned < total:
        counts[by_length[i % len(by_length)]] += 1
        assigned += 1
        i += 1
    while assigned > total:
        busiest = max(sides, key=lambda s: counts[s])
        counts[busiest] -= 1
        assigned -= 1

    return counts


class PeripheralCeilingPlanner:
    """Computes fixture positions along a peripheral band."""

    def __init__(self, light_radius: float = PERIPHERAL_LIGHT_RADIUS) -> None:
        self.light_radius = light_radius

    def total_light_count(self, ceiling: PeripheralCeiling, room: RoomDimensions) -> int:
        """Fixture count for the band, explicit or derived from its length.

        The automatic count keeps fixtures 3-4 ft apart along the enabled
        walls. In a square room it is rounded down to a multiple of the
        number of enabled sides so every side gets the same share.
        """
        enabled = ceiling.sides.enabled_sides()
        if not enabled:
            return 0
        if ceiling.light_count:
            return ceiling.light_count

        perimeter = sum(_side_length(side, room) for side in enabled)
        count = min(
            math.floor(perimeter / MIN_LIGHT_SPACING),
            math.ceil(perimeter / MAX_LIGHT_SPACING),
        )
        if room.is_square:
            count = (count // len(enabled)) * len(enabled)
        return count

    def side_counts(self, ceiling: PeripheralCeiling, room: RoomDimensions) -> dict[str, int]:
        """Fixture count per enabled side."""
        enabled = ceiling.sides.enabled_sides()
        lengths = {side: _side_length(side, room) for side in enabled}
        return distribute_across_sides(
            self.total_light_count(ceiling, room), lengths, equal_split=room.is_square
        )

    def calculate(
        self, ceiling: PeripheralCeiling, room: RoomDimensions
    ) -> list[LightPosition]:
        """Compute fixture positions along the band.

        Fixtures on each side divide the wall into n + 1 equal parts and sit
        half a band width in from the wall. Sides are emitted in the order
        top, bottom, left, right.
        """
        counts = self.side_counts(ceiling, room)
        half_band = ceiling.width / 2
        positions: list[LightPosition] = []

        for side in SIDE_ORDER:
            n = counts.get(side, 0)
            for i in range(1, n + 1):
                match side:
                    case "top":
                        x, y = i * room.width / (n + 1), half_band
                    case "bottom":
                        x, y = i * room.width / (n + 1), room.length - half_band
                    case "left":
                        x, y = half_band, i * room.length / (n + 1)
                    case _:
                        x, y = room.width - half_band, i * room.length / (n + 1)
                positions.append(LightPosition(x=x, y=y, radius=self.light_radius))

        logger.debug(f"Peripheral band {ceiling.width} ft wide: side counts {counts}")
        return positions

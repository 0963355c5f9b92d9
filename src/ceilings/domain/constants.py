"""Lighting layout constants.

This module provides:
- Clearance and spacing bounds for grid and perimeter placement
- Fixture radii drawn for each ceiling type
- Area-per-fixture divisors used for default fixture counts
- Cutout ring defaults and ring sizing bounds

All lengths are in feet.
"""

from __future__ import annotations


# --- Spacing (plain and peripheral ceilings) ---

# Minimum distance between a fixture and the edge of its ceiling
MIN_WALL_DISTANCE: float = 2.0

# Target spacing envelope between neighbouring fixtures
MIN_LIGHT_SPACING: float = 3.0
MAX_LIGHT_SPACING: float = 4.0

# Two extents count as "square" when they differ by less than this share
# of the smaller one
SQUARE_TOLERANCE: float = 0.1

# A square grid may overshoot an explicit count by this factor before a
# row is dropped
OVERSHOOT_TOLERANCE: float = 1.5

# Rectangles more elongated than this keep more lines along the long side
ELONGATION_THRESHOLD: float = 1.2

# Width/length difference below which any grid orientation is acceptable
ORIENTATION_SLACK: float = 0.5


# --- Fixture radii ---

PLAIN_LIGHT_RADIUS: float = 0.3
PERIPHERAL_LIGHT_RADIUS: float = 0.25
ISLAND_LIGHT_RADIUS: float = 0.3


# --- Default counts (square feet of ceiling per fixture) ---

RECTANGLE_AREA_PER_LIGHT: float = 4.5
CIRCLE_AREA_PER_LIGHT: float = 5.0
OVAL_AREA_PER_LIGHT: float = 4.5

# Minimum default counts for ring-shaped islands
MIN_RECTANGULAR_CUTOUT_LIGHTS: int = 4
MIN_CIRCULAR_CUTOUT_LIGHTS: int = 5
MIN_OVAL_CUTOUT_LIGHTS: int = 4


# --- Cutout islands ---

DEFAULT_CUTOUT_WIDTH: float = 0.5
MIN_CUTOUT_WIDTH: float = 0.1

# Minimum spacing between fixtures along a rectangular cutout ring
CUTOUT_MIN_SPACING: float = 1.0

# Long sides of a non-square cutout ring get slightly more fixtures
LONG_SIDE_BIAS: float = 1.1
SHORT_SIDE_BIAS: float = 0.9


# --- Rings (circular and oval islands) ---

# Solid islands place their ring at this fraction of the radius
RING_RADIUS_FACTOR: float = 0.6

MIN_RING_LIGHTS: int = 4
MAX_RING_LIGHTS: int = 8

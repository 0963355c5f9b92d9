"""Ceiling lighting planner.

Computes light fixture positions for plain, peripheral, island and
combined false ceilings, and renders them as reports, JSON, CSV or SVG.
"""

__version__ = "1.0.0"

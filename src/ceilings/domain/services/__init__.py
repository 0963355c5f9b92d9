"""Domain services: the fixture planners and the dispatcher over them."""

from .grid_fitting import (
    GridPlan,
    follows_orientation,
    remove_excess_slots,
    round_half_up,
    search_grid_neighborhood,
)
from .island_planner import IslandCeilingPlanner
from .lighting_calculator import (
    LightingCalculator,
    calculate_lighting_layers,
    calculate_lighting_positions,
)
from .peripheral_planner import PeripheralCeilingPlanner, distribute_across_sides
from .plain_planner import PlainCeilingPlanner

__all__ = [
    "GridPlan",
    "IslandCeilingPlanner",
    "LightingCalculator",
    "PeripheralCeilingPlanner",
    "PlainCeilingPlanner",
    "calculate_lighting_layers",
    "calculate_lighting_positions",
    "distribute_across_sides",
    "follows_orientation",
    "remove_excess_slots",
    "round_half_up",
    "search_grid_neighborhood",
]

"""Validators subpackage - modular validators for ceiling configurations.

Validators are organized by ceiling type:
- PlainCeilingValidator: dimensions, room containment, spacing capacity
- PeripheralCeilingValidator: band width and enabled sides
- IslandCeilingValidator: shape dimensions, cutout ring, room containment
- LayoutValidator: selected type and combined layer consistency
"""

from .base import ValidationError, ValidationResult, ValidationWarning
from .ceiling import (
    IslandCeilingValidator,
    LayoutValidator,
    PeripheralCeilingValidator,
    PlainCeilingValidator,
)
from .helpers import active_sections

__all__ = [
    # Base classes
    "ValidationError",
    "ValidationWarning",
    "ValidationResult",
    # Validators
    "IslandCeilingValidator",
    "LayoutValidator",
    "PeripheralCeilingValidator",
    "PlainCeilingValidator",
    # Helpers
    "active_sections",
]

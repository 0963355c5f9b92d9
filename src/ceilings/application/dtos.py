"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ceilings.domain import CeilingConfig, CeilingType, LightingLayer, LightPosition


@dataclass
class LayerSummary:
    """Fixture counts for one ceiling layer.

    Attributes:
        ceiling_type: The layer's ceiling type.
        count: Fixtures actually placed.
        requested: Explicit count from the configuration, if any.
        recommended: Count the planner derives when none is requested.
    """

    ceiling_type: CeilingType
    count: int
    requested: int | None = None
    recommended: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "ceiling_type": self.ceiling_type.value,
            "count": self.count,
            "requested": self.requested,
            "recommended": self.recommended,
        }


@dataclass
class LightingSummary:
    """Totals across all layers of a lighting plan."""

    total_fixtures: int
    room_area: float
    layers: list[LayerSummary] = field(default_factory=list)

    @property
    def area_per_fixture(self) -> float | None:
        """Room floor area served by each fixture, in square feet."""
        if self.total_fixtures == 0:
            return None
        return self.room_area / self.total_fixtures

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_fixtures": self.total_fixtures,
            "room_area": self.room_area,
            "area_per_fixture": self.area_per_fixture,
            "layers": [layer.to_dict() for layer in self.layers],
        }


@dataclass
class LightingOutput:
    """Output DTO containing a generated lighting plan.

    Attributes:
        config: The domain configuration the plan was computed from.
        layers: Fixtures grouped by contributing layer, in dispatch order.
        summary: Fixture totals.
        errors: Blocking validation errors; when present no plan was computed.
        warnings: Advisory validation messages.
    """

    config: CeilingConfig | None
    layers: list[LightingLayer] = field(default_factory=list)
    summary: LightingSummary | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the plan was generated successfully."""
        return len(self.errors) == 0

    @property
    def positions(self) -> list[LightPosition]:
        """All fixtures, concatenated in layer order."""
        return [position for layer in self.layers for position in layer.positions]

    def to_dict(self) -> dict[str, Any]:
        """Serialize the plan for JSON export and API responses."""
        room = self.config.room if self.config else None
        return {
            "room": (
                {"width": room.width, "length": room.length, "height": room.height}
                if room
                else None
            ),
            "ceiling_type": (
                self.config.ceiling_type.value
                if self.config and self.config.ceiling_type
                else None
            ),
            "positions": [position.to_dict() for position in self.positions],
            "layers": [
                {
                    "ceiling_type": layer.ceiling_type.value,
                    "positions": [position.to_dict() for position in layer.positions],
                }
                for layer in self.layers
            ],
            "summary": self.summary.to_dict() if self.summary else None,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }

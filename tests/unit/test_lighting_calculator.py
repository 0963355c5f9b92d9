"""Unit tests for LightingCalculator dispatch and combined ceilings."""

from __future__ import annotations

from ceilings.domain import (
    CeilingConfig,
    CeilingType,
    CircularIsland,
    CombinedCeiling,
    LightingCalculator,
    PeripheralCeiling,
    PlainCeiling,
    RectangularIsland,
    RoomDimensions,
    calculate_lighting_layers,
    calculate_lighting_positions,
)
from ceilings.domain.constants import PERIPHERAL_LIGHT_RADIUS, PLAIN_LIGHT_RADIUS


ROOM_10 = RoomDimensions(width=10, length=10)


def _combined(**kwargs) -> CeilingConfig:
    ceiling = CombinedCeiling(
        plain=PlainCeiling(width=6, length=6, left_offset=2, top_offset=2),
        peripheral=PeripheralCeiling(width=1.5, light_count=8),
        island=CircularIsland(radius=2, left_offset=3, top_offset=3),
        **kwargs,
    )
    return CeilingConfig(room=ROOM_10, ceiling=ceiling)


class TestSingleCeilings:
    """Each ceiling kind is routed to its planner."""

    def test_plain(self, calculator: LightingCalculator) -> None:
        config = CeilingConfig(
            room=RoomDimensions(width=12, length=15),
            ceiling=PlainCeiling(width=9.6, length=12, left_offset=1.2, top_offset=1.5),
        )
        positions = calculator.calculate(config)

        assert len(positions) == 6
        assert all(p.radius == PLAIN_LIGHT_RADIUS for p in positions)

    def test_peripheral(self, calculator: LightingCalculator) -> None:
        config = CeilingConfig(room=ROOM_10, ceiling=PeripheralCeiling(width=1.5, light_count=8))
        positions = calculator.calculate(config)

        assert len(positions) == 8
        assert all(p.radius == PERIPHERAL_LIGHT_RADIUS for p in positions)

    def test_island(self, calculator: LightingCalculator) -> None:
        config = CeilingConfig(
            room=RoomDimensions(width=12, length=12),
            ceiling=CircularIsland(radius=3, left_offset=3, top_offset=3),
        )
        assert len(calculator.calculate(config)) == 5

    def test_missing_ceiling_gives_no_fixtures(self, calculator: LightingCalculator) -> None:
        config = CeilingConfig(room=ROOM_10, ceiling=None, selected_type=CeilingType.PLAIN)
        assert calculator.calculate(config) == []
        assert calculator.calculate_layers(config) == []

    def test_layer_type_matches_ceiling(self, calculator: LightingCalculator) -> None:
        config = CeilingConfig(room=ROOM_10, ceiling=RectangularIsland(width=4, length=6))
        layers = calculator.calculate_layers(config)

        assert [layer.ceiling_type for layer in layers] == [CeilingType.ISLAND]
        assert layers[0].count == 5


class TestCombinedCeiling:
    """Layers are concatenated in plain, peripheral, island order."""

    def test_plain_and_peripheral(self, calculator: LightingCalculator) -> None:
        config = _combined(use_plain=True, use_peripheral=True)
        positions = calculator.calculate(config)

        assert len(positions) == 12
        assert [p.radius for p in positions[:4]] == [PLAIN_LIGHT_RADIUS] * 4
        assert [p.radius for p in positions[4:]] == [PERIPHERAL_LIGHT_RADIUS] * 8

    def test_disabled_island_ignored(self, calculator: LightingCalculator) -> None:
        layers = calculator.calculate_layers(_combined(use_plain=True, use_peripheral=True))
        assert [layer.ceiling_type for layer in layers] == [
            CeilingType.PLAIN,
            CeilingType.PERIPHERAL,
        ]

    def test_all_layers(self, calculator: LightingCalculator) -> None:
        config = _combined(use_plain=True, use_peripheral=True, use_island=True)
        layers = calculator.calculate_layers(config)

        assert [layer.ceiling_type for layer in layers] == [
            CeilingType.PLAIN,
            CeilingType.PERIPHERAL,
            CeilingType.ISLAND,
        ]
        assert sum(layer.count for layer in layers) == len(calculator.calculate(config))

    def test_flag_without_sub_ceiling(self, calculator: LightingCalculator) -> None:
        config = CeilingConfig(
            room=ROOM_10,
            ceiling=CombinedCeiling(use_plain=True, use_island=True),
        )
        assert calculator.calculate(config) == []

    def test_no_flags(self, calculator: LightingCalculator) -> None:
        assert calculator.calculate(_combined()) == []

    def test_layers_match_standalone_ceilings(self, calculator: LightingCalculator) -> None:
        plain = PlainCeiling(width=6, length=6, left_offset=2, top_offset=2)
        standalone = calculator.calculate(CeilingConfig(room=ROOM_10, ceiling=plain))
        combined = calculator.calculate(_combined(use_plain=True))
        assert combined == standalone


class TestModuleFunctions:
    def test_calculate_lighting_positions(self) -> None:
        config = _combined(use_plain=True, use_peripheral=True)
        assert len(calculate_lighting_positions(config)) == 12

    def test_calculate_lighting_layers(self) -> None:
        layers = calculate_lighting_layers(_combined(use_peripheral=True))
        assert len(layers) == 1
        assert layers[0].count == 8

    def test_deterministic(self) -> None:
        config = _combined(use_plain=True, use_peripheral=True, use_island=True)
        assert calculate_lighting_positions(config) == calculate_lighting_positions(config)

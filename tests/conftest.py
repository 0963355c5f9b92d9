"""Pytest configuration and shared fixtures for ceiling lighting tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from ceilings.application import GenerateLightingCommand, LightingOutput
from ceilings.application.config import load_config_from_dict
from ceilings.domain import LightingCalculator

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the JSON configuration fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def calculator() -> LightingCalculator:
    """Create a LightingCalculator with default planners."""
    return LightingCalculator()


@pytest.fixture
def generate_command() -> GenerateLightingCommand:
    """Create a GenerateLightingCommand with a default calculator."""
    return GenerateLightingCommand()


@pytest.fixture
def plain_config_dict() -> dict[str, Any]:
    """A valid plain ceiling configuration in the designer's camelCase."""
    return {
        "schemaVersion": "1.0",
        "roomDimensions": {"width": 12, "length": 15, "height": 10},
        "ceilingType": "plain",
        "plainConfig": {
            "width": 9.6,
            "length": 12,
            "leftOffset": 1.2,
            "topOffset": 1.5,
        },
    }


@pytest.fixture
def combined_config_dict() -> dict[str, Any]:
    """A valid combined configuration with plain and peripheral layers."""
    return {
        "roomDimensions": {"width": 10, "length": 10},
        "ceilingType": "combined",
        "combinedConfig": {
            "usePlain": True,
            "usePeripheral": True,
            "useIsland": False,
            "plainConfig": {"width": 6, "length": 6, "leftOffset": 2, "topOffset": 2},
            "peripheralConfig": {"width": 1.5, "lightCount": 8},
            "islandConfig": {"shape": "circle", "radius": 1, "leftOffset": 4, "topOffset": 4},
        },
    }


@pytest.fixture
def plain_output(
    generate_command: GenerateLightingCommand, plain_config_dict: dict[str, Any]
) -> LightingOutput:
    """A generated plan for the plain configuration (6 fixtures)."""
    return generate_command.execute(load_config_from_dict(plain_config_dict))


@pytest.fixture
def combined_output(
    generate_command: GenerateLightingCommand, combined_config_dict: dict[str, Any]
) -> LightingOutput:
    """A generated plan for the combined configuration (4 plain + 8 peripheral)."""
    return generate_command.execute(load_config_from_dict(combined_config_dict))

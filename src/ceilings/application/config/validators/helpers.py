"""Helper functions shared by the ceiling validators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ceilings.domain.value_objects import CeilingType

from .base import ValidationResult

if TYPE_CHECKING:
    from ceilings.application.config.schemas import LightingConfiguration


def active_sections(
    config: LightingConfiguration, ceiling_type: CeilingType
) -> list[tuple[str, Any]]:
    """Return the sub-configurations of one type that will be planned.

    For a single-type configuration this is the top-level section when the
    selected type matches. For a combined configuration it is the nested
    section when its ``use*`` flag is on.

    Returns:
        List of (json_path, section) pairs. Missing sections are skipped.
    """
    key = {
        CeilingType.PLAIN: "plain_config",
        CeilingType.PERIPHERAL: "peripheral_config",
        CeilingType.ISLAND: "island_config",
    }[ceiling_type]
    alias = {
        CeilingType.PLAIN: "plainConfig",
        CeilingType.PERIPHERAL: "peripheralConfig",
        CeilingType.ISLAND: "islandConfig",
    }[ceiling_type]

    if config.ceiling_type == ceiling_type:
        section = getattr(config, key)
        return [(alias, section)] if section is not None else []

    if config.ceiling_type == CeilingType.COMBINED and config.combined_config:
        combined = config.combined_config
        enabled = {
            CeilingType.PLAIN: combined.use_plain,
            CeilingType.PERIPHERAL: combined.use_peripheral,
            CeilingType.ISLAND: combined.use_island,
        }[ceiling_type]
        section = getattr(combined, key)
        if enabled and section is not None:
            return [(f"combinedConfig.{alias}", section)]

    return []


def is_positive(value: float | None) -> bool:
    return value is not None and value > 0


def check_cove_positions(section: Any, path: str, result: ValidationResult) -> None:
    """Cove lighting needs at least one edge to run along."""
    if section.cove_light and not section.cove_light_positions:
        result.add_error(
            path=f"{path}.coveLightPositions",
            message="Please select at least one position for cove lighting",
        )

"""Starter configurations sized to a room.

Each template mirrors the layout the ceiling designer fills in when the
user first selects a ceiling type: a plain ceiling covering the middle
80% of the room, a border band up to 2 ft wide, and a rectangular island
covering the middle 40%.
"""

import json
from pathlib import Path

from ceilings.application.config.schemas import LightingConfiguration


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


# Template metadata: name -> description
TEMPLATE_METADATA: dict[str, str] = {
    "plain": "Flat ceiling over the middle 80% of the room",
    "peripheral": "Border band along all four walls",
    "island": "Rectangular island over the middle 40% of the room",
    "combined": "Plain ceiling inside a peripheral band",
}


def _plain_section(width: float, length: float) -> dict:
    return {
        "width": width * 0.8,
        "length": length * 0.8,
        "topOffset": length * 0.1,
        "leftOffset": width * 0.1,
        "coveLight": False,
        "coveLightPositions": [],
    }


def _peripheral_section(width: float, length: float) -> dict:
    return {
        "width": min(2.0, min(width, length) * 0.15),
        "sides": {"top": True, "right": True, "bottom": True, "left": True},
        "coveLight": False,
        "coveLightPositions": [],
    }


def _island_section(width: float, length: float) -> dict:
    return {
        "shape": "rectangle",
        "width": width * 0.4,
        "length": length * 0.4,
        "topOffset": length * 0.3,
        "leftOffset": width * 0.3,
        "coveLight": False,
        "coveLightPositions": [],
    }


class TemplateManager:
    """Builds starter configurations for each ceiling type.

    Example:
        manager = TemplateManager()
        config = manager.build_template("plain", width=12, length=15)
        manager.init_template("combined", Path("living-room.json"), width=12, length=15)
    """

    def list_templates(self) -> list[tuple[str, str]]:
        """List all available templates as (name, description) tuples."""
        return list(TEMPLATE_METADATA.items())

    def template_exists(self, name: str) -> bool:
        return name in TEMPLATE_METADATA

    def build_template(
        self, name: str, width: float, length: float, height: float = 9.0
    ) -> LightingConfiguration:
        """Build a starter configuration for a room.

        Args:
            name: Template name (a ceiling type).
            width: Room width in feet.
            length: Room length in feet.
            height: Room height in feet.

        Returns:
            A validated LightingConfiguration.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        if name not in TEMPLATE_METADATA:
            raise TemplateNotFoundError(name)

        data: dict = {
            "schemaVersion": "1.0",
            "roomDimensions": {"width": width, "length": length, "height": height},
            "ceilingType": name,
        }
        match name:
            case "plain":
                data["plainConfig"] = _plain_section(width, length)
            case "peripheral":
                data["peripheralConfig"] = _peripheral_section(width, length)
            case "island":
                data["islandConfig"] = _island_section(width, length)
            case "combined":
                data["combinedConfig"] = {
                    "usePlain": True,
                    "usePeripheral": True,
                    "useIsland": False,
                    "plainConfig": _plain_section(width, length),
                    "peripheralConfig": _peripheral_section(width, length),
                }
        return LightingConfiguration.model_validate(data)

    def get_template(self, name: str, width: float, length: float, height: float = 9.0) -> str:
        """Render a starter configuration as camelCase JSON text."""
        config = self.build_template(name, width, length, height)
        return json.dumps(
            config.model_dump(mode="json", by_alias=True, exclude_none=True), indent=2
        )

    def init_template(
        self,
        name: str,
        output_path: Path,
        width: float,
        length: float,
        height: float = 9.0,
    ) -> None:
        """Write a starter configuration to ``output_path``.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        content = self.get_template(name, width, length, height)
        output_path.write_text(content + "\n", encoding="utf-8")

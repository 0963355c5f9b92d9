"""JSON exporter for lighting plans.

Exports the room, every fixture position (flat and grouped by layer),
the per-layer summary and any validation warnings.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from ceilings.infrastructure.exporters.base import ExporterRegistry, require_plan

if TYPE_CHECKING:
    from ceilings.application.dtos import LightingOutput


logger = logging.getLogger(__name__)

# Version of the exported document layout
SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("json")
class JsonExporter:
    """JSON exporter for lighting plans.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    media_type: ClassVar[str] = "application/json"

    def __init__(self, include_layers: bool = True, indent: int = 2) -> None:
        """Initialize the JSON exporter.

        Args:
            include_layers: Whether to include fixtures grouped by layer.
            indent: JSON indentation level (default 2 spaces).
        """
        self.include_layers = include_layers
        self.indent = indent

    def export(self, output: LightingOutput, path: Path) -> None:
        """Export the plan as JSON to file."""
        path.write_text(self.export_string(output))
        logger.debug(f"Wrote JSON plan to {path}")

    def export_string(self, output: LightingOutput) -> str:
        """Export the plan as a JSON string.

        Raises:
            ValueError: If the output carries errors instead of a plan.
        """
        require_plan(output, self.format_name)
        data = {"schema_version": SCHEMA_VERSION, **output.to_dict()}
        if not self.include_layers:
            data.pop("layers")
        return json.dumps(data, indent=self.indent)

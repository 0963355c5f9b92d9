"""SVG exporter for ceiling plan diagrams.

Wraps CeilingDiagramRenderer to write the room, its ceiling layers and
the computed fixtures as a single SVG document.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from ceilings.infrastructure.diagram_renderer import CeilingDiagramRenderer
from ceilings.infrastructure.exporters.base import ExporterRegistry, require_plan

if TYPE_CHECKING:
    from ceilings.application.dtos import LightingOutput


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for ceiling plan diagrams.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"
    media_type: ClassVar[str] = "image/svg+xml"

    def __init__(
        self,
        scale: float = 30.0,
        show_labels: bool = True,
        show_cove: bool = True,
    ) -> None:
        """Initialize the SVG exporter.

        Args:
            scale: Pixels per foot (default 30.0).
            show_labels: Whether to draw dimension labels (default True).
            show_cove: Whether to draw cove light channels (default True).
        """
        self.renderer = CeilingDiagramRenderer(
            scale=scale,
            show_labels=show_labels,
            show_cove=show_cove,
        )

    def export(self, output: LightingOutput, path: Path) -> None:
        """Export the SVG diagram to file.

        Raises:
            ValueError: If the output carries errors instead of a plan.
        """
        path.write_text(self.export_string(output))

    def export_string(self, output: LightingOutput) -> str:
        """Export the SVG diagram as a string.

        Raises:
            ValueError: If the output carries errors instead of a plan.
        """
        require_plan(output, self.format_name)
        return self.renderer.render_svg(output.config, output.positions)

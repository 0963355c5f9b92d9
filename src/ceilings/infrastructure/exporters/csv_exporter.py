"""CSV fixture schedule exporter.

One row per fixture with its layer, position and radius, suitable for
handing to an electrician or importing into a spreadsheet.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from ceilings.infrastructure.exporters.base import ExporterRegistry, require_plan

if TYPE_CHECKING:
    from ceilings.application.dtos import LightingOutput


@ExporterRegistry.register("csv")
class CsvExporter:
    """CSV exporter producing a fixture schedule."""

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"
    media_type: ClassVar[str] = "text/csv"

    HEADER: ClassVar[tuple[str, ...]] = ("index", "layer", "x_ft", "y_ft", "radius_ft")

    def export(self, output: LightingOutput, path: Path) -> None:
        path.write_text(self.export_string(output), newline="")

    def export_string(self, output: LightingOutput) -> str:
        """Export the fixture schedule as CSV text.

        Raises:
            ValueError: If the output carries errors instead of a plan.
        """
        require_plan(output, self.format_name)
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(self.HEADER)

        index = 1
        for layer in output.layers:
            for position in layer.positions:
                writer.writerow(
                    [
                        index,
                        layer.ceiling_type.value,
                        f"{position.x:.3f}",
                        f"{position.y:.3f}",
                        f"{position.radius:.2f}",
                    ]
                )
                index += 1

        return buffer.getvalue()

"""Infrastructure layer - rendering, formatting and export."""

from .diagram_renderer import CeilingDiagramRenderer
from .exporters import (
    CsvExporter,
    ExporterRegistry,
    ExportManager,
    JsonExporter,
    SvgExporter,
)
from .formatters import (
    FixtureTableFormatter,
    LightingReportFormatter,
    SummaryFormatter,
)

__all__ = [
    "CeilingDiagramRenderer",
    "CsvExporter",
    "ExportManager",
    "ExporterRegistry",
    "FixtureTableFormatter",
    "JsonExporter",
    "LightingReportFormatter",
    "SummaryFormatter",
    "SvgExporter",
]

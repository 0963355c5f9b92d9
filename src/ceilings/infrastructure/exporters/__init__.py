"""Exporter framework for lighting plans.

This package provides:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- csv: Fixture schedule, one row per fixture
- json: Room, fixtures, per-layer groups and summary
- svg: Top-down ceiling plan diagram

Usage:
    from ceilings.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()

    svg_exporter = ExporterRegistry.get("svg")(scale=40)
    svg_text = svg_exporter.export_string(lighting_output)

    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["json", "svg"], lighting_output, project_name="living_room")
"""

from ceilings.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Importing the modules registers the exporters
from ceilings.infrastructure.exporters.csv_exporter import CsvExporter
from ceilings.infrastructure.exporters.json_exporter import JsonExporter
from ceilings.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "CsvExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonExporter",
    "SvgExporter",
]

"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ceilings.application.dtos import LightingOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert a LightingOutput to a specific format. Each exporter
    defines its format name and file extension and implements both
    file and string export.

    Attributes:
        format_name: Name of the export format (e.g., "svg", "json").
        file_extension: File extension without leading dot.
        media_type: MIME type used when the export is served over HTTP.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]
    media_type: ClassVar[str]

    @abstractmethod
    def export(self, output: LightingOutput, path: Path) -> None:
        """Export a lighting plan to a file.

        Args:
            output: The lighting plan to export.
            path: Path where the file will be saved.
        """
        ...

    @abstractmethod
    def export_string(self, output: LightingOutput) -> str:
        """Export a lighting plan as a string."""
        ...


def require_plan(output: LightingOutput, format_name: str) -> None:
    """Reject outputs that carry validation errors instead of a plan.

    Raises:
        ValueError: If the output has errors or no configuration.
    """
    if not output.is_valid or output.config is None:
        raise ValueError(
            f"Cannot export '{format_name}': the lighting plan has errors"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves using the @ExporterRegistry.register
    decorator.

    Example:
        @ExporterRegistry.register("json")
        class JsonExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator to register an exporter class.

        Args:
            format_name: The format name to register (e.g., "svg").

        Returns:
            Decorator function that registers the class.
        """

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        """Sorted list of all registered format names."""
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Manages export operations to multiple formats.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize the export manager.

        Args:
            output_dir: Directory where exported files will be saved.
                        Will be created if it doesn't exist.
        """
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: LightingOutput,
        project_name: str = "ceiling",
    ) -> dict[str, Path]:
        """Export a lighting plan to multiple formats.

        Args:
            formats: List of format names to export (e.g., ["svg", "json"]).
            output: The lighting plan to export.
            project_name: Base name for output files (default "ceiling").

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        # Resolve every exporter before touching the filesystem
        exporter_classes = {name: ExporterRegistry.get(name) for name in formats}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name, exporter_class in exporter_classes.items():
            exporter = exporter_class()

            # Generate filename: {project_name}_{format}.{ext}
            filename = f"{project_name}_{format_name}.{exporter.file_extension}"
            filepath = self.output_dir / filename

            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        output: LightingOutput,
        project_name: str = "ceiling",
    ) -> Path:
        """Export a lighting plan to a single format."""
        results = self.export_all([format_name], output, project_name)
        return results[format_name]

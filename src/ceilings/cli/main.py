"""Typer CLI for ceiling lighting plans."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from ceilings.application import GenerateLightingCommand, LightingOutput
from ceilings.application.config import ConfigError, load_config
from ceilings.cli.commands import display_load_error, templates_app, validate_command
from ceilings.cli.commands.output_handlers import handle_multi_format_export
from ceilings.infrastructure import LightingReportFormatter, SvgExporter
from ceilings.infrastructure.exporters import ExporterRegistry

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="ceilings",
    help="Plan light fixture positions for false ceilings.",
)

# Register validate command
app.command(name="validate")(validate_command)

# Register templates subcommand group
app.add_typer(templates_app, name="templates")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Plan light fixture positions for false ceilings."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _load_and_generate(config_file: Path, skip_validation: bool = False) -> LightingOutput:
    """Load a configuration file and compute its plan, exiting on errors."""
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = GenerateLightingCommand().execute(config, skip_validation=skip_validation)

    if not result.is_valid:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error}", err=True)
        raise typer.Exit(code=1)

    for warning in result.warnings:
        typer.echo(f"Warning: {warning}", err=True)

    return result


@app.command()
def generate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format: text, or any export format (json, svg, csv)",
        ),
    ] = "text",
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write to this file instead of stdout"),
    ] = None,
    scale: Annotated[
        float,
        typer.Option("--scale", min=1.0, help="SVG scale in pixels per foot"),
    ] = 30.0,
    skip_validation: Annotated[
        bool,
        typer.Option("--skip-validation", help="Compute fixtures even if validation fails"),
    ] = False,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats (or 'all') written to --output-dir",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Directory for --output-formats files"),
    ] = None,
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Base name for exported files"),
    ] = "ceiling",
) -> None:
    """Generate a lighting plan from a configuration file.

    Examples:
        ceilings generate living-room.json
        ceilings generate living-room.json --format svg --output plan.svg
        ceilings generate living-room.json --output-formats all --output-dir out/
    """
    output_format = output_format.lower()
    if output_format != "text" and not ExporterRegistry.is_registered(output_format):
        available = ", ".join(["text", *ExporterRegistry.available_formats()])
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {available}", err=True)
        raise typer.Exit(code=1)

    result = _load_and_generate(config_file, skip_validation=skip_validation)

    if output_formats:
        handle_multi_format_export(output_formats, output_dir, project_name, result)
        return

    if output_format == "text":
        content = LightingReportFormatter().format(result)
    elif output_format == "svg":
        content = SvgExporter(scale=scale).export_string(result)
    else:
        content = ExporterRegistry.get(output_format)().export_string(result)

    if output is None:
        typer.echo(content)
        return

    try:
        output.write_text(content)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Wrote {output_format} plan to {output}")


@app.command()
def diagram(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="SVG file to write"),
    ],
    scale: Annotated[
        float,
        typer.Option("--scale", min=1.0, help="Pixels per foot"),
    ] = 30.0,
) -> None:
    """Write an SVG plan of the room, its ceilings and fixtures."""
    result = _load_and_generate(config_file)

    try:
        SvgExporter(scale=scale).export(result, output)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Wrote diagram with {len(result.positions)} fixture(s) to {output}")


if __name__ == "__main__":
    app()

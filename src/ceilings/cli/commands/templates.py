"""Templates commands for listing and initializing starter configurations.

Templates are sized to the room given on the command line, so
`ceilings templates init plain --width 12 --length 15` produces a
configuration that validates and generates as-is.
"""

from pathlib import Path
from typing import Annotated

import typer

from ceilings.application.templates import TemplateManager, TemplateNotFoundError

templates_app = typer.Typer(
    name="templates",
    help="Create starter ceiling configurations.",
)


@templates_app.command(name="list")
def list_templates() -> None:
    """List all available starter templates.

    Example:
        ceilings templates list
    """
    manager = TemplateManager()
    templates = manager.list_templates()

    typer.echo("Available templates:")
    typer.echo()

    max_name_width = max(len(name) for name, _ in templates) if templates else 0
    for name, description in templates:
        typer.echo(f"  {name:<{max_name_width}}  - {description}")

    typer.echo()
    typer.echo(
        "Use 'ceilings templates init <name> --width W --length L' "
        "to create a configuration file from a template."
    )


@templates_app.command(name="init")
def init_template(
    name: Annotated[
        str,
        typer.Argument(help="Name of the template to initialize"),
    ],
    width: Annotated[
        float,
        typer.Option("--width", "-w", min=0.1, help="Room width in feet"),
    ],
    length: Annotated[
        float,
        typer.Option("--length", "-l", min=0.1, help="Room length in feet"),
    ],
    height: Annotated[
        float,
        typer.Option("--height", help="Room height in feet"),
    ] = 9.0,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: <name>.json)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Initialize a new configuration file from a template.

    Examples:
        ceilings templates init plain --width 12 --length 15
        ceilings templates init combined -w 14 -l 18 --output living-room.json
    """
    manager = TemplateManager()

    if output is None:
        output = Path(f"{name}.json")

    if not manager.template_exists(name):
        available = ", ".join(n for n, _ in manager.list_templates())
        typer.echo(f"Error: Template not found: {name}", err=True)
        typer.echo(f"Available templates: {available}", err=True)
        raise typer.Exit(code=1)

    if output.exists() and not force:
        typer.echo(f"Error: File already exists: {output}", err=True)
        typer.echo("Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    try:
        manager.init_template(name, output, width=width, length=length, height=height)
        typer.echo(f"Created: {output}")
    except TemplateNotFoundError:
        typer.echo(f"Error: Template not found: {name}", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)

"""CLI command implementations for the ceilings application.

This package contains subcommands for the ceilings CLI, including:
- validate: Validate a configuration file
- templates: Create starter configuration files
"""

from ceilings.cli.commands.templates import templates_app
from ceilings.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "templates_app", "validate_command"]

"""CLI command implementations for cutplan.

This package contains subcommands for the cutplan CLI, including:
- validate: Validate a project file
- templates: Manage bundled example projects
"""

from cutplan.cli.commands.templates import templates_app
from cutplan.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "templates_app", "validate_command"]

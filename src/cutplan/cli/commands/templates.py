"""Templates commands for listing and initializing example projects.

This module provides the `templates` command group with subcommands for
listing, showing and copying bundled project files.
"""

from pathlib import Path
from typing import Annotated

import typer

from cutplan.application.templates import TemplateManager, TemplateNotFoundError

templates_app = typer.Typer(
    name="templates",
    help="Manage bundled example projects.",
)


def _template_not_found(manager: TemplateManager, name: str) -> typer.Exit:
    available = ", ".join(n for n, _ in manager.list_templates())
    typer.echo(f"Error: Template not found: {name}", err=True)
    typer.echo(f"Available templates: {available}", err=True)
    return typer.Exit(code=1)


@templates_app.command(name="list")
def list_templates() -> None:
    """List all bundled example projects.

    Example:
        cutplan templates list
    """
    manager = TemplateManager()
    templates = manager.list_templates()

    typer.echo("Available templates:")
    typer.echo()

    max_name_width = max(len(name) for name, _ in templates) if templates else 0
    for name, description in templates:
        typer.echo(f"  {name:<{max_name_width}}  - {description}")
        groups = ", ".join(manager.group_labels(name))
        typer.echo(f"  {' ' * max_name_width}    groups: {groups}")

    typer.echo()
    typer.echo(
        "Use 'cutplan templates init <name>' to create a project file from a template."
    )


@templates_app.command(name="show")
def show_template(
    name: Annotated[str, typer.Argument(help="Name of the template to print")],
) -> None:
    """Print a template's JSON to stdout.

    Example:
        cutplan templates show workbench
    """
    manager = TemplateManager()
    try:
        typer.echo(manager.get_template(name))
    except TemplateNotFoundError:
        raise _template_not_found(manager, name)


@templates_app.command(name="init")
def init_template(
    name: Annotated[
        str,
        typer.Argument(help="Name of the template to initialize"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: <name>.json)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Create a new project file from a template.

    Examples:
        cutplan templates init garden-bench
        cutplan templates init workbench --output garage.json
        cutplan templates init bookshelf --force
    """
    manager = TemplateManager()

    if output is None:
        output = Path(f"{name}.json")

    if not manager.template_exists(name):
        raise _template_not_found(manager, name)

    if output.exists() and not force:
        typer.echo(f"Error: File already exists: {output}", err=True)
        typer.echo("Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    try:
        manager.init_template(name, output)
        typer.echo(f"Created: {output}")
    except TemplateNotFoundError:
        raise _template_not_found(manager, name)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)

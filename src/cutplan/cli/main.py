"""Typer CLI for cut planning."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from cutplan.application import PlanProjectCommand, ProjectResult, QuickPlanCommand
from cutplan.application.config import ConfigError, load_config
from cutplan.cli.commands import display_load_error, templates_app, validate_command
from cutplan.domain import (
    STOCK_BOARD_PRESETS,
    CutRequirement,
    ScrapBoard,
    StockCatalog,
    StockProfileNotFoundError,
    format_stock_length,
)
from cutplan.domain.services import (
    is_valid_length,
    is_valid_quantity,
    parse_length,
    parse_quantity,
)
from cutplan.domain.value_objects import MaterialType
from cutplan.infrastructure import (
    CutDiagramRenderer,
    CutListRecapFormatter,
    JsonExporter,
    ShoppingListFormatter,
    UnplacedCutsFormatter,
)

# Exit code when some pieces could not be placed
EXIT_UNPLACED = 3

OUTPUT_FORMATS = ("text", "json", "diagram", "svg", "summary")

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


app = typer.Typer(
    name="cutplan",
    help="Plan board purchases and cuts, using scrap on hand first.",
)

app.command(name="validate")(validate_command)
app.add_typer(templates_app, name="templates")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on stderr"),
    ] = False,
) -> None:
    """Plan board purchases and cuts, using scrap on hand first."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        force=True,
    )


def _parse_piece(text: str, option: str) -> tuple[float, int]:
    """Parse ``LENGTHxQTY`` (or ``LENGTH`` for one piece).

    Raises:
        typer.BadParameter: If the length or quantity is not usable.
    """
    length_text, sep, quantity_text = text.lower().replace("×", "x").partition("x")
    length = parse_length(length_text)
    quantity = parse_quantity(quantity_text) if sep else 1
    if not is_valid_length(length) or not is_valid_quantity(quantity):
        raise typer.BadParameter(
            f"expected LENGTHxQTY (e.g. 50x3), got '{text}'", param_hint=option
        )
    return length, int(quantity)


def _render_text(
    result: ProjectResult, width: int, insurance_board: bool
) -> str:
    blocks = [
        ShoppingListFormatter(insurance_board=insurance_board).format(
            result.shopping_list, result.shopping_list_sheets
        ),
        CutListRecapFormatter().format(result.cut_list_recap),
        "CUT DIAGRAMS\n" + "=" * 60,
        CutDiagramRenderer().render_project_ascii(result, width),
        UnplacedCutsFormatter().format(result.unplaced_cuts),
    ]
    return "\n\n".join(block for block in blocks if block)


def _render(
    result: ProjectResult, output_format: str, width: int, insurance_board: bool
) -> str:
    renderer = CutDiagramRenderer()
    if output_format == "json":
        return JsonExporter().export(result)
    if output_format == "diagram":
        return renderer.render_project_ascii(result, width)
    if output_format == "summary":
        return renderer.render_waste_summary(result.diagrams)
    return _render_text(result, width, insurance_board)


def _emit_svg(result: ProjectResult, output_file: Path | None) -> None:
    """Print SVG diagrams, or write one file per board group."""
    renderer = CutDiagramRenderer()
    groups = [
        g for g in result.diagrams if g.material_type is MaterialType.BOARD
    ]
    if output_file is None:
        for group in groups:
            typer.echo(renderer.render_svg(group))
        return

    for group in groups:
        if len(groups) == 1:
            path = output_file
        else:
            path = output_file.with_name(
                f"{output_file.stem}-{group.group_id}{output_file.suffix or '.svg'}"
            )
        path.write_text(renderer.render_svg(group), encoding="utf-8")
        typer.echo(f"Wrote {path}")


def _finish(
    result: ProjectResult,
    output_format: str,
    output_file: Path | None,
    width: int,
    insurance_board: bool,
    allow_unplaced: bool,
) -> None:
    """Write the result and exit with the right code."""
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: Unknown format '{output_format}'. "
            f"Choose from: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    if output_format == "svg":
        _emit_svg(result, output_file)
    else:
        content = _render(result, output_format, width, insurance_board)
        if output_file is None:
            typer.echo(content)
        else:
            output_file.write_text(content + "\n", encoding="utf-8")
            typer.echo(f"Wrote {output_file}")

    if not result.is_complete and not allow_unplaced:
        count = sum(len(u.lengths) for u in result.unplaced_cuts)
        typer.echo(f"Warning: {count} piece(s) could not be placed.", err=True)
        raise typer.Exit(code=EXIT_UNPLACED)


@app.command()
def plan(
    config_file: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to JSON project file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json, diagram, svg, summary"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to a file instead of stdout"),
    ] = None,
    no_scrap: Annotated[
        bool,
        typer.Option("--no-scrap", help="Ignore scrap listed in the project"),
    ] = False,
    insurance_board: Annotated[
        bool,
        typer.Option("--insurance", help="Add one spare board per length to the shopping list"),
    ] = False,
    allow_unplaced: Annotated[
        bool,
        typer.Option("--allow-unplaced", help="Exit 0 even when some pieces could not be placed"),
    ] = False,
    width: Annotated[
        int,
        typer.Option("--width", help="Diagram width in characters"),
    ] = 80,
) -> None:
    """Plan a whole project from a JSON file.

    Exit codes:
        0 - Every piece was placed
        1 - The project file could not be loaded
        3 - Some pieces could not be placed (see --allow-unplaced)

    Example:
        cutplan plan --config bench.json --format diagram
    """
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = PlanProjectCommand().execute(
        config, use_scrap=False if no_scrap else None
    )
    _finish(result, output_format, output_file, width, insurance_board, allow_unplaced)


@app.command()
def quick(
    cuts: Annotated[
        list[str],
        typer.Option("--cut", "-c", help="Piece as LENGTHxQTY, e.g. 50x3 (repeatable)"),
    ],
    profile: Annotated[
        str,
        typer.Option("--profile", "-p", help="Stock profile id (see 'cutplan profiles')"),
    ] = "2x4",
    lengths: Annotated[
        list[float] | None,
        typer.Option("--length", "-l", help="Ad hoc stock length in inches (repeatable)"),
    ] = None,
    kerf: Annotated[
        float,
        typer.Option("--kerf", "-k", help="Kerf in inches for ad hoc lengths"),
    ] = 0.125,
    scrap: Annotated[
        list[str] | None,
        typer.Option("--scrap", "-s", help="Scrap on hand as LENGTHxQTY (repeatable)"),
    ] = None,
    max_length: Annotated[
        float | None,
        typer.Option("--max-length", help="Preferred maximum new board length"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json, diagram, svg, summary"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to a file instead of stdout"),
    ] = None,
    insurance_board: Annotated[
        bool,
        typer.Option("--insurance", help="Add one spare board per length to the shopping list"),
    ] = False,
    allow_unplaced: Annotated[
        bool,
        typer.Option("--allow-unplaced", help="Exit 0 even when some pieces could not be placed"),
    ] = False,
    width: Annotated[
        int,
        typer.Option("--width", help="Diagram width in characters"),
    ] = 80,
) -> None:
    """Plan a single cut list from the command line.

    Examples:
        cutplan quick --cut 50x3 --cut 24x4
        cutplan quick --cut 40 --scrap 48x1 --profile 2x6
        cutplan quick --cut 24x4 --length 96 --kerf 0.125 --format json
    """
    requirements = [
        CutRequirement(length=length, quantity=qty)
        for length, qty in (_parse_piece(c, "--cut") for c in cuts)
    ]
    scrap_boards = [
        ScrapBoard(stock_length=length, quantity=qty)
        for length, qty in (_parse_piece(s, "--scrap") for s in scrap or [])
    ]

    try:
        result = QuickPlanCommand().execute(
            requirements,
            profile_id=profile,
            lengths=lengths or (),
            kerf=kerf,
            scrap=scrap_boards,
            preferred_max_length=max_length,
        )
    except StockProfileNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo(
            f"Available profiles: {', '.join(StockCatalog().ids)}", err=True
        )
        raise typer.Exit(code=1)

    _finish(result, output_format, output_file, width, insurance_board, allow_unplaced)


@app.command()
def profiles(
    presets: Annotated[
        bool,
        typer.Option("--presets", help="List named stock board presets instead"),
    ] = False,
) -> None:
    """List the built-in stock profiles."""
    if presets:
        typer.echo(f"{'Preset':<14} {'Name':<24} {'Length':<8} {'W x T'}")
        typer.echo("-" * 60)
        for preset in STOCK_BOARD_PRESETS:
            typer.echo(
                f"{preset.id:<14} {preset.name:<24} "
                f"{format_stock_length(preset.length):<8} "
                f'{preset.width:g}" x {preset.thickness:g}"'
            )
        return

    typer.echo(f"{'Profile':<14} {'Name':<20} {'Kerf':<7} {'Lengths'}")
    typer.echo("-" * 60)
    for spec in StockCatalog():
        lengths = ", ".join(format_stock_length(x) for x in spec.allowed_lengths)
        typer.echo(f"{spec.id:<14} {spec.name:<20} {spec.kerf:<7g} {lengths}")


@app.command()
def serve(
    host: Annotated[str, typer.Option("--host", help="Interface to bind")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", help="Port to listen on")] = 8000,
    reload: Annotated[bool, typer.Option("--reload", help="Reload on code changes")] = False,
) -> None:
    """Run the REST API with uvicorn."""
    import uvicorn

    uvicorn.run("cutplan.web:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()

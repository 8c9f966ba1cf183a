"""Infrastructure layer - solver, renderers and formatters."""

from .bin_packing import (
    BoardCutSolver,
    OptimizeOptions,
    PackingResult,
    ScrapFirstBinPacker,
    SheetCutSolver,
    expand_scrap_pool,
    get_solver,
    optimize,
    optimize_cuts,
    order_candidate_lengths,
    plan_cuts,
)
from .cut_diagram_renderer import CutDiagramRenderer
from .formatters import (
    CutListRecapFormatter,
    JsonExporter,
    ShoppingListFormatter,
    UnplacedCutsFormatter,
)

__all__ = [
    # Bin packing
    "BoardCutSolver",
    "OptimizeOptions",
    "PackingResult",
    "ScrapFirstBinPacker",
    "SheetCutSolver",
    "expand_scrap_pool",
    "get_solver",
    "optimize",
    "optimize_cuts",
    "order_candidate_lengths",
    "plan_cuts",
    # Cut diagram rendering
    "CutDiagramRenderer",
    # Formatters
    "CutListRecapFormatter",
    "JsonExporter",
    "ShoppingListFormatter",
    "UnplacedCutsFormatter",
]

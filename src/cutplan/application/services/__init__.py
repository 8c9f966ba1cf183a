"""Application services."""

from .project_result import (
    CutListRecapGroup,
    DiagramGroup,
    MaterialGroup,
    ProjectResult,
    SheetPiece,
    ShoppingListEntry,
    ShoppingListItem,
    ShoppingListSheetEntry,
    UnplacedCuts,
    generate_project_result,
    reconcile_unplaced,
)

__all__ = [
    "CutListRecapGroup",
    "DiagramGroup",
    "MaterialGroup",
    "ProjectResult",
    "SheetPiece",
    "ShoppingListEntry",
    "ShoppingListItem",
    "ShoppingListSheetEntry",
    "UnplacedCuts",
    "generate_project_result",
    "reconcile_unplaced",
]

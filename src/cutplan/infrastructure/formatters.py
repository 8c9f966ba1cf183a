"""Output formatters and exporters for project results."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from cutplan.domain.stock_profiles import format_stock_length, short_nominal_name
from cutplan.domain.value_objects import OptimizedBoard

if TYPE_CHECKING:
    from cutplan.application.services.project_result import (
        CutListRecapGroup,
        ProjectResult,
        ShoppingListEntry,
        ShoppingListSheetEntry,
        UnplacedCuts,
    )


def _boards(count: int) -> str:
    return f"{count} board{'s' if count != 1 else ''}"


class ShoppingListFormatter:
    """Formats what to buy, grouped by nominal size.

    Example output line: ``  2×4 × 8 ft - 3 boards``
    """

    def __init__(self, insurance_board: bool = False) -> None:
        """Initialize formatter.

        Args:
            insurance_board: Add one spare board per stock length.
        """
        self._insurance_board = insurance_board

    def format(
        self,
        entries: tuple[ShoppingListEntry, ...],
        sheet_entries: tuple[ShoppingListSheetEntry, ...] = (),
    ) -> str:
        """Format the shopping list."""
        lines = ["SHOPPING LIST", "=" * 60]
        if not entries and not sheet_entries:
            lines.append("No board purchases required for this run.")
            return "\n".join(lines)

        extra = 1 if self._insurance_board else 0
        for entry in entries:
            short_name = short_nominal_name(entry.nominal_size_name)
            lines.append(entry.nominal_size_name)
            for item in entry.items:
                lines.append(
                    f"  [ ] {short_name} × {format_stock_length(item.stock_length)}"
                    f" - {_boards(item.count + extra)}"
                )

        for sheet in sheet_entries:
            lines.append(f"{sheet.group_label} (sheet goods)")
            lines.append(
                f'  [ ] {sheet.thickness} {sheet.sheet_width:g}" x {sheet.sheet_height:g}"'
                " - sheet optimization not available yet"
            )

        if self._insurance_board:
            lines.append("")
            lines.append("(includes one insurance board per length)")
        return "\n".join(lines)


class CutListRecapFormatter:
    """Formats the cuts that were entered, per group."""

    def format(self, recap: tuple[CutListRecapGroup, ...]) -> str:
        """Format the recap as one small table per group."""
        lines = ["CUT LIST RECAP", "=" * 60]
        for group in recap:
            lines.append(group.group_label)
            if group.cuts:
                lines.append(f"  {'Cut length':<14} {'Quantity':>8}")
                lines.append("  " + "-" * 23)
                for cut in group.cuts:
                    length = f'{cut.length:g}"'
                    lines.append(f"  {length:<14} {cut.quantity:>8}")
            elif group.sheet_pieces:
                lines.append(f"  {'Piece':<20} {'Size':<16} {'Qty':>4}")
                lines.append("  " + "-" * 42)
                for piece in group.sheet_pieces:
                    size = f'{piece.width:g}" x {piece.height:g}"'
                    lines.append(f"  {piece.label:<20} {size:<16} {piece.quantity:>4}")
            else:
                lines.append("  No cuts in this group")
            lines.append("")
        return "\n".join(lines).rstrip()


class UnplacedCutsFormatter:
    """Formats pieces that could not be placed on any board."""

    def format(self, unplaced: tuple[UnplacedCuts, ...]) -> str:
        if not unplaced:
            return ""
        lines = [
            "UNPLACED PIECES",
            "=" * 60,
            "These pieces are longer than the shortest stock length for their",
            "material and were left out of the plan:",
        ]
        for group in unplaced:
            pieces = ", ".join(f'{length:g}"' for length in group.lengths)
            lines.append(f"  {group.group_label}: {pieces}")
        return "\n".join(lines)


class JsonExporter:
    """Exports project results as JSON.

    Field names are snake_case; enums are exported by value.
    """

    def to_dict(self, result: ProjectResult) -> dict[str, Any]:
        """Convert a project result to JSON-compatible data."""
        return {
            "shopping_list": [
                {
                    "nominal_size_id": entry.nominal_size_id,
                    "nominal_size_name": entry.nominal_size_name,
                    "items": [
                        {"stock_length": item.stock_length, "count": item.count}
                        for item in entry.items
                    ],
                }
                for entry in result.shopping_list
            ],
            "shopping_list_sheets": [
                {
                    "group_id": sheet.group_id,
                    "group_label": sheet.group_label,
                    "sheet_count": sheet.sheet_count,
                    "sheet_width": sheet.sheet_width,
                    "sheet_height": sheet.sheet_height,
                    "thickness": sheet.thickness,
                }
                for sheet in result.shopping_list_sheets
            ],
            "cut_list_recap": [
                {
                    "group_id": recap.group_id,
                    "group_label": recap.group_label,
                    "cuts": [
                        {"length": c.length, "quantity": c.quantity} for c in recap.cuts
                    ],
                    "sheet_pieces": [
                        {
                            "width": p.width,
                            "height": p.height,
                            "quantity": p.quantity,
                            "label": p.label,
                        }
                        for p in recap.sheet_pieces
                    ],
                }
                for recap in result.cut_list_recap
            ],
            "diagrams": [
                {
                    "group_id": group.group_id,
                    "group_label": group.group_label,
                    "material_type": group.material_type.value,
                    "kerf": group.kerf,
                    "preferred_max_length": group.preferred_max_length,
                    "boards": [self.board_to_dict(b) for b in group.boards],
                }
                for group in result.diagrams
            ],
            "unplaced_cuts": [
                {
                    "group_id": group.group_id,
                    "group_label": group.group_label,
                    "lengths": list(group.lengths),
                }
                for group in result.unplaced_cuts
            ],
            "summary": {
                "total_new_boards": result.total_new_boards,
                "total_scrap_boards_used": result.total_scrap_boards_used,
                "is_complete": result.is_complete,
            },
        }

    def board_to_dict(self, board: OptimizedBoard) -> dict[str, Any]:
        return {
            "stock_length": board.stock_length,
            "cuts": list(board.cuts),
            "remaining_waste": board.remaining_waste,
            "scrap_remaining": board.scrap_remaining,
            "waste_remaining": board.waste_remaining,
            "source": board.source.value,
        }

    def export(self, result: ProjectResult) -> str:
        """Export a project result as a JSON string."""
        return json.dumps(self.to_dict(result), indent=2, ensure_ascii=False)

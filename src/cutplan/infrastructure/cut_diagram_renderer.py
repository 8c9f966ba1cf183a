"""Cut diagram rendering for board cutting plans.

This module provides ASCII and SVG rendering of finished boards showing the
pieces cut from each board and whether the leftover is reusable scrap or
waste.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cutplan.domain.stock_profiles import format_stock_length
from cutplan.domain.value_objects import BoardSource, MaterialType, OptimizedBoard

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cutplan.application.services.project_result import (
        DiagramGroup,
        ProjectResult,
    )

# ASCII glyphs
CUT_FILL = "="
SCRAP_FILL = "~"
WASTE_FILL = "."


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


class CutDiagramRenderer:
    """Renders board cut diagrams as ASCII or SVG.

    Each board is drawn as a horizontal bar, to scale, with one segment per
    cut followed by the leftover.

    Attributes:
        scale: Pixels per inch for SVG rendering (default 5).
        piece_fill: Fill color for cut pieces.
        piece_stroke: Stroke color for outlines.
        scrap_fill: Fill color for reusable leftover.
        waste_fill: Fill color for waste leftover.
        text_color: Color for labels.
        bar_height: Height in pixels of one board in SVG.
    """

    def __init__(
        self,
        scale: float = 5.0,
        piece_fill: str = "#DEB887",  # Burlywood
        piece_stroke: str = "#000000",
        scrap_fill: str = "#90EE90",  # Light green
        waste_fill: str = "#D3D3D3",  # Light gray
        text_color: str = "#000000",
        bar_height: float = 36.0,
    ) -> None:
        """Initialize renderer with styling options.

        Args:
            scale: Pixels per inch for SVG rendering (default 5.0).
            piece_fill: Fill color for cut pieces (default burlywood).
            piece_stroke: Stroke color for outlines (default black).
            scrap_fill: Fill color for reusable leftover (default light green).
            waste_fill: Fill color for waste leftover (default light gray).
            text_color: Color for labels (default black).
            bar_height: Height in pixels of one board bar (default 36).
        """
        self.scale = scale
        self.piece_fill = piece_fill
        self.piece_stroke = piece_stroke
        self.scrap_fill = scrap_fill
        self.waste_fill = waste_fill
        self.text_color = text_color
        self.bar_height = bar_height

    # ------------------------------------------------------------------
    # ASCII
    # ------------------------------------------------------------------

    def board_header(
        self,
        board: OptimizedBoard,
        index: int = 1,
        total: int = 1,
    ) -> str:
        """One-line description of a board.

        Example:
            ``Board 1 of 3 - 8 ft new - 1 cut - 46" scrap left``
        """
        source = "scrap" if board.source is BoardSource.SCRAP else "new"
        if board.scrap_remaining > 0:
            leftover = f'{board.scrap_remaining:g}" scrap left'
        elif board.waste_remaining > 0:
            leftover = f'{board.waste_remaining:g}" waste'
        else:
            leftover = "no leftover"
        return (
            f"Board {index} of {total} - {format_stock_length(board.stock_length)} "
            f"{source} - {_plural(board.cut_count, 'cut')} - {leftover}"
        )

    def render_ascii(
        self,
        board: OptimizedBoard,
        kerf: float = 0.0,
        width: int = 80,
        index: int = 1,
        total: int = 1,
    ) -> str:
        """Generate an ASCII bar for a single board.

        Cuts are drawn as ``[==24==]`` segments; the leftover is filled with
        ``~`` when reusable and ``.`` when it is waste.

        Args:
            board: Finished board.
            kerf: Kerf between cuts, used to position segments.
            width: Terminal width in characters (default 80).
            index: 1-based position of the board (for the header).
            total: Number of boards (for the header).

        Returns:
            Header line and bar.
        """
        usable_width = max(width - 2, 10)
        scale_x = usable_width / board.stock_length
        fill = SCRAP_FILL if board.scrap_remaining > 0 else WASTE_FILL
        bar = [fill] * usable_width

        position = 0.0
        for cut in board.cuts:
            start = int(round(position * scale_x))
            end = int(round((position + cut) * scale_x))
            end = min(max(end, start + 1), usable_width)
            self._draw_cut_ascii(bar, start, end, cut)
            position += cut + kerf

        return "\n".join(
            [
                self.board_header(board, index, total),
                "|" + "".join(bar) + "|",
            ]
        )

    def _draw_cut_ascii(
        self, bar: list[str], start: int, end: int, cut: float
    ) -> None:
        """Draw one cut segment onto the bar in place."""
        span = end - start
        if span <= 0:
            return
        if span < 3:
            for x in range(start, end):
                bar[x] = "#"
            return

        segment = ["["] + [CUT_FILL] * (span - 2) + ["]"]
        label = f"{cut:g}"
        if len(label) <= span - 2:
            offset = 1 + (span - 2 - len(label)) // 2
            segment[offset : offset + len(label)] = list(label)
        bar[start:end] = segment

    def render_all_ascii(self, group: DiagramGroup, width: int = 80) -> str:
        """Generate ASCII diagrams for every board of a group.

        Args:
            group: Boards for one material group.
            width: Terminal width in characters.

        Returns:
            Group title, one bar per board and a summary line.
        """
        lines: list[str] = [group.group_label, "-" * len(group.group_label)]
        if not group.boards:
            lines.append("No boards to display.")
            return "\n".join(lines)

        total = len(group.boards)
        for index, board in enumerate(group.boards, start=1):
            block = self.render_ascii(board, group.kerf, width, index, total)
            if group.exceeds_preference(board):
                block = block.replace("\n", " (over preferred length)\n", 1)
            lines.append(block)
            lines.append("")

        new_count = sum(1 for b in group.boards if b.is_new)
        scrap = sum(b.scrap_remaining for b in group.boards)
        waste = sum(b.waste_remaining for b in group.boards)
        lines.append("=" * width)
        lines.append(
            f"SUMMARY: {_plural(total, 'board')} ({new_count} new, "
            f"{total - new_count} from scrap), "
            f'{scrap:g}" reusable, {waste:g}" waste'
        )
        return "\n".join(lines)

    def render_project_ascii(self, result: ProjectResult, width: int = 80) -> str:
        """ASCII diagrams for every board group of a project."""
        blocks = [
            self.render_all_ascii(group, width)
            for group in result.diagrams
            if group.material_type is MaterialType.BOARD
        ]
        if not blocks:
            return "No boards to display."
        return "\n\n".join(blocks)

    # ------------------------------------------------------------------
    # SVG
    # ------------------------------------------------------------------

    def render_svg(self, group: DiagramGroup) -> str:
        """Generate an SVG cut diagram for one group.

        Boards are stacked vertically, each with a caption above its bar.

        Args:
            group: Boards for one material group.

        Returns:
            SVG string representation of the group.
        """
        if not group.boards:
            return (
                '<svg width="200" height="50" xmlns="http://www.w3.org/2000/svg">'
                '<text x="10" y="30">No boards to display</text></svg>'
            )

        header_height = 30
        caption_height = 18
        spacing = 12
        margin = 10
        row_height = caption_height + self.bar_height + spacing

        longest = max(b.stock_length for b in group.boards)
        svg_width = longest * self.scale + 2 * margin
        svg_height = header_height + row_height * len(group.boards) + margin

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" '
            f'fill="white"/>',
            f'  <text x="{margin}" y="{header_height - 10}" '
            f'font-family="Arial, sans-serif" font-size="14" font-weight="bold" '
            f'fill="{self.text_color}">{_escape(group.group_label)}</text>',
        ]

        total = len(group.boards)
        for index, board in enumerate(group.boards, start=1):
            y = header_height + (index - 1) * row_height
            parts.append(f"  <!-- Board {index} -->")
            parts.append(
                f'  <text x="{margin}" y="{y + caption_height - 5}" '
                f'font-family="Arial, sans-serif" font-size="11" '
                f'fill="{self.text_color}">'
                f"{_escape(self.board_header(board, index, total))}</text>"
            )
            parts.append(
                self._render_board_svg(board, group.kerf, margin, y + caption_height)
            )

        parts.append("</svg>")
        return "\n".join(parts)

    def _render_board_svg(
        self, board: OptimizedBoard, kerf: float, x0: float, y: float
    ) -> str:
        """Render the bar for one board.

        Args:
            board: Finished board.
            kerf: Kerf between cuts.
            x0: Left edge in pixels.
            y: Top edge in pixels.

        Returns:
            SVG elements for the board.
        """
        h = self.bar_height
        leftover_fill = self.scrap_fill if board.scrap_remaining > 0 else self.waste_fill
        parts = [
            f'  <rect x="{x0}" y="{y}" width="{board.stock_length * self.scale}" '
            f'height="{h}" fill="{leftover_fill}" stroke="{self.piece_stroke}"/>'
        ]

        position = 0.0
        for cut in board.cuts:
            x = x0 + position * self.scale
            w = cut * self.scale
            parts.append(
                f'  <rect x="{x}" y="{y}" width="{w}" height="{h}" '
                f'fill="{self.piece_fill}" stroke="{self.piece_stroke}"/>'
            )
            font_size = min(12, w / 4)
            if font_size >= 6:
                parts.append(
                    f'  <text x="{x + w / 2}" y="{y + h / 2 + font_size / 3}" '
                    f'text-anchor="middle" font-family="Arial, sans-serif" '
                    f'font-size="{font_size}" fill="{self.text_color}">{cut:g}"</text>'
                )
            position += cut + kerf

        return "\n".join(parts)

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------

    def render_waste_summary(self, diagrams: Sequence[DiagramGroup]) -> str:
        """Generate a text summary of board usage and leftovers.

        Args:
            diagrams: Board groups of a project.

        Returns:
            Formatted summary string.
        """
        boards = [b for group in diagrams for b in group.boards]
        new_boards = [b for b in boards if b.is_new]
        lines: list[str] = [
            "CUT OPTIMIZATION SUMMARY",
            "=" * 40,
            f"Total Boards: {len(boards)}",
            f"  New: {len(new_boards)}",
            f"  From scrap: {len(boards) - len(new_boards)}",
            f'Reusable Leftover: {sum(b.scrap_remaining for b in boards):g}"',
            f'Waste: {sum(b.waste_remaining for b in boards):g}"',
        ]

        if diagrams:
            lines.append("")
            lines.append("Per-Group Details:")
        for group in diagrams:
            if not group.boards:
                continue
            lines.append(
                f"  {group.group_label}: {_plural(len(group.boards), 'board')}, "
                f"{_plural(sum(b.cut_count for b in group.boards), 'piece')}"
            )

        return "\n".join(lines)


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")

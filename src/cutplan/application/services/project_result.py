"""Project-level aggregation across material groups.

A project holds several material groups (for example "2x4 framing" and
"2x6 legs"). Each board group is optimized independently and the results are
combined into a shopping list, a recap of what was entered, per-group cut
diagrams, and a list of pieces that could not be placed.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from cutplan.domain.services.requirements import expand_cut_lengths, merge_cuts
from cutplan.domain.stock_profiles import StockCatalog, nominal_sort_key
from cutplan.domain.value_objects import (
    BoardSource,
    CutRequirement,
    MaterialType,
    OptimizedBoard,
    ScrapBoard,
    ScrapInventory,
)
from cutplan.infrastructure.bin_packing import OptimizeOptions, plan_cuts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SheetPiece:
    """A width x height piece requested from sheet stock."""

    width: float
    height: float
    quantity: int
    label: str = ""


@dataclass(frozen=True)
class MaterialGroup:
    """One cut list with its material and scrap.

    Attributes:
        id: Stable identifier of the group.
        label: User label (e.g. "2x4 framing").
        board_spec_id: Catalog id of the board spec.
        cuts: Required cuts.
        scrap: Group-specific scrap. When None, the project scrap is used.
        preferred_max_length: Soft preference for new board length.
        material_type: Board or sheet.
        sheet_pieces: Sheet groups only.
        sheet_stock_width: Sheet groups only.
        sheet_stock_height: Sheet groups only.
        sheet_thickness: Sheet groups only.
    """

    id: str
    label: str
    board_spec_id: str = "2x4"
    cuts: tuple[CutRequirement, ...] = ()
    scrap: tuple[ScrapBoard, ...] | None = None
    preferred_max_length: float | None = None
    material_type: MaterialType = MaterialType.BOARD
    sheet_pieces: tuple[SheetPiece, ...] = ()
    sheet_stock_width: float = 48.0
    sheet_stock_height: float = 96.0
    sheet_thickness: str = '3/4"'


@dataclass(frozen=True)
class ShoppingListItem:
    stock_length: float
    count: int


@dataclass(frozen=True)
class ShoppingListEntry:
    """What to buy for one nominal size."""

    nominal_size_id: str
    nominal_size_name: str
    items: tuple[ShoppingListItem, ...]

    @property
    def total_boards(self) -> int:
        return sum(item.count for item in self.items)


@dataclass(frozen=True)
class ShoppingListSheetEntry:
    """Sheet group entry. Sheet count stays 0 until sheets are optimized."""

    group_id: str
    group_label: str
    sheet_count: int
    sheet_width: float
    sheet_height: float
    thickness: str


@dataclass(frozen=True)
class CutListRecapGroup:
    """What the user entered for one group."""

    group_id: str
    group_label: str
    cuts: tuple[CutRequirement, ...] = ()
    sheet_pieces: tuple[SheetPiece, ...] = ()


@dataclass(frozen=True)
class DiagramGroup:
    """Finished boards for one group, for rendering."""

    group_id: str
    group_label: str
    boards: tuple[OptimizedBoard, ...]
    kerf: float
    material_type: MaterialType = MaterialType.BOARD
    preferred_max_length: float | None = None

    def exceeds_preference(self, board: OptimizedBoard) -> bool:
        """Whether ``board`` is longer than the group's preferred maximum."""
        if self.preferred_max_length is None:
            return False
        return board.stock_length > self.preferred_max_length


@dataclass(frozen=True)
class UnplacedCuts:
    """Pieces requested for a group but absent from every board."""

    group_id: str
    group_label: str
    lengths: tuple[float, ...]


@dataclass(frozen=True)
class ProjectResult:
    """Aggregated result for a whole project."""

    shopping_list: tuple[ShoppingListEntry, ...] = ()
    shopping_list_sheets: tuple[ShoppingListSheetEntry, ...] = ()
    cut_list_recap: tuple[CutListRecapGroup, ...] = ()
    diagrams: tuple[DiagramGroup, ...] = ()
    unplaced_cuts: tuple[UnplacedCuts, ...] = ()

    @property
    def total_new_boards(self) -> int:
        return sum(entry.total_boards for entry in self.shopping_list)

    @property
    def total_scrap_boards_used(self) -> int:
        return sum(
            1
            for diagram in self.diagrams
            for board in diagram.boards
            if board.source is BoardSource.SCRAP
        )

    @property
    def is_complete(self) -> bool:
        """True when every requested piece in every group was placed."""
        return not self.unplaced_cuts


def reconcile_unplaced(
    requested: Iterable[CutRequirement],
    boards: Sequence[OptimizedBoard],
) -> list[float]:
    """Lengths requested but not found on any board, longest first.

    Compares the requested multiset with the placed multiset, so it works
    from the boards alone without trusting the solver's own bookkeeping.
    """
    missing = Counter(expand_cut_lengths(requested))
    missing.subtract(cut for board in boards for cut in board.cuts)
    lengths = [length for length, count in missing.items() for _ in range(max(0, count))]
    lengths.sort(reverse=True)
    return lengths


def _scrap_for_group(
    group: MaterialGroup, project_scrap: ScrapInventory
) -> tuple[ScrapBoard, ...]:
    if group.scrap is not None:
        return tuple(group.scrap)
    return project_scrap.for_spec(group.board_spec_id)


def generate_project_result(
    groups: Iterable[MaterialGroup],
    catalog: StockCatalog | None = None,
    scrap: ScrapInventory | None = None,
) -> ProjectResult:
    """Optimize every group and aggregate the results.

    Board groups are optimized independently. Each group sees the project
    scrap filtered to its nominal size (or its own scrap when it has any),
    so scrap is not shared out between groups. Sheet groups are recapped and
    listed for purchase but not optimized.

    Args:
        groups: Material groups in display order.
        catalog: Board specs to resolve ``board_spec_id``; built-ins if None.
        scrap: Project-wide scrap snapshot; none on hand if None.

    Returns:
        ProjectResult with shopping list, recap, diagrams and unplaced pieces.
    """
    if catalog is None:
        catalog = StockCatalog()
    if scrap is None:
        scrap = ScrapInventory()
    shopping: dict[str, tuple[str, Counter[float]]] = {}
    sheet_entries: list[ShoppingListSheetEntry] = []
    recap: list[CutListRecapGroup] = []
    diagrams: list[DiagramGroup] = []
    unplaced: list[UnplacedCuts] = []

    for group in groups:
        is_board = group.material_type is MaterialType.BOARD
        recap.append(
            CutListRecapGroup(
                group_id=group.id,
                group_label=group.label,
                cuts=tuple(group.cuts) if is_board else (),
                sheet_pieces=() if is_board else tuple(group.sheet_pieces),
            )
        )

        if not is_board:
            diagrams.append(
                DiagramGroup(
                    group_id=group.id,
                    group_label=group.label,
                    boards=(),
                    kerf=0.0,
                    material_type=MaterialType.SHEET,
                )
            )
            if group.sheet_pieces:
                sheet_entries.append(
                    ShoppingListSheetEntry(
                        group_id=group.id,
                        group_label=group.label,
                        sheet_count=0,
                        sheet_width=group.sheet_stock_width,
                        sheet_height=group.sheet_stock_height,
                        thickness=group.sheet_thickness,
                    )
                )
            continue

        spec = catalog.find(group.board_spec_id)
        board_cuts = [
            c for c in merge_cuts(group.cuts) if c.material_type is MaterialType.BOARD
        ]

        if spec is None or not board_cuts:
            if spec is None:
                logger.warning(
                    "Group '%s' uses unknown stock profile '%s'; skipped",
                    group.label,
                    group.board_spec_id,
                )
            diagrams.append(
                DiagramGroup(
                    group_id=group.id,
                    group_label=group.label,
                    boards=(),
                    kerf=spec.kerf if spec is not None else 0.0,
                    preferred_max_length=group.preferred_max_length,
                )
            )
            continue

        result = plan_cuts(
            board_cuts,
            spec,
            OptimizeOptions(
                scrap=_scrap_for_group(group, scrap),
                preferred_max_length=group.preferred_max_length,
            ),
        )
        diagrams.append(
            DiagramGroup(
                group_id=group.id,
                group_label=group.label,
                boards=result.boards,
                kerf=spec.kerf,
                preferred_max_length=group.preferred_max_length,
            )
        )

        missing = reconcile_unplaced(board_cuts, result.boards)
        if missing:
            unplaced.append(
                UnplacedCuts(
                    group_id=group.id, group_label=group.label, lengths=tuple(missing)
                )
            )

        to_purchase = result.new_boards
        if not to_purchase:
            continue
        _, counts = shopping.setdefault(spec.id, (spec.name, Counter()))
        counts.update(b.stock_length for b in to_purchase)

    shopping_list = [
        ShoppingListEntry(
            nominal_size_id=spec_id,
            nominal_size_name=name,
            items=tuple(
                ShoppingListItem(stock_length=length, count=count)
                for length, count in sorted(counts.items())
            ),
        )
        for spec_id, (name, counts) in shopping.items()
    ]
    shopping_list.sort(key=lambda entry: nominal_sort_key(entry.nominal_size_id))

    logger.info(
        "Project planned: %d groups, %d boards to buy, %d group(s) with unplaced pieces",
        len(recap),
        sum(entry.total_boards for entry in shopping_list),
        len(unplaced),
    )

    return ProjectResult(
        shopping_list=tuple(shopping_list),
        shopping_list_sheets=tuple(sheet_entries),
        cut_list_recap=tuple(recap),
        diagrams=tuple(diagrams),
        unplaced_cuts=tuple(unplaced),
    )

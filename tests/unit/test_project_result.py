"""Tests for project aggregation across material groups."""

from __future__ import annotations

from cutplan.application.services.project_result import (
    MaterialGroup,
    ProjectResult,
    SheetPiece,
    ShoppingListItem,
    generate_project_result,
    reconcile_unplaced,
)
from cutplan.domain.stock_profiles import StockCatalog
from cutplan.domain.value_objects import (
    BoardSource,
    BoardSpec,
    CutRequirement,
    MaterialType,
    ScrapBoard,
    ScrapInventory,
)
from cutplan.infrastructure.bin_packing import optimize


def _group(
    group_id: str,
    board_spec_id: str,
    *cuts: tuple[float, int],
    **kwargs: object,
) -> MaterialGroup:
    return MaterialGroup(
        id=group_id,
        label=kwargs.pop("label", group_id),  # type: ignore[arg-type]
        board_spec_id=board_spec_id,
        cuts=tuple(CutRequirement(length, qty) for length, qty in cuts),
        **kwargs,  # type: ignore[arg-type]
    )


class TestShoppingList:
    """Only new boards are bought; entries follow nominal size order."""

    def test_counts_new_boards_per_length(self) -> None:
        result = generate_project_result(
            [
                _group("slats", "2x6", (50, 3)),
                _group("frame", "2x4", (24, 4)),
            ],
            scrap=ScrapInventory(boards=(ScrapBoard(48, 1, "2x4"),)),
        )

        assert [e.nominal_size_id for e in result.shopping_list] == ["2x4", "2x6"]
        frame, slats = result.shopping_list
        assert frame.nominal_size_name == "2×4 dimensional"
        assert frame.items == (ShoppingListItem(96.0, 1),)
        assert slats.items == (ShoppingListItem(96.0, 3),)
        assert result.total_new_boards == 4
        assert result.total_scrap_boards_used == 1

    def test_groups_of_the_same_size_share_an_entry(self) -> None:
        result = generate_project_result(
            [_group("a", "2x4", (50, 1)), _group("b", "2x4", (60, 2))]
        )

        [entry] = result.shopping_list
        assert entry.total_boards == 3

    def test_scrap_only_project_buys_nothing(self) -> None:
        result = generate_project_result(
            [_group("a", "2x4", (20, 2))],
            scrap=ScrapInventory(boards=(ScrapBoard(48, 1, "2x4"),)),
        )

        assert result.shopping_list == ()
        assert result.total_scrap_boards_used == 1


class TestScrapPerGroup:
    def test_project_scrap_is_filtered_by_size(self) -> None:
        result = generate_project_result(
            [_group("a", "2x6", (40, 1))],
            scrap=ScrapInventory(boards=(ScrapBoard(48, 1, "2x4"),)),
        )

        [board] = result.diagrams[0].boards
        assert board.source is BoardSource.NEW

    def test_unsized_scrap_applies_to_every_group(self) -> None:
        result = generate_project_result(
            [_group("a", "2x6", (40, 1))],
            scrap=ScrapInventory(boards=(ScrapBoard(48, 1),)),
        )

        [board] = result.diagrams[0].boards
        assert board.source is BoardSource.SCRAP

    def test_inline_scrap_replaces_project_scrap(self) -> None:
        result = generate_project_result(
            [_group("a", "2x4", (40, 1), scrap=(ScrapBoard(45, 1),))],
            scrap=ScrapInventory(boards=(ScrapBoard(48, 1, "2x4"),)),
        )

        [board] = result.diagrams[0].boards
        assert board.stock_length == 45

    def test_scrap_is_not_divided_between_groups(self) -> None:
        result = generate_project_result(
            [_group("a", "2x4", (40, 1)), _group("b", "2x4", (40, 1))],
            scrap=ScrapInventory(boards=(ScrapBoard(48, 1, "2x4"),)),
        )

        assert result.total_scrap_boards_used == 2
        assert result.shopping_list == ()


class TestUnplaced:
    def test_long_cut_is_reported(self) -> None:
        result = generate_project_result([_group("beam", "2x8", (100, 1), (50, 1))])

        [unplaced] = result.unplaced_cuts
        assert unplaced.group_id == "beam"
        assert unplaced.lengths == (100.0,)
        assert not result.is_complete

    def test_complete_project(self) -> None:
        result = generate_project_result([_group("a", "2x4", (24, 4))])

        assert result.is_complete
        assert result.unplaced_cuts == ()

    def test_reconcile_unplaced(self) -> None:
        spec = BoardSpec(id="mixed", name="mixed", allowed_lengths=(48.0, 96.0))
        requested = [CutRequirement(80, 2), CutRequirement(30, 3)]

        boards = optimize(requested, spec)

        assert reconcile_unplaced(requested, boards) == [80.0, 80.0]


class TestGroupHandling:
    def test_unknown_profile_gets_empty_diagram(self) -> None:
        result = generate_project_result([_group("a", "3x3", (24, 1))])

        [diagram] = result.diagrams
        assert diagram.boards == ()
        assert result.shopping_list == ()
        assert result.cut_list_recap[0].cuts == (CutRequirement(24, 1),)

    def test_group_without_cuts(self) -> None:
        result = generate_project_result([_group("a", "2x4")])

        assert result.diagrams[0].boards == ()
        assert result.diagrams[0].kerf == 0.125

    def test_sheet_group_is_listed_but_not_optimized(self) -> None:
        sheet_group = MaterialGroup(
            id="panels",
            label="Panels",
            material_type=MaterialType.SHEET,
            sheet_pieces=(SheetPiece(24, 48, 2, "side"),),
        )

        result = generate_project_result([sheet_group])

        [sheet_entry] = result.shopping_list_sheets
        assert sheet_entry.sheet_count == 0
        assert (sheet_entry.sheet_width, sheet_entry.sheet_height) == (48.0, 96.0)
        assert result.diagrams[0].material_type is MaterialType.SHEET
        assert result.cut_list_recap[0].sheet_pieces == sheet_group.sheet_pieces
        assert result.shopping_list == ()

    def test_custom_catalog(self) -> None:
        catalog = StockCatalog().with_profiles(
            [BoardSpec(id="poplar", name="Poplar", allowed_lengths=(72.0,), kerf=0.0)]
        )

        result = generate_project_result([_group("a", "poplar", (36, 2))], catalog)

        [board] = result.diagrams[0].boards
        assert board.stock_length == 72
        assert board.cuts == (36.0, 36.0)

    def test_preference_is_carried_to_diagram(self) -> None:
        result = generate_project_result(
            [_group("a", "2x4", (24, 1), preferred_max_length=96.0)]
        )

        diagram = result.diagrams[0]
        assert diagram.preferred_max_length == 96.0
        assert not diagram.exceeds_preference(diagram.boards[0])

    def test_empty_project(self) -> None:
        assert generate_project_result([]) == ProjectResult()

"""Scrap-first bin packing for linear stock.

This module provides the 1D cutting-stock solver: required piece lengths are
packed onto boards with a best-fit decreasing heuristic, first onto scrap
already on hand and then onto newly purchased boards from the catalog.

Result dataclasses are frozen; the mutable board state used while packing is
private to a single call, so the solver is safe to call concurrently.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from cutplan.contracts.protocols import MaterialSolver
from cutplan.domain.services.leftover import finalize_board, used_length
from cutplan.domain.services.requirements import (
    expand_cut_lengths,
    is_valid_length,
    is_valid_scrap_board,
    merge_cuts,
)
from cutplan.domain.value_objects import (
    BoardSource,
    BoardSpec,
    MaterialSpec,
    MaterialType,
    OptimizedBoard,
    ScrapBoard,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptimizeOptions:
    """Per-call options for the solver.

    Attributes:
        scrap: Boards on hand, consumed before anything new is opened.
        preferred_max_length: Soft preference; new boards at or under this
            length are tried before longer ones.
    """

    scrap: tuple[ScrapBoard, ...] = ()
    preferred_max_length: float | None = None


@dataclass(frozen=True)
class PackingResult:
    """Complete result of one solver run.

    Attributes:
        boards: Finished boards, scrap boards first, each phase in opening order.
        unassigned: Cut lengths that could not be placed on any board.
        kerf: Kerf the plan was computed with.
    """

    boards: tuple[OptimizedBoard, ...] = ()
    unassigned: tuple[float, ...] = ()
    kerf: float = 0.0

    @property
    def new_boards(self) -> tuple[OptimizedBoard, ...]:
        return tuple(b for b in self.boards if b.source is BoardSource.NEW)

    @property
    def scrap_boards(self) -> tuple[OptimizedBoard, ...]:
        return tuple(b for b in self.boards if b.source is BoardSource.SCRAP)

    @property
    def total_pieces_placed(self) -> int:
        """Number of individual pieces placed across all boards."""
        return sum(b.cut_count for b in self.boards)

    @property
    def total_scrap_remaining(self) -> float:
        return sum(b.scrap_remaining for b in self.boards)

    @property
    def total_waste_remaining(self) -> float:
        return sum(b.waste_remaining for b in self.boards)

    @property
    def is_complete(self) -> bool:
        """True when every requested piece was placed."""
        return not self.unassigned


@dataclass
class _WorkingBoard:
    """Internal board state while a phase is packing.

    Attributes:
        stock_length: Length of the board.
        source: Scrap on hand or new purchase.
        cuts: Piece lengths in placement order.
    """

    stock_length: float
    source: BoardSource
    cuts: list[float] = field(default_factory=list)

    def remaining(self, kerf: float) -> float:
        """Unused length on the board."""
        return self.stock_length - used_length(self.cuts, kerf)

    def accepts(self, cut: float, kerf: float) -> bool:
        """Whether ``cut`` fits, paying one kerf unless the board is empty."""
        needed_kerf = kerf if self.cuts else 0.0
        return self.remaining(kerf) >= cut + needed_kerf


def expand_scrap_pool(scrap: Iterable[ScrapBoard]) -> list[_WorkingBoard]:
    """Expand scrap entries into one empty working board per unit.

    Entries with an invalid length or quantity are dropped. Input order is
    kept, which decides ties during best fit.

    Args:
        scrap: Compact (length, count) scrap description.

    Returns:
        Empty scrap boards, one per physical board.
    """
    pool: list[_WorkingBoard] = []
    for entry in scrap:
        if not isinstance(entry, ScrapBoard) or not is_valid_scrap_board(entry):
            continue
        for _ in range(int(entry.quantity)):
            pool.append(
                _WorkingBoard(
                    stock_length=float(entry.stock_length),
                    source=BoardSource.SCRAP,
                )
            )
    return pool


def order_candidate_lengths(
    allowed_lengths: Iterable[float],
    preferred_max_length: float | None = None,
) -> list[float]:
    """Order stock lengths for opening new boards.

    Lengths at or under the preferred maximum come first; each tier is
    ascending. With no preference every length is in the first tier.
    """
    preferred = math.inf if preferred_max_length is None else preferred_max_length
    return sorted(
        allowed_lengths,
        key=lambda length: (0 if length <= preferred else 1, length),
    )


class ScrapFirstBinPacker:
    """Best-fit decreasing packer that consumes scrap before buying.

    Phase 1 places each cut on the scrap board that leaves the smallest
    remainder. Phase 2 places whatever is left on new boards, reusing boards
    opened in this phase before opening another. Scrap boards are finished
    when phase 1 ends and are never revisited.

    A cut longer than the shortest catalog length is never placed in phase 2,
    even when a longer catalog length would hold it. The feasibility check
    runs against the shortest length only; this is kept as-is.

    Attributes:
        kerf: Saw kerf charged between consecutive cuts on a board.
    """

    def __init__(self, kerf: float) -> None:
        """Initialize the packer.

        Args:
            kerf: Saw kerf in the catalog's unit.
        """
        self.kerf = kerf

    def pack(
        self,
        cuts: Sequence[float],
        boards_pool: Sequence[_WorkingBoard],
        allowed_new_lengths: Sequence[float],
        preferred_max_length: float | None = None,
    ) -> PackingResult:
        """Pack cut lengths onto scrap, then onto new boards.

        Args:
            cuts: Individual piece lengths. Sorted longest first here, so the
                caller's order does not matter.
            boards_pool: Empty scrap boards in tie-breaking order. Not mutated.
            allowed_new_lengths: Lengths that may be purchased.
            preferred_max_length: Soft limit used to order purchase lengths.

        Returns:
            PackingResult with used scrap boards, new boards and unplaced cuts.
        """
        sorted_cuts = sorted(cuts, reverse=True)
        logger.debug(
            "Packing %d pieces onto %d scrap boards", len(sorted_cuts), len(boards_pool)
        )

        scrap_used, deferred = self._place_on_pool(sorted_cuts, boards_pool)
        new_boards, unassigned = self._place_on_new_boards(
            deferred, allowed_new_lengths, preferred_max_length
        )

        boards = [
            finalize_board(b.stock_length, b.cuts, b.source, self.kerf)
            for b in (*scrap_used, *new_boards)
        ]
        for index, board in enumerate(boards):
            logger.debug(
                "Board %d (%s, %s): %d cuts, %.3f left",
                index + 1,
                board.source.value,
                board.stock_length,
                board.cut_count,
                board.remaining_waste,
            )

        return PackingResult(
            boards=tuple(boards),
            unassigned=tuple(unassigned),
            kerf=self.kerf,
        )

    def _best_fit(
        self, boards: Sequence[_WorkingBoard], cut: float
    ) -> _WorkingBoard | None:
        """Board leaving the smallest remainder after ``cut``.

        Ties go to the earliest board in ``boards``.
        """
        best: _WorkingBoard | None = None
        best_remaining = math.inf
        for board in boards:
            if not board.accepts(cut, self.kerf):
                continue
            remaining_after = board.remaining(self.kerf) - cut
            if remaining_after < best_remaining:
                best_remaining = remaining_after
                best = board
        return best

    def _place_on_pool(
        self,
        sorted_cuts: Sequence[float],
        boards_pool: Sequence[_WorkingBoard],
    ) -> tuple[list[_WorkingBoard], list[float]]:
        """Phase 1: place cuts on a fixed pool. Never opens a board.

        Returns:
            Pool boards that received at least one cut, and the cuts that
            did not fit anywhere.
        """
        boards = [
            _WorkingBoard(b.stock_length, b.source, list(b.cuts)) for b in boards_pool
        ]
        deferred: list[float] = []

        for cut in sorted_cuts:
            board = self._best_fit(boards, cut)
            if board is None:
                deferred.append(cut)
            else:
                board.cuts.append(cut)

        return [b for b in boards if b.cuts], deferred

    def _place_on_new_boards(
        self,
        sorted_cuts: Sequence[float],
        allowed_lengths: Sequence[float],
        preferred_max_length: float | None,
    ) -> tuple[list[_WorkingBoard], list[float]]:
        """Phase 2: place cuts on purchased boards.

        Returns:
            Boards opened in this phase, and the cuts that were not placed.
        """
        if not allowed_lengths or not sorted_cuts:
            return [], list(sorted_cuts)

        candidates = order_candidate_lengths(allowed_lengths, preferred_max_length)
        min_stock = min(allowed_lengths)
        boards: list[_WorkingBoard] = []
        unassigned: list[float] = []

        for cut in sorted_cuts:
            if cut > min_stock:
                unassigned.append(cut)
                continue

            board = self._best_fit(boards, cut)
            if board is not None:
                board.cuts.append(cut)
                continue

            stock_length = next((s for s in candidates if s >= cut), None)
            if stock_length is None:
                unassigned.append(cut)
                continue
            boards.append(
                _WorkingBoard(
                    stock_length=float(stock_length),
                    source=BoardSource.NEW,
                    cuts=[cut],
                )
            )

        return boards, unassigned


class BoardCutSolver:
    """Solver for board (linear) material."""

    material_type = MaterialType.BOARD

    def solve(
        self,
        required_cuts: Iterable[Any],
        spec: MaterialSpec,
        options: OptimizeOptions | None = None,
    ) -> PackingResult:
        """Plan cuts on board stock.

        Requirements are normalized first; invalid ones are dropped, as are
        non-positive stock lengths. An invalid spec (no usable lengths, a
        negative or non-finite kerf) yields an empty result.

        Args:
            required_cuts: Cut requirements in any shape ``merge_cuts`` accepts.
            spec: Board specification.
            options: Scrap pool and length preference.

        Returns:
            PackingResult; unplaced cuts are listed in ``unassigned``.
        """
        if not isinstance(spec, BoardSpec):
            logger.warning("Board solver called with %s spec", spec.material_type.value)
            return PackingResult()

        options = options or OptimizeOptions()
        if not spec.is_solvable:
            logger.warning(
                "Stock spec '%s' has no lengths or an invalid kerf; nothing to solve",
                spec.id,
            )
            return PackingResult()

        allowed_lengths = tuple(
            float(length) for length in spec.allowed_lengths if is_valid_length(length)
        )
        if len(allowed_lengths) != len(spec.allowed_lengths):
            logger.warning(
                "Stock spec '%s' ignores unusable lengths: %s",
                spec.id,
                ", ".join(
                    repr(length)
                    for length in spec.allowed_lengths
                    if not is_valid_length(length)
                ),
            )
        if not allowed_lengths:
            return PackingResult()

        requirements = [
            c for c in merge_cuts(required_cuts) if c.material_type is MaterialType.BOARD
        ]
        lengths = expand_cut_lengths(requirements)
        if not lengths:
            return PackingResult(kerf=spec.kerf)

        packer = ScrapFirstBinPacker(spec.kerf)
        result = packer.pack(
            lengths,
            expand_scrap_pool(options.scrap),
            allowed_lengths,
            options.preferred_max_length,
        )

        logger.info(
            "Planned %d pieces for '%s': %d scrap boards, %d new boards",
            result.total_pieces_placed,
            spec.id,
            len(result.scrap_boards),
            len(result.new_boards),
        )
        if result.unassigned:
            logger.warning(
                "%d piece(s) for '%s' could not be placed: %s",
                len(result.unassigned),
                spec.id,
                ", ".join(f"{c:g}" for c in result.unassigned),
            )
        return result


class SheetCutSolver:
    """Solver for sheet (panel) material.

    Sheet optimization is not implemented yet. The solver is registered so
    that dispatch is explicit; it returns an empty plan and logs a warning.
    """

    material_type = MaterialType.SHEET

    def solve(
        self,
        required_cuts: Iterable[Any],
        spec: MaterialSpec,
        options: OptimizeOptions | None = None,
    ) -> PackingResult:
        logger.warning(
            "Sheet cut optimization is not implemented; no plan for '%s'", spec.id
        )
        return PackingResult(kerf=spec.kerf)


_SOLVERS: dict[MaterialType, MaterialSolver] = {
    MaterialType.BOARD: BoardCutSolver(),
    MaterialType.SHEET: SheetCutSolver(),
}


def get_solver(material_type: MaterialType) -> MaterialSolver:
    """Solver registered for a material type."""
    return _SOLVERS[material_type]


def plan_cuts(
    required_cuts: Iterable[Any],
    spec: MaterialSpec,
    options: OptimizeOptions | None = None,
) -> PackingResult:
    """Dispatch to the solver for ``spec.material_type``.

    Returns:
        Full PackingResult, including unplaced cuts.
    """
    return get_solver(spec.material_type).solve(required_cuts, spec, options)


def optimize_cuts(
    required_cuts: Iterable[Any],
    spec: MaterialSpec,
    options: OptimizeOptions | None = None,
) -> list[OptimizedBoard]:
    """Plan cuts for any material type and return the finished boards."""
    return list(plan_cuts(required_cuts, spec, options).boards)


def optimize(
    required_cuts: Iterable[Any],
    stock_spec: BoardSpec,
    scrap: Iterable[ScrapBoard] | None = None,
    preferred_max_length: float | None = None,
) -> list[OptimizedBoard]:
    """Plan cuts on board stock.

    Scrap boards are used first, then new boards from
    ``stock_spec.allowed_lengths``. Never raises: invalid input is dropped and
    pieces that cannot be placed are absent from the result.

    Args:
        required_cuts: Cut requirements (length, quantity).
        stock_spec: Allowed purchase lengths and kerf.
        scrap: Boards on hand.
        preferred_max_length: Soft preference for new board length.

    Returns:
        Finished boards, scrap boards first.

    Example:
        >>> spec = BoardSpec(id="", name="", allowed_lengths=(96.0,), kerf=0.125)
        >>> [b.cuts for b in optimize([(24, 4)], spec)]
        [(24.0, 24.0, 24.0), (24.0,)]
    """
    options = OptimizeOptions(
        scrap=tuple(scrap or ()), preferred_max_length=preferred_max_length
    )
    return optimize_cuts(required_cuts, stock_spec, options)

"""Value objects for the cut planning domain.

All lengths are in the catalog's unit (inches for the built-in catalog).

Input types (CutRequirement, ScrapBoard, BoardSpec) are frozen but do not
validate their fields: the engine fails soft and silently drops invalid
entries, and the normalizer runs against half-typed form input. Output types
validate their invariants in ``__post_init__``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Union


class MaterialType(str, Enum):
    """Kinds of stock material.

    Attributes:
        BOARD: Linear stock cut to length (1D cross-cutting).
        SHEET: Panel stock cut in two dimensions.
    """

    BOARD = "board"
    SHEET = "sheet"


class BoardSource(str, Enum):
    """Where a board in a cutting plan comes from.

    Attributes:
        SCRAP: Already on hand, consumed before anything is bought.
        NEW: To be purchased.
    """

    SCRAP = "scrap"
    NEW = "new"


@dataclass(frozen=True)
class CutRequirement:
    """A required piece length and how many of it are needed."""

    length: float
    quantity: int
    material_type: MaterialType = MaterialType.BOARD

    @property
    def total_length(self) -> float:
        """Combined length of all pieces, kerf excluded."""
        return self.length * self.quantity


@dataclass(frozen=True)
class BoardSpec:
    """Board material: purchasable lengths and saw kerf per cut.

    This is a constraint on what may be bought, not a purchase decision.
    An empty ``allowed_lengths`` or a negative or non-finite ``kerf`` is
    accepted here and makes the solver return nothing. Non-positive entries
    in ``allowed_lengths`` are ignored by the solver.

    Attributes:
        id: Catalog identifier (e.g. "2x4").
        name: Display name (e.g. "2x4 dimensional").
        allowed_lengths: Stock lengths that may be purchased.
        kerf: Material lost to the blade per cut.
    """

    id: str
    name: str
    allowed_lengths: tuple[float, ...]
    kerf: float = 0.125
    material_type: MaterialType = field(default=MaterialType.BOARD, init=False)

    @property
    def min_length(self) -> float | None:
        """Shortest purchasable length, or None for an empty catalog."""
        return min(self.allowed_lengths) if self.allowed_lengths else None

    @property
    def is_solvable(self) -> bool:
        """Whether the solver will do anything with this spec."""
        return bool(self.allowed_lengths) and 0 <= self.kerf < math.inf


@dataclass(frozen=True)
class SheetSpec:
    """Sheet material (plywood and similar panels)."""

    id: str
    name: str
    width: float = 48.0
    height: float = 96.0
    thickness: str = '3/4"'
    kerf: float = 0.125
    material_type: MaterialType = field(default=MaterialType.SHEET, init=False)


MaterialSpec = Union[BoardSpec, SheetSpec]


@dataclass(frozen=True)
class ScrapBoard:
    """Boards already owned.

    Attributes:
        stock_length: Length of each board.
        quantity: Number of boards of this length on hand.
        nominal_size_id: Catalog id the boards belong to, if known.
    """

    stock_length: float
    quantity: int
    nominal_size_id: str | None = None


@dataclass(frozen=True)
class ScrapInventory:
    """Point-in-time snapshot of the scrap pile.

    The engine never mutates or remembers scrap; callers that change the pile
    pass a new snapshot. ``version`` lets callers tell snapshots apart.
    """

    boards: tuple[ScrapBoard, ...] = ()
    version: int = 0

    def __post_init__(self) -> None:
        if self.version < 0:
            raise ValueError("Inventory version must be non-negative")

    def with_boards(self, boards: tuple[ScrapBoard, ...]) -> "ScrapInventory":
        """Return the next snapshot holding ``boards``."""
        return replace(self, boards=tuple(boards), version=self.version + 1)

    def for_spec(self, spec_id: str) -> tuple[ScrapBoard, ...]:
        """Boards usable for a board spec.

        Boards without a nominal size id are assumed to match any spec.
        """
        return tuple(
            b
            for b in self.boards
            if b.nominal_size_id is None or b.nominal_size_id == spec_id
        )

    @property
    def board_count(self) -> int:
        return sum(b.quantity for b in self.boards if b.quantity > 0)


@dataclass(frozen=True)
class OptimizedBoard:
    """One finished board in a cutting plan.

    Attributes:
        stock_length: Length of the board.
        cuts: Piece lengths in the order they were placed.
        remaining_waste: Total unused length (kerf excluded).
        scrap_remaining: Part of the leftover that is reusable.
        waste_remaining: Part of the leftover that is waste.
        source: Whether the board is scrap on hand or a purchase.
    """

    stock_length: float
    cuts: tuple[float, ...]
    remaining_waste: float
    scrap_remaining: float
    waste_remaining: float
    source: BoardSource

    def __post_init__(self) -> None:
        if self.stock_length <= 0:
            raise ValueError("Stock length must be positive")
        if self.remaining_waste < 0:
            raise ValueError("Remaining waste must be non-negative")
        if self.scrap_remaining and self.waste_remaining:
            raise ValueError("Leftover is either scrap or waste, not both")

    @property
    def cut_count(self) -> int:
        return len(self.cuts)

    @property
    def is_new(self) -> bool:
        return self.source is BoardSource.NEW

    def used_length(self, kerf: float) -> float:
        """Length consumed by the cuts plus kerf between them."""
        if not self.cuts:
            return 0.0
        return sum(self.cuts) + kerf * (len(self.cuts) - 1)


@dataclass(frozen=True)
class StockBoardPreset:
    """A named, purchasable board with its actual dimensions."""

    id: str
    name: str
    length: float
    width: float
    thickness: float

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0 or self.thickness <= 0:
            raise ValueError("Preset dimensions must be positive")

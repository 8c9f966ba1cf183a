"""Normalization of cut requirements and scrap boards.

These functions run against live form input, so they never raise on
malformed values: anything that is not a usable length or count is dropped.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping
from typing import Any

from cutplan.domain.value_objects import CutRequirement, MaterialType, ScrapBoard

logger = logging.getLogger(__name__)

_LEADING_FLOAT = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_LEADING_INT = re.compile(r"^[+-]?\d+")

# Largest count accepted for one cut or scrap entry, merged totals included
MAX_QUANTITY = 100_000


def _is_number(value: Any) -> bool:
    # bool is an int subclass; True is not a length
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_finite(value: int | float) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints past float range
        return False


def is_valid_length(value: Any) -> bool:
    """Check that a value is a finite number greater than zero."""
    return _is_number(value) and _is_finite(value) and value > 0


def is_valid_quantity(value: Any) -> bool:
    """Check that a value is a whole number from 1 to ``MAX_QUANTITY``.

    Integral floats (``3.0``) are accepted.
    """
    return (
        _is_number(value)
        and _is_finite(value)
        and 0 < value <= MAX_QUANTITY
        and float(value).is_integer()
    )


def parse_length(text: str) -> float:
    """Parse a length typed by the user.

    Reads the numeric prefix of the string, so ``"24.5in"`` gives 24.5.

    Returns:
        The parsed value, or NaN when no number can be read.
    """
    match = _LEADING_FLOAT.match(text.strip())
    if match is None:
        return math.nan
    return float(match.group(0))


def parse_quantity(text: str) -> float:
    """Parse a quantity typed by the user.

    Reads the integer prefix of the string, so ``"3.7"`` gives 3.

    Returns:
        The parsed value as a float (NaN when nothing can be read).
    """
    match = _LEADING_INT.match(text.strip())
    if match is None:
        return math.nan
    return float(int(match.group(0)))


def _coerce_requirement(entry: Any) -> tuple[Any, Any, Any] | None:
    """Pull (length, quantity, material_type) out of a loosely typed entry."""
    if isinstance(entry, CutRequirement):
        return entry.length, entry.quantity, entry.material_type
    if isinstance(entry, Mapping):
        return (
            entry.get("length"),
            entry.get("quantity"),
            entry.get("material_type", entry.get("materialType")),
        )
    if isinstance(entry, (tuple, list)) and len(entry) in (2, 3):
        material = entry[2] if len(entry) == 3 else None
        return entry[0], entry[1], material
    return None


def _coerce_material_type(value: Any) -> MaterialType | None:
    if value is None:
        return MaterialType.BOARD
    if isinstance(value, MaterialType):
        return value
    try:
        return MaterialType(value)
    except ValueError:
        return None


def merge_cuts(cuts: Iterable[Any]) -> list[CutRequirement]:
    """Merge cut requirements by length and sort longest first.

    Entries may be CutRequirement instances, mappings with ``length`` and
    ``quantity`` keys (``material_type`` optional), or ``(length, quantity)``
    / ``(length, quantity, material_type)`` tuples. Invalid entries are
    dropped. Requirements of the same length and material type are summed;
    a total over ``MAX_QUANTITY`` is dropped with a warning.
    Merging an already merged list returns an equal list.

    Args:
        cuts: Requirement entries in any of the accepted shapes.

    Returns:
        Merged requirements sorted by length, descending. Equal lengths keep
        first-seen order.
    """
    totals: dict[tuple[float, MaterialType], int] = {}
    dropped = 0

    for entry in cuts:
        parts = _coerce_requirement(entry)
        if parts is None:
            dropped += 1
            continue
        length, quantity, material = parts
        material_type = _coerce_material_type(material)
        if (
            material_type is None
            or not is_valid_length(length)
            or not is_valid_quantity(quantity)
        ):
            dropped += 1
            continue
        key = (float(length), material_type)
        totals[key] = totals.get(key, 0) + int(quantity)

    if dropped:
        logger.debug("Dropped %d invalid cut requirement(s)", dropped)

    merged: list[CutRequirement] = []
    for (length, material), quantity in totals.items():
        if quantity > MAX_QUANTITY:
            logger.warning(
                "Dropped %g\" %s cuts: %d pieces is over the limit of %d",
                length,
                material.value,
                quantity,
                MAX_QUANTITY,
            )
            continue
        merged.append(
            CutRequirement(length=length, quantity=quantity, material_type=material)
        )
    merged.sort(key=lambda c: c.length, reverse=True)
    return merged


def expand_cut_lengths(cuts: Iterable[CutRequirement]) -> list[float]:
    """Expand requirements into individual piece lengths, longest first.

    Invalid requirements are skipped.
    """
    lengths: list[float] = []
    for cut in cuts:
        if not is_valid_length(cut.length) or not is_valid_quantity(cut.quantity):
            continue
        lengths.extend([float(cut.length)] * int(cut.quantity))
    lengths.sort(reverse=True)
    return lengths


def is_valid_scrap_board(board: ScrapBoard) -> bool:
    """Check a scrap board entry has a usable length and count."""
    return is_valid_length(board.stock_length) and is_valid_quantity(board.quantity)


def merge_scrap_boards(scrap: Iterable[ScrapBoard]) -> list[ScrapBoard]:
    """Merge board scrap by nominal size and length.

    Boards without a nominal size id merge with each other under their own
    key. Entries with an invalid length or quantity are dropped, as is a
    merged total over ``MAX_QUANTITY``. First-seen order is preserved.

    Args:
        scrap: Scrap entries, possibly repeating the same size and length.

    Returns:
        One entry per (nominal size, length) pair.
    """
    totals: dict[tuple[str | None, float], int] = {}
    for board in scrap:
        if not isinstance(board, ScrapBoard) or not is_valid_scrap_board(board):
            continue
        key = (board.nominal_size_id or None, float(board.stock_length))
        totals[key] = totals.get(key, 0) + int(board.quantity)

    merged: list[ScrapBoard] = []
    for (nominal_size_id, length), quantity in totals.items():
        if quantity > MAX_QUANTITY:
            logger.warning(
                "Dropped %g\" scrap boards: %d on hand is over the limit of %d",
                length,
                quantity,
                MAX_QUANTITY,
            )
            continue
        merged.append(
            ScrapBoard(
                stock_length=length,
                quantity=quantity,
                nominal_size_id=nominal_size_id,
            )
        )
    return merged

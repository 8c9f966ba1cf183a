"""Leftover classification for finished boards."""

from __future__ import annotations

from collections.abc import Sequence

from cutplan.domain.value_objects import BoardSource, OptimizedBoard

# Shortest leftover worth keeping, in catalog units (inches)
MIN_SCRAP_LENGTH: float = 12.0

# Derived lengths are reported to this many decimal places (1e-6)
LENGTH_DECIMALS: int = 6


def round_length(value: float) -> float:
    """Round to 1e-6 and floor at zero to hide floating-point noise."""
    return max(0.0, round(value, LENGTH_DECIMALS))


def used_length(cuts: Sequence[float], kerf: float) -> float:
    """Length consumed by ``cuts`` on one board.

    The first cut costs no kerf; each later cut costs one kerf.
    """
    if not cuts:
        return 0.0
    return sum(cuts) + kerf * (len(cuts) - 1)


def classify_remaining(remaining_waste: float) -> tuple[float, float]:
    """Split a leftover into (scrap_remaining, waste_remaining).

    The whole leftover is scrap when it is at least MIN_SCRAP_LENGTH,
    otherwise the whole leftover is waste.
    """
    remaining = round_length(remaining_waste)
    if remaining >= MIN_SCRAP_LENGTH:
        return remaining, 0.0
    return 0.0, remaining


def finalize_board(
    stock_length: float,
    cuts: Sequence[float],
    source: BoardSource,
    kerf: float,
) -> OptimizedBoard:
    """Build the reported board from its stock length and placed cuts."""
    remaining = round_length(stock_length - used_length(cuts, kerf))
    scrap_remaining, waste_remaining = classify_remaining(remaining)
    return OptimizedBoard(
        stock_length=stock_length,
        cuts=tuple(cuts),
        remaining_waste=remaining,
        scrap_remaining=scrap_remaining,
        waste_remaining=waste_remaining,
        source=source,
    )

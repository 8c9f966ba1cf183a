"""Domain services for cut planning."""

from .leftover import (
    MIN_SCRAP_LENGTH,
    classify_remaining,
    finalize_board,
    round_length,
    used_length,
)
from .requirements import (
    expand_cut_lengths,
    is_valid_length,
    is_valid_scrap_board,
    is_valid_quantity,
    merge_cuts,
    merge_scrap_boards,
    parse_length,
    parse_quantity,
)

__all__ = [
    "MIN_SCRAP_LENGTH",
    "classify_remaining",
    "expand_cut_lengths",
    "finalize_board",
    "is_valid_length",
    "is_valid_quantity",
    "is_valid_scrap_board",
    "merge_cuts",
    "merge_scrap_boards",
    "parse_length",
    "parse_quantity",
    "round_length",
    "used_length",
]

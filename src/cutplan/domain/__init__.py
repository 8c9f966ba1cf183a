"""Domain layer - core cut planning logic."""

from .stock_profiles import (
    NOMINAL_SIZE_ORDER,
    STOCK_BOARD_PRESETS,
    STOCK_PROFILES,
    StockCatalog,
    StockProfileNotFoundError,
    format_stock_length,
    get_profile,
    short_nominal_name,
)
from .value_objects import (
    BoardSource,
    BoardSpec,
    CutRequirement,
    MaterialSpec,
    MaterialType,
    OptimizedBoard,
    ScrapBoard,
    ScrapInventory,
    SheetSpec,
    StockBoardPreset,
)

__all__ = [
    "BoardSource",
    "BoardSpec",
    "CutRequirement",
    "MaterialSpec",
    "MaterialType",
    "NOMINAL_SIZE_ORDER",
    "OptimizedBoard",
    "STOCK_BOARD_PRESETS",
    "STOCK_PROFILES",
    "ScrapBoard",
    "ScrapInventory",
    "SheetSpec",
    "StockBoardPreset",
    "StockCatalog",
    "StockProfileNotFoundError",
    "format_stock_length",
    "get_profile",
    "short_nominal_name",
]

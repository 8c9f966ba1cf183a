"""Built-in stock catalog.

Stock profiles describe what the optimizer may buy (allowed lengths and kerf),
not how many boards are on hand.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from cutplan.domain.value_objects import BoardSpec, StockBoardPreset

# Standard kerf for a full-kerf circular or miter saw blade (1/8")
DEFAULT_KERF: float = 0.125

STOCK_PROFILES: tuple[BoardSpec, ...] = (
    BoardSpec(
        id="2x4",
        name="2×4 dimensional",
        allowed_lengths=(96.0, 120.0, 144.0, 192.0),
        kerf=DEFAULT_KERF,
    ),
    BoardSpec(
        id="2x6",
        name="2×6 dimensional",
        allowed_lengths=(96.0, 120.0, 144.0, 192.0),
        kerf=DEFAULT_KERF,
    ),
    BoardSpec(
        id="2x8",
        name="2×8 dimensional",
        allowed_lengths=(96.0, 120.0, 144.0),
        kerf=DEFAULT_KERF,
    ),
    BoardSpec(
        id="1x6",
        name="1×6 dimensional",
        allowed_lengths=(96.0, 120.0, 144.0),
        kerf=DEFAULT_KERF,
    ),
    BoardSpec(
        id="4-4-hardwood",
        name="4/4 hardwood",
        allowed_lengths=(96.0, 120.0, 144.0),
        kerf=DEFAULT_KERF,
    ),
    BoardSpec(
        id="6-4-hardwood",
        name="6/4 hardwood",
        allowed_lengths=(96.0, 120.0),
        kerf=DEFAULT_KERF,
    ),
)

# Display order for nominal sizes, smallest material first
NOMINAL_SIZE_ORDER: tuple[str, ...] = (
    "1x6",
    "2x4",
    "2x6",
    "2x8",
    "4-4-hardwood",
    "6-4-hardwood",
)

STOCK_BOARD_PRESETS: tuple[StockBoardPreset, ...] = (
    # Softwoods, dimensional lumber (actual dimensions)
    StockBoardPreset("2x4x8", "2×4×8 SPF", 96, 3.5, 1.5),
    StockBoardPreset("2x4x10", "2×4×10 SPF", 120, 3.5, 1.5),
    StockBoardPreset("2x4x12", "2×4×12 SPF", 144, 3.5, 1.5),
    StockBoardPreset("2x6x8", "2×6×8 SPF", 96, 5.5, 1.5),
    StockBoardPreset("2x6x10", "2×6×10 SPF", 120, 5.5, 1.5),
    StockBoardPreset("2x8x8", "2×8×8 SPF", 96, 7.25, 1.5),
    StockBoardPreset("2x8x10", "2×8×10 SPF", 120, 7.25, 1.5),
    StockBoardPreset("1x6x8", "1×6×8 Cedar", 96, 5.5, 0.75),
    StockBoardPreset("1x8x8", "1×8×8 Cedar", 96, 7.25, 0.75),
    # Hardwoods, surfaced 4/4, 6/4, 8/4
    StockBoardPreset("oak-4x96", "4/4 Oak 4\" × 8'", 96, 4, 0.75),
    StockBoardPreset("oak-6x96", "4/4 Oak 6\" × 8'", 96, 6, 0.75),
    StockBoardPreset("maple-6x96", "4/4 Maple 6\" × 8'", 96, 6, 0.75),
    StockBoardPreset("maple-8x96", "4/4 Maple 8\" × 8'", 96, 8, 0.75),
    StockBoardPreset("walnut-6x96", "6/4 Walnut 6\" × 8'", 96, 6, 1.25),
    StockBoardPreset("walnut-8x96", "6/4 Walnut 8\" × 8'", 96, 8, 1.25),
    StockBoardPreset("cherry-6x120", "4/4 Cherry 6\" × 10'", 120, 6, 0.75),
    StockBoardPreset("oak-8x120", "8/4 Oak 8\" × 10'", 120, 8, 1.5),
)


class StockProfileNotFoundError(Exception):
    """Raised when a stock profile id is not in the catalog."""

    def __init__(self, profile_id: str) -> None:
        self.profile_id = profile_id
        super().__init__(f"Stock profile not found: {profile_id}")


class StockCatalog:
    """Lookup of board specs by id.

    Starts from the built-in profiles; extra profiles replace built-ins with
    the same id and are otherwise appended.
    """

    def __init__(self, profiles: Iterable[BoardSpec] = STOCK_PROFILES) -> None:
        self._profiles: dict[str, BoardSpec] = {p.id: p for p in profiles}

    def with_profiles(self, extra: Iterable[BoardSpec]) -> "StockCatalog":
        """Return a new catalog with ``extra`` profiles layered on top."""
        merged = dict(self._profiles)
        for profile in extra:
            merged[profile.id] = profile
        return StockCatalog(merged.values())

    def get(self, profile_id: str) -> BoardSpec:
        """Get a profile by id.

        Raises:
            StockProfileNotFoundError: If no profile has that id.
        """
        try:
            return self._profiles[profile_id]
        except KeyError:
            raise StockProfileNotFoundError(profile_id) from None

    def find(self, profile_id: str) -> BoardSpec | None:
        return self._profiles.get(profile_id)

    def __contains__(self, profile_id: object) -> bool:
        return profile_id in self._profiles

    def __iter__(self) -> Iterator[BoardSpec]:
        return iter(self._profiles.values())

    def __len__(self) -> int:
        return len(self._profiles)

    @property
    def ids(self) -> list[str]:
        return list(self._profiles)


def get_profile(profile_id: str) -> BoardSpec:
    """Get a built-in profile by id.

    Raises:
        StockProfileNotFoundError: If no built-in profile has that id.
    """
    return StockCatalog().get(profile_id)


def nominal_sort_key(profile_id: str) -> int:
    """Sort key placing known nominal sizes first, in display order."""
    try:
        return NOMINAL_SIZE_ORDER.index(profile_id)
    except ValueError:
        return len(NOMINAL_SIZE_ORDER)


def format_stock_length(inches: float) -> str:
    """Format a stock length for display.

    Whole feet are shown in feet, anything else in inches.

    Examples:
        >>> format_stock_length(96)
        '8 ft'
        >>> format_stock_length(100)
        '100"'
    """
    feet = inches / 12
    if float(feet).is_integer():
        return f"{int(feet)} ft"
    return f'{inches:g}"'


def short_nominal_name(full_name: str) -> str:
    """Shorten a profile name for the shopping list.

    Examples:
        >>> short_nominal_name("2×4 dimensional")
        '2×4'
        >>> short_nominal_name("4/4 hardwood")
        '4/4'
    """
    short = re.sub(r"\s*dimensional\s*$", "", full_name, flags=re.IGNORECASE)
    short = re.sub(r"\s*hardwood\s*$", "", short, flags=re.IGNORECASE)
    return short.strip() or full_name


def presets_by_length(length: float) -> list[StockBoardPreset]:
    """Presets sold at exactly ``length``."""
    return [p for p in STOCK_BOARD_PRESETS if p.length == length]

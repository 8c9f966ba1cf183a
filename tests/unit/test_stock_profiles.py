"""Tests for the built-in stock catalog."""

from __future__ import annotations

import pytest

from cutplan.domain.stock_profiles import (
    DEFAULT_KERF,
    STOCK_BOARD_PRESETS,
    STOCK_PROFILES,
    StockCatalog,
    StockProfileNotFoundError,
    format_stock_length,
    get_profile,
    nominal_sort_key,
    presets_by_length,
    short_nominal_name,
)
from cutplan.domain.value_objects import BoardSpec


class TestBuiltInProfiles:
    def test_ids_are_unique(self) -> None:
        ids = [p.id for p in STOCK_PROFILES]

        assert len(ids) == len(set(ids))

    def test_every_profile_is_solvable(self) -> None:
        for profile in STOCK_PROFILES:
            assert profile.is_solvable
            assert profile.kerf == DEFAULT_KERF

    def test_get_profile(self) -> None:
        assert get_profile("2x4").allowed_lengths == (96.0, 120.0, 144.0, 192.0)

    def test_unknown_profile_raises(self) -> None:
        with pytest.raises(StockProfileNotFoundError) as exc_info:
            get_profile("3x3")

        assert exc_info.value.profile_id == "3x3"
        assert "3x3" in str(exc_info.value)


class TestStockCatalog:
    def test_lookup(self) -> None:
        catalog = StockCatalog()

        assert "2x6" in catalog
        assert "nope" not in catalog
        assert catalog.find("nope") is None
        assert len(catalog) == len(STOCK_PROFILES)
        assert catalog.ids[0] == "2x4"

    def test_with_profiles_overrides_and_appends(self) -> None:
        custom = BoardSpec(id="poplar", name="Poplar", allowed_lengths=(72.0,))
        override = BoardSpec(id="2x4", name="2x4 short", allowed_lengths=(96.0,))

        catalog = StockCatalog().with_profiles([custom, override])

        assert catalog.get("poplar") is custom
        assert catalog.get("2x4").allowed_lengths == (96.0,)
        assert StockCatalog().get("2x4").allowed_lengths != (96.0,)

    def test_empty_catalog(self) -> None:
        catalog = StockCatalog(())

        assert len(catalog) == 0
        with pytest.raises(StockProfileNotFoundError):
            catalog.get("2x4")


class TestFormatting:
    @pytest.mark.parametrize(
        ("inches", "expected"),
        [(96, "8 ft"), (120, "10 ft"), (192.0, "16 ft"), (100, '100"'), (30.5, '30.5"')],
    )
    def test_format_stock_length(self, inches: float, expected: str) -> None:
        assert format_stock_length(inches) == expected

    def test_short_nominal_name(self) -> None:
        assert short_nominal_name("2×4 dimensional") == "2×4"
        assert short_nominal_name("6/4 hardwood") == "6/4"
        assert short_nominal_name("Poplar 1x10") == "Poplar 1x10"

    def test_nominal_sort_key(self) -> None:
        ids = ["2x6", "custom", "1x6", "2x4"]

        assert sorted(ids, key=nominal_sort_key) == ["1x6", "2x4", "2x6", "custom"]


class TestPresets:
    def test_presets_by_length(self) -> None:
        ten_foot = presets_by_length(120)

        assert ten_foot
        assert all(p.length == 120 for p in ten_foot)

    def test_preset_ids_are_unique(self) -> None:
        ids = [p.id for p in STOCK_BOARD_PRESETS]

        assert len(ids) == len(set(ids))

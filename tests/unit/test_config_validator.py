"""Tests for catalog-aware validation and the config adapter."""

from __future__ import annotations

from typing import Any

import pytest

from cutplan.application.config import (
    ValidationResult,
    config_to_catalog,
    config_to_groups,
    config_to_scrap,
    load_config_from_dict,
    validate_config,
)
from cutplan.domain.value_objects import MaterialType, ScrapBoard


# =============================================================================
# ValidationResult
# =============================================================================


class TestValidationResult:
    def test_exit_codes(self) -> None:
        result = ValidationResult()
        assert result.exit_code == 0

        result.add_warning("groups[0]", "careful")
        assert result.exit_code == 2
        assert result.is_valid

        result.add_error("groups[0].label", "bad", "x")
        assert result.exit_code == 1
        assert not result.is_valid

    def test_chaining(self) -> None:
        result = ValidationResult().add_error("a", "b").add_warning("c", "d")

        assert len(result.errors) == 1
        assert result.has_warnings


# =============================================================================
# validate_config
# =============================================================================


class TestValidateConfig:
    def test_valid_project(self, bench_config_data: dict[str, Any]) -> None:
        result = validate_config(load_config_from_dict(bench_config_data))

        assert result.errors == []
        assert result.warnings == []
        assert result.exit_code == 0

    def test_unknown_profile(self, bench_config_data: dict[str, Any]) -> None:
        bench_config_data["groups"][1]["board_spec_id"] = "3x3"

        result = validate_config(load_config_from_dict(bench_config_data))

        [error] = result.errors
        assert error.path == "groups[1].board_spec_id"
        assert error.value == "3x3"
        assert "2x4" in error.message

    def test_custom_profile_is_known(self, bench_config_data: dict[str, Any]) -> None:
        bench_config_data["groups"][1]["board_spec_id"] = "3x3"
        bench_config_data["profiles"] = [{"id": "3x3", "allowed_lengths": [96]}]

        result = validate_config(load_config_from_dict(bench_config_data))

        assert result.is_valid

    def test_duplicate_label_ignores_case(
        self, bench_config_data: dict[str, Any]
    ) -> None:
        bench_config_data["groups"][1]["label"] = "Legs "

        result = validate_config(load_config_from_dict(bench_config_data))

        assert [e.path for e in result.errors] == ["groups[1].label"]

    def test_cut_longer_than_shortest_stock(
        self, bench_config_data: dict[str, Any]
    ) -> None:
        bench_config_data["groups"][0]["cuts"].append({"length": 100})

        result = validate_config(load_config_from_dict(bench_config_data))

        assert result.is_valid
        assert [w.path for w in result.warnings] == ["groups[0].cuts[2].length"]
        assert result.warnings[0].suggestion

    def test_preference_below_every_length(
        self, bench_config_data: dict[str, Any]
    ) -> None:
        bench_config_data["groups"][0]["preferred_max_length"] = 60

        result = validate_config(load_config_from_dict(bench_config_data))

        assert [w.path for w in result.warnings] == ["groups[0].preferred_max_length"]

    def test_group_without_cuts(self, bench_config_data: dict[str, Any]) -> None:
        bench_config_data["groups"][1]["cuts"] = []

        result = validate_config(load_config_from_dict(bench_config_data))

        assert [w.path for w in result.warnings] == ["groups[1].cuts"]

    def test_sheet_group_warns(self, bench_config_data: dict[str, Any]) -> None:
        bench_config_data["groups"].append(
            {
                "label": "top",
                "material_type": "sheet",
                "sheet_pieces": [{"width": 24, "height": 48}],
            }
        )

        result = validate_config(load_config_from_dict(bench_config_data))

        assert result.exit_code == 2
        assert result.warnings[0].path == "groups[2]"

    def test_scrap_with_unknown_size(self, bench_config_data: dict[str, Any]) -> None:
        bench_config_data["scrap"].append({"nominal_size_id": "1x2", "stock_length": 30})

        result = validate_config(load_config_from_dict(bench_config_data))

        assert [w.path for w in result.warnings] == ["scrap[1].nominal_size_id"]

    def test_scrap_listed_but_disabled(self, bench_config_data: dict[str, Any]) -> None:
        bench_config_data["use_scrap"] = False

        result = validate_config(load_config_from_dict(bench_config_data))

        assert [w.path for w in result.warnings] == ["use_scrap"]


# =============================================================================
# Adapter
# =============================================================================


class TestAdapter:
    def test_groups_get_positional_ids(self, bench_config_data: dict[str, Any]) -> None:
        bench_config_data["groups"][1]["id"] = "slat-group"

        groups = config_to_groups(load_config_from_dict(bench_config_data))

        assert [g.id for g in groups] == ["group-1", "slat-group"]
        assert groups[0].cuts[1].length == 30
        assert groups[0].cuts[1].quantity == 2
        assert groups[0].scrap is None

    def test_project_scrap(self, bench_config_data: dict[str, Any]) -> None:
        inventory = config_to_scrap(load_config_from_dict(bench_config_data))

        assert inventory.boards == (ScrapBoard(48, 1, "2x4"),)
        assert inventory.version == 1

    def test_repeated_scrap_entries_are_merged(
        self, bench_config_data: dict[str, Any]
    ) -> None:
        bench_config_data["scrap"] = [
            {"stock_length": 48, "quantity": 1, "nominal_size_id": "2x4"},
            {"stock_length": 30},
            {"stock_length": 48, "quantity": 2, "nominal_size_id": "2x4"},
            {"stock_length": 30, "quantity": 3},
        ]

        inventory = config_to_scrap(load_config_from_dict(bench_config_data))

        assert inventory.boards == (ScrapBoard(48, 3, "2x4"), ScrapBoard(30, 4))
        assert inventory.board_count == 7
        assert inventory.for_spec("2x6") == (ScrapBoard(30, 4),)

    def test_scrap_disabled(self, bench_config_data: dict[str, Any]) -> None:
        bench_config_data["use_scrap"] = False
        bench_config_data["groups"][0]["scrap"] = [{"stock_length": 60}]
        config = load_config_from_dict(bench_config_data)

        assert config_to_scrap(config).boards == ()
        assert config_to_scrap(config).version == 0
        assert config_to_groups(config)[0].scrap is None

    def test_inline_group_scrap(self, bench_config_data: dict[str, Any]) -> None:
        bench_config_data["groups"][0]["scrap"] = [
            {"stock_length": 60, "quantity": 2},
            {"stock_length": 60},
        ]

        groups = config_to_groups(load_config_from_dict(bench_config_data))

        assert groups[0].scrap == (ScrapBoard(60, 3),)

    def test_custom_profile_overrides_builtin(
        self, bench_config_data: dict[str, Any]
    ) -> None:
        bench_config_data["profiles"] = [
            {"id": "2x4", "name": "2x4 studs", "allowed_lengths": [92.625], "kerf": 0.1}
        ]

        catalog = config_to_catalog(load_config_from_dict(bench_config_data))

        spec = catalog.get("2x4")
        assert spec.allowed_lengths == (92.625,)
        assert spec.kerf == pytest.approx(0.1)
        assert "2x6" in catalog

    def test_profile_name_defaults_to_id(
        self, bench_config_data: dict[str, Any]
    ) -> None:
        bench_config_data["profiles"] = [{"id": "cedar", "allowed_lengths": [72]}]

        catalog = config_to_catalog(load_config_from_dict(bench_config_data))

        assert catalog.get("cedar").name == "cedar"

    def test_sheet_group(self, bench_config_data: dict[str, Any]) -> None:
        bench_config_data["groups"].append(
            {
                "label": "top",
                "material_type": "sheet",
                "sheet_thickness": '1/2"',
                "sheet_pieces": [{"width": 24, "height": 48, "quantity": 2}],
            }
        )

        sheet = config_to_groups(load_config_from_dict(bench_config_data))[2]

        assert sheet.material_type is MaterialType.SHEET
        assert sheet.sheet_thickness == '1/2"'
        assert sheet.sheet_pieces[0].quantity == 2

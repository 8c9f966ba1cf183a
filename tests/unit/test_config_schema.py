"""Tests for the project file schema."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from cutplan.application.config.schema import (
    CutConfig,
    MaterialGroupConfig,
    ProjectConfiguration,
    ScrapBoardConfig,
    StockProfileConfig,
)
from cutplan.domain.services.requirements import MAX_QUANTITY
from cutplan.domain.value_objects import MaterialType


def _project(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "schema_version": "1.0",
        "groups": [{"label": "legs", "cuts": [{"length": 30}]}],
    }
    data.update(overrides)
    return data


class TestCutConfig:
    def test_quantity_defaults_to_one(self) -> None:
        assert CutConfig(length=30).quantity == 1

    @pytest.mark.parametrize("length", [0, -1])
    def test_length_must_be_positive(self, length: float) -> None:
        with pytest.raises(ValidationError):
            CutConfig(length=length)

    def test_quantity_must_be_whole(self) -> None:
        with pytest.raises(ValidationError):
            CutConfig(length=30, quantity=1.5)

    @pytest.mark.parametrize("quantity", [MAX_QUANTITY + 1, 10**400])
    def test_quantity_has_an_upper_bound(self, quantity: int) -> None:
        with pytest.raises(ValidationError):
            CutConfig(length=30, quantity=quantity)

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CutConfig(length=30, width=4)


class TestScrapBoardConfig:
    def test_nominal_size_is_optional(self) -> None:
        scrap = ScrapBoardConfig(stock_length=48)

        assert scrap.nominal_size_id is None
        assert scrap.quantity == 1

    def test_quantity_at_least_one(self) -> None:
        with pytest.raises(ValidationError):
            ScrapBoardConfig(stock_length=48, quantity=0)

    def test_quantity_has_an_upper_bound(self) -> None:
        with pytest.raises(ValidationError):
            ScrapBoardConfig(stock_length=48, quantity=MAX_QUANTITY + 1)


class TestStockProfileConfig:
    def test_valid(self) -> None:
        profile = StockProfileConfig(id="2x3", allowed_lengths=[96, 120])

        assert profile.kerf == 0.125
        assert profile.name is None

    def test_requires_lengths(self) -> None:
        with pytest.raises(ValidationError):
            StockProfileConfig(id="2x3", allowed_lengths=[])

    def test_rejects_non_positive_length(self) -> None:
        with pytest.raises(ValidationError, match="must be positive"):
            StockProfileConfig(id="2x3", allowed_lengths=[96, 0])

    def test_rejects_negative_kerf(self) -> None:
        with pytest.raises(ValidationError):
            StockProfileConfig(id="2x3", allowed_lengths=[96], kerf=-0.1)


class TestMaterialGroupConfig:
    def test_defaults(self) -> None:
        group = MaterialGroupConfig(label="legs")

        assert group.material_type is MaterialType.BOARD
        assert group.board_spec_id == "2x4"
        assert group.scrap is None

    def test_board_group_rejects_sheet_pieces(self) -> None:
        with pytest.raises(ValidationError, match="sheet_pieces"):
            MaterialGroupConfig(
                label="legs", sheet_pieces=[{"width": 10, "height": 10}]
            )

    def test_sheet_group_rejects_cuts(self) -> None:
        with pytest.raises(ValidationError, match="cuts"):
            MaterialGroupConfig(
                label="panels", material_type="sheet", cuts=[{"length": 10}]
            )

    def test_label_required(self) -> None:
        with pytest.raises(ValidationError):
            MaterialGroupConfig(label="")


class TestProjectConfiguration:
    def test_minimal(self) -> None:
        config = ProjectConfiguration.model_validate(_project())

        assert config.name == "Untitled project"
        assert config.use_scrap is True
        assert config.scrap == []

    def test_newer_minor_version_accepted(self) -> None:
        config = ProjectConfiguration.model_validate(_project(schema_version="1.3"))

        assert config.schema_version == "1.3"

    @pytest.mark.parametrize("version", ["2.0", "0.9"])
    def test_unsupported_major_version(self, version: str) -> None:
        with pytest.raises(ValidationError, match="Unsupported schema version"):
            ProjectConfiguration.model_validate(_project(schema_version=version))

    def test_malformed_version(self) -> None:
        with pytest.raises(ValidationError):
            ProjectConfiguration.model_validate(_project(schema_version="one"))

    def test_requires_a_group(self) -> None:
        with pytest.raises(ValidationError):
            ProjectConfiguration.model_validate(_project(groups=[]))

    def test_duplicate_profile_ids(self) -> None:
        profiles = [
            {"id": "2x3", "allowed_lengths": [96]},
            {"id": "2x3", "allowed_lengths": [120]},
        ]

        with pytest.raises(ValidationError, match="Duplicate profile id"):
            ProjectConfiguration.model_validate(_project(profiles=profiles))

    def test_unknown_top_level_key(self) -> None:
        with pytest.raises(ValidationError):
            ProjectConfiguration.model_validate(_project(scraps=[]))

"""Pytest configuration and shared fixtures for cutplan tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from cutplan.domain.value_objects import BoardSpec


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def eight_foot_spec() -> BoardSpec:
    """A single 96\" stock length with a 1/8\" kerf."""
    return BoardSpec(id="test", name="test stock", allowed_lengths=(96.0,), kerf=0.125)


@pytest.fixture
def bench_config_data() -> dict[str, Any]:
    """A small, valid two-group project."""
    return {
        "schema_version": "1.0",
        "name": "bench",
        "use_scrap": True,
        "scrap": [{"nominal_size_id": "2x4", "stock_length": 48, "quantity": 1}],
        "groups": [
            {
                "label": "legs",
                "board_spec_id": "2x4",
                "cuts": [{"length": 40, "quantity": 1}, {"length": 30, "quantity": 2}],
            },
            {
                "label": "slats",
                "board_spec_id": "2x6",
                "cuts": [{"length": 48, "quantity": 3}],
            },
        ],
    }


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a config dict to a JSON file and return its path."""

    def _write(data: dict[str, Any], name: str = "project.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write

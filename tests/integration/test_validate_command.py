"""Integration tests for the validate CLI command.

This module tests the `validate` command end-to-end using the Typer
CliRunner. Tests cover:
- Valid project files (exit code 0)
- Project files with errors (exit code 1)
- Project files with warnings (exit code 2)
"""

from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from cutplan.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Provide a CLI test runner."""
    return CliRunner()


class TestValidateCommand:
    """Test suite for the 'validate' command."""

    def test_valid_project(
        self, runner: CliRunner, write_config, bench_config_data: dict[str, Any]
    ) -> None:
        """Test that a valid project exits with code 0."""
        path = write_config(bench_config_data)

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 0
        assert f"Validating {path}" in result.output
        assert "Validation passed. Project is valid." in result.output

    def test_unknown_profile_is_an_error(
        self, runner: CliRunner, write_config, bench_config_data: dict[str, Any]
    ) -> None:
        """Test that an unknown stock profile exits with code 1."""
        bench_config_data["groups"][0]["board_spec_id"] = "3x3"
        path = write_config(bench_config_data)

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "groups[0].board_spec_id" in result.output
        assert "Validation failed: 1 error(s)" in result.output

    def test_long_cut_is_a_warning(
        self, runner: CliRunner, write_config, bench_config_data: dict[str, Any]
    ) -> None:
        """Test that a cut the optimizer cannot place exits with code 2."""
        bench_config_data["groups"][1]["cuts"].append({"length": 120})
        path = write_config(bench_config_data)

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "groups[1].cuts[1].length" in result.output
        assert "Suggestion:" in result.output
        assert "Validation passed with 1 warning(s)" in result.output

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that a missing file exits with code 1."""
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output
        assert "Validation failed." in result.output

    def test_invalid_json(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that malformed JSON shows the line and column."""
        path = tmp_path / "broken.json"
        path.write_text("{\n  not json\n}", encoding="utf-8")

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 2" in result.output

    def test_schema_error(
        self, runner: CliRunner, write_config, bench_config_data: dict[str, Any]
    ) -> None:
        """Test that schema errors show the path and offending value."""
        bench_config_data["schema_version"] = "3.0"
        path = write_config(bench_config_data)

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "schema_version" in result.output
        assert "Value: '3.0'" in result.output

    def test_schema_error_names_the_group(
        self, runner: CliRunner, write_config, bench_config_data: dict[str, Any]
    ) -> None:
        """Test that a schema error inside a group shows the group label."""
        bench_config_data["groups"][0]["cuts"][0]["length"] = 0
        path = write_config(bench_config_data)

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "groups[0].cuts[0].length (group 'legs')" in result.output
        assert "Value: 0" in result.output

"""Integration tests for the `plan` CLI command.

This module tests planning a project file end-to-end using the Typer
CliRunner:
- Each output format
- Writing to a file
- Exit codes for load errors and unplaced pieces
"""

import json
from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from cutplan.cli.main import EXIT_UNPLACED, app

runner = CliRunner()


class TestPlanCommand:
    """Test suite for the 'plan' command."""

    def test_text_output(self, write_config, bench_config_data: dict[str, Any]) -> None:
        """Test that the default format shows every section."""
        path = write_config(bench_config_data)

        result = runner.invoke(app, ["plan", "--config", str(path)])

        assert result.exit_code == 0
        assert "SHOPPING LIST" in result.output
        assert "2×4 × 8 ft - 1 board" in result.output
        assert "2×6 × 8 ft - 3 boards" in result.output
        assert "CUT LIST RECAP" in result.output
        assert "CUT DIAGRAMS" in result.output
        assert "UNPLACED PIECES" not in result.output

    def test_json_output_to_file(
        self, tmp_path: Path, write_config, bench_config_data: dict[str, Any]
    ) -> None:
        """Test that --format json --output writes a parseable result."""
        path = write_config(bench_config_data)
        output = tmp_path / "plan.json"

        result = runner.invoke(
            app, ["plan", "-c", str(path), "-f", "json", "-o", str(output)]
        )

        assert result.exit_code == 0
        assert f"Wrote {output}" in result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["summary"]["total_new_boards"] == 4
        assert data["summary"]["total_scrap_boards_used"] == 1
        assert data["summary"]["is_complete"] is True

    def test_no_scrap_flag(
        self, tmp_path: Path, write_config, bench_config_data: dict[str, Any]
    ) -> None:
        """Test that --no-scrap ignores the scrap in the file."""
        path = write_config(bench_config_data)
        output = tmp_path / "plan.json"

        result = runner.invoke(
            app,
            ["plan", "-c", str(path), "-f", "json", "-o", str(output), "--no-scrap"],
        )

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["summary"]["total_scrap_boards_used"] == 0

    def test_diagram_output(self, write_config, bench_config_data: dict[str, Any]) -> None:
        """Test that the diagram format draws one block per group."""
        path = write_config(bench_config_data)

        result = runner.invoke(
            app, ["plan", "-c", str(path), "-f", "diagram", "--width", "60"]
        )

        assert result.exit_code == 0
        assert "legs" in result.output
        assert "slats" in result.output
        assert "SUMMARY:" in result.output

    def test_summary_output(self, write_config, bench_config_data: dict[str, Any]) -> None:
        """Test that the summary format reports board counts."""
        path = write_config(bench_config_data)

        result = runner.invoke(app, ["plan", "-c", str(path), "-f", "summary"])

        assert result.exit_code == 0
        assert "CUT OPTIMIZATION SUMMARY" in result.output
        assert "Total Boards: 5" in result.output
        assert "  From scrap: 1" in result.output

    def test_svg_writes_one_file_per_group(
        self, tmp_path: Path, write_config, bench_config_data: dict[str, Any]
    ) -> None:
        """Test that several groups produce several SVG files."""
        path = write_config(bench_config_data)
        output = tmp_path / "bench.svg"

        result = runner.invoke(
            app, ["plan", "-c", str(path), "-f", "svg", "-o", str(output)]
        )

        assert result.exit_code == 0
        for group_id in ("group-1", "group-2"):
            svg_file = tmp_path / f"bench-{group_id}.svg"
            assert svg_file.exists()
            assert svg_file.read_text(encoding="utf-8").startswith("<svg")

    def test_insurance_board(self, write_config, bench_config_data: dict[str, Any]) -> None:
        """Test that --insurance adds a spare board per length."""
        path = write_config(bench_config_data)

        result = runner.invoke(app, ["plan", "-c", str(path), "--insurance"])

        assert result.exit_code == 0
        assert "2×6 × 8 ft - 4 boards" in result.output

    def test_unknown_format(self, write_config, bench_config_data: dict[str, Any]) -> None:
        """Test that an unknown format exits with code 1."""
        path = write_config(bench_config_data)

        result = runner.invoke(app, ["plan", "-c", str(path), "-f", "pdf"])

        assert result.exit_code == 1
        assert "Unknown format 'pdf'" in result.output


class TestPlanCommandErrors:
    """Test suite for 'plan' failure modes."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing project file exits with code 1."""
        result = runner.invoke(app, ["plan", "-c", str(tmp_path / "nope.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_project(self, write_config, bench_config_data: dict[str, Any]) -> None:
        """Test that schema errors are shown with their paths."""
        bench_config_data["groups"][0]["cuts"][0]["quantity"] = 0
        path = write_config(bench_config_data)

        result = runner.invoke(app, ["plan", "-c", str(path)])

        assert result.exit_code == 1
        assert "groups[0].cuts[0].quantity" in result.output

    def test_unplaced_pieces_exit_code(
        self, write_config, bench_config_data: dict[str, Any]
    ) -> None:
        """Test that pieces longer than the shortest stock exit with code 3."""
        bench_config_data["groups"][0]["cuts"].append({"length": 100})
        path = write_config(bench_config_data)

        result = runner.invoke(app, ["plan", "-c", str(path)])

        assert result.exit_code == EXIT_UNPLACED
        assert "UNPLACED PIECES" in result.output
        assert 'legs: 100"' in result.output
        assert "1 piece(s) could not be placed" in result.output

    def test_allow_unplaced(self, write_config, bench_config_data: dict[str, Any]) -> None:
        """Test that --allow-unplaced keeps exit code 0."""
        bench_config_data["groups"][0]["cuts"].append({"length": 100})
        path = write_config(bench_config_data)

        result = runner.invoke(app, ["plan", "-c", str(path), "--allow-unplaced"])

        assert result.exit_code == 0
        assert "UNPLACED PIECES" in result.output

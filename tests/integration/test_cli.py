"""Integration tests for the generate and diagram CLI commands."""

import csv
import io
import json
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ceilings.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"

runner = CliRunner()


def _fixture(name: str) -> str:
    return str(FIXTURES_PATH / name)


class TestGenerateCommand:
    """Tests for `ceilings generate`."""

    def test_text_report(self) -> None:
        result = runner.invoke(app, ["generate", _fixture("valid_plain.json")])

        assert result.exit_code == 0
        assert "CEILING LIGHTING PLAN" in result.output
        assert "Total fixtures: 6" in result.output

    def test_json_to_stdout(self) -> None:
        result = runner.invoke(app, ["generate", _fixture("valid_combined.json"), "-f", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ceiling_type"] == "combined"
        assert len(data["positions"]) == 12

    def test_csv_to_stdout(self) -> None:
        result = runner.invoke(app, ["generate", _fixture("valid_plain.json"), "--format", "csv"])

        assert result.exit_code == 0
        rows = list(csv.reader(io.StringIO(result.output.strip())))
        assert rows[0][0] == "index"
        assert len(rows) == 7

    def test_svg_to_file(self, tmp_path: Path) -> None:
        output = tmp_path / "plan.svg"
        result = runner.invoke(
            app,
            ["generate", _fixture("valid_island_circle.json"), "-f", "svg", "-o", str(output), "--scale", "20"],
        )

        assert result.exit_code == 0
        assert f"Wrote svg plan to {output}" in result.output
        root = ET.fromstring(output.read_text())
        assert float(root.get("width")) == 12 * 20 + 80

    def test_unknown_format(self) -> None:
        result = runner.invoke(app, ["generate", _fixture("valid_plain.json"), "-f", "pdf"])

        assert result.exit_code == 1
        assert "Unknown format: pdf" in result.output

    def test_layout_errors_exit_1(self) -> None:
        result = runner.invoke(app, ["generate", _fixture("invalid_layout.json")])

        assert result.exit_code == 1
        assert "plainConfig.width" in result.output

    def test_skip_validation(self) -> None:
        result = runner.invoke(
            app, ["generate", _fixture("invalid_layout.json"), "--skip-validation"]
        )
        assert result.exit_code == 0
        assert "Total fixtures:" in result.output

    def test_warnings_reported(self) -> None:
        result = runner.invoke(app, ["generate", _fixture("valid_with_warnings.json")])

        assert result.exit_code == 0
        assert "Warning: plainConfig.lightCount" in result.output
        assert "Total fixtures: 30" in result.output

    def test_missing_file(self) -> None:
        result = runner.invoke(app, ["generate", _fixture("missing.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_verbose_flag(self) -> None:
        result = runner.invoke(app, ["--verbose", "generate", _fixture("valid_plain.json")])
        assert result.exit_code == 0


class TestMultiFormatExport:
    """Tests for --output-formats."""

    def test_all_formats(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "generate", _fixture("valid_plain.json"),
                "--output-formats", "all",
                "--output-dir", str(tmp_path),
                "--project-name", "living",
            ],
        )

        assert result.exit_code == 0
        assert "Exported files:" in result.output
        for name in ("living_csv.csv", "living_json.json", "living_svg.svg"):
            assert (tmp_path / name).exists()

    def test_selected_formats(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "generate", _fixture("valid_plain.json"),
                "--output-formats", "json, csv",
                "--output-dir", str(tmp_path),
            ],
        )

        assert result.exit_code == 0
        assert "JSON:" in result.output
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "ceiling_csv.csv",
            "ceiling_json.json",
        ]

    def test_unknown_formats(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "generate", _fixture("valid_plain.json"),
                "--output-formats", "json,dxf",
                "--output-dir", str(tmp_path / "out"),
            ],
        )

        assert result.exit_code == 1
        assert "Unknown formats: dxf" in result.output
        assert not (tmp_path / "out").exists()


class TestDiagramCommand:
    def test_writes_svg(self, tmp_path: Path) -> None:
        output = tmp_path / "diagram.svg"
        result = runner.invoke(app, ["diagram", _fixture("valid_combined.json"), "-o", str(output)])

        assert result.exit_code == 0
        assert f"Wrote diagram with 12 fixture(s) to {output}" in result.output
        assert output.read_text().startswith("<svg")

    def test_requires_output(self) -> None:
        result = runner.invoke(app, ["diagram", _fixture("valid_plain.json")])
        assert result.exit_code != 0

    @pytest.mark.parametrize("fixture", ["invalid_layout.json", "invalid_json.json"])
    def test_bad_config(self, tmp_path: Path, fixture: str) -> None:
        output = tmp_path / "diagram.svg"
        result = runner.invoke(app, ["diagram", _fixture(fixture), "-o", str(output)])

        assert result.exit_code == 1
        assert not output.exists()

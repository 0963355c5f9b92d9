"""Integration tests for the templates CLI commands.

This module tests the `templates list` and `templates init` CLI commands
end-to-end using the Typer CliRunner.
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ceilings.cli.main import app

runner = CliRunner()


class TestTemplatesListCommand:
    """Test suite for the 'templates list' command."""

    def test_list_shows_all_templates(self) -> None:
        result = runner.invoke(app, ["templates", "list"])

        assert result.exit_code == 0
        assert "Available templates:" in result.output
        for name in ("plain", "peripheral", "island", "combined"):
            assert name in result.output

    def test_list_shows_descriptions(self) -> None:
        result = runner.invoke(app, ["templates", "list"])
        assert "Border band along all four walls" in result.output

    def test_list_shows_usage_hint(self) -> None:
        result = runner.invoke(app, ["templates", "list"])
        assert "ceilings templates init" in result.output


class TestTemplatesInitCommand:
    """Test suite for the 'templates init' command."""

    def test_init_creates_file_with_default_name(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["templates", "init", "plain", "-w", "12", "-l", "15"])

        assert result.exit_code == 0
        assert "Created: plain.json" in result.output
        assert (tmp_path / "plain.json").exists()

    def test_init_sized_to_room(self, tmp_path: Path) -> None:
        output = tmp_path / "room.json"
        result = runner.invoke(
            app,
            [
                "templates", "init", "combined",
                "--width", "14", "--length", "18", "--height", "10",
                "--output", str(output),
            ],
        )

        assert result.exit_code == 0
        data = json.loads(output.read_text())
        assert data["roomDimensions"] == {"width": 14.0, "length": 18.0, "height": 10.0}
        assert data["combinedConfig"]["plainConfig"]["width"] == pytest.approx(11.2)

    def test_init_output_validates(self, tmp_path: Path) -> None:
        output = tmp_path / "island.json"
        runner.invoke(app, ["templates", "init", "island", "-w", "12", "-l", "15", "-o", str(output)])

        result = runner.invoke(app, ["validate", str(output)])
        assert result.exit_code == 0

    def test_init_requires_dimensions(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["templates", "init", "plain", "-o", str(tmp_path / "x.json")])
        assert result.exit_code != 0

    def test_init_unknown_template(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["templates", "init", "dome", "-w", "12", "-l", "15", "-o", str(tmp_path / "x.json")]
        )

        assert result.exit_code == 1
        assert "Template not found: dome" in result.output

    def test_init_refuses_overwrite(self, tmp_path: Path) -> None:
        output = tmp_path / "plain.json"
        output.write_text("{}")
        result = runner.invoke(
            app, ["templates", "init", "plain", "-w", "12", "-l", "15", "-o", str(output)]
        )

        assert result.exit_code == 1
        assert "File already exists" in result.output
        assert output.read_text() == "{}"

    def test_init_force_overwrites(self, tmp_path: Path) -> None:
        output = tmp_path / "plain.json"
        output.write_text("{}")
        result = runner.invoke(
            app, ["templates", "init", "plain", "-w", "12", "-l", "15", "-o", str(output), "--force"]
        )

        assert result.exit_code == 0
        assert json.loads(output.read_text())["ceilingType"] == "plain"

"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid configuration files pass validation
- Invalid configuration files produce errors
- Layout warnings are displayed
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from ceilings.cli.main import app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    @pytest.mark.parametrize(
        "fixture",
        ["valid_plain.json", "valid_combined.json", "valid_island_circle.json"],
    )
    def test_valid_configs(self, runner: CliRunner, fixture: str) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / fixture)])

        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_output_includes_validating_message(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "valid_plain.json"
        result = runner.invoke(app, ["validate", str(config_path)])
        assert f"Validating {config_path}..." in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "missing.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output
        assert "Validation failed." in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output

    def test_unknown_field_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "unknown_field.json")])

        assert result.exit_code == 1
        assert "lightColor" in result.output

    def test_layout_error(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_layout.json")])

        assert result.exit_code == 1
        assert "plainConfig.width" in result.output
        assert "Validation failed: 1 error(s), 0 warning(s)" in result.output

    def test_warnings_exit_code(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_with_warnings.json")])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "Suggestion: Use 6 lights or fewer" in result.output
        assert "Validation passed with 1 warning(s)" in result.output


class TestValidateCommandWithTempFiles:
    """Tests using configurations written on the fly."""

    def test_missing_required_field(self, runner: CliRunner, tmp_path: Path) -> None:
        config_path = tmp_path / "config.json"
        config_path.write_text('{"roomDimensions": {"width": 10, "length": 10}}')

        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "ceilingType" in result.output

    def test_unsupported_schema_version(self, runner: CliRunner, tmp_path: Path) -> None:
        config_path = tmp_path / "config.json"
        config_path.write_text(
            '{"schemaVersion": "3.0", "roomDimensions": {"width": 10, "length": 10}, '
            '"ceilingType": "plain"}'
        )

        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "Unsupported schema version" in result.output

    def test_missing_section_warns(self, runner: CliRunner, tmp_path: Path) -> None:
        config_path = tmp_path / "config.json"
        config_path.write_text(
            '{"roomDimensions": {"width": 10, "length": 10}, "ceilingType": "island"}'
        )

        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 2
        assert "islandConfig" in result.output

"""Unit tests for the exporter framework and the registered exporters."""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path

import pytest

from ceilings.application import LightingOutput
from ceilings.infrastructure.exporters import (
    CsvExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonExporter,
    SvgExporter,
)
from ceilings.infrastructure.exporters.json_exporter import SCHEMA_VERSION


@pytest.fixture
def failed_output() -> LightingOutput:
    return LightingOutput(config=None, errors=["plainConfig.width: too wide"])


class TestExporterRegistry:
    def test_builtin_formats(self) -> None:
        assert ExporterRegistry.available_formats() == ["csv", "json", "svg"]

    def test_get(self) -> None:
        assert ExporterRegistry.get("svg") is SvgExporter

    def test_unknown_format(self) -> None:
        with pytest.raises(KeyError, match="No exporter registered for format 'pdf'"):
            ExporterRegistry.get("pdf")

    def test_is_registered(self) -> None:
        assert ExporterRegistry.is_registered("csv")
        assert not ExporterRegistry.is_registered("dxf")

    @pytest.mark.parametrize("exporter_class", [CsvExporter, JsonExporter, SvgExporter])
    def test_exporters_follow_protocol(self, exporter_class: type) -> None:
        assert isinstance(exporter_class(), Exporter)


class TestJsonExporter:
    def test_document(self, plain_output: LightingOutput) -> None:
        data = json.loads(JsonExporter().export_string(plain_output))

        assert data["schema_version"] == SCHEMA_VERSION
        assert data["ceiling_type"] == "plain"
        assert len(data["positions"]) == 6
        assert data["summary"]["total_fixtures"] == 6
        assert data["layers"][0]["ceiling_type"] == "plain"

    def test_without_layers(self, plain_output: LightingOutput) -> None:
        data = json.loads(JsonExporter(include_layers=False).export_string(plain_output))
        assert "layers" not in data
        assert len(data["positions"]) == 6

    def test_export_to_file(self, plain_output: LightingOutput, tmp_path: Path) -> None:
        path = tmp_path / "plan.json"
        JsonExporter().export(plain_output, path)
        assert json.loads(path.read_text())["room"]["width"] == 12

    def test_rejects_failed_plan(self, failed_output: LightingOutput) -> None:
        with pytest.raises(ValueError, match="Cannot export 'json'"):
            JsonExporter().export_string(failed_output)


class TestCsvExporter:
    def _rows(self, text: str) -> list[list[str]]:
        return list(csv.reader(io.StringIO(text)))

    def test_header_and_rows(self, plain_output: LightingOutput) -> None:
        rows = self._rows(CsvExporter().export_string(plain_output))

        assert rows[0] == ["index", "layer", "x_ft", "y_ft", "radius_ft"]
        assert len(rows) == 7
        assert rows[1] == ["1", "plain", "3.200", "3.500", "0.30"]

    def test_layers_labelled(self, combined_output: LightingOutput) -> None:
        rows = self._rows(CsvExporter().export_string(combined_output))[1:]

        assert [row[1] for row in rows] == ["plain"] * 4 + ["peripheral"] * 8
        assert [row[0] for row in rows] == [str(i) for i in range(1, 13)]

    def test_rejects_failed_plan(self, failed_output: LightingOutput) -> None:
        with pytest.raises(ValueError):
            CsvExporter().export_string(failed_output)


class TestSvgExporter:
    def test_media_type(self) -> None:
        assert SvgExporter.media_type == "image/svg+xml"

    def test_export_string(self, plain_output: LightingOutput) -> None:
        svg = SvgExporter().export_string(plain_output)
        assert svg.startswith("<svg")
        assert svg.count('fill="#FEF7CD" stroke="#F97316" stroke-width="1"') == 6

    def test_export_to_file(self, plain_output: LightingOutput, tmp_path: Path) -> None:
        path = tmp_path / "plan.svg"
        SvgExporter(scale=20).export(plain_output, path)
        assert path.read_text().startswith('<svg width="320.0"')

    def test_rejects_failed_plan(self, failed_output: LightingOutput) -> None:
        with pytest.raises(ValueError, match="Cannot export 'svg'"):
            SvgExporter().export_string(failed_output)


class TestExportManager:
    def test_export_all(self, plain_output: LightingOutput, tmp_path: Path) -> None:
        output_dir = tmp_path / "out"
        results = ExportManager(output_dir).export_all(
            ["json", "csv", "svg"], plain_output, project_name="kitchen"
        )

        assert results == {
            "json": output_dir / "kitchen_json.json",
            "csv": output_dir / "kitchen_csv.csv",
            "svg": output_dir / "kitchen_svg.svg",
        }
        assert all(path.exists() for path in results.values())

    def test_unknown_format_writes_nothing(
        self, plain_output: LightingOutput, tmp_path: Path
    ) -> None:
        output_dir = tmp_path / "out"
        with pytest.raises(KeyError):
            ExportManager(output_dir).export_all(["json", "pdf"], plain_output)
        assert not output_dir.exists()

    def test_export_single(self, plain_output: LightingOutput, tmp_path: Path) -> None:
        path = ExportManager(tmp_path).export_single("csv", plain_output)
        assert path == tmp_path / "ceiling_csv.csv"

"""Integration tests for the REST API using FastAPI's TestClient."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from ceilings.web.app import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestLightingEndpoint:
    def test_plain_plan(self, client: TestClient, plain_config_dict: dict[str, Any]) -> None:
        response = client.post("/api/v1/lighting", json={"config": plain_config_dict})

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert data["ceiling_type"] == "plain"
        assert len(data["positions"]) == 6
        first = data["positions"][0]
        assert (first["x"], first["y"]) == pytest.approx((3.2, 3.5))
        assert first["type"] == "regular"
        assert data["summary"]["total_fixtures"] == 6

    def test_combined_layers(
        self, client: TestClient, combined_config_dict: dict[str, Any]
    ) -> None:
        response = client.post("/api/v1/lighting", json={"config": combined_config_dict})

        layers = response.json()["layers"]
        assert [(layer["ceiling_type"], layer["count"]) for layer in layers] == [
            ("plain", 4),
            ("peripheral", 8),
        ]

    def test_layout_errors(self, client: TestClient, plain_config_dict: dict[str, Any]) -> None:
        plain_config_dict["plainConfig"]["leftOffset"] = 3
        response = client.post("/api/v1/lighting", json={"config": plain_config_dict})

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "generation"
        assert "plainConfig.width" in body["details"][0]["message"]

    def test_skip_validation(self, client: TestClient, plain_config_dict: dict[str, Any]) -> None:
        plain_config_dict["plainConfig"]["leftOffset"] = 3
        response = client.post(
            "/api/v1/lighting",
            json={"config": plain_config_dict, "skip_validation": True},
        )
        assert response.status_code == 200

    def test_schema_errors(self, client: TestClient, plain_config_dict: dict[str, Any]) -> None:
        plain_config_dict["lightColor"] = "warm"
        response = client.post("/api/v1/lighting", json={"config": plain_config_dict})

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation"
        assert body["details"][0]["path"] == "lightColor"

    def test_warnings_returned(self, client: TestClient, plain_config_dict: dict[str, Any]) -> None:
        plain_config_dict["plainConfig"]["lightCount"] = 30
        response = client.post("/api/v1/lighting", json={"config": plain_config_dict})

        assert response.status_code == 200
        assert len(response.json()["warnings"]) == 1


class TestValidateEndpoint:
    def test_valid(self, client: TestClient, plain_config_dict: dict[str, Any]) -> None:
        response = client.post("/api/v1/validate", json={"config": plain_config_dict})

        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_errors(self, client: TestClient, plain_config_dict: dict[str, Any]) -> None:
        plain_config_dict["plainConfig"]["width"] = 0
        response = client.post("/api/v1/validate", json={"config": plain_config_dict})

        data = response.json()
        assert response.status_code == 200
        assert data["is_valid"] is False
        assert data["errors"] == [
            {"message": "Dimensions must be positive numbers", "path": "plainConfig"}
        ]

    def test_unparseable_config(self, client: TestClient) -> None:
        response = client.post("/api/v1/validate", json={"config": {"ceilingType": "plain"}})

        assert response.status_code == 422
        assert response.json()["error_type"] == "validation"


class TestTemplatesEndpoints:
    def test_list(self, client: TestClient) -> None:
        response = client.get("/api/v1/templates")

        names = [t["name"] for t in response.json()["templates"]]
        assert names == ["plain", "peripheral", "island", "combined"]

    def test_get_sized_template(self, client: TestClient) -> None:
        response = client.get("/api/v1/templates/plain", params={"width": 12, "length": 15})

        assert response.status_code == 200
        content = response.json()["content"]
        assert content["ceilingType"] == "plain"
        assert content["plainConfig"]["width"] == pytest.approx(9.6)

    def test_template_round_trips(self, client: TestClient) -> None:
        template = client.get(
            "/api/v1/templates/combined", params={"width": 12, "length": 15}
        ).json()["content"]
        response = client.post("/api/v1/lighting", json={"config": template})
        assert response.status_code == 200

    def test_unknown_template(self, client: TestClient) -> None:
        response = client.get("/api/v1/templates/dome", params={"width": 12, "length": 15})

        assert response.status_code == 404
        assert response.json()["error_type"] == "not_found"

    def test_dimensions_required(self, client: TestClient) -> None:
        response = client.get("/api/v1/templates/plain")
        assert response.status_code == 422


class TestExportEndpoints:
    def test_formats(self, client: TestClient) -> None:
        response = client.get("/api/v1/export/formats")
        assert response.json() == {"formats": ["csv", "json", "svg"]}

    def test_svg(self, client: TestClient, plain_config_dict: dict[str, Any]) -> None:
        response = client.post(
            "/api/v1/export/svg", json={"config": plain_config_dict, "scale": 20}
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert 'filename="ceiling_plan.svg"' in response.headers["content-disposition"]
        assert response.text.startswith('<svg width="320.0"')

    def test_csv(self, client: TestClient, plain_config_dict: dict[str, Any]) -> None:
        response = client.post("/api/v1/export/csv", json={"config": plain_config_dict})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert len(response.text.strip().splitlines()) == 7

    def test_unknown_format(self, client: TestClient, plain_config_dict: dict[str, Any]) -> None:
        response = client.post("/api/v1/export/dxf", json={"config": plain_config_dict})

        assert response.status_code == 400
        assert response.json()["error_type"] == "unsupported_format"

    def test_invalid_plan(self, client: TestClient, plain_config_dict: dict[str, Any]) -> None:
        plain_config_dict["plainConfig"]["leftOffset"] = 3
        response = client.post("/api/v1/export/json", json={"config": plain_config_dict})
        assert response.status_code == 422

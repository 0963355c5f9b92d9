"""Unit tests for layout validation rules."""

from typing import Any

import pytest

from ceilings.application.config import (
    ValidationResult,
    load_config_from_dict,
    validate_config,
)


def _validate(data: dict[str, Any]) -> ValidationResult:
    return validate_config(load_config_from_dict(data))


def _room(width: float = 12, length: float = 12) -> dict[str, float]:
    return {"width": width, "length": length}


def _error_paths(result: ValidationResult) -> list[str]:
    return [error.path for error in result.errors]


class TestValidationResult:
    def test_exit_codes(self) -> None:
        assert ValidationResult().exit_code == 0
        assert ValidationResult().add_warning("a", "w").exit_code == 2
        assert ValidationResult().add_warning("a", "w").add_error("b", "e").exit_code == 1

    def test_merge(self) -> None:
        result = ValidationResult().add_error("a", "e")
        result.merge(ValidationResult().add_warning("b", "w"))

        assert not result.is_valid
        assert result.has_warnings


class TestPlainRules:
    """Plain ceilings must be positive and fit inside the room."""

    def test_valid(self, plain_config_dict: dict[str, Any]) -> None:
        result = _validate(plain_config_dict)
        assert result.is_valid
        assert result.exit_code == 0

    def test_width_overflow(self, plain_config_dict: dict[str, Any]) -> None:
        plain_config_dict["plainConfig"].update({"width": 11, "leftOffset": 2})
        result = _validate(plain_config_dict)

        assert _error_paths(result) == ["plainConfig.width"]
        assert "exceeds room width" in result.errors[0].message

    def test_length_overflow(self, plain_config_dict: dict[str, Any]) -> None:
        plain_config_dict["plainConfig"]["topOffset"] = 4
        assert _error_paths(_validate(plain_config_dict)) == ["plainConfig.length"]

    def test_fits_exactly(self, plain_config_dict: dict[str, Any]) -> None:
        plain_config_dict["plainConfig"].update({"width": 12, "leftOffset": 0})
        assert _validate(plain_config_dict).is_valid

    @pytest.mark.parametrize("width,length", [(0, 12), (9.6, -1)])
    def test_non_positive_dimensions(
        self, plain_config_dict: dict[str, Any], width: float, length: float
    ) -> None:
        plain_config_dict["plainConfig"].update({"width": width, "length": length})
        result = _validate(plain_config_dict)

        assert _error_paths(result) == ["plainConfig"]
        assert result.errors[0].message == "Dimensions must be positive numbers"

    def test_cove_needs_position(self, plain_config_dict: dict[str, Any]) -> None:
        plain_config_dict["plainConfig"]["coveLight"] = True
        result = _validate(plain_config_dict)

        assert _error_paths(result) == ["plainConfig.coveLightPositions"]

    def test_light_count_over_spacing_capacity(self, plain_config_dict: dict[str, Any]) -> None:
        """A 9.6 x 12 ceiling holds at most a 3 x 2 grid at 3 ft spacing."""
        plain_config_dict["plainConfig"]["lightCount"] = 30
        result = _validate(plain_config_dict)

        assert result.is_valid
        assert result.exit_code == 2
        assert result.warnings[0].path == "plainConfig.lightCount"
        assert result.warnings[0].suggestion == "Use 6 lights or fewer"

    def test_light_count_within_capacity(self, plain_config_dict: dict[str, Any]) -> None:
        plain_config_dict["plainConfig"]["lightCount"] = 6
        assert _validate(plain_config_dict).exit_code == 0


class TestPeripheralRules:
    def _config(self, **peripheral: Any) -> dict[str, Any]:
        return {
            "roomDimensions": _room(10, 10),
            "ceilingType": "peripheral",
            "peripheralConfig": {"width": 1.5, **peripheral},
        }

    def test_valid(self) -> None:
        assert _validate(self._config()).exit_code == 0

    def test_width_must_be_positive(self) -> None:
        assert _error_paths(_validate(self._config(width=0))) == ["peripheralConfig.width"]

    def test_width_over_half_room(self) -> None:
        result = _validate(self._config(width=5.5))
        assert _error_paths(result) == ["peripheralConfig.width"]
        assert "half the smaller room dimension" in result.errors[0].message

    def test_needs_a_side(self) -> None:
        sides = {"top": False, "right": False, "bottom": False, "left": False}
        result = _validate(self._config(sides=sides))
        assert _error_paths(result) == ["peripheralConfig.sides"]


class TestIslandRules:
    def _config(self, **island: Any) -> dict[str, Any]:
        return {
            "roomDimensions": _room(),
            "ceilingType": "island",
            "islandConfig": island,
        }

    def test_valid_circle(self) -> None:
        result = _validate(self._config(shape="circle", radius=3, leftOffset=3, topOffset=3))
        assert result.exit_code == 0

    def test_circle_needs_radius(self) -> None:
        result = _validate(self._config(shape="circle", width=4))
        assert _error_paths(result) == ["islandConfig.radius"]

    def test_rectangle_needs_length(self) -> None:
        result = _validate(self._config(shape="rectangle", width=4))
        assert _error_paths(result) == ["islandConfig.length"]

    def test_oval_from_width(self) -> None:
        assert _validate(self._config(shape="oval", width=6, length=4)).is_valid

    def test_oval_negative_radius(self) -> None:
        result = _validate(self._config(shape="oval", radiusX=-1, radiusY=2))
        assert _error_paths(result) == ["islandConfig.radiusX"]

    def test_island_exceeds_room(self) -> None:
        result = _validate(self._config(shape="circle", radius=3, leftOffset=8))
        assert [e.message for e in result.errors] == ["Island exceeds room width"]

    def test_cutout_width_defaults(self) -> None:
        result = _validate(self._config(shape="circular-cutout", radius=3))
        assert result.is_valid

    def test_cutout_width_must_be_positive(self) -> None:
        result = _validate(self._config(shape="circular-cutout", radius=3, cutoutWidth=-0.5))
        assert _error_paths(result) == ["islandConfig.cutoutWidth"]

    def test_cutout_leaves_no_opening(self) -> None:
        result = _validate(
            self._config(shape="rectangular-cutout", width=2, length=3, cutoutWidth=1)
        )
        assert _error_paths(result) == ["islandConfig.cutoutWidth"]
        assert "no opening" in result.errors[0].message


class TestLayoutRules:
    def test_missing_section_warns(self) -> None:
        result = _validate({"roomDimensions": _room(), "ceilingType": "plain"})

        assert result.is_valid
        assert [w.path for w in result.warnings] == ["plainConfig"]

    def test_combined_valid(self, combined_config_dict: dict[str, Any]) -> None:
        assert _validate(combined_config_dict).exit_code == 0

    def test_combined_disabled_island_not_checked(
        self, combined_config_dict: dict[str, Any]
    ) -> None:
        combined_config_dict["combinedConfig"]["islandConfig"]["leftOffset"] = 50
        assert _validate(combined_config_dict).is_valid

    def test_combined_enabled_layer_checked(self, combined_config_dict: dict[str, Any]) -> None:
        combined_config_dict["combinedConfig"]["plainConfig"]["width"] = 20
        result = _validate(combined_config_dict)
        assert _error_paths(result) == ["combinedConfig.plainConfig.width"]

    def test_combined_needs_a_layer(self) -> None:
        result = _validate(
            {
                "roomDimensions": _room(),
                "ceilingType": "combined",
                "combinedConfig": {"usePlain": False},
            }
        )
        assert _error_paths(result) == ["combinedConfig"]

    def test_combined_flag_without_section(self) -> None:
        result = _validate(
            {
                "roomDimensions": _room(),
                "ceilingType": "combined",
                "combinedConfig": {"useIsland": True},
            }
        )
        assert _error_paths(result) == ["combinedConfig.islandConfig"]
        assert result.errors[0].message == "useIsland is set but islandConfig is missing"

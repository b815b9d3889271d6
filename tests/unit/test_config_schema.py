"""Unit tests for configuration schema and loader.

These tests verify:
- Valid configurations are loaded correctly
- Defaults are applied for optional blocks
- Unknown fields are rejected (extra="forbid")
- Kind references are checked against the kinds list
- Loader error handling (file not found, JSON parse errors, validation)
"""

import json
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError as PydanticValidationError

from conduits.application.config import (
    DEFAULT_WALL_HEIGHT,
    SUPPORTED_VERSIONS,
    ConfigError,
    FloorPlanConfiguration,
    KindConfig,
    OpeningConfig,
    RoutingConfig,
    load_config,
    load_config_from_dict,
)
from conduits.domain.entities import OpeningType


class TestKindConfig:
    """Tests for KindConfig model."""

    def test_defaults(self) -> None:
        kind = KindConfig(name="power")
        assert kind.color == "#000000"
        assert kind.diameter == 1.0

    def test_invalid_color_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            KindConfig(name="power", color="red")

    def test_non_positive_diameter_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            KindConfig(name="power", diameter=0)


class TestOpeningConfig:
    """Tests for OpeningConfig model."""

    def test_door_type_parsed(self) -> None:
        opening = OpeningConfig(
            type="door", x=0, y=0, width=90, height=20, vertical_extent=210
        )
        assert opening.type == OpeningType.DOOR
        assert opening.sill_elevation == 0.0

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            OpeningConfig(type="skylight", x=0, y=0, width=1, height=1, vertical_extent=1)

    def test_negative_sill_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            OpeningConfig(
                type="window",
                x=0,
                y=0,
                width=1,
                height=1,
                vertical_extent=1,
                sill_elevation=-1,
            )


class TestRoutingConfig:
    """Tests for RoutingConfig model."""

    def test_defaults(self) -> None:
        routing = RoutingConfig()
        assert routing.turn_penalty == 5.0
        assert routing.epsilon == 0.1

    def test_negative_turn_penalty_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            RoutingConfig(turn_penalty=-1)


class TestFloorPlanConfiguration:
    """Tests for the root configuration model."""

    def test_empty_config_uses_defaults(self) -> None:
        config = FloorPlanConfiguration()
        assert config.schema_version == "1.0"
        assert config.wall_height == DEFAULT_WALL_HEIGHT
        assert config.walls == []
        assert config.routing == RoutingConfig()

    def test_full_config(self, floor_plan_dict: dict[str, Any]) -> None:
        config = FloorPlanConfiguration.model_validate(floor_plan_dict)
        assert [w.name for w in config.walls] == ["west", "north"]
        assert len(config.walls[0].front_points) == 3
        assert config.walls[1].front_points[0].kind == 1
        assert config.openings[0].vertical_extent == 120

    def test_supported_versions(self) -> None:
        for version in SUPPORTED_VERSIONS:
            assert FloorPlanConfiguration(schema_version=version).schema_version == version

    def test_unsupported_version_rejected(self) -> None:
        with pytest.raises(PydanticValidationError, match="Unsupported schema version"):
            FloorPlanConfiguration(schema_version="2.0")

    def test_unknown_field_rejected(self, floor_plan_dict: dict[str, Any]) -> None:
        floor_plan_dict["walls"][0]["colour"] = "red"
        with pytest.raises(PydanticValidationError):
            FloorPlanConfiguration.model_validate(floor_plan_dict)

    def test_duplicate_wall_names_rejected(self, floor_plan_dict: dict[str, Any]) -> None:
        floor_plan_dict["walls"][1]["name"] = "west"
        with pytest.raises(PydanticValidationError, match="Duplicate wall names: west"):
            FloorPlanConfiguration.model_validate(floor_plan_dict)

    def test_duplicate_kind_names_rejected(self, floor_plan_dict: dict[str, Any]) -> None:
        floor_plan_dict["kinds"].append({"name": "power"})
        with pytest.raises(PydanticValidationError, match="Duplicate kind names"):
            FloorPlanConfiguration.model_validate(floor_plan_dict)

    def test_unknown_kind_name_rejected(self, floor_plan_dict: dict[str, Any]) -> None:
        floor_plan_dict["walls"][0]["front_points"][0]["kind"] = "gas"
        with pytest.raises(PydanticValidationError, match="unknown kind 'gas'"):
            FloorPlanConfiguration.model_validate(floor_plan_dict)

    def test_kind_index_out_of_range_rejected(
        self, floor_plan_dict: dict[str, Any]
    ) -> None:
        floor_plan_dict["walls"][1]["front_points"][0]["kind"] = 2
        with pytest.raises(PydanticValidationError, match="kind index 2"):
            FloorPlanConfiguration.model_validate(floor_plan_dict)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_point_coordinate_rejected(
        self, floor_plan_dict: dict[str, Any], value: float
    ) -> None:
        floor_plan_dict["walls"][0]["front_points"][0]["x"] = value
        with pytest.raises(PydanticValidationError, match="finite"):
            FloorPlanConfiguration.model_validate(floor_plan_dict)

    @pytest.mark.parametrize(
        ("section", "field"),
        [("walls", "width"), ("openings", "vertical_extent"), ("openings", "x")],
    )
    def test_non_finite_geometry_rejected(
        self, floor_plan_dict: dict[str, Any], section: str, field: str
    ) -> None:
        floor_plan_dict[section][0][field] = float("inf")
        with pytest.raises(PydanticValidationError):
            FloorPlanConfiguration.model_validate(floor_plan_dict)

    def test_non_finite_routing_and_height_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            RoutingConfig(turn_penalty=float("nan"))
        with pytest.raises(PydanticValidationError):
            FloorPlanConfiguration(wall_height=float("inf"))

    def test_duplicate_point_ids_rejected(self, floor_plan_dict: dict[str, Any]) -> None:
        floor_plan_dict["walls"][1]["front_points"][0]["id"] = "w1"
        with pytest.raises(PydanticValidationError, match="Duplicate point ids: w1"):
            FloorPlanConfiguration.model_validate(floor_plan_dict)

    def test_explicit_id_may_not_reuse_generated_id(
        self, floor_plan_dict: dict[str, Any]
    ) -> None:
        del floor_plan_dict["walls"][0]["front_points"][0]["id"]
        floor_plan_dict["walls"][1]["front_points"][0]["id"] = "west:front:0"
        with pytest.raises(PydanticValidationError, match="west:front:0"):
            FloorPlanConfiguration.model_validate(floor_plan_dict)

    def test_points_outside_face_are_accepted(
        self, floor_plan_dict: dict[str, Any]
    ) -> None:
        floor_plan_dict["walls"][0]["front_points"][0]["z"] = -5
        config = FloorPlanConfiguration.model_validate(floor_plan_dict)
        assert config.walls[0].front_points[0].z == -5


class TestLoadConfig:
    """Tests for loading configuration files."""

    def test_load_valid_file(self, tmp_path: Path, floor_plan_dict: dict[str, Any]) -> None:
        path = tmp_path / "plan.json"
        path.write_text(json.dumps(floor_plan_dict))

        config = load_config(path)
        assert config.schema_version == "1.1"
        assert config.wall_height == 250

    def test_file_not_found(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == path

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"walls": [\n  {"name": }\n]}')

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 2

    def test_validation_error_has_json_paths(
        self, tmp_path: Path, floor_plan_dict: dict[str, Any]
    ) -> None:
        floor_plan_dict["walls"][0]["width"] = -20
        path = tmp_path / "plan.json"
        path.write_text(json.dumps(floor_plan_dict))

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "walls[0].width"
        assert "walls[0].width" in str(error)

    def test_nan_literal_in_file_is_a_validation_error(
        self, tmp_path: Path, floor_plan_dict: dict[str, Any]
    ) -> None:
        floor_plan_dict["walls"][0]["front_points"][0]["x"] = float("nan")
        path = tmp_path / "plan.json"
        path.write_text(json.dumps(floor_plan_dict))
        assert "NaN" in path.read_text()

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "walls[0].front_points[0].x"

    def test_load_from_dict(self, floor_plan_dict: dict[str, Any]) -> None:
        config = load_config_from_dict(floor_plan_dict)
        assert len(config.kinds) == 2

    def test_load_from_dict_reports_root_errors(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "9.9"})
        assert exc_info.value.details[0]["path"] == "schema_version"

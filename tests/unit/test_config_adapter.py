"""Unit tests for configuration to domain adapters."""

from typing import Any

from conduits.application.config import (
    RoutingConfig,
    config_to_floor_plan,
    config_to_routing_settings,
    load_config_from_dict,
)
from conduits.domain.entities import OpeningType
from conduits.domain.value_objects import RoutingSettings


class TestConfigToFloorPlan:
    """Tests for config_to_floor_plan."""

    def test_walls_and_points(self, floor_plan_dict: dict[str, Any]) -> None:
        plan = config_to_floor_plan(load_config_from_dict(floor_plan_dict))

        west = plan.get_wall("west")
        assert west is not None
        assert west.is_vertical
        assert [p.point_id for p in west.front_points] == ["w1", "w2", "w3"]
        assert west.back_points == ()
        assert plan.wall_height == 250

    def test_kind_names_resolve_to_indices(self, floor_plan_dict: dict[str, Any]) -> None:
        plan = config_to_floor_plan(load_config_from_dict(floor_plan_dict))

        west = plan.get_wall("west")
        assert [p.kind for p in west.front_points] == [0, 0, 1]
        assert plan.get_wall("north").front_points[0].kind == 1
        assert plan.kind_definition(1).name == "water"
        assert plan.kind_definition(1).diameter == 2.0
        assert plan.kind_definition(7) is None

    def test_point_ids_generated_when_missing(
        self, floor_plan_dict: dict[str, Any]
    ) -> None:
        for point in floor_plan_dict["walls"][0]["front_points"]:
            del point["id"]
        plan = config_to_floor_plan(load_config_from_dict(floor_plan_dict))

        ids = [p.point_id for p in plan.get_wall("west").front_points]
        assert ids == ["west:front:0", "west:front:1", "west:front:2"]

    def test_openings(self, floor_plan_dict: dict[str, Any]) -> None:
        plan = config_to_floor_plan(load_config_from_dict(floor_plan_dict))

        (opening,) = plan.openings
        assert opening.opening_type == OpeningType.WINDOW
        assert opening.name == "big-window"
        assert opening.rect.bottom == 250
        assert opening.bottom_elevation == 40

    def test_unknown_wall_lookup(self, floor_plan_dict: dict[str, Any]) -> None:
        plan = config_to_floor_plan(load_config_from_dict(floor_plan_dict))
        assert plan.get_wall("south") is None


class TestConfigToRoutingSettings:
    """Tests for config_to_routing_settings."""

    def test_defaults_match_router_defaults(self) -> None:
        assert config_to_routing_settings(RoutingConfig()) == RoutingSettings()

    def test_custom_values(self) -> None:
        settings = config_to_routing_settings(
            RoutingConfig(turn_penalty=12.5, epsilon=0.5)
        )
        assert settings.turn_penalty == 12.5
        assert settings.epsilon == 0.5

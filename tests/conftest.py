"""Pytest configuration and shared fixtures for routing tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from conduits.application import RouteWallFaceCommand, WallFaceRoutingOutput
from conduits.application.config import config_to_floor_plan, load_config_from_dict
from conduits.domain.entities import FloorPlan
from conduits.domain.value_objects import (
    ConnectionPoint,
    MstEdge,
    Obstacle,
    WallFaceBounds,
    manhattan_distance,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def bounds() -> WallFaceBounds:
    """A 400 x 250 wall face starting at x=0."""
    return WallFaceBounds(wall_start=0.0, wall_end=400.0, wall_height=250.0)


@pytest.fixture
def door() -> Obstacle:
    """A door-height opening in the middle of the 400 x 250 face."""
    return Obstacle(x=150.0, z=0.0, width=100.0, height=210.0, name="door")


@pytest.fixture
def make_point() -> Callable[..., ConnectionPoint]:
    """Factory for connection points with generated ids."""
    counter = iter(range(10_000))

    def _make(x: float, z: float, kind: Any = 0, **kwargs: Any) -> ConnectionPoint:
        point_id = kwargs.pop("point_id", f"p{next(counter)}")
        return ConnectionPoint(point_id=point_id, x=x, z=z, kind=kind, **kwargs)

    return _make


@pytest.fixture
def make_edge(
    make_point: Callable[..., ConnectionPoint],
) -> Callable[[tuple[float, float], tuple[float, float]], MstEdge]:
    """Factory for an MST edge between two positions."""

    def _make(a: tuple[float, float], b: tuple[float, float]) -> MstEdge:
        start = make_point(*a)
        end = make_point(*b)
        return MstEdge(start=start, end=end, length=manhattan_distance(a, b))

    return _make


# =============================================================================
# Configuration fixtures
# =============================================================================


@pytest.fixture
def floor_plan_dict() -> dict[str, Any]:
    """A small floor plan: a long vertical wall with a window and a T-junction.

    The "north" wall ends where the "west" wall's front face begins, so
    points at the end of north's faces dock onto west's front face.
    """
    return {
        "schema_version": "1.1",
        "wall_height": 250,
        "kinds": [
            {"name": "power", "color": "#ff0000"},
            {"name": "water", "color": "#0000ff", "diameter": 2.0},
        ],
        "walls": [
            {
                "name": "west",
                "x": 100,
                "y": 0,
                "width": 20,
                "height": 400,
                "front_points": [
                    {"id": "w1", "x": 50, "z": 50, "kind": "power"},
                    {"id": "w2", "x": 350, "z": 50, "kind": "power"},
                    {"id": "w3", "x": 20, "z": 120, "kind": "water"},
                ],
            },
            {
                "name": "north",
                "x": 0,
                "y": 100,
                "width": 100,
                "height": 20,
                "front_points": [
                    {"id": "n1", "x": 100, "z": 120, "kind": 1},
                ],
            },
        ],
        "openings": [
            {
                "type": "window",
                "name": "big-window",
                "x": 100,
                "y": 150,
                "width": 20,
                "height": 100,
                "vertical_extent": 120,
                "sill_elevation": 40,
            },
        ],
    }


# =============================================================================
# Application fixtures
# =============================================================================


@pytest.fixture
def floor_plan(floor_plan_dict: dict[str, Any]) -> FloorPlan:
    """The sample floor plan as domain entities."""
    return config_to_floor_plan(load_config_from_dict(floor_plan_dict))


@pytest.fixture
def west_front_output(floor_plan: FloorPlan) -> WallFaceRoutingOutput:
    """Routing result for the front face of the sample plan's west wall."""
    return RouteWallFaceCommand().execute(floor_plan, "west", is_front=True)


@pytest.fixture
def config_file(tmp_path: Path, floor_plan_dict: dict[str, Any]) -> Path:
    """The sample floor plan written to a JSON file."""
    path = tmp_path / "plan.json"
    path.write_text(json.dumps(floor_plan_dict), encoding="utf-8")
    return path

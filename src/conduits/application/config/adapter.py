"""Adapters from configuration models to domain entities."""

from conduits.application.config.schema import (
    FloorPlanConfiguration,
    OpeningConfig,
    PointConfig,
    RoutingConfig,
    WallConfig,
)
from conduits.domain.entities import (
    ConnectionKind,
    FloorPlan,
    PlanOpening,
    PlanRect,
    PlanWall,
)
from conduits.domain.value_objects import ConnectionPoint, RoutingSettings


def _resolve_kind(kind: int | str, kind_names: list[str]) -> int:
    """Resolve a kind reference (name or index) to its index."""
    if isinstance(kind, int):
        return kind
    return kind_names.index(kind)


def _points_to_domain(
    wall: WallConfig,
    face_label: str,
    points: list[PointConfig],
    kind_names: list[str],
) -> tuple[ConnectionPoint, ...]:
    return tuple(
        ConnectionPoint(
            point_id=p.id or f"{wall.name}:{face_label}:{i}",
            x=p.x,
            z=p.z,
            kind=_resolve_kind(p.kind, kind_names),
            name=p.name,
        )
        for i, p in enumerate(points)
    )


def config_to_wall(wall: WallConfig, kind_names: list[str]) -> PlanWall:
    """Convert a WallConfig into a PlanWall with its face points."""
    return PlanWall(
        name=wall.name,
        rect=PlanRect(x=wall.x, y=wall.y, width=wall.width, height=wall.height),
        front_points=_points_to_domain(wall, "front", wall.front_points, kind_names),
        back_points=_points_to_domain(wall, "back", wall.back_points, kind_names),
    )


def config_to_opening(opening: OpeningConfig) -> PlanOpening:
    """Convert an OpeningConfig into a PlanOpening."""
    return PlanOpening(
        opening_type=opening.type,
        rect=PlanRect(
            x=opening.x, y=opening.y, width=opening.width, height=opening.height
        ),
        vertical_extent=opening.vertical_extent,
        sill_elevation=opening.sill_elevation,
        name=opening.name,
    )


def config_to_routing_settings(routing: RoutingConfig) -> RoutingSettings:
    """Convert the routing block into RoutingSettings."""
    return RoutingSettings(turn_penalty=routing.turn_penalty, epsilon=routing.epsilon)


def config_to_floor_plan(config: FloorPlanConfiguration) -> FloorPlan:
    """Convert a validated configuration into a FloorPlan snapshot.

    Kind references on points are resolved to indices into the kinds
    tuple, so the routing engine only ever sees opaque integer tags.

    Args:
        config: A validated FloorPlanConfiguration instance

    Returns:
        The FloorPlan domain entity.
    """
    kind_names = [k.name for k in config.kinds]
    return FloorPlan(
        walls=tuple(config_to_wall(w, kind_names) for w in config.walls),
        openings=tuple(config_to_opening(o) for o in config.openings),
        kinds=tuple(
            ConnectionKind(name=k.name, color=k.color, diameter=k.diameter)
            for k in config.kinds
        ),
        wall_height=config.wall_height,
    )

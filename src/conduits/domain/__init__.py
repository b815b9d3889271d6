"""Domain layer - wall-face routing engine."""

from .entities import (
    FloorPlan,
    ConnectionKind,
    OpeningType,
    PlanOpening,
    PlanRect,
    PlanWall,
    WallFace,
)
from .exceptions import NoPathFoundError, RoutingError, UnrepresentableEndpointError
from .services import (
    ConnectionGrouper,
    HananGridBuilder,
    ObstacleAwareRouter,
    UtilityLayoutService,
    WallFaceService,
)
from .value_objects import (
    ConnectionPoint,
    FallbackReason,
    KindRouting,
    MstEdge,
    Obstacle,
    RoutedConnection,
    RoutingSettings,
    WallFaceBounds,
)

__all__ = [
    "ConnectionGrouper",
    "ConnectionKind",
    "ConnectionPoint",
    "FloorPlan",
    "FallbackReason",
    "HananGridBuilder",
    "KindRouting",
    "MstEdge",
    "NoPathFoundError",
    "Obstacle",
    "ObstacleAwareRouter",
    "OpeningType",
    "PlanOpening",
    "PlanRect",
    "PlanWall",
    "RoutedConnection",
    "RoutingError",
    "RoutingSettings",
    "UnrepresentableEndpointError",
    "UtilityLayoutService",
    "WallFace",
    "WallFaceBounds",
    "WallFaceService",
]

"""Value objects for the wall-face routing domain.

This module provides immutable data types used throughout the routing
engine. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

from ._geometry import (
    ConnectionPoint,
    Obstacle,
    WallFaceBounds,
    Waypoint,
    count_bends,
    is_orthogonal,
    manhattan_distance,
    polyline_length,
    simplify_polyline,
)
from ._routing import (
    DEFAULT_EPSILON,
    DEFAULT_TURN_PENALTY,
    Direction,
    FallbackReason,
    KindRouting,
    MstEdge,
    RoutedConnection,
    RoutingSettings,
)

__all__ = [
    "DEFAULT_EPSILON",
    "DEFAULT_TURN_PENALTY",
    "ConnectionPoint",
    "Direction",
    "FallbackReason",
    "KindRouting",
    "MstEdge",
    "Obstacle",
    "RoutedConnection",
    "RoutingSettings",
    "WallFaceBounds",
    "Waypoint",
    "count_bends",
    "is_orthogonal",
    "manhattan_distance",
    "polyline_length",
    "simplify_polyline",
]

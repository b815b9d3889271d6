"""Routing value objects: MST edges, routed connections, settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable

from ._geometry import ConnectionPoint, Waypoint, count_bends, polyline_length

DEFAULT_TURN_PENALTY = 5.0
DEFAULT_EPSILON = 0.1


class Direction(str, Enum):
    """Direction of the last move taken by the router."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class FallbackReason(str, Enum):
    """Why a connection was drawn as a plain two-segment connector.

    Attributes:
        UNREPRESENTABLE_ENDPOINT: An endpoint lies outside the wall face, so
            the Hanan grid does not contain it.
        NO_PATH: Every grid path between the endpoints crosses an obstacle.
    """

    UNREPRESENTABLE_ENDPOINT = "unrepresentable_endpoint"
    NO_PATH = "no_path"


@dataclass(frozen=True)
class RoutingSettings:
    """Cost model parameters for the obstacle-aware router.

    Attributes:
        turn_penalty: Extra cost added for every change of direction.
        epsilon: Tolerance used when testing edges against obstacle
            interiors. Edges within epsilon of an obstacle boundary are
            never blocked.
    """

    turn_penalty: float = DEFAULT_TURN_PENALTY
    epsilon: float = DEFAULT_EPSILON

    def __post_init__(self) -> None:
        if self.turn_penalty < 0:
            raise ValueError("turn_penalty must be non-negative")
        if self.epsilon < 0:
            raise ValueError("epsilon must be non-negative")


@dataclass(frozen=True)
class MstEdge:
    """An edge of a kind's minimum spanning tree.

    Attributes:
        start: Point already in the tree when the edge was chosen.
        end: Point added to the tree by this edge.
        length: Manhattan distance between the two points.
    """

    start: ConnectionPoint
    end: ConnectionPoint
    length: float

    @property
    def point_ids(self) -> frozenset[str]:
        """Unordered pair of point ids joined by this edge."""
        return frozenset((self.start.point_id, self.end.point_id))


@dataclass(frozen=True)
class RoutedConnection:
    """The drawable route for one MST edge.

    Attributes:
        edge: The MST edge this route connects.
        waypoints: Ordered (x, z) waypoints from edge start to edge end.
        cost: Search cost (length plus turn penalties). For fallback
            connectors this is the plain polyline length.
        fallback_reason: Set when the router could not route around
            obstacles and returned a two-segment connector instead.
    """

    edge: MstEdge
    waypoints: tuple[Waypoint, ...]
    cost: float
    fallback_reason: FallbackReason | None = None

    @property
    def is_fallback(self) -> bool:
        return self.fallback_reason is not None

    @property
    def length(self) -> float:
        """Total length of the waypoint polyline."""
        return polyline_length(self.waypoints)

    @property
    def bends(self) -> int:
        """Number of direction changes along the route."""
        return count_bends(self.waypoints)


@dataclass(frozen=True)
class KindRouting:
    """Routing result for all points sharing one kind.

    Attributes:
        kind: The grouping tag.
        points: Points of this kind, real and docked, in input order.
        connections: One routed connection per MST edge.
    """

    kind: Hashable
    points: tuple[ConnectionPoint, ...]
    connections: tuple[RoutedConnection, ...] = field(default_factory=tuple)

    @property
    def edges(self) -> tuple[MstEdge, ...]:
        return tuple(c.edge for c in self.connections)

    @property
    def total_length(self) -> float:
        """Sum of routed polyline lengths for this kind."""
        return sum(c.length for c in self.connections)

    @property
    def fallback_count(self) -> int:
        return sum(1 for c in self.connections if c.is_fallback)

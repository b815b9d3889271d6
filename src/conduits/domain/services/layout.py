"""Wall-face utility layout: group, span and route connection points."""

from __future__ import annotations

import logging
from typing import Iterable

from ..value_objects import (
    ConnectionPoint,
    KindRouting,
    Obstacle,
    RoutingSettings,
    WallFaceBounds,
)
from .grouping import ConnectionGrouper
from .router import ObstacleAwareRouter

logger = logging.getLogger(__name__)

__all__ = ["UtilityLayoutService"]


class UtilityLayoutService:
    """Computes every connector drawn on one wall face.

    The service is a pure function of its inputs: incoming points and
    obstacles are copied into tuples before use and nothing is cached
    between calls.

    Attributes:
        grouper: Builds per-kind spanning trees.
        router: Routes each spanning-tree edge around obstacles.
    """

    def __init__(
        self,
        grouper: ConnectionGrouper | None = None,
        router: ObstacleAwareRouter | None = None,
        settings: RoutingSettings | None = None,
    ) -> None:
        self.grouper = grouper or ConnectionGrouper()
        self.router = router or ObstacleAwareRouter(settings=settings)

    def route_face(
        self,
        points: Iterable[ConnectionPoint],
        obstacles: Iterable[Obstacle],
        bounds: WallFaceBounds,
    ) -> list[KindRouting]:
        """Route all connections on a wall face.

        Args:
            points: Real and docked connection points on the face.
            obstacles: Door and window rectangles on the face.
            bounds: The routable region of the face.

        Returns:
            One KindRouting per kind, in first-seen kind order. Kinds with a
            single point are included with no connections.
        """
        point_snapshot = tuple(points)
        obstacle_snapshot = tuple(obstacles)

        results: list[KindRouting] = []
        for kind, members in self.grouper.group_by_kind(point_snapshot).items():
            edges = self.grouper.minimum_spanning_tree(members)
            if not edges:
                logger.debug(f"Kind {kind!r}: degenerate group, no connections")
            connections = tuple(
                self.router.route(edge, bounds, obstacle_snapshot) for edge in edges
            )
            routing = KindRouting(
                kind=kind, points=tuple(members), connections=connections
            )
            if routing.fallback_count:
                logger.info(
                    f"Kind {kind!r}: {routing.fallback_count} of "
                    f"{len(connections)} connection(s) drawn without obstacle avoidance"
                )
            results.append(routing)
        return results

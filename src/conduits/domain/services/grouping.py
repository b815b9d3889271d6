"""Grouping of connection points into per-kind spanning trees."""

from __future__ import annotations

import logging
from typing import Hashable, Iterable, Sequence

from ..value_objects import ConnectionPoint, MstEdge, manhattan_distance

logger = logging.getLogger(__name__)

__all__ = ["ConnectionGrouper"]


class ConnectionGrouper:
    """Decides which same-kind connection points get wired together.

    Points are partitioned by kind and each partition is connected with a
    minimum spanning tree over Manhattan distance, grown Prim-style from the
    first point of the group.

    Groups are small (tens of points), so the quadratic scan per step is
    acceptable.
    """

    def group_by_kind(
        self, points: Iterable[ConnectionPoint]
    ) -> dict[Hashable, list[ConnectionPoint]]:
        """Partition points by kind, preserving first-seen kind order.

        Args:
            points: Real and docked connection points.

        Returns:
            Mapping of kind to the points of that kind in input order.
        """
        groups: dict[Hashable, list[ConnectionPoint]] = {}
        for point in points:
            groups.setdefault(point.kind, []).append(point)
        return groups

    def minimum_spanning_tree(
        self, points: Sequence[ConnectionPoint]
    ) -> list[MstEdge]:
        """Compute a Manhattan minimum spanning tree over points.

        Starts from the first point and repeatedly adds the cheapest edge
        joining a visited point to an unvisited one. On equal costs the first
        candidate found wins (visited order, then input order).

        Points are tracked by position in the sequence, so two points with the
        same coordinates are still both connected.

        Args:
            points: Points of a single kind.

        Returns:
            The n - 1 tree edges in the order they were added. Empty when
            fewer than two points are given.

        Raises:
            ValueError: If a point has a NaN or infinite coordinate, which
                leaves it with no comparable distance to the tree.
        """
        if len(points) < 2:
            return []

        visited: list[int] = [0]
        unvisited: list[int] = list(range(1, len(points)))
        edges: list[MstEdge] = []

        while unvisited:
            best: tuple[int, int] | None = None
            best_dist = float("inf")
            for v in visited:
                for u in unvisited:
                    dist = manhattan_distance(points[v].position, points[u].position)
                    if dist < best_dist:
                        best_dist = dist
                        best = (v, u)

            if best is None:
                stranded = ", ".join(points[u].point_id for u in unvisited)
                raise ValueError(
                    f"Connection points must have finite coordinates: {stranded}"
                )
            v, u = best
            edges.append(MstEdge(start=points[v], end=points[u], length=best_dist))
            visited.append(u)
            unvisited.remove(u)

        return edges

    def compute_edges(
        self, points: Iterable[ConnectionPoint]
    ) -> dict[Hashable, list[MstEdge]]:
        """Group points by kind and compute one spanning tree per kind.

        Kinds with fewer than two points map to an empty edge list.

        Args:
            points: Real and docked connection points.

        Returns:
            Mapping of kind to its MST edges.
        """
        result: dict[Hashable, list[MstEdge]] = {}
        for kind, members in self.group_by_kind(points).items():
            if len(members) < 2:
                logger.debug(f"Kind {kind!r} has {len(members)} point(s), nothing to connect")
            result[kind] = self.minimum_spanning_tree(members)
        return result

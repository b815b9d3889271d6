"""Obstacle-aware orthogonal routing between two wall-face points.

The router runs A* over a Hanan grid. Search states carry the direction of
the incoming move so that changes of direction can be priced with a turn
penalty. When no route exists the router degrades to a plain two-segment
connector instead of failing.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Sequence

from ..exceptions import NoPathFoundError, RoutingError, UnrepresentableEndpointError
from ..value_objects import (
    Direction,
    FallbackReason,
    MstEdge,
    Obstacle,
    RoutedConnection,
    RoutingSettings,
    WallFaceBounds,
    Waypoint,
    manhattan_distance,
    polyline_length,
    simplify_polyline,
)
from .hanan_grid import HananGrid, HananGridBuilder

logger = logging.getLogger(__name__)

__all__ = [
    "ObstacleAwareRouter",
    "fallback_path",
    "is_edge_blocked",
]

# (x index, z index, incoming direction)
SearchState = tuple[int, int, Direction | None]


def is_edge_blocked(
    a: Waypoint,
    b: Waypoint,
    obstacles: Sequence[Obstacle],
    epsilon: float,
) -> bool:
    """Check whether an axis-aligned grid edge passes through an obstacle.

    A horizontal edge is blocked when its z lies strictly inside an
    obstacle's z-span and its x-span overlaps the obstacle's x-span, both
    shrunk by epsilon. Vertical edges are tested symmetrically. Edges running
    along an obstacle boundary are not blocked.

    Args:
        a: One end of the edge.
        b: Other end of the edge; shares x or z with a.
        obstacles: Obstacles on the face.
        epsilon: Boundary tolerance.

    Returns:
        True if any obstacle blocks the edge.
    """
    horizontal = a[1] == b[1]
    for obstacle in obstacles:
        if horizontal:
            z = a[1]
            if obstacle.bottom + epsilon < z < obstacle.top - epsilon:
                lo, hi = min(a[0], b[0]), max(a[0], b[0])
                if lo < obstacle.right - epsilon and hi > obstacle.left + epsilon:
                    return True
        else:
            x = a[0]
            if obstacle.left + epsilon < x < obstacle.right - epsilon:
                lo, hi = min(a[1], b[1]), max(a[1], b[1])
                if lo < obstacle.top - epsilon and hi > obstacle.bottom + epsilon:
                    return True
    return False


def fallback_path(start: Waypoint, end: Waypoint) -> list[Waypoint]:
    """Two-segment connector: along the wall first, then vertically."""
    return [start, (end[0], start[1]), end]


class ObstacleAwareRouter:
    """Computes bend-penalized orthogonal routes that avoid obstacles.

    Attributes:
        settings: Turn penalty and boundary tolerance.
        grid_builder: Builder for the per-call Hanan grid.
    """

    def __init__(
        self,
        settings: RoutingSettings | None = None,
        grid_builder: HananGridBuilder | None = None,
    ) -> None:
        self.settings = settings or RoutingSettings()
        self.grid_builder = grid_builder or HananGridBuilder()

    def search(
        self, grid: HananGrid, obstacles: Sequence[Obstacle]
    ) -> tuple[list[Waypoint], float]:
        """Run A* from grid.start to grid.end.

        The returned waypoints include every grid vertex visited, collinear
        ones included.

        Args:
            grid: The Hanan grid for this call.
            obstacles: Obstacles on the face.

        Returns:
            Tuple of (waypoints from start to end inclusive, total cost).

        Raises:
            NoPathFoundError: If the open set is exhausted.
        """
        xs, zs = grid.xs, grid.zs
        tx, tz = grid.end
        target = (xs[tx], zs[tz])
        turn_penalty = self.settings.turn_penalty
        epsilon = self.settings.epsilon

        def heuristic(xi: int, zi: int) -> float:
            return manhattan_distance((xs[xi], zs[zi]), target)

        start_state: SearchState = (grid.start[0], grid.start[1], None)
        g_score: dict[SearchState, float] = {start_state: 0.0}
        came_from: dict[SearchState, SearchState] = {}
        counter = itertools.count()
        open_set: list[tuple[float, int, SearchState]] = [
            (heuristic(grid.start[0], grid.start[1]), next(counter), start_state)
        ]
        expanded = 0

        while open_set:
            _, _, current = heapq.heappop(open_set)
            cx, cz, c_dir = current
            current_g = g_score[current]

            if (cx, cz) == (tx, tz):
                logger.debug(
                    f"Route found after {expanded} expansions, cost={current_g:.2f}"
                )
                return self._reconstruct(grid, came_from, current), current_g

            expanded += 1
            for nx, nz in self._neighbors(grid, cx, cz):
                here = (xs[cx], zs[cz])
                there = (xs[nx], zs[nz])
                if is_edge_blocked(here, there, obstacles, epsilon):
                    continue
                n_dir = Direction.HORIZONTAL if nx != cx else Direction.VERTICAL
                cost = manhattan_distance(here, there)
                if c_dir is not None and c_dir != n_dir:
                    cost += turn_penalty
                tentative_g = current_g + cost
                neighbor: SearchState = (nx, nz, n_dir)
                if tentative_g < g_score.get(neighbor, float("inf")):
                    g_score[neighbor] = tentative_g
                    came_from[neighbor] = current
                    f = tentative_g + heuristic(nx, nz)
                    heapq.heappush(open_set, (f, next(counter), neighbor))

        raise NoPathFoundError(grid.coordinate(*grid.start), target, expanded)

    def find_path(
        self,
        start: Waypoint,
        end: Waypoint,
        bounds: WallFaceBounds,
        obstacles: Sequence[Obstacle],
    ) -> tuple[list[Waypoint], float]:
        """Build the grid and search it, without any fallback.

        Raises:
            UnrepresentableEndpointError: If an endpoint lies outside bounds.
            NoPathFoundError: If obstacles leave no route inside bounds.
        """
        grid = self.grid_builder.build(start, end, bounds, obstacles)
        return self.search(grid, obstacles)

    def route(
        self,
        edge: MstEdge,
        bounds: WallFaceBounds,
        obstacles: Sequence[Obstacle],
    ) -> RoutedConnection:
        """Route one MST edge, falling back to a two-segment connector.

        Args:
            edge: The spanning-tree edge to draw.
            bounds: The routable region of the face.
            obstacles: Obstacles on the face.

        Returns:
            A RoutedConnection. Its fallback_reason is set when the
            obstacle-aware search could not be used.
        """
        start, end = edge.start.position, edge.end.position
        try:
            waypoints, cost = self.find_path(start, end, bounds, obstacles)
        except RoutingError as e:
            reason = (
                FallbackReason.UNREPRESENTABLE_ENDPOINT
                if isinstance(e, UnrepresentableEndpointError)
                else FallbackReason.NO_PATH
            )
            logger.debug(f"Falling back for {start} -> {end}: {e}")
            path = fallback_path(start, end)
            return RoutedConnection(
                edge=edge,
                waypoints=tuple(path),
                cost=polyline_length(path),
                fallback_reason=reason,
            )
        return RoutedConnection(
            edge=edge, waypoints=tuple(simplify_polyline(waypoints)), cost=cost
        )

    def route_waypoints(
        self,
        start: Waypoint,
        end: Waypoint,
        bounds: WallFaceBounds,
        obstacles: Sequence[Obstacle],
    ) -> list[Waypoint]:
        """Waypoints between two positions; never raises for routing failures."""
        try:
            waypoints, _ = self.find_path(start, end, bounds, obstacles)
        except RoutingError as e:
            logger.debug(f"Falling back for {start} -> {end}: {e}")
            return fallback_path(start, end)
        return simplify_polyline(waypoints)

    @staticmethod
    def _neighbors(grid: HananGrid, xi: int, zi: int) -> list[tuple[int, int]]:
        neighbors = []
        if xi > 0:
            neighbors.append((xi - 1, zi))
        if xi < len(grid.xs) - 1:
            neighbors.append((xi + 1, zi))
        if zi > 0:
            neighbors.append((xi, zi - 1))
        if zi < len(grid.zs) - 1:
            neighbors.append((xi, zi + 1))
        return neighbors

    @staticmethod
    def _reconstruct(
        grid: HananGrid,
        came_from: dict[SearchState, SearchState],
        goal: SearchState,
    ) -> list[Waypoint]:
        path = [grid.coordinate(goal[0], goal[1])]
        current = goal
        while current in came_from:
            current = came_from[current]
            path.append(grid.coordinate(current[0], current[1]))
        path.reverse()
        return path

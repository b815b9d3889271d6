"""Hanan grid construction for orthogonal routing on a wall face."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..exceptions import UnrepresentableEndpointError
from ..value_objects import Obstacle, WallFaceBounds, Waypoint

logger = logging.getLogger(__name__)

__all__ = ["HananGrid", "HananGridBuilder"]


@dataclass(frozen=True)
class HananGrid:
    """Sorted distinct grid coordinates for one routing call.

    Attributes:
        xs: Ascending x coordinates.
        zs: Ascending z coordinates.
        start: (x index, z index) of the route start.
        end: (x index, z index) of the route end.
    """

    xs: tuple[float, ...]
    zs: tuple[float, ...]
    start: tuple[int, int]
    end: tuple[int, int]

    @property
    def size(self) -> int:
        """Number of grid vertices."""
        return len(self.xs) * len(self.zs)

    def coordinate(self, xi: int, zi: int) -> Waypoint:
        """Model coordinates of the vertex at (xi, zi)."""
        return (self.xs[xi], self.zs[zi])


class HananGridBuilder:
    """Builds the coordinate grid an optimal orthogonal route can use.

    The grid contains the wall bounds, both endpoints and every obstacle edge.
    The cross product of these coordinates holds every vertex an optimal,
    obstacle-respecting axis-aligned path could need.
    """

    def build(
        self,
        start: Waypoint,
        end: Waypoint,
        bounds: WallFaceBounds,
        obstacles: Sequence[Obstacle],
    ) -> HananGrid:
        """Build the grid for a route between start and end.

        Args:
            start: Route start in wall-face coordinates.
            end: Route end in wall-face coordinates.
            bounds: The routable region of the face.
            obstacles: Obstacles on the face.

        Returns:
            The bounds-filtered grid with both endpoints located on it.

        Raises:
            UnrepresentableEndpointError: If an endpoint lies outside bounds
                and therefore has no grid vertex.
        """
        x_candidates = {bounds.wall_start, bounds.wall_end, start[0], end[0]}
        z_candidates = {0.0, bounds.wall_height, start[1], end[1]}
        for obstacle in obstacles:
            x_candidates.update((obstacle.left, obstacle.right))
            z_candidates.update((obstacle.bottom, obstacle.top))

        xs = tuple(sorted(x for x in x_candidates if bounds.contains_x(x)))
        zs = tuple(sorted(z for z in z_candidates if bounds.contains_z(z)))

        x_index = {x: i for i, x in enumerate(xs)}
        z_index = {z: i for i, z in enumerate(zs)}

        for endpoint in (start, end):
            if endpoint[0] not in x_index or endpoint[1] not in z_index:
                raise UnrepresentableEndpointError(endpoint)

        grid = HananGrid(
            xs=xs,
            zs=zs,
            start=(x_index[start[0]], z_index[start[1]]),
            end=(x_index[end[0]], z_index[end[1]]),
        )
        logger.debug(f"Built Hanan grid {len(xs)}x{len(zs)} for {start} -> {end}")
        return grid

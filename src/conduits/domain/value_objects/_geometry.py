"""Wall-face geometry value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Sequence

# A waypoint in wall-face coordinates: (x along the wall, z above the floor).
Waypoint = tuple[float, float]


@dataclass(frozen=True)
class ConnectionPoint:
    """A tagged connection point on a wall face.

    Attributes:
        point_id: Stable identifier used for identity. Two points with equal
            coordinates are still distinct when their ids differ.
        x: Offset along the wall length.
        z: Height above the floor.
        kind: Opaque grouping tag. Points sharing a kind are wired together.
        name: Optional display name.
        docked: True when the point was projected from an adjacent wall.
    """

    point_id: str
    x: float
    z: float
    kind: Hashable
    name: str = ""
    docked: bool = False

    @property
    def position(self) -> Waypoint:
        """The (x, z) position of the point."""
        return (self.x, self.z)


@dataclass(frozen=True)
class Obstacle:
    """An axis-aligned rectangle on a wall face that connectors must avoid.

    Attributes:
        x: Left edge (offset along the wall).
        z: Bottom edge (sill elevation, 0 for doors).
        width: Extent along the wall.
        height: Vertical extent.
        name: Optional identifier for diagnostics.
    """

    x: float
    z: float
    width: float
    height: float
    name: str | None = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Obstacle dimensions must be non-negative")

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        """Right edge of the obstacle (x + width)."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.z

    @property
    def top(self) -> float:
        """Top edge of the obstacle (z + height)."""
        return self.z + self.height


@dataclass(frozen=True)
class WallFaceBounds:
    """The routable region of a wall face.

    Attributes:
        wall_start: Smallest x coordinate on the face.
        wall_end: Largest x coordinate on the face.
        wall_height: Height of the face; z runs from 0 to this value.
    """

    wall_start: float
    wall_end: float
    wall_height: float

    def __post_init__(self) -> None:
        if self.wall_end < self.wall_start:
            raise ValueError("wall_end must not be less than wall_start")
        if self.wall_height < 0:
            raise ValueError("wall_height must be non-negative")

    @property
    def length(self) -> float:
        """Length of the face along the wall."""
        return self.wall_end - self.wall_start

    def contains_x(self, x: float) -> bool:
        return self.wall_start <= x <= self.wall_end

    def contains_z(self, z: float) -> bool:
        return 0.0 <= z <= self.wall_height

    def contains(self, x: float, z: float) -> bool:
        """Check whether a point lies inside the face (edges included)."""
        return self.contains_x(x) and self.contains_z(z)


def manhattan_distance(a: Waypoint, b: Waypoint) -> float:
    """Rectilinear distance between two wall-face positions."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def polyline_length(waypoints: Sequence[Waypoint]) -> float:
    """Total length of an orthogonal polyline."""
    return sum(
        manhattan_distance(waypoints[i], waypoints[i + 1])
        for i in range(len(waypoints) - 1)
    )


def count_bends(waypoints: Sequence[Waypoint]) -> int:
    """Count direction changes along an orthogonal polyline.

    Zero-length segments are ignored so repeated waypoints never count as a
    bend.
    """
    bends = 0
    previous: bool | None = None
    for a, b in zip(waypoints, waypoints[1:]):
        if a == b:
            continue
        horizontal = a[1] == b[1]
        if previous is not None and horizontal != previous:
            bends += 1
        previous = horizontal
    return bends


def is_orthogonal(waypoints: Sequence[Waypoint]) -> bool:
    """Check that every consecutive pair shares an x or a z coordinate."""
    return all(a[0] == b[0] or a[1] == b[1] for a, b in zip(waypoints, waypoints[1:]))


def simplify_polyline(waypoints: Sequence[Waypoint]) -> list[Waypoint]:
    """Drop duplicate and collinear intermediate waypoints.

    The first and last waypoints are always kept, so the simplified polyline
    still starts and ends at the connection points.

    Args:
        waypoints: Orthogonal polyline as visited by the router.

    Returns:
        Polyline containing only the corners of the route.
    """
    result: list[Waypoint] = []
    for point in waypoints:
        if result and result[-1] == point:
            continue
        if len(result) >= 2:
            a, b = result[-2], result[-1]
            same_x = a[0] == b[0] == point[0]
            same_z = a[1] == b[1] == point[1]
            if same_x or same_z:
                result[-1] = point
                continue
        result.append(point)
    return result

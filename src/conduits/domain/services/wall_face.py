"""Floor-plan to wall-face projection services.

This module maps floor-plan elements onto the 2D coordinate system of one
wall face: openings become obstacle rectangles, and points placed on
adjacent perpendicular walls are projected onto the face as docked points.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..entities import PlanOpening, PlanWall, WallFace
from ..value_objects import ConnectionPoint, Obstacle, WallFaceBounds

logger = logging.getLogger(__name__)

__all__ = ["WallFaceService", "DOCK_TOLERANCE"]

DOCK_TOLERANCE = 1e-6


class WallFaceService:
    """Builds the routing inputs for a single wall face.

    Attributes:
        tolerance: Distance under which a projected point counts as lying on
            the face line.
    """

    def __init__(self, tolerance: float = DOCK_TOLERANCE) -> None:
        self.tolerance = tolerance

    def face_bounds(self, face: WallFace, wall_height: float) -> WallFaceBounds:
        """Routable region of a face for the given storey height."""
        return WallFaceBounds(
            wall_start=face.wall_start,
            wall_end=face.wall_end,
            wall_height=wall_height,
        )

    def find_containing_wall(
        self, opening: PlanOpening, walls: Sequence[PlanWall]
    ) -> PlanWall | None:
        """First wall whose footprint fully contains the opening."""
        for wall in walls:
            if wall.rect.contains_rect(opening.rect):
                return wall
        return None

    def openings_on_wall(
        self,
        wall: PlanWall,
        openings: Sequence[PlanOpening],
        walls: Sequence[PlanWall],
    ) -> list[PlanOpening]:
        """Openings whose containing wall is the given wall.

        When walls overlap, an opening belongs to the first wall (in plan
        order) that contains it.
        """
        result = []
        for opening in openings:
            container = self.find_containing_wall(opening, walls)
            if container is not None and container.name == wall.name:
                result.append(opening)
        return result

    def build_obstacles(
        self, face: WallFace, openings: Sequence[PlanOpening]
    ) -> list[Obstacle]:
        """Convert openings on a wall into obstacle rectangles on a face.

        The obstacle x and width come from the opening's footprint along the
        wall; z is the sill elevation (0 for doors) and height is the
        opening's vertical extent.

        Args:
            face: The wall face being routed.
            openings: Openings cut into the face's wall.

        Returns:
            One Obstacle per opening, in the same order.
        """
        obstacles = []
        for opening in openings:
            rect = opening.rect
            along = rect.y if face.is_vertical else rect.x
            extent = rect.height if face.is_vertical else rect.width
            obstacles.append(
                Obstacle(
                    x=along,
                    z=opening.bottom_elevation,
                    width=extent,
                    height=opening.vertical_extent,
                    name=opening.name or opening.opening_type.value,
                )
            )
        return obstacles

    def compute_docked_points(
        self, face: WallFace, walls: Sequence[PlanWall]
    ) -> list[ConnectionPoint]:
        """Project points from other walls that land on this face.

        Points on either face of every other wall are converted to floor-plan
        coordinates. Those lying on this face's side line within the wall span
        are projected onto the face. A projected point is skipped when the
        face already owns a point of the same kind at the same position.

        Args:
            face: The wall face being routed.
            walls: All walls on the floor plan, including face.wall.

        Returns:
            Read-only docked points with ids prefixed by "docked:".
        """
        tol = self.tolerance
        side = face.side_coordinate
        own_points = face.points
        result: list[ConnectionPoint] = []

        for other in walls:
            if other.name == face.wall.name:
                continue
            for other_face in (other.face(True), other.face(False)):
                for point in other_face.points:
                    fx, fy = other_face.to_floor_plan(point)
                    across, along = (fx, fy) if face.is_vertical else (fy, fx)
                    on_segment = (
                        abs(across - side) < tol
                        and face.wall_start - tol <= along <= face.wall_end + tol
                    )
                    if not on_segment:
                        continue
                    duplicate = any(
                        abs(own.x - along) < tol
                        and own.z == point.z
                        and own.kind == point.kind
                        for own in own_points
                    )
                    if duplicate:
                        continue
                    side_label = "front" if other_face.is_front else "back"
                    result.append(
                        ConnectionPoint(
                            point_id=f"docked:{other.name}:{side_label}:{point.point_id}",
                            x=along,
                            z=point.z,
                            kind=point.kind,
                            name=point.name,
                            docked=True,
                        )
                    )

        if result:
            logger.debug(f"{face.label}: {len(result)} docked point(s) from adjacent walls")
        return result

    def compute_dock_edges(
        self, face: WallFace, walls: Sequence[PlanWall]
    ) -> list[float]:
        """Along-wall coordinates where perpendicular walls meet this face.

        Each perpendicular wall that butts against the face's side contributes
        the start and end of its overlap with the wall.

        Args:
            face: The wall face being routed.
            walls: All walls on the floor plan.

        Returns:
            Flat list of overlap start/end coordinates.
        """
        edges: list[float] = []
        rect = face.wall.rect
        for other in walls:
            if other.name == face.wall.name or other.is_vertical == face.is_vertical:
                continue
            o = other.rect
            if face.is_vertical:
                overlaps = o.y < rect.bottom and o.bottom > rect.y
                docks = o.right == rect.x if face.is_front else o.x == rect.right
                lo, hi = max(rect.y, o.y), min(rect.bottom, o.bottom)
            else:
                overlaps = o.x < rect.right and o.right > rect.x
                docks = o.bottom == rect.y if face.is_front else o.y == rect.bottom
                lo, hi = max(rect.x, o.x), min(rect.right, o.right)
            if overlaps and docks:
                edges.extend((lo, hi))
        return edges

    def routing_points(
        self, face: WallFace, walls: Sequence[PlanWall]
    ) -> list[ConnectionPoint]:
        """Owned points of the face followed by its docked points."""
        return list(face.points) + self.compute_docked_points(face, walls)

"""Application commands (use cases) for wall-face routing."""

from __future__ import annotations

import logging

from conduits.domain import FloorPlan, RoutingSettings
from conduits.domain.services import UtilityLayoutService, WallFaceService

from .dtos import WallFaceRoutingOutput

logger = logging.getLogger(__name__)


class RouteWallFaceCommand:
    """Command to compute every connector on one face of a wall.

    Gathers the face's own points, the docked points projected from
    adjacent walls and the openings on the wall, then runs the layout
    service over that snapshot.
    """

    def __init__(
        self,
        layout_service: UtilityLayoutService | None = None,
        face_service: WallFaceService | None = None,
    ) -> None:
        self.layout_service = layout_service
        self.face_service = face_service or WallFaceService()

    def execute(
        self,
        plan: FloorPlan,
        wall_name: str,
        is_front: bool = True,
        settings: RoutingSettings | None = None,
    ) -> WallFaceRoutingOutput:
        """Execute the routing command.

        Args:
            plan: Floor-plan snapshot.
            wall_name: Name of the wall to route.
            is_front: Route the front face (True) or the back face (False).
            settings: Routing parameters. Ignored when the command was built
                with an explicit layout service.

        Returns:
            WallFaceRoutingOutput. An unknown wall name is reported in
            errors rather than raised.
        """
        output = WallFaceRoutingOutput(
            wall_name=wall_name, is_front=is_front, kinds=plan.kinds
        )

        wall = plan.get_wall(wall_name)
        if wall is None:
            known = ", ".join(w.name for w in plan.walls) or "none"
            output.errors.append(f"Unknown wall '{wall_name}' (known walls: {known})")
            return output

        face = wall.face(is_front)
        openings = self.face_service.openings_on_wall(wall, plan.openings, plan.walls)
        output.bounds = self.face_service.face_bounds(face, plan.wall_height)
        output.obstacles = self.face_service.build_obstacles(face, openings)
        output.points = self.face_service.routing_points(face, plan.walls)
        output.dock_edges = self.face_service.compute_dock_edges(face, plan.walls)

        service = self.layout_service or UtilityLayoutService(settings=settings)
        output.routings = service.route_face(
            output.points, output.obstacles, output.bounds
        )
        logger.debug(
            f"{face.label}: {len(output.points)} point(s), "
            f"{len(output.obstacles)} obstacle(s), "
            f"{output.connection_count} connection(s)"
        )
        return output

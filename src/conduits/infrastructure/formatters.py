"""Text formatters for routed wall faces."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from conduits.application.dtos import WallFaceRoutingOutput
    from conduits.domain.entities import PlanWall
    from conduits.domain.value_objects import RoutedConnection, Waypoint


def _fmt_point(point: Waypoint) -> str:
    return f"({point[0]:g}, {point[1]:g})"


class RouteReportFormatter:
    """Formats the connections of a routed wall face as a text report."""

    def __init__(self, show_waypoints: bool = True) -> None:
        self._show_waypoints = show_waypoints

    def format(self, output: WallFaceRoutingOutput) -> str:
        """Format the routing result for display."""
        lines = [
            f"UTILITY ROUTES - {output.face_label}",
            "=" * 70,
        ]
        if output.bounds is not None:
            b = output.bounds
            lines.append(
                f"Face: x {b.wall_start:g}..{b.wall_end:g}, z 0..{b.wall_height:g}"
            )
        lines.append(
            f"Points: {len(output.points)} "
            f"({sum(1 for p in output.points if p.docked)} docked)   "
            f"Obstacles: {len(output.obstacles)}"
        )
        lines.append("")

        if not output.routings:
            lines.append("No connection points on this face.")
            return "\n".join(lines)

        for routing in output.routings:
            kind = output.kind_name(routing.kind)
            lines.append(
                f"{kind}: {len(routing.points)} point(s), "
                f"{len(routing.connections)} connection(s), "
                f"total length {routing.total_length:.1f}"
            )
            lines.append("-" * 70)
            if not routing.connections:
                lines.append("  (nothing to connect)")
            for connection in routing.connections:
                lines.append(self._format_connection(connection))
            lines.append("")

        lines.append(
            f"Total: {output.connection_count} connection(s), "
            f"{output.fallback_count} without obstacle avoidance"
        )
        return "\n".join(lines)

    def _format_connection(self, connection: RoutedConnection) -> str:
        edge = connection.edge
        line = (
            f"  {edge.start.point_id} -> {edge.end.point_id}: "
            f"length {connection.length:.1f}, {connection.bends} bend(s)"
        )
        if connection.fallback_reason is not None:
            line += f" [fallback: {connection.fallback_reason.value}]"
        if self._show_waypoints:
            line += "\n    " + " -> ".join(_fmt_point(w) for w in connection.waypoints)
        return line


class WallListFormatter:
    """Formats the walls of a floor plan as a table."""

    def format(self, walls: list[PlanWall]) -> str:
        if not walls:
            return "No walls defined."
        lines = [
            "WALLS",
            "=" * 60,
            f"{'Name':<16} {'Orientation':<12} {'Length':<10} {'Front':<7} {'Back'}",
            "-" * 60,
        ]
        for wall in walls:
            orientation = "vertical" if wall.is_vertical else "horizontal"
            length = wall.rect.height if wall.is_vertical else wall.rect.width
            lines.append(
                f"{wall.name:<16} {orientation:<12} {length:<10g} "
                f"{len(wall.front_points):<7} {len(wall.back_points)}"
            )
        return "\n".join(lines)

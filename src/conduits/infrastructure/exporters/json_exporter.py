"""JSON exporter for routed wall-face connections."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from conduits.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from conduits.application.dtos import WallFaceRoutingOutput
    from conduits.domain.value_objects import ConnectionPoint, RoutedConnection


# Current schema version for JSON output
SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("json")
class JsonRouteExporter:
    """Exports a routed wall face as JSON.

    The document contains the face bounds, obstacles, points and, per kind,
    every connection with its waypoints, length, bend count and fallback
    reason.
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, output: WallFaceRoutingOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")

    def export_string(self, output: WallFaceRoutingOutput) -> str:
        return json.dumps(self.to_dict(output), indent=self.indent)

    def to_dict(self, output: WallFaceRoutingOutput) -> dict[str, Any]:
        """Build the JSON-compatible document for a routed face."""
        bounds = output.bounds
        return {
            "schema_version": SCHEMA_VERSION,
            "wall": output.wall_name,
            "face": "front" if output.is_front else "back",
            "bounds": None
            if bounds is None
            else {
                "wall_start": bounds.wall_start,
                "wall_end": bounds.wall_end,
                "wall_height": bounds.wall_height,
            },
            "obstacles": [
                {
                    "name": o.name,
                    "x": o.x,
                    "z": o.z,
                    "width": o.width,
                    "height": o.height,
                }
                for o in output.obstacles
            ],
            "dock_edges": list(output.dock_edges),
            "kinds": [
                {
                    "kind": output.kind_name(routing.kind),
                    "color": self._kind_color(output, routing.kind),
                    "points": [self._point(p) for p in routing.points],
                    "total_length": routing.total_length,
                    "connections": [self._connection(c) for c in routing.connections],
                }
                for routing in output.routings
            ],
            "errors": list(output.errors),
        }

    @staticmethod
    def _kind_color(output: WallFaceRoutingOutput, kind: object) -> str | None:
        if isinstance(kind, int) and 0 <= kind < len(output.kinds):
            return output.kinds[kind].color
        return None

    @staticmethod
    def _point(point: ConnectionPoint) -> dict[str, Any]:
        return {
            "id": point.point_id,
            "name": point.name,
            "x": point.x,
            "z": point.z,
            "docked": point.docked,
        }

    @staticmethod
    def _connection(connection: RoutedConnection) -> dict[str, Any]:
        return {
            "from": connection.edge.start.point_id,
            "to": connection.edge.end.point_id,
            "waypoints": [list(w) for w in connection.waypoints],
            "length": connection.length,
            "bends": connection.bends,
            "cost": connection.cost,
            "fallback": connection.fallback_reason.value
            if connection.fallback_reason
            else None,
        }

"""CSV exporter listing every straight segment of every route."""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from conduits.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from conduits.application.dtos import WallFaceRoutingOutput


CSV_HEADER = [
    "kind",
    "from",
    "to",
    "segment",
    "x1",
    "z1",
    "x2",
    "z2",
    "fallback",
]


@ExporterRegistry.register("csv")
class CsvRouteExporter:
    """Exports routed connections as one CSV row per polyline segment."""

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    def export(self, output: WallFaceRoutingOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8", newline="")

    def export_string(self, output: WallFaceRoutingOutput) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(CSV_HEADER)
        for routing in output.routings:
            kind = output.kind_name(routing.kind)
            for connection in routing.connections:
                fallback = (
                    connection.fallback_reason.value
                    if connection.fallback_reason
                    else ""
                )
                waypoints = connection.waypoints
                for i, (a, b) in enumerate(zip(waypoints, waypoints[1:])):
                    writer.writerow(
                        [
                            kind,
                            connection.edge.start.point_id,
                            connection.edge.end.point_id,
                            i,
                            a[0],
                            a[1],
                            b[0],
                            b[1],
                            fallback,
                        ]
                    )
        return buffer.getvalue()

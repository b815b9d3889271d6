"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from conduits.domain import (
    ConnectionKind,
    ConnectionPoint,
    KindRouting,
    Obstacle,
    WallFaceBounds,
)


@dataclass
class WallFaceRoutingOutput:
    """Output DTO for routing one wall face.

    Attributes:
        wall_name: Name of the routed wall.
        is_front: True for the front face, False for the back face.
        bounds: Routable region of the face (None when the wall is unknown).
        obstacles: Openings on the face as obstacle rectangles.
        points: Owned and docked points, in routing order.
        routings: One entry per kind present on the face.
        kinds: Kind definitions used to label kinds in reports.
        dock_edges: Along-wall coordinates where perpendicular walls meet.
        errors: Error messages; non-empty when routing could not run.
    """

    wall_name: str
    is_front: bool = True
    bounds: WallFaceBounds | None = None
    obstacles: list[Obstacle] = field(default_factory=list)
    points: list[ConnectionPoint] = field(default_factory=list)
    routings: list[KindRouting] = field(default_factory=list)
    kinds: tuple[ConnectionKind, ...] = field(default_factory=tuple)
    dock_edges: list[float] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if routing completed without errors."""
        return len(self.errors) == 0

    @property
    def face_label(self) -> str:
        return f"{self.wall_name}:{'front' if self.is_front else 'back'}"

    @property
    def connection_count(self) -> int:
        return sum(len(r.connections) for r in self.routings)

    @property
    def fallback_count(self) -> int:
        return sum(r.fallback_count for r in self.routings)

    def kind_name(self, kind: object) -> str:
        """Display name for a kind tag, falling back to its repr."""
        if isinstance(kind, int) and 0 <= kind < len(self.kinds):
            return self.kinds[kind].name
        return str(kind)

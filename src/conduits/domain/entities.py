"""Floor-plan entities that feed the wall-face routing engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .value_objects import ConnectionPoint, Waypoint


class OpeningType(str, Enum):
    """Kinds of openings cut into a wall."""

    WINDOW = "window"
    DOOR = "door"


@dataclass(frozen=True)
class ConnectionKind:
    """Display definition of a connection kind.

    Only consumers (reports, exporters) resolve kinds to these attributes;
    the routing engine treats kinds as opaque tags.

    Attributes:
        name: Human-readable name, e.g. "Power".
        color: Display color as a hex string.
        diameter: Nominal conduit or pipe diameter.
    """

    name: str
    color: str = "#000000"
    diameter: float = 1.0

    def __post_init__(self) -> None:
        if self.diameter <= 0:
            raise ValueError("Kind diameter must be positive")


@dataclass(frozen=True)
class PlanRect:
    """Axis-aligned rectangle in floor-plan coordinates."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Rectangle dimensions must be non-negative")

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains_rect(self, other: PlanRect) -> bool:
        """Check whether other lies entirely inside this rectangle."""
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )


@dataclass(frozen=True)
class PlanWall:
    """A wall drawn on the floor plan.

    A wall is vertical (runs along y) when it is narrower than it is long in
    y. Its front face is the side with the smaller x (vertical walls) or
    smaller y (horizontal walls).

    Attributes:
        name: Unique wall identifier.
        rect: Footprint of the wall.
        front_points: Connection points placed on the front face.
        back_points: Connection points placed on the back face.
    """

    name: str
    rect: PlanRect
    front_points: tuple[ConnectionPoint, ...] = field(default_factory=tuple)
    back_points: tuple[ConnectionPoint, ...] = field(default_factory=tuple)

    @property
    def is_vertical(self) -> bool:
        return self.rect.width < self.rect.height

    def face(self, is_front: bool) -> WallFace:
        """The front or back face of this wall."""
        return WallFace(wall=self, is_front=is_front)


@dataclass(frozen=True)
class PlanOpening:
    """A window or door drawn on the floor plan.

    Attributes:
        opening_type: Window or door.
        rect: Footprint of the opening on the floor plan.
        vertical_extent: Height of the opening (window height or door height).
        sill_elevation: Height of the window sill. Doors always start at the
            floor, so this is ignored for doors.
        name: Optional identifier.
    """

    opening_type: OpeningType
    rect: PlanRect
    vertical_extent: float
    sill_elevation: float = 0.0
    name: str | None = None

    def __post_init__(self) -> None:
        if self.vertical_extent < 0:
            raise ValueError("Opening vertical extent must be non-negative")
        if self.sill_elevation < 0:
            raise ValueError("Sill elevation must be non-negative")

    @property
    def bottom_elevation(self) -> float:
        """Height of the bottom edge of the opening above the floor."""
        if self.opening_type == OpeningType.DOOR:
            return 0.0
        return self.sill_elevation


@dataclass(frozen=True)
class WallFace:
    """One side of a wall, seen as a 2D (x along wall, z height) plane."""

    wall: PlanWall
    is_front: bool

    @property
    def label(self) -> str:
        return f"{self.wall.name}:{'front' if self.is_front else 'back'}"

    @property
    def is_vertical(self) -> bool:
        return self.wall.is_vertical

    @property
    def wall_start(self) -> float:
        """Smallest along-wall coordinate of the face."""
        rect = self.wall.rect
        return rect.y if self.is_vertical else rect.x

    @property
    def wall_end(self) -> float:
        """Largest along-wall coordinate of the face."""
        rect = self.wall.rect
        return rect.bottom if self.is_vertical else rect.right

    @property
    def side_coordinate(self) -> float:
        """Floor-plan coordinate of the face line across the wall."""
        rect = self.wall.rect
        if self.is_vertical:
            return rect.x if self.is_front else rect.right
        return rect.y if self.is_front else rect.bottom

    @property
    def points(self) -> tuple[ConnectionPoint, ...]:
        """Connection points owned by this face."""
        return self.wall.front_points if self.is_front else self.wall.back_points

    def to_floor_plan(self, point: ConnectionPoint) -> Waypoint:
        """Floor-plan (x, y) position of a point placed on this face."""
        if self.is_vertical:
            return (self.side_coordinate, point.x)
        return (point.x, self.side_coordinate)


@dataclass(frozen=True)
class FloorPlan:
    """Snapshot of the floor-plan elements relevant to utility routing.

    Attributes:
        walls: Walls in plan order.
        openings: Windows and doors.
        kinds: Kind definitions; a point's kind is an index into this tuple.
        wall_height: Storey height shared by every wall face.
    """

    walls: tuple[PlanWall, ...] = field(default_factory=tuple)
    openings: tuple[PlanOpening, ...] = field(default_factory=tuple)
    kinds: tuple[ConnectionKind, ...] = field(default_factory=tuple)
    wall_height: float = 300.0

    def __post_init__(self) -> None:
        if self.wall_height <= 0:
            raise ValueError("Wall height must be positive")

    def get_wall(self, name: str) -> PlanWall | None:
        """Wall with the given name, or None."""
        for wall in self.walls:
            if wall.name == name:
                return wall
        return None

    def kind_definition(self, kind: object) -> ConnectionKind | None:
        """Display definition for a kind index, or None if undefined."""
        if isinstance(kind, int) and 0 <= kind < len(self.kinds):
            return self.kinds[kind]
        return None

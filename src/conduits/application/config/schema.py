"""Pydantic schema for floor-plan routing configuration files.

A configuration file describes the walls of a floor plan, the openings cut
into them, the connection kinds, and the connection points placed on each
wall face. Routing parameters may be tuned in the optional ``routing`` block.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from conduits.domain.entities import OpeningType
from conduits.domain.value_objects import DEFAULT_EPSILON, DEFAULT_TURN_PENALTY

# Supported schema versions for configuration files
# Version 1.0: Walls, openings, kinds and face connection points
# Version 1.1: Added routing parameters (turn penalty, boundary epsilon)
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})

# Storey height used when a configuration does not specify one
DEFAULT_WALL_HEIGHT = 300.0


class KindConfig(BaseModel):
    """Configuration for a connection kind.

    Attributes:
        name: Unique kind name (e.g. "power", "water")
        color: Display color as "#RRGGBB"
        diameter: Nominal conduit or pipe diameter
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    name: str = Field(..., min_length=1)
    color: str = Field(default="#000000", pattern=r"^#[0-9a-fA-F]{6}$")
    diameter: float = Field(default=1.0, gt=0)


class PointConfig(BaseModel):
    """Configuration for a connection point on a wall face.

    Coordinates are not range-checked: a point outside its face is still
    drawn, just without obstacle avoidance.

    Attributes:
        id: Optional stable identifier (generated from the wall when omitted)
        x: Offset along the wall
        z: Height above the floor
        kind: Kind name, or 0-based index into the ``kinds`` list
        name: Optional display name
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    id: str | None = None
    x: float
    z: float
    kind: int | str
    name: str = ""


class WallConfig(BaseModel):
    """Configuration for a wall on the floor plan.

    Attributes:
        name: Unique wall identifier
        x: Left edge of the wall footprint
        y: Top edge of the wall footprint
        width: Footprint extent along x
        height: Footprint extent along y
        front_points: Connection points on the front face
        back_points: Connection points on the back face
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    name: str = Field(..., min_length=1)
    x: float
    y: float
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    front_points: list[PointConfig] = Field(default_factory=list)
    back_points: list[PointConfig] = Field(default_factory=list)


class OpeningConfig(BaseModel):
    """Configuration for a window or door.

    Attributes:
        type: "window" or "door"
        x: Left edge of the opening footprint
        y: Top edge of the opening footprint
        width: Footprint extent along x
        height: Footprint extent along y
        vertical_extent: Height of the opening on the wall face
        sill_elevation: Window sill height (ignored for doors)
        name: Optional identifier
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    type: OpeningType
    x: float
    y: float
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)
    vertical_extent: float = Field(..., gt=0)
    sill_elevation: float = Field(default=0.0, ge=0)
    name: str | None = None


class RoutingConfig(BaseModel):
    """Routing cost model parameters.

    Attributes:
        turn_penalty: Extra cost per change of direction
        epsilon: Obstacle boundary tolerance
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    turn_penalty: float = Field(default=DEFAULT_TURN_PENALTY, ge=0)
    epsilon: float = Field(default=DEFAULT_EPSILON, ge=0)


class FloorPlanConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Configuration schema version
        wall_height: Storey height; the z range of every wall face
        kinds: Connection kind definitions
        walls: Walls with their face connection points
        openings: Windows and doors
        routing: Routing parameters
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    schema_version: str = "1.0"
    wall_height: float = Field(default=DEFAULT_WALL_HEIGHT, gt=0)
    kinds: list[KindConfig] = Field(default_factory=list)
    walls: list[WallConfig] = Field(default_factory=list)
    openings: list[OpeningConfig] = Field(default_factory=list)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Validate that the schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v

    @model_validator(mode="after")
    def validate_names_and_kinds(self) -> "FloorPlanConfiguration":
        """Validate unique names and point ids, and that kind references resolve.

        Point ids are compared after defaulting, so an explicit id may not
        reuse a generated "<wall>:<front|back>:<index>" id either.
        """
        wall_names = [w.name for w in self.walls]
        duplicates = sorted({n for n in wall_names if wall_names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate wall names: {', '.join(duplicates)}")

        kind_names = [k.name for k in self.kinds]
        duplicates = sorted({n for n in kind_names if kind_names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate kind names: {', '.join(duplicates)}")

        point_ids: list[str] = []
        for wall in self.walls:
            for face, points in (
                ("front_points", wall.front_points),
                ("back_points", wall.back_points),
            ):
                side = face.removesuffix("_points")
                for i, point in enumerate(points):
                    point_ids.append(point.id or f"{wall.name}:{side}:{i}")
                    if isinstance(point.kind, int):
                        if not 0 <= point.kind < len(self.kinds):
                            raise ValueError(
                                f"Wall '{wall.name}' {face}[{i}] references kind "
                                f"index {point.kind}, but only {len(self.kinds)} "
                                "kind(s) are defined"
                            )
                    elif point.kind not in kind_names:
                        raise ValueError(
                            f"Wall '{wall.name}' {face}[{i}] references unknown "
                            f"kind '{point.kind}'"
                        )

        duplicates = sorted({n for n in point_ids if point_ids.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate point ids: {', '.join(duplicates)}")
        return self

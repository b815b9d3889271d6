"""Validation structures and routing advisory checks.

Schema validation is handled by Pydantic when a file is loaded. The checks
here look at the floor plan as a whole. Openings taller than the wall are
errors; conditions that still route, but not the way the user probably
expects, are warnings.
"""

from dataclasses import dataclass, field
from typing import Any

from conduits.application.config.adapter import config_to_floor_plan
from conduits.application.config.schema import FloorPlanConfiguration
from conduits.domain.services import WallFaceService


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "walls[0].width")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def check_routing_advisories(config: FloorPlanConfiguration) -> ValidationResult:
    """Check a configuration for points and openings that will route poorly.

    Reports:
    - Openings not contained in any wall (they never become obstacles)
    - Points outside their face (drawn without obstacle avoidance)
    - Points strictly inside an opening on their wall

    Args:
        config: A validated FloorPlanConfiguration instance

    Returns:
        ValidationResult holding warnings only.
    """
    result = ValidationResult()
    plan = config_to_floor_plan(config)
    service = WallFaceService()

    for i, opening in enumerate(plan.openings):
        if service.find_containing_wall(opening, plan.walls) is None:
            result.add_warning(
                path=f"openings[{i}]",
                message="Opening is not inside any wall and will be ignored",
                suggestion="Move the opening footprint within a wall footprint",
            )

    for wi, wall in enumerate(plan.walls):
        openings = service.openings_on_wall(wall, plan.openings, plan.walls)
        for is_front, label in ((True, "front_points"), (False, "back_points")):
            face = wall.face(is_front)
            bounds = service.face_bounds(face, plan.wall_height)
            obstacles = service.build_obstacles(face, openings)
            for pi, point in enumerate(face.points):
                path = f"walls[{wi}].{label}[{pi}]"
                if not bounds.contains(point.x, point.z):
                    result.add_warning(
                        path=path,
                        message=(
                            f"Point ({point.x}, {point.z}) lies outside the wall face "
                            f"and will be connected without avoiding openings"
                        ),
                        suggestion=(
                            f"Keep x within [{bounds.wall_start}, {bounds.wall_end}] "
                            f"and z within [0, {bounds.wall_height}]"
                        ),
                    )
                    continue
                for obstacle in obstacles:
                    if (
                        obstacle.left < point.x < obstacle.right
                        and obstacle.bottom < point.z < obstacle.top
                    ):
                        result.add_warning(
                            path=path,
                            message=f"Point lies inside opening '{obstacle.name}'",
                        )
    return result


def check_opening_heights(config: FloorPlanConfiguration) -> ValidationResult:
    """Report openings whose top lies above the storey height.

    Such an opening also covers the ceiling line, so no route can pass over
    it. Doors are measured from the floor, windows from their sill.
    """
    result = ValidationResult()
    plan = config_to_floor_plan(config)
    for i, opening in enumerate(plan.openings):
        top = opening.bottom_elevation + opening.vertical_extent
        if top > plan.wall_height:
            result.add_error(
                path=f"openings[{i}].vertical_extent",
                message=(
                    f"Opening reaches {top:g}, above the wall height "
                    f"{plan.wall_height:g}"
                ),
                value=opening.vertical_extent,
            )
    return result


def validate_config(config: FloorPlanConfiguration) -> ValidationResult:
    """Perform full validation of a loaded configuration.

    Opening heights are errors; routing advisories are warnings.
    """
    result = check_opening_heights(config)
    advisories = check_routing_advisories(config)
    result.errors.extend(advisories.errors)
    result.warnings.extend(advisories.warnings)
    return result

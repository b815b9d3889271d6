"""Loading of floor-plan configuration files.

Every failure, whether the file is missing, unreadable, not JSON or not a
valid floor plan, surfaces as a single ConfigError whose error_type tells
the CLI how to present it.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from conduits.application.config.schema import FloorPlanConfiguration


class ConfigError(Exception):
    """A configuration file could not be turned into a FloorPlanConfiguration.

    Attributes:
        message: Human-readable summary
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation
        path: The configuration file, when loading from disk
        details: Per-problem entries. json_parse entries carry line, column
            and message; validation entries carry path and message.
    """

    def __init__(
        self,
        message: str,
        error_type: str,
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)


def _location(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as ``walls[0].front_points[2].x``."""
    rendered = ""
    for segment in loc:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        else:
            rendered += f".{segment}" if rendered else str(segment)
    return rendered or "(root)"


def _validate(data: Any, path: Path | None = None) -> FloorPlanConfiguration:
    try:
        return FloorPlanConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = [
            {"path": _location(err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        summary = "\n".join(
            ["Configuration validation failed:"]
            + [f"  - {d['path']}: {d['message']}" for d in details]
        )
        raise ConfigError(summary, "validation", path=path, details=details)


def load_config(path: Path) -> FloorPlanConfiguration:
    """Read, parse and validate a JSON floor-plan configuration.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}", "file_not_found", path)
    except PermissionError:
        raise ConfigError(
            f"Permission denied reading config file: {path}", "permission_denied", path
        )
    except OSError as e:
        raise ConfigError(f"Error reading config file {path}: {e}", "file_read_error", path)

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}",
            "json_parse",
            path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> FloorPlanConfiguration:
    """Validate an already-parsed configuration.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)

"""Configuration schema and loading system for floor-plan routing.

Public API:
    - FloorPlanConfiguration: Root configuration model
    - KindConfig, PointConfig, WallConfig, OpeningConfig, RoutingConfig
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - ValidationResult: Container for validation results
    - validate_config: Opening height checks and routing advisories
    - config_to_floor_plan: Convert configuration to domain entities
    - config_to_routing_settings: Convert the routing block

Example:
    >>> from pathlib import Path
    >>> from conduits.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("house.json"))
    ...     print(f"{len(config.walls)} walls")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from conduits.application.config.adapter import (
    config_to_floor_plan,
    config_to_routing_settings,
)
from conduits.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from conduits.application.config.schema import (
    DEFAULT_WALL_HEIGHT,
    SUPPORTED_VERSIONS,
    FloorPlanConfiguration,
    KindConfig,
    OpeningConfig,
    PointConfig,
    RoutingConfig,
    WallConfig,
)
from conduits.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "ConfigError",
    "DEFAULT_WALL_HEIGHT",
    "FloorPlanConfiguration",
    "KindConfig",
    "OpeningConfig",
    "PointConfig",
    "RoutingConfig",
    "SUPPORTED_VERSIONS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "WallConfig",
    "config_to_floor_plan",
    "config_to_routing_settings",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]

"""Domain services for wall-face utility routing.

This package provides:
- Connection grouping into per-kind minimum spanning trees
- Hanan grid construction
- Obstacle-aware orthogonal routing with fallback connectors
- Floor-plan to wall-face projection (obstacles, docked points)
- The wall-face layout service tying these together
"""

from .grouping import ConnectionGrouper
from .hanan_grid import HananGrid, HananGridBuilder
from .layout import UtilityLayoutService
from .router import ObstacleAwareRouter, fallback_path, is_edge_blocked
from .wall_face import DOCK_TOLERANCE, WallFaceService

__all__ = [
    "DOCK_TOLERANCE",
    "ConnectionGrouper",
    "HananGrid",
    "HananGridBuilder",
    "ObstacleAwareRouter",
    "UtilityLayoutService",
    "WallFaceService",
    "fallback_path",
    "is_edge_blocked",
]

"""Application layer - use cases and DTOs."""

from .commands import RouteWallFaceCommand
from .dtos import WallFaceRoutingOutput

__all__ = [
    "RouteWallFaceCommand",
    "WallFaceRoutingOutput",
]

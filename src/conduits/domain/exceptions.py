"""Routing failures handled inside the routing engine.

None of these escape ObstacleAwareRouter.route(); the router converts them
into a two-segment fallback connector.
"""

from __future__ import annotations

from .value_objects import Waypoint


class RoutingError(Exception):
    """Base class for recoverable routing failures."""

    pass


class UnrepresentableEndpointError(RoutingError):
    """Raised when an endpoint is not a vertex of the bounds-filtered grid."""

    def __init__(self, endpoint: Waypoint) -> None:
        self.endpoint = endpoint
        super().__init__(f"Endpoint {endpoint} lies outside the wall face")


class NoPathFoundError(RoutingError):
    """Raised when the search exhausts its open set without reaching the goal."""

    def __init__(self, start: Waypoint, end: Waypoint, expanded: int) -> None:
        self.start = start
        self.end = end
        self.expanded = expanded
        super().__init__(
            f"No obstacle-free path from {start} to {end} "
            f"({expanded} nodes expanded)"
        )

"""Unit tests for UtilityLayoutService."""

from conduits.domain.services import UtilityLayoutService
from conduits.domain.value_objects import (
    FallbackReason,
    Obstacle,
    RoutingSettings,
    is_orthogonal,
)


class TestRouteFace:
    """Tests for routing every kind on a face."""

    def test_one_routing_per_kind_in_first_seen_order(self, bounds, make_point) -> None:
        points = [
            make_point(10, 10, kind="water"),
            make_point(20, 20, kind="power"),
            make_point(30, 10, kind="water"),
        ]
        result = UtilityLayoutService().route_face(points, [], bounds)

        assert [r.kind for r in result] == ["water", "power"]
        assert len(result[0].connections) == 1
        assert result[1].connections == ()
        assert result[1].points == (points[1],)

    def test_connections_follow_spanning_tree(self, bounds, make_point) -> None:
        a = make_point(0, 0)
        b = make_point(100, 0)
        c = make_point(0, 150)
        (routing,) = UtilityLayoutService().route_face([a, b, c], [], bounds)

        assert [e.point_ids for e in routing.edges] == [
            frozenset({a.point_id, b.point_id}),
            frozenset({a.point_id, c.point_id}),
        ]
        assert routing.total_length == 250

    def test_routes_avoid_door(self, bounds, door, make_point) -> None:
        points = [make_point(50, 50), make_point(350, 50)]
        (routing,) = UtilityLayoutService().route_face(points, [door], bounds)

        (connection,) = routing.connections
        assert connection.waypoints == ((50, 50), (50, 0), (350, 0), (350, 50))
        assert routing.fallback_count == 0

    def test_point_outside_face_uses_fallback(self, bounds, make_point) -> None:
        points = [make_point(50, -5), make_point(300, 100)]
        (routing,) = UtilityLayoutService().route_face(points, [], bounds)

        (connection,) = routing.connections
        assert connection.fallback_reason == FallbackReason.UNREPRESENTABLE_ENDPOINT
        assert routing.fallback_count == 1

    def test_docked_points_are_routed_like_owned_points(self, bounds, make_point) -> None:
        owned = make_point(20, 120, kind=1)
        docked = make_point(100, 120, kind=1, docked=True)
        (routing,) = UtilityLayoutService().route_face([owned, docked], [], bounds)

        (connection,) = routing.connections
        assert connection.edge.end is docked
        assert connection.length == 80

    def test_empty_face(self, bounds) -> None:
        assert UtilityLayoutService().route_face([], [], bounds) == []

    def test_accepts_generators(self, bounds, door, make_point) -> None:
        points = [make_point(50, 50), make_point(350, 50)]
        result = UtilityLayoutService().route_face(
            (p for p in points), (o for o in [door]), bounds
        )

        assert result[0].connections[0].length == 400

    def test_settings_reach_the_router(self, bounds, make_point) -> None:
        points = [make_point(0, 0), make_point(100, 100)]
        service = UtilityLayoutService(settings=RoutingSettings(turn_penalty=20.0))
        (routing,) = service.route_face(points, [], bounds)

        assert routing.connections[0].cost == 220

    def test_all_routes_orthogonal_with_several_openings(self, bounds, make_point) -> None:
        obstacles = [
            Obstacle(x=60.0, z=0.0, width=80.0, height=210.0),
            Obstacle(x=220.0, z=90.0, width=100.0, height=120.0),
        ]
        points = [
            make_point(20, 30),
            make_point(180, 150),
            make_point(380, 30),
            make_point(270, 230),
        ]
        (routing,) = UtilityLayoutService().route_face(points, obstacles, bounds)

        assert len(routing.connections) == 3
        for connection in routing.connections:
            assert not connection.is_fallback
            assert is_orthogonal(connection.waypoints)
            assert connection.waypoints[0] == connection.edge.start.position
            assert connection.waypoints[-1] == connection.edge.end.position

    def test_same_input_same_output(self, bounds, door, make_point) -> None:
        points = [make_point(20, 30), make_point(380, 100), make_point(200, 240)]
        service = UtilityLayoutService()

        assert service.route_face(points, [door], bounds) == service.route_face(
            points, [door], bounds
        )

from mcp_server_planner.mcp_tools_planner.core.schemas import Coordinates, NamedWaypoint
from mcp_server_planner.mcp_tools_planner.services.optimizer import optimize_waypoints

ORIGIN = Coordinates(lat=0, lon=0)


def _wp(name, lat, lon):
    return NamedWaypoint(name=name, location=Coordinates(lat=lat, lon=lon))


def test_empty_and_single_inputs_are_returned_unchanged():
    assert optimize_waypoints(ORIGIN, []) == []

    only = [_wp("Only", 10, 10)]
    result = optimize_waypoints(ORIGIN, only)
    assert result == only
    assert result is not only


def test_visits_nearest_first():
    far = _wp("Far", 0, 3)
    near = _wp("Near", 0, 1)
    mid = _wp("Mid", 0, 2)

    assert optimize_waypoints(ORIGIN, [far, near, mid]) == [near, mid, far]


def test_greedy_follows_current_position_not_start():
    a = _wp("A", 0, 1)
    b = _wp("B", 0, -1.5)
    c = _wp("C", 0, 2)

    # from A, C (1 degree away) is closer than B (2.5 degrees away)
    assert [w.name for w in optimize_waypoints(ORIGIN, [b, c, a])] == ["A", "C", "B"]


def test_ties_go_to_the_first_listed_waypoint():
    north = _wp("North", 1, 0)
    east = _wp("East", 0, 1)

    assert optimize_waypoints(ORIGIN, [north, east])[0] == north
    assert optimize_waypoints(ORIGIN, [east, north])[0] == east


def test_output_is_a_permutation_of_the_input():
    waypoints = [
        _wp("Colosseum", 41.8902, 12.4922),
        _wp("Trevi Fountain", 41.9009, 12.4833),
        _wp("Pantheon", 41.8986, 12.4769),
        _wp("Vatican Museums", 41.9065, 12.4536),
        _wp("Trastevere", 41.8897, 12.4694),
        _wp("Pantheon", 41.8986, 12.4769),
    ]
    result = optimize_waypoints(Coordinates(lat=41.9028, lon=12.4964), waypoints)

    assert len(result) == len(waypoints)
    assert sorted(result, key=repr) == sorted(waypoints, key=repr)


def test_input_is_not_mutated():
    waypoints = [_wp("Far", 0, 3), _wp("Near", 0, 1)]
    snapshot = list(waypoints)
    optimize_waypoints(ORIGIN, waypoints)
    assert waypoints == snapshot

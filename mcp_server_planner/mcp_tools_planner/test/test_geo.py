import pytest

from mcp_server_planner.mcp_tools_planner.core.schemas import Coordinates
from mcp_server_planner.mcp_tools_planner.utils.geo import (
    distance_km,
    haversine_km,
    interpolate_great_circle,
    travel_time_minutes,
)

BERLIN = Coordinates(lat=52.520008, lon=13.404954)
ROME = Coordinates(lat=41.8933203, lon=12.4829321)


def test_identical_points_have_zero_distance():
    assert haversine_km(48.8566, 2.3522, 48.8566, 2.3522) == 0.0
    assert distance_km(BERLIN, BERLIN) == 0.0


def test_distance_is_symmetric():
    assert distance_km(BERLIN, ROME) == pytest.approx(distance_km(ROME, BERLIN))
    assert haversine_km(-33.9, 151.2, 40.7, -74.0) == pytest.approx(haversine_km(40.7, -74.0, -33.9, 151.2))


def test_one_degree_of_longitude_on_the_equator():
    assert haversine_km(0, 0, 0, 1) == pytest.approx(111.19493, abs=1e-4)


def test_berlin_rome_ballpark():
    assert distance_km(BERLIN, ROME) == pytest.approx(1184, abs=5)


def test_interpolation_endpoints():
    assert interpolate_great_circle(BERLIN, ROME, 0.0) == BERLIN
    assert interpolate_great_circle(BERLIN, ROME, 1.0) == ROME


def test_interpolation_midpoint_on_equator():
    mid = interpolate_great_circle(Coordinates(lat=0, lon=0), Coordinates(lat=0, lon=2), 0.5)
    assert mid.lat == pytest.approx(0.0, abs=1e-9)
    assert mid.lon == pytest.approx(1.0, abs=1e-9)


def test_interpolation_stays_on_the_arc():
    point = interpolate_great_circle(BERLIN, ROME, 0.25)
    total = distance_km(BERLIN, ROME)
    assert distance_km(BERLIN, point) == pytest.approx(total * 0.25, rel=1e-6)
    assert distance_km(point, ROME) == pytest.approx(total * 0.75, rel=1e-6)


def test_interpolation_of_coincident_points():
    assert interpolate_great_circle(ROME, ROME, 0.4) == ROME


def test_travel_time_minutes():
    assert travel_time_minutes(40.0, 40.0) == pytest.approx(60.0)
    assert travel_time_minutes(2.5, 5.0) == pytest.approx(30.0)


def test_interpolation_between_antipodes_blends_linearly():
    mid = interpolate_great_circle(Coordinates(lat=0, lon=0), Coordinates(lat=0, lon=180), 0.5)
    assert mid.lat == pytest.approx(0.0)
    assert mid.lon == pytest.approx(90.0)

import pytest

from itinerary.models.domain import Point, TravelMode
from itinerary.services.geospatial import haversine_km
from itinerary.services.routing.exceptions import InvalidModeError
from itinerary.services.routing.models import Route
from itinerary.services.routing.path import sample_path
from itinerary.services.routing.synthesizer import build_route


def _place(pid: str, lat: float, lon: float) -> Point:
    return Point(id=pid, name=f"Place {pid}", latitude=lat, longitude=lon)


ORIGIN = Point(id=None, name="Your Location", latitude=37.0, longitude=-122.0)
STOP_A = _place("A", 37.01, -122.0)
STOP_B = _place("B", 37.0, -122.02)


def test_origin_only_returns_empty_route():
    route = build_route([ORIGIN], TravelMode.WALKING)

    assert route == Route()
    assert route.steps == ()
    assert route.distance_km == 0
    assert route.duration_min == 0
    assert route.is_empty


def test_no_points_returns_empty_route():
    assert build_route([], "driving").is_empty


def test_walking_scenario():
    route = build_route([ORIGIN, STOP_A, STOP_B], TravelMode.WALKING)

    leg1_km = haversine_km(37.0, -122.0, 37.01, -122.0)
    leg2_km = haversine_km(37.01, -122.0, 37.0, -122.02)
    first, second = route.steps

    assert first.distance_m == round(leg1_km * 1000)
    assert first.duration_min == round(leg1_km / 5 * 60)
    assert second.distance_m == round(leg2_km * 1000)
    assert second.duration_min == round(leg2_km / 5 * 60)
    assert first.distance_m == 1112
    assert first.duration_min == 13
    assert abs(route.duration_min - (first.duration_min + second.duration_min)) <= 2
    assert route.distance_km == pytest.approx(leg1_km + leg2_km, abs=0.05)
    assert route.coordinates[0] == ORIGIN.coordinate
    assert route.coordinates[-1] == STOP_B.coordinate


def test_step_records():
    route = build_route([ORIGIN, STOP_A, STOP_B], "driving")
    first, second = route.steps

    assert first.instruction == "Head to Place A"
    assert first.from_place == "Your Location"
    assert first.to_place == "Place A"
    assert first.start_location == (37.0, -122.0)
    assert first.end_location == (37.01, -122.0)
    assert second.from_place == "Place A"
    assert second.to_place == "Place B"
    assert second.start_location == first.end_location


def test_step_count_and_distance_invariants():
    stops = [ORIGIN, STOP_A, STOP_B, _place("C", 37.02, -122.03), _place("D", 36.99, -121.98)]

    route = build_route(stops, TravelMode.CYCLING)

    assert len(route.steps) == len(stops) - 1
    assert route.distance_km == pytest.approx(sum(step.distance_m for step in route.steps) / 1000, abs=0.05)
    assert all(step.distance_m >= 0 and step.duration_min >= 0 for step in route.steps)


def test_coordinates_have_no_duplicate_at_leg_boundaries():
    route = build_route([ORIGIN, STOP_A, STOP_B], TravelMode.WALKING)

    first_leg = sample_path(ORIGIN.coordinate, STOP_A.coordinate)
    second_leg = sample_path(STOP_A.coordinate, STOP_B.coordinate)

    assert list(route.coordinates) == first_leg + second_leg[1:]
    assert route.coordinates.count(STOP_A.coordinate) == 1


def test_walking_is_slower_than_driving_over_same_distance():
    points = [ORIGIN, STOP_A, STOP_B]

    driving = build_route(points, TravelMode.DRIVING)
    walking = build_route(points, TravelMode.WALKING)

    assert walking.duration_min > driving.duration_min
    assert walking.distance_km == driving.distance_km
    assert walking.coordinates == driving.coordinates


def test_invalid_mode_fails_before_routing():
    with pytest.raises(InvalidModeError):
        build_route([ORIGIN, STOP_A], "hovercraft")
    with pytest.raises(InvalidModeError):
        build_route([ORIGIN], "hovercraft")


def test_route_is_immutable():
    route = build_route([ORIGIN, STOP_A], TravelMode.DRIVING)

    with pytest.raises(AttributeError):
        route.distance_km = 99.0

import pytest

from itinerary.models.domain import Point, TravelMode
from itinerary.services.export.geojson import linestring_to_wkt, route_to_geojson
from itinerary.services.outputs.formatter import (
    estimate_arrival_time,
    format_distance,
    format_duration,
    step_display_instruction,
)
from itinerary.services.outputs.routing_formatter import route_steps_to_csv, route_to_json
from itinerary.services.routing.models import Route
from itinerary.services.routing.synthesizer import build_route

ORIGIN = Point(id=None, name="Your Location", latitude=21.5, longitude=39.2)
MUSEUM = Point(id="M1", name="Museum", latitude=21.51, longitude=39.21, category="museum")


@pytest.mark.parametrize(
    "meters, expected",
    [(0, "0 m"), (999, "999 m"), (412.6, "413 m"), (1000, "1.0 km"), (3250, "3.2 km"), (15500, "15.5 km")],
)
def test_format_distance(meters, expected):
    assert format_distance(meters) == expected


@pytest.mark.parametrize(
    "minutes, expected",
    [(0, "0 min"), (45, "45 min"), (59, "59 min"), (60, "1 h 0 min"), (135, "2 h 15 min")],
)
def test_format_duration(minutes, expected):
    assert format_duration(minutes) == expected


def test_estimate_arrival_time():
    assert estimate_arrival_time("09:00", 38) == "09:38"
    assert estimate_arrival_time("09:45", 135) == "12:00"
    assert estimate_arrival_time("23:30", 45) == "00:15"


def test_step_display_instruction():
    route = build_route([ORIGIN, MUSEUM, ORIGIN], TravelMode.WALKING)
    first, second = route.steps

    assert step_display_instruction(first) == "Start from Your Location"
    assert step_display_instruction(second) == "Head to Your Location"


def test_route_to_json():
    route = build_route([ORIGIN, MUSEUM], TravelMode.DRIVING)

    data = route_to_json(route)

    assert data["distance"] == route.distance_km
    assert data["duration"] == route.duration_min
    assert data["steps"][0]["to_place"] == "Museum"
    assert data["steps"][0]["start_location"] == [21.5, 39.2]
    assert data["coordinates"][0] == [21.5, 39.2]
    assert len(data["coordinates"]) == len(route.coordinates)


def test_route_steps_to_csv_for_empty_route():
    assert route_steps_to_csv(Route()).strip().split(",")[0] == "sequence"
    assert len(route_steps_to_csv(Route()).strip().splitlines()) == 1


def test_linestring_to_wkt():
    assert linestring_to_wkt([(21.5, 39.2), (21.51, 39.21)]) == "LINESTRING(39.2 21.5,39.21 21.51)"
    with pytest.raises(ValueError):
        linestring_to_wkt([(21.5, 39.2)])


def test_route_to_geojson():
    route = build_route([ORIGIN, MUSEUM], TravelMode.CYCLING)

    collection = route_to_geojson(route, [ORIGIN, MUSEUM], "cycling")

    assert collection["type"] == "FeatureCollection"
    line, origin, museum = collection["features"]
    assert line["geometry"]["type"] == "LineString"
    assert len(line["geometry"]["coordinates"]) == len(route.coordinates)
    assert line["properties"]["mode"] == "cycling"
    assert line["properties"]["wkt"].startswith("LINESTRING(39.2 21.5,")
    assert origin["geometry"] == {"type": "Point", "coordinates": [39.2, 21.5]}
    assert origin["properties"]["kind"] == "origin"
    assert museum["properties"] == {
        "kind": "stop",
        "sequence": 1,
        "id": "M1",
        "name": "Museum",
        "category": "museum",
    }


def test_route_to_geojson_skips_line_for_empty_route():
    collection = route_to_geojson(Route(), [ORIGIN], "walking")

    assert [feature["properties"]["kind"] for feature in collection["features"]] == ["origin"]

import pytest

from itinerary.config import settings
from itinerary.models.domain import TravelMode
from itinerary.services.routing.duration import estimate_duration_minutes, parse_mode, speed_kmh
from itinerary.services.routing.exceptions import InvalidModeError


def test_speed_table_defaults():
    assert speed_kmh(TravelMode.DRIVING) == 40
    assert speed_kmh(TravelMode.CYCLING) == 15
    assert speed_kmh(TravelMode.WALKING) == 5


def test_estimate_duration_minutes():
    assert estimate_duration_minutes(10.0, TravelMode.DRIVING) == pytest.approx(15.0)
    assert estimate_duration_minutes(3.0, "cycling") == pytest.approx(12.0)
    assert estimate_duration_minutes(1.0, "walking") == pytest.approx(12.0)
    assert estimate_duration_minutes(0.0, "walking") == 0


@pytest.mark.parametrize(
    "token, expected",
    [
        ("driving", TravelMode.DRIVING),
        ("Cycling", TravelMode.CYCLING),
        (" walking ", TravelMode.WALKING),
        ("driving-car", TravelMode.DRIVING),
        ("cycling-regular", TravelMode.CYCLING),
        ("foot-walking", TravelMode.WALKING),
    ],
)
def test_parse_mode_accepts_tokens_and_aliases(token, expected):
    assert parse_mode(token) is expected


@pytest.mark.parametrize("token", ["flying", "", "car", None, 3])
def test_unknown_mode_is_rejected(token):
    with pytest.raises(InvalidModeError):
        parse_mode(token)
    with pytest.raises(InvalidModeError):
        estimate_duration_minutes(1.0, token)


def test_invalid_mode_is_a_value_error():
    with pytest.raises(ValueError, match="Unknown travel mode 'teleport'"):
        parse_mode("teleport")


def test_speeds_follow_settings(monkeypatch):
    monkeypatch.setattr(settings, "walking_speed_kmh", 6.0)
    assert estimate_duration_minutes(3.0, TravelMode.WALKING) == pytest.approx(30.0)

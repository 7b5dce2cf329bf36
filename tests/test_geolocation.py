# tests/test_geolocation.py

import pytest

from services import geolocation as geo


def test_format_position():
    assert geo.format_position(28.613912, 77.20902) == "28.6139, 77.2090"


def test_position_text_from_browser_answer():
    answer = {"coords": {"latitude": 12.97194, "longitude": 77.59369, "accuracy": 20}, "timestamp": 1}
    assert geo.position_text(answer) == "12.9719, 77.5937"


@pytest.mark.parametrize(
    "answer",
    [
        {"error": {"code": 1, "message": "User denied Geolocation"}},
        {"coords": {}},
        {"coords": {"latitude": None, "longitude": 2}},
        {},
        "denied",
    ],
)
def test_position_text_failure(answer):
    with pytest.raises(geo.GeolocationError):
        geo.position_text(answer)


def test_request_position_asks_the_browser_once_per_attempt(monkeypatch):
    keys = []

    def fake_get_geolocation(component_key=None):
        keys.append(component_key)
        return None

    monkeypatch.setattr(geo, "get_geolocation", fake_get_geolocation)
    assert geo.request_position(1) is None
    geo.request_position(2)
    assert keys == ["geolocation_1", "geolocation_2"]

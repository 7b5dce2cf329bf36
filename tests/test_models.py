# tests/test_models.py

import pytest

from core.models import Coordinates, DestinationData, GuideRequest, Review, known


def test_camel_case_round_trip(guide_payload):
    guide = DestinationData.model_validate(guide_payload)
    dumped = guide.model_dump(by_alias=True)
    assert dumped["destinationName"] == "Jaipur"
    assert dumped["originCoordinates"] == {"lat": 28.6139, "lng": 77.209}
    assert dumped["culinaryDelights"][0]["bestPlaceToTry"] == "Rawat Mishthan Bhandar"


def test_nulls_fall_back_to_defaults():
    guide = DestinationData.model_validate(
        {"destinationName": "X", "tagline": None, "routes": None, "coordinates": None}
    )
    assert guide.tagline == ""
    assert guide.routes == []
    assert guide.coordinates == Coordinates(lat=0, lng=0)


def test_unknown_keys_are_ignored():
    guide = DestinationData.model_validate({"destinationName": "X", "weather": "sunny"})
    assert not hasattr(guide, "weather")


@pytest.mark.parametrize(
    "lat, lng, expected",
    [
        (26.9, 75.8, True),
        (0, 0, False),
        (0, 12.5, True),
        (91, 10, False),
        (10, -181, False),
    ],
)
def test_coordinates_is_known(lat, lng, expected):
    assert Coordinates(lat=lat, lng=lng).is_known is expected


def test_known_handles_missing():
    assert known(None) is False


def test_item_coordinates_are_optional(guide_payload):
    del guide_payload["topAttractions"][0]["coordinates"]
    guide = DestinationData.model_validate(guide_payload)
    assert guide.top_attractions[0].coordinates is None


def test_guide_request_validation():
    req = GuideRequest(destination="  Jaipur ", origin="Delhi", language="")
    assert req.destination == "Jaipur"
    assert req.language == "English"
    with pytest.raises(ValueError):
        GuideRequest(destination="Jaipur", origin="")


def test_review_coercion():
    review = Review.model_validate({"id": 3, "rating": "4.5", "likes": 2.0})
    assert review.id == "3"
    assert review.rating == 4.5
    assert review.likes == 2

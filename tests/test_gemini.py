# tests/test_gemini.py

import datetime
import json

import pytest

from ai import gemini
from core.errors import GuideError, GuideErrorKind
from core.models import DEFAULT_SUGGESTIONS, DestinationData


def test_generate_travel_guide(fake_model, guide_payload):
    model = fake_model(payload=guide_payload)
    guide = gemini.generate_travel_guide(model, "Jaipur", "Delhi", "Hindi")

    assert isinstance(guide, DestinationData)
    assert guide.destination_name == "Jaipur"
    assert guide.routes[1].cost_estimate == "₹4,100 ($50)"
    assert guide.hotels[0].amenities == ["Free WiFi", "Cafe"]
    assert guide.culinary_delights[0].best_place_to_try == "Rawat Mishthan Bhandar"

    prompt = model.prompts[0]
    assert '"Delhi" to "Jaipur"' in prompt
    assert '"Hindi" language' in prompt
    assert model.configs[0].response_mime_type == "application/json"
    assert model.configs[0].response_schema is gemini.GUIDE_SCHEMA


def test_guide_with_missing_sections_gets_defaults(fake_model):
    model = fake_model(payload={"destinationName": "Atlantis", "hotels": None})
    guide = gemini.generate_travel_guide(model, "Atlantis", "Athens")

    assert guide.coordinates is not None
    assert guide.origin_coordinates is not None
    assert not guide.coordinates.is_known
    assert guide.hotels == []
    assert guide.routes == []
    assert guide.travel_tips == []


def test_fenced_json_is_accepted(fake_model, guide_payload):
    model = fake_model(text="```json\n" + json.dumps(guide_payload) + "\n```")
    assert gemini.generate_travel_guide(model, "Jaipur", "Delhi").destination_name == "Jaipur"


@pytest.mark.parametrize("text", ["", "   "])
def test_empty_response_is_no_content(fake_model, text):
    with pytest.raises(GuideError) as info:
        gemini.generate_travel_guide(fake_model(text=text), "Jaipur", "Delhi")
    assert info.value.kind is GuideErrorKind.NO_CONTENT_GENERATED


def test_guide_without_a_name_is_no_content(fake_model):
    with pytest.raises(GuideError) as info:
        gemini.generate_travel_guide(fake_model(payload={"destinationName": ""}), "Jaipur", "Delhi")
    assert info.value.kind is GuideErrorKind.NO_CONTENT_GENERATED


def test_network_failure_is_classified(fake_model):
    model = fake_model(error=ConnectionError("unreachable"))
    with pytest.raises(GuideError) as info:
        gemini.generate_travel_guide(model, "Jaipur", "Delhi")
    assert info.value.kind is GuideErrorKind.NETWORK_ERROR
    assert info.value.message == "Network connection failed. Please check your internet."
    assert len(model.prompts) == 1  # no retry


def test_malformed_json_is_generic(fake_model):
    with pytest.raises(GuideError) as info:
        gemini.generate_travel_guide(fake_model(text="{oops"), "Jaipur", "Delhi")
    assert info.value.kind is GuideErrorKind.GENERIC_ERROR


@pytest.mark.parametrize("destination, origin", [("", "Delhi"), ("Jaipur", "  ")])
def test_blank_input_is_rejected_before_the_call(fake_model, destination, origin):
    model = fake_model(payload={})
    with pytest.raises(ValueError):
        gemini.generate_travel_guide(model, destination, origin)
    assert model.prompts == []


def test_get_model_without_key():
    with pytest.raises(GuideError) as info:
        gemini.get_model("")
    assert info.value.kind is GuideErrorKind.API_KEY_INVALID


def test_trending_destinations(fake_model):
    payload = [{"name": "Goa, India", "price": "₹18,000", "rating": 4.6, "reason": "Off-season fares"}]
    model = fake_model(payload=payload)
    trending = gemini.get_trending_destinations(model, today=datetime.date(2026, 10, 19))

    assert trending[0].name == "Goa, India"
    assert trending[0].rating == "4.6"
    assert "Mon Oct 19 2026" in model.prompts[0]


def test_trending_failure_returns_empty(fake_model):
    assert gemini.get_trending_destinations(fake_model(error=RuntimeError("quota"))) == []
    assert gemini.get_trending_destinations(fake_model(payload={"not": "a list"})) == []


def test_trending_or_default_never_empty(fake_model):
    assert gemini.trending_or_default(fake_model(error=RuntimeError("quota"))) == DEFAULT_SUGGESTIONS
    assert gemini.trending_or_default(None) == DEFAULT_SUGGESTIONS
    assert len(gemini.trending_or_default(None)) == 4


def test_hotel_reviews(fake_model):
    payload = [{"id": 7, "author": "Priya S.", "rating": 4.5, "date": "2 days ago",
                "comment": "Lovely courtyard.", "likes": 12.0}]
    model = fake_model(payload=payload)
    reviews = gemini.get_hotel_reviews(model, "Rambagh Palace", "Jaipur")

    assert reviews[0].id == "7"
    assert reviews[0].likes == 12
    assert '"Rambagh Palace" in "Jaipur"' in model.prompts[0]


def test_hotel_reviews_failure_returns_empty(fake_model):
    assert gemini.get_hotel_reviews(fake_model(error=ConnectionError()), "X", "Y") == []

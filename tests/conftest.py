# tests/conftest.py

import json

import pytest


class FakeResponse:
    def __init__(self, text):
        self.text = text


class FakeModel:
    """Stands in for genai.GenerativeModel: returns a canned body or raises."""

    def __init__(self, payload=None, error=None, text=None):
        self.payload = payload
        self.error = error
        self.text = text
        self.prompts = []
        self.configs = []

    def generate_content(self, prompt, generation_config=None):
        self.prompts.append(prompt)
        self.configs.append(generation_config)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return FakeResponse(self.text)
        return FakeResponse(json.dumps(self.payload, ensure_ascii=False))


GUIDE_PAYLOAD = {
    "destinationName": "Jaipur",
    "tagline": "The Pink City",
    "description": "Forts, bazaars and palaces.",
    "history": "Founded in 1727 by Sawai Jai Singh II.",
    "bestTimeToVisit": "October to March",
    "currency": "INR",
    "coordinates": {"lat": 26.9124, "lng": 75.7873},
    "originCoordinates": {"lat": 28.6139, "lng": 77.2090},
    "routes": [
        {"mode": "Bus", "category": "Budget", "duration": "5h", "costEstimate": "₹600", "details": "Volvo AC"},
        {"mode": "Flight", "category": "Premium", "duration": "1h", "costEstimate": "₹4,100 ($50)", "details": "Direct"},
    ],
    "hotels": [
        {"name": "Zostel", "category": "Budget", "rating": "4.3/5", "priceEstimate": "₹900 / night",
         "description": "Hostel", "amenities": ["Free WiFi", "Cafe"], "coordinates": {"lat": 26.92, "lng": 75.82}},
        {"name": "Rambagh Palace", "category": "Luxury", "rating": "4.9/5", "priceEstimate": "₹45,000 ($540)",
         "description": "Palace hotel", "amenities": ["Pool", "Spa"], "coordinates": {"lat": 26.89, "lng": 75.80}},
    ],
    "topAttractions": [
        {"name": "Amber Fort", "description": "Hilltop fort", "type": "Fort", "bestTime": "Morning",
         "coordinates": {"lat": 26.9855, "lng": 75.8513}},
    ],
    "photographySpots": [
        {"name": "Patrika Gate", "description": "Colourful gate", "bestAngle": "Centre arch",
         "coordinates": {"lat": 26.8420, "lng": 75.8040}},
    ],
    "culinaryDelights": [
        {"name": "Pyaaz Kachori", "description": "Onion pastry", "bestPlaceToTry": "Rawat Mishthan Bhandar",
         "priceRange": "₹40-80", "category": "Breakfast", "coordinates": {"lat": 26.9196, "lng": 75.7880}},
        {"name": "Dal Baati", "description": "Baked wheat balls", "bestPlaceToTry": "Chokhi Dhani",
         "priceRange": "₹900", "category": "Dinner", "coordinates": {"lat": 0, "lng": 0}},
    ],
    "travelTips": ["Buy the composite ticket."],
}


@pytest.fixture
def guide_payload():
    return json.loads(json.dumps(GUIDE_PAYLOAD))


@pytest.fixture
def fake_model():
    return FakeModel

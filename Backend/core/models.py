# core/models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

ROUTE_CATEGORIES = ("Budget", "Premium")
HOTEL_CATEGORIES = ("Luxury", "Budget")
MEAL_CATEGORIES = ("Breakfast", "Lunch", "Dinner")


@dataclass
class GuideRequest:
    destination: str
    origin: str
    language: str = "English"

    def __post_init__(self):
        self.destination = (self.destination or "").strip()
        self.origin = (self.origin or "").strip()
        if not self.destination or not self.origin:
            raise ValueError("Both destination and origin are required.")
        self.language = (self.language or "").strip() or "English"


# ──────────────────────────────────────────────────────────────────────────────
# Model response contract (keys are camelCase on the wire)
# ──────────────────────────────────────────────────────────────────────────────
class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value, info):
        # null on the wire means "use the default"
        if value is None:
            field = cls.model_fields[info.field_name]
            if field.default_factory is not None:
                return field.default_factory()
            return field.default
        return value


class Coordinates(_Record):
    lat: float = 0.0
    lng: float = 0.0

    @property
    def is_known(self) -> bool:
        """(0, 0) means "unknown"; out-of-range pairs are not plottable either."""
        if self.lat == 0 and self.lng == 0:
            return False
        return -90 <= self.lat <= 90 and -180 <= self.lng <= 180


def known(coords: Optional[Coordinates]) -> bool:
    return coords is not None and coords.is_known


class TravelRoute(_Record):
    mode: str = ""
    category: str = ""
    duration: str = ""
    cost_estimate: str = ""
    details: str = ""


class Hotel(_Record):
    name: str = ""
    category: str = ""
    rating: str = ""
    price_estimate: str = ""
    description: str = ""
    amenities: List[str] = Field(default_factory=list)
    coordinates: Optional[Coordinates] = None


class Attraction(_Record):
    name: str = ""
    description: str = ""
    type: str = ""
    best_time: str = ""
    coordinates: Optional[Coordinates] = None


class PhotoSpot(_Record):
    name: str = ""
    description: str = ""
    best_angle: str = ""
    coordinates: Optional[Coordinates] = None


class Dish(_Record):
    name: str = ""
    description: str = ""
    best_place_to_try: str = ""
    price_range: str = ""
    category: str = ""
    coordinates: Optional[Coordinates] = None


class DestinationData(_Record):
    destination_name: str = ""
    tagline: str = ""
    description: str = ""
    history: str = ""
    best_time_to_visit: str = ""
    currency: str = ""
    coordinates: Coordinates = Field(default_factory=Coordinates)
    origin_coordinates: Coordinates = Field(default_factory=Coordinates)
    routes: List[TravelRoute] = Field(default_factory=list)
    hotels: List[Hotel] = Field(default_factory=list)
    top_attractions: List[Attraction] = Field(default_factory=list)
    photography_spots: List[PhotoSpot] = Field(default_factory=list)
    culinary_delights: List[Dish] = Field(default_factory=list)
    travel_tips: List[str] = Field(default_factory=list)


class SuggestedDestination(_Record):
    name: str = ""
    price: str = ""
    rating: str = ""
    reason: str = ""


class Review(_Record):
    id: str = ""
    author: str = ""
    rating: float = 0.0
    date: str = ""
    comment: str = ""
    likes: int = 0

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value):
        return "" if value is None else str(value)

    @field_validator("likes", mode="before")
    @classmethod
    def _whole_likes(cls, value):
        if isinstance(value, float):
            return int(value)
        return value


# Used when the trending call fails or comes back empty
DEFAULT_SUGGESTIONS = [
    SuggestedDestination(name="Bali, Indonesia", price="₹65,000", rating="4.8", reason="Season drop"),
    SuggestedDestination(name="Istanbul, Turkey", price="₹78,000", rating="4.7", reason="Flight deals"),
    SuggestedDestination(name="Hanoi, Vietnam", price="₹45,000", rating="4.6", reason="Budget friendly"),
    SuggestedDestination(name="Lisbon, Portugal", price="₹90,000", rating="4.9", reason="Trending now"),
]

# core/view_state.py

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from typing import Optional

from core.errors import GuideError, GuideErrorKind, user_message
from core.models import DestinationData


class Tab(str, enum.Enum):
    OVERVIEW = "overview"
    JOURNEY = "journey"
    HOTELS = "hotels"
    MAP = "map"
    ATTRACTIONS = "attractions"
    FOOD = "food"


TAB_LABELS = {
    Tab.OVERVIEW: "📜 Overview",
    Tab.JOURNEY: "🚆 Journey",
    Tab.HOTELS: "🛏️ Hotels",
    Tab.MAP: "🗺️ Map",
    Tab.ATTRACTIONS: "📷 Attractions",
    Tab.FOOD: "🍽️ Food",
}

LANGUAGES = [
    ("en", "English"),
    ("es", "Spanish"),
    ("fr", "French"),
    ("de", "German"),
    ("hi", "Hindi"),
    ("ja", "Japanese"),
]

FONTS = {
    "standard": ("Inter, sans-serif", "Georgia, serif"),
    "modern": ("'Poppins', sans-serif", "'Playfair Display', serif"),
    "classic": ("'Lato', sans-serif", "'Merriweather', serif"),
    "editorial": ("'Source Sans Pro', sans-serif", "'Lora', serif"),
}


def language_name(code: str) -> str:
    return dict(LANGUAGES).get(code, "English")


def _new_seed() -> int:
    return time.time_ns() // 1_000_000


@dataclass
class ViewState:
    guide: Optional[DestinationData] = None
    origin: str = ""
    active_tab: Tab = Tab.OVERVIEW
    loading: bool = False
    error: Optional[str] = None
    language: str = "en"
    font: str = "standard"
    image_seed: int = field(default_factory=_new_seed)

    def begin_search(self, origin: str) -> None:
        self.loading = True
        self.error = None
        self.guide = None
        self.origin = origin
        self.active_tab = Tab.OVERVIEW
        self.image_seed = _new_seed()

    def resolve(self, guide: DestinationData) -> None:
        self.guide = guide
        self.loading = False

    def fail(self, error: BaseException) -> None:
        kind = error.kind if isinstance(error, GuideError) else GuideErrorKind.GENERIC_ERROR
        self.error = user_message(kind)
        self.loading = False


def can_submit(destination: str, origin: str, locating_label: str) -> bool:
    """A search needs both places, and not while geolocation is still pending."""
    destination = (destination or "").strip()
    origin = (origin or "").strip()
    return bool(destination and origin and origin != locating_label)

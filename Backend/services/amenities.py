# services/amenities.py

import enum


class AmenityIcon(enum.Enum):
    WIFI = "📶"
    POOL = "🏊"
    GYM = "🏋️"
    DINING = "☕"
    PARKING = "🅿️"
    TV = "📺"
    DEFAULT = "⭐"

    @property
    def glyph(self) -> str:
        return self.value


# Order matters: "Breakfast & Parking" is DINING
_KEYWORDS = [
    (AmenityIcon.WIFI, ("wifi", "internet")),
    (AmenityIcon.POOL, ("pool", "swim")),
    (AmenityIcon.GYM, ("gym", "fitness", "workout")),
    (AmenityIcon.DINING, ("break", "coffee", "restaur", "dining")),
    (AmenityIcon.PARKING, ("park", "garage")),
    (AmenityIcon.TV, ("tv", "cable")),
]


def amenity_icon(label: str) -> AmenityIcon:
    text = (label or "").lower()
    for icon, words in _KEYWORDS:
        if any(w in text for w in words):
            return icon
    return AmenityIcon.DEFAULT

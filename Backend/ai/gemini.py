# ai/gemini.py
# ------------------------------------------------------------------------------
import enum
import json
import textwrap
import datetime as dt
from typing import Any, Callable, List

import google.generativeai as genai

from core.errors import (
    EmptyResponseError,
    GuideError,
    GuideErrorKind,
    classify_error,
)
from core.logger import get_logger
from core.models import (
    DEFAULT_SUGGESTIONS,
    DestinationData,
    GuideRequest,
    Review,
    SuggestedDestination,
)

log = get_logger("gemini")

DEFAULT_MODEL = "gemini-2.5-flash"


# ──────────────────────────────────────────────────────────────────────────────
# Helper: a configured Gemini model, built once by the caller and passed around
# ──────────────────────────────────────────────────────────────────────────────
def get_model(api_key: str, model_name: str = DEFAULT_MODEL):
    if not api_key:
        raise GuideError(
            GuideErrorKind.API_KEY_INVALID,
            RuntimeError("Environment variable GEMINI_API_KEY is missing."),
        )
    genai.configure(api_key=api_key)
    return genai.GenerativeModel(model_name)


class FailurePolicy(enum.Enum):
    RAISE = "raise"        # classify and raise GuideError
    FALLBACK = "fallback"  # log and return the fallback value


# ──────────────────────────────────────────────────────────────────────────────
# Response schemas (keys are fixed whatever the output language)
# ──────────────────────────────────────────────────────────────────────────────
_STRING = {"type": "STRING"}
_NUMBER = {"type": "NUMBER"}
_COORDS = {"type": "OBJECT", "properties": {"lat": _NUMBER, "lng": _NUMBER}}


def _enum(*values: str) -> dict:
    return {"type": "STRING", "format": "enum", "enum": list(values)}


def _array(items: dict) -> dict:
    return {"type": "ARRAY", "items": items}


def _object(properties: dict, required: List[str] | None = None) -> dict:
    schema = {"type": "OBJECT", "properties": properties}
    if required:
        schema["required"] = required
    return schema


GUIDE_SCHEMA = _object(
    {
        "destinationName": _STRING,
        "tagline": _STRING,
        "description": _STRING,
        "history": _STRING,
        "bestTimeToVisit": _STRING,
        "currency": _STRING,
        "coordinates": _COORDS,
        "originCoordinates": _COORDS,
        "routes": _array(_object({
            "mode": _STRING,
            "category": _enum("Budget", "Premium"),
            "duration": _STRING,
            "costEstimate": _STRING,
            "details": _STRING,
        })),
        "hotels": _array(_object({
            "name": _STRING,
            "category": _enum("Budget", "Luxury"),
            "rating": _STRING,
            "priceEstimate": _STRING,
            "description": _STRING,
            "amenities": _array(_STRING),
            "coordinates": _COORDS,
        })),
        "topAttractions": _array(_object({
            "name": _STRING,
            "description": _STRING,
            "type": _STRING,
            "bestTime": _STRING,
            "coordinates": _COORDS,
        })),
        "photographySpots": _array(_object({
            "name": _STRING,
            "description": _STRING,
            "bestAngle": _STRING,
            "coordinates": _COORDS,
        })),
        "culinaryDelights": _array(_object({
            "name": _STRING,
            "description": _STRING,
            "bestPlaceToTry": _STRING,
            "priceRange": _STRING,
            "category": _enum("Breakfast", "Lunch", "Dinner"),
            "coordinates": _COORDS,
        })),
        "travelTips": _array(_STRING),
    },
    required=[
        "destinationName", "history", "routes", "hotels", "topAttractions",
        "photographySpots", "culinaryDelights", "coordinates", "originCoordinates",
    ],
)

TRENDING_SCHEMA = _array(_object({
    "name": {"type": "STRING", "description": "City, Country"},
    "price": {"type": "STRING", "description": "Total est. trip cost in ₹"},
    "rating": {"type": "STRING", "description": "Rating out of 5.0"},
    "reason": {"type": "STRING", "description": "Why it is a deal today"},
}))

REVIEWS_SCHEMA = _array(_object({
    "id": _STRING,
    "author": _STRING,
    "rating": _NUMBER,
    "date": _STRING,
    "comment": _STRING,
    "likes": _NUMBER,
}))


# ──────────────────────────────────────────────────────────────────────────────
# Prompt templates
# ──────────────────────────────────────────────────────────────────────────────
_GUIDE_PROMPT = textwrap.dedent(
    """\
    Act as an expert travel guide and historian.
    Create a comprehensive travel guide for a trip from "{origin}" to "{destination}".

    IMPORTANT: Provide the content in the "{language}" language.
    However, keep the JSON keys exactly as specified in the schema. Only the values should be in {language}.

    Include:
    1. A catchy tagline and a rich but concise description (max 3-4 sentences).
    2. HISTORY: Provide a VERY BRIEF historical snapshot. Max 2-3 sentences total. Focus only on the most significant fact.
    3. TRANSPORTATION ROUTES: You MUST provide at least 2 distinct options:
       - One strictly "Budget" (Affordable) option (e.g., Bus, Economy Train).
       - One "Premium" (Fastest/Comfort) option (e.g., Flight, First Class Train, Private Car).
       - Label the 'category' field strictly as either 'Budget' or 'Premium'.
       - Provide estimated costs primarily in INR (₹). You can include USD ($) in parentheses. Example: "₹4,100 ($50)".
    4. HOTELS/ACCOMMODATION: Provide 4 recommendations:
       - 2 "Budget" options (Hostels, Budget Hotels).
       - 2 "Luxury" options (4-5 Star Hotels).
       - Provide rating (e.g., "4.5/5") and price estimate per night primarily in INR (₹). Example: "₹9,900 ($120)".
       - List 3-4 key amenities for each hotel (e.g., "WiFi", "Pool", "Gym", "Breakfast").
       - Provide precise latitude and longitude coordinates for each hotel.
    5. COORDINATES: Accurately provide the latitude and longitude for the destination, the origin, and all specific attractions/spots.
    6. Top tourist attractions with their locations. Keep descriptions detailed but concise (2-3 sentences).
    7. Specific "Camera Places" (Photography spots) with tips on angles and locations.
    8. CULINARY / DINING:
       - Provide exactly 6 recommendations: 2 for "Breakfast", 2 for "Lunch", 2 for "Dinner".
       - Focus on "Best Affordable" prices.
       - Include the specific 'priceRange' in INR (₹) (e.g., "₹200-500").
    9. Practical money-saving travel tips.

    The output must be strictly valid JSON matching the schema provided.
    """
)

_TRENDING_PROMPT = textwrap.dedent(
    """\
    Act as a real-time travel trend aggregator.
    Task: Identify 4 trending, affordable travel destinations for {today} by simulating a scan of 100+ travel articles, blogs, and flight deal websites.

    Target Audience: Indian Travelers (Budget Conscious).

    Requirements:
    - Destinations must be diverse (mix of international and domestic relative to India).
    - Prices MUST be in Indian Rupees (₹).
    - Provide a short "reason" why it's trending today (e.g. "Flight prices dropped 20%").

    Return a JSON array with exactly 4 objects.
    """
)

_REVIEWS_PROMPT = textwrap.dedent(
    """\
    Act as a travel review aggregator platform.
    Generate 5 realistic user reviews for the hotel "{hotel}" in "{destination}".

    Requirements:
    - Reviews should sound authentic, with a mix of positive (mostly) and slightly critical feedback.
    - Vary the dates (relative time, e.g., "2 days ago", "1 month ago").
    - Generate realistic user names.
    - Ratings should be between 3.5 and 5.0.

    Return a JSON array of objects with: id (unique string), author (full name),
    rating (1-5), date, comment (2-3 sentences), likes (0-50).
    """
)


def build_guide_prompt(destination: str, origin: str, language_name: str = "English") -> str:
    """Return the guide prompt string for Gemini."""
    return _GUIDE_PROMPT.format(
        destination=destination,
        origin=origin,
        language=language_name,
    )


def build_trending_prompt(today: dt.date) -> str:
    return _TRENDING_PROMPT.format(today=today.strftime("%a %b %d %Y"))


def build_reviews_prompt(hotel_name: str, destination: str) -> str:
    return _REVIEWS_PROMPT.format(hotel=hotel_name, destination=destination)


# ──────────────────────────────────────────────────────────────────────────────
# Shared call path: one attempt, then raise or fall back depending on policy
# ──────────────────────────────────────────────────────────────────────────────
def _response_text(resp) -> str:
    # .text raises ValueError when the only candidate was blocked
    raw = (resp.text or "").strip("`json \n")
    if not raw:
        raise EmptyResponseError("EMPTY_RESPONSE")
    return raw


def _generate(
    model,
    prompt: str,
    schema: dict,
    parse: Callable[[Any], Any],
    policy: FailurePolicy,
    fallback: Callable[[], Any] = list,
    label: str = "generate_content",
):
    try:
        resp = model.generate_content(
            prompt,
            generation_config=genai.GenerationConfig(
                response_mime_type="application/json",
                response_schema=schema,
            ),
        )
        return parse(json.loads(_response_text(resp)))
    except Exception as exc:
        kind = classify_error(exc)
        if policy is FailurePolicy.FALLBACK:
            log.warning("%s failed (%s): %s", label, kind.value, exc)
            return fallback()
        log.error("Gemini API Error (%s): %s", kind.value, exc)
        raise GuideError(kind, exc) from exc


def _parse_guide(data) -> DestinationData:
    guide = DestinationData.model_validate(data)
    if not guide.destination_name.strip():
        raise EmptyResponseError("guide without destinationName")
    return guide


def _parse_list(record_type):
    def parse(data) -> list:
        if not isinstance(data, list):
            return []
        return [record_type.model_validate(d) for d in data if isinstance(d, dict)]
    return parse


# ──────────────────────────────────────────────────────────────────────────────
# Public calls
# ──────────────────────────────────────────────────────────────────────────────
def generate_travel_guide(
    model,
    destination: str,
    origin: str,
    language_name: str = "English",
) -> DestinationData:
    """
    Ask Gemini for the full guide of a trip origin → destination. Raises
    ValueError for blank input (nothing is sent) and GuideError for any
    failure of the call itself.
    """
    req = GuideRequest(destination=destination, origin=origin, language=language_name)
    log.info("Generating guide %s → %s (%s)", req.origin, req.destination, req.language)
    return _generate(
        model,
        build_guide_prompt(req.destination, req.origin, req.language),
        GUIDE_SCHEMA,
        _parse_guide,
        policy=FailurePolicy.RAISE,
        label="guide",
    )


def get_trending_destinations(model, today: dt.date | None = None) -> List[SuggestedDestination]:
    """Empty list on any failure; the caller substitutes DEFAULT_SUGGESTIONS."""
    return _generate(
        model,
        build_trending_prompt(today or dt.date.today()),
        TRENDING_SCHEMA,
        _parse_list(SuggestedDestination),
        policy=FailurePolicy.FALLBACK,
        label="trending",
    )


def trending_or_default(model) -> List[SuggestedDestination]:
    daily = get_trending_destinations(model) if model is not None else []
    return daily or list(DEFAULT_SUGGESTIONS)


def get_hotel_reviews(model, hotel_name: str, destination: str) -> List[Review]:
    return _generate(
        model,
        build_reviews_prompt(hotel_name, destination),
        REVIEWS_SCHEMA,
        _parse_list(Review),
        policy=FailurePolicy.FALLBACK,
        label="reviews",
    )

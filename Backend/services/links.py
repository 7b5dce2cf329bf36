# services/links.py
# ------------------------------------------------------------------------------
# Outbound links to booking / ride / transit sites. Nothing is fetched: the UI
# only opens these in a new tab.
# ------------------------------------------------------------------------------
from __future__ import annotations

import re
from typing import Optional
from urllib.parse import quote

from core.models import Coordinates, known


def _q(text: str) -> str:
    return quote(text or "", safe="")


# Whole words only: "Airport shuttle bus" is a bus, "Hill trail" is not a train
_FLIGHT_WORDS = re.compile(r"\b(flights?|air|airlines?|airways|plane|avion|vuelos?|vol|flug\w*)\b")
_TRAIN_WORDS = re.compile(r"\b(trains?|rail\w*|tren|zug)\b")
_BUS_WORDS = re.compile(r"\b(bus|buses|autob[uú]s)\b")

_ICONS = {"flight": "✈️", "train": "🚆", "bus": "🚌", "car": "🚗"}


def _mode(mode: str) -> str:
    # Also catches the common Spanish/French/German words for the mode
    m = (mode or "").lower()
    if _FLIGHT_WORDS.search(m):
        return "flight"
    if _TRAIN_WORDS.search(m):
        return "train"
    if _BUS_WORDS.search(m):
        return "bus"
    return "car"


def transport_icon(mode: str) -> str:
    return _ICONS[_mode(mode)]


def route_booking_url(mode: str, origin: str, destination: str) -> str:
    o, d = _q(origin), _q(destination)
    kind = _mode(mode)
    if kind == "flight":
        return f"https://www.google.com/travel/flights?q=Flights+to+{d}+from+{o}"
    if kind == "train":
        return f"https://www.rome2rio.com/map/{o}/{d}"
    if kind == "bus":
        return f"https://www.busbud.com/en/search/{o}/{d}/today/1/0/0/0/0"
    return directions_url(origin, destination)


def route_booking_label(mode: str) -> str:
    return {
        "flight": "Search Flights",
        "train": "Book Train Tickets",
        "bus": "Book Bus Tickets",
    }.get(_mode(mode), "View Directions")


def directions_url(origin: str, destination: str) -> str:
    return (
        "https://www.google.com/maps/dir/?api=1"
        f"&origin={_q(origin)}&destination={_q(destination)}"
    )


def hotel_booking_url(hotel_name: str, destination: str) -> str:
    return f"https://www.booking.com/searchresults.html?ss={_q(f'{hotel_name} {destination}')}"


def _latlng(coords: Optional[Coordinates]) -> tuple[str, str]:
    if not known(coords):
        return "", ""
    return str(coords.lat), str(coords.lng)


def ride_url(
    origin_name: str,
    origin_coords: Optional[Coordinates],
    destination_name: str,
    destination_coords: Optional[Coordinates],
) -> str:
    """Uber universal link origin → destination; unknown coordinates stay blank."""
    p_lat, p_lng = _latlng(origin_coords)
    d_lat, d_lng = _latlng(destination_coords)
    return (
        "https://m.uber.com/ul/?action=setPickup"
        f"&pickup[latitude]={p_lat}&pickup[longitude]={p_lng}"
        f"&pickup[nickname]={_q(origin_name)}"
        f"&dropoff[latitude]={d_lat}&dropoff[longitude]={d_lng}"
        f"&dropoff[nickname]={_q(destination_name)}"
    )


def ride_to_url(coords: Optional[Coordinates], name: str) -> str:
    d_lat, d_lng = _latlng(coords)
    return (
        "https://m.uber.com/ul/?action=setPickup&pickup=my_location"
        f"&dropoff[latitude]={d_lat}&dropoff[longitude]={d_lng}"
        f"&dropoff[nickname]={_q(name)}"
    )


def transit_url(coords: Coordinates) -> str:
    return (
        "https://www.google.com/maps/dir/?api=1"
        f"&destination={coords.lat},{coords.lng}&travelmode=transit"
    )


def image_url(seed: str, width: int = 800, height: int = 600) -> str:
    """Placeholder photo, stable for a given seed."""
    return f"https://picsum.photos/seed/{_q(''.join((seed or '').split()))}/{width}/{height}"

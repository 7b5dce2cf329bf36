# services/guide_map.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd
import pydeck as pdk

from core.models import Coordinates, DestinationData, known

MARKER_COLORS = {
    "destination": "#0ea5e9",  # blue
    "attraction": "#ef4444",   # red
    "photo": "#f97316",        # orange
    "food": "#22c55e",         # green
    "origin": "#64748b",       # gray
}

MAX_ZOOM = 13


@dataclass
class MapMarker:
    kind: str
    lat: float
    lng: float
    title: str
    detail: str = ""

    @property
    def color(self) -> List[int]:
        return hex_to_rgb(MARKER_COLORS[self.kind])


@dataclass
class MapView:
    latitude: float
    longitude: float
    zoom: float


def hex_to_rgb(value: str) -> List[int]:
    value = value.lstrip("#")
    return [int(value[i:i + 2], 16) for i in (0, 2, 4)]


def _marker(kind: str, coords: Optional[Coordinates], title: str, detail: str = "") -> Optional[MapMarker]:
    if not known(coords):
        return None
    return MapMarker(kind, coords.lat, coords.lng, title, detail)


def collect_markers(guide: DestinationData, origin_label: str = "Start") -> List[MapMarker]:
    candidates = [
        _marker("destination", guide.coordinates, guide.destination_name, guide.tagline),
        _marker("origin", guide.origin_coordinates, origin_label),
    ]
    candidates += [_marker("attraction", a.coordinates, a.name, a.type) for a in guide.top_attractions]
    candidates += [_marker("photo", s.coordinates, s.name, "📷 Camera spot") for s in guide.photography_spots]
    candidates += [
        _marker("food", d.coordinates, d.best_place_to_try or d.name, f"🍴 {d.name}")
        for d in guide.culinary_delights
    ]
    return [m for m in candidates if m is not None]


def route_line(guide: DestinationData) -> Optional[dict]:
    """Origin → destination segment, only when both ends are known."""
    if not (guide.origin_coordinates.is_known and guide.coordinates.is_known):
        return None
    o, d = guide.origin_coordinates, guide.coordinates
    return {"source": [o.lng, o.lat], "target": [d.lng, d.lat]}


def fit_view(markers: List[MapMarker], pad: float = 0.2) -> Optional[MapView]:
    """Centre and zoom so that every marker fits, with `pad` extra on each side."""
    if not markers:
        return None
    lats = [m.lat for m in markers]
    lngs = [m.lng for m in markers]
    lat_span = (max(lats) - min(lats)) * (1 + 2 * pad)
    lng_span = (max(lngs) - min(lngs)) * (1 + 2 * pad)
    span = max(lat_span, lng_span)
    zoom = MAX_ZOOM if span == 0 else max(1.0, min(MAX_ZOOM, math.log2(360 / span)))
    return MapView(
        latitude=(max(lats) + min(lats)) / 2,
        longitude=(max(lngs) + min(lngs)) / 2,
        zoom=round(zoom, 2),
    )


def markers_frame(markers: List[MapMarker]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "lat": m.lat,
                "lon": m.lng,
                "kind": m.kind,
                "label": m.title,
                "detail": m.detail,
                "color": m.color,
            }
            for m in markers
        ],
        columns=["lat", "lon", "kind", "label", "detail", "color"],
    )


def build_deck(guide: DestinationData) -> Optional[pdk.Deck]:
    markers = collect_markers(guide)
    view = fit_view(markers)
    if view is None:
        return None
    df_points = markers_frame(markers)

    layers = [
        pdk.Layer(
            "ScatterplotLayer",
            data=df_points,
            get_position=["lon", "lat"],
            get_fill_color="color",
            get_line_color=[255, 255, 255],
            stroked=True,
            line_width_min_pixels=2,
            radius_min_pixels=8,
            pickable=True,
        ),
        pdk.Layer(
            "TextLayer",
            data=df_points[df_points["kind"].isin(["destination", "origin"])],
            get_position=["lon", "lat"],
            get_text="label",
            get_color=[0, 0, 0, 200],
            get_size=16,
            get_alignment_baseline="'bottom'",
        ),
    ]

    line = route_line(guide)
    if line is not None:
        layers.append(
            pdk.Layer(
                "LineLayer",
                data=[line],
                get_source_position="source",
                get_target_position="target",
                get_color=hex_to_rgb(MARKER_COLORS["origin"]) + [153],
                get_width=3,
            )
        )

    return pdk.Deck(
        map_style="light",
        initial_view_state=pdk.ViewState(
            latitude=view.latitude,
            longitude=view.longitude,
            zoom=view.zoom,
        ),
        layers=layers,
        tooltip={"html": "<b>{label}</b><br/>{detail}"},
    )

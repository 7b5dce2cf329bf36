# Backend/app.py

import datetime
from dotenv import load_dotenv

load_dotenv()  # ← Must precede any import depending on .env

import streamlit as st

from ai import gemini
from core.config import load_settings
from core.errors import GuideError
from core.logger import get_logger
from core.models import MEAL_CATEGORIES, ROUTE_CATEGORIES, known
from core.view_state import (
    FONTS,
    LANGUAGES,
    TAB_LABELS,
    Tab,
    ViewState,
    can_submit,
    language_name,
)
from services import geolocation as geo
from services import guide_map as gmap
from services import links
from services.amenities import amenity_icon
from services.filters import dishes_for, hotel_buckets, partition_by_category, price_hotels
from services.pricing import collection_currency, price_bounds
from services.reviews import ReviewBoard

log = get_logger("app")
settings = load_settings()

# ──────────────────────────────────────────────────────────────────────────────
# 0. Streamlit configuration
# ──────────────────────────────────────────────────────────────────────────────
st.set_page_config(page_title="AI Travel Guide", page_icon="🧭", layout="wide")


@st.cache_resource
def _model():
    # One configured client for the whole process
    return gemini.get_model(settings.gemini_api_key, settings.gemini_model)


def _model_or_none():
    try:
        return _model()
    except GuideError as e:
        log.warning("Gemini model unavailable: %s", e.kind.value)
        return None


# ──────────────────────────────────────────────────────────────────────────────
# 1. session_state initialisation (default values)
# ──────────────────────────────────────────────────────────────────────────────
defaults = {
    "view": None,            # ViewState
    "reviews": None,         # ReviewBoard, per session
    "suggestions": None,     # trending list, loaded once per session
    "origin_text": "",
    "destination_text": "",
    "use_location": False,
    "locating": False,       # waiting for the browser position
    "locate_attempt": 0,
    "geo_warning": "",
    "active_tab": Tab.OVERVIEW,
}
for k, v in defaults.items():
    st.session_state.setdefault(k, v)
if st.session_state.view is None:
    st.session_state.view = ViewState()
if st.session_state.reviews is None:
    st.session_state.reviews = ReviewBoard()

view: ViewState = st.session_state.view
board: ReviewBoard = st.session_state.reviews

# ──────────────────────────────────────────────────────────────────────────────
# 2. Sidebar settings (language of the generated content, typography)
# ──────────────────────────────────────────────────────────────────────────────
st.sidebar.markdown("## ⚙️ Settings")
view.language = st.sidebar.selectbox(
    "Language",
    [code for code, _ in LANGUAGES],
    format_func=language_name,
    index=[code for code, _ in LANGUAGES].index(view.language),
)
view.font = st.sidebar.selectbox(
    "Typography",
    list(FONTS),
    format_func=str.title,
    index=list(FONTS).index(view.font),
)
sans, serif = FONTS[view.font]
st.markdown(
    f"<style>html, body, [class*='css'] {{font-family: {sans};}} "
    f"h1, h2, h3 {{font-family: {serif};}}</style>",
    unsafe_allow_html=True,
)


# ──────────────────────────────────────────────────────────────────────────────
# 3. Search form
# ──────────────────────────────────────────────────────────────────────────────
def _on_locate_toggle():
    if st.session_state.use_location:
        st.session_state.locate_attempt += 1
        st.session_state.locating = True
        st.session_state.origin_text = geo.LOCATING
        st.session_state.geo_warning = ""
    elif st.session_state.locating:
        st.session_state.locating = False
        st.session_state.origin_text = ""


st.markdown("## 🧭 AI Travel Guide")
st.caption("Where your searching and bookings come to your finger tips.")

# The browser answers on a later rerun; until then the origin shows LOCATING
if st.session_state.locating:
    answer = geo.request_position(st.session_state.locate_attempt)
    if answer is not None:
        st.session_state.locating = False
        try:
            st.session_state.origin_text = geo.position_text(answer)
        except geo.GeolocationError as e:
            log.warning("%s", e)
            st.session_state.origin_text = ""
            st.session_state.use_location = False
            st.session_state.geo_warning = "Could not retrieve location. Please enter manually."

st.checkbox("📍 Use current location", key="use_location", on_change=_on_locate_toggle)
if st.session_state.geo_warning:
    st.warning(st.session_state.geo_warning)

with st.form("search_form"):
    col_from, col_to = st.columns(2)
    origin_input = col_from.text_input("From", key="origin_text", placeholder="Your city")
    destination_input = col_to.text_input("To", key="destination_text", placeholder="Where to?")
    submitted = st.form_submit_button("Explore", disabled=view.loading)

if submitted:
    if not can_submit(destination_input, origin_input, geo.LOCATING):
        st.warning("🛑 Please fill in both the origin and the destination.")
    else:
        view.begin_search(origin_input.strip())
        st.session_state.active_tab = Tab.OVERVIEW
        with st.spinner("🤖 Generating your travel guide with Gemini…"):
            try:
                guide = gemini.generate_travel_guide(
                    _model(),
                    destination_input,
                    origin_input,
                    language_name(view.language),
                )
                view.resolve(guide)
            except GuideError as e:
                view.fail(e)

# ──────────────────────────────────────────────────────────────────────────────
# 4. Error banner
# ──────────────────────────────────────────────────────────────────────────────
if view.error:
    st.error(f"**Oops!** {view.error}")


# ──────────────────────────────────────────────────────────────────────────────
# 5. Section renderers
# ──────────────────────────────────────────────────────────────────────────────
def render_overview(data):
    st.subheader(data.tagline or data.destination_name)
    st.write(data.description)
    c1, c2 = st.columns(2)
    c1.metric("Best time to visit", data.best_time_to_visit or "—")
    c2.metric("Currency", data.currency or "—")
    st.markdown("#### 📜 A brief history")
    st.write(data.history)


def render_journey(data, origin):
    st.subheader(f"🚆 Getting there from {origin}")
    buckets = partition_by_category(data.routes, ROUTE_CATEGORIES)
    for category, routes in buckets.items():
        st.markdown(f"#### {'💸' if category == 'Budget' else '⭐'} {category}")
        if not routes:
            st.caption(f"No {category.lower()} option suggested.")
        for r in routes:
            with st.container(border=True):
                st.markdown(f"**{links.transport_icon(r.mode)} {r.mode}**")
                st.write(f"⏱️ {r.duration} · 💰 {r.cost_estimate}")
                st.caption(r.details)
                st.link_button(
                    links.route_booking_label(r.mode),
                    links.route_booking_url(r.mode, origin, data.destination_name),
                )
    c1, c2 = st.columns(2)
    c1.link_button(
        "🚕 Ride with Uber",
        links.ride_url(origin, data.origin_coordinates, data.destination_name, data.coordinates),
    )
    c2.link_button("🗺️ View on Google Maps", links.directions_url(origin, data.destination_name))


def render_reviews(hotel, destination):
    if hotel.name not in board:
        if st.button("💬 Load reviews", key=f"load_{hotel.name}"):
            model = _model_or_none()
            fetch = None
            if model is not None:
                fetch = lambda: gemini.get_hotel_reviews(model, hotel.name, destination)  # noqa: E731
            with st.spinner("Collecting reviews…"):
                board.open(hotel.name, fetch)
            st.rerun()
        return

    for review in board.get(hotel.name):
        st.markdown(f"**{review.author}** · {'★' * round(review.rating)} · _{review.date}_")
        st.write(review.comment)
        if st.button(f"👍 Helpful ({review.likes})", key=f"like_{hotel.name}_{review.id}"):
            board.like(hotel.name, review.id)
            st.rerun()

    with st.form(f"review_form_{hotel.name}", clear_on_submit=True):
        author = st.text_input("Your name")
        rating = st.slider("Rating", 1, 5, 5)
        comment = st.text_area("Your review")
        if st.form_submit_button("Post review"):
            try:
                board.add(hotel.name, author, comment, rating)
                st.rerun()
            except ValueError as e:
                st.warning(str(e))


def render_hotel(item, data):
    hotel = item.item
    with st.container(border=True):
        st.image(links.image_url(hotel.name))
        st.markdown(f"**{hotel.name}** · ⭐ {hotel.rating}")
        st.caption(hotel.description)
        if hotel.amenities:
            st.write("  ".join(f"{amenity_icon(a).glyph} {a}" for a in hotel.amenities[:4]))
        st.write(f"💰 {hotel.price_estimate} / night")
        st.link_button("Book a room", links.hotel_booking_url(hotel.name, data.destination_name))
        with st.expander("🔍 View details"):
            st.image(
                [links.image_url(f"{hotel.name}-{i}" if i else hotel.name, 400, 300) for i in range(3)],
                width=200,
            )
            render_reviews(hotel, data.destination_name)


def render_hotels(data):
    st.subheader("🛏️ Where to stay")
    priced = price_hotels(data.hotels)
    lo, hi = price_bounds(p.parsed_price for p in priced)
    symbol = collection_currency(h.price_estimate for h in data.hotels)
    ceiling = hi
    if lo < hi:
        ceiling = st.slider(
            f"Max price per night ({symbol})",
            min_value=lo,
            max_value=hi,
            value=hi,
            step=10,
            key=f"price_{view.image_seed}",
        )
    buckets = hotel_buckets(data.hotels, ceiling)
    for category, label in (("Luxury", "👑 Luxury stays"), ("Budget", "🎒 Budget stays")):
        st.markdown(f"#### {label}")
        hotels = buckets[category]
        if not hotels:
            st.caption(f"No {category.lower()} options within this price range.")
            continue
        cols = st.columns(2)
        for i, item in enumerate(hotels):
            with cols[i % 2]:
                render_hotel(item, data)


def render_map(data):
    st.subheader("🗺️ Interactive map")
    deck = gmap.build_deck(data)
    if deck is None:
        st.info("No coordinates available for this guide.")
        return
    st.pydeck_chart(deck)
    st.markdown(
        "🔵 Destination · ⚪ Start · 🔴 Attractions · 🟠 Camera spots · 🟢 Food  \n"
        "*🔍 Zoom and pan the map, hover a marker to read its label.*"
    )


def render_attractions(data):
    mode = st.radio("Show", ["All attractions", "Camera spots"], horizontal=True)
    spots = data.top_attractions if mode == "All attractions" else data.photography_spots
    if not spots:
        st.caption("Nothing to show here.")
    for spot in spots:
        with st.container(border=True):
            suffix = "" if mode == "All attractions" else "camera"
            st.image(links.image_url(f"{spot.name}{suffix}-{view.image_seed}"))
            st.markdown(f"**{spot.name}**")
            st.write(spot.description)
            if mode == "All attractions":
                st.caption(f"🏷️ {spot.type} · 🕒 {spot.best_time}")
            else:
                st.info(f"📷 Pro tip: {spot.best_angle}")
            if known(spot.coordinates):
                c1, c2 = st.columns(2)
                c1.link_button("🚕 Uber", links.ride_to_url(spot.coordinates, spot.name))
                c2.link_button("🚌 Transit", links.transit_url(spot.coordinates))


def render_food(data):
    st.subheader("🍽️ Local cuisine")
    st.caption("Verified affordable prices · Best value")
    category = st.radio("Meal", list(MEAL_CATEGORIES), horizontal=True)
    dishes = dishes_for(data.culinary_delights, category)
    if not dishes:
        st.caption("No recommendations found for this category.")
    cols = st.columns(2)
    for i, dish in enumerate(dishes):
        with cols[i % 2], st.container(border=True):
            st.image(links.image_url(f"{dish.name}{category}", 400, 400))
            st.markdown(f"**{dish.name}**")
            st.write(dish.description)
            st.caption(f"📍 Try at: {dish.best_place_to_try}")
            if dish.price_range:
                st.write(f"💰 {dish.price_range}")
    if data.travel_tips:
        st.markdown("#### 💡 Money-saving tips")
        for tip in data.travel_tips:
            st.markdown(f"- {tip}")


# ──────────────────────────────────────────────────────────────────────────────
# 6. Guide (tabs) or welcome panel with trending getaways
# ──────────────────────────────────────────────────────────────────────────────
if view.guide is not None:
    data = view.guide
    st.markdown(f"# {data.destination_name}")
    st.caption(f"📍 From {view.origin}")

    view.active_tab = st.radio(
        "Section",
        list(Tab),
        format_func=TAB_LABELS.get,
        horizontal=True,
        key="active_tab",
        label_visibility="collapsed",
    )
    st.markdown("---")
    if view.active_tab is Tab.OVERVIEW:
        render_overview(data)
    elif view.active_tab is Tab.JOURNEY:
        render_journey(data, view.origin)
    elif view.active_tab is Tab.HOTELS:
        render_hotels(data)
    elif view.active_tab is Tab.MAP:
        render_map(data)
    elif view.active_tab is Tab.ATTRACTIONS:
        render_attractions(data)
    else:
        render_food(data)
else:
    if st.session_state.suggestions is None:
        st.session_state.suggestions = gemini.trending_or_default(_model_or_none())

    st.markdown("---")
    st.subheader("✈️ Daily affordable getaways")
    st.caption(f"Curated for {datetime.date.today():%A, %b %d}")
    cols = st.columns(4)
    for col, dest in zip(cols, st.session_state.suggestions):
        with col, st.container(border=True):
            seed = f"{dest.name}{datetime.date.today().day}"
            st.image(links.image_url(seed, 400, 300))
            st.markdown(f"**{dest.name}**")
            st.caption(dest.reason)
            st.write(f"⭐ {dest.rating} · 💰 {dest.price}")
    st.markdown("*Powered by Gemini AI*")

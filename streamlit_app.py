# streamlit_app.py
"""
Streamlit UI for the flight route map.
- Enter origin / destination / layovers (codes, cities or airport names)
- Per-leg and total distance and estimated flight time
- Landmarks along the route; tier checkboxes and map pan/zoom decide which are drawn
"""

import streamlit as st
from streamlit_folium import st_folium

from airports import load_airports
from corridor import filter_corridor
from flight_duration import summarize_route
from flight_utils import bounding_box
from formatting import format_distance, format_duration
from landmarks import load_landmarks
from route import RouteError, resolve_route
from route_map import build_route_map, landmark_marker
from settings import AIRPORTS_CSV, LANDMARKS_PATH, TIER_LABELS, TIER_RADIUS_KM, setup_logging
from visibility import VisibilitySet, viewport_from_leaflet

DEFAULT_ORIGIN = "LHR"
DEFAULT_DEST = "JFK"

log = setup_logging()

# --------- Helpers ----------
@st.cache_data
def cached_airports(csv_path=AIRPORTS_CSV):
    return load_airports(csv_path)

@st.cache_data
def cached_landmarks(path=LANDMARKS_PATH):
    if not path.exists():
        return []
    return load_landmarks(path)

def set_route(route):
    st.session_state.route = route
    st.session_state.summary = summarize_route(route)
    st.session_state.candidates = filter_corridor(cached_landmarks(), route)
    st.session_state.visible = VisibilitySet()
    st.session_state.viewport = bounding_box(route, max(TIER_RADIUS_KM.values()))

# --------- Streamlit UI ----------
st.set_page_config(page_title="Flight Route Map", layout="wide")

st.title("✈️ Flight Route Map")
st.markdown("Enter airport codes, cities or names, add layovers, and click **Track flight**.")

df_airports = cached_airports()

col1, col2, col3 = st.columns([1,1,1])
with col1:
    origin_input = st.text_input("Origin", value=DEFAULT_ORIGIN)
with col2:
    dest_input = st.text_input("Destination", value=DEFAULT_DEST)
with col3:
    via_input = st.text_input("Layovers (comma separated, e.g. CDG, DXB)", value="")

st.caption("Landmarks")
tier_cols = st.columns(len(TIER_LABELS))
enabled_tiers = set()
for col, (tier, label) in zip(tier_cols, TIER_LABELS.items()):
    with col:
        # tier 3 starts off
        if st.checkbox(label, value=tier != 3, key=f"tier_{tier}"):
            enabled_tiers.add(tier)

if st.button("Track flight"):
    stops = [origin_input, *via_input.split(","), dest_input]
    try:
        set_route(resolve_route(df_airports, stops))
    except RouteError as e:
        st.error(str(e))

if "route" in st.session_state:
    route = st.session_state.route
    summary = st.session_state.summary
    candidates = st.session_state.candidates
    visible = st.session_state.visible

    st.write(" → ".join(w.label for w in route))
    m1, m2, m3 = st.columns(3)
    m1.metric("Distance", format_distance(summary.total_distance_m).metric)
    m2.metric("Time (hh:mm)", format_duration(summary.total_duration_h))
    m3.metric("Landmarks on route", len(candidates))
    for leg in summary.legs:
        dist = format_distance(leg.distance_m)
        st.write(f"**{leg.origin.code}** ✈ **{leg.dest.code}** — {format_duration(leg.duration_h)} · "
                 f"{dist.metric} | {dist.imperial} | {dist.nautical}")

    delta = visible.update(candidates, st.session_state.viewport, enabled_tiers)
    if delta:
        log.info("Markers: +%d -%d", len(delta.to_add), len(delta.to_remove))

    # st_folium re-serializes the whole map on every rerun, so the markers
    # are drawn from the active set rather than patched with the delta
    folium_map = build_route_map(route, summary, landmarks=[])
    for lm in visible.active.values():
        landmark_marker(lm).add_to(folium_map)

    state = st_folium(folium_map, width=1100, height=700, key="route_map", returned_objects=["bounds"])
    viewport = viewport_from_leaflet((state or {}).get("bounds"))
    if viewport is not None and viewport != st.session_state.viewport:
        st.session_state.viewport = viewport
        st.rerun()

    html = folium_map.get_root().render()
    st.download_button("Download map HTML", data=html, file_name="route_map.html", mime="text/html")

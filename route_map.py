# route_map.py
from html import escape
from typing import Iterable, Optional
from urllib.parse import quote_plus

import folium

from flight_duration import RouteSummary
from flight_models import Landmark
from flight_utils import great_circle_points, unwrap_lons
from formatting import format_distance, format_duration
from labels import calculate_label_offsets
from landmarks import tier_label
from settings import TIER_STYLES

def new_map(route, zoom_start: int = 4) -> folium.Map:
    mid_lat = sum(w.lat for w in route) / len(route)
    mid_lon = sum(w.lon for w in route) / len(route)
    return folium.Map(location=(mid_lat, mid_lon), zoom_start=zoom_start, tiles="OpenStreetMap")

def add_route(m: folium.Map, route, points_per_leg: int = 64) -> None:
    for origin, dest in zip(route, route[1:]):
        pts = unwrap_lons(great_circle_points(origin.lat, origin.lon, dest.lat, dest.lon, n_points=points_per_leg))
        # shadow under the main line
        folium.PolyLine(pts, color="#000000", weight=6, opacity=0.4).add_to(m)
        folium.PolyLine(pts, color="#FFFFFF", weight=3, opacity=0.9,
                        popup=f"{origin.code} → {dest.code}").add_to(m)

def airport_label_html(waypoint, offset) -> str:
    return (
        f"<div style='transform: translate(calc(-50% + {offset.x}px), calc(-100% + {offset.y}px));"
        "background:rgba(0,0,0,0.6);color:white;border-radius:8px;padding:6px 10px;"
        "font-size:12px;white-space:nowrap;display:inline-block;'>"
        f"<b>{escape(waypoint.code)}</b> - {escape(waypoint.city or waypoint.name)}</div>"
    )

def add_airport_markers(m: folium.Map, route) -> None:
    for wp, offset in zip(route, calculate_label_offsets(route)):
        folium.CircleMarker(
            [wp.lat, wp.lon], radius=5, color="#000000", weight=1,
            fill=True, fill_color="#FFFFFF", fill_opacity=1.0,
            tooltip=wp.label,
        ).add_to(m)
        folium.Marker([wp.lat, wp.lon], icon=folium.DivIcon(html=airport_label_html(wp, offset))).add_to(m)

def landmark_popup_html(lm: Landmark) -> str:
    parts = ["<div class='landmark-popup' style='max-width:300px;'>"]
    if lm.image_url:
        parts.append(f"<img src='{escape(lm.image_url)}' alt='{escape(lm.name)}' style='width:100%;'>")
    parts.append(f"<h4>{escape(lm.name)}</h4>")
    if lm.description:
        parts.append(f"<p>{escape(lm.description)}</p>")
    parts.append(f"<span class='landmark-tier tier-{lm.tier}'>{tier_label(lm.tier)}</span><br>")
    if lm.wiki_url:
        parts.append(f"<a href='{escape(lm.wiki_url)}' target='_blank' rel='noopener noreferrer'>View on Wikipedia →</a>")
    else:
        search = f"https://www.google.com/search?q={quote_plus(lm.name)}"
        parts.append("<span>No Wikipedia article available</span><br>")
        parts.append(f"<a href='{search}' target='_blank' rel='noopener noreferrer'>Search on Google →</a>")
    parts.append("</div>")
    return "".join(parts)

def landmark_marker(lm: Landmark) -> folium.CircleMarker:
    style = TIER_STYLES[lm.tier]
    return folium.CircleMarker(
        [lm.lat, lm.lon],
        radius=style["radius"],
        color=style["color"],
        weight=style["weight"],
        fill=True,
        fill_color=style["fill_color"],
        fill_opacity=0.9,
        tooltip=lm.name,
        popup=folium.Popup(landmark_popup_html(lm), max_width=320),
    )

def summary_html(summary: RouteSummary) -> str:
    html = "<div style='background:white;padding:8px;border-radius:6px;white-space:nowrap;'>"
    html += f"<b>Distance:</b> {format_distance(summary.total_distance_m).metric}<br>"
    html += f"<b>Time:</b> {format_duration(summary.total_duration_h)}<br>"
    for leg in summary.legs:
        html += f"{escape(leg.origin.code)} → {escape(leg.dest.code)}: {format_duration(leg.duration_h)}"
        html += f" ({format_distance(leg.distance_m).metric})<br>"
    html += "</div>"
    return html

def build_route_map(route, summary: Optional[RouteSummary] = None,
                    landmarks: Iterable[Landmark] = (), zoom_start: int = 4) -> folium.Map:
    m = new_map(route, zoom_start=zoom_start)
    add_route(m, route)
    add_airport_markers(m, route)
    for lm in landmarks:
        landmark_marker(lm).add_to(m)
    if summary is not None:
        folium.map.Marker((route[0].lat, route[0].lon),
                          icon=folium.DivIcon(html=summary_html(summary))).add_to(m)
    return m

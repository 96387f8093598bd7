# flight_duration.py
import math
from dataclasses import dataclass
from typing import List

from flight_models import Route, Waypoint
from flight_utils import initial_bearing, great_circle_distance_m

MAX_WIND_KMH = 200.0
MIN_EFFECTIVE_SPEED_KMH = 200.0

def route_efficiency(distance_km: float) -> float:
    # actual tracks are longer than the great circle; less so on long hauls
    if distance_km >= 12000:
        return 1.03
    if distance_km >= 6000:
        return 1.05
    if distance_km >= 3000:
        return 1.08
    return 1.10

def base_cruise_speed_kmh(distance_km: float) -> float:
    if distance_km < 500:
        return 650.0
    if distance_km < 2000:
        return 800.0
    if distance_km < 6000:
        return 880.0
    return 900.0

def wind_scale(distance_km: float) -> float:
    if distance_km < 300:
        return 0.15
    if distance_km < 2000:
        return 0.60
    if distance_km < 6000:
        return 0.90
    if distance_km < 12000:
        return 1.00
    return 0.35  # ultra-long-haul / polar dampening

def overhead_hours(distance_km: float) -> float:
    # ground, climb and descent
    if distance_km < 50:
        return 0.10
    if distance_km < 300:
        return 0.50
    if distance_km < 2000:
        return 0.50
    if distance_km < 6000:
        return 0.75
    return 1.00

def wind_component_kmh(origin, dest, distance_km: float, bearing_deg: float) -> float:
    """
    Empirical jet-stream term: positive tailwind eastbound, negative headwind
    westbound, scaled by distance band, mean absolute latitude and hemisphere.
    """
    direction_factor = math.cos(math.radians(bearing_deg - 90.0))
    mid_lat = (abs(origin.lat) + abs(dest.lat)) / 2.0
    lat_factor = max(0.0, min(1.0, (mid_lat - 10.0) / 40.0))
    hemisphere_factor = 1.0
    if origin.lat > 0 and dest.lat > 0:
        hemisphere_factor = 1.08
    elif origin.lat < 0 and dest.lat < 0:
        hemisphere_factor = 0.92
    max_wind = MAX_WIND_KMH * wind_scale(distance_km) * lat_factor * hemisphere_factor
    return direction_factor * max_wind

def estimate_duration(origin, dest, distance_meters: float) -> float:
    """
    Estimated block time in hours for one leg. Not symmetric: reversing the
    leg flips the sign of the wind term.
    """
    bearing = initial_bearing(origin, dest)
    distance_km = distance_meters / 1000.0

    effective_distance_km = distance_km * route_efficiency(distance_km)
    speed = base_cruise_speed_kmh(distance_km) + wind_component_kmh(origin, dest, distance_km, bearing)
    speed = max(speed, MIN_EFFECTIVE_SPEED_KMH)

    flight_hours = effective_distance_km / speed
    return flight_hours + overhead_hours(distance_km)


@dataclass(frozen=True)
class LegSummary:
    origin: Waypoint
    dest: Waypoint
    distance_m: float
    duration_h: float


@dataclass(frozen=True)
class RouteSummary:
    legs: List[LegSummary]
    total_distance_m: float
    total_duration_h: float


def summarize_route(route: Route) -> RouteSummary:
    legs = []
    for origin, dest in zip(route, route[1:]):
        d = great_circle_distance_m(origin, dest)
        legs.append(LegSummary(origin, dest, d, estimate_duration(origin, dest, d)))
    return RouteSummary(
        legs=legs,
        total_distance_m=sum(leg.distance_m for leg in legs),
        total_duration_h=sum(leg.duration_h for leg in legs),
    )

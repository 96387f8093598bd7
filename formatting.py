# formatting.py
import math
from typing import NamedTuple

MILES_PER_METER = 0.000621371
FEET_PER_METER = 3.28084
NM_PER_METER = 0.000539957


class DistanceText(NamedTuple):
    metric: str
    imperial: str
    nautical: str


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

def _format_value(value: float) -> str:
    if value >= 100:
        return str(_round_half_up(value))
    if value >= 10:
        return f"{value:.1f}"
    return f"{value:.2f}"

def format_distance(distance_m: float) -> DistanceText:
    dist_km = distance_m / 1000.0
    if dist_km < 1:
        metric = f"{_round_half_up(distance_m)} m"
    else:
        metric = f"{_format_value(dist_km)} km"

    dist_miles = distance_m * MILES_PER_METER
    if dist_miles < 1:
        imperial = f"{_round_half_up(distance_m * FEET_PER_METER)} ft"
    else:
        imperial = f"{_format_value(dist_miles)} miles"

    nautical = f"{_format_value(distance_m * NM_PER_METER)} NM"
    return DistanceText(metric, imperial, nautical)

def format_duration(hours: float) -> str:
    # HH:MM, minutes rounded
    total_minutes = _round_half_up(hours * 60.0)
    h, m = divmod(total_minutes, 60)
    return f"{h:02d}:{m:02d}"

# corridor.py
"""
Landmarks near a route.

Two passes: a single buffered bounding box around every route point discards
most of the collection with plain coordinate comparisons, then the survivors
get the precise point-to-path distance against their tier's radius.
"""
import dataclasses
import logging
from typing import Dict, List, Mapping, Optional, Sequence

from flight_models import Landmark, Route, landmark_id
from flight_utils import bounding_box, contains_point, point_to_path_distance_km
from settings import CORRIDOR_SAFETY_MARGIN_KM, LOGGER_NAME, TIER_RADIUS_KM

log = logging.getLogger(LOGGER_NAME)


def filter_corridor(
    landmarks: Sequence[Landmark],
    route: Route,
    tier_radius_km: Mapping[int, float] = TIER_RADIUS_KM,
    safety_margin_km: float = CORRIDOR_SAFETY_MARGIN_KM,
    stats: Optional[Dict[str, int]] = None,
) -> List[Landmark]:
    """
    Returns the candidate set for ``route``: every landmark whose distance to
    the route polyline is within ``tier_radius_km[landmark.tier]``.

    ``stats`` (if given) receives ``total``, ``prefiltered``, ``evaluated``
    and ``accepted`` counts. Landmarks of a tier missing from the table are
    never accepted.
    """
    if stats is None:
        stats = {}
    stats.update(total=len(landmarks), prefiltered=0, evaluated=0, accepted=0)

    if not landmarks or len(route) < 2 or not tier_radius_km:
        return []

    bounds = bounding_box(route, max(tier_radius_km.values()) + safety_margin_km)
    pre_filtered = [lm for lm in landmarks if contains_point(bounds, lm)]
    stats["prefiltered"] = len(pre_filtered)
    log.info("Bounding box pre-filter: %d/%d landmarks", len(pre_filtered), len(landmarks))

    accepted = []
    for lm in pre_filtered:
        radius = tier_radius_km.get(lm.tier)
        if radius is None:
            continue
        stats["evaluated"] += 1
        if point_to_path_distance_km(lm, route) <= radius:
            if not lm.id:
                lm = dataclasses.replace(lm, id=landmark_id(lm.lat, lm.lon, lm.name))
            accepted.append(lm)
    stats["accepted"] = len(accepted)
    log.info("Corridor filter: %d landmarks within detection radius", len(accepted))
    return accepted

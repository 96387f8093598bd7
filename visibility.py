# visibility.py
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Collection, Dict, Iterable, List, Optional

from flight_models import BoundingBox, Landmark
from flight_utils import contains_point, normalize_lon
from settings import LOGGER_NAME

log = logging.getLogger(LOGGER_NAME)


def viewport_from_leaflet(bounds) -> Optional[BoundingBox]:
    """
    Converts Leaflet map bounds ({"_southWest": {"lat", "lng"}, "_northEast": ...})
    to a BoundingBox. Leaflet reports unwrapped longitudes after panning
    across the antimeridian; those are folded back into [-180, 180].
    """
    if not bounds:
        return None
    sw, ne = bounds.get("_southWest"), bounds.get("_northEast")
    if not sw or not ne or sw.get("lat") is None or ne.get("lat") is None:
        return None
    west, east = sw["lng"], ne["lng"]
    if east - west >= 360.0:
        return BoundingBox(north=ne["lat"], south=sw["lat"], east=180.0, west=-180.0)
    return BoundingBox.from_bounds(sw["lat"], normalize_lon(west), ne["lat"], normalize_lon(east))


@dataclass
class VisibilityDelta:
    to_add: List[Landmark] = field(default_factory=list)
    to_remove: List[str] = field(default_factory=list)
    # entries dropped from ``active``, keyed like ``to_remove``, so the caller
    # can take their markers off the map
    removed: Dict[str, Any] = field(default_factory=dict)

    def __bool__(self):
        return bool(self.to_add or self.to_remove)


def _identity(landmark):
    return landmark


class VisibilitySet:
    """
    Tracks which candidate landmarks are currently rendered and computes the
    smallest add/remove delta when the viewport or the enabled tiers change.

    ``make_entry`` turns a landmark into whatever the presentation layer keeps
    for it (a marker handle, say); ``active`` maps landmark id to that entry.
    Not thread-safe: one caller drives ``update``.
    """

    def __init__(self, make_entry: Optional[Callable[[Landmark], Any]] = None):
        self.make_entry = make_entry or _identity
        self.active: Dict[str, Any] = {}

    def __len__(self):
        return len(self.active)

    def __contains__(self, landmark_id):
        return landmark_id in self.active

    @staticmethod
    def desired(candidates: Iterable[Landmark],
                viewport: Optional[BoundingBox],
                enabled_tiers: Collection[int]) -> Dict[str, Landmark]:
        if viewport is None:
            # viewport not laid out yet; render nothing
            return {}
        wanted = {}
        for lm in candidates:
            if lm.tier in enabled_tiers and contains_point(viewport, lm):
                wanted.setdefault(lm.id, lm)
        return wanted

    def update(self,
               candidates: Iterable[Landmark],
               viewport: Optional[BoundingBox],
               enabled_tiers: Collection[int]) -> VisibilityDelta:
        wanted = self.desired(candidates, viewport, enabled_tiers)

        to_add = [lm for lm_id, lm in wanted.items() if lm_id not in self.active]
        removed = {lm_id: self.active.pop(lm_id)
                   for lm_id in [i for i in self.active if i not in wanted]}
        delta = VisibilityDelta(to_add=to_add, to_remove=list(removed), removed=removed)
        for lm in delta.to_add:
            self.active[lm.id] = self.make_entry(lm)

        if delta:
            log.debug("Visibility delta: +%d -%d (%d active)",
                      len(delta.to_add), len(delta.to_remove), len(self.active))
        return delta

    def clear(self) -> Dict[str, Any]:
        """Drops every active entry and returns them keyed by landmark id."""
        removed = dict(self.active)
        self.active.clear()
        return removed

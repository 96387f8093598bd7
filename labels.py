# labels.py
from dataclasses import dataclass
from typing import List, Sequence

from settings import LABEL_NEAR_THRESHOLD_DEG


@dataclass(frozen=True)
class LabelOffset:
    x: int
    y: int
    direction: str  # side of the label the pointer notch sits on


BOTTOM = LabelOffset(0, -5, "bottom")
TOP = LabelOffset(0, 60, "top")
LEFT = LabelOffset(65, 27, "left")
RIGHT = LabelOffset(-65, 27, "right")


def calculate_label_offsets(waypoints: Sequence, threshold: float = LABEL_NEAR_THRESHOLD_DEG) -> List[LabelOffset]:
    """
    Pixel offsets that push each waypoint's label away from nearby waypoints.
    Labels sit above the dot unless neighbours within ``threshold`` degrees
    (on both axes) crowd it; then the label moves along the dominant axis of
    the vector from the neighbours' centroid to the waypoint.
    """
    offsets = []
    for i, wp in enumerate(waypoints):
        neighbors = [
            other for j, other in enumerate(waypoints)
            if i != j
            and abs(wp.lat - other.lat) < threshold
            and abs(wp.lon - other.lon) < threshold
        ]
        if not neighbors:
            offsets.append(BOTTOM)
            continue

        d_lat = wp.lat - sum(n.lat for n in neighbors) / len(neighbors)
        d_lon = wp.lon - sum(n.lon for n in neighbors) / len(neighbors)

        if abs(d_lat) == abs(d_lon):
            offsets.append(BOTTOM)
        elif abs(d_lat) > abs(d_lon):
            offsets.append(BOTTOM if d_lat > 0 else TOP)
        else:
            offsets.append(LEFT if d_lon > 0 else RIGHT)
    return offsets

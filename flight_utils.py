# flight_utils.py
import math
from typing import List, Sequence, Tuple

from flight_models import BoundingBox

# Spherical radius used by web map providers for distance readouts.
R_EARTH_KM = 6378.137
KM_PER_DEG = 111.0

def deg2rad(d: float) -> float:
    return d * math.pi / 180.0

def rad2deg(r: float) -> float:
    return r * 180.0 / math.pi

def normalize_lon(lon: float) -> float:
    if -180.0 <= lon <= 180.0:
        return lon
    return ((lon + 180.0) % 360.0) - 180.0

def lon_delta(d: float) -> float:
    # signed shortest longitude difference in [-180, 180)
    return ((d + 180.0) % 360.0) - 180.0

def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    φ1, φ2 = deg2rad(lat1), deg2rad(lat2)
    dφ = deg2rad(lat2 - lat1)
    dλ = deg2rad(lon2 - lon1)
    a = math.sin(dφ/2)**2 + math.cos(φ1)*math.cos(φ2)*math.sin(dλ/2)**2
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1-a))
    return R_EARTH_KM * c

def bearing_between(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    if lat1 == lat2 and lon1 == lon2:
        return 0.0
    φ1, φ2 = deg2rad(lat1), deg2rad(lat2)
    λ1, λ2 = deg2rad(lon1), deg2rad(lon2)
    y = math.sin(λ2 - λ1) * math.cos(φ2)
    x = math.cos(φ1)*math.sin(φ2) - math.sin(φ1)*math.cos(φ2)*math.cos(λ2 - λ1)
    θ = math.atan2(y, x)
    return (rad2deg(θ) + 360.0) % 360.0

def initial_bearing(p1, p2) -> float:
    """Forward azimuth from p1 to p2 in [0, 360). Identical points give 0."""
    return bearing_between(p1.lat, p1.lon, p2.lat, p2.lon)

def great_circle_distance_m(p1, p2) -> float:
    return haversine_km(p1.lat, p1.lon, p2.lat, p2.lon) * 1000.0

def great_circle_points(lat1: float, lon1: float, lat2: float, lon2: float, n_points: int = 100) -> List[Tuple[float,float]]:
    φ1, λ1 = deg2rad(lat1), deg2rad(lon1)
    φ2, λ2 = deg2rad(lat2), deg2rad(lon2)
    sin_dφ = math.sin((φ2 - φ1)/2.0)
    sin_dλ = math.sin((λ2 - λ1)/2.0)
    a = sin_dφ**2 + math.cos(φ1)*math.cos(φ2)*sin_dλ**2
    δ = 2 * math.asin(min(1, math.sqrt(a)))
    if δ == 0:
        return [(lat1, lon1) for _ in range(n_points+1)]
    pts = []
    for i in range(n_points+1):
        f = i / n_points
        A = math.sin((1 - f) * δ) / math.sin(δ)
        B = math.sin(f * δ) / math.sin(δ)
        x = A*math.cos(φ1)*math.cos(λ1) + B*math.cos(φ2)*math.cos(λ2)
        y = A*math.cos(φ1)*math.sin(λ1) + B*math.cos(φ2)*math.sin(λ2)
        z = A*math.sin(φ1) + B*math.sin(φ2)
        φi = math.atan2(z, math.sqrt(x*x + y*y))
        λi = math.atan2(y, x)
        pts.append((rad2deg(φi), rad2deg(λi)))
    return pts

def unwrap_lons(points: Sequence[Tuple[float, float]]) -> List[Tuple[float, float]]:
    # keeps polylines continuous across the antimeridian (lon may leave [-180, 180])
    if not points:
        return []
    out = [points[0]]
    for lat, lon in points[1:]:
        prev_lon = out[-1][1]
        out.append((lat, prev_lon + lon_delta(lon - prev_lon)))
    return out

def _point_to_leg_km(p, a, b) -> float:
    # Straight interpolation between the leg endpoints in a locally scaled
    # lat/lon plane, then a haversine distance to the clamped foot point.
    dlon = lon_delta(b.lon - a.lon)
    k = math.cos(deg2rad((a.lat + b.lat) / 2.0))
    dx = b.lat - a.lat
    dy = dlon * k
    seg_len_sq = dx*dx + dy*dy
    if seg_len_sq < 1e-12:
        return haversine_km(p.lat, p.lon, a.lat, a.lon)
    plon = lon_delta(p.lon - a.lon)
    t = ((p.lat - a.lat) * dx + plon * k * dy) / seg_len_sq
    if t <= 0.0:
        return haversine_km(p.lat, p.lon, a.lat, a.lon)
    if t >= 1.0:
        return haversine_km(p.lat, p.lon, b.lat, b.lon)
    return haversine_km(p.lat, p.lon, a.lat + t * dx, a.lon + t * dlon)

def point_to_path_distance_km(point, path: Sequence) -> float:
    """
    Minimum distance (km) from point to the polyline through path's waypoints.
    Each leg is clamped to its endpoints, so a point on a vertex is at 0.
    """
    if not path:
        return math.inf
    if len(path) == 1:
        return haversine_km(point.lat, point.lon, path[0].lat, path[0].lon)
    best = math.inf
    for a, b in zip(path, path[1:]):
        best = min(best, _point_to_leg_km(point, a, b))
        if best == 0.0:
            break
    return best

def bounding_box(points: Sequence, buffer_km: float) -> BoundingBox:
    """
    Buffered lat/lon box around points. Longitude padding is divided by the
    cosine of the largest absolute latitude so the box stays conservative
    toward the poles. Points are taken in path order and each step follows
    the short way round, so only legs that cross the antimeridian make the
    box wrap.
    """
    if len(points) == 0:
        raise ValueError("points is empty")
    lats = [p.lat for p in points]
    lons = [lon for _, lon in unwrap_lons([(p.lat, p.lon) for p in points])]

    lat_buf = buffer_km / KM_PER_DEG
    north = min(90.0, max(lats) + lat_buf)
    south = max(-90.0, min(lats) - lat_buf)

    cos_lat = math.cos(deg2rad(max(abs(lat) for lat in lats)))
    lon_buf = buffer_km / (KM_PER_DEG * cos_lat) if cos_lat > 1e-9 else 360.0

    west, east = min(lons), max(lons)
    west -= lon_buf
    east += lon_buf

    if east - west >= 360.0:
        return BoundingBox(north=north, south=south, east=180.0, west=-180.0, wraps=False)
    west, east = normalize_lon(west), normalize_lon(east)
    return BoundingBox(north=north, south=south, east=east, west=west, wraps=east < west)

def contains_point(box: BoundingBox, point) -> bool:
    if not (box.south <= point.lat <= box.north):
        return False
    if box.wraps:
        # outside the excluded middle band (east, west)
        return point.lon >= box.west or point.lon <= box.east
    return box.west <= point.lon <= box.east

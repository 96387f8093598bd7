# route.py
"""Route assembly and validation at the input boundary. Nothing downstream repairs a route."""
from typing import List, Sequence

from airports import find_airport, find_best_match
from flight_models import Waypoint
from settings import MAX_TOTAL_STOPS


class RouteError(ValueError):
    pass


def build_route(waypoints: Sequence[Waypoint], max_stops: int = MAX_TOTAL_STOPS) -> List[Waypoint]:
    route = list(waypoints)
    if len(route) < 2:
        raise RouteError("Please select both an origin and a destination.")
    if len(route) > max_stops:
        raise RouteError(f"Maximum {max_stops} stops allowed (including origin and destination).")
    for a, b in zip(route, route[1:]):
        if a.code == b.code:
            raise RouteError(
                f"Invalid Route: You cannot go from {a.code} to {b.code} directly. "
                "Please adjust your layovers."
            )
    return route


def resolve_stop(df, query: str) -> Waypoint:
    # exact code first, then the fuzzy match the search box would pick
    try:
        return find_airport(df, query)
    except ValueError:
        pass
    match = find_best_match(query, df)
    if match is None:
        raise RouteError(f"'{query}' matches no known airport.")
    return match


def resolve_route(df, queries: Sequence[str], max_stops: int = MAX_TOTAL_STOPS) -> List[Waypoint]:
    queries = [q for q in queries if q and q.strip()]
    return build_route([resolve_stop(df, q) for q in queries], max_stops=max_stops)

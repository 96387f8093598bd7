import pytest

from conftest import wp
from route import RouteError, build_route, resolve_route


def test_build_route_keeps_order():
    stops = [wp("LHR", 51.47, -0.45), wp("CDG", 49.01, 2.55), wp("JFK", 40.64, -73.78)]
    assert build_route(stops) == stops


def test_revisiting_an_airport_later_is_allowed():
    stops = [wp("LHR", 51.47, -0.45), wp("JFK", 40.64, -73.78), wp("LHR", 51.47, -0.45)]
    assert len(build_route(stops)) == 3


def test_needs_two_stops():
    with pytest.raises(RouteError):
        build_route([wp("LHR", 51.47, -0.45)])


def test_rejects_consecutive_duplicates():
    with pytest.raises(RouteError, match="LHR to LHR"):
        build_route([wp("LHR", 51.47, -0.45), wp("LHR", 51.47, -0.45), wp("JFK", 40.64, -73.78)])


def test_stop_limit():
    stops = [wp(f"S{i}", i, i) for i in range(11)]
    with pytest.raises(RouteError, match="Maximum 10"):
        build_route(stops)
    assert len(build_route(stops[:10])) == 10


def test_resolve_route(airports_df):
    route = resolve_route(airports_df, ["EGLL", "paris", " ", "JFK"])
    assert [w.code for w in route] == ["LHR", "CDG", "JFK"]


def test_resolve_unknown(airports_df):
    with pytest.raises(RouteError, match="nowhere-ville"):
        resolve_route(airports_df, ["LHR", "nowhere-ville"])

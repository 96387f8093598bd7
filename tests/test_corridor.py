import corridor
from conftest import lm, wp
from corridor import filter_corridor
from flight_models import landmark_id

RADII = {1: 400.0, 2: 150.0, 3: 50.0}
ROUTE = [wp("A", 0, 0), wp("B", 0, 10)]


def ids(landmarks):
    return {l.id for l in landmarks}


def test_filters_by_tier_radius():
    landmarks = [
        lm("vertex", 0, 0, tier=3),
        lm("near-t1", 1, 5, tier=1),     # ~111 km off the leg
        lm("near-t3", 1, 5.5, tier=3),
        lm("mid-t2", 1.2, 8, tier=2),    # ~134 km
        lm("far-t2", 2, 8, tier=2),      # ~223 km
    ]
    assert ids(filter_corridor(landmarks, ROUTE, RADII)) == {"vertex", "near-t1", "mid-t2"}


def test_vertex_landmark_included_with_zero_radius():
    got = filter_corridor([lm("v", 0, 10, tier=3)], ROUTE, {1: 100.0, 3: 0.0})
    assert ids(got) == {"v"}


def test_far_landmarks_never_reach_precise_phase(monkeypatch):
    evaluated = []
    precise = corridor.point_to_path_distance_km

    def counting(point, path):
        evaluated.append(point.id)
        return precise(point, path)

    monkeypatch.setattr(corridor, "point_to_path_distance_km", counting)
    landmarks = [lm("near", 0.5, 5), lm("far", 40, 100), lm("other-side", -30, -60)]
    stats = {}
    got = filter_corridor(landmarks, ROUTE, RADII, stats=stats)

    assert ids(got) == {"near"}
    assert evaluated == ["near"]
    assert stats == {"total": 3, "prefiltered": 1, "evaluated": 1, "accepted": 1}


def test_empty_inputs_give_empty_candidates():
    assert filter_corridor([], ROUTE, RADII) == []
    assert filter_corridor([lm("v", 0, 0)], [wp("A", 0, 0)], RADII) == []
    assert filter_corridor([lm("v", 0, 0)], [], RADII) == []


def test_unknown_tier_is_skipped():
    assert filter_corridor([lm("x", 0, 0, tier=4)], ROUTE, RADII) == []


def test_missing_id_is_assigned_stably():
    first = filter_corridor([lm("", 0, 5, name="Gulf Marker")], ROUTE, RADII)
    second = filter_corridor([lm("", 0, 5, name="Gulf Marker")], ROUTE, RADII)
    assert first[0].id == landmark_id(0, 5, "Gulf Marker") == second[0].id


def test_growing_a_radius_only_adds():
    landmarks = [lm(f"t{t}-{lat}", lat, 5, tier=t) for t in (1, 2, 3) for lat in (0.2, 0.6, 1.0, 1.6, 3.0)]
    base = filter_corridor(landmarks, ROUTE, RADII)
    wider = filter_corridor(landmarks, ROUTE, {**RADII, 3: 200.0})
    assert ids(base) <= ids(wider)
    added = ids(wider) - ids(base)
    assert added and all(i.startswith("t3-") for i in added)


def test_route_across_antimeridian():
    route = [wp("NRT", 35.7, 140.4), wp("AKL", -37.0, 174.8), wp("PPT", -17.6, -149.6)]
    # a quarter of the way along AKL-PPT, east of the dateline
    landmarks = [lm("dateline", -32.15, -176.3, tier=1), lm("atlantic", 0, -30, tier=1)]
    assert ids(filter_corridor(landmarks, route, RADII)) == {"dateline"}


def test_wide_route_keeps_landmarks_on_every_leg():
    route = [wp("ORD", 41.97, -87.89), wp("LHR", 51.47, -0.45), wp("SIN", 1.36, 103.99)]
    # midpoints of the ORD-LHR and LHR-SIN legs
    landmarks = [lm("gulf", 26.415, 51.77, tier=1), lm("atlantic", 46.72, -44.17, tier=1)]
    assert ids(filter_corridor(landmarks, route, RADII)) == {"gulf", "atlantic"}


def test_multi_leg_route_uses_every_leg():
    route = [wp("A", 0, 0), wp("B", 0, 10), wp("C", 10, 10)]
    got = filter_corridor([lm("second-leg", 5, 10.5, tier=1)], route, RADII)
    assert ids(got) == {"second-leg"}


def test_ids_come_from_the_models_module():
    import flight_models
    assert corridor.landmark_id is flight_models.landmark_id
    # the filter stays usable without the pandas loader
    assert not hasattr(corridor, "landmarks")
    assert not hasattr(corridor, "pd")

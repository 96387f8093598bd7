from main import run

LANDMARKS = """name,lat,lon,tier
Eiffel Tower,48.8584,2.2945,1
Big Ben,51.5007,-0.1246,2
Windsor Castle,51.4839,-0.6044,3
Statue of Liberty,40.6892,-74.0445,1
"""


def test_run_writes_map(tmp_path, airports_csv):
    landmarks = tmp_path / "landmarks.csv"
    landmarks.write_text(LANDMARKS)
    out = tmp_path / "out" / "map.html"

    res = run(["LHR", "CDG"], airports_csv=airports_csv, landmarks_path=landmarks, tiers={1, 2}, out=out)

    assert [w.code for w in res["route"]] == ["LHR", "CDG"]
    assert {l.name for l in res["candidates"]} == {"Eiffel Tower", "Big Ben", "Windsor Castle"}
    assert res["visible"] == 2
    assert out.exists()
    assert "Big Ben" in out.read_text()


def test_run_without_landmarks(tmp_path, airports_csv):
    res = run(["EGLL", "KJFK"], airports_csv=airports_csv, landmarks_path=tmp_path / "missing.csv",
              out=tmp_path / "map.html")
    assert res["candidates"] == []
    assert res["visible"] == 0
    assert res["summary"].total_duration_h > 7

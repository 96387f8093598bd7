# main.py
import argparse
import logging
from pathlib import Path

from airports import load_airports
from corridor import filter_corridor
from flight_duration import summarize_route
from flight_utils import bounding_box
from formatting import format_distance, format_duration
from landmarks import load_landmarks
from route import RouteError, resolve_route
from route_map import build_route_map, landmark_marker
from settings import AIRPORTS_CSV, DEFAULT_ENABLED_TIERS, LANDMARKS_PATH, TIER_RADIUS_KM, setup_logging
from visibility import VisibilitySet

def run(stops, airports_csv=AIRPORTS_CSV, landmarks_path=LANDMARKS_PATH,
        tiers=DEFAULT_ENABLED_TIERS, out="route_map.html"):
    df = load_airports(airports_csv)
    route = resolve_route(df, stops)
    summary = summarize_route(route)

    m = build_route_map(route, summary)
    visible = VisibilitySet(make_entry=lambda lm: landmark_marker(lm).add_to(m))
    candidates = []
    if landmarks_path and Path(landmarks_path).exists():
        candidates = filter_corridor(load_landmarks(landmarks_path), route)
        # static output: the whole corridor is the viewport
        viewport = bounding_box(route, max(TIER_RADIUS_KM.values()))
        visible.update(candidates, viewport, set(tiers))

    out_path = Path(out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    m.save(out_path)
    return {"route": route, "summary": summary, "candidates": candidates,
            "visible": len(visible), "map": out_path.absolute()}

def main():
    parser = argparse.ArgumentParser(description="Flight route map - leg times and landmarks along the way")
    parser.add_argument("--from", dest="origin", required=True)
    parser.add_argument("--to", dest="dest", required=True)
    parser.add_argument("--via", nargs="*", default=[], help="Layover airports in order")
    parser.add_argument("--airports", default=str(AIRPORTS_CSV), help="OurAirports CSV")
    parser.add_argument("--landmarks", default=str(LANDMARKS_PATH), help="Landmark table (.csv or .json)")
    parser.add_argument("--tiers", type=int, nargs="+", default=sorted(DEFAULT_ENABLED_TIERS), choices=[1, 2, 3])
    parser.add_argument("--out", default="route_map.html")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    stops = [args.origin, *args.via, args.dest]
    try:
        res = run(stops, airports_csv=args.airports, landmarks_path=args.landmarks,
                  tiers=args.tiers, out=args.out)
    except (RouteError, ValueError, OSError) as e:
        parser.error(str(e))

    summary = res["summary"]
    print("Route: " + " -> ".join(w.code for w in res["route"]))
    for leg in summary.legs:
        dist = format_distance(leg.distance_m)
        print(f"  {leg.origin.code} -> {leg.dest.code}: {format_duration(leg.duration_h)}  "
              f"{dist.metric} | {dist.imperial} | {dist.nautical}")
    print(f"Total distance: {format_distance(summary.total_distance_m).metric}")
    print(f"Total time: {format_duration(summary.total_duration_h)} ({summary.total_duration_h:.2f} h)")
    print(f"Landmarks in corridor: {len(res['candidates'])} ({res['visible']} shown)")
    print(f"Saved map to {res['map']}")

if __name__ == "__main__":
    main()

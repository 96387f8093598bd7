# landmarks.py
"""Landmark table loading. Rows are validated here once and never again downstream."""
import logging
from pathlib import Path
from typing import List

import pandas as pd

from flight_models import Landmark, landmark_id
from settings import LOGGER_NAME, TIER_LABELS

log = logging.getLogger(LOGGER_NAME)

REQUIRED_COLUMNS = ("name", "lat", "lon", "tier")
VALID_TIERS = frozenset(TIER_LABELS)

# accept the camelCase keys of the JSON datasets too
_COLUMN_ALIASES = {
    "imageUrl": "image_url",
    "wikiUrl": "wiki_url",
    "latitude": "lat",
    "longitude": "lon",
    "lng": "lon",
}


class LandmarkDataError(ValueError):
    pass


def tier_label(tier: int) -> str:
    return TIER_LABELS.get(tier, "Landmark")


def _text(value) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value).strip()


def landmarks_from_frame(df: pd.DataFrame) -> List[Landmark]:
    df = df.rename(columns=_COLUMN_ALIASES)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise LandmarkDataError(f"landmark table is missing columns: {', '.join(missing)}")

    lat = pd.to_numeric(df["lat"], errors="coerce")
    lon = pd.to_numeric(df["lon"], errors="coerce")
    tier = pd.to_numeric(df["tier"], errors="coerce")
    valid = lat.between(-90, 90) & lon.between(-180, 180) & tier.isin(list(VALID_TIERS))
    dropped = int((~valid).sum())
    if dropped:
        log.warning("Dropped %d landmark rows with invalid coordinates or tier", dropped)

    landmarks = []
    seen = set()
    known = set(REQUIRED_COLUMNS) | {"id", "description", "image_url", "wiki_url"}
    extra_cols = [c for c in df.columns if c not in known]
    for idx in df.index[valid]:
        row = df.loc[idx]
        name = _text(row["name"])
        lm_id = _text(row.get("id")) or landmark_id(lat[idx], lon[idx], name)
        if lm_id in seen:
            log.warning("Duplicate landmark id %s, keeping the first", lm_id)
            continue
        seen.add(lm_id)
        landmarks.append(Landmark(
            id=lm_id,
            lat=float(lat[idx]),
            lon=float(lon[idx]),
            tier=int(tier[idx]),
            name=name,
            description=_text(row.get("description")),
            image_url=_text(row.get("image_url")),
            wiki_url=_text(row.get("wiki_url")),
            extra={c: row[c] for c in extra_cols},
        ))
    return landmarks


def load_landmarks(path) -> List[Landmark]:
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(path)
    elif suffix == ".json":
        df = pd.read_json(path)
    else:
        raise LandmarkDataError(f"unsupported landmark file type: {path.suffix}")
    landmarks = landmarks_from_frame(df)
    log.info("Loaded %d landmarks from %s", len(landmarks), path)
    return landmarks

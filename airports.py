# airports.py
from pathlib import Path
from typing import Optional

import pandas as pd

from flight_models import Waypoint
from settings import AIRPORTS_CSV

def load_airports(csv_path=AIRPORTS_CSV):
    # OurAirports layout: ident, type, name, latitude_deg, longitude_deg, municipality, iata_code, ...
    return pd.read_csv(Path(csv_path), low_memory=False)

def _column(df, name: str) -> pd.Series:
    if name in df.columns:
        return df[name].fillna("").astype(str).str.strip()
    return pd.Series("", index=df.index)

def airport_codes(df) -> pd.Series:
    # display code: IATA where the airport has one, ident otherwise
    iata = _column(df, "iata_code")
    return iata.where(iata != "", _column(df, "ident"))

def row_to_waypoint(row) -> Waypoint:
    def text(key):
        v = row.get(key, "")
        return "" if pd.isna(v) else str(v).strip()
    iata = text("iata_code")
    return Waypoint(
        lat=float(row["latitude_deg"]),
        lon=float(row["longitude_deg"]),
        code=iata or text("ident"),
        name=text("name"),
        city=text("municipality"),
        type=text("type"),
    )

def find_airport(df, code: str) -> Waypoint:
    code_up = str(code).upper().strip()
    if "ident" in df.columns:
        r = df[df["ident"].fillna("").str.upper() == code_up]
        if not r.empty:
            return row_to_waypoint(r.iloc[0])
    for col in ["iata_code", "iata", "icao_code", "gps_code"]:
        if col in df.columns:
            r = df[df[col].fillna("").str.upper() == code_up]
            if not r.empty:
                return row_to_waypoint(r.iloc[0])
    raise ValueError(f"Airport '{code}' not found")

def find_best_match(query: str, df) -> Optional[Waypoint]:
    """
    Best airport for a free-text query: code prefix or city/name substring.
    Exact code beats code prefix, which beats large airports, which beat the rest.
    Queries shorter than two characters match nothing.
    """
    if not query or len(query.strip()) < 2:
        return None
    q = query.strip().lower()

    codes = airport_codes(df).str.lower()
    city = _column(df, "municipality").str.lower()
    name = _column(df, "name").str.lower()
    starts = codes.str.startswith(q)
    mask = starts | city.str.contains(q, regex=False) | name.str.contains(q, regex=False)
    if not mask.any():
        return None

    large = _column(df, "type") == "large_airport"
    rank = (codes != q).astype(int) * 4 + (~starts).astype(int) * 2 + (~large).astype(int)
    best = rank[mask].sort_values(kind="mergesort").index[0]
    return row_to_waypoint(df.loc[best])

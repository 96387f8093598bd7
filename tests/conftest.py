import pandas as pd
import pytest

from flight_models import Landmark, Waypoint


AIRPORT_ROWS = [
    # ident, type, name, latitude_deg, longitude_deg, municipality, iata_code
    ("EGLL", "large_airport", "London Heathrow Airport", 51.4706, -0.461941, "London", "LHR"),
    ("KJFK", "large_airport", "John F Kennedy International Airport", 40.6398, -73.7789, "New York", "JFK"),
    ("LFPG", "large_airport", "Charles de Gaulle International Airport", 49.0128, 2.55, "Paris", "CDG"),
    ("LFPO", "medium_airport", "Paris-Orly Airport", 48.7233, 2.3794, "Paris", "ORY"),
    ("XXXX", "small_airport", "Tiny Strip", 0.0, 0.0, "Nowhere", None),
]


@pytest.fixture
def airports_df():
    return pd.DataFrame(
        AIRPORT_ROWS,
        columns=["ident", "type", "name", "latitude_deg", "longitude_deg", "municipality", "iata_code"],
    )


@pytest.fixture
def airports_csv(tmp_path, airports_df):
    path = tmp_path / "airports.csv"
    airports_df.to_csv(path, index=False)
    return path


def wp(code, lat, lon):
    return Waypoint(lat=lat, lon=lon, code=code)


def lm(id, lat, lon, tier=1, name=""):
    return Landmark(id=id, lat=lat, lon=lon, tier=tier, name=name or id)

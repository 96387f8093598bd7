# data/get_airports.py
import io

import pandas as pd
import requests
from pathlib import Path

# URL for the OurAirports dataset (free, public)
URL = "https://ourairports.com/data/airports.csv"
OUT = Path(__file__).parent / "airports.csv"
KEEP_TYPES = ("large_airport", "medium_airport")

def download(url=URL, out=OUT, timeout=60):
    print("Downloading airports dataset...")
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    df = pd.read_csv(io.StringIO(r.text), low_memory=False)
    # route planning only needs airports with scheduled traffic
    df = df[df["type"].isin(KEEP_TYPES) & df["latitude_deg"].notna() & df["longitude_deg"].notna()]
    df.to_csv(out, index=False)
    print(f"✅ Saved {len(df)} airports to {out}")

if __name__ == "__main__":
    download()

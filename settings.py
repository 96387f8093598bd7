"""Shared configuration: paths, corridor constants, display styles, logging setup."""

import logging
import os
from pathlib import Path

# Env vars:
# - FLIGHT_CORRIDOR_AIRPORTS_CSV -> OurAirports CSV (see data/get_airports.py)
# - FLIGHT_CORRIDOR_LANDMARKS    -> landmark table (.csv or .json)
# - FLIGHT_CORRIDOR_OUTPUT_DIR   -> where rendered maps are written
AIRPORTS_CSV = Path(os.getenv("FLIGHT_CORRIDOR_AIRPORTS_CSV", "data/airports.csv"))
LANDMARKS_PATH = Path(os.getenv("FLIGHT_CORRIDOR_LANDMARKS", "data/landmarks.csv"))
OUTPUT_DIR = Path(os.getenv("FLIGHT_CORRIDOR_OUTPUT_DIR", "output"))

# ==================== Corridor ====================
# Inclusion radius around the route per landmark tier (km).
TIER_RADIUS_KM = {
    1: 400.0,  # global icons, visible from far off
    2: 150.0,
    3: 50.0,
}
CORRIDOR_SAFETY_MARGIN_KM = 50.0

# ==================== Visibility ====================
DEFAULT_ENABLED_TIERS = frozenset({1, 2})
VIEWPORT_DEBOUNCE_MS = 100

# ==================== Route ====================
MAX_TOTAL_STOPS = 10  # origin + layovers + destination
LABEL_NEAR_THRESHOLD_DEG = 0.8

# ==================== Display ====================
TIER_LABELS = {
    1: "Global Icon",
    2: "National Landmark",
    3: "Local Interest",
}

TIER_STYLES = {
    1: {"radius": 8, "fill_color": "#FFD700", "color": "#000000", "weight": 2},
    2: {"radius": 7, "fill_color": "#00BFFF", "color": "#000000", "weight": 2},
    3: {"radius": 6, "fill_color": "#FF69B4", "color": "#000000", "weight": 1.5},
}

LOGGER_NAME = "flight_corridor"


def setup_logging(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger(LOGGER_NAME)

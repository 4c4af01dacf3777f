"""
Regional traffic patterns by local time of day.

Each region's current load is modelled from its local hour: morning and
evening peaks, work hours, late night and early morning bands, with an
evening boost at weekends. Hours and weekdays are taken in UTC and shifted
by a fixed per-region offset.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

import numpy as np

from internet_pulse.utils.dates import utc_now
from internet_pulse.utils.numbers import round_half_up
from internet_pulse.utils.reproducibility import uniform

# region -> (UTC offset in hours, time zone label)
REGION_TIME_ZONES = {
    "North America": (-5, "EST"),
    "Europe": (1, "CET"),
    "Asia-Pacific": (8, "CST"),
    "Latin America": (-3, "BRT"),
    "Africa": (2, "CAT"),
    "Middle East": (3, "AST"),
}

PEAK_HOUR_REGIONS = ["North America", "Europe", "Asia-Pacific", "Latin America"]

WEEKEND_DAYS = ("Saturday", "Sunday")
WEEKEND_EVENING_BOOST = 1.2


def local_hour(utc_hour: int, offset: int) -> int:
    return (utc_hour + offset + 24) % 24


def is_peak_hour(hour: int) -> bool:
    return 8 <= hour <= 10 or 19 <= hour <= 23


def band_traffic(hour: int, rng: np.random.Generator) -> float:
    """Load level (0-100) for a local hour; each band spans 15 points."""
    if is_peak_hour(hour):
        return 85 + uniform(rng, 0, 15)
    if 10 <= hour <= 18:
        return 70 + uniform(rng, 0, 15)
    if hour >= 23 or hour <= 6:
        return 25 + uniform(rng, 0, 15)
    return 40 + uniform(rng, 0, 15)


def generate_traffic_patterns(rng: np.random.Generator, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    """Current load for every region: {hour, traffic, region, day}."""
    now = now or utc_now()
    day = now.strftime("%A")

    patterns = []
    for region, (offset, _) in REGION_TIME_ZONES.items():
        hour = local_hour(now.hour, offset)
        traffic = band_traffic(hour, rng)
        if day in WEEKEND_DAYS and hour >= 19:
            traffic *= WEEKEND_EVENING_BOOST
        patterns.append({"hour": hour, "traffic": int(round_half_up(traffic)), "region": region, "day": day})
    return patterns


def regional_summary(patterns: List[Dict[str, Any]], rng: np.random.Generator) -> List[Dict[str, Any]]:
    current = {p["region"]: p["traffic"] for p in patterns}
    return [
        {
            "region": region,
            "current_traffic": current.get(region, 0),
            "peak_traffic": 95 + uniform(rng, 0, 5),
            "avg_traffic": 65 + uniform(rng, 0, 10),
        }
        for region in REGION_TIME_ZONES
    ]


def peak_hours() -> List[Dict[str, str]]:
    return [
        {
            "region": region,
            "morning_peak": f"8:00-10:00 AM {REGION_TIME_ZONES[region][1]}",
            "evening_peak": f"7:00-11:00 PM {REGION_TIME_ZONES[region][1]}",
            "off_peak_hours": f"2:00-6:00 AM {REGION_TIME_ZONES[region][1]}",
        }
        for region in PEAK_HOUR_REGIONS
    ]


def hourly_pattern(rng: np.random.Generator) -> List[Dict[str, Any]]:
    """Typical global load over a day, one point per hour ("00:00".."23:00")."""
    points = []
    for hour in range(24):
        if is_peak_hour(hour):
            traffic = 80 + uniform(rng, 0, 15)
        elif 10 <= hour <= 18:
            traffic = 65 + uniform(rng, 0, 10)
        elif hour <= 6:
            traffic = 25 + uniform(rng, 0, 10)
        else:
            traffic = 40 + uniform(rng, 0, 10)
        points.append({"hour": f"{hour:02d}:00", "traffic": int(round_half_up(traffic)), "region": "Global"})
    return points


def global_traffic(regions: List[Dict[str, Any]]) -> float:
    if not regions:
        return 0.0
    return float(np.mean([r["current_traffic"] for r in regions]))

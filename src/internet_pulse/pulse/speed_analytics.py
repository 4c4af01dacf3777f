"""Regional download, upload and ping figures with peak-hour slowdown."""

from datetime import datetime
from typing import Any, Dict, List, Optional

import numpy as np

from internet_pulse.utils.dates import iso_timestamp, utc_now
from internet_pulse.utils.numbers import round_half_up
from internet_pulse.utils.reproducibility import uniform

# region -> (download Mbps, upload Mbps, ping ms)
REGION_SPEED_BASES = {
    "North America": (120, 40, 15),
    "Europe": (85, 35, 18),
    "Asia-Pacific": (75, 30, 25),
    "Latin America": (45, 20, 35),
}

PEAK_SLOWDOWN = 0.7

FASTEST_COUNTRIES = [
    {"country": "South Korea", "avg_speed": 134.7, "flag": "🇰🇷"},
    {"country": "Singapore", "avg_speed": 132.1, "flag": "🇸🇬"},
    {"country": "Hong Kong", "avg_speed": 127.3, "flag": "🇭🇰"},
    {"country": "Romania", "avg_speed": 119.8, "flag": "🇷🇴"},
    {"country": "Switzerland", "avg_speed": 117.4, "flag": "🇨🇭"},
]

SLOWEST_COUNTRIES = [
    {"country": "Afghanistan", "avg_speed": 3.2, "flag": "🇦🇫"},
    {"country": "Yemen", "avg_speed": 3.8, "flag": "🇾🇪"},
    {"country": "Syria", "avg_speed": 4.1, "flag": "🇸🇾"},
    {"country": "Chad", "avg_speed": 4.7, "flag": "🇹🇩"},
    {"country": "Niger", "avg_speed": 5.1, "flag": "🇳🇪"},
]


def is_congested(hour: int) -> bool:
    return 7 <= hour <= 9 or 19 <= hour <= 22


def generate_speed_data(rng: np.random.Generator, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    """
    One sample per region. Download and upload are scaled by 0.7 during
    congested UTC hours, then jittered (±10 and ±5); ping is jittered by ±5.
    """
    now = now or utc_now()
    multiplier = PEAK_SLOWDOWN if is_congested(now.hour) else 1.0
    timestamp = iso_timestamp(now)

    return [
        {
            "timestamp": timestamp,
            "region": region,
            "avg_download": round_half_up(download * multiplier + uniform(rng, -10, 10), 1),
            "avg_upload": round_half_up(upload * multiplier + uniform(rng, -5, 5), 1),
            "avg_ping": round_half_up(ping + uniform(rng, -5, 5), 1),
        }
        for region, (download, upload, ping) in REGION_SPEED_BASES.items()
    ]


def global_speed_stats(samples: List[Dict[str, Any]]) -> Dict[str, Any]:
    def mean(key):
        return round_half_up(float(np.mean([s[key] for s in samples])), 1) if samples else 0.0

    return {
        "global_avg_download": mean("avg_download"),
        "global_avg_upload": mean("avg_upload"),
        "global_avg_ping": mean("avg_ping"),
        "top_countries": FASTEST_COUNTRIES,
        "slowest_countries": SLOWEST_COUNTRIES,
    }

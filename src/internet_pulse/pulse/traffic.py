"""
Traffic summary - Cloudflare Radar HTTP summary plus regional traffic levels.

Radar's public summary carries no regional split, so regional levels are
synthesized around fixed per-region bases.
"""

from typing import Any, Dict, List

import numpy as np

from internet_pulse.adapters.cloudflare.radar import summary_value
from internet_pulse.utils.dates import iso_timestamp
from internet_pulse.utils.reproducibility import randint, uniform

# region name -> base traffic level (0-100)
REGION_BASES = {
    "North America": 85,
    "Europe": 82,
    "Asia": 88,
    "South America": 65,
    "Africa": 45,
    "Oceania": 75,
}

SHORT_REGION_NAMES = {
    "North America": "N. America",
    "South America": "S. America",
}


def region_traffic(rng: np.random.Generator) -> List[Dict[str, Any]]:
    return [{"name": name, "traffic": base + uniform(rng, 0, 10)} for name, base in REGION_BASES.items()]


def traffic_summary(payload: Dict[str, Any], rng: np.random.Generator) -> Dict[str, Any]:
    """Build the /cloudflare body from a radar/http/summary/os response."""
    return {
        "global": {
            "timestamp": iso_timestamp(),
            "http_requests": summary_value(payload, "http_requests_1d") or 0,
            "bot_traffic": summary_value(payload, "bot_traffic_1d") or 0,
            "human_traffic": summary_value(payload, "human_traffic_1d") or 0,
        },
        "outages": randint(rng, 6, 13),
        "regions": region_traffic(rng),
    }


def traffic_fallback(rng: np.random.Generator) -> Dict[str, Any]:
    return {
        "global": {
            "timestamp": iso_timestamp(),
            "http_requests": 1.2e9 + uniform(rng, 0, 1e8),
            "bot_traffic": 35 + uniform(rng, 0, 10),
            "human_traffic": 65 + uniform(rng, 0, 10),
        },
        "outages": randint(rng, 7, 14),
        "regions": region_traffic(rng),
    }


def short_region_name(name: str) -> str:
    return SHORT_REGION_NAMES.get(name, name)

"""
Live feed items - real OONI censorship events mixed with simulated network events.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import numpy as np

from internet_pulse.utils.dates import iso_timestamp, parse_timestamp, utc_now
from internet_pulse.utils.reproducibility import choice, randint

logger = logging.getLogger(__name__)

EVENT_TYPES = ["outage", "censorship", "traffic", "recovery"]
SEVERITIES = ["low", "medium", "high"]
SIMULATED_SOURCES = ["Monitor", "Simulation", "Cloudflare", "OONI"]
MAX_REAL_EVENTS = 3

EVENT_MESSAGES = {
    "outage": [
        "Major ISP outage affecting {percentage}% of users in {region}",
        "Internet connectivity disrupted due to infrastructure failure",
        "Network outage reported in major metropolitan areas",
        "Widespread connectivity issues reported by multiple ISPs",
        "Critical infrastructure failure causing regional outage",
    ],
    "censorship": [
        "Social media platforms blocked during {reason}",
        "VPN services experiencing connectivity issues",
        "Access restrictions implemented on major websites",
        "Government-mandated internet filtering detected",
        "Deep packet inspection blocking encrypted traffic",
    ],
    "traffic": [
        "Unusual traffic spike detected in {region} data centers",
        "Network congestion reported during peak hours",
        "DDoS attack mitigated successfully",
        "Bandwidth utilization exceeding normal thresholds",
        "High-volume data transfer activity detected",
    ],
    "recovery": [
        "Internet services restored after {duration}-hour outage in {region}",
        "Network connectivity returning to normal levels",
        "Infrastructure repairs completed successfully",
        "Service restoration confirmed across affected regions",
        "Full network functionality restored",
    ],
}

REGIONS = ["Tehran", "Mumbai", "Sao Paulo", "Moscow", "Beijing", "London", "Tokyo", "Sydney"]
COUNTRIES = ["Iran", "India", "Brazil", "Russia", "China", "UK", "Japan", "Australia", "Myanmar", "Turkey", "Egypt", "Pakistan"]
REASONS = ["government meeting", "protests", "elections", "security concerns", "policy enforcement"]


def generate_message(event_type: str, rng: np.random.Generator) -> str:
    template = choice(rng, EVENT_MESSAGES[event_type])
    return (
        template
        .replace("{percentage}", str(randint(rng, 20, 79)))
        .replace("{region}", choice(rng, REGIONS))
        .replace("{duration}", str(randint(rng, 1, 6)))
        .replace("{reason}", choice(rng, REASONS))
    )


def simulated_event(rng: np.random.Generator, event_id: str, now: Optional[datetime] = None) -> Dict[str, Any]:
    event_type = choice(rng, EVENT_TYPES)
    return {
        "id": event_id,
        "type": event_type,
        "country": choice(rng, COUNTRIES),
        "message": generate_message(event_type, rng),
        "timestamp": iso_timestamp(now),
        "severity": choice(rng, SEVERITIES),
        "source": choice(rng, SIMULATED_SOURCES),
    }


def events_from_censorship(recent_events: List[Dict[str, Any]], stamp: int) -> List[Dict[str, Any]]:
    """Convert /api/ooni recent events into censorship feed items (at most three)."""
    items = []
    for index, event in enumerate(recent_events[:MAX_REAL_EVENTS]):
        ts = parse_timestamp(event.get("timestamp"))
        items.append({
            "id": f"ooni-{stamp}-{index}",
            "type": "censorship",
            "country": event.get("country") or "Unknown",
            "message": (
                f"{event.get('test_type') or 'Network'} anomaly detected: "
                f"{'Blocked content' if event.get('blocked') else 'Suspicious activity'}"
            ),
            "timestamp": iso_timestamp(ts.to_pydatetime()) if ts is not None else iso_timestamp(),
            "severity": "high" if event.get("blocked") else "medium",
            "source": "OONI",
        })
    return items


def build_feed(
    recent_events: List[Dict[str, Any]],
    rng: np.random.Generator,
    limit: int = 10,
    event_type: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Real censorship events first, then simulated events up to `limit`.

    With `event_type`, only matching items are kept (simulated items are
    drawn until the limit is met or a bounded number of draws is spent).
    """
    now = utc_now()
    stamp = int(now.timestamp() * 1000)

    feed = [item for item in events_from_censorship(recent_events, stamp)
            if event_type is None or item["type"] == event_type]

    attempts = 0
    while len(feed) < limit and attempts < limit * 20:
        item = simulated_event(rng, f"{stamp}-{attempts}", now)
        attempts += 1
        if event_type is None or item["type"] == event_type:
            feed.append(item)

    logger.debug(f"Built live feed with {len(feed)} items after {attempts} simulated draws")
    return feed[:limit]

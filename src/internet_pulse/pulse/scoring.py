"""
Daily pulse scoring - composite health score, freedom score, risk levels,
traffic anomaly detection and next-day predictions.
"""

import logging
from typing import Any, Dict, List

import numpy as np

from internet_pulse.utils.dates import iso_timestamp
from internet_pulse.utils.numbers import round_half_up

logger = logging.getLogger(__name__)

HEALTH_WEIGHTS = {"traffic": 0.3, "security": 0.25, "freedom": 0.25, "performance": 0.2}
ANOMALY_SIGMA = 2


def calculate_global_health_score(cloudflare: Dict[str, Any], ooni: Dict[str, Any]) -> int:
    """
    Weighted 0-100 score over traffic volume, attack load, blocking and speed.

    Each component is normalized onto 0-100 first:
        traffic     = min(100, requests / 1e12 * 100)
        security    = max(0, 100 - attacks / 1e6 * 10)
        freedom     = max(0, 100 - blocked / 1000 * 5)
        performance = min(100, avg_speed / 10)
    """
    traffic_score = min(100.0, cloudflare["traffic"]["http_requests"] / 1e12 * 100)
    security_score = max(0.0, 100 - cloudflare["security"]["attacks"] / 1_000_000 * 10)
    freedom_score = max(0.0, 100 - ooni["total_blocked"] / 1000 * 5)
    performance_score = min(100.0, cloudflare["performance"]["avg_speed"] / 10)

    weighted = (
        traffic_score * HEALTH_WEIGHTS["traffic"]
        + security_score * HEALTH_WEIGHTS["security"]
        + freedom_score * HEALTH_WEIGHTS["freedom"]
        + performance_score * HEALTH_WEIGHTS["performance"]
    )
    return int(round_half_up(weighted))


def calculate_freedom_score(ooni: Dict[str, Any]) -> int:
    total_tests = ooni.get("total_tests") or 1
    blocked_ratio = (ooni.get("total_blocked") or 0) / total_tests
    # countries beyond 50 with blocking cost half a point each
    diversity_penalty = max(0, (ooni.get("affected_countries") or 0) - 50) * 0.5

    return max(0, int(round_half_up(100 - blocked_ratio * 100 - diversity_penalty)))


def risk_level(score: float) -> str:
    if score > 70:
        return "high"
    if score > 40:
        return "medium"
    return "low"


def identify_risk_countries(ooni: Dict[str, Any], top_n: int = 5) -> List[Dict[str, Any]]:
    return [
        {**country, "risk_level": risk_level(country["risk_score"])}
        for country in ooni["country_risks"][:top_n]
    ]


def detect_traffic_anomalies(historical: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Flag the latest value when it sits more than 2 standard deviations from the mean.

    Uses the population standard deviation over the whole window,
    latest point included.
    """
    if not historical:
        return []

    values = np.array([point["value"] for point in historical], dtype=float)
    avg = values.mean()
    std_dev = values.std()
    latest = values[-1]

    if abs(latest - avg) > ANOMALY_SIGMA * std_dev:
        logger.info(f"Traffic anomaly: latest={latest:.3e} mean={avg:.3e} std={std_dev:.3e}")
        return [{
            "type": "spike" if latest > avg else "drop",
            "magnitude": f"{abs((latest - avg) / avg * 100):.1f}%",
            "timestamp": iso_timestamp(),
        }]

    return []


def generate_predictions(cloudflare: Dict[str, Any], ooni: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "traffic": {
            "trend": "increasing",
            "confidence": 85,
            "prediction": "Traffic expected to increase by 3-5% tomorrow based on weekly patterns",
        },
        "security": {
            "threat_level": "elevated" if cloudflare["security"]["attacks"] > 500_000 else "normal",
            "confidence": 78,
            "prediction": "Attack patterns suggest continued targeting of financial sectors",
        },
        "censorship": {
            "risk_level": "high" if len(ooni["new_incidents"]) > 2 else "moderate",
            "confidence": 72,
            "prediction": "Increased monitoring activity in regions with recent policy changes",
        },
    }

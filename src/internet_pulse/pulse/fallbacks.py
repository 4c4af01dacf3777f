"""
Substitute payloads used when an upstream source is unavailable.

Randomized values stay within 10% of realistic bases so the composite score
remains plausible when computed from fallback inputs.
"""

from datetime import timedelta
from typing import Any, Dict, List

import numpy as np

from internet_pulse.utils.dates import iso_date, iso_timestamp, utc_now
from internet_pulse.utils.reproducibility import randint, uniform

FALLBACK_BASES = {
    "http_requests": 1.2e12,
    "bytes": 500e12,
    "origins": 50_000_000,
    "attacks": 2_500_000,
    "mitigated": 2_400_000,
    "speed": 95,
    "p95_speed": 150,
}

TRAFFIC_TRENDS = ["Video streaming up 12%", "Gaming traffic steady", "Social media down 3%"]


def generate_fallback(kind: str, rng: np.random.Generator) -> float:
    """Base value for `kind` plus up to 10% of it."""
    base = FALLBACK_BASES[kind]
    return base + uniform(rng, 0, 1) * base * 0.1


def generate_traffic_trends() -> List[str]:
    return list(TRAFFIC_TRENDS)


def generate_historical_data(days: int, rng: np.random.Generator) -> List[Dict[str, Any]]:
    """Daily request volumes from `days` ago up to today (days + 1 points)."""
    today = utc_now()
    return [
        {"date": iso_date(today - timedelta(days=i)), "value": 1e12 + uniform(rng, 0, 2e11)}
        for i in range(days, -1, -1)
    ]


def cloudflare_fallback(rng: np.random.Generator) -> Dict[str, Any]:
    return {
        "traffic": {
            "http_requests": generate_fallback("http_requests", rng),
            "bytes_served": generate_fallback("bytes", rng),
            "origins": generate_fallback("origins", rng),
        },
        "security": {
            "attacks": generate_fallback("attacks", rng),
            "mitigated": generate_fallback("mitigated", rng),
        },
        "performance": {
            "avg_speed": generate_fallback("speed", rng),
            "p95_speed": generate_fallback("p95_speed", rng),
        },
        "trends": generate_traffic_trends(),
        "historical": generate_historical_data(30, rng),
        "last_update": iso_timestamp(),
    }


def ooni_fallback() -> Dict[str, Any]:
    return {
        "total_tests": 8500,
        "total_blocked": 342,
        "affected_countries": 67,
        "new_incidents": [],
        "trending_blocks": [
            {"domain": "twitter.com", "block_count": 15},
            {"domain": "facebook.com", "block_count": 12},
        ],
        "country_risks": [
            {"country": "Sample Country", "risk_score": 45.0, "domains_affected": 25, "total_tests": 150},
        ],
        "last_update": iso_timestamp(),
    }


def connectivity_fallback() -> Dict[str, Any]:
    return {
        "gaps": [{"country": "Sample Low", "internet_penetration": 25.3}],
        "growth": [{"country": "Sample Growth", "internet_penetration": 65.7}],
        "connectivity": {"global": 62.5, "mobile": 78.2},
        "last_update": iso_timestamp(),
    }


def censorship_report_fallback(rng: np.random.Generator) -> Dict[str, Any]:
    """Stand-in for the /ooni body: fixed summary, three sample events, five countries."""
    now = utc_now()
    samples = [
        ("fallback-1", "IR", "Iran", "twitter.com", 30, "AS12880"),
        ("fallback-2", "CN", "China", "facebook.com", 45, "AS4134"),
        ("fallback-3", "RU", "Russia", "instagram.com", 60, "AS12389"),
    ]
    return {
        "summary": {
            "total_tests": 1250,
            "blocked_sites": 45,
            "countries": 89,
            "last_update": iso_timestamp(now),
        },
        "count": randint(rng, 8, 17),
        "recent_events": [
            {
                "id": uid,
                "country": code,
                "country_name": name,
                "test_type": "web_connectivity",
                "blocked": True,
                "domain": domain,
                "timestamp": iso_timestamp(now - timedelta(minutes=minutes)),
                "asn": asn,
            }
            for uid, code, name, domain, minutes, asn in samples
        ],
        "country_summary": [
            {"country": "CN", "blocked": 25, "total": 100},
            {"country": "IR", "blocked": 18, "total": 45},
            {"country": "RU", "blocked": 12, "total": 67},
            {"country": "TR", "blocked": 8, "total": 34},
            {"country": "PK", "blocked": 6, "total": 28},
        ],
    }


FALLBACK_TOP_COUNTRIES = [
    ("IS", "Iceland", 99.01),
    ("NO", "Norway", 98.54),
    ("DK", "Denmark", 98.35),
    ("LU", "Luxembourg", 98.12),
    ("SE", "Sweden", 97.89),
    ("NL", "Netherlands", 97.45),
    ("CH", "Switzerland", 96.98),
    ("FI", "Finland", 96.54),
    ("DE", "Germany", 96.23),
    ("GB", "United Kingdom", 95.87),
]


def world_bank_report_fallback(rng: np.random.Generator) -> Dict[str, Any]:
    """Stand-in for the /worldbank body: ten synthetic years ending this year."""
    current_year = utc_now().year
    return {
        "global_trends": [
            {"year": current_year - 9 + i, "internet_users": 45 + i * 3.5 + uniform(rng, 0, 2)}
            for i in range(10)
        ],
        "top_countries": [
            {"country_code": code, "country_name": name, "latest_value": value}
            for code, name, value in FALLBACK_TOP_COUNTRIES
        ],
        "last_update": iso_timestamp(),
        "data_source": "Fallback data - World Bank format",
        "connectivity_issues": randint(rng, 9, 16),
    }

"""
Country internet speed rankings.

Rankings order countries by a weighted score favouring fixed broadband:
    score = 0.4 * mobile_speed + 0.6 * broadband_speed   (Mbps)
Ties keep input order. Ranks start at 1.
"""

import logging
from typing import Any, Dict, List, Optional

import numpy as np

from internet_pulse.utils.dates import iso_date
from internet_pulse.utils.numbers import round_half_up
from internet_pulse.utils.reproducibility import uniform

logger = logging.getLogger(__name__)

MOBILE_WEIGHT = 0.4
BROADBAND_WEIGHT = 0.6

SPEED_SOURCE = "Wikipedia - List of countries by Internet connection speeds"
BASE_DATA_DATE = "2025-08-01"

# country, country_code, continent, mobile Mbps, broadband Mbps
BASE_SPEED_DATA = [
    ("Monaco", "MC", "Europe", 121.4, 319.59),
    ("Singapore", "SG", "Asia", 95.2, 295.67),
    ("Chile", "CL", "South America", 82.1, 278.94),
    ("Denmark", "DK", "Europe", 88.7, 267.85),
    ("Switzerland", "CH", "Europe", 85.3, 256.73),
    ("Netherlands", "NL", "Europe", 79.4, 245.62),
    ("Iceland", "IS", "Europe", 92.1, 234.51),
    ("Norway", "NO", "Europe", 86.8, 223.40),
    ("Luxembourg", "LU", "Europe", 77.9, 212.29),
    ("Sweden", "SE", "Europe", 74.6, 201.18),
    ("Finland", "FI", "Europe", 73.2, 195.67),
    ("France", "FR", "Europe", 71.8, 189.45),
    ("South Korea", "KR", "Asia", 145.8, 185.23),
    ("Germany", "DE", "Europe", 68.4, 178.91),
    ("Japan", "JP", "Asia", 89.2, 172.34),
    ("United Kingdom", "GB", "Europe", 65.1, 167.82),
    ("Spain", "ES", "Europe", 63.7, 162.45),
    ("Italy", "IT", "Europe", 61.3, 156.78),
    ("Belgium", "BE", "Europe", 59.9, 151.23),
    ("Austria", "AT", "Europe", 58.5, 145.67),
    ("Canada", "CA", "North America", 92.8, 142.34),
    ("United States", "US", "North America", 95.5, 138.91),
    ("Australia", "AU", "Oceania", 87.3, 135.45),
    ("Portugal", "PT", "Europe", 54.2, 131.78),
    ("New Zealand", "NZ", "Oceania", 83.7, 128.23),
    ("Ireland", "IE", "Europe", 51.8, 124.67),
    ("United Arab Emirates", "AE", "Asia", 178.4, 121.34),
    ("Israel", "IL", "Asia", 67.2, 117.91),
    ("China", "CN", "Asia", 112.7, 114.45),
    ("Brazil", "BR", "South America", 54.6, 89.23),
    ("Thailand", "TH", "Asia", 67.8, 85.67),
    ("Malaysia", "MY", "Asia", 61.4, 82.34),
    ("Mexico", "MX", "North America", 45.2, 78.91),
    ("South Africa", "ZA", "Africa", 38.7, 75.45),
    ("India", "IN", "Asia", 42.3, 71.78),
]


def base_speed_data() -> List[Dict[str, Any]]:
    return [
        {
            "country": country,
            "country_code": code,
            "continent": continent,
            "mobile_speed": mobile,
            "broadband_speed": broadband,
        }
        for country, code, continent, mobile, broadband in BASE_SPEED_DATA
    ]


def weighted_score(row: Dict[str, Any]) -> float:
    return row["mobile_speed"] * MOBILE_WEIGHT + row["broadband_speed"] * BROADBAND_WEIGHT


def rank_by_weighted_score(rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Sort descending by weighted score and assign 1-based ranks (input is not mutated)."""
    ordered = sorted(rows, key=weighted_score, reverse=True)
    return [{**row, "rank": i + 1} for i, row in enumerate(ordered)]


def vary_speed_data(rows: List[Dict[str, Any]], rng: np.random.Generator) -> List[Dict[str, Any]]:
    """Monthly jitter: mobile +/-5 Mbps, broadband +/-10 Mbps."""
    return [
        {
            **row,
            "mobile_speed": row["mobile_speed"] + (uniform(rng, 0, 1) - 0.5) * 10,
            "broadband_speed": row["broadband_speed"] + (uniform(rng, 0, 1) - 0.5) * 20,
        }
        for row in rows
    ]


def _known_metadata() -> Dict[str, Dict[str, str]]:
    return {
        country: {"country_code": code, "continent": continent}
        for country, code, continent, _, _ in BASE_SPEED_DATA
    }


def process_speed_data(rows: List[Dict[str, Any]], last_updated: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Normalize raw or jittered rows into ranked records.

    Speeds are rounded to one decimal. Countries outside the base table keep
    any code/continent they carry, otherwise get 'UN' / 'Unknown'.
    """
    last_updated = last_updated or iso_date()
    known = _known_metadata()

    enriched = []
    for row in rows:
        meta = known.get(row["country"], {})
        enriched.append({
            "country": row["country"],
            "country_code": row.get("country_code") or meta.get("country_code", "UN"),
            "continent": row.get("continent") or meta.get("continent", "Unknown"),
            "mobile_speed": round_half_up(row["mobile_speed"], 1),
            "broadband_speed": round_half_up(row["broadband_speed"], 1),
            "last_updated": last_updated,
        })

    ranked = rank_by_weighted_score(enriched)
    logger.info(f"Ranked {len(ranked)} countries by weighted speed score")
    return ranked


def continents(rows: List[Dict[str, Any]]) -> List[str]:
    return sorted({row["continent"] for row in rows})

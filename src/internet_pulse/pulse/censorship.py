"""
Censorship processing - turns raw OONI measurements into dashboard aggregates.

A measurement counts as blocked only when its `anomaly` flag is literally True
(OONI also emits null/false). Country and domain tallies are computed with
pandas; input order is kept wherever sort keys tie.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from internet_pulse.utils.dates import iso_date, parse_timestamp, utc_now
from internet_pulse.utils.reproducibility import randint

logger = logging.getLogger(__name__)

# OONI's own code for probes it could not geolocate
UNKNOWN_COUNTRY = "ZZ"


def measurements_frame(measurements: List[Dict[str, Any]]) -> pd.DataFrame:
    """Project the fields used downstream into a DataFrame (one row per measurement)."""
    return pd.DataFrame({
        "country": [m.get("probe_cc") or UNKNOWN_COUNTRY for m in measurements],
        "domain": [m.get("input") for m in measurements],
        "blocked": [m.get("anomaly") is True for m in measurements],
    }, columns=["country", "domain", "blocked"])


def count_anomalies(measurements: List[Dict[str, Any]]) -> int:
    return sum(1 for m in measurements if m.get("anomaly") is True)


def count_countries(measurements: List[Dict[str, Any]]) -> int:
    return len({m.get("probe_cc") for m in measurements})


def outage_count(anomalies: int, rng: np.random.Generator) -> int:
    """Anomaly count plus 0-4 of variance, clamped to [5, 50]."""
    return min(50, max(5, anomalies + randint(rng, 0, 4)))


def recent_events(measurements: List[Dict[str, Any]], limit: int = 10) -> List[Dict[str, Any]]:
    events = []
    for m in measurements[:limit]:
        events.append({
            "id": m.get("measurement_uid"),
            "country": m.get("probe_cc"),
            "country_name": m.get("probe_cc"),
            "test_type": m.get("test_name"),
            "blocked": m.get("anomaly") is True,
            "domain": m.get("input") or "Unknown",
            "timestamp": m.get("test_start_time"),
            "asn": str(m["probe_asn"]) if m.get("probe_asn") is not None else None,
        })
    return events


def country_summary(measurements: List[Dict[str, Any]], top_n: int = 10) -> List[Dict[str, Any]]:
    """Blocked/total per probe country, most blocked first."""
    df = measurements_frame(measurements)
    if df.empty:
        return []

    grouped = (
        df.groupby("country", sort=False)
        .agg(blocked=("blocked", "sum"), total=("blocked", "size"))
        .reset_index()
        .sort_values("blocked", ascending=False, kind="stable")
        .head(top_n)
    )
    return [
        {"country": row.country, "blocked": int(row.blocked), "total": int(row.total)}
        for row in grouped.itertuples(index=False)
    ]


def _is_new_incident(incident: Dict[str, Any], today: str, now: datetime) -> bool:
    start = incident.get("start_date")
    if start == today:
        return True
    ts = parse_timestamp(start)
    ref = pd.Timestamp(now)
    if ref.tzinfo is None:
        ref = ref.tz_localize("UTC")
    return ts is not None and ts > ref - pd.Timedelta(hours=24)


def process_censorship_data(
    measurements: List[Dict[str, Any]],
    incidents: List[Dict[str, Any]],
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Aggregate a week of OONI measurements and the incident list.

    Args:
        measurements: Raw OONI measurement records
        incidents: Raw OONI incident records
        now: Reference time for "new" incidents (defaults to current UTC time)

    Returns:
        Dict with total_tests, total_blocked, affected_countries,
        new_incidents (first 5), trending_blocks (top 10 domains) and
        country_risks (top 15 by block ratio)
    """
    now = now or utc_now()
    today = iso_date(now)
    df = measurements_frame(measurements)

    new_incidents = [i for i in incidents if _is_new_incident(i, today, now)]

    if df.empty:
        return {
            "total_tests": 0,
            "total_blocked": 0,
            "affected_countries": 0,
            "new_incidents": new_incidents[:5],
            "trending_blocks": [],
            "country_risks": [],
        }

    blocked = df[df["blocked"]]
    domain_counts = (
        blocked.dropna(subset=["domain"])
        .groupby("domain", sort=False)
        .size()
        .sort_values(ascending=False, kind="stable")
        .head(10)
    )

    per_country = (
        df.groupby("country", sort=False)
        .agg(
            total=("blocked", "size"),
            blocked=("blocked", "sum"),
            domains_affected=("domain", "nunique"),
        )
        .reset_index()
    )
    per_country["risk_score"] = per_country["blocked"] / per_country["total"] * 100
    per_country = per_country.sort_values("risk_score", ascending=False, kind="stable").head(15)

    logger.debug(f"Processed {len(df)} measurements across {df['country'].nunique()} countries")

    return {
        "total_tests": int(len(df)),
        "total_blocked": int(len(blocked)),
        "affected_countries": int(df["country"].nunique()),
        "new_incidents": new_incidents[:5],
        "trending_blocks": [
            {"domain": domain, "block_count": int(count)} for domain, count in domain_counts.items()
        ],
        "country_risks": [
            {
                "country": row.country,
                "risk_score": float(row.risk_score),
                "domains_affected": int(row.domains_affected),
                "total_tests": int(row.total),
            }
            for row in per_country.itertuples(index=False)
        ],
    }

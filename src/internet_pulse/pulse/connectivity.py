"""
Connectivity processing - World Bank indicator rows to penetration aggregates.

World Bank rows look like:
    {"country": {"id": "FR", "value": "France"}, "date": "2023", "value": 85.3, ...}
Rows whose value is null are dropped before any aggregation. The "all"
query also returns regional aggregates (e.g. "World", "Arab World"); they
are treated like any other country.
"""

import logging
from typing import Any, Dict, List

import numpy as np
import pandas as pd

from internet_pulse.utils.dates import iso_timestamp
from internet_pulse.utils.numbers import round_half_up
from internet_pulse.utils.reproducibility import randint

logger = logging.getLogger(__name__)

WORLD_BANK_SOURCE = "World Bank - Internet users (per 100 people)"


def indicator_frame(rows: List[Dict[str, Any]]) -> pd.DataFrame:
    """Non-null indicator rows as a DataFrame with code, name, year and value columns."""
    records = []
    for row in rows:
        if row.get("value") is None:
            continue
        country = row.get("country") or {}
        records.append({
            "code": country.get("id"),
            "name": country.get("value"),
            "year": int(row["date"]),
            "value": float(row["value"]),
        })
    return pd.DataFrame.from_records(records, columns=["code", "name", "year", "value"])


def latest_by_country(df: pd.DataFrame) -> pd.DataFrame:
    """Most recent year's row per country code, in first-seen country order."""
    if df.empty:
        return df
    order = {code: i for i, code in enumerate(df["code"].drop_duplicates())}
    latest = df.sort_values("year", ascending=False, kind="stable").drop_duplicates("code")
    return latest.assign(_order=latest["code"].map(order)).sort_values("_order").drop(columns="_order")


def process_world_bank_data(rows: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Global yearly averages and top-20 countries by latest penetration.

    Returns:
        Dict with global_trends, top_countries, last_update and data_source
    """
    df = indicator_frame(rows)
    if df.empty:
        logger.warning("No non-null World Bank rows to process")
        return {
            "global_trends": [],
            "top_countries": [],
            "last_update": iso_timestamp(),
            "data_source": WORLD_BANK_SOURCE,
        }

    yearly = df.groupby("year")["value"].mean().sort_index()
    global_trends = [
        {"year": int(year), "internet_users": round_half_up(float(mean), 2)}
        for year, mean in yearly.items()
    ]

    latest = latest_by_country(df)
    latest = latest[latest["value"] > 0].sort_values("value", ascending=False, kind="stable").head(20)

    top_countries = []
    for row in latest.itertuples(index=False):
        history = df[df["code"] == row.code].sort_values("year", ascending=False, kind="stable")
        top_countries.append({
            "country_code": row.code,
            "country_name": row.name or row.code,
            "latest_value": float(row.value),
            "trend": [
                {
                    "year": int(h.year),
                    "value": float(h.value),
                    "country_name": h.name,
                    "country_code": h.code,
                }
                for h in history.itertuples(index=False)
            ],
        })

    return {
        "global_trends": global_trends,
        "top_countries": top_countries,
        "last_update": iso_timestamp(),
        "data_source": WORLD_BANK_SOURCE,
    }


def connectivity_issues(rows: List[Dict[str, Any]], rng: np.random.Generator) -> int:
    """
    Connectivity issue estimate from low-penetration observations since 2020.

    Every (country, year) row under 50% counts; the total is scaled down by 10,
    clamped to [5, 25], then 0-4 of variance is added.
    """
    low_penetration = sum(
        1 for row in rows
        if row.get("value") is not None and str(row.get("date", "")) >= "2020" and row["value"] < 50
    )
    base = min(25, max(5, low_penetration // 10))
    return base + randint(rng, 0, 4)


def process_connectivity_data(
    penetration_rows: List[Dict[str, Any]],
    mobile_rows: List[Dict[str, Any]],
) -> Dict[str, Any]:
    """
    Digital divide view: internet penetration joined with mobile subscriptions.

    Returns:
        Dict with gaps (penetration < 50, lowest first), growth
        (20 < penetration < 80, highest first), connectivity means and last_update
    """
    internet = latest_by_country(indicator_frame(penetration_rows))
    mobile = latest_by_country(indicator_frame(mobile_rows))

    countries = []
    mobile_by_code = dict(zip(mobile["code"], mobile["value"])) if not mobile.empty else {}
    for row in internet.itertuples(index=False):
        entry = {
            "country": row.name,
            "code": row.code,
            "internet_penetration": float(row.value),
            "year": int(row.year),
        }
        if row.code in mobile_by_code:
            entry["mobile_penetration"] = float(mobile_by_code[row.code])
        countries.append(entry)

    gaps = sorted(
        (c for c in countries if c["internet_penetration"] < 50),
        key=lambda c: c["internet_penetration"],
    )[:10]
    growth = sorted(
        (c for c in countries if 20 < c["internet_penetration"] < 80),
        key=lambda c: c["internet_penetration"],
        reverse=True,
    )[:10]

    if countries:
        global_mean = float(np.mean([c["internet_penetration"] for c in countries]))
        mobile_mean = float(np.mean([c.get("mobile_penetration", 0.0) for c in countries]))
    else:
        global_mean = mobile_mean = 0.0

    return {
        "gaps": gaps,
        "growth": growth,
        "connectivity": {"global": global_mean, "mobile": mobile_mean},
        "last_update": iso_timestamp(),
    }

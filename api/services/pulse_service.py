"""
Daily Pulse Service - composite report from Cloudflare Radar, OONI and the World Bank

The three sources are fetched in parallel. Each fetcher degrades to its own
fallback payload, so a pulse is produced even with every upstream down.
Internal dicts use snake_case keys; the DailyPulse schema maps them to the
wire format.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Any, Dict, Optional

import numpy as np

from internet_pulse.adapters.cloudflare.radar import CloudflareRadarAPI, summary_value
from internet_pulse.adapters.ooni.ooni import OONI_API
from internet_pulse.adapters.worldbank.worldbank import WorldBankAPI
from internet_pulse.pulse.censorship import process_censorship_data
from internet_pulse.pulse.connectivity import process_connectivity_data
from internet_pulse.pulse.fallbacks import (
    cloudflare_fallback,
    connectivity_fallback,
    generate_fallback,
    generate_historical_data,
    generate_traffic_trends,
    ooni_fallback,
)
from internet_pulse.pulse.highlights import generate_daily_highlights
from internet_pulse.pulse.scoring import (
    calculate_freedom_score,
    calculate_global_health_score,
    detect_traffic_anomalies,
    generate_predictions,
    identify_risk_countries,
)
from internet_pulse.utils.dates import days_ago, iso_date, iso_timestamp, utc_now

from api.repositories.base import BaseRepository
from api.schemas.pulse import DailyPulse, DailyPulseHistoryResponse

logger = logging.getLogger(__name__)

HISTORY_DAYS = 30
OONI_WINDOW_DAYS = 7
OONI_MEASUREMENT_LIMIT = 1000


def fetch_cloudflare_radar_data(cloudflare: CloudflareRadarAPI, rng: np.random.Generator) -> Dict[str, Any]:
    """
    HTTP, layer 3 attack and speed summaries.

    Fields Radar leaves out (or reports as zero) are filled from fallback bases.
    """
    try:
        with ThreadPoolExecutor(max_workers=3) as pool:
            http_future = pool.submit(cloudflare.get_http_summary)
            attack_future = pool.submit(cloudflare.get_layer3_attack_summary)
            speed_future = pool.submit(cloudflare.get_speed_summary)
            http_data = http_future.result()
            attack_data = attack_future.result()
            speed_data = speed_future.result()

        return {
            "traffic": {
                "http_requests": summary_value(http_data, "http_requests_1d") or generate_fallback("http_requests", rng),
                "bytes_served": summary_value(http_data, "bytes_1d") or generate_fallback("bytes", rng),
                "origins": summary_value(http_data, "origins_1d") or generate_fallback("origins", rng),
            },
            "security": {
                "attacks": summary_value(attack_data, "attacks_1d") or generate_fallback("attacks", rng),
                "mitigated": summary_value(attack_data, "mitigated_1d") or generate_fallback("mitigated", rng),
            },
            "performance": {
                "avg_speed": summary_value(speed_data, "avg_speed_1d") or generate_fallback("speed", rng),
                "p95_speed": summary_value(speed_data, "p95_speed_1d") or generate_fallback("p95_speed", rng),
            },
            "trends": generate_traffic_trends(),
            "historical": generate_historical_data(HISTORY_DAYS, rng),
            "last_update": iso_timestamp(),
        }
    except Exception as e:
        logger.error(f"Cloudflare Radar fetch error: {e}")
        return cloudflare_fallback(rng)


def fetch_ooni_data(ooni: OONI_API, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Last week of OONI measurements plus the incident list, aggregated."""
    now = now or utc_now()
    today = iso_date(now)
    week_ago = iso_date(days_ago(OONI_WINDOW_DAYS, now))

    try:
        with ThreadPoolExecutor(max_workers=2) as pool:
            measurements_future = pool.submit(ooni.get_measurements_between, week_ago, today, OONI_MEASUREMENT_LIMIT)
            incidents_future = pool.submit(ooni.get_incidents)
            measurements = measurements_future.result()
            incidents = incidents_future.result()

        processed = process_censorship_data(measurements, incidents, now=now)
        return {**processed, "last_update": iso_timestamp()}
    except Exception as e:
        logger.error(f"OONI fetch error: {e}")
        return ooni_fallback()


def fetch_connectivity_data(worldbank: WorldBankAPI, now: Optional[datetime] = None) -> Dict[str, Any]:
    current_year = (now or utc_now()).year

    try:
        with ThreadPoolExecutor(max_workers=2) as pool:
            penetration_future = pool.submit(worldbank.get_internet_users, current_year - 1, current_year, 300)
            mobile_future = pool.submit(worldbank.get_mobile_subscriptions, current_year - 1, current_year, 300)
            penetration = penetration_future.result()
            mobile = mobile_future.result()

        return process_connectivity_data(penetration, mobile)
    except Exception as e:
        logger.error(f"World Bank fetch error: {e}")
        return connectivity_fallback()


def build_daily_pulse(
    cloudflare: CloudflareRadarAPI,
    ooni: OONI_API,
    worldbank: WorldBankAPI,
    rng: np.random.Generator,
) -> DailyPulse:
    """
    Assemble today's pulse.

    Args:
        cloudflare: Cloudflare Radar adapter
        ooni: OONI adapter
        worldbank: World Bank adapter
        rng: Generator for the fallback values and historical traffic series

    Returns:
        DailyPulse with health score, traffic, freedom, digital divide,
        highlights, predictions and per-source freshness stamps
    """
    now = utc_now()
    logger.info(f"Generating daily pulse for {iso_date(now)}")

    with ThreadPoolExecutor(max_workers=3) as pool:
        cloudflare_future = pool.submit(fetch_cloudflare_radar_data, cloudflare, rng)
        ooni_future = pool.submit(fetch_ooni_data, ooni, now)
        connectivity_future = pool.submit(fetch_connectivity_data, worldbank, now)
        cloudflare_data = cloudflare_future.result()
        ooni_data = ooni_future.result()
        connectivity_data = connectivity_future.result()

    pulse = {
        "date": iso_date(now),
        "timestamp": iso_timestamp(now),
        "health_score": calculate_global_health_score(cloudflare_data, ooni_data),
        "traffic": {
            "global": cloudflare_data["traffic"],
            "security": cloudflare_data["security"],
            "trends": cloudflare_data["trends"],
            "anomalies": detect_traffic_anomalies(cloudflare_data["historical"]),
        },
        "freedom": {
            "score": calculate_freedom_score(ooni_data),
            "incidents": ooni_data["new_incidents"],
            "trending": ooni_data["trending_blocks"],
            "risk_countries": identify_risk_countries(ooni_data),
        },
        "digital_divide": {
            "penetration_gaps": connectivity_data["gaps"],
            "emerging_markets": connectivity_data["growth"],
            "connectivity": connectivity_data["connectivity"],
        },
        "highlights": generate_daily_highlights(cloudflare_data, ooni_data, connectivity_data),
        "predictions": generate_predictions(cloudflare_data, ooni_data),
        "data_freshness": {
            "cloudflare": cloudflare_data["last_update"],
            "ooni": ooni_data["last_update"],
            "world_bank": connectivity_data["last_update"],
        },
    }

    logger.info(f"Daily pulse ready: health score {pulse['health_score']}")
    return DailyPulse.model_validate(pulse)


def get_history(repository: BaseRepository, limit: Optional[int] = None) -> DailyPulseHistoryResponse:
    stored = repository.get_daily_pulse_history()
    selected = stored[:limit] if limit is not None else stored
    return DailyPulseHistoryResponse(
        pulses=[DailyPulse.model_validate(p) for p in selected],
        total_count=len(stored),
    )

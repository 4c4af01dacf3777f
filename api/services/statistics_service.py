"""
Statistics Service - headline numbers for the statistics panel

Active outages come from the first live source that answers, in order:
OONI outage count, Cloudflare outage estimate, World Bank connectivity
issues, then a constant. Regional traffic falls back to synthetic regions
when Cloudflare is down.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from internet_pulse.adapters.cloudflare.radar import CloudflareRadarAPI
from internet_pulse.adapters.ooni.ooni import OONI_API
from internet_pulse.adapters.worldbank.worldbank import WorldBankAPI
from internet_pulse.pulse.traffic import short_region_name, traffic_fallback
from internet_pulse.pulse.uptime import generate_uptime_data, summarize_uptime
from internet_pulse.utils.dates import iso_timestamp
from internet_pulse.utils.numbers import round_half_up

from api.schemas.statistics import RegionalTraffic, StatisticsResponse, UptimeSummary
from api.schemas.traffic import TrafficResponse
from api.services.censorship_service import build_censorship_report
from api.services.connectivity_service import build_connectivity_report
from api.services.traffic_service import build_traffic_summary

logger = logging.getLogger(__name__)

DEFAULT_ACTIVE_OUTAGES = 10


def resolve_active_outages(
    ooni: OONI_API,
    traffic: Optional[TrafficResponse],
    worldbank: WorldBankAPI,
    rng: np.random.Generator,
) -> Tuple[int, str]:
    """`traffic` is the live Cloudflare summary, None when Cloudflare failed."""
    try:
        return build_censorship_report(ooni, rng).count, "ooni"
    except Exception as e:
        logger.warning(f"OONI outage count unavailable: {e}")

    if traffic is not None:
        return traffic.outages, "cloudflare"

    try:
        return build_connectivity_report(worldbank, rng).connectivity_issues, "worldbank"
    except Exception as e:
        logger.warning(f"World Bank connectivity issues unavailable: {e}")

    return DEFAULT_ACTIVE_OUTAGES, "default"


def get_statistics(
    cloudflare: CloudflareRadarAPI,
    ooni: OONI_API,
    worldbank: WorldBankAPI,
    rng: np.random.Generator,
) -> StatisticsResponse:
    try:
        traffic = build_traffic_summary(cloudflare, rng)
    except Exception as e:
        logger.warning(f"Cloudflare traffic unavailable: {e}")
        traffic = None

    active_outages, outage_source = resolve_active_outages(ooni, traffic, worldbank, rng)

    regions = traffic.regions if traffic is not None else TrafficResponse.model_validate(traffic_fallback(rng)).regions
    regional = [
        RegionalTraffic(region=short_region_name(r.name), traffic=int(round_half_up(r.traffic)))
        for r in regions
    ]

    return StatisticsResponse(
        active_outages=active_outages,
        outage_source=outage_source,
        regional_traffic=regional,
        uptime=UptimeSummary.model_validate(summarize_uptime(generate_uptime_data(rng))),
        last_update=iso_timestamp(),
    )

"""
Traffic Service - Cloudflare Radar traffic summary for the dashboard

Any upstream failure is logged and answered with synthetic traffic data.
"""

import logging

import numpy as np

from internet_pulse.adapters.cloudflare.radar import CloudflareRadarAPI
from internet_pulse.pulse.traffic import traffic_fallback, traffic_summary

from api.schemas.traffic import TrafficResponse

logger = logging.getLogger(__name__)


def build_traffic_summary(cloudflare: CloudflareRadarAPI, rng: np.random.Generator) -> TrafficResponse:
    return TrafficResponse.model_validate(traffic_summary(cloudflare.get_os_summary(), rng))


def get_traffic_summary(cloudflare: CloudflareRadarAPI, rng: np.random.Generator) -> TrafficResponse:
    try:
        return build_traffic_summary(cloudflare, rng)
    except Exception as e:
        logger.error(f"Cloudflare API error: {e}")
        return TrafficResponse.model_validate(traffic_fallback(rng))

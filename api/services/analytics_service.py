"""
Analytics Service - modelled regional traffic patterns and speed figures
"""

import logging
from datetime import datetime
from typing import Optional

import numpy as np

from internet_pulse.pulse import patterns, speed_analytics
from internet_pulse.utils.dates import iso_timestamp, utc_now

from api.schemas.analytics import SpeedAnalyticsResponse, TrafficPatternsResponse

logger = logging.getLogger(__name__)


def get_traffic_patterns(rng: np.random.Generator, now: Optional[datetime] = None) -> TrafficPatternsResponse:
    now = now or utc_now()
    current = patterns.generate_traffic_patterns(rng, now)
    regions = patterns.regional_summary(current, rng)
    logger.debug(f"Traffic patterns for {now.strftime('%A')} {now.hour:02d}:00 UTC")

    return TrafficPatternsResponse(
        patterns=current,
        regions=regions,
        peak_hours=patterns.peak_hours(),
        hourly_pattern=patterns.hourly_pattern(rng),
        global_traffic=patterns.global_traffic(regions),
        last_update=iso_timestamp(now),
    )


def get_speed_analytics(rng: np.random.Generator, now: Optional[datetime] = None) -> SpeedAnalyticsResponse:
    now = now or utc_now()
    samples = speed_analytics.generate_speed_data(rng, now)

    return SpeedAnalyticsResponse(
        regions=samples,
        **speed_analytics.global_speed_stats(samples),
        last_update=iso_timestamp(now),
    )

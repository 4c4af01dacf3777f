"""
Censorship Service - OONI measurement summary for the dashboard
"""

import logging

import numpy as np

from internet_pulse.adapters.ooni.ooni import OONI_API
from internet_pulse.pulse import censorship
from internet_pulse.pulse.fallbacks import censorship_report_fallback
from internet_pulse.utils.dates import iso_timestamp

from api.schemas.censorship import CensorshipResponse

logger = logging.getLogger(__name__)

RECENT_MEASUREMENTS = 50


def build_censorship_report(ooni: OONI_API, rng: np.random.Generator) -> CensorshipResponse:
    """Summarize the latest OONI measurements. Upstream errors propagate."""
    measurements = ooni.get_recent_measurements(limit=RECENT_MEASUREMENTS)
    anomalies = censorship.count_anomalies(measurements)
    body = {
        "summary": {
            "total_tests": len(measurements),
            "blocked_sites": anomalies,
            "countries": censorship.count_countries(measurements),
            "last_update": iso_timestamp(),
        },
        "count": censorship.outage_count(anomalies, rng),
        "recent_events": censorship.recent_events(measurements),
        "country_summary": censorship.country_summary(measurements),
    }
    logger.info(f"OONI: {anomalies} anomalies in {len(measurements)} measurements")
    return CensorshipResponse.model_validate(body)


def get_censorship_report(ooni: OONI_API, rng: np.random.Generator) -> CensorshipResponse:
    """
    Summarize the latest OONI measurements.

    Args:
        ooni: OONI adapter
        rng: Generator for the outage count variance

    Returns:
        CensorshipResponse (fallback sample data when OONI is unreachable)
    """
    try:
        return build_censorship_report(ooni, rng)
    except Exception as e:
        logger.error(f"OONI API error: {e}")
        return CensorshipResponse.model_validate(censorship_report_fallback(rng))

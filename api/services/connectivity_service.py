"""
Connectivity Service - World Bank internet penetration trends
"""

import logging

import numpy as np

from internet_pulse.adapters.worldbank.worldbank import WorldBankAPI
from internet_pulse.pulse.connectivity import connectivity_issues, process_world_bank_data
from internet_pulse.pulse.fallbacks import world_bank_report_fallback
from internet_pulse.utils.dates import utc_now

from api.schemas.connectivity import ConnectivityResponse

logger = logging.getLogger(__name__)

TREND_YEARS = 10


def build_connectivity_report(worldbank: WorldBankAPI, rng: np.random.Generator) -> ConnectivityResponse:
    current_year = utc_now().year
    rows = worldbank.get_internet_users(current_year - TREND_YEARS, current_year, per_page=1000)
    return ConnectivityResponse.model_validate({
        **process_world_bank_data(rows),
        "connectivity_issues": connectivity_issues(rows, rng),
    })


def get_connectivity_report(worldbank: WorldBankAPI, rng: np.random.Generator) -> ConnectivityResponse:
    try:
        return build_connectivity_report(worldbank, rng)
    except Exception as e:
        logger.error(f"World Bank API error: {e}")
        return ConnectivityResponse.model_validate(world_bank_report_fallback(rng))

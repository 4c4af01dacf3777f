"""
Statistics Router - numbers behind the statistics panel
"""

import numpy as np
from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from internet_pulse.adapters.cloudflare.radar import CloudflareRadarAPI
from internet_pulse.adapters.ooni.ooni import OONI_API
from internet_pulse.adapters.worldbank.worldbank import WorldBankAPI

from api.dependencies import get_cloudflare, get_ooni, get_random, get_worldbank
from api.schemas.statistics import StatisticsResponse
from api.services import statistics_service

router = APIRouter()


@router.get("/statistics", response_model=StatisticsResponse)
async def get_statistics(
    cloudflare: CloudflareRadarAPI = Depends(get_cloudflare),
    ooni: OONI_API = Depends(get_ooni),
    worldbank: WorldBankAPI = Depends(get_worldbank),
    rng: np.random.Generator = Depends(get_random),
) -> StatisticsResponse:
    """Active outages, regional traffic and a week of uptime."""
    return await run_in_threadpool(statistics_service.get_statistics, cloudflare, ooni, worldbank, rng)

"""
Cron Router - scheduled jobs

Both jobs accept POST (scheduler) and GET (manual trigger).
"""

import logging

import numpy as np
from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from internet_pulse.adapters.cloudflare.radar import CloudflareRadarAPI
from internet_pulse.adapters.ooni.ooni import OONI_API
from internet_pulse.adapters.wikipedia.wikipedia import WikipediaSpeedsAPI
from internet_pulse.adapters.worldbank.worldbank import WorldBankAPI
from internet_pulse.utils.dates import iso_timestamp

from api.dependencies import (
    get_cloudflare,
    get_ooni,
    get_random,
    get_repository,
    get_wikipedia,
    get_worldbank,
)
from api.repositories.base import BaseRepository
from api.schemas.common import ErrorResponse
from api.schemas.cron import CronErrorResponse, DailyUpdateResponse, MonthlySpeedUpdateResponse
from api.services import cron_service, speed_service

router = APIRouter()
logger = logging.getLogger(__name__)


@router.api_route(
    "/daily-update",
    methods=["GET", "POST"],
    response_model=DailyUpdateResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
async def daily_update(
    cloudflare: CloudflareRadarAPI = Depends(get_cloudflare),
    ooni: OONI_API = Depends(get_ooni),
    worldbank: WorldBankAPI = Depends(get_worldbank),
    repository: BaseRepository = Depends(get_repository),
    rng: np.random.Generator = Depends(get_random),
):
    """Generate and store today's pulse, plus social and newsletter content."""
    try:
        return await run_in_threadpool(cron_service.run_daily_update, cloudflare, ooni, worldbank, repository, rng)
    except Exception as e:
        logger.error(f"Cron job error: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to execute daily update"})


@router.api_route(
    "/monthly-speed-update",
    methods=["GET", "POST"],
    response_model=MonthlySpeedUpdateResponse,
    responses={500: {"model": CronErrorResponse}},
)
async def monthly_speed_update(
    wikipedia: WikipediaSpeedsAPI = Depends(get_wikipedia),
    repository: BaseRepository = Depends(get_repository),
    rng: np.random.Generator = Depends(get_random),
):
    """Refresh the speed rankings snapshot (Wikipedia, else varied base data)."""
    try:
        return await run_in_threadpool(speed_service.run_monthly_update, wikipedia, repository, rng)
    except Exception as e:
        logger.error(f"Monthly speed update failed: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to update monthly data", "timestamp": iso_timestamp(), "details": str(e)},
        )

"""
Daily Pulse Router - composite internet health report
"""

import logging

import numpy as np
from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from internet_pulse.adapters.cloudflare.radar import CloudflareRadarAPI
from internet_pulse.adapters.ooni.ooni import OONI_API
from internet_pulse.adapters.worldbank.worldbank import WorldBankAPI

from api.dependencies import get_cloudflare, get_ooni, get_random, get_repository, get_worldbank
from api.repositories.base import BaseRepository
from api.schemas.common import ErrorResponse
from api.schemas.pulse import DailyPulse, DailyPulseHistoryResponse
from api.services import pulse_service

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "/daily-pulse",
    response_model=DailyPulse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
async def get_daily_pulse(
    cloudflare: CloudflareRadarAPI = Depends(get_cloudflare),
    ooni: OONI_API = Depends(get_ooni),
    worldbank: WorldBankAPI = Depends(get_worldbank),
    rng: np.random.Generator = Depends(get_random),
):
    """
    Today's pulse: health score, traffic, internet freedom, digital divide,
    highlights and predictions for tomorrow.
    """
    try:
        return await run_in_threadpool(pulse_service.build_daily_pulse, cloudflare, ooni, worldbank, rng)
    except Exception as e:
        logger.error(f"Daily Pulse API error: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to generate daily pulse"})


@router.get("/daily-pulse/history", response_model=DailyPulseHistoryResponse, response_model_exclude_none=True)
async def get_daily_pulse_history(
    limit: int = Query(30, ge=1, le=365, description="Max pulses to return"),
    repository: BaseRepository = Depends(get_repository),
) -> DailyPulseHistoryResponse:
    """Stored daily pulses, most recent first."""
    return await run_in_threadpool(pulse_service.get_history, repository, limit)

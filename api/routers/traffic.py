"""
Traffic Router - Cloudflare Radar traffic summary
"""

import numpy as np
from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from internet_pulse.adapters.cloudflare.radar import CloudflareRadarAPI

from api.dependencies import get_cloudflare, get_random
from api.schemas.traffic import TrafficResponse
from api.services import traffic_service

router = APIRouter()


@router.get("/cloudflare", response_model=TrafficResponse)
async def get_traffic(
    cloudflare: CloudflareRadarAPI = Depends(get_cloudflare),
    rng: np.random.Generator = Depends(get_random),
) -> TrafficResponse:
    """
    Global HTTP traffic split and regional traffic levels.

    Always answers 200: synthetic values are served when Radar is unreachable.
    """
    return await run_in_threadpool(traffic_service.get_traffic_summary, cloudflare, rng)

"""
Analytics Router - regional traffic patterns and speed analytics
"""

import logging

import numpy as np
from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from api.dependencies import get_random
from api.schemas.analytics import SpeedAnalyticsResponse, TrafficPatternsResponse
from api.schemas.common import ErrorResponse
from api.services import analytics_service

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "/traffic-patterns",
    response_model=TrafficPatternsResponse,
    responses={500: {"model": ErrorResponse}},
)
async def get_traffic_patterns(rng: np.random.Generator = Depends(get_random)):
    """Current load per region from its local hour, plus a typical 24-hour curve."""
    try:
        return await run_in_threadpool(analytics_service.get_traffic_patterns, rng)
    except Exception as e:
        logger.error(f"Error generating traffic patterns: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to generate traffic patterns"})


@router.get(
    "/speed-analytics",
    response_model=SpeedAnalyticsResponse,
    responses={500: {"model": ErrorResponse}},
)
async def get_speed_analytics(rng: np.random.Generator = Depends(get_random)):
    """Regional download, upload and ping with global averages."""
    try:
        return await run_in_threadpool(analytics_service.get_speed_analytics, rng)
    except Exception as e:
        logger.error(f"Error generating speed analytics: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to generate speed analytics"})

"""
Speeds Router - Country internet speed rankings
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from api.dependencies import get_repository
from api.repositories.base import BaseRepository
from api.schemas.common import ErrorResponse
from api.schemas.speeds import SpeedRankingsResponse
from api.services import speed_service

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "/internet-speeds",
    response_model=SpeedRankingsResponse,
    responses={500: {"model": ErrorResponse}},
)
async def get_internet_speeds(repository: BaseRepository = Depends(get_repository)):
    """
    Countries ranked by 0.4 x mobile + 0.6 x broadband median download speed.
    """
    try:
        return await run_in_threadpool(speed_service.get_speed_rankings, repository)
    except Exception as e:
        logger.error(f"Error fetching speed data: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch speed rankings data"})

"""
Connectivity Router - World Bank internet penetration trends
"""

import numpy as np
from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from internet_pulse.adapters.worldbank.worldbank import WorldBankAPI

from api.dependencies import get_random, get_worldbank
from api.schemas.connectivity import ConnectivityResponse
from api.services import connectivity_service

router = APIRouter()


@router.get("/worldbank", response_model=ConnectivityResponse, response_model_exclude_none=True)
async def get_connectivity(
    worldbank: WorldBankAPI = Depends(get_worldbank),
    rng: np.random.Generator = Depends(get_random),
) -> ConnectivityResponse:
    return await run_in_threadpool(connectivity_service.get_connectivity_report, worldbank, rng)

"""
Censorship Router - OONI measurement summary
"""

import numpy as np
from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from internet_pulse.adapters.ooni.ooni import OONI_API

from api.dependencies import get_ooni, get_random
from api.schemas.censorship import CensorshipResponse
from api.services import censorship_service

router = APIRouter()


@router.get("/ooni", response_model=CensorshipResponse)
async def get_censorship(
    ooni: OONI_API = Depends(get_ooni),
    rng: np.random.Generator = Depends(get_random),
) -> CensorshipResponse:
    """Latest 50 OONI measurements: summary, recent events and per-country blocking."""
    return await run_in_threadpool(censorship_service.get_censorship_report, ooni, rng)

"""
Breaches Router - HaveIBeenPwned breach alerts
"""

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from internet_pulse.adapters.hibp.hibp import HIBP_API

from api.dependencies import get_hibp
from api.schemas.breaches import BreachResponse
from api.services import breach_service

router = APIRouter()


@router.get("/haveibeenpwned", response_model=BreachResponse, response_model_exclude_none=True)
async def get_breaches(hibp: HIBP_API = Depends(get_hibp)) -> BreachResponse:
    """
    Breaches added to HIBP in the last 30 days, newest first (max 10).

    `source` tells whether the list is live, sample fallback data or the
    emergency placeholder.
    """
    return await run_in_threadpool(breach_service.get_breach_alerts, hibp)

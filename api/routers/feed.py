"""
Live Feed Router
"""

from typing import Optional

import numpy as np
from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool

from internet_pulse.adapters.ooni.ooni import OONI_API

from api.dependencies import get_ooni, get_random
from api.schemas.feed import EventType, LiveFeedResponse
from api.services import feed_service

router = APIRouter()


@router.get("/live-feed", response_model=LiveFeedResponse)
async def get_live_feed(
    limit: int = Query(10, ge=1, le=50, description="Max items to return"),
    type: Optional[EventType] = Query(None, description="Only return events of this type"),
    ooni: OONI_API = Depends(get_ooni),
    rng: np.random.Generator = Depends(get_random),
) -> LiveFeedResponse:
    """
    Up to three real OONI censorship events, topped up with simulated
    outage, censorship, traffic and recovery events.
    """
    return await run_in_threadpool(feed_service.get_live_feed, ooni, rng, limit, type)

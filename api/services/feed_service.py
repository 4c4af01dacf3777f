"""
Live Feed Service - recent OONI censorship events mixed with simulated network events
"""

import logging
from typing import Optional

import numpy as np

from internet_pulse.adapters.ooni.ooni import OONI_API
from internet_pulse.feed.events import build_feed
from internet_pulse.utils.dates import iso_timestamp

from api.schemas.feed import FeedItem, LiveFeedResponse
from api.services.censorship_service import get_censorship_report

logger = logging.getLogger(__name__)


def get_live_feed(
    ooni: OONI_API,
    rng: np.random.Generator,
    limit: int = 10,
    event_type: Optional[str] = None,
) -> LiveFeedResponse:
    report = get_censorship_report(ooni, rng)
    recent_events = [event.model_dump() for event in report.recent_events]

    items = build_feed(recent_events, rng, limit=limit, event_type=event_type)
    real_events = sum(1 for item in items if item["id"].startswith("ooni-"))
    logger.debug(f"Live feed: {real_events} OONI events, {len(items) - real_events} simulated")

    return LiveFeedResponse(
        items=[FeedItem.model_validate(item) for item in items],
        last_update=iso_timestamp(),
        real_events=real_events,
    )

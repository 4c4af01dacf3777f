"""
Live Feed API Schemas
"""

from typing import List, Literal

from pydantic import Field

from api.schemas.common import CamelModel

EventType = Literal["outage", "censorship", "traffic", "recovery"]


class FeedItem(CamelModel):
    id: str
    type: EventType
    country: str
    message: str
    timestamp: str
    severity: Literal["low", "medium", "high"]
    source: Literal["OONI", "Cloudflare", "Monitor", "Simulation"]


class LiveFeedResponse(CamelModel):
    items: List[FeedItem]
    last_update: str
    real_events: int = Field(..., description="Items backed by real OONI measurements")

"""
Traffic API Schemas - Cloudflare Radar traffic summary
"""

from typing import List

from pydantic import Field

from api.schemas.common import CamelModel


class GlobalTraffic(CamelModel):
    timestamp: str = Field(..., description="When the summary was produced (ISO-8601)")
    http_requests: float = Field(..., description="Daily HTTP requests")
    bot_traffic: float = Field(..., description="Bot share of traffic")
    human_traffic: float = Field(..., description="Human share of traffic")


class RegionTraffic(CamelModel):
    name: str = Field(..., description="Region name (e.g., 'North America')")
    traffic: float = Field(..., description="Relative traffic level (0-100)")


class TrafficResponse(CamelModel):
    """Response for the Cloudflare traffic endpoint"""

    global_traffic: GlobalTraffic = Field(..., alias="global")
    outages: int = Field(..., description="Estimated active outages")
    regions: List[RegionTraffic]

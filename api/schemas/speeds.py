"""
Speed Ranking API Schemas
"""

from typing import List

from pydantic import Field

from api.schemas.common import CamelModel


class SpeedRanking(CamelModel):
    """A single country's ranking row"""

    rank: int = Field(..., ge=1)
    country: str
    country_code: str = Field(..., description="ISO 3166-1 alpha-2, 'UN' when unknown")
    continent: str
    mobile_speed: float = Field(..., description="Median mobile download (Mbps)")
    broadband_speed: float = Field(..., description="Median fixed broadband download (Mbps)")
    last_updated: str


class SpeedMetadata(CamelModel):
    update_frequency: str = "Monthly"
    next_update: str
    data_points: int


class SpeedRankingsResponse(CamelModel):
    """Response for the speed rankings endpoint"""

    data: List[SpeedRanking]
    last_updated: str
    source: str
    total_countries: int
    continents: List[str]
    metadata: SpeedMetadata

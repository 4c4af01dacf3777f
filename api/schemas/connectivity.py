"""
Connectivity API Schemas - World Bank internet penetration trends
"""

from typing import List, Optional

from pydantic import Field

from api.schemas.common import CamelModel


class GlobalTrendPoint(CamelModel):
    year: int
    internet_users: float = Field(..., description="Mean internet users per 100 people")


class CountryTrendPoint(CamelModel):
    year: int
    value: float
    country_name: Optional[str] = None
    country_code: Optional[str] = None


class TopCountry(CamelModel):
    country_code: str
    country_name: str
    latest_value: float
    trend: Optional[List[CountryTrendPoint]] = None


class ConnectivityResponse(CamelModel):
    """Response for the World Bank endpoint"""

    global_trends: List[GlobalTrendPoint]
    top_countries: List[TopCountry]
    last_update: str
    data_source: str
    connectivity_issues: int = Field(..., alias="connectivity_issues")

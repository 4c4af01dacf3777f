"""
Analytics API Schemas - regional traffic patterns and speed analytics
"""

from typing import List

from pydantic import Field

from api.schemas.common import CamelModel


class TrafficPattern(CamelModel):
    hour: int = Field(..., ge=0, le=23, description="Local hour in the region")
    traffic: int
    region: str
    day: str


class RegionalLoad(CamelModel):
    region: str
    current_traffic: int
    peak_traffic: float
    avg_traffic: float


class PeakHours(CamelModel):
    region: str
    morning_peak: str
    evening_peak: str
    off_peak_hours: str


class HourlyTraffic(CamelModel):
    hour: str = Field(..., description="'HH:00'")
    traffic: int
    region: str


class TrafficPatternsResponse(CamelModel):
    patterns: List[TrafficPattern]
    regions: List[RegionalLoad]
    peak_hours: List[PeakHours]
    hourly_pattern: List[HourlyTraffic]
    global_traffic: float = Field(..., description="Mean current traffic across regions")
    last_update: str


class SpeedSample(CamelModel):
    timestamp: str
    region: str
    avg_download: float = Field(..., description="Mbps")
    avg_upload: float = Field(..., description="Mbps")
    avg_ping: float = Field(..., description="ms")


class CountrySpeed(CamelModel):
    country: str
    avg_speed: float
    flag: str


class SpeedAnalyticsResponse(CamelModel):
    regions: List[SpeedSample]
    global_avg_download: float
    global_avg_upload: float
    global_avg_ping: float
    top_countries: List[CountrySpeed]
    slowest_countries: List[CountrySpeed]
    last_update: str

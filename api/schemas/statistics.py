"""
Statistics API Schemas - headline numbers for the statistics panel
"""

from typing import List

from pydantic import Field

from api.schemas.common import CamelModel


class RegionalTraffic(CamelModel):
    region: str = Field(..., description="Short region name (e.g., 'N. America')")
    traffic: int


class UptimeDay(CamelModel):
    date: str
    uptime: float


class UptimeSummary(CamelModel):
    days: List[UptimeDay]
    current: float
    weekly_average: float
    sla_target: float
    meeting_sla: bool


class StatisticsResponse(CamelModel):
    active_outages: int
    outage_source: str = Field(..., description="Which upstream supplied active_outages")
    regional_traffic: List[RegionalTraffic]
    uptime: UptimeSummary
    last_update: str

"""
Censorship API Schemas - OONI measurement summary
"""

from typing import List, Optional

from pydantic import Field

from api.schemas.common import CamelModel


class CensorshipSummary(CamelModel):
    total_tests: int = Field(..., description="Measurements inspected")
    blocked_sites: int = Field(..., description="Measurements flagged as anomalous")
    countries: int = Field(..., description="Distinct probe countries")
    last_update: str


class CensorshipEvent(CamelModel):
    """A single recent OONI measurement"""

    id: Optional[str] = Field(None, description="OONI measurement UID")
    country: Optional[str] = Field(None, description="Probe country code")
    country_name: Optional[str] = None
    test_type: Optional[str] = Field(None, description="OONI test name (e.g., 'web_connectivity')")
    blocked: bool
    domain: str = Field(..., description="Tested input, 'Unknown' when absent")
    timestamp: Optional[str] = None
    asn: Optional[str] = Field(None, description="Probe network (e.g., 'AS12880')")


class CountryBlocking(CamelModel):
    country: str
    blocked: int
    total: int


class CensorshipResponse(CamelModel):
    """Response for the OONI censorship endpoint"""

    summary: CensorshipSummary
    count: int = Field(..., description="Outage count shown on the statistics panel")
    recent_events: List[CensorshipEvent]
    country_summary: List[CountryBlocking]

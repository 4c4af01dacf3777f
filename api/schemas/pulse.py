"""
Daily Pulse API Schemas - composite internet health report
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from api.schemas.common import CamelModel


class TrafficVolume(CamelModel):
    http_requests: float
    bytes_served: float
    origins: Optional[float] = None


class SecuritySummary(CamelModel):
    attacks: float = Field(..., description="Layer 3 attacks in the last day")
    mitigated: float


class TrafficAnomaly(CamelModel):
    type: str = Field(..., description="'spike' or 'drop'")
    magnitude: str = Field(..., description="Deviation from the mean, e.g. '12.3%'")
    timestamp: str


class PulseTraffic(CamelModel):
    volume: TrafficVolume = Field(..., alias="global")
    security: SecuritySummary
    trends: List[str]
    anomalies: List[TrafficAnomaly]


class TrendingBlock(CamelModel):
    domain: str
    block_count: int


class RiskCountry(CamelModel):
    country: str
    risk_score: float
    domains_affected: int
    total_tests: int
    risk_level: str = Field(..., description="'high' (>70), 'medium' (>40) or 'low'")


class PulseFreedom(CamelModel):
    score: int = Field(..., ge=0, le=100)
    incidents: List[Dict[str, Any]] = Field(..., description="Raw OONI incidents started in the last 24h")
    trending: List[TrendingBlock]
    risk_countries: List[RiskCountry]


class CountryConnectivity(CamelModel):
    country: str
    code: Optional[str] = None
    internet_penetration: float
    mobile_penetration: Optional[float] = None
    year: Optional[int] = None


class ConnectivityMeans(CamelModel):
    overall: float = Field(..., alias="global")
    mobile: float


class PulseDigitalDivide(CamelModel):
    penetration_gaps: List[CountryConnectivity]
    emerging_markets: List[CountryConnectivity]
    connectivity: ConnectivityMeans


class Prediction(CamelModel):
    confidence: int
    prediction: str
    trend: Optional[str] = None
    threat_level: Optional[str] = Field(None, alias="threat_level")
    risk_level: Optional[str] = Field(None, alias="risk_level")


class PulsePredictions(CamelModel):
    traffic: Prediction
    security: Prediction
    censorship: Prediction


class DataFreshness(CamelModel):
    cloudflare: str
    ooni: str
    world_bank: str


class DailyPulse(CamelModel):
    """Response for the daily pulse endpoint"""

    date: str = Field(..., description="Report date (YYYY-MM-DD)")
    timestamp: str
    health_score: int = Field(..., ge=0, le=100)
    traffic: PulseTraffic
    freedom: PulseFreedom
    digital_divide: PulseDigitalDivide
    highlights: List[str]
    predictions: PulsePredictions
    data_freshness: DataFreshness


class DailyPulseHistoryResponse(CamelModel):
    pulses: List[DailyPulse]
    total_count: int

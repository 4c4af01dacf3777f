"""
Cron API Schemas - scheduled daily pulse and monthly speed refresh jobs
"""

from typing import List

from pydantic import BaseModel, Field

from api.schemas.common import CamelModel
from api.schemas.pulse import PulsePredictions


class InstagramPost(CamelModel):
    caption: str
    hashtags: List[str]


class SocialContent(CamelModel):
    twitter: List[str] = Field(..., description="Three ready-to-post tweets")
    linkedin: str
    instagram: InstagramPost


class DailyUpdateData(CamelModel):
    health_score: int
    highlights: List[str]
    predictions: PulsePredictions
    social_content: SocialContent
    newsletter_content: str = Field(..., description="Newsletter subject line")


class DailyUpdateResponse(CamelModel):
    """Response after running the daily update job"""

    success: bool
    timestamp: str
    execution_time: str = Field(..., description="Wall time, e.g. '1234ms'")
    data: DailyUpdateData


class MonthlySpeedUpdateResponse(CamelModel):
    """Response after refreshing the speed rankings snapshot"""

    success: bool
    timestamp: str
    data_points: int
    message: str
    next_update: str = Field(..., description="First day of next month (YYYY-MM-DD)")
    source: str


class CronErrorResponse(BaseModel):
    error: str
    timestamp: str
    details: str

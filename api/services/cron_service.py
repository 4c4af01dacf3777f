"""
Cron Service - scheduled jobs

Daily update: build the pulse, store it, and prepare the social posts and
newsletter that go out with it. Monthly speed update lives in speed_service.
"""

import logging
import time

import numpy as np

from internet_pulse.adapters.cloudflare.radar import CloudflareRadarAPI
from internet_pulse.adapters.ooni.ooni import OONI_API
from internet_pulse.adapters.worldbank.worldbank import WorldBankAPI
from internet_pulse.publishing.content import generate_newsletter_content, generate_social_media_content
from internet_pulse.utils.dates import iso_timestamp

from api.repositories.base import BaseRepository
from api.schemas.cron import DailyUpdateData, DailyUpdateResponse, SocialContent
from api.services.pulse_service import build_daily_pulse

logger = logging.getLogger(__name__)


def run_daily_update(
    cloudflare: CloudflareRadarAPI,
    ooni: OONI_API,
    worldbank: WorldBankAPI,
    repository: BaseRepository,
    rng: np.random.Generator,
) -> DailyUpdateResponse:
    start = time.perf_counter()

    pulse = build_daily_pulse(cloudflare, ooni, worldbank, rng)
    repository.save_daily_pulse(pulse.model_dump(mode="json", by_alias=True))

    snapshot = pulse.model_dump()
    social_content = generate_social_media_content(snapshot)
    newsletter = generate_newsletter_content(snapshot)
    logger.info(f"Prepared newsletter '{newsletter['subject']}' and {len(social_content['twitter'])} tweets")

    execution_ms = int((time.perf_counter() - start) * 1000)
    logger.info(f"Daily update finished in {execution_ms}ms")

    return DailyUpdateResponse(
        success=True,
        timestamp=iso_timestamp(),
        execution_time=f"{execution_ms}ms",
        data=DailyUpdateData(
            health_score=pulse.health_score,
            highlights=pulse.highlights,
            predictions=pulse.predictions,
            social_content=SocialContent.model_validate(social_content),
            newsletter_content=newsletter["subject"],
        ),
    )

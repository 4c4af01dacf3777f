"""
Speed Service - country internet speed rankings and their monthly refresh

Rankings come from the stored monthly snapshot when one exists, otherwise
from the built-in base table dated 2025-08-01.
"""

import logging
from typing import Any, Dict, List

import numpy as np

from internet_pulse.adapters.wikipedia.wikipedia import WikipediaSpeedsAPI
from internet_pulse.speeds.rankings import (
    BASE_DATA_DATE,
    SPEED_SOURCE,
    base_speed_data,
    continents,
    process_speed_data,
    vary_speed_data,
)
from internet_pulse.utils.dates import first_of_next_month, iso_date, iso_timestamp

from api.repositories.base import BaseRepository
from api.schemas.cron import MonthlySpeedUpdateResponse
from api.schemas.speeds import SpeedMetadata, SpeedRanking, SpeedRankingsResponse

logger = logging.getLogger(__name__)


def get_speed_rankings(repository: BaseRepository) -> SpeedRankingsResponse:
    snapshot = repository.get_speed_rankings()
    if snapshot:
        rows = snapshot["data"]
        last_updated = snapshot["last_updated"]
        logger.debug(f"Serving stored speed rankings from {last_updated}")
    else:
        rows = process_speed_data(base_speed_data(), last_updated=BASE_DATA_DATE)
        last_updated = BASE_DATA_DATE

    return SpeedRankingsResponse(
        data=[SpeedRanking.model_validate(row) for row in rows],
        last_updated=last_updated,
        source=SPEED_SOURCE,
        total_countries=len(rows),
        continents=continents(rows),
        metadata=SpeedMetadata(
            update_frequency="Monthly",
            next_update=first_of_next_month(),
            data_points=len(rows),
        ),
    )


def collect_speed_data(wikipedia: WikipediaSpeedsAPI, rng: np.random.Generator) -> List[Dict[str, Any]]:
    """
    Raw speed rows for this month's snapshot.

    Scrapes the Wikipedia table first; when that fails or yields nothing,
    the base table is jittered instead.
    """
    try:
        scraped = wikipedia.scrape_speed_data()
        if scraped:
            logger.info(f"Scraped {len(scraped)} countries from Wikipedia")
            return scraped
        logger.warning("Wikipedia speed table yielded no rows")
    except Exception as e:
        logger.warning(f"Wikipedia scrape failed, using base data: {e}")

    return vary_speed_data(base_speed_data(), rng)


def run_monthly_update(
    wikipedia: WikipediaSpeedsAPI,
    repository: BaseRepository,
    rng: np.random.Generator,
) -> MonthlySpeedUpdateResponse:
    logger.info("Starting monthly speed data update...")

    rankings = process_speed_data(collect_speed_data(wikipedia, rng), last_updated=iso_date())
    repository.save_speed_rankings(rankings, last_updated=iso_date())

    logger.info(f"Monthly speed update complete: {len(rankings)} countries ranked")

    return MonthlySpeedUpdateResponse(
        success=True,
        timestamp=iso_timestamp(),
        data_points=len(rankings),
        message="Monthly speed data updated successfully",
        next_update=first_of_next_month(),
        source=SPEED_SOURCE,
    )

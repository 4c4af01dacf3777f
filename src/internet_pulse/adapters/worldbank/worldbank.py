# Folder in charge of World Bank Indicators API interactions
import logging
from typing import Any, Dict, List, Optional

from internet_pulse.adapters.client import PulseAPIClient
from internet_pulse.settings import get_settings

logger = logging.getLogger(__name__)

INTERNET_USERS_INDICATOR = "IT.NET.USER.ZS"      # Individuals using the Internet (% of population)
MOBILE_SUBSCRIPTIONS_INDICATOR = "IT.CEL.SETS.P2"  # Mobile cellular subscriptions (per 100 people)


class WorldBankAPI():
    """Wrapper class for World Bank indicator queries"""
    def __init__(self, client: Optional[PulseAPIClient] = None):
        self._client: PulseAPIClient = client or PulseAPIClient(str(get_settings().upstreams.worldbank_base_url))

    def get_indicator(self, indicator: str, start_year: int, end_year: int, per_page: int = 1000) -> List[Dict[str, Any]]:
        """
        Fetch one indicator for every country over a year range.

        The API answers with [metadata, rows]; only the rows are returned.
        An error payload comes back as a single-element list and yields [].
        """
        response = self._client.get(
            f"country/all/indicator/{indicator}",
            params={"date": f"{start_year}:{end_year}", "format": "json", "per_page": per_page},
        )
        if not isinstance(response, list):
            raise ValueError(f"Unexpected World Bank payload for {indicator}: {type(response).__name__}")
        if len(response) < 2 or response[1] is None:
            logger.warning(f"World Bank returned no rows for {indicator} ({start_year}:{end_year})")
            return []
        return response[1]

    def get_internet_users(self, start_year: int, end_year: int, per_page: int = 1000) -> List[Dict[str, Any]]:
        return self.get_indicator(INTERNET_USERS_INDICATOR, start_year, end_year, per_page)

    def get_mobile_subscriptions(self, start_year: int, end_year: int, per_page: int = 300) -> List[Dict[str, Any]]:
        return self.get_indicator(MOBILE_SUBSCRIPTIONS_INDICATOR, start_year, end_year, per_page)

    def close(self) -> None:
        self._client.close()

# Folder in charge of OONI (Open Observatory of Network Interference) API interactions
import logging
from typing import Any, Dict, List, Optional

from internet_pulse.adapters.client import PulseAPIClient
from internet_pulse.settings import get_settings

logger = logging.getLogger(__name__)


class OONI_API():
    """Wrapper class for OONI API interactions"""
    def __init__(self, client: Optional[PulseAPIClient] = None):
        self._client: PulseAPIClient = client or PulseAPIClient(str(get_settings().upstreams.ooni_base_url))

    def get_recent_measurements(self, limit: int = 50) -> List[Dict[str, Any]]:
        """Latest measurements ordered by test start time"""
        response = self._client.get("api/v1/measurements", params={"limit": limit, "order_by": "test_start_time"})
        return response.get("results") or []

    def get_measurements_between(self, since: str, until: str, limit: int = 1000) -> List[Dict[str, Any]]:
        """Measurements in a YYYY-MM-DD date window"""
        response = self._client.get("api/v1/measurements", params={"since": since, "until": until, "limit": limit})
        logger.debug(f"OONI returned {len(response.get('results') or [])} measurements for {since}..{until}")
        return response.get("results") or []

    def get_incidents(self) -> List[Dict[str, Any]]:
        response = self._client.get("api/v1/incidents")
        return response.get("results") or []

    def close(self) -> None:
        self._client.close()

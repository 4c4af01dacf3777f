# Folder in charge of HaveIBeenPwned API interactions
import logging
from typing import Any, Dict, List, Optional

from internet_pulse.adapters.client import PulseAPIClient
from internet_pulse.settings import get_settings

logger = logging.getLogger(__name__)


class HIBP_API():
    """Wrapper class for the public (keyless) HaveIBeenPwned breach catalogue"""
    def __init__(self, client: Optional[PulseAPIClient] = None):
        cfg = get_settings()
        # HIBP rejects requests without a descriptive User-Agent
        self._client: PulseAPIClient = client or PulseAPIClient(
            str(cfg.upstreams.hibp_base_url), headers={"User-Agent": cfg.hibp_user_agent}
        )

    def get_breaches(self) -> List[Dict[str, Any]]:
        """Every breach in the system, in HIBP's PascalCase record format"""
        response = self._client.get("breaches")
        if not isinstance(response, list):
            raise ValueError(f"Unexpected breaches payload: {type(response).__name__}")
        return response

    def close(self) -> None:
        self._client.close()

# Folder in charge of Cloudflare Radar API interactions
import logging
from typing import Any, Dict, Optional

from internet_pulse.adapters.client import PulseAPIClient
from internet_pulse.settings import get_settings

logger = logging.getLogger(__name__)


def summary_value(payload: Dict[str, Any], key: str) -> Any:
    """Reads result.summary.<key> from a Radar response, None when any level is missing."""
    result = (payload or {}).get("result") or {}
    summary = result.get("summary") or {}
    return summary.get(key)


class CloudflareRadarAPI():
    """Wrapper class for Cloudflare Radar API interactions"""
    def __init__(self, client: Optional[PulseAPIClient] = None):
        cfg = get_settings()
        headers = {}
        if cfg.cloudflare_api_token is not None:
            headers["Authorization"] = f"Bearer {cfg.cloudflare_api_token.get_secret_value()}"
        self._client: PulseAPIClient = client or PulseAPIClient(
            str(cfg.upstreams.cloudflare_base_url), headers=headers
        )

    def get_os_summary(self) -> Dict[str, Any]:
        """HTTP request share by operating system"""
        return self._client.get("radar/http/summary/os")

    def get_http_summary(self) -> Dict[str, Any]:
        return self._client.get("radar/http/summary")

    def get_layer3_attack_summary(self) -> Dict[str, Any]:
        return self._client.get("radar/attacks/layer3/summary")

    def get_speed_summary(self) -> Dict[str, Any]:
        return self._client.get("radar/quality/speed/summary")

    def close(self) -> None:
        self._client.close()

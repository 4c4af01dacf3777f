import logging
from typing import Any, Dict, Optional

import certifi  # Provides Mozilla's CA bundle for SSL certificate verification
import requests
import urllib3
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from internet_pulse.settings import get_settings

cfg = get_settings()
if cfg.verify_ssl is False:
    urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

logger = logging.getLogger(__name__)


class PulseAPIClient:
    def __init__(self,
                base_url: str,
                headers: Optional[Dict[str, str]] = None,
                total_retries: Optional[int] = None,
                backoff_factor: Optional[float] = None,
                status_forcelist: tuple = (429, 500, 502, 503, 504),
                timeout: Optional[float] = None):
        """
        Initializes a requests.Session with:
            - User-Agent and JSON accept headers (plus any upstream-specific headers)
            - HTTPAdapter for retries on connection errors and specified HTTP status codes
        """
        self.base_url = str(base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else cfg.request_timeout
        self.verify = certifi.where() if cfg.verify_ssl else False
        self.session = requests.Session()

        # Configure retries
        retries = cfg.total_retries if total_retries is None else total_retries
        retry_strategy = Retry(
            total=retries,
            connect=retries,
            read=retries,
            backoff_factor=cfg.backoff_factor if backoff_factor is None else backoff_factor,
            status_forcelist=status_forcelist,
            allowed_methods=frozenset(["GET"]),
            raise_on_status=False
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

        # Default headers
        self.session.headers.update({
            "User-Agent": cfg.user_agent,
            "Accept": "application/json",
        })
        if headers:
            self.session.headers.update(headers)

    def _handle_response(self, resp: requests.Response) -> Any:
        """
            Handle API response with proper error checking and JSON parsing.

            Args:
                resp: HTTP response object

            Returns:
                Parsed JSON data

            Raises:
                requests.HTTPError: For 4xx/5xx HTTP status codes
                ValueError: If response is not valid JSON
            """
        try:
            # Check for HTTP errors (4xx, 5xx)
            resp.raise_for_status()

            # Check if response has content
            if not resp.content:
                logger.warning(f"Empty response received for {resp.url}")
                return {}

            return resp.json()

        except requests.HTTPError:
            logger.error(f"HTTP {resp.status_code} error for {resp.url}: {resp.text[:200]}")
            raise

        except ValueError as e:
            # JSON decode error
            logger.error(f"Invalid JSON response from {resp.url}: {resp.text[:200]}...")
            raise ValueError(f"Invalid JSON response: {e}")

    def url_for(self, path: str) -> str:
        if not path:
            return self.base_url
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str, params=None) -> Any:
        """Perform a GET request relative to the base URL, returning parsed JSON."""
        resp = self.session.get(self.url_for(path), params=params, timeout=self.timeout, verify=self.verify)
        return self._handle_response(resp)

    def get_text(self, path: str = "", params=None) -> str:
        """Perform a GET request and return the raw body (HTML pages)."""
        resp = self.session.get(self.url_for(path), params=params, headers={"Accept": "text/html"},
                                timeout=self.timeout, verify=self.verify)
        try:
            resp.raise_for_status()
        except requests.HTTPError:
            logger.error(f"HTTP {resp.status_code} error for {resp.url}")
            raise
        return resp.text

    def close(self) -> None:
        self.session.close()

# Folder in charge of scraping the Wikipedia speed ranking table
import logging
import re
from io import StringIO
from typing import Any, Dict, List, Optional

import pandas as pd

from internet_pulse.adapters.client import PulseAPIClient
from internet_pulse.settings import get_settings

logger = logging.getLogger(__name__)


def _flatten_column(col) -> str:
    if isinstance(col, tuple):
        col = " ".join(str(c) for c in col if not str(c).startswith("Unnamed"))
    return str(col).strip().lower()


def _to_mbps(value) -> Optional[float]:
    """Extract the first number of a cell like '121.4' or '95.2[3]'."""
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return None
    match = re.search(r"\d+(?:\.\d+)?", str(value).replace(",", ""))
    return float(match.group()) if match else None


def parse_speed_table(html: str) -> List[Dict[str, Any]]:
    """
    Find the country/mobile/broadband table in the page and return raw rows.

    Returns:
        [{"country": str, "mobile_speed": float, "broadband_speed": float}, ...]
        or [] when no table with the expected columns is present.
    """
    try:
        tables = pd.read_html(StringIO(html))
    except ValueError:
        logger.warning("No HTML tables found on speed ranking page")
        return []

    for table in tables:
        columns = {_flatten_column(c): c for c in table.columns}
        country_col = next((c for name, c in columns.items() if "country" in name), None)
        mobile_col = next((c for name, c in columns.items() if "mobile" in name), None)
        broadband_col = next(
            (c for name, c in columns.items() if "broadband" in name or "fixed" in name), None
        )
        if country_col is None or mobile_col is None or broadband_col is None:
            continue

        rows = []
        for _, row in table.iterrows():
            country = re.sub(r"\[.*?\]", "", str(row[country_col])).strip()
            mobile = _to_mbps(row[mobile_col])
            broadband = _to_mbps(row[broadband_col])
            if not country or mobile is None or broadband is None:
                continue
            rows.append({"country": country, "mobile_speed": mobile, "broadband_speed": broadband})
        logger.info(f"Parsed {len(rows)} rows from speed ranking table")
        return rows

    logger.warning("Speed ranking page has no table with country, mobile and broadband columns")
    return []


class WikipediaSpeedsAPI():
    """Fetches the 'List of countries by Internet connection speeds' page"""
    def __init__(self, client: Optional[PulseAPIClient] = None):
        self._client: PulseAPIClient = client or PulseAPIClient(str(get_settings().upstreams.wikipedia_speeds_url))

    def scrape_speed_data(self) -> List[Dict[str, Any]]:
        html = self._client.get_text()
        return parse_speed_table(html)

    def close(self) -> None:
        self._client.close()

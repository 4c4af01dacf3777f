"""
Breach Service - recent HaveIBeenPwned breaches

Two levels of degradation:
- HIBP answered with an error status: five sample breaches (source "fallback")
- anything else went wrong: one generic record (source "emergency")
"""

import logging
from datetime import datetime
from typing import Optional

import requests

from internet_pulse.adapters.hibp.hibp import HIBP_API
from internet_pulse.breaches.alerts import EMERGENCY_BREACH, FALLBACK_BREACHES, MAX_BREACHES, recent_breaches

from api.schemas.breaches import BreachRecord, BreachResponse

logger = logging.getLogger(__name__)


def get_breach_alerts(hibp: HIBP_API, now: Optional[datetime] = None) -> BreachResponse:
    try:
        breaches = hibp.get_breaches()
        recent = [BreachRecord.model_validate(b) for b in recent_breaches(breaches, now)]
        return BreachResponse(breaches=recent, source="haveibeenpwned", total=len(recent))

    except requests.HTTPError as e:
        logger.warning(f"HIBP unavailable, serving fallback breaches: {e}")
        return BreachResponse(
            breaches=[BreachRecord.model_validate(b) for b in FALLBACK_BREACHES[:MAX_BREACHES]],
            source="fallback",
            total=len(FALLBACK_BREACHES),
        )

    except Exception as e:
        logger.error(f"Error fetching breach data: {e}", exc_info=True)
        return BreachResponse(
            breaches=[BreachRecord.model_validate(EMERGENCY_BREACH)],
            source="emergency",
            total=1,
            error="API temporarily unavailable",
        )

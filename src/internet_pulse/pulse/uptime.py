"""Synthetic week of network uptime for the statistics panel."""

from datetime import timedelta
from typing import Any, Dict, List, Optional

import numpy as np

from internet_pulse.utils.dates import iso_date, utc_now
from internet_pulse.utils.numbers import round_half_up
from internet_pulse.utils.reproducibility import uniform

BASE_UPTIME = 99.1
UPTIME_VARIATION = 0.8
SLA_TARGET = 99.5


def generate_uptime_data(rng: np.random.Generator, days: int = 7) -> List[Dict[str, Any]]:
    """One point per day, oldest first, ending today. Values lie in [99.1, 99.9]."""
    today = utc_now()
    return [
        {
            "date": iso_date(today - timedelta(days=i)),
            "uptime": round_half_up(BASE_UPTIME + uniform(rng, 0, UPTIME_VARIATION), 1),
        }
        for i in range(days - 1, -1, -1)
    ]


def summarize_uptime(days: List[Dict[str, Any]], sla_target: float = SLA_TARGET) -> Dict[str, Any]:
    current = days[-1]["uptime"] if days else 99.7
    weekly_average = round_half_up(float(np.mean([d["uptime"] for d in days])), 1) if days else current
    return {
        "days": days,
        "current": current,
        "weekly_average": weekly_average,
        "sla_target": sla_target,
        "meeting_sla": weekly_average >= sla_target,
    }

from datetime import date, datetime, timedelta, timezone
from typing import Optional

import pandas as pd


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(dt: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    dt = dt or utc_now()
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def iso_date(dt: Optional[datetime] = None) -> str:
    return (dt or utc_now()).strftime("%Y-%m-%d")


def days_ago(days: int, now: Optional[datetime] = None) -> datetime:
    return (now or utc_now()) - timedelta(days=days)


def first_of_next_month(today: Optional[date] = None) -> str:
    today = today or utc_now().date()
    if today.month == 12:
        return date(today.year + 1, 1, 1).isoformat()
    return date(today.year, today.month + 1, 1).isoformat()


def parse_timestamp(value) -> Optional[pd.Timestamp]:
    """Parse an upstream date/time string as UTC, None when unparseable."""
    if value is None:
        return None
    ts = pd.to_datetime(value, utc=True, errors="coerce")
    if pd.isna(ts):
        return None
    return ts

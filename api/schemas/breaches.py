"""
Breach API Schemas - HaveIBeenPwned breach records

Breach records keep HIBP's PascalCase field names on the wire.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class BreachRecord(BaseModel):
    """One HIBP breach"""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True, extra="ignore")

    name: str
    title: str
    domain: str
    breach_date: str
    added_date: str
    modified_date: str
    pwn_count: int
    description: str
    logo_path: str = ""
    data_classes: List[str] = Field(default_factory=list)
    is_verified: bool = False
    is_fabricated: bool = False
    is_sensitive: bool = False
    is_retired: bool = False
    is_spam_list: bool = False
    is_malware: bool = False
    is_subscription_free: bool = False


class BreachResponse(BaseModel):
    """Response for the breach alerts endpoint"""

    breaches: List[BreachRecord]
    source: Literal["haveibeenpwned", "fallback", "emergency"]
    total: int
    error: Optional[str] = None

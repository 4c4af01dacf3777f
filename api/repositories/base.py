"""
Base Repository - Abstract interface for snapshot storage

The cron jobs persist what they compute (daily pulses, monthly speed
rankings) through this contract, so the storage backend can move from local
files to a database without touching services or routers.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class BaseRepository(ABC):
    """Abstract base class for snapshot repositories"""

    @abstractmethod
    def save_daily_pulse(self, pulse: Dict[str, Any]) -> None:
        """
        Persist one daily pulse report.

        Args:
            pulse: Daily pulse serialized with wire (camelCase) keys
        """
        pass

    @abstractmethod
    def get_daily_pulse_history(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Load stored daily pulses, most recent first.

        Returns:
            List of pulse dicts in the format they were saved
        """
        pass

    @abstractmethod
    def save_speed_rankings(self, rankings: List[Dict[str, Any]], last_updated: str) -> None:
        """Replace the stored speed rankings snapshot."""
        pass

    @abstractmethod
    def get_speed_rankings(self) -> Optional[Dict[str, Any]]:
        """
        Load the stored speed rankings snapshot.

        Returns:
            {"last_updated": str, "data": [...]} or None when nothing is stored
        """
        pass

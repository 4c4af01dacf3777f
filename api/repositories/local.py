"""
Local File Repository - File-based snapshot storage

Daily pulses are appended to a JSONL log; speed rankings live in a single
JSON document replaced atomically on each monthly update.
Environment-agnostic: paths are configured via settings (reads from .env).
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from internet_pulse.io.writers import atomic_write_json
from internet_pulse.settings import get_settings
from api.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class LocalFileRepository(BaseRepository):
    """Repository implementation using local file storage"""

    def __init__(self, snapshots_dir: Optional[Path] = None):
        self.settings = get_settings()
        self.snapshots_dir = Path(snapshots_dir or self.settings.snapshots_dir)
        self._speed_cache: Optional[Dict[str, Any]] = None

        self.pulse_log_path = self.snapshots_dir / "daily_pulse_log.jsonl"
        self.speed_rankings_path = self.snapshots_dir / "speed_rankings.json"

        logger.info(f"LocalFileRepository initialized with snapshots_dir: {self.snapshots_dir}")

    def save_daily_pulse(self, pulse: Dict[str, Any]) -> None:
        """Append the pulse to the JSONL log (one report per line)."""
        self.pulse_log_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.pulse_log_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(pulse, ensure_ascii=False) + "\n")

        logger.info(f"Daily pulse for {pulse.get('date')} saved to {self.pulse_log_path}")

    def get_daily_pulse_history(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        if not self.pulse_log_path.exists():
            logger.info("No daily pulse history found")
            return []

        pulses: List[Dict[str, Any]] = []
        with open(self.pulse_log_path, "r", encoding="utf-8") as f:
            for line in f:
                if line.strip():
                    pulses.append(json.loads(line))

        pulses.sort(key=lambda p: p.get("timestamp", ""), reverse=True)

        if limit is not None:
            pulses = pulses[:limit]

        logger.info(f"Loaded {len(pulses)} daily pulse records")
        return pulses

    def save_speed_rankings(self, rankings: List[Dict[str, Any]], last_updated: str) -> None:
        snapshot = {"last_updated": last_updated, "data": rankings}
        atomic_write_json(snapshot, self.speed_rankings_path)
        self._speed_cache = snapshot
        logger.info(f"Saved {len(rankings)} speed rankings to {self.speed_rankings_path}")

    def get_speed_rankings(self) -> Optional[Dict[str, Any]]:
        if self._speed_cache is not None:
            logger.debug("Returning cached speed rankings")
            return self._speed_cache

        if not self.speed_rankings_path.exists():
            logger.debug(f"No speed rankings snapshot at {self.speed_rankings_path}")
            return None

        with open(self.speed_rankings_path, "r", encoding="utf-8") as f:
            self._speed_cache = json.load(f)
        logger.info(f"Loaded speed rankings snapshot from {self.speed_rankings_path}")
        return self._speed_cache

    def clear_cache(self) -> None:
        """Clear cached data (useful for development/testing)"""
        logger.info("Clearing repository cache")
        self._speed_cache = None

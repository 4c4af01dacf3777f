"""
API Dependencies - Singleton state management and FastAPI dependency injection

Holds the upstream API adapters and the snapshot repository. Adapters own a
pooled requests.Session each, so they are created once and shared by all
requests. Tests swap them out through app.dependency_overrides.
"""

import asyncio
import logging
import threading
from contextlib import asynccontextmanager
from typing import Optional

import numpy as np

from internet_pulse.adapters.cloudflare.radar import CloudflareRadarAPI
from internet_pulse.adapters.hibp.hibp import HIBP_API
from internet_pulse.adapters.ooni.ooni import OONI_API
from internet_pulse.adapters.wikipedia.wikipedia import WikipediaSpeedsAPI
from internet_pulse.adapters.worldbank.worldbank import WorldBankAPI
from internet_pulse.utils.reproducibility import get_rng
from api.repositories.base import BaseRepository
from api.repositories.local import LocalFileRepository

logger = logging.getLogger(__name__)


class AppState:
    """
    Global application state - holds upstream adapters and the repository.

    Singleton pattern: one instance shared across all requests.
    """

    def __init__(self):
        self.repository: Optional[BaseRepository] = None
        self.cloudflare: Optional[CloudflareRadarAPI] = None
        self.ooni: Optional[OONI_API] = None
        self.worldbank: Optional[WorldBankAPI] = None
        self.hibp: Optional[HIBP_API] = None
        self.wikipedia: Optional[WikipediaSpeedsAPI] = None

        # State tracking for lazy initialization
        self._initialized = False
        self._initialization_lock = asyncio.Lock()
        self._build_lock = threading.Lock()

    def _build(self) -> None:
        # sync dependencies run in the threadpool, so first requests can race here
        with self._build_lock:
            if self._initialized:
                return
            logger.info("Creating repository and upstream adapters...")
            self.repository = LocalFileRepository()
            self.cloudflare = CloudflareRadarAPI()
            self.ooni = OONI_API()
            self.worldbank = WorldBankAPI()
            self.hibp = HIBP_API()
            self.wikipedia = WikipediaSpeedsAPI()
            self._initialized = True
            logger.info("AppState initialization complete!")

    async def initialize(self) -> None:
        """Create adapters and repository (idempotent)."""
        async with self._initialization_lock:
            if self._initialized:
                logger.debug("AppState already initialized")
                return
            try:
                self._build()
            except Exception as e:
                logger.error(f"Failed to initialize AppState: {e}", exc_info=True)
                raise

    def ensure_initialized(self) -> None:
        if not self._initialized:
            logger.warning("AppState not initialized, initializing synchronously...")
            self._build()

    def is_ready(self) -> bool:
        """Check if app is ready to serve requests"""
        return self._initialized and self.repository is not None

    def get_status(self) -> dict:
        """Get current initialization status"""
        return {
            "initialized": self._initialized,
            "ready": self.is_ready(),
            "repository": type(self.repository).__name__ if self.repository else None,
            "adapters": {
                "cloudflare": self.cloudflare is not None,
                "ooni": self.ooni is not None,
                "worldbank": self.worldbank is not None,
                "hibp": self.hibp is not None,
                "wikipedia": self.wikipedia is not None,
            },
        }


# Global singleton instance
app_state = AppState()


def get_app_state() -> AppState:
    """
    FastAPI dependency to access app state.

    Usage in routers:
        @router.get("/example")
        async def example(state: AppState = Depends(get_app_state)):
            ooni = state.ooni
            ...
    """
    app_state.ensure_initialized()
    return app_state


def get_repository() -> BaseRepository:
    state = get_app_state()
    if state.repository is None:
        raise RuntimeError("Repository not initialized")
    return state.repository


def get_cloudflare() -> CloudflareRadarAPI:
    return get_app_state().cloudflare


def get_ooni() -> OONI_API:
    return get_app_state().ooni


def get_worldbank() -> WorldBankAPI:
    return get_app_state().worldbank


def get_hibp() -> HIBP_API:
    return get_app_state().hibp


def get_wikipedia() -> WikipediaSpeedsAPI:
    return get_app_state().wikipedia


def get_random() -> np.random.Generator:
    """Per-request generator (seeded from settings when random_seed is set)."""
    return get_rng()


@asynccontextmanager
async def lifespan_handler(app):
    """
    FastAPI lifespan context manager for startup/shutdown.

    Usage in main.py:
        app = FastAPI(lifespan=lifespan_handler)
    """
    logger.info("FastAPI starting up...")
    await app_state.initialize()

    yield  # App is now running

    logger.info("FastAPI shutting down...")
    for adapter in (app_state.cloudflare, app_state.ooni, app_state.worldbank, app_state.hibp, app_state.wikipedia):
        if adapter is not None:
            adapter.close()
    logger.info("Shutdown complete")

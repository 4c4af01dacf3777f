"""Tests for lazy AppState initialization."""
import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock, patch

from api.dependencies import AppState

ADAPTERS = ("CloudflareRadarAPI", "OONI_API", "WorldBankAPI", "HIBP_API", "WikipediaSpeedsAPI")


class TestAppStateInitialization:

    def test_concurrent_first_requests_build_once(self):
        def slow_repository():
            time.sleep(0.05)
            return MagicMock()

        patches = [patch(f"api.dependencies.{name}") for name in ADAPTERS]
        patches.append(patch("api.dependencies.LocalFileRepository", side_effect=slow_repository))
        mocks = [p.start() for p in patches]
        try:
            state = AppState()
            with ThreadPoolExecutor(max_workers=8) as pool:
                list(pool.map(lambda _: state.ensure_initialized(), range(8)))
        finally:
            for p in patches:
                p.stop()

        assert state.is_ready()
        for mock in mocks:
            assert mock.call_count == 1

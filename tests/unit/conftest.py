"""Shared fixtures: mocked upstream adapters and an API client wired to them."""
from unittest.mock import MagicMock

import numpy as np
import pytest
from fastapi.testclient import TestClient

from internet_pulse.adapters.cloudflare.radar import CloudflareRadarAPI
from internet_pulse.adapters.hibp.hibp import HIBP_API
from internet_pulse.adapters.ooni.ooni import OONI_API
from internet_pulse.adapters.wikipedia.wikipedia import WikipediaSpeedsAPI
from internet_pulse.adapters.worldbank.worldbank import WorldBankAPI

from api import dependencies
from api.main import app
from api.repositories.local import LocalFileRepository


def measurement(cc="IR", domain="https://twitter.com/", anomaly=False, uid="m1", ts="2025-08-19T10:00:00Z"):
    return {
        "measurement_uid": uid,
        "probe_cc": cc,
        "probe_asn": "AS12880",
        "test_name": "web_connectivity",
        "input": domain,
        "anomaly": anomaly,
        "test_start_time": ts,
    }


def wb_row(code, name, year, value):
    return {"country": {"id": code, "value": name}, "date": str(year), "value": value}


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def cloudflare():
    mock = MagicMock(spec=CloudflareRadarAPI)
    mock.get_os_summary.return_value = {
        "result": {"summary": {"http_requests_1d": 5e9, "bot_traffic_1d": 30.0, "human_traffic_1d": 70.0}}
    }
    mock.get_http_summary.return_value = {}
    mock.get_layer3_attack_summary.return_value = {}
    mock.get_speed_summary.return_value = {}
    return mock


@pytest.fixture
def ooni():
    mock = MagicMock(spec=OONI_API)
    mock.get_recent_measurements.return_value = [
        measurement("IR", "https://twitter.com/", True, "m1"),
        measurement("CN", "https://facebook.com/", True, "m2"),
        measurement("DE", "https://example.org/", False, "m3"),
    ]
    mock.get_measurements_between.return_value = []
    mock.get_incidents.return_value = []
    return mock


@pytest.fixture
def worldbank():
    mock = MagicMock(spec=WorldBankAPI)
    mock.get_internet_users.return_value = [
        wb_row("IS", "Iceland", 2022, 99.0),
        wb_row("TD", "Chad", 2022, 12.0),
    ]
    mock.get_mobile_subscriptions.return_value = [wb_row("IS", "Iceland", 2022, 120.0)]
    return mock


@pytest.fixture
def hibp():
    mock = MagicMock(spec=HIBP_API)
    mock.get_breaches.return_value = []
    return mock


@pytest.fixture
def wikipedia():
    mock = MagicMock(spec=WikipediaSpeedsAPI)
    mock.scrape_speed_data.return_value = []
    return mock


@pytest.fixture
def repository(tmp_path):
    return LocalFileRepository(snapshots_dir=tmp_path / "snapshots")


@pytest.fixture
def client(cloudflare, ooni, worldbank, hibp, wikipedia, repository):
    app.dependency_overrides[dependencies.get_cloudflare] = lambda: cloudflare
    app.dependency_overrides[dependencies.get_ooni] = lambda: ooni
    app.dependency_overrides[dependencies.get_worldbank] = lambda: worldbank
    app.dependency_overrides[dependencies.get_hibp] = lambda: hibp
    app.dependency_overrides[dependencies.get_wikipedia] = lambda: wikipedia
    app.dependency_overrides[dependencies.get_repository] = lambda: repository
    app.dependency_overrides[dependencies.get_random] = lambda: np.random.default_rng(7)
    yield TestClient(app)
    app.dependency_overrides.clear()

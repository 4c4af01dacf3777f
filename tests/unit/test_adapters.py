"""Tests for the shared HTTP client and the upstream API wrappers."""
from unittest.mock import MagicMock, patch

import pytest
import requests

from internet_pulse.adapters.client import PulseAPIClient
from internet_pulse.adapters.cloudflare.radar import CloudflareRadarAPI, summary_value
from internet_pulse.adapters.hibp.hibp import HIBP_API
from internet_pulse.adapters.ooni.ooni import OONI_API
from internet_pulse.adapters.worldbank.worldbank import INTERNET_USERS_INDICATOR, WorldBankAPI


def _response(status=200, body=b'{"ok": true}', url="https://example.test/x"):
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    resp.url = url
    return resp


class TestPulseAPIClient:

    def test_default_and_extra_headers(self):
        client = PulseAPIClient("https://example.test", headers={"X-Test": "1"})

        assert client.session.headers["X-Test"] == "1"
        assert client.session.headers["User-Agent"] == "Global-Internet-Pulse/1.0"
        assert client.session.headers["Accept"] == "application/json"

    def test_url_for(self):
        client = PulseAPIClient("https://example.test/api/")

        assert client.url_for("radar/x") == "https://example.test/api/radar/x"
        assert client.url_for("/radar/x") == "https://example.test/api/radar/x"
        assert client.url_for("") == "https://example.test/api"

    def test_get_parses_json(self):
        client = PulseAPIClient("https://example.test")
        with patch.object(client.session, "get", return_value=_response()) as mock_get:
            assert client.get("x", params={"limit": 5}) == {"ok": True}

        args, kwargs = mock_get.call_args
        assert args[0] == "https://example.test/x"
        assert kwargs["params"] == {"limit": 5}

    def test_http_error_raised(self):
        client = PulseAPIClient("https://example.test")
        with patch.object(client.session, "get", return_value=_response(status=503, body=b"down")):
            with pytest.raises(requests.HTTPError):
                client.get("x")

    def test_invalid_json_raises_value_error(self):
        client = PulseAPIClient("https://example.test")
        with patch.object(client.session, "get", return_value=_response(body=b"<html>")):
            with pytest.raises(ValueError):
                client.get("x")

    def test_empty_body(self):
        client = PulseAPIClient("https://example.test")
        with patch.object(client.session, "get", return_value=_response(body=b"")):
            assert client.get("x") == {}

    def test_get_text(self):
        client = PulseAPIClient("https://example.test")
        with patch.object(client.session, "get", return_value=_response(body=b"<html></html>")):
            assert client.get_text() == "<html></html>"


class TestCloudflare:

    def test_summary_value(self):
        payload = {"result": {"summary": {"http_requests_1d": 10}}}

        assert summary_value(payload, "http_requests_1d") == 10
        assert summary_value(payload, "bytes_1d") is None
        assert summary_value({}, "x") is None
        assert summary_value(None, "x") is None

    def test_endpoints(self):
        client = MagicMock()
        api = CloudflareRadarAPI(client=client)

        api.get_os_summary()
        api.get_layer3_attack_summary()

        assert [c.args[0] for c in client.get.call_args_list] == [
            "radar/http/summary/os",
            "radar/attacks/layer3/summary",
        ]


class TestOONI:

    def test_missing_results(self):
        client = MagicMock()
        client.get.return_value = {"results": None}

        assert OONI_API(client=client).get_recent_measurements() == []

    def test_window_params(self):
        client = MagicMock()
        client.get.return_value = {"results": [{"measurement_uid": "a"}]}

        rows = OONI_API(client=client).get_measurements_between("2025-08-12", "2025-08-19")

        assert rows == [{"measurement_uid": "a"}]
        assert client.get.call_args.kwargs["params"] == {"since": "2025-08-12", "until": "2025-08-19", "limit": 1000}


class TestWorldBank:

    def test_rows_returned(self):
        client = MagicMock()
        client.get.return_value = [{"page": 1}, [{"value": 1.0}]]

        rows = WorldBankAPI(client=client).get_internet_users(2015, 2025)

        assert rows == [{"value": 1.0}]
        assert client.get.call_args.args[0] == f"country/all/indicator/{INTERNET_USERS_INDICATOR}"
        assert client.get.call_args.kwargs["params"]["date"] == "2015:2025"

    def test_error_payload_yields_empty(self):
        client = MagicMock()
        client.get.return_value = [{"message": [{"id": "120", "value": "Invalid value"}]}]

        assert WorldBankAPI(client=client).get_indicator("X", 2020, 2021) == []

    def test_unexpected_payload(self):
        client = MagicMock()
        client.get.return_value = {"oops": True}

        with pytest.raises(ValueError):
            WorldBankAPI(client=client).get_indicator("X", 2020, 2021)


class TestHIBP:

    def test_non_list_rejected(self):
        client = MagicMock()
        client.get.return_value = {"message": "nope"}

        with pytest.raises(ValueError):
            HIBP_API(client=client).get_breaches()

"""Tests for live feed generation."""
import numpy as np

from internet_pulse.feed.events import EVENT_TYPES, build_feed, events_from_censorship, generate_message


def _event(blocked=True, country="IR"):
    return {
        "country": country,
        "test_type": "web_connectivity",
        "blocked": blocked,
        "timestamp": "2025-08-19T10:00:00Z",
    }


def test_messages_have_no_placeholders():
    rng = np.random.default_rng(0)
    for event_type in EVENT_TYPES:
        for _ in range(20):
            assert "{" not in generate_message(event_type, rng)


class TestCensorshipEvents:

    def test_at_most_three(self):
        items = events_from_censorship([_event()] * 5, stamp=1)

        assert len(items) == 3
        assert [i["id"] for i in items] == ["ooni-1-0", "ooni-1-1", "ooni-1-2"]

    def test_item_fields(self):
        blocked, suspicious = events_from_censorship([_event(True), _event(False, "CN")], stamp=1)

        assert blocked["type"] == "censorship"
        assert blocked["source"] == "OONI"
        assert blocked["severity"] == "high"
        assert blocked["message"] == "web_connectivity anomaly detected: Blocked content"
        assert blocked["timestamp"] == "2025-08-19T10:00:00.000Z"
        assert suspicious["severity"] == "medium"
        assert suspicious["message"].endswith("Suspicious activity")


class TestBuildFeed:

    def test_real_events_first(self):
        rng = np.random.default_rng(0)

        feed = build_feed([_event(), _event()], rng, limit=10)

        assert len(feed) == 10
        assert feed[0]["source"] == "OONI" and feed[1]["source"] == "OONI"
        assert feed[0]["id"].startswith("ooni-")
        assert not feed[2]["id"].startswith("ooni-")

    def test_type_filter(self):
        rng = np.random.default_rng(0)

        feed = build_feed([_event()], rng, limit=5, event_type="recovery")

        assert len(feed) == 5
        assert all(item["type"] == "recovery" for item in feed)

    def test_simulated_only(self):
        rng = np.random.default_rng(0)
        feed = build_feed([], rng, limit=4)
        assert len(feed) == 4

"""Tests for OONI measurement aggregation."""
from datetime import datetime, timezone

import numpy as np

from internet_pulse.pulse.censorship import (
    count_anomalies,
    count_countries,
    country_summary,
    outage_count,
    process_censorship_data,
    recent_events,
)


def _m(cc, domain, anomaly, uid="m"):
    return {
        "measurement_uid": uid,
        "probe_cc": cc,
        "probe_asn": "AS12880",
        "test_name": "web_connectivity",
        "input": domain,
        "anomaly": anomaly,
        "test_start_time": "2025-08-19T10:00:00Z",
    }


MEASUREMENTS = [
    _m("IR", "twitter.com", True, "m1"),
    _m("IR", "twitter.com", True, "m2"),
    _m("IR", "facebook.com", None, "m3"),
    _m("CN", "facebook.com", True, "m4"),
    _m(None, None, False, "m5"),
]

NOW = datetime(2025, 8, 19, 12, 0, tzinfo=timezone.utc)


class TestMeasurementSummary:

    def test_only_literal_true_counts_as_anomaly(self):
        assert count_anomalies(MEASUREMENTS) == 3

    def test_countries_include_missing_code(self):
        assert count_countries(MEASUREMENTS) == 3

    def test_outage_count_is_clamped(self):
        rng = np.random.default_rng(0)
        assert outage_count(0, rng) >= 5
        assert outage_count(100, rng) == 50
        assert 10 <= outage_count(10, rng) <= 14

    def test_recent_events(self):
        events = recent_events(MEASUREMENTS, limit=10)

        assert len(events) == 5
        assert events[0]["id"] == "m1"
        assert events[0]["asn"] == "AS12880"
        assert events[2]["blocked"] is False
        assert events[4]["domain"] == "Unknown"

    def test_recent_events_limit(self):
        assert len(recent_events(MEASUREMENTS, limit=2)) == 2

    def test_country_summary_sorted_by_blocked(self):
        summary = country_summary(MEASUREMENTS)

        assert summary == [
            {"country": "IR", "blocked": 2, "total": 3},
            {"country": "CN", "blocked": 1, "total": 1},
            {"country": "ZZ", "blocked": 0, "total": 1},
        ]

    def test_country_summary_empty(self):
        assert country_summary([]) == []


class TestProcessCensorshipData:

    def test_totals(self):
        result = process_censorship_data(MEASUREMENTS, [], now=NOW)

        assert result["total_tests"] == 5
        assert result["total_blocked"] == 3
        assert result["affected_countries"] == 3

    def test_trending_blocks(self):
        result = process_censorship_data(MEASUREMENTS, [], now=NOW)

        assert result["trending_blocks"] == [
            {"domain": "twitter.com", "block_count": 2},
            {"domain": "facebook.com", "block_count": 1},
        ]

    def test_country_risks(self):
        result = process_censorship_data(MEASUREMENTS, [], now=NOW)
        risks = result["country_risks"]

        assert [r["country"] for r in risks] == ["CN", "IR", "ZZ"]
        assert risks[0]["risk_score"] == 100.0
        assert abs(risks[1]["risk_score"] - 200 / 3) < 1e-9
        assert risks[1]["domains_affected"] == 2
        assert risks[1]["total_tests"] == 3
        assert risks[2]["domains_affected"] == 0

    def test_new_incidents(self):
        incidents = [
            {"id": 1, "start_date": "2025-08-19"},
            {"id": 2, "start_date": "2025-08-18T20:00:00Z"},
            {"id": 3, "start_date": "2025-08-10"},
            {"id": 4, "start_date": None},
        ]

        result = process_censorship_data(MEASUREMENTS, incidents, now=NOW)

        assert [i["id"] for i in result["new_incidents"]] == [1, 2]

    def test_new_incidents_capped_at_five(self):
        incidents = [{"id": i, "start_date": "2025-08-19"} for i in range(8)]
        result = process_censorship_data([], incidents, now=NOW)
        assert len(result["new_incidents"]) == 5

    def test_empty_measurements(self):
        result = process_censorship_data([], [], now=NOW)

        assert result["total_tests"] == 0
        assert result["total_blocked"] == 0
        assert result["trending_blocks"] == []
        assert result["country_risks"] == []

"""Tests for regional traffic patterns and speed analytics."""
from datetime import datetime, timezone

from internet_pulse.pulse.patterns import (
    generate_traffic_patterns,
    global_traffic,
    hourly_pattern,
    local_hour,
    peak_hours,
    regional_summary,
)
from internet_pulse.pulse.speed_analytics import generate_speed_data, global_speed_stats

MONDAY_1PM = datetime(2025, 8, 18, 13, 0, tzinfo=timezone.utc)
MONDAY_6PM = datetime(2025, 8, 18, 18, 0, tzinfo=timezone.utc)
SATURDAY_6PM = datetime(2025, 8, 23, 18, 0, tzinfo=timezone.utc)


def by_region(patterns):
    return {p["region"]: p for p in patterns}


class TestTrafficPatterns:

    def test_local_hour_wraps(self):
        assert local_hour(2, -5) == 21
        assert local_hour(20, 8) == 4

    def test_bands_follow_local_hour(self, rng):
        patterns = by_region(generate_traffic_patterns(rng, MONDAY_1PM))

        assert patterns["North America"]["hour"] == 8
        assert 85 <= patterns["North America"]["traffic"] <= 100
        assert patterns["Europe"]["hour"] == 14
        assert 70 <= patterns["Europe"]["traffic"] <= 85
        assert patterns["Asia-Pacific"]["hour"] == 21
        assert 85 <= patterns["Asia-Pacific"]["traffic"] <= 100
        assert all(p["day"] == "Monday" for p in patterns.values())

    def test_late_night_band(self, rng):
        patterns = by_region(generate_traffic_patterns(rng, datetime(2025, 8, 18, 4, tzinfo=timezone.utc)))

        assert patterns["Europe"]["hour"] == 5
        assert 25 <= patterns["Europe"]["traffic"] <= 40

    def test_weekend_evening_boost(self, rng):
        weekday = by_region(generate_traffic_patterns(rng, MONDAY_6PM))
        weekend = by_region(generate_traffic_patterns(rng, SATURDAY_6PM))

        assert weekday["Europe"]["hour"] == weekend["Europe"]["hour"] == 19
        assert 85 <= weekday["Europe"]["traffic"] <= 100
        assert 102 <= weekend["Europe"]["traffic"] <= 120
        assert weekend["Asia-Pacific"]["hour"] == 2
        assert 25 <= weekend["Asia-Pacific"]["traffic"] <= 40

    def test_regional_summary(self, rng):
        patterns = generate_traffic_patterns(rng, MONDAY_1PM)
        regions = regional_summary(patterns, rng)

        assert [r["region"] for r in regions] == [p["region"] for p in patterns]
        for region, pattern in zip(regions, patterns):
            assert region["current_traffic"] == pattern["traffic"]
            assert 95 <= region["peak_traffic"] <= 100
            assert 65 <= region["avg_traffic"] <= 75

    def test_global_traffic_is_mean_of_current(self):
        assert global_traffic([{"current_traffic": 80}, {"current_traffic": 60}]) == 70.0
        assert global_traffic([]) == 0.0

    def test_peak_hours_and_daily_curve(self, rng):
        assert peak_hours()[0] == {
            "region": "North America",
            "morning_peak": "8:00-10:00 AM EST",
            "evening_peak": "7:00-11:00 PM EST",
            "off_peak_hours": "2:00-6:00 AM EST",
        }

        curve = hourly_pattern(rng)
        assert len(curve) == 24
        assert curve[0]["hour"] == "00:00"
        assert 25 <= curve[3]["traffic"] <= 35
        assert 80 <= curve[20]["traffic"] <= 95


class TestSpeedAnalytics:

    def test_off_peak_speeds(self, rng):
        samples = {s["region"]: s for s in generate_speed_data(rng, MONDAY_1PM)}

        assert list(samples) == ["North America", "Europe", "Asia-Pacific", "Latin America"]
        north_america = samples["North America"]
        assert 110 <= north_america["avg_download"] <= 130
        assert 35 <= north_america["avg_upload"] <= 45
        assert 10 <= north_america["avg_ping"] <= 20
        assert round(north_america["avg_download"], 1) == north_america["avg_download"]
        assert north_america["timestamp"] == "2025-08-18T13:00:00.000Z"

    def test_congested_hours_slow_down(self, rng):
        samples = {s["region"]: s for s in generate_speed_data(rng, datetime(2025, 8, 18, 8, tzinfo=timezone.utc))}

        assert 74 <= samples["North America"]["avg_download"] <= 94
        assert 23 <= samples["North America"]["avg_upload"] <= 33
        assert 10 <= samples["North America"]["avg_ping"] <= 20

    def test_global_averages(self):
        samples = [
            {"avg_download": 100.0, "avg_upload": 40.0, "avg_ping": 15.0},
            {"avg_download": 50.0, "avg_upload": 20.0, "avg_ping": 25.0},
        ]

        stats = global_speed_stats(samples)

        assert stats["global_avg_download"] == 75.0
        assert stats["global_avg_upload"] == 30.0
        assert stats["global_avg_ping"] == 20.0
        assert stats["top_countries"][0]["country"] == "South Korea"
        assert stats["slowest_countries"][-1]["country"] == "Niger"

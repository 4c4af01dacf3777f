"""Tests for country speed rankings."""
import numpy as np

from internet_pulse.speeds.rankings import (
    BASE_SPEED_DATA,
    base_speed_data,
    continents,
    process_speed_data,
    rank_by_weighted_score,
    vary_speed_data,
    weighted_score,
)


class TestRanking:

    def test_weighted_score(self):
        assert weighted_score({"mobile_speed": 100, "broadband_speed": 200}) == 160

    def test_base_table_ranking(self):
        ranked = rank_by_weighted_score(base_speed_data())

        assert len(ranked) == 35
        assert ranked[0]["country"] == "Monaco"
        assert [r["rank"] for r in ranked] == list(range(1, 36))
        scores = [weighted_score(r) for r in ranked]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_input_order(self):
        rows = [
            {"country": "A", "mobile_speed": 10, "broadband_speed": 10},
            {"country": "B", "mobile_speed": 10, "broadband_speed": 10},
        ]
        assert [r["country"] for r in rank_by_weighted_score(rows)] == ["A", "B"]

    def test_input_not_mutated(self):
        rows = base_speed_data()
        rank_by_weighted_score(rows)
        assert "rank" not in rows[0]


class TestProcessSpeedData:

    def test_rounding_and_stamp(self):
        rows = [{"country": "France", "mobile_speed": 45.26, "broadband_speed": 100.04}]

        result = process_speed_data(rows, last_updated="2025-09-01")

        assert result == [{
            "country": "France",
            "country_code": "FR",
            "continent": "Europe",
            "mobile_speed": 45.3,
            "broadband_speed": 100.0,
            "last_updated": "2025-09-01",
            "rank": 1,
        }]

    def test_unknown_country(self):
        result = process_speed_data([{"country": "Atlantis", "mobile_speed": 1, "broadband_speed": 2}])

        assert result[0]["country_code"] == "UN"
        assert result[0]["continent"] == "Unknown"


class TestVariation:

    def test_bounded_jitter(self):
        rng = np.random.default_rng(3)
        base = base_speed_data()

        varied = vary_speed_data(base, rng)

        for before, after in zip(base, varied):
            assert abs(after["mobile_speed"] - before["mobile_speed"]) <= 5
            assert abs(after["broadband_speed"] - before["broadband_speed"]) <= 10
            assert after["country_code"] == before["country_code"]
        assert base[0]["mobile_speed"] == BASE_SPEED_DATA[0][3]


def test_continents_sorted_unique():
    assert continents(base_speed_data()) == [
        "Africa", "Asia", "Europe", "North America", "Oceania", "South America",
    ]

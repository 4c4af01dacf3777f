"""Tests for World Bank indicator processing."""
import numpy as np

from internet_pulse.pulse.connectivity import (
    connectivity_issues,
    indicator_frame,
    latest_by_country,
    process_connectivity_data,
    process_world_bank_data,
)


def _row(code, name, year, value):
    return {"country": {"id": code, "value": name}, "date": str(year), "value": value}


ROWS = [
    _row("IS", "Iceland", 2022, 99.0),
    _row("IS", "Iceland", 2021, 98.0),
    _row("TD", "Chad", 2021, 10.0),
    _row("TD", "Chad", 2022, 12.0),
    _row("AA", "Nowhere", 2022, 0.0),
    _row("XX", "Missing", 2022, None),
]


class TestIndicatorFrame:

    def test_null_values_dropped(self):
        df = indicator_frame(ROWS)
        assert len(df) == 5
        assert "XX" not in set(df["code"])

    def test_latest_year_wins_regardless_of_order(self):
        latest = latest_by_country(indicator_frame(ROWS))
        values = dict(zip(latest["code"], latest["value"]))

        assert values["TD"] == 12.0
        assert values["IS"] == 99.0
        assert list(latest["code"]) == ["IS", "TD", "AA"]


class TestProcessWorldBankData:

    def test_global_trends_sorted_by_year(self):
        result = process_world_bank_data(ROWS)

        assert result["global_trends"] == [
            {"year": 2021, "internet_users": 54.0},
            {"year": 2022, "internet_users": 37.0},
        ]

    def test_top_countries_exclude_zero(self):
        result = process_world_bank_data(ROWS)
        top = result["top_countries"]

        assert [c["country_code"] for c in top] == ["IS", "TD"]
        assert top[0]["latest_value"] == 99.0
        assert [p["year"] for p in top[0]["trend"]] == [2022, 2021]

    def test_empty_rows(self):
        result = process_world_bank_data([])
        assert result["global_trends"] == []
        assert result["top_countries"] == []


class TestConnectivityIssues:

    def test_floor_of_five(self):
        rng = np.random.default_rng(0)
        assert 5 <= connectivity_issues(ROWS, rng) <= 9

    def test_ceiling_of_twenty_five(self):
        rows = [_row(f"C{i}", "x", 2021, 10.0) for i in range(300)]
        rng = np.random.default_rng(0)
        assert 25 <= connectivity_issues(rows, rng) <= 29

    def test_old_years_ignored(self):
        rows = [_row(f"C{i}", "x", 2015, 10.0) for i in range(300)]
        rng = np.random.default_rng(0)
        assert connectivity_issues(rows, rng) <= 9


class TestProcessConnectivityData:

    PENETRATION = [
        _row("IS", "Iceland", 2022, 99.0),
        _row("TD", "Chad", 2022, 12.0),
        _row("KE", "Kenya", 2022, 45.0),
        _row("BR", "Brazil", 2022, 70.0),
    ]
    MOBILE = [
        _row("IS", "Iceland", 2022, 120.0),
        _row("KE", "Kenya", 2022, 110.0),
    ]

    def test_gaps_and_growth(self):
        result = process_connectivity_data(self.PENETRATION, self.MOBILE)

        assert [c["country"] for c in result["gaps"]] == ["Chad", "Kenya"]
        assert [c["country"] for c in result["growth"]] == ["Brazil", "Kenya"]
        assert result["gaps"][1]["mobile_penetration"] == 110.0
        assert "mobile_penetration" not in result["gaps"][0]

    def test_means(self):
        result = process_connectivity_data(self.PENETRATION, self.MOBILE)

        assert result["connectivity"]["global"] == 56.5
        assert result["connectivity"]["mobile"] == 57.5

    def test_empty(self):
        result = process_connectivity_data([], [])

        assert result["gaps"] == []
        assert result["growth"] == []
        assert result["connectivity"] == {"global": 0.0, "mobile": 0.0}

from datetime import date, datetime, timezone

import numpy as np

from internet_pulse.utils.dates import first_of_next_month, iso_timestamp, parse_timestamp
from internet_pulse.utils.numbers import format_large_number, format_number, round_half_up
from internet_pulse.utils.reproducibility import choice, get_rng, randint


def test_round_half_up_rounds_halves_upwards():
    assert round_half_up(2.5) == 3.0
    assert round_half_up(97.5) == 98.0
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(45.26, 1) == 45.3


def test_format_large_number_suffixes():
    assert format_large_number(1.5e12) == "1.5T"
    assert format_large_number(2.4e9) == "2.4B"
    assert format_large_number(2_500_000) == "2.5M"
    assert format_large_number(1500) == "1.5K"
    assert format_large_number(999) == "999"
    assert format_large_number(0) == "0"


def test_format_number_keeps_full_precision():
    assert format_number(104.53218732) == "104.53218732"
    assert format_number(120.0) == "120"
    assert format_large_number(12.3456789) == "12.3456789"


def test_iso_timestamp_has_millis_and_z():
    dt = datetime(2025, 8, 19, 10, 30, tzinfo=timezone.utc)
    assert iso_timestamp(dt) == "2025-08-19T10:30:00.000Z"


def test_first_of_next_month_rolls_over_year():
    assert first_of_next_month(date(2025, 8, 19)) == "2025-09-01"
    assert first_of_next_month(date(2025, 12, 15)) == "2026-01-01"


def test_parse_timestamp():
    assert parse_timestamp(None) is None
    assert parse_timestamp("not a date") is None
    ts = parse_timestamp("2025-08-19T10:00:00Z")
    assert ts.year == 2025 and ts.hour == 10
    assert ts.tzinfo is not None


class TestReproducibility:

    def test_seeded_generators_agree(self):
        assert get_rng(1).uniform() == get_rng(1).uniform()

    def test_randint_is_inclusive(self):
        rng = np.random.default_rng(0)
        draws = {randint(rng, 0, 4) for _ in range(500)}
        assert draws == {0, 1, 2, 3, 4}

    def test_choice_returns_member(self):
        rng = np.random.default_rng(0)
        options = ["a", "b", "c"]
        assert all(choice(rng, options) in options for _ in range(20))

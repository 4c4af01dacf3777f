"""Tests for daily pulse scoring, anomaly detection, predictions and highlights."""
from internet_pulse.pulse.highlights import generate_daily_highlights
from internet_pulse.pulse.scoring import (
    calculate_freedom_score,
    calculate_global_health_score,
    detect_traffic_anomalies,
    generate_predictions,
    identify_risk_countries,
    risk_level,
)


def _cloudflare(requests=1e12, attacks=1e6, avg_speed=1000):
    return {
        "traffic": {"http_requests": requests},
        "security": {"attacks": attacks},
        "performance": {"avg_speed": avg_speed},
    }


class TestHealthScore:

    def test_weighted_components(self):
        # 100*0.3 + 90*0.25 + 100*0.25 + 100*0.2 = 97.5
        assert calculate_global_health_score(_cloudflare(), {"total_blocked": 0}) == 98

    def test_components_are_clamped(self):
        score = calculate_global_health_score(
            _cloudflare(requests=5e12, attacks=50e6, avg_speed=5000),
            {"total_blocked": 100_000},
        )
        # traffic 100, security 0, freedom 0, performance 100
        assert score == 50


class TestFreedomScore:

    def test_ratio_and_diversity_penalty(self):
        ooni = {"total_tests": 1000, "total_blocked": 100, "affected_countries": 60}
        assert calculate_freedom_score(ooni) == 85

    def test_zero_tests_treated_as_one(self):
        assert calculate_freedom_score({"total_tests": 0, "total_blocked": 0, "affected_countries": 0}) == 100

    def test_never_negative(self):
        ooni = {"total_tests": 10, "total_blocked": 10, "affected_countries": 200}
        assert calculate_freedom_score(ooni) == 0


class TestRiskCountries:

    def test_risk_level_thresholds(self):
        assert risk_level(71) == "high"
        assert risk_level(70) == "medium"
        assert risk_level(41) == "medium"
        assert risk_level(40) == "low"

    def test_top_five_with_levels(self):
        risks = [
            {"country": f"C{i}", "risk_score": score, "domains_affected": 1, "total_tests": 10}
            for i, score in enumerate([90, 60, 30, 20, 10, 5, 1])
        ]

        result = identify_risk_countries({"country_risks": risks})

        assert len(result) == 5
        assert [r["risk_level"] for r in result[:3]] == ["high", "medium", "low"]
        assert "risk_level" not in risks[0]


class TestTrafficAnomalies:

    def test_empty_history(self):
        assert detect_traffic_anomalies([]) == []

    def test_flat_history(self):
        assert detect_traffic_anomalies([{"value": 100}] * 10) == []

    def test_spike(self):
        history = [{"value": 100}] * 29 + [{"value": 1000}]

        anomalies = detect_traffic_anomalies(history)

        assert len(anomalies) == 1
        assert anomalies[0]["type"] == "spike"
        assert anomalies[0]["magnitude"] == "669.2%"

    def test_drop(self):
        history = [{"value": 100}] * 29 + [{"value": 0}]

        anomalies = detect_traffic_anomalies(history)

        assert anomalies[0]["type"] == "drop"
        assert anomalies[0]["magnitude"] == "100.0%"


class TestPredictions:

    def test_elevated_threat_and_high_censorship_risk(self):
        predictions = generate_predictions(_cloudflare(attacks=600_000), {"new_incidents": [1, 2, 3]})

        assert predictions["security"]["threat_level"] == "elevated"
        assert predictions["censorship"]["risk_level"] == "high"
        assert predictions["traffic"]["trend"] == "increasing"

    def test_normal_threat_and_moderate_risk(self):
        predictions = generate_predictions(_cloudflare(attacks=500_000), {"new_incidents": [1, 2]})

        assert predictions["security"]["threat_level"] == "normal"
        assert predictions["censorship"]["risk_level"] == "moderate"


class TestHighlights:

    def test_all_highlights_in_order(self):
        cloudflare = {
            "traffic": {"http_requests": 2e12},
            "security": {"attacks": 2e6},
            "performance": {"avg_speed": 120.0},
        }
        ooni = {"new_incidents": [{}, {}], "country_risks": [{"country": "IR", "risk_score": 80}]}
        connectivity = {"gaps": [{"country": "Chad", "internet_penetration": 12.34}]}

        highlights = generate_daily_highlights(cloudflare, ooni, connectivity)

        assert highlights == [
            "🌐 Global HTTP requests exceeded 1 trillion today",
            "🛡️ Over 1 million cyber attacks detected and mitigated",
            "🚨 2 new internet censorship incidents detected",
            "⚡ Global internet speeds averaging 120ms",
            "⚠️ Highest censorship risk detected in IR",
            "📶 Digital divide: Chad has only 12.3% internet penetration",
        ]

    def test_quiet_day(self):
        cloudflare = {
            "traffic": {"http_requests": 1e9},
            "security": {"attacks": 10},
            "performance": {"avg_speed": 50},
        }
        ooni = {"new_incidents": [], "country_risks": [{"country": "IR", "risk_score": 20}]}

        assert generate_daily_highlights(cloudflare, ooni, {"gaps": []}) == []

    def test_speed_highlight_keeps_full_precision(self):
        cloudflare = {
            "traffic": {"http_requests": 1e9},
            "security": {"attacks": 10},
            "performance": {"avg_speed": 104.53218732},
        }
        ooni = {"new_incidents": [], "country_risks": []}

        assert generate_daily_highlights(cloudflare, ooni, {"gaps": []}) == [
            "⚡ Global internet speeds averaging 104.53218732ms",
        ]

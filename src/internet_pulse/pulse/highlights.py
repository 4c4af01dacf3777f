from typing import Any, Dict, List

from internet_pulse.utils.numbers import format_number

MAX_HIGHLIGHTS = 6


def generate_daily_highlights(
    cloudflare: Dict[str, Any],
    ooni: Dict[str, Any],
    connectivity: Dict[str, Any],
) -> List[str]:
    """Headline strings for the day, in fixed priority order."""
    highlights = []

    if cloudflare["traffic"]["http_requests"] > 1e12:
        highlights.append("🌐 Global HTTP requests exceeded 1 trillion today")

    if cloudflare["security"]["attacks"] > 1_000_000:
        highlights.append("🛡️ Over 1 million cyber attacks detected and mitigated")

    if ooni["new_incidents"]:
        highlights.append(f"🚨 {len(ooni['new_incidents'])} new internet censorship incidents detected")

    avg_speed = cloudflare["performance"]["avg_speed"]
    if avg_speed > 100:
        highlights.append(f"⚡ Global internet speeds averaging {format_number(avg_speed)}ms")

    risks = ooni.get("country_risks") or []
    if risks and risks[0]["risk_score"] > 50:
        highlights.append(f"⚠️ Highest censorship risk detected in {risks[0]['country']}")

    gaps = connectivity.get("gaps") or []
    if gaps:
        lowest = gaps[0]
        highlights.append(
            f"📶 Digital divide: {lowest['country']} has only "
            f"{lowest['internet_penetration']:.1f}% internet penetration"
        )

    return highlights[:MAX_HIGHLIGHTS]

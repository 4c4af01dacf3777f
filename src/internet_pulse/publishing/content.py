"""
Publishing content for the daily pulse: social posts and the newsletter.

Functions take the daily pulse as a plain dict with snake_case keys
(`DailyPulse.model_dump()`). Stored snapshots are camelCase, so run them
through `DailyPulse.model_validate(...).model_dump()` first.
"""

from datetime import date
from html import escape
from typing import Any, Dict, List

from internet_pulse.utils.numbers import format_large_number

HASHTAGS = ["#InternetHealth", "#DigitalRights", "#TechNews", "#GlobalConnectivity", "#CyberSecurity", "#DigitalFreedom"]


def health_emoji(score: int) -> str:
    if score >= 85:
        return "🟢"
    if score >= 70:
        return "🟡"
    return "🔴"


def _requests(pulse: Dict[str, Any]) -> float:
    return ((pulse.get("traffic") or {}).get("volume") or {}).get("http_requests") or 0


def _attacks(pulse: Dict[str, Any]) -> float:
    return ((pulse.get("traffic") or {}).get("security") or {}).get("attacks") or 0


def _prediction(pulse: Dict[str, Any], key: str, default: str) -> str:
    return ((pulse.get("predictions") or {}).get(key) or {}).get("prediction") or default


def _risk_countries(pulse: Dict[str, Any]) -> List[Dict[str, Any]]:
    return (pulse.get("freedom") or {}).get("risk_countries") or []


def generate_social_media_content(pulse: Dict[str, Any]) -> Dict[str, Any]:
    score = pulse["health_score"]
    emoji = health_emoji(score)
    highlights = pulse.get("highlights") or []
    incidents = (pulse.get("freedom") or {}).get("incidents") or []

    risk_lines = "\n".join(f"• {c['country']}: {c['risk_level']} risk" for c in _risk_countries(pulse)[:3])

    twitter = [
        f"{emoji} Global Internet Health Score: {score}/100\n\n"
        + "\n".join(highlights[:3])
        + "\n\n#InternetHealth #DigitalRights #TechNews",

        f"🌐 Daily Internet Pulse - {pulse['date']}\n\n"
        f"• Traffic: {format_large_number(_requests(pulse))} requests\n"
        f"• Censorship incidents: {len(incidents)}\n"
        f"• Security threats mitigated: {format_large_number(_attacks(pulse))}\n\n#GlobalInternet",

        f"📊 Internet Freedom Alert:\n{risk_lines or 'No high-risk countries detected'}\n\n#DigitalFreedom #Censorship",
    ]

    insight_lines = "\n".join(f"• {h}" for h in highlights)
    linkedin = (
        f"🌐 Daily Global Internet Pulse - {pulse['date']}\n\n"
        f"Internet Health Score: {score}/100 {emoji}\n\n"
        f"Key Insights:\n{insight_lines}\n\n"
        "Predictions for tomorrow:\n"
        f"• Traffic: {_prediction(pulse, 'traffic', 'Stable')}\n"
        f"• Security: {_prediction(pulse, 'security', 'Normal threat levels')}\n"
        f"• Freedom: {_prediction(pulse, 'censorship', 'No major concerns')}\n\n"
        "Stay informed about global internet health and digital rights.\n\n"
        "#InternetHealth #DigitalRights #TechAnalytics #GlobalConnectivity"
    )

    instagram = {
        "caption": (
            f"🌐 Global Internet Pulse {pulse['date']}\n\n"
            f"Health Score: {score}/100 {emoji}\n\n"
            + "\n\n".join(highlights[:4])
            + "\n\n#InternetHealth #DigitalWorld #TechNews #GlobalConnectivity"
        ),
        "hashtags": list(HASHTAGS),
    }

    return {"twitter": twitter, "linkedin": linkedin, "instagram": instagram}


def long_date(iso: str) -> str:
    """'2025-08-19' -> 'Tuesday, August 19, 2025'"""
    d = date.fromisoformat(iso)
    return f"{d.strftime('%A')}, {d.strftime('%B')} {d.day}, {d.year}"


def generate_newsletter_content(pulse: Dict[str, Any]) -> Dict[str, str]:
    score = pulse["health_score"]
    when = long_date(pulse["date"])
    highlights = pulse.get("highlights") or []
    freedom = pulse.get("freedom") or {}

    traffic_prediction = _prediction(pulse, "traffic", "Stable patterns expected")
    security_prediction = _prediction(pulse, "security", "Normal threat levels")
    freedom_prediction = _prediction(pulse, "censorship", "No major concerns")
    requests_text = format_large_number(_requests(pulse))
    attacks_text = format_large_number(_attacks(pulse))
    risk_count = len(_risk_countries(pulse))
    freedom_score = freedom.get("score", "N/A")

    highlight_html = "".join(f'<div class="highlight">{escape(h)}</div>' for h in highlights)
    html = f"""<html>
<head>
  <style>
    body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; margin: 0; padding: 20px; background: #0f1419; color: #e5e7eb; }}
    .container {{ max-width: 600px; margin: 0 auto; background: #1e293b; border-radius: 12px; overflow: hidden; }}
    .header {{ background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); padding: 30px; text-align: center; }}
    .score {{ font-size: 48px; font-weight: bold; color: white; margin: 10px 0; }}
    .content {{ padding: 30px; }}
    .highlight {{ background: #374151; padding: 15px; margin: 10px 0; border-radius: 8px; border-left: 4px solid #3b82f6; }}
    .prediction {{ background: #1f2937; padding: 20px; margin: 20px 0; border-radius: 8px; }}
    .footer {{ background: #111827; padding: 20px; text-align: center; font-size: 12px; color: #9ca3af; }}
  </style>
</head>
<body>
  <div class="container">
    <div class="header">
      <h1>Global Internet Pulse</h1>
      <div class="score">{score}/100</div>
      <p>{when}</p>
    </div>
    <div class="content">
      <h2>🌟 Today's Highlights</h2>
      {highlight_html}
      <h2>🔮 Tomorrow's Predictions</h2>
      <div class="prediction">
        <strong>Traffic:</strong> {escape(traffic_prediction)}<br>
        <strong>Security:</strong> {escape(security_prediction)}<br>
        <strong>Freedom:</strong> {escape(freedom_prediction)}
      </div>
      <h2>📊 Quick Stats</h2>
      <ul>
        <li>Global HTTP Requests: {requests_text}</li>
        <li>Security Threats Mitigated: {attacks_text}</li>
        <li>Countries with Censorship Activity: {risk_count}</li>
        <li>Internet Freedom Score: {freedom_score}</li>
      </ul>
    </div>
    <div class="footer">
      <p>Generated by Global Internet Pulse</p>
    </div>
  </div>
</body>
</html>
"""

    highlight_lines = "\n".join(f"• {h}" for h in highlights)
    text = (
        f"Global Internet Pulse - {when}\n\n"
        f"Health Score: {score}/100\n\n"
        f"Today's Highlights:\n{highlight_lines}\n\n"
        "Tomorrow's Predictions:\n"
        f"• Traffic: {_prediction(pulse, 'traffic', 'Stable')}\n"
        f"• Security: {_prediction(pulse, 'security', 'Normal')}\n"
        f"• Freedom: {_prediction(pulse, 'censorship', 'No concerns')}\n\n"
        "Quick Stats:\n"
        f"• Global HTTP Requests: {requests_text}\n"
        f"• Security Threats Mitigated: {attacks_text}\n"
        f"• Countries with Censorship: {risk_count}\n"
    )

    return {
        "subject": f"🌐 Internet Pulse {score}/100 - {when}",
        "html": html,
        "text": text,
    }

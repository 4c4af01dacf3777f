"""
API Routers - HTTP endpoint handlers

Each router handles a specific domain of functionality:
- traffic: Cloudflare Radar traffic summary
- censorship: OONI censorship measurements
- connectivity: World Bank internet penetration trends
- breaches: HaveIBeenPwned breach alerts
- speeds: Country internet speed rankings
- pulse: Daily internet pulse report and its history
- cron: Scheduled daily and monthly jobs
- feed: Live event feed
- statistics: Statistics panel numbers
- analytics: Regional traffic patterns and speed analytics
- health: Health checks and system info
"""

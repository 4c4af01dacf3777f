"""
Global Internet Pulse - FastAPI Application

Main entry point for the API server.
Environment-agnostic: configuration reads from settings (.env file).
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from internet_pulse import __version__
from internet_pulse.logging_setup import setup_logging
from internet_pulse.settings import get_settings
from api.dependencies import lifespan_handler
from api.routers import (
    analytics,
    breaches,
    censorship,
    connectivity,
    cron,
    feed,
    health,
    pulse,
    speeds,
    statistics,
    traffic,
)

# Get settings
cfg = get_settings()

# Configure logging
setup_logging(cfg.log_level)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Configuration is loaded from settings (reads from .env file).

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Global Internet Pulse API",
        description="Internet health dashboard API aggregating Cloudflare Radar, OONI, World Bank and HaveIBeenPwned data",
        version=__version__,
        lifespan=lifespan_handler  # Handles startup/shutdown
    )

    # CORS configuration from settings
    logger.info(f"Configuring CORS with origins: {cfg.cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount routers
    app.include_router(traffic.router, prefix="/api", tags=["traffic"])
    app.include_router(censorship.router, prefix="/api", tags=["censorship"])
    app.include_router(connectivity.router, prefix="/api", tags=["connectivity"])
    app.include_router(breaches.router, prefix="/api", tags=["breaches"])
    app.include_router(speeds.router, prefix="/api", tags=["speeds"])
    app.include_router(pulse.router, prefix="/api", tags=["daily-pulse"])
    app.include_router(cron.router, prefix="/api/cron", tags=["cron"])
    app.include_router(feed.router, prefix="/api", tags=["live-feed"])
    app.include_router(statistics.router, prefix="/api", tags=["statistics"])
    app.include_router(analytics.router, prefix="/api", tags=["analytics"])
    app.include_router(health.router, prefix="/api/health", tags=["health"])

    logger.info(f"FastAPI application created (env={cfg.env})")

    return app


# Create app instance
app = create_app()


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "Global Internet Pulse API",
        "version": __version__,
        "environment": cfg.env,
        "status": "running",
        "docs": "/docs",
        "health": "/api/health/ready"
    }


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting API server on {cfg.api_host}:{cfg.api_port}")
    logger.info(f"Environment: {cfg.env}")
    logger.info(f"Reload: {cfg.api_reload}")
    logger.info(f"Workers: {cfg.api_workers}")

    uvicorn.run(
        "api.main:app",
        host=cfg.api_host,
        port=cfg.api_port,
        reload=cfg.api_reload,
        workers=cfg.api_workers if not cfg.api_reload else 1,  # Workers only work without reload
        log_level=cfg.log_level.lower()
    )

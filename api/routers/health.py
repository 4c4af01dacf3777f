"""
Health Router - Health checks and system status endpoints
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from internet_pulse import __version__
from internet_pulse.settings import get_settings

from api.dependencies import AppState, get_app_state

router = APIRouter()


@router.get("/ready")
async def health_check_ready(state: AppState = Depends(get_app_state)) -> Dict[str, Any]:
    """
    Readiness probe.

    Returns ready=True once the repository and upstream adapters are created.
    """
    status = state.get_status()

    return {
        "ready": state.is_ready(),
        "details": status
    }


@router.get("/sources")
async def get_sources_info() -> Dict[str, Any]:
    """
    Upstream data sources and outbound request configuration.
    """
    cfg = get_settings()
    upstreams = cfg.upstreams
    return {
        "version": __version__,
        "sources": {
            "cloudflare": {
                "base_url": str(upstreams.cloudflare_base_url),
                "authenticated": cfg.cloudflare_api_token is not None,
            },
            "ooni": {"base_url": str(upstreams.ooni_base_url)},
            "worldbank": {"base_url": str(upstreams.worldbank_base_url)},
            "haveibeenpwned": {"base_url": str(upstreams.hibp_base_url)},
            "wikipedia": {"url": str(upstreams.wikipedia_speeds_url)},
        },
        "requests": {
            "timeout": cfg.request_timeout,
            "retries": cfg.total_retries,
            "verify_ssl": cfg.verify_ssl,
        },
    }

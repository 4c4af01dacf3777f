from pathlib import Path
from typing import Literal, Optional, List

from pydantic import AnyHttpUrl, BaseModel, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class UpstreamSettings(BaseModel):
    """Base URLs of the public APIs the dashboard aggregates."""
    cloudflare_base_url: AnyHttpUrl = "https://api.cloudflare.com/client/v4"
    ooni_base_url: AnyHttpUrl = "https://api.ooni.io"
    worldbank_base_url: AnyHttpUrl = "https://api.worldbank.org/v2"
    hibp_base_url: AnyHttpUrl = "https://haveibeenpwned.com/api/v3"
    wikipedia_speeds_url: AnyHttpUrl = (
        "https://en.wikipedia.org/wiki/List_of_countries_by_Internet_connection_speeds"
    )


class Settings(BaseSettings):

    # ---- Data roots ----
    project_root: Path = Path(".").resolve()
    data_root: Path = Path("data")
    snapshots_dir: Path = data_root / "snapshots"

    # ---- app/runtime ----
    env: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    verify_ssl: bool = True

    # ---- reproducibility ----
    random_seed: Optional[int] = None  # None = fresh entropy on every request

    # ---- API server configuration ----
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    api_reload: bool = True
    api_workers: int = 1
    cors_origins: List[str] = ["*"]

    # ---- outbound HTTP ----
    user_agent: str = "Global-Internet-Pulse/1.0"
    hibp_user_agent: str = "Global Internet Pulse Dashboard"
    request_timeout: float = 10.0
    total_retries: int = 1
    backoff_factor: float = 0.5

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PULSE_",      # PULSE_ENV, PULSE_LOG_LEVEL, etc.
        env_nested_delimiter="__",
        extra="ignore"
    )

    # ---- integrations ----
    upstreams: UpstreamSettings = UpstreamSettings()
    cloudflare_api_token: Optional[SecretStr] = None


def get_settings() -> Settings:
    """Singleton accessor to avoid reparsing .env on every import."""
    return Settings()

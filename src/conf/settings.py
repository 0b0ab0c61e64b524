"""Configuration settings for the motion statistics pipeline."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal


class Settings(BaseSettings):
    """Global pipeline settings."""

    model_config = SettingsConfigDict(
        env_prefix="FRC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    # The Blue Alliance API
    tba_base_url: str = "https://www.thebluealliance.com/api/v3"
    tba_auth_header: str = "X-TBA-Auth-Key"
    request_timeout_sec: float = 30.0

    # Processing Configuration
    max_workers: int = 8

    # Output
    output_dir: str = "."
    stats_filename: str = "stats.json"

    # Charts
    chart_format: Literal["html", "svg"] = "html"  # svg requires kaleido
    chart_width: int = 10000
    chart_height: int = 500

    # Logging
    log_level: str = "INFO"
    log_to_file: bool = False
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    logs_path: str = "logs"


# Global settings instance
settings = Settings()

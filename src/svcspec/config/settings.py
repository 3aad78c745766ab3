"""
Application settings using Pydantic.

Provides environment-based configuration loading with SVCSPEC_ prefix.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

DEFAULT_BLDR_URL = "https://bldr.habitat.sh"


class Settings(BaseSettings):
    """Application settings."""

    # Directory watched for *.spec files
    spec_dir: Path = Path("/hab/sup/default/specs")

    # Builder instance new specs pull packages from
    bldr_url: str = DEFAULT_BLDR_URL

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "SVCSPEC_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

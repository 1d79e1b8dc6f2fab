"""
Settings module for tldr-cache.
Uses pydantic-settings for environment variable management.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from TLDR_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TLDR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Cache location
    page_dir: Optional[str] = None  # TLDR_PAGE_DIR overrides the cache root
    pages_subpath: Optional[str] = None  # None picks the layout for the mode
    freshness_marker: str = "tldr-master"
    check_freshness_on_override: bool = False

    # Platform override (linux, osx, macos, sunos)
    os: Optional[str] = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""Configuration module exports."""

from tldr_cache.settings import Settings, get_settings

from tldr_cache.config.engine_config import (
    DEFAULT_FRESHNESS_MARKER,
    DEFAULT_PAGES_SUBPATH,
    EngineConfig,
)

__all__ = [
    "Settings",
    "get_settings",
    "DEFAULT_FRESHNESS_MARKER",
    "DEFAULT_PAGES_SUBPATH",
    "EngineConfig",
]

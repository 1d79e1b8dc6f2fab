"""
Configuration dataclass for the page cache engine.
Provides an immutable configuration object for dependency injection.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from tldr_cache.types import Platform, detect_platform, parse_platform

if TYPE_CHECKING:
    from tldr_cache.settings import Settings

# Layout left behind by extracting the upstream archive into the cache root
DEFAULT_FRESHNESS_MARKER = "tldr-master"
DEFAULT_PAGES_SUBPATH = "tldr-master/pages"


@dataclass(frozen=True)
class EngineConfig:
    """Page cache engine configuration."""

    platform: Platform
    page_dir_override: Optional[Path] = None
    pages_subpath: Optional[str] = None
    freshness_marker: str = DEFAULT_FRESHNESS_MARKER
    check_freshness_on_override: bool = False

    def subpath_for(self, override_active: bool) -> str:
        """Return the pages subpath, defaulting by resolution mode."""
        if self.pages_subpath is not None:
            return self.pages_subpath
        return "" if override_active else DEFAULT_PAGES_SUBPATH

    @classmethod
    def from_settings(
        cls,
        settings: "Settings",
        platform: Optional[Platform] = None,
    ) -> "EngineConfig":
        """
        Create config from application settings.

        Args:
            settings: Loaded settings
            platform: Explicit platform, takes precedence over TLDR_OS

        Raises:
            ValidationException: If TLDR_OS names no known platform
        """
        if platform is None:
            platform = parse_platform(settings.os) if settings.os else detect_platform()

        return cls(
            platform=platform,
            page_dir_override=Path(settings.page_dir) if settings.page_dir else None,
            pages_subpath=settings.pages_subpath,
            freshness_marker=settings.freshness_marker,
            check_freshness_on_override=settings.check_freshness_on_override,
        )

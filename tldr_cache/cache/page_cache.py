"""
Unified page cache coordinating root resolution, lookup and freshness.

This module provides the PageCache class that binds an EngineConfig to a
DirectoryResolver and exposes page operations to callers. Each operation
resolves the cache root once and uses that root for all of its probes.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from tldr_cache.cache import locator
from tldr_cache.cache.freshness import Freshness, check_freshness
from tldr_cache.cache.resolver import DirectoryResolver
from tldr_cache.config import EngineConfig, Settings, get_settings

logger = logging.getLogger(__name__)


class PageCache:
    """
    Read-only view of the local page cache.

    Example:
        >>> cache = PageCache.default()
        >>> cache.find_page("tar")
        PosixPath('/home/user/.cache/tldr-cache/tldr-master/pages/common/tar.md')
        >>> cache.list_pages()[:3]
        ['7z', 'ab', 'ack']

    Note:
        No operation prints or exits. Root resolution failures surface as
        ResolutionError; a missing page is None and an empty tree is [].
    """

    def __init__(
        self,
        config: EngineConfig,
        resolver: Optional[DirectoryResolver] = None,
    ):
        """
        Args:
            config: Engine configuration
            resolver: Directory resolver. Defaults to one built from
                ``config.page_dir_override``.
        """
        self.config = config
        self.resolver = resolver or DirectoryResolver(override=config.page_dir_override)

    @classmethod
    def default(cls, settings: Optional[Settings] = None, **overrides: Any) -> "PageCache":
        """
        Create a PageCache from environment settings.

        Args:
            settings: Optional Settings instance. Uses get_settings() if omitted.
            **overrides: Passed to EngineConfig.from_settings (e.g. platform)

        Environment Variables:
            TLDR_PAGE_DIR: Cache root override
            TLDR_OS: Platform override
            TLDR_PAGES_SUBPATH: Page tree location under the root
            TLDR_FRESHNESS_MARKER: Path dating the cache
            TLDR_CHECK_FRESHNESS_ON_OVERRIDE: Check freshness in override mode
        """
        if settings is None:
            settings = get_settings()
        config = EngineConfig.from_settings(settings, **overrides)
        logger.debug(f"Creating PageCache from settings: {config}")
        return cls(config)

    @property
    def platform(self):
        return self.config.platform

    @property
    def pages_subpath(self) -> str:
        return self.config.subpath_for(self.resolver.override_active)

    @property
    def freshness_check_enabled(self) -> bool:
        """Whether callers should check freshness for this cache."""
        return not self.resolver.override_active or self.config.check_freshness_on_override

    def resolve_root(self) -> Path:
        """Resolve the cache root. Raises ResolutionError."""
        return self.resolver.resolve_root()

    def pages_root(self) -> Path:
        return locator.pages_root(self.resolve_root(), self.pages_subpath)

    def find_page(self, name: str) -> Optional[Path]:
        """Return the page path for ``name``, or None if it is not cached."""
        root = self.resolve_root()
        return locator.find_page(root, self.platform, name, self.pages_subpath)

    def find_page_to_edit(self, name: str) -> Path:
        """Return the common-directory path for ``name`` without checking it exists."""
        root = self.resolve_root()
        return locator.locate_for_edit(root, name, self.pages_subpath)

    def list_pages(self) -> list[str]:
        """Return the sorted names of all pages available for the platform."""
        root = self.resolve_root()
        return locator.list_pages(root, self.platform, self.pages_subpath)

    def check_freshness(self, now: Optional[float] = None) -> Freshness:
        root = self.resolve_root()
        return check_freshness(root, self.config.freshness_marker, now=now)

    def info(self) -> Dict[str, Any]:
        """
        Describe the resolved cache.

        Returns:
            A dictionary containing:
                - cache_root: Resolved cache root
                - pages_root: Directory holding common/ and platform dirs
                - platform: Active platform
                - platform_dir: Platform directory name, or None
                - override: Whether TLDR_PAGE_DIR is in effect
                - freshness: Freshness state, or None if not checked
                - age_days: Cache age in whole days, or None
        """
        root = self.resolve_root()
        freshness = (
            check_freshness(root, self.config.freshness_marker)
            if self.freshness_check_enabled
            else None
        )
        return {
            "cache_root": str(root),
            "pages_root": str(locator.pages_root(root, self.pages_subpath)),
            "platform": self.platform.value,
            "platform_dir": self.platform.directory_token,
            "override": self.resolver.override_active,
            "freshness": freshness.state.value if freshness else None,
            "age_days": freshness.age_days if freshness else None,
        }

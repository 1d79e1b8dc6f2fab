"""Cache package for tldr-cache.

Provides cache root resolution, page lookup and listing, and freshness checks.
"""

from tldr_cache.cache.resolver import DirectoryResolver, default_cache_dir
from tldr_cache.cache.file_state import FileState
from tldr_cache.cache.freshness import (
    MAX_CACHE_AGE,
    Freshness,
    FreshnessState,
    check_freshness,
)
from tldr_cache.cache.locator import (
    find_page,
    list_pages,
    locate_for_edit,
    should_walk,
)
from tldr_cache.cache.page_cache import PageCache

__all__ = [
    "DirectoryResolver",
    "default_cache_dir",
    "FileState",
    "MAX_CACHE_AGE",
    "Freshness",
    "FreshnessState",
    "check_freshness",
    "find_page",
    "list_pages",
    "locate_for_edit",
    "should_walk",
    "PageCache",
]

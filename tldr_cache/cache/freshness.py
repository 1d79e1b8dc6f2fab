"""
Cache freshness check.

The update step extracts the upstream archive into the cache root; the
modification time of the extracted top directory tells how old the local
pages are.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from tldr_cache.cache.file_state import FileState

logger = logging.getLogger(__name__)

MAX_CACHE_AGE = 30 * 24 * 60 * 60  # 30 days, in seconds


class FreshnessState(str, Enum):
    """Coarse freshness of the local cache."""

    FRESH = "fresh"
    STALE = "stale"
    MISSING = "missing"


@dataclass(frozen=True)
class Freshness:
    """
    Result of a freshness check.

    Attributes:
        state: FRESH, STALE or MISSING
        age_seconds: Age of the marker, None when it is missing
    """
    state: FreshnessState
    age_seconds: Optional[float] = None

    @property
    def is_stale(self) -> bool:
        return self.state is FreshnessState.STALE

    @property
    def is_missing(self) -> bool:
        return self.state is FreshnessState.MISSING

    @property
    def age_days(self) -> Optional[int]:
        if self.age_seconds is None:
            return None
        return int(self.age_seconds // (24 * 60 * 60))


def check_freshness(
    root: Path,
    marker: str = "tldr-master",
    now: Optional[float] = None,
) -> Freshness:
    """
    Classify the cache under ``root`` by the age of its marker path.

    Args:
        root: Resolved cache root
        marker: Path relative to the root whose mtime dates the cache.
            An empty marker dates the root itself.
        now: Current timestamp, defaults to ``time.time()``

    Returns:
        MISSING if the marker does not exist, STALE if it is older than
        MAX_CACHE_AGE, FRESH otherwise. An age of exactly MAX_CACHE_AGE
        is FRESH.
    """
    path = root / marker if marker else root
    state = FileState.probe(path)
    if state is None:
        logger.debug(f"Cache marker missing: {path}")
        return Freshness(FreshnessState.MISSING)

    age = state.age(now)
    if age > MAX_CACHE_AGE:
        logger.debug(f"Cache is stale: {path} is {age:.0f}s old")
        return Freshness(FreshnessState.STALE, age)
    return Freshness(FreshnessState.FRESH, age)

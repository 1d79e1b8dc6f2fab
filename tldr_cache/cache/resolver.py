"""
Cache root resolution.

The cache root is either an explicit override (``TLDR_PAGE_DIR``) or the
conventional per-user cache directory for this application.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from platformdirs import user_cache_dir

from tldr_cache.exceptions import InvalidOverrideError, NotConfiguredError

logger = logging.getLogger(__name__)

APP_NAME = "tldr-cache"


def default_cache_dir() -> str:
    """Return the conventional user cache directory for this application."""
    return user_cache_dir(APP_NAME, appauthor=False)


class DirectoryResolver:
    """
    Decide which directory on disk is the cache.

    The override is threaded in explicitly rather than read from the
    environment, so resolution stays deterministic under test.

    Example:
        >>> resolver = DirectoryResolver(override="/srv/tldr/pages")
        >>> resolver.resolve_root()
        PosixPath('/srv/tldr/pages')
    """

    def __init__(
        self,
        override: Optional[Union[str, Path]] = None,
        default_dir_factory: Callable[[], Union[str, Path]] = default_cache_dir,
    ):
        """
        Args:
            override: Explicit cache root. Empty values count as unset.
            default_dir_factory: Callable returning the conventional cache
                location, consulted only when no override is given.
        """
        self._override = Path(override) if override else None
        self._default_dir_factory = default_dir_factory

    @property
    def override_active(self) -> bool:
        """True when an override path was supplied."""
        return self._override is not None

    def resolve_root(self) -> Path:
        """
        Return the cache root.

        Returns:
            The override path when set, else the conventional location.
            The conventional location is not checked for existence.

        Raises:
            InvalidOverrideError: Override does not exist or is not a directory
            NotConfiguredError: No override and no conventional location
        """
        if self._override is not None:
            path = self._override.expanduser().absolute()
            if not path.is_dir():
                raise InvalidOverrideError(
                    "Path specified by $TLDR_PAGE_DIR does not exist or is not a directory.",
                    details={"path": str(path), "exists": path.exists()},
                )
            logger.debug(f"Using cache root override: {path}")
            return path

        try:
            location = self._default_dir_factory()
        except (OSError, RuntimeError, KeyError) as e:
            raise NotConfiguredError(
                f"Could not determine a cache directory: {e}",
            ) from e

        path = Path(location).expanduser() if location else None
        if path is None or not path.is_absolute():
            raise NotConfiguredError(
                "$TLDR_PAGE_DIR isn't set and no user cache directory is available.",
                details={"location": str(location) if location else None},
            )

        logger.debug(f"Using conventional cache root: {path}")
        return path

"""
Platform model for page lookup.

Pages are grouped by operating system. A platform either owns a directory
in the page tree ("linux", "osx") or has none, in which case only the
"common" tier is consulted.
"""

import sys
from enum import Enum
from typing import Optional

from tldr_cache.exceptions import ValidationException


class Platform(str, Enum):
    """Supported target platforms."""

    LINUX = "linux"
    MACOS = "macos"
    UNSUPPORTED = "unsupported"

    @property
    def directory_token(self) -> Optional[str]:
        """Return the page directory name for this platform, if any."""
        return platform_dir_token(self)


# Accepted spellings for an explicit platform override
PLATFORM_ALIASES = {
    "linux": Platform.LINUX,
    "osx": Platform.MACOS,
    "macos": Platform.MACOS,
    "darwin": Platform.MACOS,
    "sunos": Platform.UNSUPPORTED,
    "other": Platform.UNSUPPORTED,
}


def platform_dir_token(platform: Platform) -> Optional[str]:
    """
    Map a platform to its directory name in the page tree.

    Args:
        platform: Target platform

    Returns:
        "linux" or "osx", or None for platforms without their own pages
    """
    if platform is Platform.LINUX:
        return "linux"
    if platform is Platform.MACOS:
        return "osx"
    return None


def detect_platform(system: Optional[str] = None) -> Platform:
    """
    Detect the host platform.

    Args:
        system: Value to inspect instead of ``sys.platform``

    Returns:
        Platform matching the host OS, UNSUPPORTED when there is no match
    """
    system = sys.platform if system is None else system
    if system.startswith("linux"):
        return Platform.LINUX
    if system == "darwin":
        return Platform.MACOS
    return Platform.UNSUPPORTED


def parse_platform(value: str) -> Platform:
    """
    Parse an explicit platform override such as ``--os osx``.

    Raises:
        ValidationException: If the value names no known platform
    """
    key = value.strip().lower()
    try:
        return PLATFORM_ALIASES[key]
    except KeyError:
        raise ValidationException(
            f"Unknown platform: {value!r}",
            details={"value": value, "allowed": sorted(PLATFORM_ALIASES)},
        ) from None

"""
Page lookup and listing.

A page tree has a "common" directory of platform-independent pages and one
directory per platform ("linux", "osx") whose pages take precedence:

    <root>/<pages_subpath>/common/tar.md
    <root>/<pages_subpath>/linux/tar.md
    <root>/<pages_subpath>/osx/ls.md

All functions here are pure path computations or read-only filesystem
probes. Results are a snapshot of the tree at call time.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, Optional, Set

from tldr_cache.types import Platform, platform_dir_token

logger = logging.getLogger(__name__)

PAGE_EXTENSION = ".md"
COMMON_DIR = "common"


def pages_root(root: Path, pages_subpath: str = "") -> Path:
    """Return the directory holding the common and platform directories."""
    return root / pages_subpath if pages_subpath else root


def page_filename(name: str) -> str:
    """Map a page name to its file name."""
    return f"{name}{PAGE_EXTENSION}"


def page_name(filename: str) -> Optional[str]:
    """
    Return the page name for a file name, or None if it is not a page.

    The extension comparison is case-exact: "tar.MD" is not a page.
    """
    if len(filename) > len(PAGE_EXTENSION) and filename.endswith(PAGE_EXTENSION):
        return filename[: -len(PAGE_EXTENSION)]
    return None


def find_page(
    root: Path,
    platform: Platform,
    name: str,
    pages_subpath: str = "",
) -> Optional[Path]:
    """
    Search for a page and return the path to it.

    Args:
        root: Resolved cache root
        platform: Target platform
        name: Page name, e.g. "tar"
        pages_subpath: Directory under the root holding the page tree

    Returns:
        Path of the platform page if present, else the common page if
        present, else None
    """
    base = pages_root(root, pages_subpath)
    filename = page_filename(name)

    token = platform_dir_token(platform)
    if token is not None:
        path = base / token / filename
        if path.is_file():
            logger.debug(f"Found platform page: {path}")
            return path

    path = base / COMMON_DIR / filename
    if path.is_file():
        logger.debug(f"Found common page: {path}")
        return path

    logger.debug(f"Page not found: {name} (platform={platform.value})")
    return None


def locate_for_edit(root: Path, name: str, pages_subpath: str = "") -> Path:
    """Return the common-directory path for a page, whether or not it exists."""
    return pages_root(root, pages_subpath) / COMMON_DIR / page_filename(name)


def should_walk(
    parent: Optional[str],
    name: str,
    is_dir: bool,
    platform_token: Optional[str],
) -> bool:
    """
    Traversal filter for page listing.

    Args:
        parent: Name of the containing directory, None for direct children
            of the pages root
        name: Entry name
        is_dir: Whether the entry is a directory
        platform_token: Directory name of the active platform, if any

    Returns:
        True for directories named "common" or after the active platform,
        and for files inside such a directory
    """
    if is_dir:
        if name == COMMON_DIR:
            return True
        return platform_token is not None and name == platform_token
    return parent is not None


def _walk_pages(
    directory: Path,
    parent: Optional[str],
    platform_token: Optional[str],
) -> Iterator[str]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.warning(f"Skipping unreadable directory {directory}: {e}")
        return

    for entry in entries:
        is_dir = entry.is_dir(follow_symlinks=False)
        if not should_walk(parent, entry.name, is_dir, platform_token):
            if is_dir:
                logger.debug(f"Pruned directory: {entry.path}")
            continue

        if is_dir:
            yield from _walk_pages(Path(entry.path), entry.name, platform_token)
        elif entry.is_file(follow_symlinks=False):
            name = page_name(entry.name)
            if name is not None:
                yield name


def list_pages(root: Path, platform: Platform, pages_subpath: str = "") -> list[str]:
    """
    Return the sorted, deduplicated names of all pages for a platform.

    Only the "common" directory and the platform directory are descended
    into; pages of other platforms are never reported.

    Args:
        root: Resolved cache root
        platform: Target platform
        pages_subpath: Directory under the root holding the page tree

    Returns:
        Sorted list of page names, empty if the tree is missing or empty
    """
    base = pages_root(root, pages_subpath)
    if not base.is_dir():
        logger.debug(f"Pages root does not exist: {base}")
        return []

    pages: Set[str] = set(_walk_pages(base, None, platform_dir_token(platform)))
    return sorted(pages)

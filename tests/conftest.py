"""Shared fixtures for tldr-cache tests."""

import tempfile
from pathlib import Path

import pytest

from tldr_cache.settings import get_settings

TLDR_ENV_VARS = (
    "TLDR_PAGE_DIR",
    "TLDR_OS",
    "TLDR_PAGES_SUBPATH",
    "TLDR_FRESHNESS_MARKER",
    "TLDR_CHECK_FRESHNESS_ON_OVERRIDE",
)


def write_page(root: Path, relative: str, text: str = "# page\n") -> Path:
    """Create a page file below root, creating parent directories."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from TLDR_* variables and the cached settings."""
    for name in TLDR_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def temp_dir():
    """Create a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def page_tree(temp_dir):
    """
    Page tree laid out directly under the root:

        common/tar.md
        linux/tar.md
        linux/ps.md
    """
    write_page(temp_dir, "common/tar.md", "# tar (common)\n")
    write_page(temp_dir, "linux/tar.md", "# tar (linux)\n")
    write_page(temp_dir, "linux/ps.md", "# ps\n")
    return temp_dir


@pytest.fixture
def make_page():
    """Return a helper that writes a page file below a root."""
    return write_page

"""Tests for the platform model."""

import pytest

from tldr_cache.exceptions import ValidationException
from tldr_cache.types import (
    Platform,
    detect_platform,
    parse_platform,
    platform_dir_token,
)


class TestPlatformDirToken:
    """Tests for platform to directory mapping."""

    def test_linux(self):
        assert platform_dir_token(Platform.LINUX) == "linux"

    def test_macos_uses_osx_directory(self):
        assert platform_dir_token(Platform.MACOS) == "osx"

    def test_unsupported_has_no_directory(self):
        assert platform_dir_token(Platform.UNSUPPORTED) is None

    def test_property_matches_function(self):
        """Test directory_token delegates to platform_dir_token for every member."""
        for platform in Platform:
            assert platform.directory_token == platform_dir_token(platform)


class TestDetectPlatform:
    """Tests for host platform detection."""

    @pytest.mark.parametrize("system,expected", [
        ("linux", Platform.LINUX),
        ("linux2", Platform.LINUX),
        ("darwin", Platform.MACOS),
        ("win32", Platform.UNSUPPORTED),
        ("sunos5", Platform.UNSUPPORTED),
    ])
    def test_detect(self, system, expected):
        assert detect_platform(system) is expected

    def test_detect_host(self):
        """Test detection without arguments returns a Platform."""
        assert isinstance(detect_platform(), Platform)


class TestParsePlatform:
    """Tests for explicit platform overrides."""

    @pytest.mark.parametrize("value,expected", [
        ("linux", Platform.LINUX),
        ("osx", Platform.MACOS),
        ("macos", Platform.MACOS),
        ("OSX", Platform.MACOS),
        (" darwin ", Platform.MACOS),
        ("sunos", Platform.UNSUPPORTED),
    ])
    def test_parse(self, value, expected):
        assert parse_platform(value) is expected

    def test_unknown_platform(self):
        """Test an unknown name raises ValidationException with details."""
        with pytest.raises(ValidationException) as exc_info:
            parse_platform("windows")

        assert exc_info.value.details["value"] == "windows"
        assert "linux" in exc_info.value.details["allowed"]

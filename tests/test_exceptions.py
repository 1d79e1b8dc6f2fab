"""
Unit tests for custom exception hierarchy.

Tests exception creation, attributes and inheritance.
"""

import pytest

from tldr_cache.exceptions import (
    TldrCacheException,
    ResolutionError,
    InvalidOverrideError,
    NotConfiguredError,
    ValidationException,
    PageReadError,
)


class TestTldrCacheException:
    """Test base exception class."""

    def test_base_exception_creation(self):
        """Test creating base exception with message."""
        exc = TldrCacheException("Test error")
        assert exc.message == "Test error"
        assert exc.details == {}
        assert exc.exit_code == 1
        assert exc.error_code == "INTERNAL_ERROR"
        assert str(exc) == "Test error"

    def test_base_exception_with_details(self):
        """Test creating base exception with details."""
        details = {"path": "/tmp/pages", "exists": False}
        exc = TldrCacheException("Test error", details=details)
        assert exc.details == details


class TestResolutionErrors:
    """Test cache root resolution errors."""

    def test_resolution_error(self):
        exc = ResolutionError("Cannot resolve")
        assert exc.error_code == "RESOLUTION_ERROR"
        assert exc.exit_code == 1

    def test_invalid_override(self):
        exc = InvalidOverrideError("Bad override", details={"path": "/nope"})
        assert exc.error_code == "INVALID_OVERRIDE"
        assert exc.details["path"] == "/nope"
        assert isinstance(exc, ResolutionError)

    def test_not_configured(self):
        exc = NotConfiguredError("No cache dir")
        assert exc.error_code == "NOT_CONFIGURED"
        assert isinstance(exc, ResolutionError)

    def test_kinds_are_distinct(self):
        """Test the two failure kinds can be told apart."""
        assert not issubclass(InvalidOverrideError, NotConfiguredError)
        assert not issubclass(NotConfiguredError, InvalidOverrideError)


class TestOtherExceptions:
    """Test validation and read errors."""

    def test_validation_exception(self):
        exc = ValidationException("Unknown platform")
        assert exc.exit_code == 2
        assert exc.error_code == "VALIDATION_ERROR"

    def test_page_read_error(self):
        exc = PageReadError("Could not open file")
        assert exc.error_code == "PAGE_READ_ERROR"


class TestExceptionHierarchy:
    """Test every exception derives from the base class."""

    @pytest.mark.parametrize("exc_class", [
        ResolutionError,
        InvalidOverrideError,
        NotConfiguredError,
        ValidationException,
        PageReadError,
    ])
    def test_inherits_from_base(self, exc_class):
        exc = exc_class("message")
        assert isinstance(exc, TldrCacheException)
        assert isinstance(exc, Exception)

    def test_catch_by_base(self):
        with pytest.raises(TldrCacheException):
            raise InvalidOverrideError("boom")

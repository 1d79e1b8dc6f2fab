"""
Custom exception hierarchy for tldr-cache.

Provides structured error handling with CLI exit codes and error codes.
"""

from typing import Optional


class TldrCacheException(Exception):
    """Base exception for all tldr-cache errors"""
    exit_code: int = 1
    error_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ResolutionError(TldrCacheException):
    """The cache root could not be determined"""
    error_code = "RESOLUTION_ERROR"


class InvalidOverrideError(ResolutionError):
    """Override path does not exist or is not a directory"""
    error_code = "INVALID_OVERRIDE"


class NotConfiguredError(ResolutionError):
    """No override set and no conventional cache location available"""
    error_code = "NOT_CONFIGURED"


class ValidationException(TldrCacheException):
    """Input validation errors"""
    exit_code = 2
    error_code = "VALIDATION_ERROR"


class PageReadError(TldrCacheException):
    """Page file could not be read"""
    error_code = "PAGE_READ_ERROR"

"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class UpstreamError(DomainError):
    """Raised when an upstream data source cannot be reached or refuses a request."""

    def __init__(
        self,
        source: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.source = source
        super().__init__(f"{source}: {message}", details)


class UpstreamSchemaError(UpstreamError):
    """Raised when an upstream response body does not have the expected shape."""

"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides utilities and constants used across multiple layers
of the application:
- Environment names and log levels
- Structured logging bootstrap (structlog on top of stdlib logging)
- Docker-style secret file resolution for credentials such as the NASA key

Following Clean Architecture principles, nothing in here depends on
Infrastructure or Frameworks.
"""

from .consts import DEMO_API_KEY, EnumEnvironment, EnumLogFormat, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "DEMO_API_KEY",
    "EnumEnvironment",
    "EnumLogFormat",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]

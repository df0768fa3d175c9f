"""
Logging Configuration - Shared Layer

structlog is layered on top of the standard logging module so that both
``structlog.get_logger`` and plain ``logging.getLogger`` calls end up in the
same handlers and renderer.
"""

import logging
import os
import sys
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import Processor

from src.shared.consts import EnumEnvironment, EnumLogFormat

# HTTP client libraries log every request at INFO.
NOISY_LOGGERS = ("httpx", "httpcore")


def _get_log_config_from_env() -> Dict[str, Optional[str]]:
    """
    Read bootstrap logging configuration from environment variables.

    Used before the settings system is available.
    """
    return {
        "level": os.environ.get("LOG_LEVEL", "INFO"),
        "format": os.environ.get("LOG_FORMAT", EnumLogFormat.AUTO.value),
        "file_path": os.environ.get("LOG_FILE_PATH"),
        "environment": os.environ.get("ENVIRONMENT"),
    }


def _enum_value(value: Any) -> Any:
    return value.value if hasattr(value, "value") else value


def _select_renderer(environment: str, log_format: str = "auto") -> Processor:
    """JSON or console output; ``auto`` renders JSON only in production."""
    chosen = log_format.lower()
    if chosen == EnumLogFormat.AUTO.value:
        is_production = environment.lower() == EnumEnvironment.PRODUCTION.value
        chosen = (EnumLogFormat.JSON if is_production else EnumLogFormat.CONSOLE).value

    if chosen == EnumLogFormat.JSON.value:
        return structlog.processors.JSONRenderer()
    if chosen == EnumLogFormat.CONSOLE.value:
        return structlog.dev.ConsoleRenderer()
    raise ValueError(f"Unknown log format: {log_format}")


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    return handlers


def configure_logging(
    level: Optional[str] = None,
    log_format: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: Optional[str] = None,
) -> None:
    """
    Configure structlog and the root logger.

    Call once at startup with no arguments for an env-driven bootstrap, then
    again through :func:`update_logging_from_settings` once settings load.

    Args:
        level: Optional override for the log level.
        log_format: ``console``, ``json`` or ``auto`` (JSON in production).
        file_path: Optional log file, in addition to stdout.
        environment: Application environment, consulted by ``auto``.
    """
    env_config = _get_log_config_from_env()

    log_level = (level or env_config["level"] or "INFO").upper()
    log_file = file_path or env_config["file_path"]
    env_value = environment or env_config["environment"] or "development"
    format_value = log_format or env_config["format"] or EnumLogFormat.AUTO.value
    renderer = _select_renderer(env_value, format_value)

    numeric_level = getattr(logging, log_level, logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
        ],
    )

    handlers = _build_handlers(log_file)
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    noisy_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)

    logging.info(f"Logging configured with level: {log_level}")
    if log_file:
        logging.info(f"Logging to file: {log_file}")


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from the application settings object.

    Args:
        settings: Object exposing ``logging.level``, ``logging.format``,
            ``logging.file_path`` and ``environment``.
    """
    try:
        configure_logging(
            level=_enum_value(settings.logging.level),
            log_format=_enum_value(settings.logging.format),
            file_path=settings.logging.file_path,
            environment=_enum_value(settings.environment),
        )
        logging.info("Logging configuration updated from application settings")
    except Exception as e:
        logging.error(f"Failed to update logging from settings: {e}")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)

"""
Domain Entities Package

This package contains the core domain entities: space weather value objects,
health status and domain errors.
"""

from .errors import DomainError, UpstreamError, UpstreamSchemaError
from .health import DependencyStatus, ServiceStatus, SystemHealth
from .space_weather import (
    ChartDataPoint,
    DailyAggregate,
    FlareReading,
    ForecastDay,
    MetricFamily,
    SnapshotResult,
    SnapshotSource,
    SpaceWeatherSnapshot,
)

__all__ = [
    "ChartDataPoint",
    "DailyAggregate",
    "FlareReading",
    "ForecastDay",
    "MetricFamily",
    "SnapshotResult",
    "SnapshotSource",
    "SpaceWeatherSnapshot",
    "SystemHealth",
    "DependencyStatus",
    "ServiceStatus",
    "DomainError",
    "UpstreamError",
    "UpstreamSchemaError",
]

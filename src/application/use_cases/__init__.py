"""
Use Cases Package - Application Layer

This package contains the use cases of the application: fetching the
space weather snapshot (live with fallback, or offline) and reporting
system health.
"""

from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase
from .space_weather_use_cases import (
    GetMockSnapshotUseCase,
    GetSpaceWeatherSnapshotUseCase,
    SpaceWeatherFetchError,
)

__all__ = [
    "GetSpaceWeatherSnapshotUseCase",
    "GetMockSnapshotUseCase",
    "SpaceWeatherFetchError",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
]

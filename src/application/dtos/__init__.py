"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .health_dto import ApplicationInfoDTO, DependencyStatusDTO, SystemHealthDTO
from .space_weather_dto import (
    ChartDataPointDTO,
    ForecastDayDTO,
    SpaceWeatherSnapshotDTO,
)

__all__ = [
    "ChartDataPointDTO",
    "ForecastDayDTO",
    "SpaceWeatherSnapshotDTO",
    "SystemHealthDTO",
    "DependencyStatusDTO",
    "ApplicationInfoDTO",
]

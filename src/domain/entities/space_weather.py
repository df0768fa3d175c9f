"""
Space weather domain entities.

Value objects produced by the normalization pipeline. Everything here is
built fresh on every fetch cycle and is immutable once assembled.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, Optional, Tuple, TypeVar

T = TypeVar("T")


class MetricFamily(str, Enum):
    """DONKI event families, valued by their endpoint path segment."""

    CME = "CME"
    GST = "GST"
    FLR = "FLR"
    SEP = "SEP"


class SnapshotSource(str, Enum):
    """Where an assembled snapshot came from."""

    LIVE = "live"
    FALLBACK = "fallback"


@dataclass(frozen=True, slots=True)
class FlareReading:
    """Strongest flare of a day: codec intensity plus the original class."""

    intensity: float
    class_type: str


# Keyed by UTC calendar day. A missing key means "no data", never zero.
DailyAggregate = Dict[date, T]


@dataclass(frozen=True, slots=True)
class ChartDataPoint:
    """A single labelled chart value; ``value`` is None for a data gap."""

    time: str
    value: Optional[float]


@dataclass(frozen=True, slots=True)
class ForecastDay:
    day: str
    solar_wind_speed: float
    kp_index: int


@dataclass(frozen=True, slots=True)
class SpaceWeatherSnapshot:
    """Current values, 7-day forecast and 7-day history for the dashboard."""

    solar_wind_speed: float
    kp_index: float
    cme_max_speed: float
    xray_flux_class: str
    sep_events: int
    forecast: Tuple[ForecastDay, ...]
    historical_solar_wind: Tuple[ChartDataPoint, ...]
    historical_kp_index: Tuple[ChartDataPoint, ...]
    historical_cme_speed: Tuple[ChartDataPoint, ...]
    historical_xray_flux: Tuple[ChartDataPoint, ...]
    historical_sep_events: Tuple[ChartDataPoint, ...]


@dataclass(frozen=True, slots=True)
class SnapshotResult:
    """Tagged outcome of one fetch cycle."""

    source: SnapshotSource
    snapshot: SpaceWeatherSnapshot

    @classmethod
    def live(cls, snapshot: SpaceWeatherSnapshot) -> "SnapshotResult":
        return cls(source=SnapshotSource.LIVE, snapshot=snapshot)

    @classmethod
    def fallback(cls, snapshot: SpaceWeatherSnapshot) -> "SnapshotResult":
        return cls(source=SnapshotSource.FALLBACK, snapshot=snapshot)

    @property
    def is_live(self) -> bool:
        return self.source is SnapshotSource.LIVE

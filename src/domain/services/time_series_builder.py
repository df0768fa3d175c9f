"""
Domain service projecting daily aggregates onto the trailing 7-day window.

Gaps are explicit: a day without data becomes ``None`` rather than zero,
unless the caller supplies a fill value (particle event counts, where
non-occurrence is itself informative).
"""

from __future__ import annotations

import random
from datetime import date, datetime, timedelta, timezone
from typing import Any, Mapping, Optional, Sequence, Tuple

from src.domain.entities.space_weather import ChartDataPoint, FlareReading

HISTORY_DAYS = 7

# Fixed table so labels never depend on the runtime locale.
WEEKDAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

SOLAR_WIND_BASE = 400.0
SOLAR_WIND_PER_KP = 50.0
SOLAR_WIND_JITTER = 25.0


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def weekday_abbreviation(day: date) -> str:
    return WEEKDAY_ABBREVIATIONS[day.weekday()]


def trailing_window(today: date, days: int = HISTORY_DAYS) -> Tuple[date, ...]:
    """Calendar days ``today - (days - 1)`` through ``today``, oldest first."""
    return tuple(today - timedelta(days=offset) for offset in range(days - 1, -1, -1))


def build_series(
    aggregate: Mapping[date, Any],
    window: Sequence[date],
    fill_missing: Optional[float] = None,
) -> Tuple[ChartDataPoint, ...]:
    """One labelled point per window day, ``fill_missing`` where absent."""
    points = []
    for day in window:
        value = aggregate.get(day)
        points.append(
            ChartDataPoint(
                time=weekday_abbreviation(day),
                value=fill_missing if value is None else float(value),
            )
        )
    return tuple(points)


def build_flare_series(
    aggregate: Mapping[date, FlareReading],
    window: Sequence[date],
) -> Tuple[ChartDataPoint, ...]:
    intensities = {day: reading.intensity for day, reading in aggregate.items()}
    return build_series(intensities, window)


def derive_solar_wind_speed(kp_index: float, rng: random.Random) -> float:
    """``400 + kp * 50`` km/s with uniform jitter of +/-25 km/s."""
    jitter = rng.uniform(-SOLAR_WIND_JITTER, SOLAR_WIND_JITTER)
    return SOLAR_WIND_BASE + kp_index * SOLAR_WIND_PER_KP + jitter


def derive_solar_wind_series(
    kp_series: Sequence[ChartDataPoint],
    rng: random.Random,
) -> Tuple[ChartDataPoint, ...]:
    """Solar wind is not observed upstream; it follows Kp, gaps included."""
    return tuple(
        ChartDataPoint(
            time=point.time,
            value=None
            if point.value is None
            else derive_solar_wind_speed(point.value, rng),
        )
        for point in kp_series
    )


def latest_value(series: Sequence[ChartDataPoint]) -> Optional[float]:
    """Most recent non-gap value of a series."""
    for point in reversed(series):
        if point.value is not None:
            return point.value
    return None

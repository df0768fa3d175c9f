"""
Domain service extrapolating a 7-day outlook from the latest Kp.

This is a bounded random walk, not a physical model. Kp is clamped below at
zero but has no upper clamp even though the scale nominally ends at 9.
"""

from __future__ import annotations

import math
import random
from datetime import date, timedelta
from typing import Optional, Tuple

from src.domain.entities.space_weather import ForecastDay
from src.domain.services.time_series_builder import (
    derive_solar_wind_speed,
    utc_today,
    weekday_abbreviation,
)

FORECAST_DAYS = 7
KP_STEP = 1.0


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def next_kp_index(previous: float, rng: random.Random) -> int:
    step = rng.uniform(-KP_STEP, KP_STEP)
    return max(0, round_half_up(previous + step))


def generate_forecast(
    latest_kp: float,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
    days: int = FORECAST_DAYS,
) -> Tuple[ForecastDay, ...]:
    """Forecast for tomorrow through ``days`` days out, nearest first.

    Args:
        latest_kp: Most recent observed Kp; 0 when there is no history.
        today: UTC calendar day the forecast starts after.
        rng: Random source, injectable for reproducible output.
        days: Horizon length.
    """
    today = today or utc_today()
    rng = rng or random.Random()

    forecast = []
    kp: float = latest_kp
    for offset in range(1, days + 1):
        kp = next_kp_index(kp, rng)
        forecast.append(
            ForecastDay(
                day=weekday_abbreviation(today + timedelta(days=offset)),
                solar_wind_speed=derive_solar_wind_speed(kp, rng),
                kp_index=kp,
            )
        )
    return tuple(forecast)

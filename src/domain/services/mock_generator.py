"""
Domain service producing a synthetic, schema-valid snapshot.

Used when DONKI is unavailable and for offline/demo operation. It performs
no I/O, so it is the last line of defence for the snapshot endpoint.
"""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Optional

from src.domain.entities.space_weather import (
    ChartDataPoint,
    ForecastDay,
    SpaceWeatherSnapshot,
)
from src.domain.services.flare_codec import flare_class_to_number
from src.domain.services.forecast_generator import FORECAST_DAYS
from src.domain.services.time_series_builder import (
    derive_solar_wind_series,
    trailing_window,
    utc_today,
    weekday_abbreviation,
)

MOCK_FLARE_CLASS = "M1.5"


def generate_mock_snapshot(
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> SpaceWeatherSnapshot:
    """Build a plausible snapshot for the 7 days ending ``today``.

    Ranges: historical Kp 0-3, CME speed 800-1200 km/s, X-ray flux from a
    C0.0-C5.0 class, SEP count 0-1, current solar wind 400-500 km/s,
    forecast Kp 0-4. Current Kp, CME speed and SEP count repeat the last
    historical point.
    """
    today = today or utc_today()
    rng = rng or random.Random()

    labels = [weekday_abbreviation(day) for day in trailing_window(today)]

    kp_series = tuple(
        ChartDataPoint(time=label, value=float(rng.randint(0, 3))) for label in labels
    )
    cme_series = tuple(
        ChartDataPoint(time=label, value=rng.uniform(800.0, 1200.0))
        for label in labels
    )
    xray_series = tuple(
        ChartDataPoint(
            time=label,
            value=flare_class_to_number(f"C{rng.uniform(0.0, 5.0):.1f}"),
        )
        for label in labels
    )
    sep_series = tuple(
        ChartDataPoint(time=label, value=float(rng.randint(0, 1))) for label in labels
    )

    forecast = tuple(
        ForecastDay(
            day=weekday_abbreviation(today + timedelta(days=offset)),
            solar_wind_speed=float(round(rng.uniform(400.0, 500.0))),
            kp_index=rng.randint(0, 4),
        )
        for offset in range(1, FORECAST_DAYS + 1)
    )

    return SpaceWeatherSnapshot(
        solar_wind_speed=float(round(rng.uniform(400.0, 500.0))),
        kp_index=kp_series[-1].value,
        cme_max_speed=float(round(cme_series[-1].value)),
        xray_flux_class=MOCK_FLARE_CLASS,
        sep_events=int(sep_series[-1].value),
        forecast=forecast,
        historical_solar_wind=derive_solar_wind_series(kp_series, rng),
        historical_kp_index=kp_series,
        historical_cme_speed=cme_series,
        historical_xray_flux=xray_series,
        historical_sep_events=sep_series,
    )

"""Domain service assembling a snapshot from raw DONKI events."""

from __future__ import annotations

import random
from datetime import date
from typing import Any, Mapping, Sequence

from src.domain.entities.space_weather import (
    FlareReading,
    MetricFamily,
    SpaceWeatherSnapshot,
)
from src.domain.services.daily_aggregator import (
    aggregate_cme_speeds,
    aggregate_flares,
    aggregate_kp_indices,
    aggregate_sep_counts,
)
from src.domain.services.forecast_generator import generate_forecast
from src.domain.services.time_series_builder import (
    build_flare_series,
    build_series,
    derive_solar_wind_series,
    derive_solar_wind_speed,
    latest_value,
    trailing_window,
)

NO_FLARE_CLASS = "N/A"


def _latest_flare_class(
    flares: Mapping[date, FlareReading], window: Sequence[date]
) -> str:
    for day in reversed(window):
        reading = flares.get(day)
        if reading is not None:
            return reading.class_type or NO_FLARE_CLASS
    return NO_FLARE_CLASS


def assemble_snapshot(
    events: Mapping[MetricFamily, Sequence[Any]],
    today: date,
    rng: random.Random,
) -> SpaceWeatherSnapshot:
    """Aggregate, project and extrapolate one batch of events per family.

    Current values are the most recent non-gap point of each series. When
    no Kp was observed the current Kp is 0 and the current solar wind is
    derived from it; SEP count is today's count.
    """
    window = trailing_window(today)

    kp_series = build_series(aggregate_kp_indices(events[MetricFamily.GST]), window)
    cme_series = build_series(aggregate_cme_speeds(events[MetricFamily.CME]), window)
    flares = aggregate_flares(events[MetricFamily.FLR])
    xray_series = build_flare_series(flares, window)
    sep_series = build_series(
        aggregate_sep_counts(events[MetricFamily.SEP]), window, fill_missing=0.0
    )
    solar_wind_series = derive_solar_wind_series(kp_series, rng)

    current_kp = latest_value(kp_series) or 0.0
    current_solar_wind = latest_value(solar_wind_series)
    if current_solar_wind is None:
        current_solar_wind = derive_solar_wind_speed(current_kp, rng)

    return SpaceWeatherSnapshot(
        solar_wind_speed=current_solar_wind,
        kp_index=current_kp,
        cme_max_speed=latest_value(cme_series) or 0.0,
        xray_flux_class=_latest_flare_class(flares, window),
        sep_events=int(sep_series[-1].value or 0),
        forecast=generate_forecast(current_kp, today, rng),
        historical_solar_wind=solar_wind_series,
        historical_kp_index=kp_series,
        historical_cme_speed=cme_series,
        historical_xray_flux=xray_series,
        historical_sep_events=sep_series,
    )

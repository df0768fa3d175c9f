"""
Domain services package.

Pure functions implementing the space weather normalization pipeline:
flare class codec, daily aggregation, time-series projection, forecast
extrapolation and the synthetic fallback snapshot.
"""

from .daily_aggregator import (
    aggregate_cme_speeds,
    aggregate_events,
    aggregate_flares,
    aggregate_kp_indices,
    aggregate_sep_counts,
    parse_utc_date,
)
from .flare_codec import flare_class_to_number
from .forecast_generator import generate_forecast
from .mock_generator import generate_mock_snapshot
from .snapshot_assembler import assemble_snapshot
from .time_series_builder import (
    build_flare_series,
    build_series,
    derive_solar_wind_series,
    latest_value,
    trailing_window,
    weekday_abbreviation,
)

__all__ = [
    "aggregate_cme_speeds",
    "aggregate_events",
    "aggregate_flares",
    "aggregate_kp_indices",
    "aggregate_sep_counts",
    "parse_utc_date",
    "flare_class_to_number",
    "generate_forecast",
    "generate_mock_snapshot",
    "assemble_snapshot",
    "build_flare_series",
    "build_series",
    "derive_solar_wind_series",
    "latest_value",
    "trailing_window",
    "weekday_abbreviation",
]

from __future__ import annotations

import random

import pytest
from pydantic import ValidationError

from src.application.dtos.space_weather_dto import (
    ChartDataPointDTO,
    ForecastDayDTO,
    SpaceWeatherSnapshotDTO,
)
from src.domain.entities.space_weather import MetricFamily
from src.domain.services.snapshot_assembler import assemble_snapshot


def test_snapshot_dto_serializes_camel_case(donki_payloads, today, rng) -> None:
    snapshot = assemble_snapshot(donki_payloads, today, rng)

    body = SpaceWeatherSnapshotDTO.from_domain(snapshot).model_dump(by_alias=True)

    assert set(body) == {
        "solarWindSpeed",
        "kpIndex",
        "cmeMaxSpeed",
        "xrayFluxClass",
        "sepEvents",
        "forecast",
        "historicalSolarWind",
        "historicalKpIndex",
        "historicalCmeSpeed",
        "historicalXrayFlux",
        "historicalSepEvents",
    }
    assert body["xrayFluxClass"] == "M1.2"
    assert set(body["forecast"][0]) == {"day", "solarWindSpeed", "kpIndex"}
    assert body["historicalKpIndex"][0] == {"time": "Thu", "value": None}


def test_snapshot_dto_keeps_gaps_as_null(today) -> None:
    snapshot = assemble_snapshot(
        {family: [] for family in MetricFamily}, today, random.Random(0)
    )

    payload = SpaceWeatherSnapshotDTO.from_domain(snapshot).model_dump_json(
        by_alias=True
    )

    assert '"historicalCmeSpeed":[{"time":"Thu","value":null}' in payload


def test_dtos_accept_field_names_and_aliases() -> None:
    by_name = ForecastDayDTO(day="Mon", solar_wind_speed=450.0, kp_index=2)
    by_alias = ForecastDayDTO(day="Mon", solarWindSpeed=450.0, kpIndex=2)

    assert by_name == by_alias
    assert ChartDataPointDTO(time="Tue").value is None


def test_forecast_dto_rejects_negative_kp() -> None:
    with pytest.raises(ValidationError):
        ForecastDayDTO(day="Mon", solar_wind_speed=450.0, kp_index=-1)


def test_snapshot_dto_keeps_series_order(donki_payloads, today, rng) -> None:
    snapshot = assemble_snapshot(donki_payloads, today, rng)

    dto = SpaceWeatherSnapshotDTO.from_domain(snapshot)

    assert all(isinstance(point, ChartDataPointDTO) for point in dto.historical_kp_index)
    assert [(p.time, p.value) for p in dto.historical_sep_events] == [
        (point.time, point.value) for point in snapshot.historical_sep_events
    ]

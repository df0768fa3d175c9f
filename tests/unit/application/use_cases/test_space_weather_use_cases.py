from __future__ import annotations

import random
from datetime import date

import pytest

from src.application.use_cases.space_weather_use_cases import (
    GetMockSnapshotUseCase,
    GetSpaceWeatherSnapshotUseCase,
)
from src.domain.entities.errors import UpstreamError
from src.domain.entities.space_weather import MetricFamily, SnapshotSource
from src.domain.services.mock_generator import generate_mock_snapshot
from tests.fakes import FakeDonkiGateway


def _use_case(gateway, today, seed=7, offline=False):
    return GetSpaceWeatherSnapshotUseCase(
        donki_gateway=gateway,
        offline=offline,
        rng=random.Random(seed),
        clock=lambda: today,
    )


@pytest.mark.asyncio
async def test_fetch_returns_live_snapshot(fake_gateway, today) -> None:
    result = await _use_case(fake_gateway, today).fetch()

    assert result.source is SnapshotSource.LIVE
    assert result.is_live
    assert result.snapshot.kp_index == 6.0
    assert result.snapshot.xray_flux_class == "M1.2"
    assert result.snapshot.sep_events == 1
    assert [point.time for point in result.snapshot.historical_kp_index] == [
        "Thu",
        "Fri",
        "Sat",
        "Sun",
        "Mon",
        "Tue",
        "Wed",
    ]


@pytest.mark.asyncio
async def test_fetch_requests_eight_day_window_for_every_family(
    fake_gateway, today
) -> None:
    await _use_case(fake_gateway, today).fetch()

    assert sorted(call[0].value for call in fake_gateway.calls) == [
        "CME",
        "FLR",
        "GST",
        "SEP",
    ]
    assert {(call[1], call[2]) for call in fake_gateway.calls} == {
        (date(2024, 1, 3), today)
    }


@pytest.mark.asyncio
async def test_single_failure_discards_all_live_data(donki_payloads, today) -> None:
    gateway = FakeDonkiGateway(
        donki_payloads,
        failures={MetricFamily.CME: UpstreamError("DONKI", "HTTP 503")},
    )

    result = await _use_case(gateway, today, seed=11).fetch()

    assert result.source is SnapshotSource.FALLBACK
    assert result.snapshot == generate_mock_snapshot(today, random.Random(11))
    assert result.snapshot.xray_flux_class == "M1.5"
    # Every family is still requested once.
    assert len(gateway.calls) == 4


@pytest.mark.asyncio
async def test_non_list_response_triggers_fallback(donki_payloads, today) -> None:
    donki_payloads[MetricFamily.SEP] = {"error": "OVER_RATE_LIMIT"}
    gateway = FakeDonkiGateway(donki_payloads)

    result = await _use_case(gateway, today).fetch()

    assert result.source is SnapshotSource.FALLBACK


@pytest.mark.asyncio
async def test_unexpected_exception_triggers_fallback(donki_payloads, today) -> None:
    gateway = FakeDonkiGateway(
        donki_payloads, failures={MetricFamily.GST: RuntimeError("boom")}
    )

    snapshot = await _use_case(gateway, today).execute()

    assert len(snapshot.historical_kp_index) == 7
    assert snapshot.xray_flux_class == "M1.5"


@pytest.mark.asyncio
async def test_offline_mode_never_queries_donki(fake_gateway, today) -> None:
    result = await _use_case(fake_gateway, today, offline=True).fetch()

    assert result.source is SnapshotSource.FALLBACK
    assert fake_gateway.calls == []


@pytest.mark.asyncio
async def test_mock_use_case_returns_synthetic_snapshot(today) -> None:
    use_case = GetMockSnapshotUseCase(rng=random.Random(3), clock=lambda: today)

    snapshot = await use_case.execute()

    assert snapshot == generate_mock_snapshot(today, random.Random(3))
    assert snapshot.historical_kp_index[-1].time == "Wed"

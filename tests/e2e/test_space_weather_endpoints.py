from __future__ import annotations

import random

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from src.application.use_cases.space_weather_use_cases import (
    GetSpaceWeatherSnapshotUseCase,
)
from src.domain.entities.errors import UpstreamError
from src.domain.entities.space_weather import MetricFamily
from src.main.app import create_app
from src.main.container import get_container
from tests.fakes import FakeDonkiGateway


def _client_for(gateway: FakeDonkiGateway, today):
    app = create_app()
    container = get_container()
    container.get_snapshot_use_case.override(
        providers.Factory(
            GetSpaceWeatherSnapshotUseCase,
            donki_gateway=gateway,
            rng=providers.Factory(random.Random, 42),
            clock=providers.Object(lambda: today),
        )
    )
    container.donki_gateway.override(providers.Object(gateway))
    return TestClient(app)


@pytest.fixture()
def client(fake_gateway, today):
    with _client_for(fake_gateway, today) as test_client:
        yield test_client


def test_snapshot_endpoint_serves_live_data(client):
    response = client.get("/space-weather")

    assert response.status_code == 200
    assert response.headers["X-Data-Source"] == "live"
    body = response.json()
    assert body["kpIndex"] == 6.0
    assert body["xrayFluxClass"] == "M1.2"
    assert body["sepEvents"] == 1
    assert len(body["forecast"]) == 7
    assert [point["time"] for point in body["historicalKpIndex"]] == [
        "Thu",
        "Fri",
        "Sat",
        "Sun",
        "Mon",
        "Tue",
        "Wed",
    ]
    assert body["historicalKpIndex"][0]["value"] is None


def test_snapshot_endpoint_falls_back_when_donki_fails(donki_payloads, today):
    gateway = FakeDonkiGateway(
        donki_payloads,
        failures={MetricFamily.SEP: UpstreamError("DONKI", "HTTP 503")},
    )
    with _client_for(gateway, today) as test_client:
        response = test_client.get("/space-weather")

    assert response.status_code == 200
    assert response.headers["X-Data-Source"] == "fallback"
    body = response.json()
    assert body["xrayFluxClass"] == "M1.5"
    assert len(body["historicalSolarWind"]) == 7


def test_mock_endpoint(client):
    response = client.get("/space-weather/mock")

    assert response.status_code == 200
    body = response.json()
    assert body["xrayFluxClass"] == "M1.5"
    assert 0 <= body["kpIndex"] <= 3


def test_health_endpoint_reports_donki(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "up"
    assert body["dependencies"][0]["name"] == "donki"


def test_info_endpoint_hides_api_key(client):
    response = client.get("/info")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Cosmic Forecast"
    assert body["extras"]["donki"]["api_key"] in {"demo", "custom", "missing"}

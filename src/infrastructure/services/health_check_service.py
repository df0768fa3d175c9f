"""Infrastructure implementation for system health checks."""

from __future__ import annotations

from time import perf_counter

from src.domain.entities.errors import UpstreamError
from src.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth
from src.domain.gateways.donki_gateway import IDonkiGateway
from src.domain.ports.health_check import IHealthCheckService


class HealthCheckService(IHealthCheckService):
    """Collect health information for the DONKI API."""

    def __init__(self, donki_gateway: IDonkiGateway, offline: bool = False) -> None:
        self._donki_gateway = donki_gateway
        self._offline = offline

    async def evaluate(self) -> SystemHealth:
        return SystemHealth.from_dependencies([await self._check_donki()])

    async def _check_donki(self) -> DependencyStatus:
        if self._offline:
            return DependencyStatus(
                name="donki",
                status=ServiceStatus.UNKNOWN,
                message="Offline mode; DONKI is not queried.",
            )

        start = perf_counter()
        try:
            status_code = await self._donki_gateway.ping()
        except UpstreamError as exc:
            return DependencyStatus(
                name="donki",
                status=ServiceStatus.DOWN,
                message=f"DONKI request failed: {exc.message}",
                latency_ms=(perf_counter() - start) * 1000,
            )

        latency_ms = (perf_counter() - start) * 1000

        # 429 means the key is rate limited: snapshots fall back to mock data.
        if status_code >= 500:
            status = ServiceStatus.DOWN
        elif status_code >= 400:
            status = ServiceStatus.DEGRADED
        else:
            status = ServiceStatus.UP

        return DependencyStatus(
            name="donki",
            status=status,
            message=f"HTTP {status_code}",
            latency_ms=latency_ms,
            details={"status_code": status_code},
        )

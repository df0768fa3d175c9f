from __future__ import annotations

from datetime import date
from typing import Any, Dict, List

from src.domain.entities.errors import UpstreamError
from src.domain.entities.space_weather import MetricFamily
from src.domain.gateways.donki_gateway import IDonkiGateway


class FakeDonkiGateway(IDonkiGateway):
    """In-memory gateway; families listed in ``failures`` raise."""

    def __init__(
        self,
        payloads: Dict[MetricFamily, Any],
        failures: Dict[MetricFamily, Exception] | None = None,
        status_code: int = 200,
    ) -> None:
        self.payloads = payloads
        self.failures = failures or {}
        self.status_code = status_code
        self.calls: List[tuple[MetricFamily, date, date]] = []

    async def fetch_events(
        self, family: MetricFamily, start_date: date, end_date: date
    ) -> Any:
        self.calls.append((family, start_date, end_date))
        if family in self.failures:
            raise self.failures[family]
        return self.payloads.get(family, [])

    async def ping(self) -> int:
        if MetricFamily.FLR in self.failures:
            raise UpstreamError("DONKI", "unreachable")
        return self.status_code

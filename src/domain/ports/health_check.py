"""Domain service abstraction for health checks."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.health import SystemHealth


class IHealthCheckService(Protocol):
    """Reports whether the upstream space weather source is reachable."""

    async def evaluate(self) -> SystemHealth:
        """Probe every dependency and aggregate the result."""
        ...

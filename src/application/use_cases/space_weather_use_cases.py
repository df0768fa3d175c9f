"""
Space Weather Use Cases - Application Layer

This module orchestrates one fetch cycle: four concurrent DONKI requests,
shape validation and snapshot assembly. A cycle is all-or-nothing; any
failure discards the live data and answers with a synthetic snapshot.
"""

import asyncio
import random
from datetime import date, timedelta
from typing import Any, Callable, Dict, List, Optional

from src.domain.entities.errors import DomainError
from src.domain.entities.space_weather import (
    MetricFamily,
    SnapshotResult,
    SpaceWeatherSnapshot,
)
from src.domain.gateways.donki_gateway import IDonkiGateway
from src.domain.services.mock_generator import generate_mock_snapshot
from src.domain.services.snapshot_assembler import assemble_snapshot
from src.domain.services.time_series_builder import utc_today
from src.shared import get_logger

logger = get_logger(__name__)

# One day more than the chart window.
REQUEST_WINDOW_DAYS = 8


class SpaceWeatherFetchError(DomainError):
    """Raised internally when a live fetch cycle cannot be completed."""


class GetSpaceWeatherSnapshotUseCase:
    """Use case returning the current space weather snapshot."""

    def __init__(
        self,
        donki_gateway: IDonkiGateway,
        offline: bool = False,
        rng: Optional[random.Random] = None,
        clock: Callable[[], date] = utc_today,
    ):
        """
        Initialize the use case with its dependencies.

        Args:
            donki_gateway: Gateway for DONKI event records
            offline: Skip DONKI entirely and serve synthetic data
            rng: Random source for jitter and forecast; fresh per cycle if None
            clock: Returns the current UTC calendar day
        """
        self.donki_gateway = donki_gateway
        self._offline = offline
        self._rng = rng
        self._clock = clock

    async def execute(self) -> SpaceWeatherSnapshot:
        """Return a complete snapshot; never raises for upstream failures."""
        result = await self.fetch()
        return result.snapshot

    async def fetch(self) -> SnapshotResult:
        """Run one fetch cycle and tag the snapshot with its source."""
        today = self._clock()
        rng = self._rng or random.Random()

        if self._offline:
            logger.info("space_weather.offline_mode", today=today.isoformat())
            return SnapshotResult.fallback(generate_mock_snapshot(today, rng))

        try:
            events = await self._collect_events(today)
            snapshot = assemble_snapshot(events, today, rng)
        except Exception as e:
            details = e.details if isinstance(e, DomainError) else {}
            logger.warning(
                "space_weather.fallback",
                error=str(e),
                error_type=type(e).__name__,
                details=details,
                today=today.isoformat(),
            )
            return SnapshotResult.fallback(generate_mock_snapshot(today, rng))

        logger.info(
            "space_weather.live_snapshot",
            today=today.isoformat(),
            kp_index=snapshot.kp_index,
            xray_flux_class=snapshot.xray_flux_class,
        )
        return SnapshotResult.live(snapshot)

    async def _collect_events(
        self, today: date
    ) -> Dict[MetricFamily, List[Dict[str, Any]]]:
        start_date = today - timedelta(days=REQUEST_WINDOW_DAYS - 1)
        families = list(MetricFamily)

        logger.info(
            "space_weather.fetch_started",
            start_date=start_date.isoformat(),
            end_date=today.isoformat(),
            families=[family.value for family in families],
        )

        responses = await asyncio.gather(
            *(
                self.donki_gateway.fetch_events(family, start_date, today)
                for family in families
            ),
            return_exceptions=True,
        )

        failures: Dict[str, str] = {}
        events: Dict[MetricFamily, List[Dict[str, Any]]] = {}
        for family, response in zip(families, responses):
            if isinstance(response, BaseException):
                failures[family.value] = str(response)
            elif not isinstance(response, list):
                failures[family.value] = (
                    f"expected a list, got {type(response).__name__}"
                )
            else:
                events[family] = response

        if failures:
            raise SpaceWeatherFetchError(
                f"{len(failures)} of {len(families)} DONKI requests failed",
                {"failures": failures},
            )

        return events


class GetMockSnapshotUseCase:
    """Use case returning a synthetic snapshot without touching DONKI."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Callable[[], date] = utc_today,
    ):
        self._rng = rng
        self._clock = clock

    async def execute(self) -> SpaceWeatherSnapshot:
        return generate_mock_snapshot(self._clock(), self._rng or random.Random())

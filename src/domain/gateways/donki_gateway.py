"""
Domain Gateway - DONKI

This module defines the gateway interface for retrieving space weather
event records from NASA's DONKI (Space Weather Database Of Notifications,
Knowledge, Information) API.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Dict, List

from src.domain.entities.space_weather import MetricFamily


class IDonkiGateway(ABC):
    """Interface for DONKI gateway."""

    @abstractmethod
    async def fetch_events(
        self,
        family: MetricFamily,
        start_date: date,
        end_date: date,
    ) -> List[Dict[str, Any]]:
        """
        Fetch the raw event records of one family for an inclusive date range.

        Args:
            family: Event family (CME, GST, FLR or SEP)
            start_date: First calendar day of the range
            end_date: Last calendar day of the range

        Returns:
            List of raw event records, possibly empty

        Raises:
            UpstreamError: When the request fails or returns a non-2xx status
            UpstreamSchemaError: When the body is not a JSON list
        """
        pass

    @abstractmethod
    async def ping(self) -> int:
        """
        Issue a minimal request and return the HTTP status code.

        Raises:
            UpstreamError: When the service cannot be reached
        """
        pass

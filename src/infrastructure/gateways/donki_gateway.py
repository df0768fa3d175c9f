"""
Infrastructure Gateway - DONKI Implementation

This module implements the DONKI gateway for collecting space weather event
records (CME, GST, FLR, SEP) from NASA's public API.
"""

import json
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

import httpx
import structlog

from src.domain.entities.errors import UpstreamError, UpstreamSchemaError
from src.domain.entities.space_weather import MetricFamily
from src.domain.gateways.donki_gateway import IDonkiGateway
from src.shared.consts import DEMO_API_KEY, DONKI_BASE_URL

logger = structlog.get_logger(__name__)


class DonkiError(UpstreamError):
    """Exception raised when a DONKI request fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("DONKI", message, details)


class DonkiSchemaError(UpstreamSchemaError):
    """Exception raised when a DONKI response is not a list of events."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("DONKI", message, details)


class DonkiGateway(IDonkiGateway):
    """Implementation of DONKI gateway using HTTP client."""

    def __init__(
        self,
        base_url: str = DONKI_BASE_URL,
        api_key: str = DEMO_API_KEY,
        timeout: Optional[float] = 30.0,
    ):
        """
        Initialize DONKI gateway.

        Args:
            base_url: DONKI base URL (e.g., "https://api.nasa.gov/DONKI")
            api_key: api.nasa.gov key; DEMO_KEY is heavily rate limited
            timeout: Request timeout in seconds, None for no limit
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    async def fetch_events(
        self,
        family: MetricFamily,
        start_date: date,
        end_date: date,
    ) -> List[Dict[str, Any]]:
        """Fetch raw events of one family between two inclusive dates."""

        if end_date < start_date:
            raise DonkiError(
                "end_date must not be before start_date",
                {"start_date": start_date.isoformat(), "end_date": end_date.isoformat()},
            )

        url = f"{self.base_url}/{family.value}"
        params = {
            "startDate": start_date.isoformat(),
            "endDate": end_date.isoformat(),
            "api_key": self.api_key,
        }

        logger.info(
            "donki.fetch_started",
            url=url,
            family=family.value,
            start_date=params["startDate"],
            end_date=params["endDate"],
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()

        except httpx.HTTPStatusError as e:
            logger.error(
                "donki.http_error",
                family=family.value,
                status_code=e.response.status_code,
                response_text=e.response.text,
                url=url,
            )
            raise DonkiError(
                f"HTTP error {e.response.status_code} for {family.value}",
                {"family": family.value, "status_code": e.response.status_code},
            ) from e

        except httpx.RequestError as e:
            logger.error(
                "donki.request_error", family=family.value, error=str(e), url=url
            )
            raise DonkiError(
                f"request for {family.value} failed: {e}", {"family": family.value}
            ) from e

        events = self._parse_events(response, family)
        logger.info("donki.fetch_completed", family=family.value, count=len(events))
        return events

    async def ping(self) -> int:
        """Request a one-day FLR range and return the HTTP status code."""
        today = datetime.now(timezone.utc).date()
        url = f"{self.base_url}/{MetricFamily.FLR.value}"
        params = {
            "startDate": today.isoformat(),
            "endDate": today.isoformat(),
            "api_key": self.api_key,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=params)
        except httpx.RequestError as e:
            logger.warning("donki.ping_failed", error=str(e), url=url)
            raise DonkiError(f"ping failed: {e}") from e

        return response.status_code

    def _parse_events(
        self, response: httpx.Response, family: MetricFamily
    ) -> List[Dict[str, Any]]:
        """Decode a DONKI body, which must be a JSON list.

        DONKI answers an empty range with an empty body instead of ``[]``.
        """
        if not response.text.strip():
            return []

        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            logger.error(
                "donki.response_not_json",
                family=family.value,
                error=str(e),
            )
            raise DonkiSchemaError(
                f"{family.value} response is not valid JSON", {"family": family.value}
            ) from e

        if not isinstance(data, list):
            logger.error(
                "donki.response_not_list",
                family=family.value,
                body_type=type(data).__name__,
            )
            raise DonkiSchemaError(
                f"{family.value} response is not a list",
                {"family": family.value, "body_type": type(data).__name__},
            )

        return data

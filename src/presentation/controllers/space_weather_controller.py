"""Space weather endpoints serving dashboard snapshots."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.application.dtos.space_weather_dto import SpaceWeatherSnapshotDTO
from src.application.use_cases.space_weather_use_cases import (
    GetMockSnapshotUseCase,
    GetSpaceWeatherSnapshotUseCase,
)
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/space-weather", tags=["Space Weather"])

DATA_SOURCE_HEADER = "X-Data-Source"


@router.get("", response_model=SpaceWeatherSnapshotDTO)
@inject
async def get_snapshot(
    response: Response,
    get_snapshot_use_case: GetSpaceWeatherSnapshotUseCase = Depends(
        Provide["get_snapshot_use_case"]
    ),
) -> SpaceWeatherSnapshotDTO:
    """
    Return current values, 7-day forecast and 7-day history.

    Falls back to synthetic data when DONKI cannot be used; the
    ``X-Data-Source`` header tells operators which one was served.
    """
    try:
        result = await get_snapshot_use_case.fetch()
    except Exception as exc:
        # Only reachable if the synthetic generator itself fails.
        logger.error("space_weather.snapshot_failed", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch cosmic data. Please try again later.",
        ) from exc

    response.headers[DATA_SOURCE_HEADER] = result.source.value
    logger.debug("space_weather.snapshot_served", source=result.source.value)
    return SpaceWeatherSnapshotDTO.from_domain(result.snapshot)


@router.get("/mock", response_model=SpaceWeatherSnapshotDTO)
@inject
async def get_mock_snapshot(
    get_mock_snapshot_use_case: GetMockSnapshotUseCase = Depends(
        Provide["get_mock_snapshot_use_case"]
    ),
) -> SpaceWeatherSnapshotDTO:
    """Return a synthetic snapshot for offline and demo use."""
    snapshot = await get_mock_snapshot_use_case.execute()
    return SpaceWeatherSnapshotDTO.from_domain(snapshot)

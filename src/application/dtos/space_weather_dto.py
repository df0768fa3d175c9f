"""DTOs for the space weather snapshot consumed by the dashboard."""

from __future__ import annotations

from typing import List, Optional, Sequence

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from src.domain.entities.space_weather import (
    ChartDataPoint,
    ForecastDay,
    SpaceWeatherSnapshot,
)

_CAMEL_CASE = {"alias_generator": to_camel, "populate_by_name": True}


class ChartDataPointDTO(BaseModel):
    """Single chart value; ``value`` is null where no data was observed."""

    time: str = Field(description="Weekday abbreviation (UTC), e.g. 'Mon'")
    value: Optional[float] = Field(default=None, description="Metric value or null")

    model_config = _CAMEL_CASE

    @classmethod
    def from_domain(cls, point: ChartDataPoint) -> "ChartDataPointDTO":
        return cls(time=point.time, value=point.value)


class ForecastDayDTO(BaseModel):
    day: str = Field(description="Weekday abbreviation (UTC)")
    solar_wind_speed: float = Field(description="Projected solar wind speed, km/s")
    kp_index: int = Field(ge=0, description="Projected planetary Kp index")

    model_config = _CAMEL_CASE

    @classmethod
    def from_domain(cls, day: ForecastDay) -> "ForecastDayDTO":
        return cls(
            day=day.day,
            solar_wind_speed=day.solar_wind_speed,
            kp_index=day.kp_index,
        )


def _series(points: Sequence[ChartDataPoint]) -> List[ChartDataPointDTO]:
    return [ChartDataPointDTO.from_domain(point) for point in points]


class SpaceWeatherSnapshotDTO(BaseModel):
    """DTO representing the /space-weather response payload."""

    solar_wind_speed: float = Field(description="Current solar wind speed, km/s")
    kp_index: float = Field(description="Current planetary Kp index")
    cme_max_speed: float = Field(description="Latest daily max CME speed, km/s")
    xray_flux_class: str = Field(description="Latest X-ray flare class, e.g. 'M1.5'")
    sep_events: int = Field(description="Solar energetic particle events today")
    forecast: List[ForecastDayDTO] = Field(description="Tomorrow through +7 days")
    historical_solar_wind: List[ChartDataPointDTO]
    historical_kp_index: List[ChartDataPointDTO]
    historical_cme_speed: List[ChartDataPointDTO]
    historical_xray_flux: List[ChartDataPointDTO]
    historical_sep_events: List[ChartDataPointDTO]

    @classmethod
    def from_domain(cls, snapshot: SpaceWeatherSnapshot) -> "SpaceWeatherSnapshotDTO":
        return cls(
            solar_wind_speed=snapshot.solar_wind_speed,
            kp_index=snapshot.kp_index,
            cme_max_speed=snapshot.cme_max_speed,
            xray_flux_class=snapshot.xray_flux_class,
            sep_events=snapshot.sep_events,
            forecast=[ForecastDayDTO.from_domain(day) for day in snapshot.forecast],
            historical_solar_wind=_series(snapshot.historical_solar_wind),
            historical_kp_index=_series(snapshot.historical_kp_index),
            historical_cme_speed=_series(snapshot.historical_cme_speed),
            historical_xray_flux=_series(snapshot.historical_xray_flux),
            historical_sep_events=_series(snapshot.historical_sep_events),
        )

    model_config = {
        **_CAMEL_CASE,
        "json_schema_extra": {
            "example": {
                "solarWindSpeed": 532.4,
                "kpIndex": 3.0,
                "cmeMaxSpeed": 1021.0,
                "xrayFluxClass": "M1.5",
                "sepEvents": 0,
                "forecast": [
                    {"day": "Tue", "solarWindSpeed": 561.2, "kpIndex": 3},
                ],
                "historicalSolarWind": [{"time": "Mon", "value": None}],
                "historicalKpIndex": [{"time": "Mon", "value": None}],
                "historicalCmeSpeed": [{"time": "Mon", "value": 1021.0}],
                "historicalXrayFlux": [{"time": "Mon", "value": 41.5}],
                "historicalSepEvents": [{"time": "Mon", "value": 0}],
            }
        },
    }

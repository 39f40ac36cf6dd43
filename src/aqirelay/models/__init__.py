"""Typed models for upstream bodies, cached snapshots and the display payload."""

from aqirelay.models._base import Reading, ReadingState
from aqirelay.models.air_quality import AirQualitySnapshot, WaqiFeedData, WaqiFeedResponse
from aqirelay.models.display import DisplayPayload
from aqirelay.models.weather import OpenMeteoCurrent, OpenMeteoForecast, WeatherSnapshot

__all__ = [
    "AirQualitySnapshot",
    "DisplayPayload",
    "OpenMeteoCurrent",
    "OpenMeteoForecast",
    "Reading",
    "ReadingState",
    "WaqiFeedData",
    "WaqiFeedResponse",
    "WeatherSnapshot",
]

"""In-memory snapshot cache shared by the refreshers."""

from __future__ import annotations

from aqirelay.models.air_quality import AirQualitySnapshot
from aqirelay.models.weather import WeatherSnapshot


class SnapshotCache:
    """Holds the latest air-quality and weather snapshots.

    Snapshots are frozen models; storing one replaces the previous
    snapshot wholesale, so concurrent refreshes resolve last-writer-wins.
    """

    def __init__(
        self,
        *,
        air_quality: AirQualitySnapshot | None = None,
        weather: WeatherSnapshot | None = None,
    ) -> None:
        self._air_quality = air_quality or AirQualitySnapshot()
        self._weather = weather or WeatherSnapshot()

    @property
    def air_quality(self) -> AirQualitySnapshot:
        return self._air_quality

    @property
    def weather(self) -> WeatherSnapshot:
        return self._weather

    def store_air_quality(self, snapshot: AirQualitySnapshot) -> None:
        self._air_quality = snapshot

    def store_weather(self, snapshot: WeatherSnapshot) -> None:
        self._weather = snapshot

"""Weather models: the Open-Meteo forecast body and the cached snapshot."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from aqirelay.models._base import Reading, RelayBaseModel


class OpenMeteoCurrent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    temperature_2m: float | str | None = None
    relative_humidity_2m: float | str | None = None


class OpenMeteoForecast(BaseModel):
    """Subset of an Open-Meteo ``/v1/forecast`` response."""

    model_config = ConfigDict(extra="ignore")

    current: OpenMeteoCurrent | None = None


class WeatherSnapshot(RelayBaseModel):
    """Latest successfully fetched current conditions.

    Parameters
    ----------
    temperature_c : Reading
        Air temperature at 2 m in °C.
    relative_humidity_pct : Reading
        Relative humidity at 2 m in percent.
    fetched_at_ms : int
        Epoch milliseconds of the fetch; ``0`` means never fetched.
    """

    temperature_c: Reading = Field(default_factory=Reading.unset)
    relative_humidity_pct: Reading = Field(default_factory=Reading.unset)
    fetched_at_ms: int = 0

    @classmethod
    def from_current(cls, current: OpenMeteoCurrent, *, fetched_at_ms: int) -> WeatherSnapshot:
        return cls(
            temperature_c=Reading.of(current.temperature_2m),
            relative_humidity_pct=Reading.of(current.relative_humidity_2m),
            fetched_at_ms=fetched_at_ms,
        )

    @property
    def never_fetched(self) -> bool:
        return self.fetched_at_ms == 0

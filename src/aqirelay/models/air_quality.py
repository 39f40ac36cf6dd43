"""Air-quality models: the WAQI feed body and the cached snapshot."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from aqirelay.models._base import Reading, RelayBaseModel

#: WAQI ``iaqi`` keys cached by the relay, mapped to snapshot fields.
POLLUTANT_KEYS: tuple[str, ...] = ("pm25", "pm10", "co", "no2")


class WaqiReading(BaseModel):
    """One ``iaqi`` entry, e.g. ``{"v": 90}``."""

    model_config = ConfigDict(extra="ignore")

    v: float | str | None = None


class WaqiFeedData(BaseModel):
    """The ``data`` object of a successful ``feed/{station}`` response."""

    model_config = ConfigDict(extra="ignore")

    aqi: float | str | None = None
    iaqi: dict[str, WaqiReading] = Field(default_factory=dict)

    @field_validator("iaqi", mode="before")
    @classmethod
    def _drop_malformed_readings(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return {}
        return {key: entry for key, entry in value.items() if isinstance(entry, dict)}

    def reading(self, key: str) -> Reading:
        entry = self.iaqi.get(key)
        if entry is None:
            return Reading.not_available()
        return Reading.of(entry.v)


class WaqiFeedResponse(BaseModel):
    """Envelope of a WAQI response.

    ``data`` is an object when ``status`` is ``"ok"`` and an error
    message string otherwise.
    """

    model_config = ConfigDict(extra="ignore")

    status: str = ""
    data: Any = None

    @property
    def is_ok(self) -> bool:
        return self.status == "ok"


class AirQualitySnapshot(RelayBaseModel):
    """Latest successfully fetched air-quality readings.

    Parameters
    ----------
    aqi : Reading
        Composite Air Quality Index.
    pm25, pm10, co, no2 : Reading
        Per-pollutant readings from the station's ``iaqi`` block.
    fetched_at_ms : int
        Epoch milliseconds of the fetch; ``0`` means never fetched.
    """

    aqi: Reading = Field(default_factory=Reading.unset)
    pm25: Reading = Field(default_factory=Reading.unset)
    pm10: Reading = Field(default_factory=Reading.unset)
    co: Reading = Field(default_factory=Reading.unset)
    no2: Reading = Field(default_factory=Reading.unset)
    fetched_at_ms: int = 0

    @classmethod
    def from_feed(cls, feed: WaqiFeedData, *, fetched_at_ms: int) -> AirQualitySnapshot:
        """Build a snapshot from a feed; missing pollutants are marked not available."""
        return cls(
            aqi=Reading.of(feed.aqi),
            fetched_at_ms=fetched_at_ms,
            **{key: feed.reading(key) for key in POLLUTANT_KEYS},
        )

    @property
    def never_fetched(self) -> bool:
        return self.fetched_at_ms == 0

"""Display payload returned to the signage client."""

from __future__ import annotations

from aqirelay.models._base import RelayBaseModel


class DisplayPayload(RelayBaseModel):
    """Flat, string-only response body.

    Every field is ready to print; unavailable readings are ``"N/A"``.
    """

    aqi: str
    pm25: str
    pm10: str
    co: str
    no2: str
    temp: str
    humi: str
    time: str
    date: str
    message: str

    def as_ticker(self) -> str:
        """Single-line marquee text for firmware that scrolls one string."""
        return (
            f"AQI: {self.aqi}   PM2.5: {self.pm25}   TEM: {self.temp}   HUM: {self.humi}   "
            f"{self.time}  {self.date}  {self.message}"
        )

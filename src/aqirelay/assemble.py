"""Response assembly: snapshots in, display strings out."""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from aqirelay._constants import UNIT_CELSIUS, UNIT_CONCENTRATION, UNIT_PERCENT
from aqirelay.models.air_quality import AirQualitySnapshot
from aqirelay.models.display import DisplayPayload
from aqirelay.models.weather import WeatherSnapshot


def local_timestamp(now: datetime, time_zone: str) -> tuple[str, str]:
    """Return ``("hh:mm AM", "dd/mm/yyyy")`` for *now* in *time_zone*.

    Rendered without ``strftime``'s ``%p`` so the host locale cannot
    change the output. A naive *now* is taken to be UTC.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=ZoneInfo("UTC"))
    local = now.astimezone(ZoneInfo(time_zone))
    hour12 = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return (
        f"{hour12:02d}:{local.minute:02d} {meridiem}",
        f"{local.day:02d}/{local.month:02d}/{local.year:04d}",
    )


def build_display_payload(
    air_quality: AirQualitySnapshot,
    weather: WeatherSnapshot,
    *,
    now: datetime,
    time_zone: str,
    message: str,
) -> DisplayPayload:
    time_text, date_text = local_timestamp(now, time_zone)
    return DisplayPayload(
        aqi=air_quality.aqi.render(),
        pm25=air_quality.pm25.render(UNIT_CONCENTRATION),
        pm10=air_quality.pm10.render(UNIT_CONCENTRATION),
        co=air_quality.co.render(UNIT_CONCENTRATION),
        no2=air_quality.no2.render(UNIT_CONCENTRATION),
        temp=weather.temperature_c.render(UNIT_CELSIUS),
        humi=weather.relative_humidity_pct.render(UNIT_PERCENT),
        time=time_text,
        date=date_text,
        message=message,
    )

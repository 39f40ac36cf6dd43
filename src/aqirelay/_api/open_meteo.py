"""Open-Meteo current conditions endpoint.

Endpoint:
  - GET /v1/forecast?latitude=...&longitude=...&current=...&timezone=...
"""

from __future__ import annotations

from pydantic import ValidationError

from aqirelay._constants import WEATHER_CURRENT_FIELDS
from aqirelay._transport import JsonTransport
from aqirelay.config import RelayConfig
from aqirelay.exceptions import UpstreamPayloadError
from aqirelay.models.weather import OpenMeteoCurrent, OpenMeteoForecast

SOURCE = "open-meteo"


def build_forecast_params(config: RelayConfig) -> dict[str, str]:
    return {
        "latitude": str(config.latitude),
        "longitude": str(config.longitude),
        "current": ",".join(WEATHER_CURRENT_FIELDS),
        "timezone": config.time_zone,
    }


async def fetch_current_weather(config: RelayConfig, transport: JsonTransport) -> OpenMeteoCurrent:
    """Fetch current temperature and humidity for the configured coordinates."""
    body = await transport.get_json(
        config.open_meteo_url,
        params=build_forecast_params(config),
        timeout=config.weather_timeout,
        source=SOURCE,
    )

    try:
        forecast = OpenMeteoForecast.model_validate(body)
    except ValidationError as exc:
        raise UpstreamPayloadError(f"Unexpected Open-Meteo body: {exc}", source=SOURCE) from exc

    if forecast.current is None:
        raise UpstreamPayloadError("Open-Meteo response has no 'current' block", source=SOURCE)
    return forecast.current

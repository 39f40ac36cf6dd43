"""Relay configuration for aqirelay."""

from __future__ import annotations

import dataclasses
import os
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from aqirelay._constants import (
    AIR_QUALITY_TIMEOUT_SECONDS,
    AIR_QUALITY_TTL_SECONDS,
    DEFAULT_HOST,
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    DEFAULT_MESSAGE,
    DEFAULT_PORT,
    DEFAULT_STATION_ID,
    DEFAULT_TIME_ZONE,
    OPEN_METEO_URL,
    WAQI_BASE_URL,
    WEATHER_TIMEOUT_SECONDS,
    WEATHER_TTL_SECONDS,
)
from aqirelay.exceptions import RelayConfigError


@dataclasses.dataclass(frozen=True)
class RelayConfig:
    """Relay configuration.

    Only the WAQI token is a secret; everything else defaults to the
    values the signage deployment was built around.

    Parameters
    ----------
    waqi_token : str or None
        WAQI API token. Without it every air-quality refresh fails and
        the display shows ``N/A`` for pollutant fields.
    station_id : str
        WAQI monitoring station identifier (e.g. ``"A567673"``).
    latitude : float
        Latitude used for the weather forecast.
    longitude : float
        Longitude used for the weather forecast.
    time_zone : str
        IANA time zone for the displayed time and date, also sent to
        the weather provider.
    air_quality_ttl : float
        Seconds an air-quality snapshot stays fresh.
    weather_ttl : float
        Seconds a weather snapshot stays fresh.
    air_quality_timeout : float
        Total timeout in seconds for one WAQI request.
    weather_timeout : float
        Total timeout in seconds for one Open-Meteo request.
    host : str
        Interface the HTTP server binds to.
    port : int
        TCP port the HTTP server listens on.
    message : str
        Static promotional message appended to every payload.
    waqi_base_url : str
        WAQI API base URL.
    open_meteo_url : str
        Open-Meteo forecast endpoint.
    """

    waqi_token: str | None = None
    station_id: str = DEFAULT_STATION_ID
    latitude: float = DEFAULT_LATITUDE
    longitude: float = DEFAULT_LONGITUDE
    time_zone: str = DEFAULT_TIME_ZONE
    air_quality_ttl: float = AIR_QUALITY_TTL_SECONDS
    weather_ttl: float = WEATHER_TTL_SECONDS
    air_quality_timeout: float = AIR_QUALITY_TIMEOUT_SECONDS
    weather_timeout: float = WEATHER_TIMEOUT_SECONDS
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    message: str = DEFAULT_MESSAGE
    waqi_base_url: str = WAQI_BASE_URL
    open_meteo_url: str = OPEN_METEO_URL

    def __post_init__(self) -> None:
        for name in ("air_quality_ttl", "weather_ttl", "air_quality_timeout", "weather_timeout"):
            if getattr(self, name) <= 0:
                raise RelayConfigError(f"{name} must be positive, got {getattr(self, name)}")
        if not 0 < self.port < 65536:
            raise RelayConfigError(f"port must be between 1 and 65535, got {self.port}")
        try:
            ZoneInfo(self.time_zone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise RelayConfigError(f"unknown time zone {self.time_zone!r}") from exc

    @property
    def has_token(self) -> bool:
        return bool(self.waqi_token)

    @classmethod
    def from_env(cls, **overrides: Any) -> RelayConfig:
        """Create configuration from environment variables.

        Reads ``WAQI_TOKEN`` and the optional ``RELAY_HOST`` and
        ``RELAY_PORT``. Explicit keyword arguments override environment
        values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        RelayConfig
            Populated configuration.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        token = env.get("WAQI_TOKEN")
        if token is not None and token.strip():
            config_kwargs["waqi_token"] = token.strip()

        host = env.get("RELAY_HOST")
        if host is not None:
            config_kwargs["host"] = host

        # port is numeric, handle separately
        port_env = env.get("RELAY_PORT")
        if port_env is not None and "port" not in overrides:
            try:
                config_kwargs["port"] = int(port_env)
            except ValueError as exc:
                raise RelayConfigError(f"RELAY_PORT must be an integer, got {port_env!r}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)

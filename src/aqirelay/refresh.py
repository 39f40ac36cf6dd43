"""Cache refreshers for the two upstream feeds.

Each refresher decides whether its snapshot is due, fetches when it is,
and stores a new snapshot on success. Upstream failures are logged and
leave the cached snapshot untouched; the next request retries naturally.
"""

from __future__ import annotations

import logging

from aqirelay._api.open_meteo import fetch_current_weather
from aqirelay._api.waqi import fetch_station_feed
from aqirelay._cache import SnapshotCache
from aqirelay._constants import UNIT_CELSIUS
from aqirelay._transport import JsonTransport
from aqirelay.config import RelayConfig
from aqirelay.exceptions import UpstreamError
from aqirelay.models.air_quality import AirQualitySnapshot
from aqirelay.models.weather import WeatherSnapshot
from aqirelay.policy import age_ms, should_refresh_air_quality, should_refresh_weather

_logger = logging.getLogger(__name__)


async def refresh_air_quality(
    cache: SnapshotCache,
    config: RelayConfig,
    transport: JsonTransport,
    now_ms: int,
) -> bool:
    """Refresh the air-quality snapshot if it is due.

    Returns ``True`` when a new snapshot was stored.
    """
    snapshot = cache.air_quality
    if not should_refresh_air_quality(snapshot, now_ms, config.air_quality_ttl):
        _logger.info(
            "Serving air quality from cache (age %.0fs)",
            (age_ms(snapshot.fetched_at_ms, now_ms) or 0) / 1000,
        )
        return False

    _logger.info("Air quality cache expired or empty, fetching station %s", config.station_id)
    try:
        feed = await fetch_station_feed(config, transport)
    except UpstreamError as exc:
        _logger.warning("Failed to update air quality: %s", exc)
        return False

    updated = AirQualitySnapshot.from_feed(feed, fetched_at_ms=now_ms)
    cache.store_air_quality(updated)
    _logger.info("Air quality updated: AQI %s", updated.aqi.render())
    return True


async def refresh_weather(
    cache: SnapshotCache,
    config: RelayConfig,
    transport: JsonTransport,
    now_ms: int,
) -> bool:
    """Refresh the weather snapshot if it is due.

    Returns ``True`` when a new snapshot was stored.
    """
    snapshot = cache.weather
    if not should_refresh_weather(snapshot, now_ms, config.weather_ttl):
        _logger.info(
            "Serving weather from cache (age %.0fs)",
            (age_ms(snapshot.fetched_at_ms, now_ms) or 0) / 1000,
        )
        return False

    _logger.info("Weather cache expired or empty, fetching %s,%s", config.latitude, config.longitude)
    try:
        current = await fetch_current_weather(config, transport)
    except UpstreamError as exc:
        _logger.warning("Failed to update weather: %s", exc)
        return False

    updated = WeatherSnapshot.from_current(current, fetched_at_ms=now_ms)
    cache.store_weather(updated)
    _logger.info("Weather updated: %s", updated.temperature_c.render(UNIT_CELSIUS))
    return True

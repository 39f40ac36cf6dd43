"""Pure refresh decisions for the snapshot cache.

Nothing here performs I/O; the refreshers consult these predicates
before touching the network.
"""

from __future__ import annotations

from aqirelay.models.air_quality import AirQualitySnapshot
from aqirelay.models.weather import WeatherSnapshot


def age_ms(fetched_at_ms: int, now_ms: int) -> int | None:
    """Milliseconds since *fetched_at_ms*, or ``None`` if never fetched."""
    if fetched_at_ms == 0:
        return None
    return now_ms - fetched_at_ms


def is_stale(fetched_at_ms: int, now_ms: int, ttl_seconds: float) -> bool:
    """Whether a fetch at *fetched_at_ms* is older than the TTL at *now_ms*."""
    if fetched_at_ms == 0:
        return True
    return now_ms - fetched_at_ms > ttl_seconds * 1000


def should_refresh_air_quality(snapshot: AirQualitySnapshot, now_ms: int, ttl_seconds: float) -> bool:
    """Refresh when the snapshot expired or holds no AQI value."""
    return is_stale(snapshot.fetched_at_ms, now_ms, ttl_seconds) or not snapshot.aqi.has_value


def should_refresh_weather(snapshot: WeatherSnapshot, now_ms: int, ttl_seconds: float) -> bool:
    """Refresh when the snapshot expired or holds no temperature."""
    return is_stale(snapshot.fetched_at_ms, now_ms, ttl_seconds) or not snapshot.temperature_c.has_value

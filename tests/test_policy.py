from __future__ import annotations

from aqirelay.models import AirQualitySnapshot, Reading, WeatherSnapshot
from aqirelay.policy import age_ms, is_stale, should_refresh_air_quality, should_refresh_weather

_NOW_MS = 1_760_000_000_000
_AQ_TTL = 15 * 60
_WEATHER_TTL = 20


def _air(fetched_at_ms: int, aqi: Reading | None = None) -> AirQualitySnapshot:
    return AirQualitySnapshot(aqi=aqi if aqi is not None else Reading.of(120), fetched_at_ms=fetched_at_ms)


def _weather(fetched_at_ms: int, temperature: Reading | None = None) -> WeatherSnapshot:
    if temperature is None:
        temperature = Reading.of(25)
    return WeatherSnapshot(temperature_c=temperature, fetched_at_ms=fetched_at_ms)


def test_never_fetched_is_always_stale() -> None:
    assert is_stale(0, 0, 3600)
    assert is_stale(0, _NOW_MS, 3600)
    assert age_ms(0, _NOW_MS) is None


def test_ttl_boundary_is_exclusive() -> None:
    fetched = _NOW_MS - 20_000
    assert not is_stale(fetched, _NOW_MS, 20)
    assert is_stale(fetched - 1, _NOW_MS, 20)
    assert age_ms(fetched, _NOW_MS) == 20_000


def test_air_quality_fresh_snapshot_is_kept() -> None:
    snapshot = _air(_NOW_MS - 14 * 60 * 1000)
    assert not should_refresh_air_quality(snapshot, _NOW_MS, _AQ_TTL)


def test_air_quality_expires_after_fifteen_minutes() -> None:
    snapshot = _air(_NOW_MS - 15 * 60 * 1000 - 1)
    assert should_refresh_air_quality(snapshot, _NOW_MS, _AQ_TTL)


def test_air_quality_without_aqi_refreshes_within_ttl() -> None:
    assert should_refresh_air_quality(_air(_NOW_MS - 1000, Reading.not_available()), _NOW_MS, _AQ_TTL)
    assert should_refresh_air_quality(AirQualitySnapshot(), _NOW_MS, _AQ_TTL)


def test_weather_expires_after_twenty_seconds() -> None:
    assert not should_refresh_weather(_weather(_NOW_MS - 19_000), _NOW_MS, _WEATHER_TTL)
    assert should_refresh_weather(_weather(_NOW_MS - 21_000), _NOW_MS, _WEATHER_TTL)


def test_weather_zero_degrees_counts_as_a_value() -> None:
    snapshot = _weather(_NOW_MS - 1000, Reading.of(0))
    assert not should_refresh_weather(snapshot, _NOW_MS, _WEATHER_TTL)


def test_weather_without_temperature_refreshes() -> None:
    snapshot = _weather(_NOW_MS - 1000, Reading.not_available())
    assert should_refresh_weather(snapshot, _NOW_MS, _WEATHER_TTL)

from __future__ import annotations

import time
from datetime import UTC, datetime

import pytest

from aqirelay.assemble import build_display_payload, local_timestamp
from aqirelay.models import AirQualitySnapshot, DisplayPayload, Reading, WeatherSnapshot

_IST = "Asia/Kolkata"
_MESSAGE = "Cleans Air Equivalent to 15 Mature Trees - NHAI - CPA"


def _payload(air: AirQualitySnapshot, weather: WeatherSnapshot, now: datetime | None = None) -> DisplayPayload:
    return build_display_payload(
        air,
        weather,
        now=now or datetime(2026, 10, 19, 8, 35, tzinfo=UTC),
        time_zone=_IST,
        message=_MESSAGE,
    )


def test_populated_fields_get_units() -> None:
    air = AirQualitySnapshot(aqi=Reading.of(187), pm25=Reading.of(90), fetched_at_ms=1)
    weather = WeatherSnapshot(temperature_c=Reading.of(21.5), relative_humidity_pct=Reading.of(40), fetched_at_ms=1)

    payload = _payload(air, weather)

    assert payload.aqi == "187"
    assert payload.pm25 == "90 µg/m³"
    assert payload.temp == "21.5 °C"
    assert payload.humi == "40 %"
    assert payload.time == "02:05 PM"
    assert payload.date == "19/10/2026"
    assert payload.message == _MESSAGE


def test_missing_pollutant_renders_na_without_unit() -> None:
    air = AirQualitySnapshot(
        aqi=Reading.of(150),
        pm25=Reading.of(60),
        pm10=Reading.of(110),
        co=Reading.not_available(),
        no2=Reading.of(8.2),
        fetched_at_ms=1,
    )

    payload = _payload(air, WeatherSnapshot())

    assert payload.co == "N/A"
    assert payload.pm25 == "60 µg/m³"
    assert payload.pm10 == "110 µg/m³"
    assert payload.no2 == "8.2 µg/m³"


def test_unset_snapshots_render_all_na() -> None:
    payload = _payload(AirQualitySnapshot(), WeatherSnapshot())

    dumped = payload.model_dump()
    for key in ("aqi", "pm25", "pm10", "co", "no2", "temp", "humi"):
        assert dumped[key] == "N/A"
    assert set(dumped) == {"aqi", "pm25", "pm10", "co", "no2", "temp", "humi", "time", "date", "message"}


@pytest.mark.parametrize(
    ("utc", "expected"),
    [
        (datetime(2026, 1, 1, 0, 0, tzinfo=UTC), ("05:30 AM", "01/01/2026")),
        (datetime(2026, 1, 1, 6, 30, tzinfo=UTC), ("12:00 PM", "01/01/2026")),
        (datetime(2025, 12, 31, 18, 30, tzinfo=UTC), ("12:00 AM", "01/01/2026")),
        (datetime(2026, 3, 9, 17, 59, tzinfo=UTC), ("11:29 PM", "09/03/2026")),
    ],
)
def test_local_timestamp_is_ist(utc: datetime, expected: tuple[str, str]) -> None:
    assert local_timestamp(utc, _IST) == expected


def test_local_timestamp_treats_naive_as_utc() -> None:
    assert local_timestamp(datetime(2026, 1, 1, 0, 0), _IST) == ("05:30 AM", "01/01/2026")


def test_local_timestamp_ignores_host_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    try:
        assert local_timestamp(datetime(2026, 7, 4, 12, 0, tzinfo=UTC), _IST) == ("05:30 PM", "04/07/2026")
    finally:
        monkeypatch.undo()
        time.tzset()


def test_ticker_line() -> None:
    air = AirQualitySnapshot(aqi=Reading.of(187), pm25=Reading.of(90), fetched_at_ms=1)
    weather = WeatherSnapshot(temperature_c=Reading.of(21.5), relative_humidity_pct=Reading.of(40), fetched_at_ms=1)

    ticker = _payload(air, weather).as_ticker()

    assert ticker == (
        "AQI: 187   PM2.5: 90 µg/m³   TEM: 21.5 °C   HUM: 40 %   "
        "02:05 PM  19/10/2026  Cleans Air Equivalent to 15 Mature Trees - NHAI - CPA"
    )

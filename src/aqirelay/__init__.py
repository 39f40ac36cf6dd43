"""aqirelay - Cached air-quality and weather relay for signage displays."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("aqirelay")
except PackageNotFoundError:
    __version__ = "0+local"
from aqirelay._cache import SnapshotCache
from aqirelay.assemble import build_display_payload, local_timestamp
from aqirelay.config import RelayConfig
from aqirelay.exceptions import (
    RelayConfigError,
    RelayError,
    UpstreamError,
    UpstreamPayloadError,
    UpstreamStatusError,
    UpstreamTimeoutError,
    UpstreamTransportError,
)
from aqirelay.models import (
    AirQualitySnapshot,
    DisplayPayload,
    Reading,
    ReadingState,
    WeatherSnapshot,
)
from aqirelay.policy import should_refresh_air_quality, should_refresh_weather
from aqirelay.refresh import refresh_air_quality, refresh_weather
from aqirelay.server import create_app
from aqirelay.service import RelayService

__all__ = [
    "__version__",
    "AirQualitySnapshot",
    "DisplayPayload",
    "Reading",
    "ReadingState",
    "RelayConfig",
    "RelayConfigError",
    "RelayError",
    "RelayService",
    "SnapshotCache",
    "UpstreamError",
    "UpstreamPayloadError",
    "UpstreamStatusError",
    "UpstreamTimeoutError",
    "UpstreamTransportError",
    "WeatherSnapshot",
    "build_display_payload",
    "create_app",
    "local_timestamp",
    "refresh_air_quality",
    "refresh_weather",
    "should_refresh_air_quality",
    "should_refresh_weather",
]

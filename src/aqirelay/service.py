"""Relay service: refresh both snapshots, then assemble the payload."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from aqirelay._cache import SnapshotCache
from aqirelay._transport import JsonTransport
from aqirelay.assemble import build_display_payload
from aqirelay.config import RelayConfig
from aqirelay.exceptions import RelayError
from aqirelay.models.display import DisplayPayload
from aqirelay.refresh import refresh_air_quality, refresh_weather


def _utcnow() -> datetime:
    return datetime.now(UTC)


def to_epoch_ms(moment: datetime) -> int:
    """Epoch milliseconds for an aware (or UTC-naive) datetime."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return int(moment.timestamp() * 1000)


class RelayService:
    """Owns the snapshot cache and serves display payloads.

    Usage::

        service = RelayService(config, HttpTransport(session))
        payload = await service.current_payload()
    """

    def __init__(
        self,
        config: RelayConfig,
        transport: JsonTransport | None = None,
        *,
        cache: SnapshotCache | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._config = config
        self._transport = transport
        self._cache = cache if cache is not None else SnapshotCache()
        self._clock = clock

    def bind_transport(self, transport: JsonTransport | None) -> None:
        """Attach (or detach, with ``None``) the upstream transport."""
        self._transport = transport

    @property
    def has_transport(self) -> bool:
        return self._transport is not None

    @property
    def config(self) -> RelayConfig:
        return self._config

    @property
    def cache(self) -> SnapshotCache:
        return self._cache

    async def current_payload(self) -> DisplayPayload:
        if self._transport is None:
            raise RelayError("Relay service has no upstream transport bound")
        transport = self._transport
        now = self._clock()
        now_ms = to_epoch_ms(now)

        await refresh_air_quality(self._cache, self._config, transport, now_ms)
        await refresh_weather(self._cache, self._config, transport, now_ms)

        return build_display_payload(
            self._cache.air_quality,
            self._cache.weather,
            now=now,
            time_zone=self._config.time_zone,
            message=self._config.message,
        )

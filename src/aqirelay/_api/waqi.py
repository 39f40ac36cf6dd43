"""WAQI station feed endpoint.

Endpoint:
  - GET /feed/{station_id}/?token=...
"""

from __future__ import annotations

from pydantic import ValidationError

from aqirelay._transport import JsonTransport
from aqirelay.config import RelayConfig
from aqirelay.exceptions import UpstreamPayloadError, UpstreamStatusError
from aqirelay.models.air_quality import WaqiFeedData, WaqiFeedResponse

SOURCE = "waqi"


def build_feed_url(config: RelayConfig) -> str:
    return f"{config.waqi_base_url.rstrip('/')}/feed/{config.station_id}/"


async def fetch_station_feed(config: RelayConfig, transport: JsonTransport) -> WaqiFeedData:
    """Fetch the configured station's feed.

    Raises :class:`UpstreamStatusError` when WAQI reports a status other
    than ``"ok"`` (invalid token, unknown station, quota exceeded) and
    :class:`UpstreamPayloadError` when the body does not fit the feed model.
    Transport failures propagate from the transport unchanged.
    """
    url = build_feed_url(config)
    body = await transport.get_json(
        url,
        params={"token": config.waqi_token or ""},
        timeout=config.air_quality_timeout,
        source=SOURCE,
    )

    try:
        response = WaqiFeedResponse.model_validate(body)
    except ValidationError as exc:
        raise UpstreamPayloadError(f"Unexpected WAQI envelope: {exc}", source=SOURCE) from exc

    if not response.is_ok:
        raise UpstreamStatusError(
            f"WAQI responded with status={response.status!r} data={response.data!r}",
            source=SOURCE,
            status=response.status,
        )

    try:
        return WaqiFeedData.model_validate(response.data)
    except ValidationError as exc:
        raise UpstreamPayloadError(f"Unexpected WAQI feed data: {exc}", source=SOURCE) from exc

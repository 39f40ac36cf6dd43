"""aiohttp web application exposing the relay."""

from __future__ import annotations

import functools
import json
import logging
from collections.abc import AsyncIterator, Awaitable, Callable

import aiohttp
from aiohttp import web

from aqirelay._constants import SYSTEM_FAILURE_TEXT
from aqirelay._transport import HttpTransport, JsonTransport
from aqirelay.config import RelayConfig
from aqirelay.service import RelayService

_logger = logging.getLogger(__name__)

SERVICE_KEY: web.AppKey[RelayService] = web.AppKey("service", RelayService)
CONFIG_KEY: web.AppKey[RelayConfig] = web.AppKey("config", RelayConfig)

AQI_PATH = "/api/aqi"
TICKER_PATH = "/api/ticker"

_CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "*",
}

# Keep "µg/m³" and "°C" readable on the wire.
_dumps = functools.partial(json.dumps, ensure_ascii=False)

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


def _route_exists(request: web.Request) -> bool:
    # OPTIONS is not registered, so a known path resolves to 405, an unknown one to 404.
    match_exc = request.match_info.http_exception
    return match_exc is None or isinstance(match_exc, web.HTTPMethodNotAllowed)


@web.middleware
async def cors_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """Allow any origin, and answer preflight requests for known routes."""
    if request.method == "OPTIONS" and _route_exists(request):
        return web.Response(status=204, headers=_CORS_HEADERS)
    try:
        response = await handler(request)
    except web.HTTPException as exc:
        exc.headers.update(_CORS_HEADERS)
        raise
    response.headers.update(_CORS_HEADERS)
    return response


async def handle_aqi(request: web.Request) -> web.Response:
    service = request.app[SERVICE_KEY]
    _logger.info("Incoming request from %s", request.remote)
    try:
        payload = await service.current_payload()
    except Exception:  # noqa: BLE001
        _logger.exception("Critical error while building the display payload")
        return web.json_response({"error": SYSTEM_FAILURE_TEXT}, status=500, dumps=_dumps)
    return web.json_response(payload.model_dump(), dumps=_dumps)


async def handle_ticker(request: web.Request) -> web.Response:
    service = request.app[SERVICE_KEY]
    _logger.info("Incoming ticker request from %s", request.remote)
    try:
        payload = await service.current_payload()
    except Exception:  # noqa: BLE001
        _logger.exception("Critical error while building the ticker line")
        return web.json_response({"data": f"Error: {SYSTEM_FAILURE_TEXT}"}, status=500, dumps=_dumps)
    return web.json_response({"data": payload.as_ticker()}, dumps=_dumps)


async def _upstream_session_ctx(app: web.Application) -> AsyncIterator[None]:
    """Open the shared upstream session and bind it to the service."""
    service = app[SERVICE_KEY]
    async with aiohttp.ClientSession() as http_session:
        service.bind_transport(HttpTransport(http_session))
        try:
            yield
        finally:
            service.bind_transport(None)


def create_app(
    config: RelayConfig,
    *,
    service: RelayService | None = None,
    transport: JsonTransport | None = None,
) -> web.Application:
    """Build the web application.

    Pass *service* (or just *transport*) to bypass the real upstream
    session, e.g. in tests. Otherwise an ``aiohttp.ClientSession`` is
    opened on startup and closed on cleanup.
    """
    app = web.Application(middlewares=[cors_middleware])
    app[CONFIG_KEY] = config

    if service is None:
        service = RelayService(config, transport)
    app[SERVICE_KEY] = service
    if not service.has_transport:
        app.cleanup_ctx.append(_upstream_session_ctx)
    app.on_startup.append(_announce_startup)

    app.router.add_get(AQI_PATH, handle_aqi)
    app.router.add_get(TICKER_PATH, handle_ticker)
    return app


def log_startup_banner(config: RelayConfig) -> None:
    _logger.info("=" * 41)
    _logger.info("Relay started on %s:%s", config.host, config.port)
    _logger.info("Station: %s  Weather: %s,%s", config.station_id, config.latitude, config.longitude)
    if not config.has_token:
        _logger.warning("WAQI_TOKEN is not set; air-quality refreshes will fail")
    _logger.info("=" * 41)


async def _announce_startup(app: web.Application) -> None:
    log_startup_banner(app[CONFIG_KEY])

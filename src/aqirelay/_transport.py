"""HTTP transport for the upstream JSON feeds."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from aqirelay._constants import USER_AGENT
from aqirelay._redact import body_preview, redact_params
from aqirelay.exceptions import UpstreamTimeoutError, UpstreamTransportError

_logger = logging.getLogger(__name__)


class JsonTransport(Protocol):
    """Structural transport interface used by the upstream modules.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(
        self,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        timeout: float,
        source: str = "",
    ) -> Any:
        ...


class HttpTransport:
    """GET-only JSON transport on top of a shared ``aiohttp.ClientSession``."""

    def __init__(self, http_session: aiohttp.ClientSession) -> None:
        self._http = http_session

    async def get_json(
        self,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        timeout: float,
        source: str = "",
    ) -> Any:
        """Fetch *url* and decode the JSON body.

        Raises :class:`UpstreamTimeoutError` when the whole exchange
        takes longer than *timeout* seconds, and
        :class:`UpstreamTransportError` for network failures, non-200
        responses and bodies that are not JSON.
        """
        headers = {"accept": "application/json", "user-agent": USER_AGENT}

        _logger.debug("GET %s params=%s", url, redact_params(params))

        try:
            async with self._http.get(
                url,
                params=params,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=timeout),
            ) as resp:
                raw = await resp.read()
                if resp.status != 200:
                    raise UpstreamTransportError(
                        f"HTTP {resp.status} from {source or url}: {body_preview(raw)}",
                        source=source,
                        status_code=resp.status,
                        url=url,
                    )
        except UpstreamTransportError:
            raise
        except TimeoutError as exc:
            raise UpstreamTimeoutError(
                f"Request to {source or url} timed out after {timeout:g}s",
                source=source,
                url=url,
            ) from exc
        except aiohttp.ClientError as exc:
            raise UpstreamTransportError(
                f"Request to {source or url} failed: {exc}",
                source=source,
                url=url,
            ) from exc

        try:
            # json.loads detects UTF-8/16/32 from the bytes themselves.
            body = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            raise UpstreamTransportError(
                f"Invalid JSON from {source or url}: {body_preview(raw)}",
                source=source,
                status_code=200,
                url=url,
            ) from exc

        _logger.debug("Response from %s: %s", source or url, body_preview(raw))
        return body

"""Custom exception hierarchy for aqirelay."""

from __future__ import annotations


class RelayError(Exception):
    """Base exception for all aqirelay errors."""


class RelayConfigError(RelayError):
    """Invalid or missing configuration."""


class UpstreamError(RelayError):
    """An upstream feed could not deliver a usable snapshot."""

    def __init__(self, message: str, *, source: str = "") -> None:
        self.source = source
        super().__init__(message)


class UpstreamTransportError(UpstreamError):
    """HTTP-level failure (network, non-200, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        source: str = "",
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message, source=source)


class UpstreamTimeoutError(UpstreamTransportError):
    """The upstream did not answer within its timeout."""


class UpstreamStatusError(UpstreamError):
    """Upstream answered but reported a non-success application status."""

    def __init__(self, message: str, *, source: str = "", status: str = "") -> None:
        self.status = status
        super().__init__(message, source=source)


class UpstreamPayloadError(UpstreamError):
    """Upstream body did not match the expected shape."""

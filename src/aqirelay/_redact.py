"""Log-safe views of upstream requests and responses.

The WAQI token travels as a query parameter, so request parameters are
masked before they are logged, and bodies are logged as a short preview.
"""

from __future__ import annotations

from collections.abc import Mapping

_SECRET_PARAMS: frozenset[str] = frozenset({"token"})

BODY_PREVIEW_BYTES = 200


def redact_params(params: Mapping[str, str] | None) -> dict[str, str]:
    """Copy of the query parameters with the token masked."""
    return {key: ("<redacted>" if key.lower() in _SECRET_PARAMS else value) for key, value in (params or {}).items()}


def body_preview(raw: bytes, limit: int = BODY_PREVIEW_BYTES) -> str:
    """First *limit* bytes of an upstream body, decoded leniently."""
    text = raw[:limit].decode("utf-8", errors="replace")
    return f"{text}…<truncated>" if len(raw) > limit else text

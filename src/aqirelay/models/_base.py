"""Base model and reading type for relay snapshots.

Upstream feeds report readings as numbers, numeric strings, placeholder
strings (WAQI sends ``"-"`` for an offline station) or not at all.
:class:`Reading` keeps three outcomes apart:

* ``UNSET``: nothing has been fetched yet.
* ``NOT_AVAILABLE``: the upstream answered without a usable value.
* ``VALUE``: a number, which may legitimately be ``0``.
"""

from __future__ import annotations

import enum
import math
from typing import Any

from pydantic import BaseModel, ConfigDict

from aqirelay._constants import DISPLAY_DECIMALS, NOT_AVAILABLE_TEXT


def safe_float(value: Any) -> float | None:
    """Convert a value to float, returning None on failure."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def format_number(value: float) -> str:
    """Render *value* with at most two decimals (``187.0`` -> ``"187"``, ``21.456`` -> ``"21.46"``)."""
    text = f"{value:.{DISPLAY_DECIMALS}f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


class ReadingState(enum.Enum):
    UNSET = "unset"
    NOT_AVAILABLE = "not_available"
    VALUE = "value"


class RelayBaseModel(BaseModel):
    """Base for relay snapshot and payload models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )


class Reading(RelayBaseModel):
    """A single displayed measurement.

    Parameters
    ----------
    state : ReadingState
        Whether the reading was never fetched, unavailable upstream, or
        holds a value.
    value : float or None
        The measurement; only set when ``state`` is ``VALUE``.
    """

    state: ReadingState = ReadingState.UNSET
    value: float | None = None

    @classmethod
    def unset(cls) -> Reading:
        return cls(state=ReadingState.UNSET)

    @classmethod
    def not_available(cls) -> Reading:
        return cls(state=ReadingState.NOT_AVAILABLE)

    @classmethod
    def of(cls, raw: Any) -> Reading:
        """Build a reading from a raw upstream value.

        Numbers and numeric strings become ``VALUE``; anything else,
        including ``None`` and placeholder strings, is ``NOT_AVAILABLE``.
        """
        parsed = safe_float(raw)
        if parsed is None:
            return cls.not_available()
        return cls(state=ReadingState.VALUE, value=parsed)

    @property
    def has_value(self) -> bool:
        return self.state is ReadingState.VALUE and self.value is not None

    def render(self, unit: str = "") -> str:
        """Render for display, appending *unit* only to real values."""
        if not self.has_value:
            return NOT_AVAILABLE_TEXT
        assert self.value is not None  # noqa: S101
        text = format_number(self.value)
        return f"{text} {unit}" if unit else text

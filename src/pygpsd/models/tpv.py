"""Time-position-velocity (TPV) report model."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import Field, field_validator

from pygpsd.models._base import GpsdBaseModel, GpsdEnum


class FixMode(GpsdEnum):
    """NMEA fix mode of a TPV report."""

    UNKNOWN = -1
    NO_VALUE_SEEN = 0
    NO_FIX = 1
    MODE_2D = 2
    MODE_3D = 3


class TimePositionVelocityReport(GpsdBaseModel):
    """Position/velocity solution.

    Error estimates (``ep*``) are 95% confidence values in the units of the
    matching measurement. Fields the receiver did not report are ``None``.
    """

    class_: Literal["TPV"] = Field(default="TPV", alias="class")
    tag: str | None = None
    device: str | None = None
    mode: FixMode = FixMode.NO_VALUE_SEEN
    time: datetime | None = None
    ept: float | None = None
    lat: float | None = None
    lon: float | None = None
    alt: float | None = None
    epx: float | None = None
    epy: float | None = None
    epv: float | None = None
    track: float | None = None
    speed: float | None = None
    climb: float | None = None
    epd: float | None = None
    eps: float | None = None
    epc: float | None = None

    @field_validator("mode", mode="before")
    @classmethod
    def _coerce_mode(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return FixMode(value)
        return value

    @property
    def has_fix(self) -> bool:
        """``True`` for 2D and 3D fixes."""
        return self.mode in (FixMode.MODE_2D, FixMode.MODE_3D)

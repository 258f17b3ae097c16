"""Pulse-per-second (PPS) report model."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from pygpsd.models._base import GpsdBaseModel


class PulsePerSecondReport(GpsdBaseModel):
    """Timing of a PPS edge against the local system clock."""

    class_: Literal["PPS"] = Field(default="PPS", alias="class")
    device: str | None = None
    real_sec: float | None = None
    real_musec: float | None = None
    clock_sec: float | None = None
    clock_musec: float | None = None

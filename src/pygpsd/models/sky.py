"""Satellite sky view (SKY) report model."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from pygpsd.models._base import GpsdBaseModel


class Satellite(GpsdBaseModel):
    """A single satellite in view."""

    prn: float | None = Field(default=None, alias="PRN")
    az: float | None = None
    el: float | None = None
    ss: float | None = None
    used: bool = False


class SkyViewReport(GpsdBaseModel):
    """Dilution of precision values and the satellites in view."""

    class_: Literal["SKY"] = Field(default="SKY", alias="class")
    tag: str | None = None
    device: str | None = None
    time: datetime | None = None
    xdop: float | None = None
    ydop: float | None = None
    vdop: float | None = None
    tdop: float | None = None
    hdop: float | None = None
    pdop: float | None = None
    gdop: float | None = None
    satellites: tuple[Satellite, ...] = ()

    @property
    def used_satellites(self) -> tuple[Satellite, ...]:
        return tuple(sat for sat in self.satellites if sat.used)

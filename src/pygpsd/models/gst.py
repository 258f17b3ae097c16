"""Pseudorange noise (GST) report model."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from pygpsd.models._base import GpsdBaseModel


class PseudorangeNoiseReport(GpsdBaseModel):
    """Pseudorange noise statistics and error ellipse."""

    class_: Literal["GST"] = Field(default="GST", alias="class")
    tag: str | None = None
    device: str | None = None
    time: datetime | None = None
    rms: float | None = None
    major: float | None = None
    minor: float | None = None
    orient: float | None = None
    lat: float | None = None
    lon: float | None = None
    alt: float | None = None

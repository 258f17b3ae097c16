"""Device list (DEVICES) report model."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from pygpsd.models._base import GpsdBaseModel


class Device(GpsdBaseModel):
    """One device known to the daemon."""

    class_: Literal["DEVICE"] = Field(default="DEVICE", alias="class")
    path: str | None = None
    activated: str | None = None
    flags: int | None = None
    driver: str | None = None
    subtype: str | None = None
    bps: int | None = None
    parity: str | None = None
    stopbits: int | None = None
    native: int | None = None
    cycle: float | None = None
    mincycle: float | None = None


class DevicesReport(GpsdBaseModel):
    class_: Literal["DEVICES"] = Field(default="DEVICES", alias="class")
    devices: tuple[Device, ...] = ()
    remote: str | None = None

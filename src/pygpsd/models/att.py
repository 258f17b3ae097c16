"""Vehicle attitude (ATT) report model."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from pygpsd.models._base import GpsdBaseModel


class VehicleAttitudeReport(GpsdBaseModel):
    """Attitude from a digital compass or gyroscope.

    The ``*_st`` fields carry single-letter magnetometer/sensor status codes
    exactly as the device reports them.
    """

    class_: Literal["ATT"] = Field(default="ATT", alias="class")
    tag: str | None = None
    device: str | None = None
    time: datetime | None = None
    heading: float | None = None
    mag_st: str | None = None
    pitch: float | None = None
    pitch_st: str | None = None
    yaw: float | None = None
    yaw_st: str | None = None
    roll: float | None = None
    roll_st: str | None = None
    dip: float | None = None
    mag_len: float | None = None
    mag_x: float | None = None
    mag_y: float | None = None
    mag_z: float | None = None
    acc_len: float | None = None
    acc_x: float | None = None
    acc_y: float | None = None
    acc_z: float | None = None
    gyro_x: float | None = None
    gyro_y: float | None = None
    depth: float | None = None
    temperature: float | None = None

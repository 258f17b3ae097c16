"""Data models for gpsd reports."""

from pygpsd.models._base import GpsdBaseModel, GpsdEnum, ReportKind
from pygpsd.models.att import VehicleAttitudeReport
from pygpsd.models.devices import Device, DevicesReport
from pygpsd.models.error import ErrorReport
from pygpsd.models.gst import PseudorangeNoiseReport
from pygpsd.models.pps import PulsePerSecondReport
from pygpsd.models.sky import Satellite, SkyViewReport
from pygpsd.models.tpv import FixMode, TimePositionVelocityReport
from pygpsd.models.version import VersionReport

Report = (
    TimePositionVelocityReport
    | VersionReport
    | SkyViewReport
    | PseudorangeNoiseReport
    | VehicleAttitudeReport
    | DevicesReport
    | PulsePerSecondReport
    | ErrorReport
)

REPORT_MODELS: dict[ReportKind, type[GpsdBaseModel]] = {
    ReportKind.TPV: TimePositionVelocityReport,
    ReportKind.VERSION: VersionReport,
    ReportKind.SKY: SkyViewReport,
    ReportKind.GST: PseudorangeNoiseReport,
    ReportKind.ATT: VehicleAttitudeReport,
    ReportKind.DEVICES: DevicesReport,
    ReportKind.PPS: PulsePerSecondReport,
    ReportKind.ERROR: ErrorReport,
}

__all__ = [
    "REPORT_MODELS",
    "Device",
    "DevicesReport",
    "ErrorReport",
    "FixMode",
    "GpsdBaseModel",
    "GpsdEnum",
    "PseudorangeNoiseReport",
    "PulsePerSecondReport",
    "Report",
    "ReportKind",
    "Satellite",
    "SkyViewReport",
    "TimePositionVelocityReport",
    "VehicleAttitudeReport",
    "VersionReport",
]

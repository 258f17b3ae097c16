"""pygpsd - Async Python client for the gpsd JSON telemetry stream."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pygpsd")
except PackageNotFoundError:
    __version__ = "0+local"
from pygpsd._channel import Channel
from pygpsd._constants import WATCH_COMMAND
from pygpsd.channels import ReportChannels
from pygpsd.client import GpsdClient
from pygpsd.config import GpsdConfig
from pygpsd.dispatch import ErrorHandler, ReportHandler, scan_loop
from pygpsd.exceptions import (
    ChannelClosedError,
    GpsdConfigError,
    GpsdDecodeError,
    GpsdError,
    GpsdReportError,
    GpsdTransportError,
)
from pygpsd.handler import Handler
from pygpsd.models import (
    Device,
    DevicesReport,
    ErrorReport,
    FixMode,
    PseudorangeNoiseReport,
    PulsePerSecondReport,
    Report,
    ReportKind,
    Satellite,
    SkyViewReport,
    TimePositionVelocityReport,
    VehicleAttitudeReport,
    VersionReport,
)

__all__ = [
    "__version__",
    "WATCH_COMMAND",
    "Channel",
    "ChannelClosedError",
    "Device",
    "DevicesReport",
    "ErrorHandler",
    "ErrorReport",
    "FixMode",
    "GpsdClient",
    "GpsdConfig",
    "GpsdConfigError",
    "GpsdDecodeError",
    "GpsdError",
    "GpsdReportError",
    "GpsdTransportError",
    "Handler",
    "PseudorangeNoiseReport",
    "PulsePerSecondReport",
    "Report",
    "ReportChannels",
    "ReportHandler",
    "ReportKind",
    "Satellite",
    "SkyViewReport",
    "TimePositionVelocityReport",
    "VehicleAttitudeReport",
    "VersionReport",
    "scan_loop",
]

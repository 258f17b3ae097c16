"""Callback-registration adapter implementing :class:`ReportHandler`."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pygpsd.models import (
    DevicesReport,
    ErrorReport,
    PseudorangeNoiseReport,
    PulsePerSecondReport,
    ReportKind,
    SkyViewReport,
    TimePositionVelocityReport,
    VehicleAttitudeReport,
    VersionReport,
)

_logger = logging.getLogger(__name__)


class Handler:
    """Chainable per-kind callbacks.

    Usage::

        handler = (
            Handler()
            .with_time_position_velocity(on_fix)
            .with_version(lambda rpt: print(rpt.release))
        )
        await scan_loop(channels, errors, handler, on_error)

    Reports of a kind without a registered callback are ignored.
    """

    def __init__(self) -> None:
        self._callbacks: dict[ReportKind, Callable[[Any], Any]] = {}

    def _register(self, kind: ReportKind, fn: Callable[[Any], Any]) -> Handler:
        self._callbacks[kind] = fn
        return self

    def _call(self, kind: ReportKind, report: Any) -> Any:
        fn = self._callbacks.get(kind)
        if fn is None:
            _logger.debug("No callback registered for %s reports", kind.report_class)
            return None
        return fn(report)

    def with_time_position_velocity(self, fn: Callable[[TimePositionVelocityReport], Any]) -> Handler:
        return self._register(ReportKind.TPV, fn)

    def with_version(self, fn: Callable[[VersionReport], Any]) -> Handler:
        return self._register(ReportKind.VERSION, fn)

    def with_sky_view(self, fn: Callable[[SkyViewReport], Any]) -> Handler:
        return self._register(ReportKind.SKY, fn)

    def with_pseudorange_noise(self, fn: Callable[[PseudorangeNoiseReport], Any]) -> Handler:
        return self._register(ReportKind.GST, fn)

    def with_vehicle_attitude(self, fn: Callable[[VehicleAttitudeReport], Any]) -> Handler:
        return self._register(ReportKind.ATT, fn)

    def with_devices(self, fn: Callable[[DevicesReport], Any]) -> Handler:
        return self._register(ReportKind.DEVICES, fn)

    def with_pulse_per_second(self, fn: Callable[[PulsePerSecondReport], Any]) -> Handler:
        return self._register(ReportKind.PPS, fn)

    def with_error(self, fn: Callable[[ErrorReport], Any]) -> Handler:
        return self._register(ReportKind.ERROR, fn)

    def time_position_velocity(self, report: TimePositionVelocityReport) -> Any:
        return self._call(ReportKind.TPV, report)

    def version(self, report: VersionReport) -> Any:
        return self._call(ReportKind.VERSION, report)

    def sky_view(self, report: SkyViewReport) -> Any:
        return self._call(ReportKind.SKY, report)

    def pseudorange_noise(self, report: PseudorangeNoiseReport) -> Any:
        return self._call(ReportKind.GST, report)

    def vehicle_attitude(self, report: VehicleAttitudeReport) -> Any:
        return self._call(ReportKind.ATT, report)

    def devices(self, report: DevicesReport) -> Any:
        return self._call(ReportKind.DEVICES, report)

    def pulse_per_second(self, report: PulsePerSecondReport) -> Any:
        return self._call(ReportKind.PPS, report)

    def error(self, report: ErrorReport) -> Any:
        return self._call(ReportKind.ERROR, report)

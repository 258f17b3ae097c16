"""Consumer side: drain every channel of a scan into callbacks.

:func:`scan_loop` waits on all open channels at once and forwards each
value to the handler method for its kind. Values from one channel are
handled in the order they were sent; the order between channels that
are ready at the same time is unspecified.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable
from typing import Any, Protocol

from pygpsd._channel import Channel
from pygpsd.channels import ReportChannels
from pygpsd.exceptions import ChannelClosedError, GpsdError
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

ErrorHandler = Callable[[GpsdError], Any]
"""Called with every error value. May return an awaitable."""


class ReportHandler(Protocol):
    """One method per report kind. Methods may be sync or ``async``.

    Only the methods for subscribed kinds are looked up.
    """

    def time_position_velocity(self, report: TimePositionVelocityReport) -> Any: ...

    def version(self, report: VersionReport) -> Any: ...

    def sky_view(self, report: SkyViewReport) -> Any: ...

    def pseudorange_noise(self, report: PseudorangeNoiseReport) -> Any: ...

    def vehicle_attitude(self, report: VehicleAttitudeReport) -> Any: ...

    def devices(self, report: DevicesReport) -> Any: ...

    def pulse_per_second(self, report: PulsePerSecondReport) -> Any: ...

    def error(self, report: ErrorReport) -> Any: ...


HANDLER_METHODS: dict[ReportKind, str] = {
    ReportKind.TPV: "time_position_velocity",
    ReportKind.VERSION: "version",
    ReportKind.SKY: "sky_view",
    ReportKind.GST: "pseudorange_noise",
    ReportKind.ATT: "vehicle_attitude",
    ReportKind.DEVICES: "devices",
    ReportKind.PPS: "pulse_per_second",
    ReportKind.ERROR: "error",
}


async def _invoke(callback: Callable[[Any], Any], value: Any) -> None:
    result = callback(value)
    if inspect.isawaitable(result):
        await result


async def scan_loop(
    channels: ReportChannels,
    errors: Channel[GpsdError],
    handler: ReportHandler,
    on_error: ErrorHandler,
) -> None:
    """Deliver every value of a scan until all channels are closed.

    A channel leaves the wait set once it is closed and drained; the loop
    returns when none are left. Callbacks run one at a time on the calling
    task, so a slow callback delays every kind.

    An exception raised by a callback propagates after the pending
    receives are cancelled. Values still buffered at that point stay in
    their channels, including any a finished receive already took but no
    callback handled.
    """
    callbacks: dict[Channel[Any], Callable[[Any], Any]] = {
        channel: getattr(handler, HANDLER_METHODS[kind]) for kind, channel in channels.items()
    }
    callbacks[errors] = on_error

    pending: dict[asyncio.Future[Any], Channel[Any]] = {
        asyncio.ensure_future(channel.receive()): channel for channel in callbacks
    }
    try:
        while pending:
            done, _ = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
            for future in done:
                channel = pending.pop(future)
                try:
                    value = future.result()
                except ChannelClosedError:
                    _logger.debug("Channel %s drained and closed", channel.name)
                    continue
                await _invoke(callbacks[channel], value)
                pending[asyncio.ensure_future(channel.receive())] = channel
    finally:
        for future in pending:
            future.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        for future, channel in pending.items():
            if not future.cancelled() and future.exception() is None:
                await channel.requeue(future.result())

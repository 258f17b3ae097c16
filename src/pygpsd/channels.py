"""The per-session set of report channels."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pygpsd._channel import Channel
from pygpsd._constants import DEFAULT_QUEUE_SIZE
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


class ReportChannels:
    """One bounded channel per subscribed report kind.

    A channel exists for a kind if and only if its bit is set in the mask
    the set was created with. Accessors return ``None`` for unsubscribed
    kinds.
    """

    def __init__(self, kinds: ReportKind, *, maxsize: int = DEFAULT_QUEUE_SIZE) -> None:
        self._kinds = kinds
        self._channels: dict[ReportKind, Channel[Any]] = {
            kind: Channel(maxsize, name=kind.report_class) for kind in kinds.single_kinds()
        }

    def __repr__(self) -> str:
        return f"<ReportChannels {self._kinds!r}>"

    def __contains__(self, kind: object) -> bool:
        return kind in self._channels

    def __len__(self) -> int:
        return len(self._channels)

    def __iter__(self) -> Iterator[ReportKind]:
        return iter(self._channels)

    @property
    def kinds(self) -> ReportKind:
        return self._kinds

    def get(self, kind: ReportKind) -> Channel[Any] | None:
        return self._channels.get(kind)

    def items(self) -> Iterator[tuple[ReportKind, Channel[Any]]]:
        return iter(self._channels.items())

    async def aclose(self) -> None:
        """Close every channel, lowest kind first."""
        for channel in self._channels.values():
            await channel.close()

    @property
    def time_position_velocity(self) -> Channel[TimePositionVelocityReport] | None:
        return self._channels.get(ReportKind.TPV)

    @property
    def version(self) -> Channel[VersionReport] | None:
        return self._channels.get(ReportKind.VERSION)

    @property
    def sky_view(self) -> Channel[SkyViewReport] | None:
        return self._channels.get(ReportKind.SKY)

    @property
    def pseudorange_noise(self) -> Channel[PseudorangeNoiseReport] | None:
        return self._channels.get(ReportKind.GST)

    @property
    def vehicle_attitude(self) -> Channel[VehicleAttitudeReport] | None:
        return self._channels.get(ReportKind.ATT)

    @property
    def devices(self) -> Channel[DevicesReport] | None:
        return self._channels.get(ReportKind.DEVICES)

    @property
    def pulse_per_second(self) -> Channel[PulsePerSecondReport] | None:
        return self._channels.get(ReportKind.PPS)

    @property
    def error(self) -> Channel[ErrorReport] | None:
        return self._channels.get(ReportKind.ERROR)

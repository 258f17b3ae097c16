"""Base model, enum, and subscription flags for gpsd reports.

Every report model inherits from :class:`GpsdBaseModel`, which is frozen
and ignores wire fields it does not declare. Newer daemons add fields to
existing classes regularly; ignoring them keeps older clients working.

:class:`ReportKind` is the subscription mask handed to
:meth:`pygpsd.GpsdClient.scan`. One bit per report class.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict


class GpsdEnum(enum.IntEnum):
    """Base for integer enums sent by gpsd.

    Every subclass **must** define ``UNKNOWN = -1``.
    Integers without a mapped member resolve to ``UNKNOWN`` instead of
    raising ``ValueError``. Non-integer values are still rejected.
    """

    @classmethod
    def _missing_(cls, value: object) -> GpsdEnum | None:
        if isinstance(value, int) and not isinstance(value, bool):
            unknown: GpsdEnum = cls.UNKNOWN  # type: ignore[attr-defined]
            return unknown
        return None


class GpsdBaseModel(BaseModel):
    """Base for gpsd report models.

    Validation is strict: a field whose JSON type does not match is an error,
    never coerced. Decode from raw bytes with ``model_validate_json`` so ISO
    8601 strings still parse into ``datetime``.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="ignore",
        populate_by_name=True,
    )


class ReportKind(enum.IntFlag):
    """Bitset selecting which report classes a scan delivers."""

    TPV = 1 << 0
    VERSION = 1 << 1
    SKY = 1 << 2
    GST = 1 << 3
    ATT = 1 << 4
    DEVICES = 1 << 5
    PPS = 1 << 6
    ERROR = 1 << 7

    ALL = TPV | VERSION | SKY | GST | ATT | DEVICES | PPS | ERROR

    @property
    def report_class(self) -> str:
        """Wire discriminant (``class`` value) of a single-bit kind."""
        if self.name is None or self not in _SINGLE_KINDS:
            raise ValueError(f"{self!r} is not a single report kind")
        return self.name

    @classmethod
    def from_class(cls, report_class: str) -> ReportKind | None:
        """Map a wire discriminant to its kind, or ``None`` when unknown."""
        member = cls.__members__.get(report_class)
        if member is None or member not in _SINGLE_KINDS:
            return None
        return member

    def single_kinds(self) -> tuple[ReportKind, ...]:
        """Split a mask into its single-bit kinds, lowest bit first."""
        return tuple(kind for kind in _SINGLE_KINDS if kind & self)


_SINGLE_KINDS: tuple[ReportKind, ...] = (
    ReportKind.TPV,
    ReportKind.VERSION,
    ReportKind.SKY,
    ReportKind.GST,
    ReportKind.ATT,
    ReportKind.DEVICES,
    ReportKind.PPS,
    ReportKind.ERROR,
)

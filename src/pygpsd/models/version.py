"""Daemon version (VERSION) report model."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from pygpsd.models._base import GpsdBaseModel


class VersionReport(GpsdBaseModel):
    """Sent by the daemon right after a client connects."""

    class_: Literal["VERSION"] = Field(default="VERSION", alias="class")
    release: str | None = None
    rev: str | None = None
    proto_major: int | None = None
    proto_minor: int | None = None
    remote: str | None = None

    @property
    def protocol(self) -> tuple[int, int] | None:
        """``(proto_major, proto_minor)`` when both are present."""
        if self.proto_major is None or self.proto_minor is None:
            return None
        return (self.proto_major, self.proto_minor)

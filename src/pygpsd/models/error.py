"""Protocol error (ERROR) report model."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from pygpsd.models._base import GpsdBaseModel


class ErrorReport(GpsdBaseModel):
    """Error reported by the daemon, usually for a malformed command."""

    class_: Literal["ERROR"] = Field(default="ERROR", alias="class")
    message: str | None = None

"""Envelope parsing and per-class routing of raw JSON values."""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from pygpsd._channel import Channel
from pygpsd.channels import ReportChannels
from pygpsd.exceptions import GpsdDecodeError, GpsdError, GpsdReportError
from pygpsd.models import REPORT_MODELS, GpsdBaseModel, ReportKind

_logger = logging.getLogger(__name__)

_PREVIEW = 64


def _preview(raw: bytes) -> str:
    return raw[:_PREVIEW].decode("utf-8", errors="replace")


def parse_envelope(raw: bytes) -> tuple[str, dict[str, Any]]:
    """Decode *raw* and extract its ``class`` discriminant.

    A missing ``class`` yields ``""`` so the value is ignored downstream,
    the same as any other unknown class.

    Raises
    ------
    GpsdDecodeError
        If *raw* is not a JSON object or ``class`` is not a string.
    """
    try:
        obj = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise GpsdDecodeError(f"Invalid JSON from gpsd: {_preview(raw)}", raw=raw) from exc

    if not isinstance(obj, dict):
        raise GpsdDecodeError(
            f"Expected a JSON object from gpsd, got {type(obj).__name__}: {_preview(raw)}",
            raw=raw,
        )

    report_class = obj.get("class", "")
    if not isinstance(report_class, str):
        raise GpsdDecodeError(
            f"Report class must be a string, got {type(report_class).__name__}",
            raw=raw,
        )
    return report_class, obj


def decode_report(kind: ReportKind, raw: bytes) -> GpsdBaseModel:
    """Validate the JSON value *raw* into the model registered for *kind*.

    Fields are checked against their JSON types without coercion, so a
    string where a number belongs is rejected.

    Raises
    ------
    GpsdReportError
        If the payload does not match the report's field layout.
    """
    model = REPORT_MODELS[kind]
    try:
        return model.model_validate_json(raw)
    except ValidationError as exc:
        raise GpsdReportError(
            f"Invalid {kind.report_class} report: {exc.error_count()} validation error(s)",
            report_class=kind.report_class,
            raw=raw,
        ) from exc


class ReportRouter:
    """Deliver decoded reports onto the channel subscribed for their class."""

    def __init__(self, channels: ReportChannels, errors: Channel[GpsdError]) -> None:
        self._channels = channels
        self._errors = errors

    async def route(self, raw: bytes) -> None:
        """Route one raw JSON value.

        Recoverable decode faults are sent to the error channel; values of
        unknown or unsubscribed classes are dropped silently. Waits while
        the target channel is full.
        """
        try:
            report_class, _ = parse_envelope(raw)
        except GpsdDecodeError as exc:
            _logger.debug("Dropping undecodable value: %s", exc)
            await self._errors.send(exc)
            return

        kind = ReportKind.from_class(report_class)
        if kind is None:
            _logger.debug("Ignoring report class %r", report_class)
            return

        channel = self._channels.get(kind)
        if channel is None:
            return

        try:
            report = decode_report(kind, raw)
        except GpsdReportError as exc:
            _logger.debug("Dropping invalid %s report: %s", report_class, exc.__cause__)
            await self._errors.send(exc)
            return

        await channel.send(report)

"""Custom exception hierarchy for pygpsd."""

from __future__ import annotations


class GpsdError(Exception):
    """Base exception for all pygpsd errors."""


class GpsdConfigError(GpsdError):
    """Invalid or missing configuration."""


class GpsdTransportError(GpsdError):
    """Byte stream failure (connect, read, write, truncated or oversized value).

    A transport error always ends the scanning session that observed it.
    """


class GpsdDecodeError(GpsdError):
    """A single JSON value could not be decoded into an envelope.

    The offending value is dropped; the session keeps running.
    """

    def __init__(self, message: str, *, raw: bytes = b"") -> None:
        self.raw = raw
        super().__init__(message)


class GpsdReportError(GpsdDecodeError):
    """A subscribed report failed structural validation."""

    def __init__(self, message: str, *, report_class: str, raw: bytes = b"") -> None:
        self.report_class = report_class
        super().__init__(message, raw=raw)


class ChannelClosedError(GpsdError):
    """Channel is closed (and drained, when receiving)."""

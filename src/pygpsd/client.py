"""High-level async client for the gpsd JSON stream."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from typing import Any

from pygpsd._channel import Channel
from pygpsd._constants import WATCH_COMMAND
from pygpsd._decoder import JsonStreamDecoder
from pygpsd._router import ReportRouter
from pygpsd._transport import ByteReader, ByteWriter, open_stream
from pygpsd.channels import ReportChannels
from pygpsd.config import GpsdConfig
from pygpsd.dispatch import ErrorHandler, ReportHandler, scan_loop
from pygpsd.exceptions import GpsdError, GpsdTransportError
from pygpsd.models import ReportKind

_logger = logging.getLogger(__name__)


class GpsdClient:
    """Async client for a gpsd byte stream.

    Usage::

        async with await GpsdClient.connect() as client:
            await client.watch()
            channels, errors = client.scan(ReportKind.TPV | ReportKind.VERSION)
            await scan_loop(channels, errors, handler, on_error)

    One scan runs at a time. Its watch loop reads the stream until
    :meth:`stop` is observed or the stream ends, then closes every channel
    it created. :meth:`stop` is checked between reads only; a read blocked
    on the stream is interrupted by closing the stream (:meth:`close`).
    """

    def __init__(
        self,
        reader: ByteReader,
        writer: ByteWriter,
        *,
        config: GpsdConfig | None = None,
    ) -> None:
        self._config = config or GpsdConfig()
        self._reader = reader
        self._writer = writer
        self._decoder = JsonStreamDecoder(
            reader,
            chunk_size=self._config.read_chunk_size,
            max_frame_size=self._config.max_frame_size,
        )
        self._stop_requested = threading.Event()
        self._task: asyncio.Task[None] | None = None
        self._session: tuple[ReportChannels, Channel[GpsdError]] | None = None

    @classmethod
    async def connect(cls, config: GpsdConfig | None = None) -> GpsdClient:
        """Open a TCP connection to the daemon and wrap it in a client."""
        config = config or GpsdConfig()
        reader, writer = await open_stream(config)
        return cls(reader, writer, config=config)

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> GpsdClient:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    @property
    def config(self) -> GpsdConfig:
        return self._config

    @property
    def is_scanning(self) -> bool:
        return self._task is not None and not self._task.done()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def watch(self) -> None:
        """Ask the daemon to stream JSON reports."""
        try:
            self._writer.write(WATCH_COMMAND)
            await self._writer.drain()
        except OSError as exc:
            raise GpsdTransportError(f"Sending WATCH to gpsd failed: {exc}") from exc
        _logger.debug("WATCH command sent")

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def scan(self, kinds: ReportKind) -> tuple[ReportChannels, Channel[GpsdError]]:
        """Start a watch loop delivering the report kinds in *kinds*.

        Must be called from a running event loop. Returns the report
        channels and the error channel; both are closed when the loop ends.

        Raises
        ------
        GpsdError
            If a previous scan is still running.
        """
        if self.is_scanning:
            raise GpsdError("A scan is already running on this client")

        channels = ReportChannels(kinds, maxsize=self._config.queue_size)
        errors: Channel[GpsdError] = Channel(self._config.queue_size, name="errors")
        self._stop_requested = threading.Event()
        self._session = (channels, errors)
        self._task = asyncio.create_task(
            self._watch_loop(channels, errors, self._stop_requested),
            name="gpsd-watch-loop",
        )
        return channels, errors

    def stop(self) -> None:
        """Request the running scan to stop. Safe from any thread."""
        self._stop_requested.set()

    async def wait_stopped(self) -> None:
        """Wait until the current watch loop has closed its channels."""
        task = self._task
        if task is not None:
            await asyncio.shield(task)

    async def run(
        self,
        kinds: ReportKind,
        handler: ReportHandler,
        on_error: ErrorHandler,
    ) -> None:
        """Scan for *kinds* and dispatch to *handler* until the scan ends."""
        channels, errors = self.scan(kinds)
        await scan_loop(channels, errors, handler, on_error)
        await self.wait_stopped()

    async def close(self) -> None:
        """Stop scanning and close the underlying stream."""
        self.stop()
        close = getattr(self._writer, "close", None)
        if close is not None:
            close()
            wait_closed = getattr(self._writer, "wait_closed", None)
            if wait_closed is not None:
                with contextlib.suppress(OSError):
                    await wait_closed()

        task = self._task
        if task is not None and not task.done():
            # The loop may be parked on a full channel nobody drains.
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

        # A loop cancelled before its first step never reached its cleanup.
        if self._session is not None:
            channels, errors = self._session
            for _, channel in channels.items():
                if not channel.closed:
                    await channel.close()
            if not errors.closed:
                await errors.close()

    async def _watch_loop(
        self,
        channels: ReportChannels,
        errors: Channel[GpsdError],
        stop_requested: threading.Event,
    ) -> None:
        router = ReportRouter(channels, errors)
        reason = "stop requested"
        _logger.debug("Scan started kinds=%r", channels.kinds)
        try:
            while not stop_requested.is_set():
                try:
                    frame = await self._decoder.read_frame()
                except GpsdTransportError as exc:
                    _logger.warning("gpsd stream fault: %s", exc)
                    reason = "stream fault"
                    await errors.send(exc)
                    break
                if frame is None:
                    reason = "end of stream"
                    break
                await router.route(frame)
        finally:
            stop_requested.set()
            await channels.aclose()
            await errors.close()
            _logger.debug("Scan finished reason=%s", reason)

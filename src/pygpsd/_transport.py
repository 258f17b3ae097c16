"""Byte stream interfaces and TCP connection helper."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from pygpsd.config import GpsdConfig
from pygpsd.exceptions import GpsdTransportError

_logger = logging.getLogger(__name__)


class ByteReader(Protocol):
    """Structural reader interface.

    ``asyncio.StreamReader`` satisfies it. ``read`` returns ``b""`` at end
    of stream.
    """

    async def read(self, n: int = -1) -> bytes:
        ...


class ByteWriter(Protocol):
    """Structural writer interface.

    ``asyncio.StreamWriter`` satisfies it. ``close`` and ``wait_closed`` are
    looked up lazily and may be absent on test doubles.
    """

    def write(self, data: bytes) -> None:
        ...

    async def drain(self) -> None:
        ...


async def open_stream(config: GpsdConfig) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
    """Open a TCP connection to the daemon described by *config*.

    Raises
    ------
    GpsdTransportError
        If the connection fails or does not complete within
        ``config.connect_timeout`` seconds.
    """
    _logger.debug("Connecting to gpsd at %s:%s", config.host, config.port)
    try:
        return await asyncio.wait_for(
            asyncio.open_connection(config.host, config.port),
            config.connect_timeout,
        )
    except TimeoutError as exc:
        raise GpsdTransportError(
            f"Timed out connecting to {config.host}:{config.port} after {config.connect_timeout}s"
        ) from exc
    except OSError as exc:
        raise GpsdTransportError(f"Connection to {config.host}:{config.port} failed: {exc}") from exc

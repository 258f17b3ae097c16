"""Incremental framing of back-to-back JSON values from a byte stream.

The daemon writes one JSON object after another, usually newline
separated, but nothing on the wire requires a delimiter. The decoder
tracks brace depth (ignoring braces inside strings) to cut the stream into
one complete value per frame. Frames are returned undecoded; parsing is the
router's job, so a syntactically broken object costs one frame, not the
whole stream.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from pygpsd._constants import DEFAULT_MAX_FRAME_SIZE, DEFAULT_READ_CHUNK_SIZE
from pygpsd._transport import ByteReader
from pygpsd.exceptions import GpsdTransportError

_logger = logging.getLogger(__name__)

_WHITESPACE = frozenset(b" \t\r\n")
_OPEN = frozenset(b"{[")
_CLOSE = frozenset(b"}]")
_QUOTE = ord('"')
_BACKSLASH = ord("\\")


class JsonStreamDecoder:
    """Pull successive raw JSON values off a :class:`ByteReader`.

    :meth:`read_frame` returns the bytes of the next complete value, or
    ``None`` once the stream ended cleanly. Read failures, a stream that
    ends in the middle of a value, and values larger than *max_frame_size*
    raise :class:`GpsdTransportError`.
    """

    def __init__(
        self,
        reader: ByteReader,
        *,
        chunk_size: int = DEFAULT_READ_CHUNK_SIZE,
        max_frame_size: int = DEFAULT_MAX_FRAME_SIZE,
    ) -> None:
        self._reader = reader
        self._chunk_size = chunk_size
        self._max_frame_size = max_frame_size
        self._buffer = bytearray()
        self._eof = False
        self._reset_scan()

    def _reset_scan(self) -> None:
        self._start: int | None = None
        self._pos = 0
        self._depth = 0
        self._scalar = False
        self._in_string = False
        self._escape = False

    @property
    def at_eof(self) -> bool:
        return self._eof

    async def read_frame(self) -> bytes | None:
        """Return the next raw JSON value, or ``None`` at end of stream.

        May block indefinitely waiting for bytes.
        """
        while True:
            frame = self._next_buffered_frame()
            if frame is not None:
                return frame
            if self._eof:
                return self._finish()
            if len(self._buffer) > self._max_frame_size:
                raise GpsdTransportError(
                    f"JSON value exceeds {self._max_frame_size} bytes without terminating"
                )
            try:
                chunk = await self._reader.read(self._chunk_size)
            except OSError as exc:
                raise GpsdTransportError(f"Read from gpsd failed: {exc}") from exc
            if not chunk:
                self._eof = True
                continue
            self._buffer += chunk

    def _finish(self) -> bytes | None:
        if self._start is None:
            self._buffer.clear()
            return None
        if self._scalar and not self._in_string:
            # A bare number or literal is only delimited by what follows it.
            frame = bytes(self._buffer[self._start :])
            self._buffer.clear()
            self._reset_scan()
            return frame
        pending = len(self._buffer) - self._start
        raise GpsdTransportError(f"Stream ended inside a JSON value ({pending} bytes pending)")

    def _next_buffered_frame(self) -> bytes | None:
        buf = self._buffer
        size = len(buf)
        pos = self._pos

        if self._start is None:
            while pos < size and buf[pos] in _WHITESPACE:
                pos += 1
            if pos == size:
                buf.clear()
                self._pos = 0
                return None
            self._start = pos
            self._scalar = buf[pos] not in _OPEN
            if buf[pos] == _QUOTE:
                self._in_string = True
                pos += 1

        if self._scalar:
            while pos < size:
                byte = buf[pos]
                if self._in_string:
                    pos += 1
                    if self._escape:
                        self._escape = False
                    elif byte == _BACKSLASH:
                        self._escape = True
                    elif byte == _QUOTE:
                        return self._cut(pos)
                    continue
                if byte in _WHITESPACE or (pos > self._start and byte in _OPEN):
                    return self._cut(pos)
                pos += 1
            self._pos = pos
            return None

        while pos < size:
            byte = buf[pos]
            pos += 1
            if self._in_string:
                if self._escape:
                    self._escape = False
                elif byte == _BACKSLASH:
                    self._escape = True
                elif byte == _QUOTE:
                    self._in_string = False
            elif byte == _QUOTE:
                self._in_string = True
            elif byte in _OPEN:
                self._depth += 1
            elif byte in _CLOSE:
                self._depth -= 1
                if self._depth == 0:
                    return self._cut(pos)
        self._pos = pos
        return None

    def _cut(self, end: int) -> bytes:
        assert self._start is not None
        frame = bytes(self._buffer[self._start : end])
        del self._buffer[:end]
        self._reset_scan()
        return frame

    def __aiter__(self) -> AsyncIterator[bytes]:
        return self._frames()

    async def _frames(self) -> AsyncIterator[bytes]:
        while True:
            frame = await self.read_frame()
            if frame is None:
                return
            yield frame

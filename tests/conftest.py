from __future__ import annotations

import asyncio
import json
from collections.abc import Iterable
from typing import Any

import pytest

VERSION_MSG = b'{"class":"VERSION","release":"3.17","rev":"3.17","proto_major":3,"proto_minor":12}'
DEVICES_MSG = (
    b'{"class":"DEVICES","devices":[{"class":"DEVICE","path":"/dev/gps0","driver":"SiRF",'
    b'"activated":"2020-03-03T21:54:51.357Z","flags":1,"native":1,"bps":4800,"parity":"N",'
    b'"stopbits":1,"cycle":1.00}]}'
)
WATCH_MSG = (
    b'{"class":"WATCH","enable":true,"json":true,"nmea":false,"raw":0,"scaled":false,'
    b'"timing":false,"split24":false,"pps":false}'
)
TPV_MSG = (
    b'{"class":"TPV","device":"/dev/gps0","status":2,"mode":3,"time":"2020-03-03T21:54:49.000Z",'
    b'"ept":0.005,"lat":40.7828687,"lon":-73.9675438,"alt":166.395,"epx":3.271,"epy":4.863,'
    b'"epv":14.780,"track":0.0000,"speed":0.000,"climb":0.000,"eps":0.19,"epc":0.58}'
)


def tpv(seq: int) -> bytes:
    """A minimal TPV message whose ``alt`` carries a sequence number."""
    return json.dumps({"class": "TPV", "device": "/dev/gps0", "mode": 2, "alt": float(seq)}).encode()


class FakeReader:
    """Reader double returning scripted chunks; exceptions in the script are raised."""

    def __init__(self, script: Iterable[bytes | BaseException]) -> None:
        self._script = list(script)
        self.reads = 0

    async def read(self, n: int = -1) -> bytes:
        self.reads += 1
        if not self._script:
            return b""
        item = self._script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


class FakeWriter:
    def __init__(self) -> None:
        self.data = bytearray()
        self.closed = False

    def write(self, data: bytes) -> None:
        if self.closed:
            raise ConnectionResetError("writer closed")
        self.data += data

    async def drain(self) -> None:
        await asyncio.sleep(0)

    def close(self) -> None:
        self.closed = True

    async def wait_closed(self) -> None:
        return None


def stream_reader(*messages: bytes, eof: bool = True) -> asyncio.StreamReader:
    """A real StreamReader pre-loaded with back-to-back *messages*."""
    reader = asyncio.StreamReader()
    reader.feed_data(b"".join(messages))
    if eof:
        reader.feed_eof()
    return reader


class Recorder:
    """Collects everything a scan delivers, keyed by handler method."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.errors: list[Exception] = []

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)

        def record(report: Any) -> None:
            self.calls.append((name, report))

        return record

    def on_error(self, err: Exception) -> None:
        self.errors.append(err)

    def reports(self, method: str) -> list[Any]:
        return [report for name, report in self.calls if name == method]


@pytest.fixture
def writer() -> FakeWriter:
    return FakeWriter()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()

"""Client configuration for pygpsd."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any

from pygpsd._constants import (
    DEFAULT_HOST,
    DEFAULT_MAX_FRAME_SIZE,
    DEFAULT_PORT,
    DEFAULT_QUEUE_SIZE,
    DEFAULT_READ_CHUNK_SIZE,
)
from pygpsd.exceptions import GpsdConfigError


def _env_number(env: Mapping[str, str], key: str, kind: type) -> Any:
    raw = env.get(key)
    if raw is None:
        return None
    try:
        return kind(raw.strip())
    except ValueError as exc:
        raise GpsdConfigError(f"{key} must be a {kind.__name__}, got {raw!r}") from exc


@dataclasses.dataclass(frozen=True)
class GpsdConfig:
    """Client configuration.

    Parameters
    ----------
    host : str
        Hostname of the gpsd daemon. Only used by :meth:`GpsdClient.connect`.
    port : int
        TCP port of the gpsd daemon.
    connect_timeout : float
        Seconds to wait for the TCP connection to be established.
    queue_size : int
        Capacity of every report and error channel. A full channel blocks
        the watch loop until the consumer catches up.
    read_chunk_size : int
        Maximum number of bytes requested from the stream per read.
    max_frame_size : int
        Upper bound for a single JSON value on the wire. Exceeding it is a
        stream fault.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    connect_timeout: float = 10.0
    queue_size: int = DEFAULT_QUEUE_SIZE
    read_chunk_size: int = DEFAULT_READ_CHUNK_SIZE
    max_frame_size: int = DEFAULT_MAX_FRAME_SIZE

    def __post_init__(self) -> None:
        for name in ("port", "queue_size", "read_chunk_size", "max_frame_size"):
            if getattr(self, name) <= 0:
                raise GpsdConfigError(f"{name} must be positive, got {getattr(self, name)}")
        if self.connect_timeout <= 0:
            raise GpsdConfigError(f"connect_timeout must be positive, got {self.connect_timeout}")

    @classmethod
    def from_env(cls, **overrides: Any) -> GpsdConfig:
        """Create configuration from environment variables.

        Reads ``GPSD_HOST``, ``GPSD_PORT``, ``GPSD_CONNECT_TIMEOUT``,
        ``GPSD_QUEUE_SIZE``, ``GPSD_READ_CHUNK_SIZE`` and
        ``GPSD_MAX_FRAME_SIZE``. Explicit keyword arguments override
        environment values.

        Raises
        ------
        GpsdConfigError
            If a numeric variable cannot be parsed or is not positive.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        host = env.get("GPSD_HOST")
        if host:
            config_kwargs["host"] = host.strip()

        _ENV_NUMERIC_MAP = {
            "GPSD_PORT": ("port", int),
            "GPSD_CONNECT_TIMEOUT": ("connect_timeout", float),
            "GPSD_QUEUE_SIZE": ("queue_size", int),
            "GPSD_READ_CHUNK_SIZE": ("read_chunk_size", int),
            "GPSD_MAX_FRAME_SIZE": ("max_frame_size", int),
        }
        for env_key, (field_name, kind) in _ENV_NUMERIC_MAP.items():
            if field_name in overrides:
                continue
            value = _env_number(env, env_key, kind)
            if value is not None:
                config_kwargs[field_name] = value

        config_kwargs.update(overrides)

        return cls(**config_kwargs)

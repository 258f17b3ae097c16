#!/usr/bin/env python3
"""Print gpsd reports as JSON lines.

Connects to a gpsd daemon (``GPSD_HOST``/``GPSD_PORT`` or ``--host``/
``--port``), enables JSON watch mode and prints every report of the
selected kinds until the stream ends, ``--count`` TPV reports were seen,
or Ctrl+C.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import signal
import sys
from pathlib import Path
from typing import Any

# Allow running from repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pygpsd import (  # noqa: E402
    GpsdClient,
    GpsdConfig,
    GpsdError,
    Handler,
    ReportKind,
    TimePositionVelocityReport,
)

_LOG = logging.getLogger("gpsd_watch")


def _parse_kinds(value: str) -> ReportKind:
    kinds = ReportKind(0)
    for name in value.split(","):
        name = name.strip().upper()
        if not name:
            continue
        if name == "ALL":
            return ReportKind.ALL
        kind = ReportKind.from_class(name)
        if kind is None:
            raise argparse.ArgumentTypeError(f"unknown report class: {name}")
        kinds |= kind
    return kinds


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Stream gpsd reports as JSON lines.",
    )
    parser.add_argument("--host", default=None, help="gpsd host (default: GPSD_HOST or localhost).")
    parser.add_argument("--port", type=int, default=None, help="gpsd port (default: GPSD_PORT or 2947).")
    parser.add_argument(
        "--kinds",
        type=_parse_kinds,
        default=ReportKind.ALL,
        help="Comma-separated report classes, e.g. TPV,SKY (default: ALL).",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=0,
        help="Stop after N TPV reports (0 = run until the stream ends).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logs.",
    )
    return parser.parse_args()


def _print_report(report: Any) -> None:
    print(report.model_dump_json(by_alias=True, exclude_none=True), flush=True)


async def _run(args: argparse.Namespace) -> int:
    overrides: dict[str, Any] = {}
    if args.host:
        overrides["host"] = args.host
    if args.port:
        overrides["port"] = args.port
    config = GpsdConfig.from_env(**overrides)

    client = await GpsdClient.connect(config)
    loop = asyncio.get_running_loop()
    for signum in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(signum, lambda: asyncio.ensure_future(client.close()))

    seen_tpv = 0

    def on_tpv(report: TimePositionVelocityReport) -> None:
        nonlocal seen_tpv
        _print_report(report)
        seen_tpv += 1
        if args.count and seen_tpv >= args.count:
            client.stop()

    failures = 0

    def on_error(err: GpsdError) -> None:
        nonlocal failures
        failures += 1
        print(f"[gpsd_watch] {type(err).__name__}: {err}", file=sys.stderr)

    handler = (
        Handler()
        .with_time_position_velocity(on_tpv)
        .with_version(_print_report)
        .with_sky_view(_print_report)
        .with_pseudorange_noise(_print_report)
        .with_vehicle_attitude(_print_report)
        .with_devices(_print_report)
        .with_pulse_per_second(_print_report)
        .with_error(_print_report)
    )

    async with client:
        await client.watch()
        await client.run(args.kinds, handler, on_error)

    _LOG.debug("Done tpv=%d errors=%d", seen_tpv, failures)
    return 1 if failures else 0


def _main() -> int:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return asyncio.run(_run(args))
    except GpsdError as exc:
        print(f"[gpsd_watch] {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(_main())

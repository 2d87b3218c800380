"""Stream and print decoded telemetry from a Nordic UART sensor.

Usage:
    uv run python examples/stream_samples.py AA:BB:CC:DD:EE:FF --duration 10
    uv run python examples/stream_samples.py AA:BB:CC:DD:EE:FF --hex
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import time
from datetime import datetime

from sensorstream import BLETimeoutError, SensorDevice, TransportError


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


def _read_timeout(deadline: float | None, now: float) -> float:
    """Per-read timeout that never waits past the deadline."""
    if deadline is None:
        return SensorDevice.TIMEOUT_READ
    return max(0.0, min(SensorDevice.TIMEOUT_READ, deadline - now))


async def stream(address: str, duration: float, show_hex: bool) -> None:
    """Start streaming, print samples, stop streaming."""
    count = 0
    async with SensorDevice(address) as device:
        print(f"[{_timestamp()}] Info: Connected to {address}")
        await device.start_stream()
        deadline = time.monotonic() + duration if duration > 0 else None
        try:
            while deadline is None or time.monotonic() < deadline:
                try:
                    samples = await device.read_samples(
                        timeout=_read_timeout(deadline, time.monotonic())
                    )
                except BLETimeoutError:
                    if deadline is not None and time.monotonic() >= deadline:
                        break
                    raise
                for sample in samples:
                    count += 1
                    print(f"[{_timestamp()}] Pkt: {sample.summary()}")
                    if show_hex:
                        print(f"           {sample.hex}")
        except TransportError as err:
            print(f"[{_timestamp()}] Error: {err}")
        finally:
            if device.is_connected:
                await device.stop_stream()

    print("\nSummary:")
    print(f"  samples={count}")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Stream 24-bit telemetry samples from a Nordic UART sensor."
    )
    parser.add_argument("address", help="Device MAC address")
    parser.add_argument(
        "--duration",
        type=float,
        default=30.0,
        help="Stream duration in seconds (0 = run until Ctrl+C). Default: 30",
    )
    parser.add_argument(
        "--hex",
        action="store_true",
        help="Also print each raw packet as hex.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    try:
        asyncio.run(stream(args.address, duration=args.duration, show_hex=args.hex))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()

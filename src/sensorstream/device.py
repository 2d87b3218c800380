"""Main sensor device class."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING

from .models.sample import SampleRecord
from .protocol import (
    PACKET_SIZE,
    DeviceCommand,
    StreamAssembler,
    decode_packet,
    encode_command,
)
from .transport import BLEConnection

if TYPE_CHECKING:
    from bleak.backends.device import BLEDevice

    from .transport import Transport

_LOGGER = logging.getLogger(__name__)


class SensorDevice:
    """Streaming telemetry sensor.

    Main API for reading samples from a sensor and sending it commands.

    Usage:
        async with SensorDevice("AA:BB:CC:DD:EE:FF") as device:
            await device.start_stream()
            async for sample in device.samples():
                print(sample.summary())

        # Push chunks from a transport you drive yourself
        device = SensorDevice(mac)
        for sample in device.feed(chunk):
            ...
    """

    TIMEOUT_READ = 5.0

    def __init__(
            self,
            mac_address: str,
            ble_device: BLEDevice | None = None,
            timeout: float = 10.0,
            max_attempts: int = 4,
            use_services_cache: bool = True,
            packet_size: int = PACKET_SIZE,
    ):
        """Initialize sensor device.

        Args:
            mac_address: Device MAC address
            ble_device: Optional BLEDevice from a prior scan
            timeout: BLE connection timeout in seconds (default: 10)
            max_attempts: Maximum connection attempts (default: 4)
            use_services_cache: Enable GATT service caching (default: True)
            packet_size: Telemetry packet length in bytes (default: PACKET_SIZE)
        """
        self.mac_address = mac_address
        self._connection: Transport = BLEConnection(
            mac_address,
            ble_device,
            timeout,
            max_attempts=max_attempts,
            use_services_cache=use_services_cache,
        )
        self._assembler = StreamAssembler(packet_size)
        self._write_lock = asyncio.Lock()
        self.samples_received = 0

    async def __aenter__(self) -> SensorDevice:
        """Connect to device."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Disconnect from device."""
        await self.disconnect()

    async def connect(self) -> None:
        """Connect the transport and start from an empty stream buffer.

        Calling this on a live connection keeps any partial packet.
        """
        was_connected = self._connection.is_connected
        await self._connection.connect()
        if not was_connected:
            self._assembler.reset()

    async def disconnect(self) -> None:
        """Disconnect the transport."""
        await self._connection.disconnect()

    @property
    def is_connected(self) -> bool:
        """Check if the transport is connected."""
        return self._connection.is_connected

    @property
    def assembler(self) -> StreamAssembler:
        """Get the stream assembler owned by this device."""
        return self._assembler

    def feed(self, chunk: bytes) -> list[SampleRecord]:
        """Decode every sample completed by one transport chunk.

        Must be called in delivery order from a single consumer.

        Args:
            chunk: Raw bytes as delivered by the transport

        Returns:
            Decoded samples in arrival order (may be empty)
        """
        samples = [decode_packet(packet) for packet in self._assembler.feed(chunk)]
        self.samples_received += len(samples)

        for sample in samples:
            _LOGGER.debug("Pkt %s", sample.summary())

        return samples

    async def read_samples(self, timeout: float | None = None) -> list[SampleRecord]:
        """Wait for the next transport chunk and decode it.

        Args:
            timeout: Read timeout in seconds (default: TIMEOUT_READ)

        Returns:
            Samples completed by the chunk (may be empty)

        Raises:
            TransportError: Propagated unchanged from the transport
        """
        chunk = await self._connection.read_chunk(
            timeout=self.TIMEOUT_READ if timeout is None else timeout
        )
        _LOGGER.debug(
            "Received %d bytes (%d pending)", len(chunk), self._assembler.pending
        )
        return self.feed(chunk)

    async def samples(self, timeout: float | None = None) -> AsyncIterator[SampleRecord]:
        """Iterate decoded samples until the transport raises.

        Args:
            timeout: Per-chunk read timeout in seconds (default: TIMEOUT_READ)

        Raises:
            TransportError: Propagated unchanged from the transport
        """
        while True:
            for sample in await self.read_samples(timeout):
                yield sample

    async def send_command(self, command: str | DeviceCommand) -> bytes:
        """Send a text command to the device.

        Args:
            command: Command text or DeviceCommand

        Returns:
            The bytes written

        Raises:
            TransportError: Propagated unchanged from the transport
        """
        data = encode_command(command)
        async with self._write_lock:
            await self._connection.write_command(data)

        _LOGGER.debug("Tx %r", data)
        return data

    async def start_stream(self) -> None:
        """Ask the device to start streaming telemetry."""
        await self.send_command(DeviceCommand.START_STREAM)
        _LOGGER.info("Started stream on %s", self.mac_address)

    async def stop_stream(self) -> None:
        """Ask the device to stop streaming telemetry."""
        await self.send_command(DeviceCommand.STOP_STREAM)
        _LOGGER.info("Stopped stream on %s", self.mac_address)

    async def query(self) -> None:
        """Ask the device to report its settings."""
        await self.send_command(DeviceCommand.QUERY)

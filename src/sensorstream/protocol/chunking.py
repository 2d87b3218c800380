"""Reassembly of fixed-size packets from a chunked byte stream."""

from __future__ import annotations

from .packet import PACKET_SIZE


class StreamAssembler:
    """Splits an arbitrarily chunked byte stream into fixed-size packets.

    BLE notifications arrive in bursts that are not aligned to packet
    boundaries. Bytes are buffered until a whole packet is available:
    - Chunk N: [...tail of packet k][packet k+1][head of packet k+2...]

    There is no sync byte or checksum in the stream. A dropped byte shifts
    every later packet boundary and is not detected here.

    One assembler belongs to one connection; it must be fed from a single
    consumer in delivery order.
    """

    def __init__(self, packet_size: int = PACKET_SIZE):
        """Initialize stream assembler.

        Args:
            packet_size: Fixed packet length in bytes (default: PACKET_SIZE)
        """
        if packet_size <= 0:
            raise ValueError(f"Packet size must be positive, got {packet_size}")

        self.packet_size = packet_size
        self._buffer = bytearray()
        self.bytes_received = 0
        self.packets_assembled = 0

    def feed(self, chunk: bytes) -> list[bytes]:
        """Add a chunk and collect every packet it completes.

        Args:
            chunk: Raw bytes from a BLE notification (any length, may be empty)

        Returns:
            Complete packets in arrival order (may be empty)
        """
        if not chunk:
            return []

        self._buffer.extend(chunk)
        self.bytes_received += len(chunk)

        # Walk an index over the buffer, then compact once
        start = 0
        packets = []
        while len(self._buffer) - start >= self.packet_size:
            end = start + self.packet_size
            packets.append(bytes(self._buffer[start:end]))
            start = end

        if start:
            del self._buffer[:start]
            self.packets_assembled += len(packets)

        return packets

    def reset(self) -> None:
        """Discard any partially received packet."""
        self._buffer.clear()

    @property
    def pending(self) -> int:
        """Get number of buffered bytes not yet part of a packet."""
        return len(self._buffer)

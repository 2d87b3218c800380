"""Telemetry packet layout and decoding."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

import numpy as np

from ..exceptions import FramingError
from ..models.sample import SampleRecord, format_hex

if TYPE_CHECKING:
    from collections.abc import Iterable

PACKET_SIZE: Final = 21
NUM_CHANNELS: Final = 3

HEADER_OFFSET: Final = 0
SAMPLE_INDEX_OFFSET: Final = 1
CHANNELS_OFFSET: Final = 2

# Each channel field is [status:1][value:3]; the status byte is not part of the reading
CHANNEL_FIELD_SIZE: Final = 4
CHANNEL_VALUE_OFFSET: Final = 1
CHANNEL_VALUE_SIZE: Final = 3

_SIGN_BIT_24: Final = 0x800000
_RANGE_24: Final = 1 << 24


def sign_extend_24(raw: int) -> int:
    """Interpret a 24-bit unsigned value as two's complement.

    Args:
        raw: Value in 0x000000-0xFFFFFF

    Returns:
        Signed value in -8388608..8388607
    """
    if raw & _SIGN_BIT_24:
        return raw - _RANGE_24
    return raw


def decode_packet(packet: bytes) -> SampleRecord:
    """Decode one complete telemetry packet.

    Format: [header:1][sample_index:1][channel:4] * NUM_CHANNELS
    - header: unused by decoding, kept on the record
    - channel: [status:1][value:3 big-endian, two's complement]

    Args:
        packet: Exactly PACKET_SIZE bytes

    Returns:
        Decoded SampleRecord

    Raises:
        FramingError: If packet is not exactly PACKET_SIZE bytes
    """
    packet = bytes(packet)
    if len(packet) != PACKET_SIZE:
        raise FramingError(
            f"Packet length {len(packet)} bytes (expected {PACKET_SIZE})"
        )

    channels = []
    status = []
    for i in range(NUM_CHANNELS):
        offset = CHANNELS_OFFSET + i * CHANNEL_FIELD_SIZE
        value_start = offset + CHANNEL_VALUE_OFFSET
        raw = int.from_bytes(
            packet[value_start:value_start + CHANNEL_VALUE_SIZE], "big"
        )
        channels.append(sign_extend_24(raw))
        status.append(packet[offset])

    return SampleRecord(
        sample_index=packet[SAMPLE_INDEX_OFFSET],
        channels=tuple(channels),
        status=tuple(status),
        header=packet[HEADER_OFFSET],
        raw=packet,
    )


def samples_to_array(samples: Iterable[SampleRecord]) -> np.ndarray:
    """Stack channel readings into an int32 array of shape (n, NUM_CHANNELS)."""
    rows = [sample.channels for sample in samples]
    if not rows:
        return np.empty((0, NUM_CHANNELS), dtype=np.int32)
    return np.asarray(rows, dtype=np.int32)

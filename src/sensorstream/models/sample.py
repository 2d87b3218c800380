"""Decoded telemetry sample."""

from __future__ import annotations

from dataclasses import dataclass


def format_hex(data: bytes) -> str:
    """Render bytes as space-separated lowercase hex pairs (e.g. "00 05 7f")."""
    return bytes(data).hex(" ")


@dataclass(frozen=True, slots=True)
class SampleRecord:
    """One decoded telemetry packet.

    Attributes:
        sample_index: Packet counter from byte 1 (0-255, wraps)
        channels: Signed 24-bit reading per channel
        status: First byte of each 4-byte channel field, not used by decoding
        header: Byte 0 of the packet, not used by decoding
        raw: The complete packet bytes
    """

    sample_index: int
    channels: tuple[int, ...]
    status: tuple[int, ...] = ()
    header: int = 0
    raw: bytes = b""

    @property
    def hex(self) -> str:
        """Raw packet as space-separated lowercase hex pairs."""
        return format_hex(self.raw)

    def summary(self) -> str:
        """One-line rendering, e.g. "#5 → Ch1:12 Ch2:-3 Ch3:0"."""
        values = " ".join(f"Ch{i}:{v}" for i, v in enumerate(self.channels, start=1))
        return f"#{self.sample_index} → {values}"

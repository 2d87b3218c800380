"""Outbound text commands and Nordic UART Service constants."""

from __future__ import annotations

from enum import Enum


class DeviceCommand(str, Enum):
    """Single-character commands understood by the sensor firmware."""

    START_STREAM = "b"   # Begin streaming telemetry packets
    STOP_STREAM = "s"    # Stop streaming
    QUERY = "?"          # Ask the device to report its settings


# Nordic UART Service
SERVICE_UUID = "6e400001-b5a3-f393-e0a9-e50e24dcca9e"
RX_CHAR_UUID = "6e400002-b5a3-f393-e0a9-e50e24dcca9e"  # Write (client to device)
TX_CHAR_UUID = "6e400003-b5a3-f393-e0a9-e50e24dcca9e"  # Notify (device to client)

COMMAND_TERMINATOR = b"\r"


def encode_command(text: str | DeviceCommand) -> bytes:
    """Build the outbound bytes for a text command.

    Args:
        text: Command text (may be empty) or a DeviceCommand

    Returns:
        Command bytes: UTF-8 text followed by a single 0x0D

    Format:
        [text:variable][0x0D]
        - no escaping, no length prefix
    """
    if isinstance(text, DeviceCommand):
        text = text.value
    return text.encode("utf-8") + COMMAND_TERMINATOR

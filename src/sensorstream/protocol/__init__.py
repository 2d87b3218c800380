"""Telemetry stream protocol implementation."""

from .chunking import StreamAssembler
from .commands import (
    COMMAND_TERMINATOR,
    RX_CHAR_UUID,
    SERVICE_UUID,
    TX_CHAR_UUID,
    DeviceCommand,
    encode_command,
)
from .packet import (
    CHANNEL_FIELD_SIZE,
    CHANNEL_VALUE_OFFSET,
    CHANNEL_VALUE_SIZE,
    NUM_CHANNELS,
    PACKET_SIZE,
    decode_packet,
    format_hex,
    samples_to_array,
    sign_extend_24,
)

__all__ = [
    "DeviceCommand",
    "SERVICE_UUID",
    "RX_CHAR_UUID",
    "TX_CHAR_UUID",
    "COMMAND_TERMINATOR",
    "PACKET_SIZE",
    "NUM_CHANNELS",
    "CHANNEL_FIELD_SIZE",
    "CHANNEL_VALUE_OFFSET",
    "CHANNEL_VALUE_SIZE",
    "encode_command",
    "StreamAssembler",
    "decode_packet",
    "format_hex",
    "sign_extend_24",
    "samples_to_array",
]

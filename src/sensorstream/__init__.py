"""Sensor telemetry stream decoding over BLE.

  Pure Python package for reading 24-bit multi-channel telemetry from
  Nordic UART Service sensors.
  """

from .device import SensorDevice
from .exceptions import (
    BLEConnectionError,
    BLETimeoutError,
    FramingError,
    ProtocolError,
    SensorStreamError,
    TransportError,
)
from .models.sample import SampleRecord
from .protocol import (
    NUM_CHANNELS,
    PACKET_SIZE,
    SERVICE_UUID,
    DeviceCommand,
    StreamAssembler,
    decode_packet,
    encode_command,
    format_hex,
    samples_to_array,
)
from .transport import BLEConnection, Transport

__version__ = "0.1.0"

__all__ = [
    # Main API
    "SensorDevice",
    "StreamAssembler",
    "decode_packet",
    "encode_command",
    # Exceptions
    "SensorStreamError",
    "ProtocolError",
    "FramingError",
    "TransportError",
    "BLEConnectionError",
    "BLETimeoutError",
    # Models
    "SampleRecord",
    "DeviceCommand",
    # Transport
    "Transport",
    "BLEConnection",
    # Utilities
    "format_hex",
    "samples_to_array",
    # Constants
    "PACKET_SIZE",
    "NUM_CHANNELS",
    "SERVICE_UUID",
]

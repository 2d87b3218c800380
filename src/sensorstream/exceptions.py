"""Exception hierarchy for sensorstream."""


class SensorStreamError(Exception):
    """Base exception for all sensorstream errors."""


class ProtocolError(SensorStreamError):
    """Telemetry protocol error."""


class FramingError(ProtocolError):
    """Packet handed to the decoder is not exactly one packet long."""


class TransportError(SensorStreamError):
    """Error raised by the transport carrying the byte stream."""


class BLEConnectionError(TransportError):
    """BLE connection, setup or write failed."""


class BLETimeoutError(TransportError):
    """BLE operation timed out."""

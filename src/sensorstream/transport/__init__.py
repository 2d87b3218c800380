"""Transport layer carrying the telemetry byte stream."""

from .base import Transport
from .connection import BLEConnection

__all__ = [
    "Transport",
    "BLEConnection",
]

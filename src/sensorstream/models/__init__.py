"""Data models for sensor telemetry."""

from .sample import SampleRecord

__all__ = [
    "SampleRecord",
]

"""Transport interface consumed by SensorDevice."""

from __future__ import annotations

from typing import Protocol


class Transport(Protocol):
    """Byte-stream transport to one sensor.

    Chunks come back from read_chunk() in delivery order, each exactly once.
    Failures surface as TransportError subclasses and are never retried by
    the caller.
    """

    @property
    def is_connected(self) -> bool: ...

    async def connect(self) -> None: ...

    async def disconnect(self) -> None: ...

    async def write_command(self, data: bytes) -> None: ...

    async def read_chunk(self, timeout: float) -> bytes: ...

"""
Raw unit of streamed response text delivered by a transport.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import time


@dataclass(frozen=True)
class Chunk:
    """One piece of a response body as it arrived from the network.

    Attributes:
        data: Decoded text of the chunk. May hold zero, one or many
            newline-delimited event records, and may cut a record in half.
        index: Zero-based delivery order within one response.
        timestamp: Wall-clock arrival time (``time.time()``).
    """

    data: str
    index: int = 0
    timestamp: float = field(default_factory=time.time)

    @property
    def size(self) -> int:
        return len(self.data)


__all__ = ["Chunk"]

"""Transport Protocol (single-class module).

Defines the chunk-callback fetch contract adapters use for outbound HTTP.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Protocol, runtime_checkable

from ..models import Chunk, FetchResponse

ChunkCallback = Callable[[Chunk], None]


@runtime_checkable
class Transport(Protocol):
    """Synchronous HTTP transport delivering the body incrementally.

    ``on_chunk`` is invoked zero or more times, in order, on the caller's
    stack before ``fetch`` returns. Error statuses are reported through the
    returned ``FetchResponse`` rather than raised.
    """

    def fetch(
        self,
        url: str,
        method: str,
        body: Optional[Mapping[str, Any]],
        headers: Mapping[str, str],
        on_chunk: Optional[ChunkCallback] = None,
    ) -> FetchResponse:
        ...

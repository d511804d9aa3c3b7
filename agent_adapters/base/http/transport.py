"""Chunk-callback HTTP transport built on ``httpx`` streaming.

``HttpTransport.fetch`` issues one request, forwards every decoded text chunk
of the response body to a callback as it arrives, and returns the final
status code together with the full body text. Callbacks run synchronously on
the caller's stack; an exception raised by the callback closes the stream and
propagates out of ``fetch``.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, List, Mapping, Optional

import httpx

from ..models import Chunk, FetchResponse
from .client import get_httpx_client


class HttpTransport:
    """Default :class:`~agent_adapters.base.interfaces.Transport` implementation.

    Parameters:
        client: Optional preconfigured ``httpx.Client``. When omitted, the
            pooled ``"stream"`` client is used.
    """

    def __init__(self, client: Optional[httpx.Client] = None) -> None:
        self._client = client

    @property
    def client(self) -> httpx.Client:
        return self._client or get_httpx_client(None, purpose="stream")

    def fetch(
        self,
        url: str,
        method: str,
        body: Optional[Mapping[str, Any]],
        headers: Mapping[str, str],
        on_chunk: Optional[Callable[[Chunk], None]] = None,
    ) -> FetchResponse:
        """Send a request and stream the response body through ``on_chunk``.

        Raises:
            httpx.HTTPError: On connection, protocol or timeout failures.
                HTTP error statuses are not raised; they are returned in the
                ``FetchResponse`` for the caller to inspect.
        """
        parts: List[str] = []
        request_headers: Dict[str, str] = dict(headers)
        with self.client.stream(method, url, json=body, headers=request_headers) as response:
            for index, text in enumerate(t for t in response.iter_text() if t):
                parts.append(text)
                if on_chunk is not None:
                    on_chunk(Chunk(data=text, index=index, timestamp=time.time()))
            status = response.status_code
        return FetchResponse(status_code=status, body="".join(parts))


__all__ = ["HttpTransport"]

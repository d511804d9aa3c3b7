"""HTTP utilities package for adapters.

Exposes pooled httpx clients and the chunk-callback transport.
"""

from .client import get_httpx_client, close_all_clients
from .transport import HttpTransport

__all__ = ["get_httpx_client", "close_all_clients", "HttpTransport"]

"""
Final outcome of a transport fetch.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FetchResponse:
    """Status code and full body text of a completed request."""

    status_code: int
    body: str = ""

    @property
    def ok(self) -> bool:
        return self.status_code < 400


__all__ = ["FetchResponse"]

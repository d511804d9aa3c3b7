"""
Pydantic DTO for the outbound Messages API request body.

The adapter builds the body through this model so the wire shape is declared
in one place and malformed history (missing role, non-string role) fails
before any I/O with a ``pydantic.ValidationError``. Numeric sampling fields
are intentionally unconstrained; the provider validates ranges.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class WireMessageDTO(BaseModel):
    """One ``{role, content}`` entry of the ``messages`` array."""

    role: str = Field(..., min_length=1)
    content: Any


class MessagesRequestDTO(BaseModel):
    """Streaming Messages API request body.

    ``system`` is dropped from the serialized payload when unset.
    """

    model: str = Field(..., min_length=1)
    system: Optional[str] = None
    messages: List[WireMessageDTO]
    max_tokens: int
    temperature: float
    stream: bool = True

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


__all__ = ["WireMessageDTO", "MessagesRequestDTO"]

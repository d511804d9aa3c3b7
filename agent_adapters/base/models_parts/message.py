"""
Message variants exchanged between a conversation and an adapter.

A `Message` is a discrete unit of content. Adapters construct `Text` from
streamed text deltas; `Image` is accepted in conversation history but no
adapter produces it from a stream yet.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional


@dataclass(frozen=True)
class Message:
    """Base class for conversation messages.

    Attributes:
        content: The message payload. For text this is the text itself; for
            images it is a URL or base64 string.
    """

    type: ClassVar[str] = "message"

    content: str

    def __str__(self) -> str:
        return self.content


@dataclass(frozen=True)
class Text(Message):
    """Plain text content."""

    type: ClassVar[str] = "text"


@dataclass(frozen=True)
class Image(Message):
    """Image content referenced by URL or carried as base64."""

    type: ClassVar[str] = "image"

    mime_type: Optional[str] = None


__all__ = ["Message", "Text", "Image"]

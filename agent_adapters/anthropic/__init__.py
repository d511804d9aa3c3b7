"""Anthropic Messages API adapter."""

from .client import AnthropicAdapter
from .stream_parser import EventKind, StreamingEventParser

__all__ = ["AnthropicAdapter", "StreamingEventParser", "EventKind"]

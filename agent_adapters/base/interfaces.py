"""Collaborator protocols public surface.

Re-exports the one-class-per-file Protocols under ``interfaces_parts``.
"""

from .interfaces_parts.conversation_sink import ConversationSink, MessageListener
from .interfaces_parts.transport import ChunkCallback, Transport

__all__ = ["ConversationSink", "MessageListener", "Transport", "ChunkCallback"]

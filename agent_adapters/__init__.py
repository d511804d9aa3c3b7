"""agent_adapters: streaming chat adapters for conversational agents.

Public surface re-exports the pieces most callers need: the Anthropic
adapter, the conversation collaborators, message types, and the error type.
"""

from .anthropic import AnthropicAdapter, StreamingEventParser
from .base.conversation import Agent, Conversation
from .base.errors import ErrorCode, ProviderError
from .base.models import Assistant, Image, Message, Text, User

__all__ = [
    "AnthropicAdapter",
    "StreamingEventParser",
    "Agent",
    "Conversation",
    "ErrorCode",
    "ProviderError",
    "Assistant",
    "Image",
    "Message",
    "Text",
    "User",
]

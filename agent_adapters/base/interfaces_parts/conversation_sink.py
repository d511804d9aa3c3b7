"""ConversationSink Protocol (single-class module).

The slice of a conversation an adapter touches: reading history for request
assembly, and appending output and usage while a response streams in.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Protocol, runtime_checkable

from ..models import Message, Role

MessageListener = Callable[[Message], None]


@runtime_checkable
class ConversationSink(Protocol):
    """Minimal conversation contract consumed by adapters and parsers.

    Mutations are append-only: messages are only ever added and token
    counters only ever grow.
    """

    def get_messages(self) -> List[Dict[str, Any]]:
        """Ordered ``{"role", "content"}`` mappings for request assembly."""
        ...

    def get_listener(self) -> Optional[MessageListener]:
        """Optional callback invoked once per produced message."""
        ...

    def count_input_tokens(self, tokens: int) -> Any:
        ...

    def count_output_tokens(self, tokens: int) -> Any:
        ...

    def message(self, role: Role, message: Message) -> Any:
        """Append ``message`` to history attributed to ``role``."""
        ...

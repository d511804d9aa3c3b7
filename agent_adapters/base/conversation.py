"""Agent and Conversation collaborators.

`Conversation` is the in-memory implementation of
:class:`~agent_adapters.base.interfaces.ConversationSink`: it keeps the
ordered message history, the optional per-message listener and running token
counters. `Agent` pairs an adapter with the persona description used as the
system prompt.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from .adapter import Adapter
from .interfaces import MessageListener
from .models import Message, Role


class Agent:
    """A persona bound to one adapter.

    Parameters:
        adapter: Provider adapter that will serve this agent's conversations.
            The adapter is bound back to the agent on construction.
        description: Persona/system description sent with each request.
    """

    def __init__(self, adapter: Adapter, description: str = "") -> None:
        self._adapter = adapter
        self._description = description
        adapter.set_agent(self)

    @property
    def adapter(self) -> Adapter:
        return self._adapter

    @property
    def description(self) -> str:
        return self._description

    def get_description(self) -> str:
        return self._description

    def set_description(self, description: str) -> "Agent":
        self._description = description
        return self


class Conversation:
    """Ordered message history with usage accounting.

    History is append-only and the token counters only grow; nothing is
    rolled back when a send fails part-way through a stream.
    """

    def __init__(self, agent: Agent, listener: Optional[MessageListener] = None) -> None:
        self._agent = agent
        self._listener = listener
        self._entries: List[Tuple[Role, Message]] = []
        self._input_tokens = 0
        self._output_tokens = 0

    @property
    def agent(self) -> Agent:
        return self._agent

    def message(self, role: Role, message: Message) -> "Conversation":
        """Append ``message`` authored by ``role``."""
        self._entries.append((role, message))
        return self

    def get_entries(self) -> List[Tuple[Role, Message]]:
        return list(self._entries)

    def get_messages(self) -> List[Dict[str, Any]]:
        """Return history flattened to ``{"role", "content"}`` mappings."""
        return [{"role": role.name, "content": msg.content} for role, msg in self._entries]

    def listen(self, listener: Optional[MessageListener]) -> "Conversation":
        self._listener = listener
        return self

    def get_listener(self) -> Optional[MessageListener]:
        return self._listener

    def count_input_tokens(self, tokens: int) -> "Conversation":
        self._input_tokens += _non_negative(tokens)
        return self

    def count_output_tokens(self, tokens: int) -> "Conversation":
        self._output_tokens += _non_negative(tokens)
        return self

    @property
    def input_tokens(self) -> int:
        return self._input_tokens

    @property
    def output_tokens(self) -> int:
        return self._output_tokens

    @property
    def total_tokens(self) -> int:
        return self._input_tokens + self._output_tokens

    def send(self) -> List[Message]:
        """Send the conversation through the agent's adapter."""
        return self._agent.adapter.send(self)


def _non_negative(tokens: int) -> int:
    value = int(tokens)
    if value < 0:
        raise ValueError(f"token count must be non-negative, got {value}")
    return value


__all__ = ["Agent", "Conversation"]

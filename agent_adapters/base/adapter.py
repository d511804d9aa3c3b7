"""Adapter base class shared by provider integrations.

An adapter owns the provider-specific request/response translation. It is
bound to exactly one :class:`~agent_adapters.base.conversation.Agent`, whose
description becomes the system prompt, and enforces a fixed model allow-list.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, Sequence

from .errors import ErrorCode, ProviderError
from .interfaces import ConversationSink
from .models import Message

if TYPE_CHECKING:
    from .conversation import Agent


class Adapter(ABC):
    """Abstract provider adapter.

    Subclasses declare ``provider_name`` and ``get_models()`` and implement
    ``send``. Model selection is validated eagerly: an unlisted model fails in
    ``set_model`` rather than at request time.
    """

    _agent: Optional["Agent"] = None
    _model: str

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"anthropic"``."""

    @abstractmethod
    def get_models(self) -> Sequence[str]:
        """Return the models this adapter accepts."""

    @abstractmethod
    def send(self, conversation: ConversationSink) -> List[Message]:
        """Send the conversation and return the messages produced in reply."""

    def get_agent(self) -> Optional["Agent"]:
        return self._agent

    def set_agent(self, agent: "Agent") -> "Adapter":
        self._agent = agent
        return self

    def get_model(self) -> str:
        return self._model

    @property
    def model(self) -> str:
        return self._model

    def set_model(self, model: str) -> "Adapter":
        """Select ``model`` for subsequent requests.

        Raises:
            ProviderError: ``UNSUPPORTED`` when ``model`` is not in
                ``get_models()``. The current model is left unchanged.
        """
        if model not in self.get_models():
            raise ProviderError(
                code=ErrorCode.UNSUPPORTED,
                message=f"Unsupported model: {model}",
                provider=self.provider_name,
                model=model,
            )
        self._model = model
        return self


__all__ = ["Adapter"]

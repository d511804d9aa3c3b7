"""Test doubles and record builders shared by the adapter tests."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from agent_adapters.base.models import Chunk, FetchResponse, Message, Role


class StubConversation:
    """Records every call the parser makes on a conversation."""

    def __init__(self, history: Optional[List[Dict[str, Any]]] = None, listener=None) -> None:
        self.history = list(history or [])
        self.listener = listener
        self.recorded: List[tuple] = []
        self.input_tokens = 0
        self.output_tokens = 0

    def get_messages(self) -> List[Dict[str, Any]]:
        return list(self.history)

    def get_listener(self):
        return self.listener

    def count_input_tokens(self, tokens: int) -> None:
        self.input_tokens += tokens

    def count_output_tokens(self, tokens: int) -> None:
        self.output_tokens += tokens

    def message(self, role: Role, message: Message) -> None:
        self.recorded.append((role, message))


@dataclass
class FakeTransport:
    """Transport double replaying scripted chunks then a final status."""

    chunks: Sequence[str] = ()
    status_code: int = 200
    body: Optional[str] = None
    calls: List[Dict[str, Any]] = field(default_factory=list)

    def fetch(self, url, method, body, headers, on_chunk=None) -> FetchResponse:
        self.calls.append({"url": url, "method": method, "body": body, "headers": dict(headers)})
        for index, text in enumerate(self.chunks):
            if on_chunk is not None:
                on_chunk(Chunk(data=text, index=index))
        return FetchResponse(
            status_code=self.status_code,
            body=self.body if self.body is not None else "".join(self.chunks),
        )


def sse(payload: Dict[str, Any]) -> str:
    """Render one event record line (with trailing newline)."""
    return "data: " + json.dumps(payload) + "\n"


def text_delta(text: str, index: int = 0) -> str:
    return sse({"type": "content_block_delta", "index": index, "delta": {"type": "text_delta", "text": text}})

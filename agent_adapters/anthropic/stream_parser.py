"""Anthropic server-sent event parser.

Turns the raw text of streamed response chunks into message objects and
token-usage updates on a conversation.

Each chunk is split on ``"\n"`` and every line is handled on its own: only
lines starting with ``"data: "`` are considered, and their payload must decode
to a JSON object carrying a ``type`` discriminator. Records cut in two by a
chunk boundary decode as two malformed fragments and are dropped; they are
not buffered across calls.

Dispatch per event kind:

* ``message_start`` / ``message_delta``: usage is added to the conversation
  counters.
* ``content_block_delta``: the delta kind selects a message factory
  (``text_delta`` -> ``Text``). Kinds without a factory produce nothing.
* ``content_block_start`` / ``content_block_stop`` / ``message_stop``: no-op.
* ``error``: raises :class:`ProviderError`.
* anything else: ignored.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from ..base.errors import RETRYABLE_CODES, ProviderError
from ..base.interfaces import ConversationSink, MessageListener
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import Assistant, Chunk, Message, Text
from .helpers import error_code_for_type

DATA_PREFIX = "data: "
UNKNOWN_ERROR = "Unknown error"


class EventKind(str, Enum):
    """Event ``type`` discriminators emitted by the Messages stream."""

    MESSAGE_START = "message_start"
    CONTENT_BLOCK_START = "content_block_start"
    CONTENT_BLOCK_DELTA = "content_block_delta"
    CONTENT_BLOCK_STOP = "content_block_stop"
    MESSAGE_DELTA = "message_delta"
    MESSAGE_STOP = "message_stop"
    ERROR = "error"

    @classmethod
    def parse(cls, value: Any) -> Optional["EventKind"]:
        try:
            return cls(value)
        except ValueError:
            return None


_STRUCTURAL_KINDS = frozenset(
    {EventKind.CONTENT_BLOCK_START, EventKind.CONTENT_BLOCK_STOP, EventKind.MESSAGE_STOP}
)


def _text_from_delta(delta: Mapping[str, Any]) -> Optional[Message]:
    text = delta.get("text")
    return Text(text) if isinstance(text, str) else None


# Delta kind -> message factory. Image deltas are not emitted yet.
DELTA_FACTORIES: Dict[str, Callable[[Mapping[str, Any]], Optional[Message]]] = {
    "text_delta": _text_from_delta,
}


def decode_record(line: str) -> Optional[Dict[str, Any]]:
    """Decode one ``data: <json>`` line into a payload mapping.

    Returns ``None`` for blank lines, lines without the marker, undecodable
    JSON, and payloads that are empty or not JSON objects.
    """
    if not line.strip() or not line.startswith(DATA_PREFIX):
        return None
    try:
        payload = json.loads(line[len(DATA_PREFIX):])
    except ValueError:
        return None
    if not payload or not isinstance(payload, dict):
        return None
    return payload


class StreamingEventParser:
    """Per-chunk event parser bound to one provider identity.

    Parameters:
        provider_name: Identifier used for the ``Assistant`` role attached to
            produced messages and for error attribution.
        model: Optional model name, used only for error and log context.
        logger: Optional logger; defaults to ``adapters.<provider_name>``.
    """

    def __init__(
        self,
        provider_name: str = "anthropic",
        model: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.provider_name = provider_name
        self.model = model
        self._logger = logger or get_logger(f"adapters.{provider_name}")

    def process(
        self,
        chunk: Union[Chunk, str],
        conversation: ConversationSink,
        listener: Optional[MessageListener] = None,
    ) -> List[Message]:
        """Parse one chunk and apply its events to ``conversation``.

        Returns the messages produced by this chunk, in arrival order. The
        listener, if given, is called synchronously once per message right
        after the message is recorded on the conversation.

        Raises:
            ProviderError: When the chunk carries an ``error`` event. Lines
                after the error are not processed; earlier effects on the
                conversation are kept.
        """
        data = chunk.data if isinstance(chunk, Chunk) else chunk
        messages: List[Message] = []
        for line in data.split("\n"):
            payload = decode_record(line)
            if payload is None:
                if line.startswith(DATA_PREFIX):
                    log_event(
                        self._logger,
                        "stream.decode_error",
                        LogContext(provider=self.provider_name, model=self.model),
                        level=logging.DEBUG,
                        code="DECODE",
                        size=len(line),
                    )
                continue
            kind = EventKind.parse(payload.get("type"))
            if kind is EventKind.MESSAGE_START:
                self._count_usage(conversation, payload, allow_top_level=False)
            elif kind is EventKind.MESSAGE_DELTA:
                self._count_usage(conversation, payload, allow_top_level=True)
            elif kind is EventKind.CONTENT_BLOCK_DELTA:
                message = self._message_from_delta(payload)
                if message is not None:
                    conversation.message(Assistant(self.provider_name), message)
                    messages.append(message)
                    if listener is not None:
                        listener(message)
            elif kind is EventKind.ERROR:
                raise self._error_from_payload(payload)
            elif kind in _STRUCTURAL_KINDS:
                continue
            else:
                # unknown kinds (e.g. "ping") are ignored
                continue
        return messages

    def _count_usage(
        self, conversation: ConversationSink, payload: Mapping[str, Any], *, allow_top_level: bool
    ) -> None:
        message = payload.get("message")
        usage = message.get("usage") if isinstance(message, dict) else None
        if usage is None and allow_top_level:
            usage = payload.get("usage")
        if not isinstance(usage, dict):
            return
        conversation.count_input_tokens(self._token_count(usage, "input_tokens"))
        conversation.count_output_tokens(self._token_count(usage, "output_tokens"))

    def _token_count(self, usage: Mapping[str, Any], key: str) -> int:
        """Return a usage field as a non-negative int, or 0 when absent or invalid."""
        value = usage.get(key)
        if value is None:
            return 0
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            return value
        log_event(
            self._logger,
            "stream.decode_error",
            LogContext(provider=self.provider_name, model=self.model),
            level=logging.DEBUG,
            code="USAGE",
            field=key,
            value=repr(value),
        )
        return 0

    def _message_from_delta(self, payload: Mapping[str, Any]) -> Optional[Message]:
        delta = payload.get("delta")
        if not isinstance(delta, dict):
            return None
        delta_type = delta.get("type")
        if not isinstance(delta_type, str):
            return None
        factory = DELTA_FACTORIES.get(delta_type)
        return factory(delta) if factory is not None else None

    def _error_from_payload(self, payload: Mapping[str, Any]) -> ProviderError:
        error = payload.get("error")
        error = error if isinstance(error, dict) else {}
        code = error_code_for_type(error.get("type"))
        return ProviderError(
            code=code,
            message=f"Anthropic API error: {error.get('message') or UNKNOWN_ERROR}",
            provider=self.provider_name,
            model=self.model,
            retryable=code in RETRYABLE_CODES,
        )


__all__ = ["EventKind", "StreamingEventParser", "DELTA_FACTORIES", "decode_record"]

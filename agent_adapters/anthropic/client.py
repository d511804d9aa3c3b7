"""AnthropicAdapter: streaming Messages API integration.

The adapter assembles one streaming request per ``send`` call, hands every
response chunk to :class:`StreamingEventParser` as it arrives, and returns the
messages collected across the whole stream.

Key behaviors:
* Model selection is restricted to ``MODELS``; unlisted models fail on
  construction or in ``set_model``.
* Provider ``error`` events raised by the parser abort the send unchanged.
* A final HTTP status >= 400 fails with the status and raw body, whatever was
  collected before.
* Conversation mutations made before a failure are kept.
* No retries; ``ProviderError.retryable`` is a hint for callers.
"""

from __future__ import annotations

import time
from typing import List, Optional, Sequence

import httpx
from pydantic import ValidationError

from ..base.adapter import Adapter
from ..base.constants import MISSING_API_KEY_ERROR
from ..base.errors import (
    RETRYABLE_CODES,
    ErrorCode,
    ProviderError,
    classify_exception,
    error_code_for_status,
)
from ..base.http import HttpTransport
from ..base.interfaces import ConversationSink, Transport
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import Chunk, Message
from ..config import get_provider_config
from ..config.defaults import (
    ANTHROPIC_API_VERSION,
    ANTHROPIC_DEFAULT_BASE_URL,
    ANTHROPIC_DEFAULT_MAX_TOKENS,
    ANTHROPIC_DEFAULT_MODEL,
    ANTHROPIC_DEFAULT_TEMPERATURE,
)
from .helpers import build_headers, build_payload
from .stream_parser import StreamingEventParser


class AnthropicAdapter(Adapter):
    """Adapter for the Anthropic Messages API with streamed responses.

    Parameters:
        api_key: Explicit API key; falls back to provider config
            (``ANTHROPIC_API_KEY``).
        model: Model identifier from ``MODELS``; falls back to config, then
            ``MODEL_CLAUDE_3_SONNET``.
        max_tokens: Completion token cap; falls back to config, then 1024.
        temperature: Sampling temperature; falls back to config, then 1.0.
        transport: Object implementing the ``Transport`` protocol; defaults
            to :class:`HttpTransport` over the pooled ``httpx`` client.
        base_url: Endpoint URL override.

    Raises:
        ProviderError: ``UNSUPPORTED`` if the resolved model is not listed.
    """

    MODEL_CLAUDE_3_OPUS = "claude-3-opus-20240229"
    MODEL_CLAUDE_3_SONNET = ANTHROPIC_DEFAULT_MODEL
    MODEL_CLAUDE_3_HAIKU = "claude-3-haiku-20240229"
    MODEL_CLAUDE_2_1 = "claude-2.1"

    MODELS = (
        MODEL_CLAUDE_3_OPUS,
        MODEL_CLAUDE_3_SONNET,
        MODEL_CLAUDE_3_HAIKU,
        MODEL_CLAUDE_2_1,
    )

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        transport: Optional[Transport] = None,
        base_url: Optional[str] = None,
    ) -> None:
        cfg = get_provider_config("anthropic")
        self._api_key = api_key or cfg.get("api_key")
        self._base_url = base_url or cfg.get("base_url") or ANTHROPIC_DEFAULT_BASE_URL
        self._api_version = cfg.get("api_version") or ANTHROPIC_API_VERSION
        self._transport: Transport = transport or HttpTransport()
        self._logger = get_logger("adapters.anthropic")
        # config values may arrive as env strings
        self._max_tokens = (
            max_tokens if max_tokens is not None else int(cfg.get("max_tokens", ANTHROPIC_DEFAULT_MAX_TOKENS))
        )
        self._temperature = (
            temperature if temperature is not None else float(cfg.get("temperature", ANTHROPIC_DEFAULT_TEMPERATURE))
        )
        self.set_model(model or cfg.get("model") or self.MODEL_CLAUDE_3_SONNET)

    @property
    def provider_name(self) -> str:
        return "anthropic"

    def get_models(self) -> Sequence[str]:
        return list(self.MODELS)

    # ---- Configuration surface ----
    @property
    def max_tokens(self) -> int:
        return self._max_tokens

    @property
    def temperature(self) -> float:
        return self._temperature

    @property
    def base_url(self) -> str:
        return self._base_url

    def set_max_tokens(self, max_tokens: int) -> "AnthropicAdapter":
        self._max_tokens = max_tokens
        return self

    def set_temperature(self, temperature: float) -> "AnthropicAdapter":
        self._temperature = temperature
        return self

    # ---- Request driver ----
    def send(self, conversation: ConversationSink) -> List[Message]:
        """Stream a completion for ``conversation`` and return its messages.

        Each chunk is parsed as soon as it arrives: produced messages are
        appended to the conversation under ``Assistant("anthropic")``, passed
        to the conversation's listener, and collected for the return value.

        Raises:
            ProviderError: On a missing API key (``AUTH``), a request body that
                fails validation (``VALIDATION``), a provider
                ``error`` event in the stream, a transport failure, or a final
                HTTP status >= 400 (``status_code`` and ``body`` set).
        """
        model = self._model
        ctx = LogContext(provider=self.provider_name, model=model)
        if not self._api_key:
            normalized_log_event(
                self._logger, "stream.error", ctx, phase="start", error=MISSING_API_KEY_ERROR,
                error_code=ErrorCode.AUTH.value,
            )
            raise ProviderError(
                code=ErrorCode.AUTH,
                message=MISSING_API_KEY_ERROR,
                provider=self.provider_name,
                model=model,
            )

        agent = self.get_agent()
        try:
            payload = build_payload(
                conversation,
                model=model,
                system=agent.description if agent is not None else None,
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
        except ValidationError as e:
            err = ProviderError(
                code=ErrorCode.VALIDATION,
                message=f"Invalid request: {e.error_count()} validation error(s)",
                provider=self.provider_name,
                model=model,
                raw=e,
            )
            self._log_failure(ctx, err, emitted=0)
            raise err from e
        headers = build_headers(self._api_key, self._api_version)
        parser = StreamingEventParser(self.provider_name, model=model, logger=self._logger)
        listener = conversation.get_listener()
        collected: List[Message] = []

        def _on_chunk(chunk: Chunk) -> None:
            collected.extend(parser.process(chunk, conversation, listener))

        normalized_log_event(
            self._logger,
            "stream.start",
            ctx,
            phase="start",
            max_tokens=self._max_tokens,
            temperature=self._temperature,
            history=len(payload["messages"]),
        )
        t0 = time.perf_counter()
        try:
            response = self._transport.fetch(self._base_url, "POST", payload, headers, _on_chunk)
        except ProviderError as e:
            self._log_failure(ctx, e, emitted=len(collected))
            raise
        except httpx.HTTPError as e:
            code = classify_exception(e)
            err = ProviderError(
                code=code,
                message=str(e) or type(e).__name__,
                provider=self.provider_name,
                model=model,
                retryable=code in RETRYABLE_CODES,
                raw=e,
            )
            self._log_failure(ctx, err, emitted=len(collected))
            raise err from e

        if response.status_code >= 400:
            code = error_code_for_status(response.status_code)
            err = ProviderError(
                code=code,
                message=f"Anthropic API error ({response.status_code}): {response.body}",
                provider=self.provider_name,
                model=model,
                retryable=code in RETRYABLE_CODES,
                status_code=response.status_code,
                body=response.body,
            )
            self._log_failure(ctx, err, emitted=len(collected))
            raise err

        normalized_log_event(
            self._logger,
            "stream.end",
            ctx,
            phase="finalize",
            emitted=len(collected),
            status_code=response.status_code,
            metrics={"total_duration_ms": (time.perf_counter() - t0) * 1000.0},
        )
        return collected

    def _log_failure(self, ctx: LogContext, err: ProviderError, *, emitted: int) -> None:
        normalized_log_event(
            self._logger,
            "stream.error",
            ctx,
            phase="finalize",
            emitted=emitted,
            error=err.message,
            error_code=err.code.value,
            status_code=err.status_code,
        )


__all__ = ["AnthropicAdapter"]

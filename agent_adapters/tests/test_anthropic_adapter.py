"""Request driver and configuration tests for ``AnthropicAdapter``."""
from __future__ import annotations

import httpx
import pytest

from agent_adapters.anthropic import AnthropicAdapter
from agent_adapters.base.conversation import Agent, Conversation
from agent_adapters.base.errors import ErrorCode, ProviderError
from agent_adapters.base.models import Assistant, Text, User

from .helpers import FakeTransport, sse, text_delta


def _adapter(transport=None, **kwargs) -> AnthropicAdapter:
    return AnthropicAdapter(api_key="sk-test-key", transport=transport or FakeTransport(), **kwargs)


def _conversation(adapter: AnthropicAdapter, listener=None, description="You are terse.") -> Conversation:
    conversation = Conversation(Agent(adapter, description=description), listener=listener)
    conversation.message(User("tester"), Text("Say hello"))
    return conversation


def test_defaults_and_model_listing():
    adapter = _adapter()
    assert adapter.get_model() == AnthropicAdapter.MODEL_CLAUDE_3_SONNET
    assert adapter.max_tokens == 1024
    assert adapter.temperature == 1.0
    assert set(adapter.get_models()) == {
        "claude-3-opus-20240229",
        "claude-3-7-sonnet-20250219",
        "claude-3-haiku-20240229",
        "claude-2.1",
    }


def test_set_model_rejects_unlisted_and_keeps_previous():
    adapter = _adapter(model=AnthropicAdapter.MODEL_CLAUDE_3_HAIKU)
    with pytest.raises(ProviderError) as excinfo:
        adapter.set_model("gpt-4o")
    assert excinfo.value.code is ErrorCode.UNSUPPORTED
    assert "Unsupported model: gpt-4o" in str(excinfo.value)
    assert adapter.get_model() == AnthropicAdapter.MODEL_CLAUDE_3_HAIKU


def test_constructor_rejects_unlisted_model():
    with pytest.raises(ProviderError):
        _adapter(model="claude-unknown")


def test_setters_chain_without_validation():
    adapter = _adapter().set_model("claude-2.1").set_max_tokens(5).set_temperature(3.5)
    assert (adapter.model, adapter.max_tokens, adapter.temperature) == ("claude-2.1", 5, 3.5)


def test_setters_store_values_as_given():
    adapter = _adapter().set_max_tokens(5.9).set_temperature(1)
    assert adapter.max_tokens == 5.9
    assert adapter.temperature == 1
    assert type(adapter.temperature) is int


def test_config_strings_are_converted(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_MAX_TOKENS", "512")
    monkeypatch.setenv("ANTHROPIC_TEMPERATURE", "0.5")
    adapter = _adapter()
    assert (adapter.max_tokens, adapter.temperature) == (512, 0.5)


def test_invalid_max_tokens_fails_at_send_before_io():
    transport = FakeTransport(chunks=[text_delta("x")])
    adapter = _adapter(transport).set_max_tokens(5.9)
    with pytest.raises(ProviderError) as excinfo:
        adapter.send(_conversation(adapter))
    assert excinfo.value.code is ErrorCode.VALIDATION
    assert transport.calls == []


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "env-key")
    monkeypatch.setenv("ANTHROPIC_MODEL", "claude-3-opus-20240229")
    monkeypatch.setenv("ANTHROPIC_MAX_TOKENS", "2048")
    transport = FakeTransport(chunks=[text_delta("ok")])
    adapter = AnthropicAdapter(transport=transport)
    assert adapter.model == "claude-3-opus-20240229"
    assert adapter.max_tokens == 2048
    adapter.send(_conversation(adapter))
    assert transport.calls[0]["headers"]["x-api-key"] == "env-key"


def test_send_builds_request_and_collects_messages(recorder):
    chunks = [
        sse({"type": "message_start", "message": {"usage": {"input_tokens": 12, "output_tokens": 1}}})
        + sse({"type": "content_block_start", "index": 0, "content_block": {"type": "text", "text": ""}}),
        text_delta("Hel") + text_delta("lo"),
        text_delta("!")
        + sse({"type": "content_block_stop", "index": 0})
        + sse({"type": "message_delta", "message": {"usage": {"output_tokens": 4}}})
        + sse({"type": "message_stop"}),
    ]
    transport = FakeTransport(chunks=chunks)
    adapter = _adapter(transport, max_tokens=256, temperature=0.2)
    conversation = _conversation(adapter, listener=recorder)

    out = adapter.send(conversation)

    assert out == [Text("Hel"), Text("lo"), Text("!")]
    assert recorder.seen == out
    assert conversation.input_tokens == 12
    assert conversation.output_tokens == 5
    assert conversation.get_entries()[1:] == [(Assistant("anthropic"), m) for m in out]

    call = transport.calls[0]
    assert call["url"] == "https://api.anthropic.com/v1/messages"
    assert call["method"] == "POST"
    assert call["headers"] == {
        "x-api-key": "sk-test-key",
        "anthropic-version": "2023-06-01",
        "content-type": "application/json",
    }
    assert call["body"] == {
        "model": "claude-3-7-sonnet-20250219",
        "system": "You are terse.",
        "messages": [{"role": "user", "content": "Say hello"}],
        "max_tokens": 256,
        "temperature": 0.2,
        "stream": True,
    }


@pytest.mark.parametrize("bad", ["abc", -1, [1]])
def test_invalid_usage_does_not_abort_send(recorder, bad):
    chunks = [
        sse({"type": "message_start", "message": {"usage": {"input_tokens": bad, "output_tokens": 1}}})
        + text_delta("hi")
    ]
    adapter = _adapter(FakeTransport(chunks=chunks))
    conversation = _conversation(adapter, listener=recorder)

    assert adapter.send(conversation) == [Text("hi")]
    assert recorder.seen == [Text("hi")]
    assert (conversation.input_tokens, conversation.output_tokens) == (0, 1)


def test_send_omits_empty_system():
    transport = FakeTransport()
    adapter = _adapter(transport)
    adapter.send(_conversation(adapter, description=""))
    assert "system" not in transport.calls[0]["body"]


def test_conversation_send_delegates_to_adapter():
    adapter = _adapter(FakeTransport(chunks=[text_delta("hi")]))
    assert _conversation(adapter).send() == [Text("hi")]


def test_missing_api_key_fails_before_io():
    transport = FakeTransport()
    adapter = AnthropicAdapter(transport=transport)
    with pytest.raises(ProviderError) as excinfo:
        adapter.send(_conversation(adapter))
    assert excinfo.value.code is ErrorCode.AUTH
    assert transport.calls == []


def test_error_event_propagates_out_of_send(recorder):
    chunks = [
        text_delta("partial"),
        sse({"type": "error", "error": {"type": "rate_limit_error", "message": "slow down"}}),
        text_delta("never"),
    ]
    adapter = _adapter(FakeTransport(chunks=chunks))
    conversation = _conversation(adapter, listener=recorder)
    with pytest.raises(ProviderError) as excinfo:
        adapter.send(conversation)
    assert "slow down" in str(excinfo.value)
    assert excinfo.value.code is ErrorCode.RATE_LIMIT
    # partial effects are not rolled back
    assert recorder.seen == [Text("partial")]
    assert conversation.get_entries()[-1] == (Assistant("anthropic"), Text("partial"))


def test_http_status_failure_carries_status_and_body():
    body = '{"type":"error","error":{"type":"api_error","message":"Internal server error"}}'
    transport = FakeTransport(chunks=[text_delta("collected")], status_code=500, body=body)
    adapter = _adapter(transport)
    with pytest.raises(ProviderError) as excinfo:
        adapter.send(_conversation(adapter))
    err = excinfo.value
    assert err.status_code == 500
    assert err.body == body
    assert "500" in str(err)
    assert body in str(err)
    assert err.code is ErrorCode.SERVER_ERROR


@pytest.mark.parametrize(
    "status, code",
    [(401, ErrorCode.AUTH), (429, ErrorCode.RATE_LIMIT), (418, ErrorCode.VALIDATION), (529, ErrorCode.UNAVAILABLE)],
)
def test_http_status_classification(status, code):
    adapter = _adapter(FakeTransport(status_code=status, body="nope"))
    with pytest.raises(ProviderError) as excinfo:
        adapter.send(_conversation(adapter))
    assert excinfo.value.code is code


class _ExplodingTransport:
    def fetch(self, url, method, body, headers, on_chunk=None):
        raise httpx.ConnectTimeout("connect timed out")


def test_transport_failure_is_wrapped():
    adapter = _adapter(_ExplodingTransport())
    with pytest.raises(ProviderError) as excinfo:
        adapter.send(_conversation(adapter))
    assert excinfo.value.code is ErrorCode.TIMEOUT
    assert excinfo.value.retryable is True
    assert isinstance(excinfo.value.raw, httpx.ConnectTimeout)


def test_send_logs_stream_events(capsys):
    adapter = _adapter(FakeTransport(chunks=[text_delta("x")]))
    adapter.send(_conversation(adapter))
    err = capsys.readouterr().err
    assert '"event": "stream.start"' in err
    assert '"event": "stream.end"' in err

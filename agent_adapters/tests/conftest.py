"""Pytest configuration for the adapters test suite.

Every test runs with provider configuration isolated from the developer's
shell: Anthropic env vars are cleared, ``.env`` loading points at a missing
file, and the config caches are reset.
"""

from __future__ import annotations

from typing import Callable, Iterator, List

import pytest

from agent_adapters.base.http import close_all_clients
from agent_adapters.base.models import Message
from agent_adapters.config import reset_config_cache

from .helpers import StubConversation


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    for var in (
        "ANTHROPIC_API_KEY",
        "CLAUDE_API_KEY",
        "ANTHROPIC_MODEL",
        "ANTHROPIC_BASE_URL",
        "ANTHROPIC_MAX_TOKENS",
        "ANTHROPIC_TEMPERATURE",
        "ANTHROPIC_API_VERSION",
        "ADAPTERS_CONFIG_FILE",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()
    close_all_clients()


@pytest.fixture()
def stub_conversation() -> StubConversation:
    return StubConversation()


@pytest.fixture()
def recorder() -> Callable[[Message], None]:
    """Listener that appends every message it receives to ``recorder.seen``."""
    seen: List[Message] = []

    def _listener(message: Message) -> None:
        seen.append(message)

    _listener.seen = seen  # type: ignore[attr-defined]
    return _listener

from __future__ import annotations

import json

from agent_adapters.config import get_model, get_provider_config, reset_config_cache
from agent_adapters.config.env import (
    ENV_ALIASES,
    ENV_MAP,
    get_env_var_name,
    is_placeholder,
    resolve_provider_key,
)


def test_env_map_and_aliases():
    assert get_env_var_name("Anthropic") == "ANTHROPIC_API_KEY"
    assert ENV_ALIASES["anthropic"][0] == ENV_MAP["anthropic"]
    assert get_env_var_name("unknown") is None


def test_is_placeholder_heuristics():
    assert is_placeholder("placeholder-value")
    assert is_placeholder("ChangeMe123")
    assert is_placeholder("example-key")
    assert is_placeholder("test_token")
    assert not is_placeholder("real-value")
    assert not is_placeholder(None)


def test_resolve_provider_key_prefers_canonical(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "canon")
    monkeypatch.setenv("CLAUDE_API_KEY", "alias")
    assert resolve_provider_key("anthropic") == ("canon", "ANTHROPIC_API_KEY")
    monkeypatch.delenv("ANTHROPIC_API_KEY")
    assert resolve_provider_key("anthropic") == ("alias", "CLAUDE_API_KEY")
    assert resolve_provider_key("nobody") == (None, None)


def test_defaults():
    cfg = get_provider_config("anthropic")
    assert cfg["model"] == "claude-3-7-sonnet-20250219"
    assert cfg["base_url"] == "https://api.anthropic.com/v1/messages"
    assert cfg["api_version"] == "2023-06-01"
    assert cfg["max_tokens"] == 1024
    assert "api_key" not in cfg


def test_precedence_file_env_overrides(monkeypatch, tmp_path):
    path = tmp_path / "adapters.json"
    path.write_text(json.dumps({"anthropic": {"model": "claude-2.1", "max_tokens": 64, "temperature": 0.1}}))
    monkeypatch.setenv("ADAPTERS_CONFIG_FILE", str(path))
    monkeypatch.setenv("ANTHROPIC_MAX_TOKENS", "128")
    reset_config_cache()
    cfg = get_provider_config("anthropic", overrides={"temperature": 0.7, "model": None})
    assert cfg["model"] == "claude-2.1"
    assert cfg["max_tokens"] == "128"
    assert cfg["temperature"] == 0.7
    assert get_model("anthropic") == "claude-2.1"


def test_yaml_config_file(monkeypatch, tmp_path):
    path = tmp_path / "adapters.yaml"
    path.write_text("anthropic:\n  model: claude-3-haiku-20240229\n")
    monkeypatch.setenv("ADAPTERS_CONFIG_FILE", str(path))
    reset_config_cache()
    assert get_model("anthropic") == "claude-3-haiku-20240229"


def test_dotenv_loaded_once(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("# comment\nANTHROPIC_API_KEY='from-dotenv'\nBROKEN LINE\n")
    monkeypatch.setenv("DOTENV_FILE", str(env_file))
    monkeypatch.setenv("ANTHROPIC_API_KEY", "placeholder")
    reset_config_cache()
    assert get_provider_config("anthropic")["api_key"] == "from-dotenv"

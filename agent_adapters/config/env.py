"""agent_adapters.config.env
=========================

Mapping of provider identifiers to their API key environment variables, plus
small lookup helpers. Helpers never raise on unknown providers or unset
variables; callers decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

ENV_MAP: Dict[str, str] = {
    "anthropic": "ANTHROPIC_API_KEY",
}

# Provider -> ordered env var names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "anthropic": ("ANTHROPIC_API_KEY", "CLAUDE_API_KEY"),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if ``val`` looks like a placeholder or test value.

    Heuristics: contains 'placeholder', 'changeme' or 'example', or starts
    with 'test_'. Case-insensitive.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("test_")


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the canonical API key variable name for ``provider``."""
    return ENV_MAP.get((provider or "").lower().strip())


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, variable_name)`` for the first set key variable.

    Canonical names take precedence over aliases. Returns ``(None, None)``
    when nothing is set.
    """
    name = (provider or "").lower().strip()
    candidates = ENV_ALIASES.get(name) or ((ENV_MAP[name],) if name in ENV_MAP else ())
    for var in candidates:
        if val := os.getenv(var):
            return val, var
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_name",
    "resolve_provider_key",
]

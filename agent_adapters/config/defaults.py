"""agent_adapters.config.defaults
==============================

Central place for small, stable default values used by the adapters. They can
be overridden via environment variables or an external config file but
provide sensible fallbacks for local development and tests.

Only plain constants live here; this module imports nothing from the rest of
the package.
"""

from __future__ import annotations

# ---- Anthropic ----
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_API_VERSION = "2023-06-01"
ANTHROPIC_DEFAULT_MODEL = "claude-3-7-sonnet-20250219"
ANTHROPIC_DEFAULT_MAX_TOKENS = 1024
ANTHROPIC_DEFAULT_TEMPERATURE = 1.0

__all__ = [
    "ANTHROPIC_DEFAULT_BASE_URL",
    "ANTHROPIC_API_VERSION",
    "ANTHROPIC_DEFAULT_MODEL",
    "ANTHROPIC_DEFAULT_MAX_TOKENS",
    "ANTHROPIC_DEFAULT_TEMPERATURE",
]

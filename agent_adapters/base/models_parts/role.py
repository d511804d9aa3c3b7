"""
Message author roles.

Roles carry a wire ``name`` (what the provider sees in the ``role`` field) and
an ``identifier`` tagging who produced the message, e.g. ``Assistant("anthropic")``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Role:
    """Base author role."""

    name: ClassVar[str] = "user"

    identifier: str = ""


@dataclass(frozen=True)
class User(Role):
    name: ClassVar[str] = "user"


@dataclass(frozen=True)
class Assistant(Role):
    name: ClassVar[str] = "assistant"


__all__ = ["Role", "User", "Assistant"]

"""Anthropic request helpers.

Purpose:
- Side-effect-free builders for request headers and the streaming request
  body, plus the mapping of provider error types onto ``ErrorCode`` so the
  client and stream parser agree on classification.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..base.dto import MessagesRequestDTO, WireMessageDTO
from ..base.errors import ErrorCode
from ..base.interfaces import ConversationSink
from ..config.defaults import ANTHROPIC_API_VERSION

API_KEY_HEADER = "x-api-key"  # pragma: allowlist secret - header name, not a secret
API_VERSION_HEADER = "anthropic-version"

_ERROR_TYPE_MAP: Dict[str, ErrorCode] = {
    "invalid_request_error": ErrorCode.VALIDATION,
    "request_too_large": ErrorCode.VALIDATION,
    "authentication_error": ErrorCode.AUTH,
    "permission_error": ErrorCode.AUTH,
    "not_found_error": ErrorCode.NOT_FOUND,
    "rate_limit_error": ErrorCode.RATE_LIMIT,
    "api_error": ErrorCode.SERVER_ERROR,
    "overloaded_error": ErrorCode.UNAVAILABLE,
}


def error_code_for_type(error_type: Optional[str]) -> ErrorCode:
    """Map an Anthropic ``error.type`` string onto an :class:`ErrorCode`."""
    return _ERROR_TYPE_MAP.get(error_type or "", ErrorCode.UNKNOWN)


def build_headers(api_key: str, api_version: str = ANTHROPIC_API_VERSION) -> Dict[str, str]:
    return {
        API_KEY_HEADER: api_key,
        API_VERSION_HEADER: api_version,
        "content-type": "application/json",
    }


def build_payload(
    conversation: ConversationSink,
    *,
    model: str,
    system: Optional[str],
    max_tokens: int,
    temperature: float,
) -> Dict[str, Any]:
    """Build the streaming Messages API body for ``conversation``.

    History entries are flattened to ``{role, content}``; any other keys the
    conversation carries are not sent. An empty ``system`` is omitted.

    Raises:
        pydantic.ValidationError: If a history entry lacks a role.
    """
    messages = [
        WireMessageDTO(role=entry["role"], content=entry["content"])
        for entry in conversation.get_messages()
    ]
    dto = MessagesRequestDTO(
        model=model,
        system=system or None,
        messages=messages,
        max_tokens=max_tokens,
        temperature=temperature,
        stream=True,
    )
    return dto.to_payload()


__all__ = [
    "API_KEY_HEADER",
    "API_VERSION_HEADER",
    "build_headers",
    "build_payload",
    "error_code_for_type",
]

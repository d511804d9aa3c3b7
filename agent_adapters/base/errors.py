"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``agent_adapters.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.classification import (
    RETRYABLE_CODES,
    classify_exception,
    error_code_for_status,
)

__all__ = [
    "ErrorCode",
    "ProviderError",
    "RETRYABLE_CODES",
    "classify_exception",
    "error_code_for_status",
]

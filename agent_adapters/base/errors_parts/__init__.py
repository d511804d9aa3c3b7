"""Errors parts package public surface.

Prefer importing from `agent_adapters.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .classification import classify_exception, error_code_for_status

__all__ = ["ErrorCode", "ProviderError", "classify_exception", "error_code_for_status"]

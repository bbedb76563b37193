"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `deepspeak.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .classification import classify_exception, classify_status, is_retryable

__all__ = ["ErrorCode", "ProviderError", "classify_exception", "classify_status", "is_retryable"]

"""Unified error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``deepspeak.base.errors_parts`` so callers have one stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.classification import classify_exception, classify_status, is_retryable

__all__ = ["ErrorCode", "ProviderError", "classify_exception", "classify_status", "is_retryable"]

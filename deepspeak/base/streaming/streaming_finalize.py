"""Finalize stream helper.

Emits the single consolidated ``stream.finalize`` log line for a stream.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..logging import LogContext, normalized_log_event
from .streaming_metrics import StreamMetrics


def finalize_stream(
    *,
    logger: logging.Logger,
    ctx: LogContext,
    metrics: StreamMetrics,
    error_code: Optional[str] = None,
    error: Optional[str] = None,
) -> StreamMetrics:
    """Close out ``metrics`` and log them; returns the same metrics object."""
    metrics.finish()
    normalized_log_event(
        logger,
        "stream.finalize",
        ctx,
        phase="finalize",
        attempt=None,
        emitted=metrics.emitted > 0,
        tokens=None,
        error_code=error_code,
        emitted_count=metrics.emitted,
        time_to_first_token_ms=metrics.time_to_first_token_ms,
        total_duration_ms=metrics.total_duration_ms,
        error=error,
    )
    return metrics


__all__ = ["finalize_stream"]

"""Streaming support shared by stream decoders.

Exposes the metrics container and the finalize helper under one namespace.
"""

from .streaming_metrics import StreamMetrics
from .streaming_finalize import finalize_stream

__all__ = [
    "StreamMetrics",
    "finalize_stream",
]

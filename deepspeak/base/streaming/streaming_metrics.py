"""Streaming metrics data structures.

Collected by ``ChoiceStream`` while a streamed completion is consumed and
logged once when the stream ends.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class StreamMetrics:
    """Collected streaming metrics for a single streamed completion.

    Attributes:
        emitted: Number of choices handed to the consumer.
        time_to_first_token_ms: Milliseconds from stream open to the first
            decoded choice (``None`` when nothing was decoded).
        total_duration_ms: Milliseconds from stream open to finalization.
    """

    emitted: int = 0
    time_to_first_token_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None
    started_at: float = field(default_factory=time.monotonic, repr=False)

    def _elapsed_ms(self) -> float:
        return (time.monotonic() - self.started_at) * 1000.0

    def record_emit(self) -> None:
        """Count one decoded choice, stamping time-to-first on the first."""
        if self.time_to_first_token_ms is None:
            self.time_to_first_token_ms = self._elapsed_ms()
        self.emitted += 1

    def finish(self) -> None:
        """Stamp the total duration (first call wins)."""
        if self.total_duration_ms is None:
            self.total_duration_ms = self._elapsed_ms()


__all__ = ["StreamMetrics"]

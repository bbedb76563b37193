"""
Provider-agnostic interfaces (Protocols).

Re-exports the Protocols split into single-class modules under
``deepspeak.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import ChatClient

__all__ = ["ChatClient"]

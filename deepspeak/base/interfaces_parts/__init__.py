"""Interfaces (Protocols) split into single-class modules.

``deepspeak.base.interfaces`` re-exports these as the stable import path.
"""

from .chat_client import ChatClient

__all__ = ["ChatClient"]
